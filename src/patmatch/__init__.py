"""patmatch — declarative first-match-wins pattern matching.

All public types are exported from this module for flat imports:

    from patmatch import pattern_match, when, otherwise, all_of, any_of, includes

    area = pattern_match({"type": "circle", "radius": 5})(
        when({"type": lambda t: t == "circle"}, lambda c: math.pi * c["radius"] ** 2),
        otherwise(lambda _: 0),
    )
"""

import logging

__version__ = "0.1.0"

# Combinators
from patmatch._combinators import AllOf, AnyOf, Includes, all_of, any_of, includes

# Condition evaluator
from patmatch._condition import (
    Condition,
    Guard,
    Template,
    Unmatchable,
    as_condition,
    check_condition,
)

# Dispatcher and case builders
from patmatch._matcher import (
    Action,
    Case,
    Matcher,
    always,
    otherwise,
    pattern_match,
    when,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Dispatcher
    "pattern_match",
    "when",
    "otherwise",
    "always",
    "Case",
    "Action",
    "Matcher",
    # Conditions
    "Condition",
    "Guard",
    "Template",
    "Unmatchable",
    "as_condition",
    "check_condition",
    # Combinators
    "all_of",
    "any_of",
    "includes",
    "AllOf",
    "AnyOf",
    "Includes",
]
