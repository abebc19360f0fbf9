"""Match Dispatcher — first-match-wins evaluation of an ordered case list.

- Cases are evaluated in the order supplied; the order is significant
- The first matching case's callback runs and its result is returned
- Later cases are never consulted
- No match -> None (not an error)
- Callback exceptions propagate unchanged
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from patmatch._condition import Condition, as_condition, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Case[T, R]:
    """Pairs a condition with the callback to run when it matches.

    T is the (narrowed) value type the callback receives; it has no
    runtime effect.
    """

    condition: Condition
    callback: Callable[[T], R]

    def __post_init__(self) -> None:
        object.__setattr__(self, "condition", as_condition(self.condition))

    def matches(self, value: Any) -> bool:
        return evaluate(self.condition, value)


@dataclass(frozen=True, slots=True)
class Action[R]:
    """Callback that ignores the value and returns a fixed result."""

    value: R

    def __call__(self, _value: Any, /) -> R:
        return self.value


def always(_value: Any, /) -> bool:
    """Predicate that matches any value."""
    return True


def when[T, R](condition: Any, callback: Callable[[T], R]) -> Case[T, R]:
    """Build a case from a condition (predicate, template, or Condition)."""
    return Case(condition, callback)


def otherwise[T, R](callback: Callable[[T], R]) -> Case[T, R]:
    """Catch-all case. Matches any value; usually placed last."""
    return when(always, callback)


@dataclass(frozen=True, slots=True)
class Matcher[T, R]:
    """A reusable, ordered case list with first-match-wins semantics.

    Conditions are coerced once when the cases are built, so evaluate()
    only walks the conditions it needs to decide the first match.
    """

    cases: tuple[Case[T, R], ...]

    def find(self, value: Any) -> Case[T, R] | None:
        """Return the first case matching value without running its callback."""
        for index, case in enumerate(self.cases):
            if case.matches(value):
                logger.debug("case %d of %d matched", index, len(self.cases))
                return case
        logger.debug("no case matched (%d cases)", len(self.cases))
        return None

    def evaluate(self, value: Any) -> R | None:
        """Run the first matching case's callback on value.

        Returns the callback's result, or None if nothing matches.
        """
        case = self.find(value)
        if case is None:
            return None
        return case.callback(value)


def pattern_match[R](value: Any) -> Callable[..., R | None]:
    """Bind value, then dispatch it over the cases passed to the result.

    >>> from patmatch import otherwise, pattern_match, when
    >>> pattern_match(3)(when(lambda n: n > 5, lambda n: "big"), otherwise(lambda n: "small"))
    'small'
    """

    def dispatch(*cases: Case[Any, R]) -> R | None:
        return Matcher(cases).evaluate(value)

    return dispatch
