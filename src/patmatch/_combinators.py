"""Combinators — predicates quantifying over sequence-shaped values.

Each combinator is a frozen dataclass implementing __call__, so it is an
ordinary predicate: usable as a case condition, as a Template leaf, or as an
argument to another combinator.

A value is sequence-shaped when it is a collections.abc.Sequence other than
str, bytes or bytearray. Anything else makes every combinator return False.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from patmatch._condition import Condition, as_condition, evaluate

_TEXT = (str, bytes, bytearray)


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT)


@dataclass(frozen=True, slots=True)
class AllOf:
    """Every element satisfies every condition.

    Empty sequence -> True. No conditions -> True for any sequence.
    """

    conditions: tuple[Condition, ...]

    def __call__(self, value: Any, /) -> bool:
        if not _is_array(value):
            return False
        return all(evaluate(c, item) for c in self.conditions for item in value)


@dataclass(frozen=True, slots=True)
class AnyOf:
    """Some element satisfies some condition.

    Empty sequence or no conditions -> False.
    """

    conditions: tuple[Condition, ...]

    def __call__(self, value: Any, /) -> bool:
        if not _is_array(value):
            return False
        return any(evaluate(c, item) for c in self.conditions for item in value)


@dataclass(frozen=True, slots=True)
class Includes:
    """The sequence contains an element equal to target.

    Equality is Python's ``in``: identity first, then ``==``. Structural
    values compare by value, and 1, 1.0 and True are all equal.
    """

    target: Any

    def __call__(self, value: Any, /) -> bool:
        return _is_array(value) and self.target in value


def all_of(*conditions: Any) -> AllOf:
    """Predicate: value is a sequence whose elements all match every condition."""
    return AllOf(tuple(as_condition(c) for c in conditions))


def any_of(*conditions: Any) -> AnyOf:
    """Predicate: value is a sequence with an element matching some condition."""
    return AnyOf(tuple(as_condition(c) for c in conditions))


def includes(target: Any) -> Includes:
    """Predicate: value is a sequence containing target."""
    return Includes(target)
