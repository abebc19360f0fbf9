"""Condition Evaluator — structural matching of a value against a condition.

A condition is an explicit tagged union:
- Guard wraps a predicate callable (match iff it returns True)
- Template maps field names to nested conditions (partial match, AND over keys)
- Unmatchable wraps anything else and never matches

Raw callables and mappings are coerced into the union once, by as_condition(),
so evaluation never has to inspect shapes again.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence, Set
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class Guard:
    """A predicate condition: call it with the value.

    Only a result that `is True` matches. Truthy stand-ins such as 1, "yes"
    or a non-empty list do not. Exceptions raised by the predicate propagate.
    """

    predicate: Callable[[Any], object]


@dataclass(frozen=True, slots=True)
class Template:
    """A structural condition over the fields of a value.

    Only the keys present in the template are checked; extra fields on the
    value are ignored. Empty Template matches everything (vacuous truth).
    """

    fields: Mapping[Hashable, Condition]


@dataclass(frozen=True, slots=True)
class Unmatchable:
    """Malformed condition — neither callable nor mapping. Never matches."""

    raw: object


type Condition = Guard | Template | Unmatchable

# Sentinel for "field not present", distinct from a field holding None.
_MISSING: Any = object()

# Values that never expose fields to a Template.
_FIELDLESS = (str, bytes, bytearray, int, float, complex, bool, Sequence, Set)


def as_condition(raw: Any, *, _seen: frozenset[int] = frozenset()) -> Condition:
    """Coerce a raw condition into the Condition union.

    Callables become Guard (checked first, so a callable mapping is a
    predicate), mappings become Template with recursively coerced fields,
    and everything else becomes Unmatchable.

    Total: never raises. A mapping that contains itself (directly or through
    nested mappings) becomes Unmatchable at the point of the cycle.
    """
    match raw:
        case Guard() | Template() | Unmatchable():
            return raw
        case _ if callable(raw):
            return Guard(raw)
        case Mapping():
            if id(raw) in _seen:
                return Unmatchable(raw)
            path = _seen | {id(raw)}
            fields = {k: as_condition(v, _seen=path) for k, v in raw.items()}
            return Template(MappingProxyType(fields))
    return Unmatchable(raw)


def check_condition(condition: Any, value: Any) -> bool:
    """Check whether value satisfies condition.

    condition may be a Condition variant or a raw callable / mapping.
    Never raises for shape mismatches: a Template applied to None, a
    scalar, or a value missing one of its keys is simply no-match.
    """
    return evaluate(as_condition(condition), value)


def evaluate(condition: Condition, value: Any) -> bool:
    """Evaluate an already-coerced condition against value."""
    match condition:
        case Guard(predicate=p):
            return p(value) is True
        case Template(fields=fields):
            for key, sub in fields.items():
                field_value = _get_field(value, key)
                if field_value is _MISSING:
                    return False
                if not evaluate(sub, field_value):
                    return False
            return True
        case Unmatchable():
            return False
    return False  # pragma: no cover


def _get_field(value: Any, key: Hashable) -> Any:
    """Read field `key` from value, or _MISSING when it has no such field."""
    if isinstance(value, Mapping):
        return value[key] if key in value else _MISSING
    if isinstance(value, tuple) and hasattr(value, "_fields"):
        # namedtuple: fields by name, positions stay hidden
        return getattr(value, key) if key in value._fields else _MISSING
    if value is None or isinstance(value, _FIELDLESS) or not isinstance(key, str):
        return _MISSING
    return getattr(value, key, _MISSING)
