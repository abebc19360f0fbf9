"""Conformance tests for patmatch.

Loads YAML fixtures from tests/fixtures/ and runs them through pattern_match.
Each document holds an ordered case list and the values to dispatch over it.
Conditions are written in a small vocabulary that maps onto the core API:

    always                      -> patmatch.always
    positive                    -> number greater than zero
    {equals: X}                 -> value == X
    {template: {field: cond}}   -> a mapping template
    {all_of: [cond, ...]}       -> patmatch.all_of
    {any_of: [cond, ...]}       -> patmatch.any_of
    {includes: X}               -> patmatch.includes
    {malformed: X}              -> X passed through as-is (never matches)

Run with: pytest tests/test_conformance.py -v
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from patmatch import Action, Case, all_of, always, any_of, includes, otherwise, pattern_match, when

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    cases: tuple[Case[Any, Any], ...]
    value: Any
    expect: Any


def _is_positive(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _build_condition(doc: Any) -> Any:
    """Translate a fixture condition into a raw patmatch condition."""
    if doc == "always":
        return always
    if doc == "positive":
        return _is_positive
    if not isinstance(doc, dict) or len(doc) != 1:
        msg = f"unrecognized fixture condition: {doc!r}"
        raise ValueError(msg)
    ((kind, arg),) = doc.items()
    match kind:
        case "equals":
            return lambda v, expected=arg: v == expected
        case "template":
            return {key: _build_condition(sub) for key, sub in arg.items()}
        case "all_of":
            return all_of(*(_build_condition(c) for c in arg))
        case "any_of":
            return any_of(*(_build_condition(c) for c in arg))
        case "includes":
            return includes(arg)
        case "malformed":
            return arg
    msg = f"unrecognized fixture condition kind: {kind!r}"
    raise ValueError(msg)


def _build_cases(doc: list[dict[str, Any]]) -> tuple[Case[Any, Any], ...]:
    cases: list[Case[Any, Any]] = []
    for entry in doc:
        if "otherwise" in entry:
            cases.append(otherwise(Action(entry["otherwise"])))
        else:
            cases.append(when(_build_condition(entry["when"]), Action(entry["then"])))
    return tuple(cases)


def _load_fixtures() -> list[FixtureCase]:
    """Load every fixture file, in file-name order."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            built = _build_cases(doc["matcher"])
            cases.extend(
                FixtureCase(
                    fixture_name=doc["name"],
                    case_name=case["name"],
                    cases=built,
                    value=case["value"],
                    expect=case["expect"],
                )
                for case in doc["cases"]
            )
    return cases


FIXTURES = _load_fixtures()


@pytest.mark.parametrize(
    "case", FIXTURES, ids=[f"{c.fixture_name}/{c.case_name}" for c in FIXTURES]
)
def test_fixture(case: FixtureCase) -> None:
    assert pattern_match(case.value)(*case.cases) == case.expect


def test_fixtures_present() -> None:
    names = {c.fixture_name for c in FIXTURES}
    assert {"first_match_wins", "shapes", "includes_tag", "orders"} <= names


def test_unknown_condition_kind_rejected() -> None:
    with pytest.raises(ValueError, match="unrecognized fixture condition"):
        _build_condition({"regex": "^a"})
