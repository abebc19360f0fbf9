"""Test utilities for patmatch.

Provides a recording callback for use in tests and examples. Not needed at
runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class CallRecorder:
    """Callback that records every value it receives and returns `result`.

    >>> from patmatch import otherwise, pattern_match
    >>> from patmatch.testing import CallRecorder
    >>> cb = CallRecorder("hit")
    >>> pattern_match(7)(otherwise(cb))
    'hit'
    >>> cb.calls
    [7]
    """

    result: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any, /) -> Any:
        self.calls.append(value)
        return self.result

    @property
    def called(self) -> bool:
        return bool(self.calls)
