"""Named leaf checks (IsDefs) and the helpers that build them.

An IsDef wraps a checker ``(path, value, exists) -> Outcome``. The engine
never looks inside a checker: it resolves the path, passes the value along
with whether it was found, and records whatever Outcome comes back.

Example:
    >>> positive = is_def("positive", lambda p, v, ok: Outcome(p, ok and v > 0, "must be > 0"))
    >>> schema = {"id": positive, "nickname": optional(positive)}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable

from lookslike.lib.paths import Path, is_sequence
from lookslike.lib.results import Outcome

__all__ = [
    "Checker",
    "IsDef",
    "deep_equal",
    "is_def",
    "is_equal",
    "key_missing",
    "optional",
]

Checker = Callable[[Path, Any, bool], Outcome]


@dataclass(frozen=True)
class IsDef:
    """A named check applied to the value at one path.

    Attributes:
        name: Label used in diagnostics
        checker: Function from (path, value, exists) to Outcome
        optional: When True an absent value passes without calling checker
    """

    name: str
    checker: Checker
    optional: bool = False

    def check(self, path: Path, value: Any, exists: bool) -> Outcome:
        if self.optional and not exists:
            return Outcome.passed(path)
        return self.checker(path, value, exists)

    def __repr__(self) -> str:
        return f"IsDef({self.name!r}, optional={self.optional})"


def is_def(name: str, checker: Checker) -> IsDef:
    """Create a named IsDef around ``checker``."""
    return IsDef(name=name, checker=checker)


def optional(isdef: IsDef) -> IsDef:
    """Return a copy of ``isdef`` that accepts an absent value.

    The original IsDef is left untouched.
    """
    return replace(isdef, name=f"Optional {isdef.name}", optional=True)


def deep_equal(actual: Any, expected: Any) -> bool:
    """Structural equality over maps, sequences and scalars.

    Maps only equal maps and sequences only equal sequences (lists and tuples
    are interchangeable). Booleans never equal numbers.
    """
    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping) or len(actual) != len(expected):
            return False
        return all(
            key in actual and deep_equal(actual[key], value)
            for key, value in expected.items()
        )
    if is_sequence(expected):
        if not is_sequence(actual) or len(actual) != len(expected):
            return False
        return all(deep_equal(a, e) for a, e in zip(actual, expected))
    if isinstance(actual, Mapping) or is_sequence(actual):
        return False
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return bool(actual == expected)


def is_equal(expected: Any) -> IsDef:
    """IsDef that passes when the value deep-equals ``expected``.

    This is the check compiled for every plain leaf in a schema.
    """

    def check(path: Path, value: Any, exists: bool) -> Outcome:
        if not exists:
            return Outcome.key_missing(path)
        if deep_equal(value, expected):
            return Outcome.passed(path)
        return Outcome.failed(
            path,
            f"objects not equal: actual({type(value).__name__})={value!r} "
            f"expected({type(expected).__name__})={expected!r}",
        )

    return is_def(f"equals {expected!r}", check)


def key_missing() -> IsDef:
    """IsDef that passes only when nothing exists at its path."""

    def check(path: Path, value: Any, exists: bool) -> Outcome:
        if exists:
            return Outcome.failed(path, f"expected this key to be absent, found {value!r}")
        return Outcome.passed(path)

    return is_def("key missing", check)
