"""Outcomes of individual checks and the Results report that aggregates them.

A Results report maps each rendered path to the Outcome recorded there.
Recording the same path twice keeps the last Outcome. Iteration follows the
order in which paths were first recorded, which for a single evaluation is
the compiled schema order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from lookslike.lib.paths import Path

__all__ = [
    "Outcome",
    "Results",
    "VALID_MESSAGE",
    "KEY_MISSING_MESSAGE",
    "STRICT_FAILURE_MESSAGE",
]

VALID_MESSAGE = "is valid"
KEY_MISSING_MESSAGE = "expected this key to be present"
STRICT_FAILURE_MESSAGE = "unexpected field encountered during strict validation"


@dataclass(frozen=True)
class Outcome:
    """Pass/fail verdict for one checked path."""

    path: Path
    valid: bool
    message: str

    @classmethod
    def passed(cls, path: Path, message: str = VALID_MESSAGE) -> "Outcome":
        return cls(path, True, message)

    @classmethod
    def failed(cls, path: Path, message: str) -> "Outcome":
        return cls(path, False, message)

    @classmethod
    def key_missing(cls, path: Path) -> "Outcome":
        return cls(path, False, KEY_MISSING_MESSAGE)

    @classmethod
    def unexpected_field(cls, path: Path) -> "Outcome":
        """Failure recorded by strict validation for an unchecked path."""
        return cls(path, False, STRICT_FAILURE_MESSAGE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": str(self.path),
            "valid": self.valid,
            "message": self.message,
        }

    def __str__(self) -> str:
        status = "PASS" if self.valid else "FAIL"
        return f"[{status}] {self.path or '<root>'}: {self.message}"


class Results:
    """Report of every Outcome recorded during one evaluation.

    Not safe for concurrent writes. Evaluations running in parallel should
    each build their own Results and merge them afterwards.
    """

    def __init__(self) -> None:
        self._fields: Dict[str, Outcome] = {}

    def record(self, path: Path, outcome: Outcome) -> None:
        """Record ``outcome`` at ``path``, replacing any earlier Outcome there."""
        if outcome.path != path:
            outcome = replace(outcome, path=path)
        self._fields[path.render()] = outcome

    def merge(self, other: "Results") -> None:
        """Re-record every entry of ``other`` into this report."""
        for path, outcome in list(other.each_result()):
            self.record(path, outcome)

    def each_result(self) -> Iterator[Tuple[Path, Outcome]]:
        """Yield ``(path, outcome)`` pairs.

        Each call starts a fresh pass over the report.
        """
        for outcome in list(self._fields.values()):
            yield outcome.path, outcome

    def succeeded(self) -> bool:
        """True when no recorded Outcome failed."""
        return all(outcome.valid for outcome in self._fields.values())

    @property
    def valid(self) -> bool:
        return self.succeeded()

    def get(self, path: Union[Path, str]) -> Optional[Outcome]:
        """Outcome recorded at ``path``, if any."""
        return self._fields.get(str(path))

    def paths(self) -> List[str]:
        """Rendered paths of every recorded Outcome."""
        return list(self._fields.keys())

    def failures(self) -> List[Outcome]:
        return [outcome for outcome in self._fields.values() if not outcome.valid]

    def detailed_errors(self) -> "Results":
        """New Results holding only the failed Outcomes."""
        errors = Results()
        for outcome in self.failures():
            errors.record(outcome.path, outcome)
        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "valid": self.succeeded(),
            "checked": len(self._fields),
            "failed": len(self.failures()),
            "fields": {key: outcome.to_dict() for key, outcome in self._fields.items()},
        }

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (Path, str)) and str(path) in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        status = "valid" if self.succeeded() else f"{len(self.failures())} failed"
        return f"Results({len(self)} checked, {status})"
