"""Validators run compiled schemas against actual values.

Every validator is a callable ``validator(actual) -> Results``. Validators
hold no per-run state, so one instance may be called from several threads
as long as each call's Results stays with its caller.

- SchemaValidator evaluates a compiled schema (lax: extra keys are ignored)
- PredicateValidator applies a single IsDef to the root value
- StrictValidator additionally fails every actual path no check covered
- ComposedValidator merges the Results of several validators
"""

from __future__ import annotations

import bisect
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, List, Tuple

from lookslike.lib.paths import SEPARATOR, Path
from lookslike.lib.predicates import IsDef
from lookslike.lib.results import Outcome, Results
from lookslike.lib.walker import WalkInfo, walk

if TYPE_CHECKING:
    from lookslike.lib.compiler import CompiledSchema

logger = logging.getLogger(__name__)

__all__ = [
    "Validator",
    "SchemaValidator",
    "PredicateValidator",
    "StrictValidator",
    "ComposedValidator",
    "CoveredPaths",
    "strict",
    "compose",
]


class Validator(ABC):
    """Callable that checks an actual value and reports Results."""

    @abstractmethod
    def __call__(self, actual: Any) -> Results:
        """Validate ``actual`` and return a fresh Results report."""


class SchemaValidator(Validator):
    """Evaluates a compiled schema against actual values."""

    def __init__(self, compiled: "CompiledSchema"):
        self.compiled = compiled

    def __call__(self, actual: Any) -> Results:
        results = Results()
        for flat in self.compiled:
            value, exists = flat.path.lookup(actual)
            results.record(flat.path, flat.isdef.check(flat.path, value, exists))
        return results

    def __repr__(self) -> str:
        return f"SchemaValidator({len(self.compiled)} checks)"


class PredicateValidator(Validator):
    """Applies one IsDef to the whole actual value."""

    def __init__(self, isdef: IsDef):
        self.isdef = isdef

    def __call__(self, actual: Any) -> Results:
        root = Path()
        results = Results()
        results.record(root, self.isdef.check(root, actual, True))
        return results

    def __repr__(self) -> str:
        return f"PredicateValidator({self.isdef.name!r})"


class CoveredPaths:
    """Paths checked during an evaluation, kept sorted for prefix search.

    A path counts as covered when it was checked itself or when any of its
    descendants was. Descendants of ``p`` render as ``p.<rest>``, and all
    strings with that prefix sort together starting at the insertion point
    of ``p.``, so one binary search answers the question.
    """

    def __init__(self, checked: Iterable[str]):
        self._exact = set(checked)
        self._sorted: List[str] = sorted(self._exact)

    def covers(self, path: Path) -> bool:
        rendered = path.render()
        if rendered in self._exact:
            return True
        if path.is_root():
            return bool(self._sorted)

        prefix = rendered + SEPARATOR
        idx = bisect.bisect_left(self._sorted, prefix)
        return idx < len(self._sorted) and self._sorted[idx].startswith(prefix)

    def __len__(self) -> int:
        return len(self._sorted)


class StrictValidator(Validator):
    """Closed-schema validation: any actual path left unchecked fails.

    Runs the wrapped validator, then walks the actual value and records an
    unexpected-field failure for every leaf path not covered by a check.
    """

    def __init__(self, lax: Validator):
        self.lax = lax

    def __call__(self, actual: Any) -> Results:
        results = self.lax(actual)
        covered = CoveredPaths(results.paths())
        unexpected: List[Path] = []

        def observe(info: WalkInfo) -> None:
            if not covered.covers(info.path):
                unexpected.append(info.path)

        walk(actual, observe)

        for path in unexpected:
            results.record(path, Outcome.unexpected_field(path))

        if unexpected:
            logger.debug(
                "Strict validation found %d unexpected field(s): %s",
                len(unexpected),
                ", ".join(str(p) for p in unexpected),
            )
        return results

    def __repr__(self) -> str:
        return f"StrictValidator({self.lax!r})"


class ComposedValidator(Validator):
    """Runs several validators independently and merges their Results.

    A failure in one validator does not stop the others.
    """

    def __init__(self, validators: Tuple[Validator, ...]):
        self.validators = validators

    def __call__(self, actual: Any) -> Results:
        combined = Results()
        for result in [validator(actual) for validator in self.validators]:
            combined.merge(result)
        return combined

    def __repr__(self) -> str:
        return f"ComposedValidator({len(self.validators)} validators)"


def strict(validator: Validator) -> Validator:
    """Wrap ``validator`` so unexpected fields in the actual value fail."""
    return StrictValidator(validator)


def compose(*validators: Validator) -> Validator:
    """Combine validators into one whose Results merge all of theirs."""
    return ComposedValidator(tuple(validators))
