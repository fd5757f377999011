"""Compile schema definitions into validators.

A schema is a nested tree of dicts, lists/tuples, scalars and IsDefs. The
compiler walks it once and flattens every leaf into a ``(path, IsDef)`` pair.
Plain leaves become ``is_equal`` checks. Non-empty containers produce no check
of their own.

Usage:
```python
from lookslike import compile_schema, must_compile, is_def, strict

result = compile_schema({"id": 1, "tags": ["a", "b"]})
if not result.ok:
    raise result.error

validator = strict(must_compile({"name": "demo"}))
report = validator({"name": "demo", "extra": True})
```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from lookslike.lib.errors import LookslikeError, SchemaCompileError
from lookslike.lib.paths import Path
from lookslike.lib.predicates import IsDef, is_equal
from lookslike.lib.validators import PredicateValidator, SchemaValidator, Validator, strict
from lookslike.lib.walker import NodeKind, WalkInfo, classify, walk

logger = logging.getLogger(__name__)

__all__ = [
    "FlatValidator",
    "CompiledSchema",
    "CompileResult",
    "compile_schema",
    "flatten_schema",
    "must_compile",
]


@dataclass(frozen=True)
class FlatValidator:
    """One compiled check: the IsDef to run at a path."""

    path: Path
    isdef: IsDef


@dataclass(frozen=True)
class CompiledSchema:
    """Ordered, immutable list of FlatValidators in walk order."""

    validators: Tuple[FlatValidator, ...] = ()

    def __iter__(self) -> Iterator[FlatValidator]:
        return iter(self.validators)

    def __len__(self) -> int:
        return len(self.validators)

    def paths(self) -> List[str]:
        return [str(flat.path) for flat in self.validators]


@dataclass(frozen=True)
class CompileResult:
    """Outcome of ``compile_schema``: a validator or the reason there is none."""

    validator: Optional[Validator] = None
    error: Optional[SchemaCompileError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Validator:
        """Return the validator, raising the compile error if there is one."""
        if self.error is not None:
            raise self.error
        if self.validator is None:
            raise LookslikeError("CompileResult holds neither a validator nor an error")
        return self.validator


def flatten_schema(schema: Any) -> CompiledSchema:
    """Walk ``schema`` and collect one FlatValidator per leaf."""
    flat: List[FlatValidator] = []

    def observe(info: WalkInfo) -> None:
        if info.kind is NodeKind.PREDICATE:
            isdef = info.node
        else:
            isdef = is_equal(info.node)
        flat.append(FlatValidator(info.path, isdef))

    walk(schema, observe)
    return CompiledSchema(tuple(flat))


def compile_schema(schema: Any) -> CompileResult:
    """Compile a schema definition without raising.

    Args:
        schema: A dict, a list/tuple or an IsDef

    Returns:
        CompileResult holding either the validator or a SchemaCompileError.
        Sequence schemas always compile to a strict validator: matching only
        a prefix of the actual sequence would let trailing elements through.
    """
    kind = classify(schema)

    if kind in (NodeKind.MAP, NodeKind.EMPTY_MAP):
        compiled = flatten_schema(schema)
        logger.debug("Compiled map schema into %d checks", len(compiled))
        return CompileResult(validator=SchemaValidator(compiled))

    if kind in (NodeKind.SEQUENCE, NodeKind.EMPTY_SEQUENCE):
        compiled = flatten_schema(schema)
        logger.debug("Compiled sequence schema into %d strict checks", len(compiled))
        return CompileResult(validator=strict(SchemaValidator(compiled)))

    if kind is NodeKind.PREDICATE:
        return CompileResult(validator=PredicateValidator(schema))

    type_name = type(schema).__name__
    return CompileResult(
        error=SchemaCompileError(
            f"Cannot compile definition from {schema!r} ({type_name}). "
            "Expected one of 'dict', 'list' or 'IsDef'",
            received_type=type_name,
        )
    )


def must_compile(schema: Any) -> Validator:
    """Compile a schema already known to be valid.

    Raises:
        SchemaCompileError: If the schema cannot be compiled
    """
    result = compile_schema(schema)
    if result.error is not None:
        logger.error("Schema compilation failed: %s", result.error.message)
    return result.unwrap()
