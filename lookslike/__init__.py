"""lookslike: match nested values against structural schemas.

Schemas are plain nested dicts and lists whose leaves are literal values or
named checks. They compile once into flat, path-addressed checks and can then
validate any number of actual values, reporting every failure by path.

Example:
    >>> from lookslike import is_def, must_compile, strict, Outcome
    >>> has_id = is_def("has id", lambda p, v, ok: Outcome(p, ok and bool(v), "id required"))
    >>> validator = strict(must_compile({"id": has_id, "kind": "user"}))
    >>> report = validator({"id": 7, "kind": "user", "debug": True})
    >>> report.succeeded()
    False
    >>> str(report.get("debug"))
    '[FAIL] debug: unexpected field encountered during strict validation'
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Re-exports
# =============================================================================

# Schema compilation
from lookslike.lib.compiler import (
    CompiledSchema,
    CompileResult,
    FlatValidator,
    compile_schema,
    must_compile,
)

# Checks
from lookslike.lib.predicates import IsDef, is_def, is_equal, key_missing, optional

# Validators
from lookslike.lib.validators import Validator, compose, strict

# Paths and results
from lookslike.lib.paths import Path, PathComponent
from lookslike.lib.results import Outcome, Results

# Errors
from lookslike.lib.errors import (
    DocumentLoadError,
    InvalidPathError,
    LookslikeError,
    SchemaCompileError,
)

# Ambient helpers
from lookslike.lib.documents import load_document
from lookslike.lib.logging import setup_logging
from lookslike.lib.settings import LookslikeSettings

__all__ = [
    "__version__",
    # Schema compilation
    "CompiledSchema",
    "CompileResult",
    "FlatValidator",
    "compile_schema",
    "must_compile",
    # Checks
    "IsDef",
    "is_def",
    "is_equal",
    "key_missing",
    "optional",
    # Validators
    "Validator",
    "compose",
    "strict",
    # Paths and results
    "Path",
    "PathComponent",
    "Outcome",
    "Results",
    # Errors
    "DocumentLoadError",
    "InvalidPathError",
    "LookslikeError",
    "SchemaCompileError",
    # Ambient helpers
    "load_document",
    "setup_logging",
    "LookslikeSettings",
]
