"""Library modules for lookslike.

Layering, lowest first: errors, paths, results, predicates, walker,
validators, compiler. Ambient helpers (logging, settings, documents) sit
beside them and are not imported by the engine.
"""

from lookslike.lib.compiler import (
    CompiledSchema,
    CompileResult,
    FlatValidator,
    compile_schema,
    flatten_schema,
    must_compile,
)
from lookslike.lib.documents import load_document
from lookslike.lib.errors import (
    DocumentLoadError,
    InvalidPathError,
    LookslikeError,
    SchemaCompileError,
)
from lookslike.lib.logging import JSONFormatter, setup_logging, setup_logging_from_settings
from lookslike.lib.paths import ComponentKind, Path, PathComponent
from lookslike.lib.predicates import IsDef, deep_equal, is_def, is_equal, key_missing, optional
from lookslike.lib.results import Outcome, Results
from lookslike.lib.settings import LookslikeSettings
from lookslike.lib.validators import (
    ComposedValidator,
    CoveredPaths,
    PredicateValidator,
    SchemaValidator,
    StrictValidator,
    Validator,
    compose,
    strict,
)
from lookslike.lib.walker import NodeKind, WalkInfo, classify, walk

__all__ = [
    # Compiler
    "CompiledSchema",
    "CompileResult",
    "FlatValidator",
    "compile_schema",
    "flatten_schema",
    "must_compile",
    # Documents
    "load_document",
    # Errors
    "DocumentLoadError",
    "InvalidPathError",
    "LookslikeError",
    "SchemaCompileError",
    # Logging
    "JSONFormatter",
    "setup_logging",
    "setup_logging_from_settings",
    # Paths
    "ComponentKind",
    "Path",
    "PathComponent",
    # Predicates
    "IsDef",
    "deep_equal",
    "is_def",
    "is_equal",
    "key_missing",
    "optional",
    # Results
    "Outcome",
    "Results",
    # Settings
    "LookslikeSettings",
    # Validators
    "ComposedValidator",
    "CoveredPaths",
    "PredicateValidator",
    "SchemaValidator",
    "StrictValidator",
    "Validator",
    "compose",
    "strict",
    # Walker
    "NodeKind",
    "WalkInfo",
    "classify",
    "walk",
]
