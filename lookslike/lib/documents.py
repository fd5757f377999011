"""Load actual-value trees from JSON or YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml

from lookslike.lib.errors import DocumentLoadError

logger = logging.getLogger(__name__)

__all__ = ["load_document"]

_YAML_SUFFIXES = (".yaml", ".yml")


def load_document(path: Union[str, Path]) -> Any:
    """Read a JSON (``.json``) or YAML (``.yaml``/``.yml``) file.

    Args:
        path: Document location

    Returns:
        The decoded tree of dicts, lists and scalars

    Raises:
        DocumentLoadError: If the file is missing, has an unknown suffix or
            cannot be decoded
    """
    doc_path = Path(path)
    suffix = doc_path.suffix.lower()

    if suffix != ".json" and suffix not in _YAML_SUFFIXES:
        raise DocumentLoadError(
            f"Unsupported document type '{suffix or doc_path.name}'",
            path=str(doc_path),
            suggestion="Use a .json, .yaml or .yml file",
        )

    try:
        text = doc_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError("Could not read document", path=str(doc_path), cause=e) from e

    try:
        if suffix == ".json":
            document = json.loads(text)
        else:
            document = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DocumentLoadError("Could not decode document", path=str(doc_path), cause=e) from e

    logger.debug("Loaded %s document from %s", suffix.lstrip("."), doc_path)
    return document
