"""Generic traversal shared by schema compilation and strict validation.

The same walk runs over schema trees and actual trees. Non-empty maps and
sequences are descended into; everything else (scalars, IsDefs, and empty
maps or sequences) is a leaf handed to the observer. An empty container has
no children to check, so it is asserted as a whole. A non-empty container is
never reported itself, only its contents.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from lookslike.lib.paths import Path, is_sequence
from lookslike.lib.predicates import IsDef

__all__ = [
    "NodeKind",
    "WalkInfo",
    "WalkObserver",
    "classify",
    "walk",
]


class NodeKind(Enum):
    """Shape of a node in a schema or actual tree."""

    MAP = "map"
    EMPTY_MAP = "empty_map"
    SEQUENCE = "sequence"
    EMPTY_SEQUENCE = "empty_sequence"
    SCALAR = "scalar"
    PREDICATE = "predicate"

    @property
    def is_branch(self) -> bool:
        return self in (NodeKind.MAP, NodeKind.SEQUENCE)


def classify(node: Any) -> NodeKind:
    """Determine the NodeKind of ``node``.

    Strings and bytes are scalars. Lists and tuples are sequences.
    """
    if isinstance(node, IsDef):
        return NodeKind.PREDICATE
    if isinstance(node, Mapping):
        return NodeKind.MAP if node else NodeKind.EMPTY_MAP
    if is_sequence(node):
        return NodeKind.SEQUENCE if node else NodeKind.EMPTY_SEQUENCE
    return NodeKind.SCALAR


@dataclass(frozen=True)
class WalkInfo:
    """A leaf reached by the walker."""

    path: Path
    node: Any
    kind: NodeKind


WalkObserver = Callable[[WalkInfo], None]


def walk(node: Any, observer: WalkObserver, path: Path = Path()) -> None:
    """Report every leaf under ``node`` to ``observer`` exactly once.

    Map entries extend the path with ``str(key)``; sequence elements extend
    it with their index, in order. An exception raised by the observer stops
    the walk and propagates to the caller.
    """
    kind = classify(node)

    if kind is NodeKind.MAP:
        for key, child in node.items():
            walk(child, observer, path.extend_map(str(key)))
    elif kind is NodeKind.SEQUENCE:
        for idx, child in enumerate(node):
            walk(child, observer, path.extend_slice(idx))
    else:
        observer(WalkInfo(path=path, node=node, kind=kind))
