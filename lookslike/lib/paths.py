"""Paths into nested maps and sequences.

A Path is an immutable, root-to-leaf sequence of components. Each component
is either a map key or a sequence index. Paths render to a dotted string
where indices appear as ``[n]``::

    >>> Path().extend_map("items").extend_slice(0).extend_map("name")
    Path('items.[0].name')
    >>> Path.parse("items.[0].name").last()
    PathComponent(kind=<ComponentKind.MAP_KEY: 'map'>, key='name', index=None)
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from lookslike.lib.errors import InvalidPathError

__all__ = [
    "ComponentKind",
    "PathComponent",
    "Path",
    "is_sequence",
]

SEPARATOR = "."

_INDEX_PATTERN = re.compile(r"^\[(\d+)\]$")


class ComponentKind(str, Enum):
    """Kind of container a path component addresses."""

    MAP_KEY = "map"
    SLICE_INDEX = "slice"

    def describe(self) -> str:
        """Return human-readable description of this component kind."""
        if self is ComponentKind.MAP_KEY:
            return "map key"
        return "sequence index"


def is_sequence(value: Any) -> bool:
    """True for the sequence types the engine descends into."""
    return isinstance(value, (list, tuple))


def _lookup_key(mapping: Mapping, key: str) -> Tuple[Any, bool]:
    # An exact string key wins over a non-string key with the same str().
    if key in mapping:
        return mapping[key], True
    for candidate, value in mapping.items():
        if not isinstance(candidate, str) and str(candidate) == key:
            return value, True
    return None, False


@dataclass(frozen=True)
class PathComponent:
    """One breadcrumb in a Path."""

    kind: ComponentKind
    key: Optional[str] = None
    index: Optional[int] = None

    @classmethod
    def map_key(cls, key: str) -> "PathComponent":
        return cls(ComponentKind.MAP_KEY, key=key)

    @classmethod
    def slice_index(cls, index: int) -> "PathComponent":
        if index < 0:
            raise ValueError(f"Sequence index must be non-negative, got {index}")
        return cls(ComponentKind.SLICE_INDEX, index=index)

    def __str__(self) -> str:
        if self.kind is ComponentKind.SLICE_INDEX:
            return f"[{self.index}]"
        return str(self.key)


@dataclass(frozen=True)
class Path:
    """Location of a node inside a nested value tree.

    The empty Path is the root. Paths never mutate; every extension returns a
    new Path.
    """

    components: Tuple[PathComponent, ...] = ()

    def extend(self, component: PathComponent) -> "Path":
        return Path(self.components + (component,))

    def extend_map(self, key: str) -> "Path":
        """Return a new Path with a trailing map-key component."""
        return self.extend(PathComponent.map_key(key))

    def extend_slice(self, index: int) -> "Path":
        """Return a new Path with a trailing sequence-index component."""
        return self.extend(PathComponent.slice_index(index))

    def concat(self, other: "Path") -> "Path":
        """Return this Path followed by ``other``."""
        return Path(self.components + other.components)

    def last(self) -> Optional[PathComponent]:
        """Last component, or None for the root."""
        if not self.components:
            return None
        return self.components[-1]

    def is_root(self) -> bool:
        return not self.components

    def render(self) -> str:
        return SEPARATOR.join(str(pc) for pc in self.components)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Path({self.render()!r})"

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[PathComponent]:
        return iter(self.components)

    def lookup(self, tree: Any) -> Tuple[Any, bool]:
        """Fetch the value this Path points at inside ``tree``.

        Map components hold the ``str()`` of the key they were built from, so
        a component that is not itself a key of the map matches the key whose
        string form equals it. ``{200: "ok"}`` resolves ``200`` this way.

        Returns:
            ``(value, True)`` when every component resolves, otherwise
            ``(None, False)``. A component that addresses the wrong kind of
            container (a key into a list, an index into a dict or scalar) is
            reported as missing, so the predicate at this path decides what
            absence means.
        """
        value = tree
        for pc in self.components:
            if pc.kind is ComponentKind.MAP_KEY:
                if not isinstance(value, Mapping):
                    return None, False
                value, found = _lookup_key(value, pc.key)
                if not found:
                    return None, False
            else:
                if not is_sequence(value) or pc.index >= len(value):
                    return None, False
                value = value[pc.index]
        return value, True

    @classmethod
    def parse(cls, text: str) -> "Path":
        """Parse a Path of the form ``key.[0].other_key.[1]``.

        The empty string is the root Path.

        Rendering is not reversible for every Path. A map key that contains
        ``.`` or has the ``[n]`` shape of an index parses back as several
        components or as an index, so ``Path.parse(str(p)) == p`` only holds
        when no key of ``p`` has either form.

        Raises:
            InvalidPathError: If a segment is empty or an index is malformed
        """
        if text == "":
            return cls()

        components = []
        for part in text.split(SEPARATOR):
            match = _INDEX_PATTERN.match(part)
            if match:
                components.append(PathComponent.slice_index(int(match.group(1))))
            elif part.startswith("[") and part.endswith("]"):
                raise InvalidPathError(
                    f"Invalid sequence index segment '{part}'",
                    path_string=text,
                )
            elif part:
                components.append(PathComponent.map_key(part))
            else:
                raise InvalidPathError(
                    "Empty segment in path",
                    path_string=text,
                    suggestion="Separate keys with a single '.' and do not start or end with '.'",
                )

        return cls(tuple(components))
