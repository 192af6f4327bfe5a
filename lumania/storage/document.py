"""
In-memory document tree addressed by dot-delimited paths.

A Document wraps nested dicts parsed from YAML. 'Spawn.World' addresses the
'World' key inside the 'Spawn' mapping. Paths are case-sensitive. Reads of
missing paths return None; they never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator

import yaml

from lumania.exceptions import DocumentFormatError

__all__ = ["Document", "PATH_SEPARATOR"]

PATH_SEPARATOR = "."


def _normalize(value: Any) -> Any:
    """Convert mappings to str-keyed dicts and other collections to lists."""
    if isinstance(value, Mapping):
        return {str(k): _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return [_normalize(v) for v in items]
    return value


class Document:
    """Tree of named entries backed by nested dicts."""

    def __init__(self, data: Mapping | None = None):
        self._root: dict = _normalize(data) if data else {}

    @classmethod
    def from_yaml(cls, text: str) -> Document:
        """
        Parse YAML text into a Document.

        Raises:
            yaml.YAMLError: If the text is not valid YAML
            DocumentFormatError: If the top level is not a mapping
        """
        data = yaml.safe_load(text)
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise DocumentFormatError(
                f"Top level is not a mapping (got {type(data).__name__})"
            )
        return cls(data)

    def to_yaml(self) -> str:
        if not self._root:
            return ""
        return yaml.safe_dump(
            self._root,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def to_dict(self) -> dict:
        return _normalize(self._root)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._root == other._root

    def __repr__(self) -> str:
        return f"Document({self._root!r})"

    def _walk(self, path: str) -> tuple[Any, bool]:
        node: Any = self._root
        if path == "":
            return node, True
        for segment in path.split(PATH_SEPARATOR):
            if not isinstance(node, dict) or segment not in node:
                return None, False
            node = node[segment]
        return node, True

    def get(self, path: str) -> Any:
        """Return the raw value at *path*, or None if nothing is there."""
        value, _ = self._walk(path)
        return value

    def contains(self, path: str) -> bool:
        """Return True if *path* holds a value or a section."""
        value, found = self._walk(path)
        return found and value is not None

    def is_section(self, path: str) -> bool:
        return isinstance(self.get(path), dict)

    def set(self, path: str, value: Any) -> None:
        """
        Set *value* at *path*, creating intermediate sections.

        A value of None removes the entry. Intermediate scalars in the way are
        replaced by sections.
        """
        if path == "":
            raise ValueError("Cannot set a value at the document root")

        *parents, leaf = path.split(PATH_SEPARATOR)
        node = self._root
        for segment in parents:
            child = node.get(segment)
            if not isinstance(child, dict):
                if value is None:
                    return
                child = {}
                node[segment] = child
            node = child

        if value is None:
            node.pop(leaf, None)
        else:
            node[leaf] = _normalize(value)

    def keys(self, path: str = "", deep: bool = False) -> list[str]:
        """
        List the keys of the section at *path*.

        With deep=True, nested keys are included as full dotted paths relative
        to *path*. Returns an empty list if *path* is not a section.
        """
        section = self.get(path)
        if not isinstance(section, dict):
            return []
        return list(self._iter_keys(section, "", deep))

    def _iter_keys(self, section: dict, prefix: str, deep: bool) -> Iterator[str]:
        for key, value in section.items():
            full = f"{prefix}{key}"
            yield full
            if deep and isinstance(value, dict):
                yield from self._iter_keys(value, full + PATH_SEPARATOR, deep)
