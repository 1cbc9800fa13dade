"""Schema Registry — the static map of type definitions.

The registry holds type key → AbstractDefinition and the reverse map from
class URI → type key. It is built once and never mutated afterwards, so a
single registry can be shared by any number of build and decode operations.

Definitions form a tree through ``extends``. The registry rejects parents
that are not registered and ``extends`` chains that loop back on themselves.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping

import yaml

from .errors import SchemaCycleError, SchemaError, UnknownTypeError
from .types import ROOT_TYPE, AbstractDefinition, AbstractProperty

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Read-only lookup over a map of type definitions."""

    def __init__(
        self,
        definitions: Mapping[str, AbstractDefinition],
        root_type: str = ROOT_TYPE,
    ) -> None:
        self.root_type = root_type
        self._defs: Mapping[str, AbstractDefinition] = MappingProxyType(dict(definitions))

        type_uris: dict[str, str] = {}
        for key, definition in self._defs.items():
            type_uris[definition.uri] = key
        self._type_uris: Mapping[str, str] = MappingProxyType(type_uris)

        self._check_parents()
        cycles = self.detect_extends_cycles()
        if cycles:
            raise SchemaCycleError(cycles[0])

        logger.debug("Schema registry built with %d definitions", len(self._defs))

    # -----------------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------------

    def definition(self, type_key: str) -> AbstractDefinition:
        """Return the definition for ``type_key``; unknown keys raise."""
        try:
            return self._defs[type_key]
        except KeyError:
            raise UnknownTypeError(type_key) from None

    def parent_of(self, type_key: str) -> str | None:
        """Return the parent type key, or None when the type extends the root."""
        parent = self.definition(type_key).extends
        if not parent or parent == self.root_type:
            return None
        return parent

    def type_for_uri(self, uri: str) -> str | None:
        """Reverse lookup: class URI → type key."""
        return self._type_uris.get(str(uri))

    def uri_for_type(self, type_key: str) -> str:
        return self.definition(type_key).uri

    @property
    def definitions(self) -> Mapping[str, AbstractDefinition]:
        return self._defs

    @property
    def type_uris(self) -> Mapping[str, str]:
        return self._type_uris

    def type_keys(self) -> list[str]:
        return list(self._defs)

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._defs

    def __iter__(self) -> Iterator[str]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    # -----------------------------------------------------------------------
    # Structural checks
    # -----------------------------------------------------------------------

    def _check_parents(self) -> None:
        for key, definition in self._defs.items():
            parent = definition.extends
            if parent and parent != self.root_type and parent not in self._defs:
                raise SchemaError(f"Type {key!r} extends unknown type {parent!r}")

    def detect_extends_cycles(self) -> list[list[str]]:
        """Detect cycles in the ``extends`` relation.

        Returns the list of cycles found (empty if the hierarchy is a tree).
        """
        cycles: list[list[str]] = []
        WHITE, GRAY, BLACK = 0, 1, 2
        color: dict[str, int] = {name: WHITE for name in self._defs}
        path: list[str] = []

        def dfs(node: str) -> None:
            color[node] = GRAY
            path.append(node)
            parent = self._defs[node].extends
            if parent in color:
                if color[parent] == GRAY:
                    cycle_start = path.index(parent)
                    cycles.append(path[cycle_start:] + [parent])
                elif color[parent] == WHITE:
                    dfs(parent)
            path.pop()
            color[node] = BLACK

        for node in self._defs:
            if color[node] == WHITE:
                dfs(node)

        return cycles

    # -----------------------------------------------------------------------
    # Loaders
    # -----------------------------------------------------------------------

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Mapping[str, Any]],
        root_type: str = ROOT_TYPE,
    ) -> SchemaRegistry:
        """Build a registry from plain configuration data.

        Expected shape, per type key::

            {"uri": ..., "extends": ..., "properties": {
                key: {"uri": ..., "type": ..., "isArray": bool,
                      "isOptional": bool, "isMultiType": bool}}}
        """
        definitions: dict[str, AbstractDefinition] = {}
        for type_key, raw in data.items():
            if "uri" not in raw:
                raise SchemaError(f"Type {type_key!r} has no uri")
            properties: dict[str, AbstractProperty] = {}
            for prop_key, prop in (raw.get("properties") or {}).items():
                if "uri" not in prop or "type" not in prop:
                    raise SchemaError(f"Property {type_key}.{prop_key} needs a uri and a type")
                properties[prop_key] = AbstractProperty(
                    uri=prop["uri"],
                    type=prop["type"],
                    is_array=bool(prop.get("isArray", False)),
                    is_optional=bool(prop.get("isOptional", False)),
                    is_multi_type=bool(prop.get("isMultiType", False)),
                )
            definitions[type_key] = AbstractDefinition(
                uri=raw["uri"],
                extends=raw.get("extends"),
                properties=properties,
            )
        return cls(definitions, root_type=root_type)

    def __repr__(self) -> str:
        return f"SchemaRegistry({len(self._defs)} definitions, root={self.root_type})"


def load_schema(path: str | Path, root_type: str = ROOT_TYPE) -> SchemaRegistry:
    """Load a registry from a YAML file (JSON files load too)."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise SchemaError(f"Schema file {path} must contain a mapping of type definitions")
    return SchemaRegistry.from_mapping(data, root_type=root_type)
