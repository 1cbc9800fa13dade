"""Core schema types for the object/graph codec.

A schema is a map of type key → AbstractDefinition. Each definition names
its RDF class URI, optionally the type it extends, and its own properties:

  AbstractDefinition = (uri, extends, properties)
  AbstractProperty   = (uri, type, is_array, is_optional, is_multi_type)

A property's ``type`` is either a literal kind (string, number, boolean,
Date) or the key of another definition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


# ---------------------------------------------------------------------------
# Literal kinds and the root sentinel
# ---------------------------------------------------------------------------

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
DATE = "Date"

LITERAL_KINDS = frozenset({STRING, NUMBER, BOOLEAN, DATE})

# Type key every definition implicitly extends; it carries no properties.
ROOT_TYPE = "IObject"


def is_literal(type_name: str) -> bool:
    """True if ``type_name`` is a literal kind rather than a type key."""
    return type_name in LITERAL_KINDS


# ---------------------------------------------------------------------------
# AbstractProperty — one declared property of a type
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AbstractProperty:
    """A property of a type definition.

    ``uri`` is the predicate used in the graph. ``is_multi_type`` marks a
    polymorphic property: the concrete type of each value is taken from the
    value's own ``type`` field instead of ``type``.
    """
    uri: str
    type: str
    is_array: bool = False
    is_optional: bool = False
    is_multi_type: bool = False

    @property
    def is_literal(self) -> bool:
        return is_literal(self.type)

    def __repr__(self) -> str:
        flags = [
            name for name, on in (
                ("array", self.is_array),
                ("optional", self.is_optional),
                ("multi", self.is_multi_type),
            ) if on
        ]
        extra = f", {', '.join(flags)}" if flags else ""
        return f"Prop({self.type} <{self.uri}>{extra})"


# ---------------------------------------------------------------------------
# AbstractDefinition — one type of the schema
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AbstractDefinition:
    """A type definition: its class URI, parent type and own properties.

    Property order is significant; the builder emits properties in the
    order they are declared.
    """
    uri: str
    extends: str | None = None
    properties: Mapping[str, AbstractProperty] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __repr__(self) -> str:
        parent = f" extends {self.extends}" if self.extends else ""
        return f"Def(<{self.uri}>{parent}, {len(self.properties)} properties)"


# ---------------------------------------------------------------------------
# Effective-property cache
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResolvedType:
    """Effective properties of a type after overlaying its ancestors.

    ``properties`` maps property key → AbstractProperty; ``uris`` maps the
    property URI back to its key.
    """
    properties: Mapping[str, AbstractProperty]
    uris: Mapping[str, str]


class PropertyCache(dict):
    """Per-operation memo of type key → ResolvedType.

    Entries depend only on the type, never on a node, so one cache may be
    carried across a batch of builds or decodes against the same schema.
    """

    def __repr__(self) -> str:
        return f"PropertyCache({sorted(self)})"
