"""Property Resolver — effective properties of a type.

A type exposes its own properties plus everything inherited through its
``extends`` chain. Parents are resolved first and the child's declarations
are overlaid on top, so a child that redeclares a key replaces the
inherited definition while keeping the inherited position in key order.

Results are memoized in a PropertyCache owned by the calling operation.
"""

from __future__ import annotations

from typing import Mapping

from .schema import SchemaRegistry
from .types import AbstractProperty, PropertyCache, ResolvedType


def resolve(
    registry: SchemaRegistry,
    type_key: str,
    cache: PropertyCache,
) -> ResolvedType:
    """Return the effective properties and URI map for ``type_key``.

    Raises UnknownTypeError for an unregistered key. The registry has
    already rejected cyclic ``extends`` chains, so the walk terminates.
    """
    if type_key in cache:
        return cache[type_key]

    definition = registry.definition(type_key)
    parent = registry.parent_of(type_key)

    properties: dict[str, AbstractProperty] = {}
    if parent is not None:
        inherited = resolve(registry, parent, cache)
        properties.update(inherited.properties)
    properties.update(definition.properties)

    uris = {prop.uri: key for key, prop in properties.items()}
    resolved = ResolvedType(properties=properties, uris=uris)
    cache[type_key] = resolved
    return resolved


def resolve_properties(
    registry: SchemaRegistry,
    type_key: str,
    cache: PropertyCache,
) -> Mapping[str, AbstractProperty]:
    """Effective property key → AbstractProperty map for ``type_key``."""
    return resolve(registry, type_key, cache).properties


def resolve_uris(
    registry: SchemaRegistry,
    type_key: str,
    cache: PropertyCache,
) -> Mapping[str, str]:
    """Effective property URI → key map for ``type_key``."""
    return resolve(registry, type_key, cache).uris
