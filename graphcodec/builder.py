"""Graph Builder — lowers a typed object into RDF triples.

Each resource gets an ``rdf:type`` triple and one triple per property.
Nested objects become their own resources: an object that already has an
``id`` is linked by that URI, otherwise a fresh URI is minted under the
root resource's URI (``<root>#<uuid4>``).

Arrays with exactly one element are written like scalars. Any other array
becomes an ItemList node whose list items record their original index as
``position``, so the decoder can restore the order.

Building is all-or-nothing: triples are staged in a scratch graph and only
added to the caller's store once the whole object tree has been lowered.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping, Sequence

from rdflib import Graph, Literal, URIRef

from .errors import MissingPropertyError, MissingTypeDiscriminatorError, SchemaError
from .literals import build_literal
from .namespaces import ITEM, ITEM_LIST, ITEM_LIST_ELEMENT, POSITION, RDF_TYPE
from .resolver import resolve_properties
from .schema import SchemaRegistry
from .types import AbstractProperty, PropertyCache

logger = logging.getLogger(__name__)


def mint_uri(base_uri: str) -> URIRef:
    """Fresh identifier anchored under ``base_uri``."""
    return URIRef(f"{base_uri}#{uuid.uuid4()}")


class GraphBuilder:
    """Builds resources of a schema into an rdflib graph."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self.registry = registry

    def build_resource(
        self,
        store: Graph,
        type_key: str,
        node_uri: str,
        obj: Mapping[str, Any],
        cache: PropertyCache | None = None,
        base_uri: str = "",
    ) -> URIRef:
        """Add the triples describing ``obj`` as a ``type_key`` resource.

        Returns the resource's URI. Raises a SchemaError subclass, leaving
        ``store`` untouched, when the object cannot be described.
        """
        if cache is None:
            cache = PropertyCache()
        staged = Graph()
        node = self._build(staged, type_key, str(node_uri), obj, cache, base_uri)
        for triple in staged:
            store.add(triple)
        return node

    # -----------------------------------------------------------------------
    # Recursive lowering
    # -----------------------------------------------------------------------

    def _build(
        self,
        store: Graph,
        type_key: str,
        node_uri: str,
        obj: Mapping[str, Any],
        cache: PropertyCache,
        base_uri: str,
    ) -> URIRef:
        node = URIRef(node_uri)
        store.add((node, RDF_TYPE, URIRef(self.registry.uri_for_type(type_key))))
        properties = resolve_properties(self.registry, type_key, cache)
        if not base_uri:
            base_uri = node_uri
        logger.debug("Building %s as %s", node_uri, type_key)

        for key, prop in properties.items():
            value = obj.get(key)
            if value is None:
                if prop.is_optional:
                    continue
                raise MissingPropertyError(
                    f"{type_key}.{key} is required but missing from {node_uri}"
                )

            if prop.is_array and (isinstance(value, (str, bytes)) or not isinstance(value, Sequence)):
                raise SchemaError(f"{type_key}.{key} is an array property, got {type(value).__name__}")

            if prop.is_array and len(value) != 1:
                self._build_list(store, node, key, prop, value, cache, base_uri)
                continue

            if prop.is_array:
                value = value[0]
            store.add((node, URIRef(prop.uri), self._build_value(store, key, prop, value, cache, base_uri)))

        return node

    def _build_list(
        self,
        store: Graph,
        node: URIRef,
        key: str,
        prop: AbstractProperty,
        values: list[Any],
        cache: PropertyCache,
        base_uri: str,
    ) -> None:
        item_list = mint_uri(base_uri)
        store.add((item_list, RDF_TYPE, ITEM_LIST))
        store.add((node, URIRef(prop.uri), item_list))
        for position, value in enumerate(values):
            list_item = mint_uri(base_uri)
            store.add((item_list, ITEM_LIST_ELEMENT, list_item))
            store.add((list_item, POSITION, Literal(position)))
            store.add((list_item, ITEM, self._build_value(store, key, prop, value, cache, base_uri)))

    def _build_value(
        self,
        store: Graph,
        key: str,
        prop: AbstractProperty,
        value: Any,
        cache: PropertyCache,
        base_uri: str,
    ):
        if prop.is_literal:
            return build_literal(prop.type, key, value)
        return self._build_object(store, key, prop, value, cache, base_uri)

    def _build_object(
        self,
        store: Graph,
        key: str,
        prop: AbstractProperty,
        value: Mapping[str, Any] | str,
        cache: PropertyCache,
        base_uri: str,
    ) -> URIRef:
        if isinstance(value, str):
            value = {"id": value}
        sub_type = prop.type
        if prop.is_multi_type:
            if not value.get("type"):
                raise MissingTypeDiscriminatorError(
                    f"Cannot determine the type of {key!r} (one of {prop.type}) without 'type'"
                )
            sub_type = value["type"]

        if value.get("id") and not set(value) - {"id", "type"}:
            # Bare reference to a resource described elsewhere; only its type is stated.
            ref = URIRef(value["id"])
            store.add((ref, RDF_TYPE, URIRef(self.registry.uri_for_type(sub_type))))
            return ref
        sub_uri = value["id"] if value.get("id") else str(mint_uri(base_uri))
        return self._build(store, sub_type, sub_uri, value, cache, base_uri)
