"""Graph Decoder — lifts RDF triples back into typed objects.

Decoding starts at a node and follows its outgoing triples. The node's type
is the first of its ``rdf:type`` classes that the schema knows; failing
that, the type expected by the referring property is used. A node whose
type cannot be determined decodes to an empty dict and a warning is
logged, so the rest of the graph still decodes.

ItemList nodes decode to arrays ordered by each item's ``position``,
whatever order the store enumerates triples in. Array properties written
as repeated triples are accumulated instead.
"""

from __future__ import annotations

import logging
from typing import Any

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.term import Node

from .literals import decode_literal
from .namespaces import ITEM, ITEM_LIST, ITEM_LIST_ELEMENT, POSITION, RDF_TYPE, UUID_URN_PREFIX
from .resolver import resolve
from .schema import SchemaRegistry
from .types import AbstractProperty, PropertyCache

logger = logging.getLogger(__name__)


def as_node(node: str | Node) -> Node:
    """Accept a URI string or an rdflib term."""
    if isinstance(node, (URIRef, BNode, Literal)):
        return node
    text = str(node)
    if text.startswith("_:"):
        return BNode(text[2:])
    return URIRef(text)


def node_id(node: Node) -> str:
    """Identifier of a node as it appears in decoded objects."""
    if isinstance(node, BNode):
        return f"_:{node}"
    return str(node)


class GraphDecoder:
    """Decodes resources of a schema out of an rdflib graph."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self.registry = registry

    # -----------------------------------------------------------------------
    # Type discovery
    # -----------------------------------------------------------------------

    def get_type(self, store: Graph, node: str | Node) -> str | None:
        """Return the first registered type key of ``node``, or None."""
        for _, _, cls in store.triples((as_node(node), RDF_TYPE, None)):
            type_key = self.registry.type_for_uri(cls)
            if type_key is not None:
                return type_key
        return None

    def find_by_uuid(self, store: Graph, uuid: str, predicate: str) -> str | None:
        """Return the subject whose ``predicate`` is ``urn:uuid:<uuid>``.

        None unless exactly one subject matches.
        """
        target = URIRef(UUID_URN_PREFIX + uuid.lower())
        subjects = [s for s, _, _ in store.triples((None, URIRef(predicate), target))]
        if len(subjects) == 1:
            return str(subjects[0])
        return None

    def is_item_list(self, store: Graph, term: Node) -> bool:
        if isinstance(term, Literal):
            return False
        return (term, RDF_TYPE, ITEM_LIST) in store

    # -----------------------------------------------------------------------
    # Decoding
    # -----------------------------------------------------------------------

    def decode_resource(
        self,
        store: Graph,
        node: str | Node,
        cache: PropertyCache | None = None,
        expected_type: str | None = None,
    ) -> dict[str, Any]:
        """Decode the resource at ``node`` into a dict.

        The result carries ``id`` and ``type`` plus one key per property
        found in the graph. Returns ``{}`` when the type is undeterminable.
        """
        if cache is None:
            cache = PropertyCache()
        node = as_node(node)

        type_key = self.get_type(store, node) or expected_type
        if not type_key:
            types = ", ".join(str(o) for _, _, o in store.triples((node, RDF_TYPE, None)))
            logger.warning("Type not found for %s (types: %s)", node_id(node), types)
            return {}

        resolved = resolve(self.registry, type_key, cache)
        item: dict[str, Any] = {"id": node_id(node), "type": type_key}

        for _, predicate, obj in store.triples((node, None, None)):
            key = resolved.uris.get(str(predicate))
            if key is None:
                continue
            prop = resolved.properties[key]

            if prop.is_array and self.is_item_list(store, obj):
                item[key] = self.decode_array(store, obj, key, prop, cache)
                continue

            value = self._decode_value(store, obj, key, prop, cache)
            if prop.is_array:
                item.setdefault(key, []).append(value)
            else:
                item[key] = value

        return item

    def decode_array(
        self,
        store: Graph,
        item_list: Node,
        key: str,
        prop: AbstractProperty,
        cache: PropertyCache,
    ) -> list[Any]:
        """Decode an ItemList node into a list ordered by ``position``."""
        entries: list[tuple[int, Node]] = []
        for _, _, list_item in store.triples((item_list, ITEM_LIST_ELEMENT, None)):
            positions = [o for _, _, o in store.triples((list_item, POSITION, None))]
            values = [o for _, _, o in store.triples((list_item, ITEM, None))]
            if len(positions) != 1 or len(values) != 1:
                logger.debug("Skipping malformed list item %s in %s", list_item, item_list)
                continue
            entries.append((int(str(positions[0])), values[0]))

        entries.sort(key=lambda entry: entry[0])
        return [self._decode_value(store, value, key, prop, cache) for _, value in entries]

    def _decode_value(
        self,
        store: Graph,
        term: Node,
        key: str,
        prop: AbstractProperty,
        cache: PropertyCache,
    ) -> Any:
        if prop.is_literal:
            return decode_literal(prop.type, key, str(term))
        expected = None if prop.is_multi_type else prop.type
        return self.decode_resource(store, term, cache, expected)
