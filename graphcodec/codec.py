"""ObjectCodec — one entry point for building and decoding over a schema."""

from __future__ import annotations

from typing import Any, Mapping

from rdflib import Graph, URIRef
from rdflib.term import Node

from .builder import GraphBuilder
from .decoder import GraphDecoder
from .namespaces import SCHEMA
from .schema import SchemaRegistry
from .types import PropertyCache


class ObjectCodec:
    """Builds objects into graphs and decodes them back, for one schema.

    The codec holds no per-operation state. Pass the same PropertyCache to
    a batch of related calls to reuse resolved type metadata; omit it to
    get a fresh cache per call.
    """

    def __init__(self, registry: SchemaRegistry) -> None:
        self.registry = registry
        self.builder = GraphBuilder(registry)
        self.decoder = GraphDecoder(registry)

    @staticmethod
    def new_cache() -> PropertyCache:
        return PropertyCache()

    def build_resource(
        self,
        store: Graph,
        type_key: str,
        node_uri: str,
        obj: Mapping[str, Any],
        cache: PropertyCache | None = None,
        base_uri: str = "",
    ) -> URIRef:
        return self.builder.build_resource(store, type_key, node_uri, obj, cache, base_uri)

    def build_graph(
        self,
        type_key: str,
        node_uri: str,
        obj: Mapping[str, Any],
        cache: PropertyCache | None = None,
    ) -> Graph:
        """Build ``obj`` into a new graph with the schema.org prefix bound."""
        store = Graph()
        store.bind("schema", SCHEMA)
        self.build_resource(store, type_key, node_uri, obj, cache)
        return store

    def decode_resource(
        self,
        store: Graph,
        node: str | Node,
        cache: PropertyCache | None = None,
        expected_type: str | None = None,
    ) -> dict[str, Any]:
        return self.decoder.decode_resource(store, node, cache, expected_type)

    def get_type(self, store: Graph, node: str | Node) -> str | None:
        return self.decoder.get_type(store, node)

    def find_by_uuid(self, store: Graph, uuid: str, predicate: str) -> str | None:
        return self.decoder.find_by_uuid(store, uuid, predicate)

    def __repr__(self) -> str:
        return f"ObjectCodec({self.registry!r})"
