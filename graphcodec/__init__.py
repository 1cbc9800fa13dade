"""graphcodec — schema-driven mapping between nested objects and RDF graphs.

A schema of abstract type definitions drives a bidirectional codec:

- Schema Registry (graphcodec.schema): type key → definition, class URI → type key
- Property Resolver (graphcodec.resolver): effective properties through ``extends``
- Graph Builder (graphcodec.builder): object → triples in an rdflib Graph
- Graph Decoder (graphcodec.decoder): triples → object
- ObjectCodec (graphcodec.codec): builder and decoder over one registry

Ordered arrays are written as schema.org ItemList structures with
positioned list items. Polymorphic properties carry their concrete type in
the value's ``type`` field.

The SHACL bridge (graphcodec.shacl_bridge) expresses a schema as SHACL
shapes so that graphs can be checked with pySHACL.
"""

from .builder import GraphBuilder
from .codec import ObjectCodec
from .decoder import GraphDecoder
from .errors import (
    GraphCodecError,
    MissingPropertyError,
    MissingTypeDiscriminatorError,
    SchemaCycleError,
    SchemaError,
    UnknownTypeError,
)
from .resolver import resolve, resolve_properties, resolve_uris
from .schema import SchemaRegistry, load_schema
from .types import ROOT_TYPE, AbstractDefinition, AbstractProperty, PropertyCache, ResolvedType

__all__ = [
    "AbstractDefinition",
    "AbstractProperty",
    "GraphBuilder",
    "GraphCodecError",
    "GraphDecoder",
    "MissingPropertyError",
    "MissingTypeDiscriminatorError",
    "ObjectCodec",
    "PropertyCache",
    "ROOT_TYPE",
    "ResolvedType",
    "SchemaCycleError",
    "SchemaError",
    "SchemaRegistry",
    "UnknownTypeError",
    "load_schema",
    "resolve",
    "resolve_properties",
    "resolve_uris",
]
