"""Vocabulary used by the graph encoding.

Types are linked with ``rdf:type``. Ordered arrays use the schema.org
ItemList vocabulary: a list node carries ``itemListElement`` edges to
list-item nodes, each with a ``position`` and an ``item``.
"""

from rdflib import Namespace, RDF

SCHEMA = Namespace("http://schema.org/")

RDF_TYPE = RDF.type
ITEM_LIST = SCHEMA.ItemList
ITEM_LIST_ELEMENT = SCHEMA.itemListElement
POSITION = SCHEMA.position
ITEM = SCHEMA.item

UUID_URN_PREFIX = "urn:uuid:"
