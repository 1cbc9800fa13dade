"""Shared schema for codec tests.

IEntity ─┬─ IBook     (redeclares ``label`` with its own URI)
         └─ IPerson
IPublisher ─┬─ ICompany
            └─ IImprint
IChapter
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from rdflib import Namespace

from graphcodec.codec import ObjectCodec
from graphcodec.schema import SchemaRegistry
from graphcodec.types import AbstractDefinition, AbstractProperty

EX = Namespace("http://example.org/schema/")


def library_registry() -> SchemaRegistry:
    return SchemaRegistry({
        "IEntity": AbstractDefinition(
            uri=str(EX.Entity),
            extends="IObject",
            properties={
                "uuid": AbstractProperty(uri=str(EX["Entity.uuid"]), type="string", is_optional=True),
                "label": AbstractProperty(uri=str(EX["Entity.label"]), type="string"),
            },
        ),
        "IBook": AbstractDefinition(
            uri=str(EX.Book),
            extends="IEntity",
            properties={
                "label": AbstractProperty(uri=str(EX["Book.title"]), type="string"),
                "pages": AbstractProperty(uri=str(EX["Book.pages"]), type="number"),
                "inPrint": AbstractProperty(uri=str(EX["Book.inPrint"]), type="boolean"),
                "published": AbstractProperty(uri=str(EX["Book.published"]), type="Date", is_optional=True),
                "authors": AbstractProperty(uri=str(EX["Book.author"]), type="IPerson", is_array=True),
                "tags": AbstractProperty(uri=str(EX["Book.tag"]), type="string", is_array=True, is_optional=True),
                "publisher": AbstractProperty(
                    uri=str(EX["Book.publisher"]), type="IPublisher", is_optional=True, is_multi_type=True,
                ),
                "chapters": AbstractProperty(
                    uri=str(EX["Book.chapter"]), type="IChapter", is_array=True, is_optional=True,
                ),
            },
        ),
        "IPerson": AbstractDefinition(
            uri=str(EX.Person),
            extends="IEntity",
            properties={
                "born": AbstractProperty(uri=str(EX["Person.born"]), type="Date", is_optional=True),
            },
        ),
        "IPublisher": AbstractDefinition(
            uri=str(EX.Publisher),
            properties={
                "name": AbstractProperty(uri=str(EX["Publisher.name"]), type="string"),
            },
        ),
        "ICompany": AbstractDefinition(
            uri=str(EX.Company),
            extends="IPublisher",
            properties={
                "country": AbstractProperty(uri=str(EX["Company.country"]), type="string"),
            },
        ),
        "IImprint": AbstractDefinition(
            uri=str(EX.Imprint),
            extends="IPublisher",
            properties={
                "parent": AbstractProperty(uri=str(EX["Imprint.parent"]), type="ICompany", is_optional=True),
            },
        ),
        "IChapter": AbstractDefinition(
            uri=str(EX.Chapter),
            extends="IObject",
            properties={
                "title": AbstractProperty(uri=str(EX["Chapter.title"]), type="string"),
                "number": AbstractProperty(uri=str(EX["Chapter.number"]), type="number"),
            },
        ),
    })


def strip_identity(value):
    """Drop the ``id`` and ``type`` keys the decoder adds to every resource."""
    if isinstance(value, dict):
        return {k: strip_identity(v) for k, v in value.items() if k not in ("id", "type")}
    if isinstance(value, list):
        return [strip_identity(v) for v in value]
    return value


@pytest.fixture
def registry():
    return library_registry()


@pytest.fixture
def codec(registry):
    return ObjectCodec(registry)
