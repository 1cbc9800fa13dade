"""Catalog records — schema and sample objects.

The schema (schema.yaml) describes catalog products:
- ICatalogObject: uuid + optional name, base of products and brands
- IProduct: redeclares name as required, adds price, images, keywords
- IBrand → IOrganization | IPerson: the multi-type ``brand`` property
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

from datetime import datetime
from pathlib import Path

from graphcodec.codec import ObjectCodec
from graphcodec.schema import SchemaRegistry, load_schema

SCHEMA_PATH = Path(__file__).with_name("schema.yaml")

CATALOG_BASE = "http://catalog.example.org/record/"
UUID_PREDICATE = "http://rdf.example.org/schema/catalog/Object.uuid"


def build_registry() -> SchemaRegistry:
    """Load the catalog schema from schema.yaml."""
    return load_schema(SCHEMA_PATH)


def build_codec() -> ObjectCodec:
    return ObjectCodec(build_registry())


def record_uri(uuid: str) -> str:
    return CATALOG_BASE + uuid.lower()


def sample_product() -> dict:
    """A product exercising every kind of property in the schema."""
    return {
        "uuid": "6F1C2A4E-3B5D-4E8F-9A01-23456789ABCD",
        "name": "Trail Runner 2",
        "description": "Lightweight trail running shoe",
        "sku": "TR-2-BLK-42",
        "available": True,
        "releaseDate": datetime(2024, 3, 1),
        "offers": {
            "price": 129.95,
            "priceCurrency": "USD",
            "validThrough": datetime(2024, 12, 31, 23, 59, 59),
        },
        "keywords": ["running", "trail", "outdoor"],
        "image": [
            {"url": "https://img.example.org/tr2/front.jpg", "caption": "Front"},
            {"url": "https://img.example.org/tr2/side.jpg", "caption": "Side"},
            {"url": "https://img.example.org/tr2/sole.jpg"},
        ],
        "brand": {
            "type": "IOrganization",
            "uuid": "0B7E5C3A-1D2F-4A6B-8C9D-0E1F2A3B4C5D",
            "name": "Ridgeline",
            "legalName": "Ridgeline Outdoor Gear Ltd.",
            "url": "https://ridgeline.example.org",
        },
    }


def sample_minimal_product() -> dict:
    """A product with only required properties and a single image."""
    return {
        "uuid": "1A2B3C4D-0000-4000-8000-000000000001",
        "name": "Plain Tee",
        "sku": "TEE-WHT-M",
        "available": False,
        "offers": {"price": 15, "priceCurrency": "EUR"},
        "image": [{"url": "https://img.example.org/tee.jpg"}],
    }
