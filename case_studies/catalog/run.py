"""Catalog records — end-to-end codec demonstration.

Walks a catalog product through the codec:

  STEP 1 — Build
    The product object is lowered into an RDF graph. Images become an
    ItemList, the brand is built as the type named in its ``type`` field.

  STEP 2 — Decode
    The graph is lifted back into an object, with image order restored
    from list positions.

  STEP 3 — Lookup
    The record is found again by its uuid and its type is read back.

  STEP 4 — SHACL
    The graph is validated against shapes generated from the schema, then
    a required triple is removed to show the violation.

Run with ``python -m case_studies.catalog.run``.
"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../.."))

import logging

from rdflib import URIRef

from graphcodec.errors import MissingTypeDiscriminatorError
from graphcodec.shacl_bridge import shacl_validate

from .domain import (
    UUID_PREDICATE,
    build_codec,
    record_uri,
    sample_minimal_product,
    sample_product,
)


def print_header(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def print_step(number: int, name: str) -> None:
    print(f"\n{'─' * 60}")
    print(f"  STEP {number}: {name}")
    print(f"{'─' * 60}")


def print_object(obj, indent: int = 4) -> None:
    pad = " " * indent
    for key, value in obj.items():
        if isinstance(value, dict):
            print(f"{pad}{key}:")
            print_object(value, indent + 2)
        elif isinstance(value, list) and value and isinstance(value[0], dict):
            print(f"{pad}{key}: [{len(value)}]")
            for entry in value:
                print_object(entry, indent + 4)
                print(f"{pad}  --")
        else:
            print(f"{pad}{key}: {value!r}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print_header("Catalog Records: Object ⇄ Graph")

    codec = build_codec()
    product = sample_product()
    node = record_uri(product["uuid"])

    print_step(1, "Build")
    store = codec.build_graph("IProduct", node, product)
    print(f"\n  {len(store)} triples for {node}\n")
    for line in store.serialize(format="turtle").splitlines():
        print(f"    {line}")

    print_step(2, "Decode")
    cache = codec.new_cache()
    decoded = codec.decode_resource(store, node, cache)
    print()
    print_object(decoded)
    print("\n  Image order:", [img["url"].rsplit("/", 1)[-1] for img in decoded["image"]])

    print_step(3, "Lookup")
    found = codec.find_by_uuid(store, product["uuid"], UUID_PREDICATE)
    print(f"\n  uuid {product['uuid'].lower()} → {found}")
    print(f"  type of {found}: {codec.get_type(store, found)}")

    minimal = sample_minimal_product()
    minimal_node = record_uri(minimal["uuid"])
    codec.build_resource(store, "IProduct", minimal_node, minimal, cache)
    print(f"  second record decoded with the same cache: "
          f"{codec.decode_resource(store, minimal_node, cache)['name']}")

    bad = sample_product()
    del bad["brand"]["type"]
    before = len(store)
    try:
        codec.build_resource(store, "IProduct", record_uri("bad"), bad, cache)
    except MissingTypeDiscriminatorError as e:
        print(f"\n  Build rejected: {e}")
        print(f"  Store unchanged: {len(store) == before}")

    print_step(4, "SHACL")
    result = shacl_validate(codec.registry, store)
    print()
    for line in result.summary().split("\n"):
        print(f"  {line}")

    store.remove((URIRef(node), URIRef("http://schema.org/sku"), None))
    result = shacl_validate(codec.registry, store)
    print("\n  After removing the sku triple:")
    for line in result.summary().split("\n"):
        print(f"  {line}")

    print(f"\n{'=' * 60}")
    print("  Catalog Case Study Complete")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
