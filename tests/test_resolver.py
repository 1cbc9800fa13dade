"""Tests for effective property resolution through extends chains."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import inspect

import pytest
from graphcodec.errors import UnknownTypeError
from graphcodec.resolver import resolve, resolve_properties, resolve_uris
from graphcodec.types import PropertyCache

from conftest import EX, library_registry


class TestInheritance:
    def test_inherited_property_resolves_through_child(self):
        props = resolve_properties(library_registry(), "IPerson", PropertyCache())
        assert "uuid" in props
        assert "label" in props
        assert props["label"].uri == str(EX["Entity.label"])

    def test_child_redeclaration_wins(self):
        props = resolve_properties(library_registry(), "IBook", PropertyCache())
        assert props["label"].uri == str(EX["Book.title"])

    def test_child_redeclaration_wins_in_uri_map(self):
        uris = resolve_uris(library_registry(), "IBook", PropertyCache())
        assert uris[str(EX["Book.title"])] == "label"
        assert str(EX["Entity.label"]) not in uris

    def test_parent_properties_come_first(self):
        props = resolve_properties(library_registry(), "IBook", PropertyCache())
        keys = list(props)
        assert keys[:2] == ["uuid", "label"]
        assert keys.index("pages") > keys.index("label")

    def test_type_without_extends(self):
        props = resolve_properties(library_registry(), "IPublisher", PropertyCache())
        assert list(props) == ["name"]

    def test_two_levels(self):
        props = resolve_properties(library_registry(), "IImprint", PropertyCache())
        assert set(props) == {"name", "parent"}


class TestMemoization:
    def test_cached_result_is_reused(self):
        reg = library_registry()
        cache = PropertyCache()
        first = resolve(reg, "IBook", cache)
        assert "IBook" in cache
        assert resolve(reg, "IBook", cache) is first

    def test_parent_resolved_into_cache(self):
        cache = PropertyCache()
        resolve(library_registry(), "IBook", cache)
        assert "IEntity" in cache

    def test_child_overlay_does_not_touch_parent_entry(self):
        reg = library_registry()
        cache = PropertyCache()
        resolve(reg, "IBook", cache)
        parent = cache["IEntity"]
        assert parent.properties["label"].uri == str(EX["Entity.label"])
        assert "pages" not in parent.properties

    def test_cache_entry_wins_over_registry(self):
        reg = library_registry()
        cache = PropertyCache()
        sentinel = resolve(reg, "IPublisher", cache)
        cache["IBook"] = sentinel
        assert resolve_properties(reg, "IBook", cache) is sentinel.properties


class TestErrors:
    def test_unknown_type(self):
        with pytest.raises(UnknownTypeError):
            resolve_properties(library_registry(), "INope", PropertyCache())

    def test_unknown_type_not_cached(self):
        cache = PropertyCache()
        with pytest.raises(UnknownTypeError):
            resolve_uris(library_registry(), "INope", cache)
        assert "INope" not in cache

    def test_resolve_takes_registry_key_and_cache(self):
        params = list(inspect.signature(resolve).parameters)
        assert params == ["registry", "type_key", "cache"]
