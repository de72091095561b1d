"""Tests for the manifest adapter and collection validation."""

import json

import pytest

from searchdoc.entities import (
    EntityKind,
    collection_from_manifest,
    load_manifest,
    validate_collection,
)
from searchdoc.exceptions import (
    DuplicateEntityError,
    EntityError,
    MissingFieldError,
    ParentCycleError,
    UnresolvedParentError,
)


class TestLoadManifest:
    def test_links_parents(self, manifest_file):
        collection = load_manifest(manifest_file)
        inner = collection.find("Outer::Inner")
        assert inner.parent is collection.find("Outer")
        assert collection.find("Outer").children == [inner]

    def test_fields(self, manifest_file):
        collection = load_manifest(manifest_file)
        inner = collection.find("Outer::Inner")
        assert inner.kind is EntityKind.CLASS
        assert inner.superclass_name == "Base"
        assert inner.documented_methods[0].anchor_url == "classes/Outer/Inner.html#method-i-run"
        assert collection.find("Outer").is_module

    def test_files(self, manifest_file):
        collection = load_manifest(manifest_file)
        assert [f.relative_name for f in collection.files] == ["README.md", "lib/b.rb", "lib/c.rb"]
        assert all(f.kind is EntityKind.FILE for f in collection.files)
        assert len(collection) == 6

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(EntityError):
            load_manifest(path)

    def test_find_missing(self, manifest_file):
        assert load_manifest(manifest_file).find("Nope") is None


class TestCollectionFromManifest:
    def test_empty_manifest(self):
        collection = collection_from_manifest({})
        assert collection.classes == [] and collection.files == []

    def test_name_derived_from_full_name(self):
        collection = collection_from_manifest({"classes": [{"full_name": "A::B"}]})
        assert collection.classes[0].name == "B"

    def test_children_add_aliased_edges(self):
        data = {
            "classes": [
                {"full_name": "Alpha", "kind": "module"},
                {"full_name": "Beta", "kind": "module"},
                {"full_name": "Beta::Shared", "parent": "Beta"},
            ]
        }
        data["classes"][0]["children"] = ["Beta::Shared"]
        collection = collection_from_manifest(data)
        shared = collection.find("Beta::Shared")
        assert shared.parent is collection.find("Beta")
        assert shared in collection.find("Alpha").children

    def test_not_an_object(self):
        with pytest.raises(EntityError):
            collection_from_manifest(json.loads("[]"))

    def test_missing_full_name(self):
        with pytest.raises(MissingFieldError) as exc:
            collection_from_manifest({"classes": [{"name": "A"}]})
        assert exc.value.field == "full_name"

    def test_missing_method_name(self):
        with pytest.raises(MissingFieldError):
            collection_from_manifest({"classes": [{"full_name": "A", "methods": [{}]}]})

    def test_unknown_kind(self):
        with pytest.raises(EntityError):
            collection_from_manifest({"classes": [{"full_name": "A", "kind": "trait"}]})

    def test_unresolved_parent(self):
        with pytest.raises(UnresolvedParentError) as exc:
            collection_from_manifest({"classes": [{"full_name": "A::B", "parent": "A"}]})
        assert exc.value.reference == "A"

    def test_unresolved_child(self):
        with pytest.raises(UnresolvedParentError):
            collection_from_manifest({"classes": [{"full_name": "A", "children": ["Z"]}]})

    def test_self_parent(self):
        data = {"classes": [{"full_name": "A", "parent": "A", "documents_self": True}]}
        with pytest.raises(ParentCycleError) as exc:
            collection_from_manifest(data)
        assert exc.value.chain == ["A", "A"]

    def test_two_entity_parent_cycle(self):
        data = {
            "classes": [
                {"full_name": "A", "parent": "B", "documents_self": True},
                {"full_name": "B", "parent": "A"},
            ]
        }
        with pytest.raises(ParentCycleError) as exc:
            collection_from_manifest(data)
        assert exc.value.chain == ["A", "B", "A"]
        assert isinstance(exc.value, EntityError)

    def test_cycle_above_entity_reported_for_its_members(self):
        data = {
            "classes": [
                {"full_name": "Leaf", "parent": "A"},
                {"full_name": "A", "parent": "B"},
                {"full_name": "B", "parent": "A"},
            ]
        }
        with pytest.raises(ParentCycleError) as exc:
            collection_from_manifest(data)
        assert exc.value.full_name == "A"

    def test_aliased_child_stays_top_level(self):
        data = {
            "classes": [
                {"full_name": "Outer", "kind": "module", "children": ["Top"]},
                {"full_name": "Top", "children": ["Outer"]},
            ]
        }
        collection = collection_from_manifest(data)
        assert collection.find("Top").parent is None
        assert collection.find("Outer").parent is None

    def test_duplicate_full_name(self):
        with pytest.raises(DuplicateEntityError):
            collection_from_manifest({"classes": [{"full_name": "A"}, {"full_name": "A"}]})


class TestValidateCollection:
    def test_valid(self, make_class, make_file):
        validate_collection([make_class("A")], [make_file("a.rb")])

    def test_file_in_class_collection(self, make_file):
        with pytest.raises(EntityError):
            validate_collection([make_file("a.rb")], [])

    def test_class_in_file_collection(self, make_class):
        with pytest.raises(EntityError):
            validate_collection([], [make_class("A")])

    def test_duplicate_across_collections(self, make_class, make_file):
        with pytest.raises(DuplicateEntityError):
            validate_collection([make_class("a.rb")], [make_file("a.rb")])

    def test_missing_name(self, make_class):
        entity = make_class("A")
        entity.name = ""
        with pytest.raises(MissingFieldError):
            validate_collection([entity], [])
