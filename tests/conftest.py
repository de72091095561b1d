"""Shared fixtures for searchdoc tests."""

import json
import os
from typing import Optional

import pytest

from searchdoc.entities import DocumentableEntity, DocumentedMethod, EntityKind


def _make_entity(
    name: str,
    parent: Optional[DocumentableEntity] = None,
    *,
    kind: EntityKind = EntityKind.CLASS,
    full_name: Optional[str] = None,
    documented: bool = True,
    path: Optional[str] = None,
    superclass: Optional[str] = None,
    methods: tuple = (),
) -> DocumentableEntity:
    if full_name is None:
        full_name = f"{parent.full_name}::{name}" if parent is not None else name
    if path is None:
        path = "classes/" + full_name.replace("::", "/") + ".html"
    entity = DocumentableEntity(
        name=name,
        full_name=full_name,
        kind=kind,
        path=path,
        documents_self=documented,
        superclass_name=superclass,
        documented_methods=[
            DocumentedMethod(m, summary, f"{path}#method-i-{m}") for m, summary in methods
        ],
    )
    if parent is not None:
        parent.add_child(entity)
    return entity


def _make_file(relative_name: str, path: Optional[str] = None) -> DocumentableEntity:
    if path is None:
        path = "files/" + relative_name.replace(".", "_") + ".html"
    return DocumentableEntity(
        name=relative_name.rsplit("/", 1)[-1],
        full_name=relative_name,
        kind=EntityKind.FILE,
        path=path,
        documents_self=True,
    )


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep user config files and SEARCHDOC_/HORO_ variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for var in list(os.environ):
        if var.startswith(("SEARCHDOC_", "HORO_")):
            monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_class():
    """Factory for class entities, linked under ``parent`` when given."""
    return _make_entity


@pytest.fixture
def make_module():
    """Factory for module entities."""

    def factory(name, parent=None, **kwargs):
        return _make_entity(name, parent, kind=EntityKind.MODULE, **kwargs)

    return factory


@pytest.fixture
def make_file():
    """Factory for file entities keyed by relative name."""
    return _make_file


@pytest.fixture
def scenario_a(make_class):
    """Two top-level classes A and B < A; only B is documented."""
    a = make_class("A", documented=False)
    b = make_class("B", superclass="A", methods=[("run", "Runs it")])
    return [a, b]


@pytest.fixture
def manifest_data():
    """A small manifest: a module with a nested class, a subclass, three files."""
    return {
        "classes": [
            {
                "name": "Outer",
                "full_name": "Outer",
                "kind": "module",
                "path": "classes/Outer.html",
                "documents_self": True,
            },
            {
                "name": "Inner",
                "full_name": "Outer::Inner",
                "kind": "class",
                "parent": "Outer",
                "path": "classes/Outer/Inner.html",
                "documents_self": True,
                "superclass": "Base",
                "methods": [
                    {
                        "name": "run",
                        "summary": "Runs it",
                        "anchor_url": "classes/Outer/Inner.html#method-i-run",
                    }
                ],
            },
            {
                "name": "Base",
                "full_name": "Base",
                "kind": "class",
                "path": "classes/Base.html",
                "documents_self": False,
            },
        ],
        "files": [
            {"name": "README.md", "full_name": "README.md", "path": "files/README_md.html"},
            {"name": "b.rb", "full_name": "lib/b.rb", "path": "files/lib/b_rb.html"},
            {"name": "c.rb", "full_name": "lib/c.rb", "path": "files/lib/c_rb.html"},
        ],
    }


@pytest.fixture
def manifest_file(tmp_path, manifest_data):
    """The manifest written to disk."""
    path = tmp_path / "manifest.json"
    path.write_text(json.dumps(manifest_data), encoding="utf-8")
    return path
