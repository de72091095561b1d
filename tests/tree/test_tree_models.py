"""Tests for tree node types and their wire form."""

import json

from searchdoc.tree.models import (
    ClassNode,
    FileLeaf,
    GroupNode,
    count_nodes,
    dump_tree,
    tree_to_wire,
)


class TestWireShape:
    """Every node flattens to [name, path, suffix_or_label, children]."""

    def test_class_node(self):
        node = ClassNode("B", "classes/B.html", " < A")
        assert node.to_wire() == ["B", "classes/B.html", " < A", []]

    def test_group_node_puts_label_in_third_slot(self):
        node = GroupNode("lib", [FileLeaf("a.rb", "files/a.html")])
        assert node.to_wire() == ["", "", "lib", [["a.rb", "files/a.html", "", []]]]

    def test_file_leaf(self):
        assert FileLeaf("a.rb", "u").to_wire() == ["a.rb", "u", "", []]

    def test_nested_class_nodes(self):
        tree = [ClassNode("A", children=[ClassNode("B")])]
        assert tree_to_wire(tree) == [["A", "", "", [["B", "", "", []]]]]


class TestSerialization:
    def test_dump_is_compact_json(self):
        dumped = dump_tree([ClassNode("A", "a.html")])
        assert dumped == '[["A","a.html","",[]]]'
        assert json.loads(dumped) == [["A", "a.html", "", []]]

    def test_non_ascii_kept(self):
        assert "Ünïcode" in dump_tree([ClassNode("Ünïcode")])

    def test_empty_forest(self):
        assert dump_tree([]) == "[]"


class TestCountNodes:
    def test_counts_groups_and_leaves(self):
        tree = [
            GroupNode("files", [FileLeaf("a", "u"), GroupNode("lib", [FileLeaf("b", "u")])]),
            ClassNode("A", children=[ClassNode("B")]),
        ]
        assert count_nodes(tree) == 6
