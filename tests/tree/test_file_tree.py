"""Tests for the file tree and its trie."""

import pytest

from searchdoc.exceptions import DuplicateEntityError, EntityError, MissingFieldError
from searchdoc.tree import FilesTrie, build_file_tree
from searchdoc.tree.models import tree_to_wire


class TestScenarioB:
    """a.rb, lib/b.rb, lib/c.rb."""

    def test_file_tree_shape(self, make_file):
        files = [
            make_file("lib/c.rb", "files/lib/c_rb.html"),
            make_file("a.rb", "files/a_rb.html"),
            make_file("lib/b.rb", "files/lib/b_rb.html"),
        ]
        assert tree_to_wire(build_file_tree(files)) == [
            [
                "",
                "",
                "files",
                [
                    ["a.rb", "files/a_rb.html", "", []],
                    [
                        "",
                        "",
                        "lib",
                        [
                            ["b.rb", "files/lib/b_rb.html", "", []],
                            ["c.rb", "files/lib/c_rb.html", "", []],
                        ],
                    ],
                ],
            ]
        ]


class TestSingleFileSuppression:
    """No files group below two files."""

    def test_no_files(self):
        assert build_file_tree([]) == []

    def test_one_file(self, make_file):
        assert build_file_tree([make_file("README.md")]) == []

    def test_two_files(self, make_file):
        tree = build_file_tree([make_file("a"), make_file("b")])
        assert len(tree) == 1
        assert tree[0].label == "files"


class TestOrdering:
    """Each directory level is sorted by segment name."""

    def test_leaves_and_directories_share_one_ordering(self, make_file):
        files = [make_file(p) for p in ["z.rb", "B/x.rb", "a/y.rb", "Makefile"]]
        group = build_file_tree(files)[0]
        assert [n[0] or n[2] for n in tree_to_wire(group.children)] == [
            "B",
            "Makefile",
            "a",
            "z.rb",
        ]

    def test_deep_nesting(self, make_file):
        files = [make_file("a/b/c/d.rb"), make_file("a/b/e.rb")]
        group = build_file_tree(files)[0]
        a = group.children[0]
        b = a.children[0]
        assert (a.label, b.label) == ("a", "b")
        assert tree_to_wire(b.children) == [
            ["", "", "c", [["d.rb", "files/a/b/c/d_rb.html", "", []]]],
            ["e.rb", "files/a/b/e_rb.html", "", []],
        ]


class TestFilesTrie:
    """Insertion rules."""

    def test_add_presplit_segments(self):
        trie = FilesTrie()
        trie.add(["lib", "a.rb"], "u1")
        assert trie.children["lib"].children == {"a.rb": "u1"}

    def test_dot_and_empty_segments_ignored(self):
        trie = FilesTrie()
        trie.add("./lib//a.rb", "u1")
        assert list(trie.children) == ["lib"]

    def test_duplicate_file_rejected(self):
        trie = FilesTrie()
        trie.add("lib/a.rb", "u1")
        with pytest.raises(DuplicateEntityError):
            trie.add("lib/a.rb", "u2")

    def test_file_over_directory_rejected(self):
        trie = FilesTrie()
        trie.add("lib/a.rb", "u1")
        with pytest.raises(EntityError):
            trie.add("lib", "u2")

    def test_directory_over_file_rejected(self):
        trie = FilesTrie()
        trie.add("lib", "u1")
        with pytest.raises(EntityError):
            trie.add("lib/a.rb", "u2")

    def test_empty_path_rejected(self):
        with pytest.raises(MissingFieldError):
            FilesTrie().add("", "u1")
