"""Tests for the read-only navigation facade."""

from textwrap import dedent

import pytest

from kantara.navigation import KantaraNode
from kantara.parser import parse

SOURCE = dedent(
    """
    a {
        b mode: dark {
            c: 42
            label: "inner"
        }
        b {
            c: 7
        }
        handler(x) {
            return x
        }
        @import nonfinal "extra.dsl"
    }
    top: true
    """
)


@pytest.fixture
def tree() -> KantaraNode:
    return KantaraNode(parse(SOURCE))


class TestLookup:
    def test_children_are_wrapped(self, tree):
        children = tree.children()
        assert all(isinstance(child, KantaraNode) for child in children)
        assert [child.name for child in children] == ["a", "top"]

    def test_find_returns_first_match(self, tree):
        b = tree.find("a").find("b")
        assert b.prop("mode") == "dark"

    def test_find_missing(self, tree):
        assert tree.find("missing") is None

    def test_find_all(self, tree):
        assert len(tree.find("a").find_all("b")) == 2

    def test_prop_missing_is_none(self, tree):
        assert tree.find("a").prop("mode") is None
        assert tree.find("top").prop("anything") is None

    def test_filter_by_kind(self, tree):
        a = tree.find("a")
        assert [n.name for n in a.filter_by_kind("section")] == ["b", "b"]
        assert [n.name for n in a.filter_by_kind("function")] == ["handler"]
        assert [n.value for n in a.filter_by_kind("import")] == ["extra.dsl"]

    def test_has_child_and_map_children(self, tree):
        a = tree.find("a")
        assert a.has_child("handler")
        assert not a.has_child("nope")
        assert a.map_children(lambda child: child.kind) == ["section", "section", "function", "import"]

    def test_function_accessors(self, tree):
        handler = tree.find("a").find("handler")
        assert handler.arguments == ["x"]
        assert handler.body == "return x"
        assert handler.children() == []

    def test_raw_and_equality(self, tree):
        first = tree.find("a")
        again = tree.find("a")
        assert first == again
        assert first.raw is again.raw
        assert first != tree


class TestSearch:
    def test_search_includes_self(self, tree):
        assert tree.search("root") == tree

    def test_search_depth_first_preorder(self, tree):
        found = tree.search("c")
        assert found.kind == "property"
        assert found.value == 42

    def test_search_missing(self, tree):
        assert tree.search("zzz") is None

    def test_search_does_not_enter_function_body(self, tree):
        assert tree.search("return") is None


class TestNavigate:
    def test_property_leaf_returns_scalar(self, tree):
        assert tree.navigate("a.b.c") == 42

    def test_inline_attribute_returns_scalar(self, tree):
        assert tree.navigate("a.b.mode") == "dark"

    def test_section_returns_wrapper(self, tree):
        b = tree.navigate("a.b")
        assert isinstance(b, KantaraNode)
        assert b.kind == "section"
        assert b.prop("mode") == "dark"

    def test_function_returns_wrapper(self, tree):
        handler = tree.navigate("a.handler")
        assert isinstance(handler, KantaraNode)
        assert handler.body == "return x"

    def test_missing_segment(self, tree):
        assert tree.navigate("a.x.c") is None
        assert tree.navigate("a.b.missing") is None

    def test_empty_path_returns_self(self, tree):
        assert tree.navigate("") is tree

    def test_top_level_property(self, tree):
        assert tree.navigate("top") is True


class TestPrintTree:
    def test_prints_kinds_and_names(self, tree, capsys):
        tree.print_tree()
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "root: root",
            "  section: a",
            "    section: b",
            "      property: c",
            "      property: label",
            "    section: b",
            "      property: c",
            "    function: handler",
            "    import: extra.dsl",
            "  property: top",
        ]
