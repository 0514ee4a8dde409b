from __future__ import annotations

import pytest
from pydantic import ValidationError

from htmlprint.ast import NodeRecord, Tree, build_tree, tree_from_dict
from htmlprint.models import NodeSpec, PrintOptions
from tree_helpers import build, comment, inline_example, tag, text


def test_camel_case_aliases_are_accepted() -> None:
    spec = NodeSpec.model_validate(
        {
            "type": "text",
            "data": "x",
            "isLeadingSpaceSensitive": True,
            "hasTrailingSpaces": True,
            "startLocation": {"line": 2, "column": 4, "offset": 10},
        }
    )

    assert spec.kind == "text"
    assert spec.is_leading_space_sensitive
    assert spec.has_trailing_spaces
    assert spec.start_location.offset == 10


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "tag"},
        {"type": "directive", "data": "html"},
        {"type": "ieConditionalComment"},
        {"type": "text", "data": "x", "children": [{"type": "text", "data": "y"}]},
        {"type": "comment", "data": "x", "attributes": [{"key": "a"}]},
        {"type": "element", "name": "p"},
        {"type": "text", "startLocation": {"line": 0, "column": 0}},
        {"type": "root", "children": [{"type": "text", "data": "x", "isLeadingSpaceSensitive": True}]},
        {"type": "root", "children": [{"type": "text", "data": "x", "isTrailingSpaceSensitive": True}]},
    ],
)
def test_invalid_nodes_are_rejected(payload) -> None:
    with pytest.raises(ValidationError):
        NodeSpec.model_validate(payload)


def test_print_options_defaults_and_validation() -> None:
    options = PrintOptions()

    assert (options.print_width, options.tab_width, options.use_tabs) == (80, 2, False)
    assert options.max_depth == 128
    assert options.embed_options() == {"print_width": 80, "tab_width": 2, "use_tabs": False}
    with pytest.raises(ValidationError):
        PrintOptions(print_width=0)
    with pytest.raises(ValidationError):
        PrintOptions(printWidth=40)


def test_build_tree_links_siblings_in_document_order() -> None:
    tree = inline_example()
    div = tree.root.first_child
    a, span, c = div.children

    assert a.prev is None and a.next == span
    assert span.prev == a and span.next == c
    assert c.next is None
    assert span.parent == div and div.parent == tree.root
    assert tree.root.parent is None
    assert [n.depth for n in (div, a, span.first_child)] == [1, 2, 3]
    assert tree.max_depth == 3


def test_attributes_are_nodes_outside_the_sibling_chain() -> None:
    tree = build(tag("a", text("x"), attrs=[("href", "/"), ("download", None)]))
    a = tree.root.first_child
    href, download = a.attributes

    assert (href.kind, href.key, href.value) == ("attribute", "href", "/")
    assert download.value is None
    assert href.parent == a
    assert href.prev is None and href.next is None
    assert a.children == [a.first_child]
    assert a.attr_map == {"href": "/", "download": None}


def test_node_views_are_equal_per_tree_and_index() -> None:
    tree = build(text("x"), comment("y"))

    assert tree.node(1) == tree.root.first_child
    assert hash(tree.node(1)) == hash(tree.root.first_child)
    assert tree.node(1) != tree.node(2)
    assert build(text("x")).node(1) != tree.node(1)
    assert len(tree) == 3
    assert [n.kind for n in tree.iter_nodes()] == ["root", "text", "comment"]


def test_last_descendant() -> None:
    tree = build(tag("p", text("a"), tag("b", text("c"))))
    p = tree.root.first_child

    assert p.last_descendant.data == "c"
    assert p.first_child.last_descendant == p.first_child


def test_tree_requires_root() -> None:
    with pytest.raises(ValueError):
        tree_from_dict({"type": "text", "data": "x"})
    with pytest.raises(ValueError):
        Tree([NodeRecord(kind="text")])
    with pytest.raises(ValueError):
        build_tree(NodeSpec.model_validate({"type": "comment", "data": "x"}))


def test_missing_record_attribute_raises() -> None:
    node = build(text("x")).root

    with pytest.raises(AttributeError):
        node.not_a_field


def test_root_children_with_spaces_may_stay_sensitive() -> None:
    tree = build(
        text("x", is_leading_space_sensitive=True, has_leading_spaces=True),
        text("y", is_trailing_space_sensitive=True, has_trailing_spaces=True),
    )

    assert [child.data for child in tree.root.children] == ["x", "y"]
