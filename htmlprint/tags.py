"""Opening and closing tag documents, with borrowed markers left out."""

from __future__ import annotations

from typing import Callable

from .ast import Node
from .borrowing import (
    needs_last_child_closing_end_borrow,
    needs_next_opening_borrow,
    needs_parent_closing_start_borrow,
    needs_parent_opening_end_borrow,
    needs_prev_closing_end_borrow,
)
from .doc.builders import Doc, break_parent, concat, group, indent, join, line, softline
from .markers import (
    closing_tag_end_marker,
    closing_tag_prefix,
    closing_tag_start_marker,
    closing_tag_suffix,
    opening_tag_end_marker,
    opening_tag_prefix,
    opening_tag_start_marker,
)

PrintFn = Callable[[Node], Doc]


def _prev_borrows_opening(node: Node) -> bool:
    return node.prev is not None and needs_next_opening_borrow(node.prev)


def print_opening_tag_start(node: Node) -> Doc:
    if _prev_borrows_opening(node):
        return ""
    return concat([opening_tag_prefix(node), opening_tag_start_marker(node)])


def print_opening_tag_end(node: Node) -> Doc:
    first_child = node.first_child
    if first_child is not None and needs_parent_opening_end_borrow(first_child):
        return ""
    return opening_tag_end_marker(node)


def _print_attributes(node: Node, print_attribute: PrintFn) -> Doc:
    attributes = node.attributes
    if not attributes:
        # <br />
        #    ^
        return " " if node.is_self_closing else ""

    first_child = node.first_child
    if first_child is not None and needs_parent_opening_end_borrow(first_child):
        # 123<a
        #   attr
        #       ~
        #   >456
        trailing: Doc = ""
    elif node.is_self_closing:
        trailing = line
    else:
        trailing = softline

    return group(
        concat(
            [
                break_parent if _prev_borrows_opening(node) else "",
                indent(concat([line, join(line, [print_attribute(attr) for attr in attributes])])),
                trailing,
            ]
        )
    )


def print_opening_tag(node: Node, print_attribute: PrintFn) -> Doc:
    return concat(
        [
            print_opening_tag_start(node),
            _print_attributes(node, print_attribute),
            "" if node.is_self_closing else print_opening_tag_end(node),
        ]
    )


def print_closing_tag_start(node: Node) -> Doc:
    last_child = node.last_child
    if last_child is not None and needs_parent_closing_start_borrow(last_child):
        return ""
    return concat([closing_tag_prefix(node), closing_tag_start_marker(node)])


def print_closing_tag_end(node: Node) -> Doc:
    if node.next is not None:
        borrowed = needs_prev_closing_end_borrow(node.next)
    else:
        borrowed = node.parent is not None and needs_last_child_closing_end_borrow(node.parent)
    if borrowed:
        return ""
    return concat([closing_tag_end_marker(node), closing_tag_suffix(node)])


def print_closing_tag(node: Node) -> Doc:
    return concat(
        [
            "" if node.is_self_closing else print_closing_tag_start(node),
            print_closing_tag_end(node),
        ]
    )
