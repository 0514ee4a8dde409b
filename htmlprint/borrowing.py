"""Decide which node owns the marker characters at a tight boundary.

When no whitespace may appear between two nodes, the marker that would
naturally end one node (``>``, ``</b``) is printed by its neighbour instead,
so a line break can only fall inside a tag. Each predicate answers one
"who prints this marker" question from flags and structure alone.
"""

from __future__ import annotations

from .ast import Node


def needs_next_opening_borrow(node: Node) -> bool:
    """Text glued to the next tag prints that tag's ``<name``.

    ::

        123<p
           ^^
        >
    """
    return (
        node.kind == "text"
        and node.is_trailing_space_sensitive
        and not node.has_trailing_spaces
        and node.next is not None
    )


def needs_parent_opening_end_borrow(node: Node) -> bool:
    """A glued first child prints its parent's ``>``.

    ::

        <p
          >123
          ^
    """
    return node.is_leading_space_sensitive and not node.has_leading_spaces and node.prev is None


def needs_prev_closing_end_borrow(node: Node) -> bool:
    """A node glued to its previous sibling prints that sibling's ``>``.

    ::

        <p></p
        >123
        ^
    """
    return node.is_leading_space_sensitive and not node.has_leading_spaces and node.prev is not None


def needs_last_child_closing_end_borrow(node: Node) -> bool:
    """An element prints its glued last child's ``>`` before its own ``</name``.

    ::

        <p
          ><a></a
          ></p
          ^
        >
    """
    last_child = node.last_child
    return (
        last_child is not None
        and last_child.is_trailing_space_sensitive
        and not last_child.has_trailing_spaces
        and last_child.last_descendant.kind != "text"
    )


def needs_parent_closing_start_borrow(node: Node) -> bool:
    """A glued last child ending in text prints its parent's ``</name``.

    ::

        <p>
          123</p
             ^^^
        >
    """
    return (
        node.next is None
        and not node.has_trailing_spaces
        and node.is_trailing_space_sensitive
        and node.last_descendant.kind == "text"
    )
