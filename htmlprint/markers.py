"""Literal tag markers and the borrowed markers a node prints around itself."""

from __future__ import annotations

from .ast import Node
from .borrowing import (
    needs_last_child_closing_end_borrow,
    needs_next_opening_borrow,
    needs_parent_closing_start_borrow,
    needs_parent_opening_end_borrow,
    needs_prev_closing_end_borrow,
)
from .errors import SelfClosingMarkerError, UnexpectedNodeError


def opening_tag_start_marker(node: Node) -> str:
    if node.kind == "comment":
        return "<!--"
    if node.kind == "ieConditionalComment":
        return f"<!--[if {node.condition}"
    if node.kind in ("tag", "directive"):
        return f"<{node.name}"
    raise UnexpectedNodeError(node, "opening_tag_start_marker")


def opening_tag_end_marker(node: Node) -> str:
    if node.is_self_closing:
        raise SelfClosingMarkerError(node, "opening tag end marker")
    if node.kind == "ieConditionalComment":
        return "]>"
    if node.kind == "tag":
        return ">"
    raise UnexpectedNodeError(node, "opening_tag_end_marker")


def closing_tag_start_marker(node: Node) -> str:
    if node.is_self_closing:
        raise SelfClosingMarkerError(node, "closing tag start marker")
    if node.kind == "ieConditionalComment":
        return "<!"
    if node.kind == "tag":
        return f"</{node.name}"
    raise UnexpectedNodeError(node, "closing_tag_start_marker")


def closing_tag_end_marker(node: Node) -> str:
    if node.kind == "comment":
        return "-->"
    if node.kind == "ieConditionalComment":
        return "[endif]-->"
    if node.kind == "tag":
        return "/>" if node.is_self_closing else ">"
    if node.kind == "directive":
        return ">"
    raise UnexpectedNodeError(node, "closing_tag_end_marker")


def opening_tag_prefix(node: Node) -> str:
    """Marker borrowed from the parent or previous sibling, printed before ``node``."""
    if needs_parent_opening_end_borrow(node):
        return opening_tag_end_marker(node.parent)
    if needs_prev_closing_end_borrow(node):
        return closing_tag_end_marker(node.prev)
    return ""


def closing_tag_prefix(node: Node) -> str:
    """The last child's ``>``, printed right before ``node``'s own ``</name``."""
    if needs_last_child_closing_end_borrow(node):
        return closing_tag_end_marker(node.last_child)
    return ""


def closing_tag_suffix(node: Node) -> str:
    """Marker borrowed from the parent or next sibling, printed after ``node``."""
    if needs_parent_closing_start_borrow(node):
        return closing_tag_start_marker(node.parent)
    if needs_next_opening_borrow(node):
        return opening_tag_start_marker(node.next)
    return ""
