"""Separators between siblings and blank-line preservation."""

from __future__ import annotations

from typing import Callable

from .ast import Node
from .borrowing import needs_next_opening_borrow, needs_prev_closing_end_borrow
from .doc.builders import Doc, concat, hardline, line, softline


def child_separator(child: Node) -> Doc:
    """The document placed before ``child`` (empty for a first child)."""
    prev = child.prev
    if prev is None:
        return ""
    if needs_next_opening_borrow(prev) and (
        # 123<a
        #      ~
        #   ><b>
        child.first_child is not None
        # 123<br />
        #        ~
        or (child.is_self_closing and not child.attributes)
    ):
        return ""
    # <x
    #   >123</x
    #          ~
    # >456
    if needs_prev_closing_end_borrow(child) and not prev.is_self_closing:
        return ""
    return line if child.has_leading_spaces and child.is_leading_space_sensitive else softline


def has_blank_line_after(child: Node) -> bool:
    """True when one blank line must follow ``child``.

    Any run of blank lines in the source collapses to one.
    """
    following = child.next
    if following is None:
        return False
    if child.force_next_empty_line:
        return True
    end, start = child.end_location, following.start_location
    if end is None or start is None:
        return False
    return end.line + 1 < start.line


def print_children(node: Node, print_child: Callable[[Node], Doc]) -> Doc:
    return concat(
        [
            concat(
                [
                    child_separator(child),
                    print_child(child),
                    hardline if has_blank_line_after(child) else "",
                ]
            )
            for child in node.children
        ]
    )
