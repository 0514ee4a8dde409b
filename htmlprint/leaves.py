"""Leaf renderers: text, comments, directives and attributes."""

from __future__ import annotations

from .ast import Node
from .borrowing import (
    needs_last_child_closing_end_borrow,
    needs_next_opening_borrow,
    needs_prev_closing_end_borrow,
)
from .doc.builders import (
    Doc,
    break_parent,
    concat,
    fill,
    group,
    hardline,
    indent,
    join,
    line,
    literalline,
)
from .doc.utils import replace_newlines
from .markers import closing_tag_suffix, opening_tag_prefix
from .tags import print_closing_tag_end, print_opening_tag_start
from .text_utils import dedent_string, get_comment_data, split_words, strip_edge_blank_lines


def print_text(node: Node) -> Doc:
    data = node.data or ""
    if not node.is_white_space_sensitive:
        body: Doc = fill(join(line, split_words(data)).parts)
    elif node.is_indentation_sensitive:
        body = concat(replace_newlines(strip_edge_blank_lines(data), literalline))
    else:
        body = concat(replace_newlines(dedent_string(strip_edge_blank_lines(data)), hardline))
    return concat([opening_tag_prefix(node), body, closing_tag_suffix(node)])


def _end_marker_borrowed(node: Node) -> bool:
    if node.next is not None:
        return needs_prev_closing_end_borrow(node.next)
    return node.parent is not None and needs_last_child_closing_end_borrow(node.parent)


def print_comment(node: Node) -> Doc:
    """Render a comment or directive; both share the indent-and-wrap layout."""
    data = get_comment_data(node.data or "")
    is_directive = node.kind == "directive"
    if not data.strip():
        inner: Doc = ""
    else:
        prev_borrows = node.prev is not None and needs_next_opening_borrow(node.prev)
        if is_directive:
            closing_space: Doc = ""
        else:
            closing_space = " " if _end_marker_borrowed(node) else line
        inner = concat(
            [
                indent(
                    concat(
                        [
                            break_parent if prev_borrows else "",
                            " " if is_directive else line,
                            concat(replace_newlines(data, hardline)),
                        ]
                    )
                ),
                closing_space,
            ]
        )
    return concat(
        [
            group(concat([print_opening_tag_start(node), inner])),
            group(print_closing_tag_end(node)),
        ]
    )


def print_attribute(node: Node) -> Doc:
    if node.value is None:
        return node.key
    escaped = node.value.replace('"', "&quot;")
    return concat([node.key, '="', concat(replace_newlines(escaped, literalline)), '"'])
