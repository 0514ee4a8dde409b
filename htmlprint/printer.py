"""Turn an annotated markup tree into a document and into text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .ast import Node, Tree
from .borrowing import needs_parent_closing_start_borrow, needs_prev_closing_end_borrow
from .children import print_children
from .doc.builders import (
    Doc,
    break_parent,
    concat,
    group,
    hardline,
    indent,
    line,
    literalline,
    softline,
)
from .doc.printer import print_doc_to_string
from .doc.utils import replace_newlines
from .embed import embed
from .errors import NestingTooDeepError, UnexpectedNodeError
from .leaves import print_attribute, print_comment, print_text
from .models import PrintOptions
from .subformatters import TextToDoc, default_text_to_doc
from .tags import print_closing_tag, print_opening_tag

logger = logging.getLogger(__name__)


@dataclass
class PrintContext:
    options: PrintOptions
    text_to_doc: TextToDoc
    embed_options: Dict[str, Any] = field(default_factory=dict)

    def print_node(self, node: Node) -> Doc:
        return print_node(node, self)


def _ignored_source(node: Node, ctx: PrintContext) -> Optional[Doc]:
    prev = node.prev
    pragma = ctx.options.ignore_pragma
    if not pragma or prev is None or prev.kind != "comment" or (prev.data or "").strip() != pragma:
        return None
    source = node.tree.source
    start, end = node.start_location, node.end_location
    if source is None or start is None or end is None or start.offset is None or end.offset is None:
        return None
    return concat(replace_newlines(source[start.offset:end.offset], literalline))


def print_node(node: Node, ctx: PrintContext) -> Doc:
    ignored = _ignored_source(node, ctx)
    if ignored is not None:
        return ignored
    embedded = embed(node, ctx.text_to_doc, ctx.embed_options)
    if embedded is not None:
        return embedded
    return generic_print(node, ctx)


def _print_element(node: Node, ctx: PrintContext) -> Doc:
    if node.next is not None:
        trailing_space_outside = needs_prev_closing_end_borrow(node.next)
    else:
        trailing_space_outside = needs_parent_closing_start_borrow(node)

    last_child = node.last_child
    if last_child is None:
        last_child_trailing_space: Doc = ""
    elif last_child.has_trailing_spaces and last_child.is_trailing_space_sensitive:
        last_child_trailing_space = line
    else:
        last_child_trailing_space = softline

    first_child = node.first_child
    if first_child is None:
        dangling = node.has_dangling_spaces and node.is_dangling_space_sensitive
        body: Doc = line if dangling else ""
    else:
        if (
            first_child.kind == "text"
            and first_child.is_white_space_sensitive
            and first_child.is_indentation_sensitive
        ):
            leading: Doc = literalline
        elif first_child.has_leading_spaces and first_child.is_leading_space_sensitive:
            leading = line
        else:
            leading = softline
        body = concat(
            [
                indent(concat([leading, print_children(node, ctx.print_node)])),
                "" if trailing_space_outside else last_child_trailing_space,
            ]
        )

    return concat(
        [
            group(
                concat(
                    [
                        break_parent if node.force_break_children else "",
                        print_opening_tag(node, ctx.print_node),
                        body,
                    ]
                )
            ),
            last_child_trailing_space if trailing_space_outside else "",
            group(print_closing_tag(node)),
        ]
    )


def generic_print(node: Node, ctx: PrintContext) -> Doc:
    kind = node.kind
    if kind == "root":
        return concat(
            [
                group(
                    concat(
                        [
                            break_parent if node.force_break_children else "",
                            print_children(node, ctx.print_node),
                        ]
                    )
                ),
                hardline,
            ]
        )
    if kind in ("tag", "ieConditionalComment"):
        return _print_element(node, ctx)
    if kind == "text":
        return print_text(node)
    if kind in ("comment", "directive"):
        return print_comment(node)
    if kind == "attribute":
        return print_attribute(node)
    if kind in ("yaml", "toml"):
        return concat(replace_newlines(node.raw or "", literalline))
    raise UnexpectedNodeError(node, "generic_print")


def print_tree(
    tree: Tree,
    options: PrintOptions | None = None,
    text_to_doc: TextToDoc | None = None,
) -> Doc:
    """Build the document for the whole tree.

    ``text_to_doc`` formats embedded regions; the built-in sub-formatters are
    used when it is omitted.
    """
    options = options or PrintOptions()
    depth = tree.max_depth
    if depth > options.max_depth:
        raise NestingTooDeepError(
            f"tree is nested {depth} levels deep, limit is {options.max_depth}"
        )
    ctx = PrintContext(
        options=options,
        text_to_doc=text_to_doc or default_text_to_doc,
        embed_options=options.embed_options(),
    )
    logger.debug("printing %d nodes (depth %d, width %d)", len(tree), depth, options.print_width)
    return print_node(tree.root, ctx)


def format_tree(
    tree: Tree,
    options: PrintOptions | None = None,
    text_to_doc: TextToDoc | None = None,
) -> str:
    """Print the tree and lay it out at ``options.print_width``."""
    options = options or PrintOptions()
    doc = print_tree(tree, options, text_to_doc)
    text = print_doc_to_string(doc, options)
    logger.debug("formatted %d nodes into %d lines", len(tree), text.count("\n"))
    return text
