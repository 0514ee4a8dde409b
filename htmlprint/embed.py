"""Hand embedded languages to sub-formatters and splice the result back in.

``embed`` returns ``None`` when the node is not an embedding case (or its
sub-formatter refused the input); the caller then uses the generic printer.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional

from .ast import Node
from .doc.builders import Doc, break_parent, concat, hardline, literalline, mark_as_root
from .doc.utils import remove_lines, replace_doc_newlines, strip_trailing_hardline
from .errors import EmbedError, UnexpectedNodeError, describe_node
from .markers import closing_tag_suffix, opening_tag_prefix
from .subformatters import TextToDoc

logger = logging.getLogger(__name__)

SCRIPT_LIKE_TAGS = frozenset({"script", "style"})
JAVASCRIPT_TYPES = frozenset(
    {"module", "text/javascript", "text/babel", "application/javascript"}
)

# Vue-style bindings: @click, v-if, :class, v-bind:id
DYNAMIC_BINDING_RE = re.compile(r"(^@)|(^v-)|:")
BARE_IDENTIFIER_RE = re.compile(r"\w+", re.ASCII)
LINE_BREAK_CHARS = frozenset("\n\r\u2028\u2029")


def is_script_like_tag(node: Optional[Node]) -> bool:
    return node is not None and node.kind == "tag" and node.name in SCRIPT_LIKE_TAGS


def infer_script_parser(node: Node) -> Optional[str]:
    """Sub-language identifier for the body of a ``script``/``style`` tag."""
    attrs = node.attr_map
    if node.name == "script" and "src" not in attrs:
        script_type = attrs.get("type")
        lang = attrs.get("lang")
        if (not lang and not script_type) or script_type in JAVASCRIPT_TYPES:
            return "babel"
        if script_type == "application/x-typescript" or lang in ("ts", "tsx"):
            return "typescript"
        if script_type == "text/markdown":
            return "markdown"
        if script_type and (script_type.endswith("json") or script_type == "importmap"):
            return "json"
    if node.name == "style":
        lang = attrs.get("lang")
        if not lang or lang in ("css", "postcss"):
            return "css"
        if lang in ("scss", "less"):
            return lang
    return None


def is_dynamic_binding_attribute(key: str, value: Optional[str]) -> bool:
    """Naming heuristic for attributes whose value is an expression.

    Bare identifiers (``v-else="foo"``) stay plain attributes.
    """
    if value is None:
        return False
    return bool(DYNAMIC_BINDING_RE.search(key)) and not BARE_IDENTIFIER_RE.fullmatch(value)


def _embed_script_text(node: Node, text_to_doc: TextToDoc, options: Dict[str, Any]) -> Optional[Doc]:
    if not is_script_like_tag(node.parent):
        return None
    parser = infer_script_parser(node.parent)
    if not parser:
        return None
    doc = text_to_doc(node.data or "", {**options, "parser": parser})
    return concat(
        [
            break_parent,
            opening_tag_prefix(node),
            mark_as_root(strip_trailing_hardline(doc)),
            closing_tag_suffix(node),
        ]
    )


def _embed_attribute(node: Node, text_to_doc: TextToDoc, options: Dict[str, Any]) -> Optional[Doc]:
    value = node.value
    if not is_dynamic_binding_attribute(node.key, value):
        return None
    # Attribute values sit inside double quotes.
    doc = text_to_doc(value, {**options, "parser": "__js_expression", "single_quote": True})
    multiline = any(char in LINE_BREAK_CHARS for char in value)
    return concat([node.key, '="', doc if multiline else remove_lines(doc), '"'])


def _embed_frontmatter(node: Node, text_to_doc: TextToDoc, options: Dict[str, Any]) -> Doc:
    value = node.value or ""
    if not value.strip():
        body: Doc = ""
    else:
        body = replace_doc_newlines(text_to_doc(value, {**options, "parser": "yaml"}), literalline)
    return mark_as_root(concat(["---", hardline, body, "---"]))


def embed(node: Node, text_to_doc: TextToDoc, options: Dict[str, Any]) -> Optional[Doc]:
    try:
        if node.kind == "text":
            return _embed_script_text(node, text_to_doc, options)
        if node.kind == "attribute":
            return _embed_attribute(node, text_to_doc, options)
        if node.kind == "yaml":
            return _embed_frontmatter(node, text_to_doc, options)
    except EmbedError as exc:
        logger.warning("printing %s without its sub-formatter: %s", describe_node(node), exc)
        return None
    if node.kind in ("root", "tag", "ieConditionalComment", "comment", "directive", "toml"):
        return None
    raise UnexpectedNodeError(node, "embed")
