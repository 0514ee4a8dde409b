"""Built-in formatters for embedded languages.

Each formatter turns source text into a document and raises ``EmbedError``
when it cannot handle the input; the printer then falls back to printing the
node as plain markup.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List

import yaml

from .doc.builders import Doc, concat, hardline, join
from .doc.utils import strip_trailing_hardline
from .errors import EmbedError
from .text_utils import dedent_string

logger = logging.getLogger(__name__)

TextToDoc = Callable[[str, Dict[str, Any]], Doc]


def _lines_to_doc(lines: List[str]) -> Doc:
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        return ""
    return concat([join(hardline, lines), hardline])


def format_verbatim(text: str, options: Dict[str, Any]) -> Doc:
    """Keep the code as written, re-based on the current indentation."""
    return _lines_to_doc([line_text.rstrip() for line_text in dedent_string(text).split("\n")])


def format_yaml(text: str, options: Dict[str, Any]) -> Doc:
    try:
        yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise EmbedError(f"invalid YAML: {exc}") from exc
    # Content stays verbatim so comments and key order survive.
    return format_verbatim(text, options)


def format_json(text: str, options: Dict[str, Any]) -> Doc:
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise EmbedError(f"invalid JSON: {exc}") from exc
    dumped = json.dumps(data, ensure_ascii=False, indent=options.get("tab_width", 2))
    return _lines_to_doc(dumped.split("\n"))


def format_expression(text: str, options: Dict[str, Any]) -> Doc:
    # Expressions sit inline, so no closing line break.
    return strip_trailing_hardline(format_verbatim(text.strip(), options))


SUBFORMATTERS: Dict[str, TextToDoc] = {
    "yaml": format_yaml,
    "json": format_json,
    "css": format_verbatim,
    "scss": format_verbatim,
    "less": format_verbatim,
    "babel": format_verbatim,
    "typescript": format_verbatim,
    "markdown": format_verbatim,
    "__js_expression": format_expression,
}


def register_subformatter(parser: str, formatter: TextToDoc) -> None:
    """Install or replace the formatter used for ``parser``."""
    SUBFORMATTERS[parser] = formatter


def default_text_to_doc(text: str, options: Dict[str, Any]) -> Doc:
    parser = options.get("parser")
    formatter = SUBFORMATTERS.get(parser) if parser else None
    if formatter is None:
        raise EmbedError(f"no sub-formatter registered for {parser!r}")
    logger.debug("formatting %d chars of embedded %s", len(text), parser)
    return formatter(text, options)
