"""String helpers for leaf payloads."""

from __future__ import annotations

import re
from typing import List

WHITESPACE_RE = re.compile(r"\s+")
EDGE_BLANK_LINE_RE = re.compile(r"^\s*?\n|\n\s*?\Z")
LEADING_EMPTY_LINE_RE = re.compile(r"^[^\S\n]*?\n")
INDENT_RE = re.compile(r"^[^\S\n]*")


def split_words(text: str) -> List[str]:
    return WHITESPACE_RE.split(text)


def strip_edge_blank_lines(text: str) -> str:
    """Drop one whitespace-only line at each end of ``text``."""
    return EDGE_BLANK_LINE_RE.sub("", text)


def get_min_indentation(text: str) -> int:
    indents = [
        len(INDENT_RE.match(line_text).group(0))
        for line_text in text.split("\n")
        if line_text.strip()
    ]
    return min(indents) if indents else 0


def dedent_string(text: str, min_indent: int | None = None) -> str:
    if min_indent is None:
        min_indent = get_min_indentation(text)
    if min_indent == 0:
        return text
    return "\n".join(line_text[min_indent:] for line_text in text.split("\n"))


def get_comment_data(data: str) -> str:
    """Normalize a comment or directive payload for re-indentation.

    ``<!--\\n  a\\n  b\\n-->`` keeps its lines dedented as a block;
    ``<!-- a\\n     b -->`` keeps the first line and dedents the rest.
    """
    trimmed = data.rstrip()
    if LEADING_EMPTY_LINE_RE.match(trimmed):
        return dedent_string(LEADING_EMPTY_LINE_RE.sub("", trimmed, count=1))
    first, _, rest = trimmed.partition("\n")
    if not rest:
        return first.strip()
    return first.strip() + "\n" + dedent_string(rest)
