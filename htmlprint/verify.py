"""Check that printed markup still means what the source meant.

Both documents are parsed with BeautifulSoup and reduced to an outline of
tags, sorted attributes, comments and text tokens. Whitespace is not part of
the outline: the printer is allowed to re-flow it, so this catches lost,
duplicated or reordered content rather than layout changes.
"""

from __future__ import annotations

import difflib
from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag


def _collapse(value: str) -> str:
    return " ".join(value.split())


def _attr_value(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return _collapse(" ".join(str(item) for item in value))
    return _collapse(str(value))


def _walk(parent: Tag, depth: int, lines: List[str]) -> None:
    pad = "  " * depth
    for child in parent.contents:
        if isinstance(child, Tag):
            attrs = " ".join(
                f"{key}={_attr_value(value)!r}" for key, value in sorted(child.attrs.items())
            )
            lines.append(f"{pad}<{child.name}{' ' + attrs if attrs else ''}>\n")
            _walk(child, depth + 1, lines)
        elif isinstance(child, Comment):
            lines.append(f"{pad}#comment {_collapse(str(child))}\n")
        elif isinstance(child, Doctype):
            lines.append(f"{pad}#doctype {_collapse(str(child)).lower()}\n")
        elif isinstance(child, (Declaration, ProcessingInstruction)):
            lines.append(f"{pad}#declaration {_collapse(str(child))}\n")
        elif isinstance(child, NavigableString):
            text = _collapse(str(child))
            if text:
                lines.append(f"{pad}#text {text}\n")


def markup_outline(markup: str) -> List[str]:
    """Whitespace-insensitive outline of ``markup``, one entry per line."""
    soup = BeautifulSoup(markup, "html.parser")
    lines: List[str] = []
    _walk(soup, 0, lines)
    return lines


def check_equivalent(source: str, printed: str) -> Tuple[bool, str]:
    """Compare outlines; returns ``(ok, unified diff)``."""
    before = markup_outline(source)
    after = markup_outline(printed)
    if before == after:
        return True, ""
    diff = difflib.unified_diff(before, after, fromfile="source", tofile="printed")
    return False, "".join(diff)
