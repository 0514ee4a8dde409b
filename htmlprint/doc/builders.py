"""Document IR consumed by the layout printer.

A document is either a plain string or one of the frozen records below.
Documents are immutable: break propagation is computed on the side by
``htmlprint.doc.utils.propagate_breaks``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union


@dataclass(frozen=True)
class Concat:
    parts: Tuple["Doc", ...]


@dataclass(frozen=True, eq=False)
class Group:
    """Flat if it fits on the rest of the line, broken otherwise.

    Groups compare by identity so the printer can key break state on them.
    """

    contents: "Doc"
    should_break: bool = False


@dataclass(frozen=True)
class Fill:
    """Alternating ``[content, separator, content, ...]`` parts."""

    parts: Tuple["Doc", ...]


@dataclass(frozen=True)
class Indent:
    contents: "Doc"


@dataclass(frozen=True)
class Root:
    """Marks the current indentation as the baseline for literal lines."""

    contents: "Doc"


@dataclass(frozen=True)
class Line:
    soft: bool = False
    hard: bool = False
    literal: bool = False


@dataclass(frozen=True)
class BreakParent:
    pass


Doc = Union[str, Concat, Group, Fill, Indent, Root, Line, BreakParent]


def concat(parts: Iterable[Doc]) -> Concat:
    return Concat(tuple(parts))


def group(contents: Doc, should_break: bool = False) -> Group:
    return Group(contents, should_break)


def fill(parts: Iterable[Doc]) -> Fill:
    return Fill(tuple(parts))


def indent(contents: Doc) -> Indent:
    return Indent(contents)


def mark_as_root(contents: Doc) -> Root:
    return Root(contents)


def join(separator: Doc, docs: Sequence[Doc]) -> Concat:
    parts: list[Doc] = []
    for index, doc in enumerate(docs):
        if index:
            parts.append(separator)
        parts.append(doc)
    return Concat(tuple(parts))


break_parent = BreakParent()
line = Line()
softline = Line(soft=True)
hardline = Concat((Line(hard=True), break_parent))
literalline = Concat((Line(hard=True, literal=True), break_parent))


__all__ = [
    "BreakParent",
    "Concat",
    "Doc",
    "Fill",
    "Group",
    "Indent",
    "Line",
    "Root",
    "break_parent",
    "concat",
    "fill",
    "group",
    "hardline",
    "indent",
    "join",
    "line",
    "literalline",
    "mark_as_root",
    "softline",
]
