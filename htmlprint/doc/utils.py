"""Helpers that inspect or rewrite documents."""

from __future__ import annotations

from typing import Callable, List, Set

from .builders import BreakParent, Concat, Doc, Fill, Group, Indent, Line, Root, join


def map_doc(doc: Doc, fn: Callable[[Doc], Doc]) -> Doc:
    """Rebuild ``doc`` bottom-up, applying ``fn`` to every node."""
    if isinstance(doc, Concat):
        return fn(Concat(tuple(map_doc(part, fn) for part in doc.parts)))
    if isinstance(doc, Fill):
        return fn(Fill(tuple(map_doc(part, fn) for part in doc.parts)))
    if isinstance(doc, Group):
        return fn(Group(map_doc(doc.contents, fn), doc.should_break))
    if isinstance(doc, Indent):
        return fn(Indent(map_doc(doc.contents, fn)))
    if isinstance(doc, Root):
        return fn(Root(map_doc(doc.contents, fn)))
    return fn(doc)


def remove_lines(doc: Doc) -> Doc:
    """Force ``doc`` flat: soft lines vanish, lines become spaces.

    Hard lines survive; dropping them would change content.
    """

    def _flatten(d: Doc) -> Doc:
        if isinstance(d, Line) and not d.hard:
            return "" if d.soft else " "
        if isinstance(d, Group) and d.should_break:
            return Group(d.contents)
        return d

    return map_doc(doc, _flatten)


def _is_hardline(doc: Doc) -> bool:
    return (
        isinstance(doc, Concat)
        and len(doc.parts) == 2
        and isinstance(doc.parts[0], Line)
        and doc.parts[0].hard
        and isinstance(doc.parts[1], BreakParent)
    )


def strip_trailing_hardline(doc: Doc) -> Doc:
    """Drop one trailing hard line from a concatenation, if present."""
    if isinstance(doc, Concat) and doc.parts:
        last = doc.parts[-1]
        if isinstance(last, Concat):
            if _is_hardline(last):
                return Concat(doc.parts[:-1])
            return Concat(doc.parts[:-1] + (strip_trailing_hardline(last),))
    return doc


def replace_newlines(text: str, replacement: Doc) -> List[Doc]:
    """Split ``text`` on newlines and interleave ``replacement``."""
    return list(join(replacement, text.split("\n")).parts)


def replace_doc_newlines(doc: Doc, replacement: Doc) -> Doc:
    """Replace raw newlines inside every string of ``doc``."""

    def _replace(d: Doc) -> Doc:
        if isinstance(d, str) and "\n" in d:
            return Concat(tuple(replace_newlines(d, replacement)))
        return d

    return map_doc(doc, _replace)


def _children(doc: Doc) -> tuple:
    if isinstance(doc, (Concat, Fill)):
        return doc.parts
    if isinstance(doc, (Group, Indent, Root)):
        return (doc.contents,)
    return ()


def propagate_breaks(doc: Doc) -> Set[Group]:
    """Return every group that must print broken.

    A group breaks when it was built with ``should_break``, when it contains
    a ``break_parent`` (hard lines carry one), or when a nested group breaks.
    """
    broken: Set[Group] = set()
    group_stack: List[Group] = []
    stack: List[tuple] = [(doc, False)]
    while stack:
        current, exiting = stack.pop()
        if isinstance(current, Group):
            if exiting:
                group_stack.pop()
                if current.should_break or current in broken:
                    broken.add(current)
                    if group_stack:
                        broken.add(group_stack[-1])
                continue
            group_stack.append(current)
            stack.append((current, True))
            stack.append((current.contents, False))
        elif isinstance(current, BreakParent):
            if group_stack:
                broken.add(group_stack[-1])
        else:
            stack.extend((child, False) for child in reversed(_children(current)))
    return broken


def will_break(doc: Doc) -> bool:
    """True if ``doc`` contains a forced break anywhere."""
    stack: List[Doc] = [doc]
    while stack:
        current = stack.pop()
        if isinstance(current, BreakParent):
            return True
        if isinstance(current, Line) and current.hard:
            return True
        if isinstance(current, Group) and current.should_break:
            return True
        stack.extend(_children(current))
    return False
