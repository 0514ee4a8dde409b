"""Lay out a document to text within a target width."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Set, Tuple

from .builders import BreakParent, Concat, Doc, Fill, Group, Indent, Line, Root, concat
from .utils import propagate_breaks

MODE_BREAK = "break"
MODE_FLAT = "flat"


class LayoutOptions(Protocol):
    print_width: int
    tab_width: int
    use_tabs: bool


@dataclass(frozen=True)
class Indentation:
    value: str = ""
    length: int = 0
    root: Optional["Indentation"] = None


@dataclass(frozen=True)
class _FillFrom:
    """The tail of a fill starting at ``start``; avoids re-slicing parts."""

    parts: Tuple[Doc, ...]
    start: int


Command = Tuple[Indentation, str, object]


def _make_indent(ind: Indentation, options: LayoutOptions) -> Indentation:
    unit = "\t" if options.use_tabs else " " * options.tab_width
    return Indentation(ind.value + unit, ind.length + options.tab_width, ind.root)


def _make_root(ind: Indentation) -> Indentation:
    return Indentation(ind.value, ind.length, ind)


def _trim(out: List[str]) -> None:
    while out:
        stripped = out[-1].rstrip(" \t")
        if stripped:
            out[-1] = stripped
            return
        out.pop()


def _fits(
    next_cmd: Command,
    rest_cmds: List[Command],
    width: int,
    broken: Set[Group],
    must_be_flat: bool = False,
) -> bool:
    rest_idx = len(rest_cmds)
    cmds: List[Command] = [next_cmd]
    while width >= 0:
        if not cmds:
            if rest_idx == 0:
                return True
            cmds.append(rest_cmds[rest_idx - 1])
            rest_idx -= 1
            continue
        ind, mode, doc = cmds.pop()
        if isinstance(doc, str):
            width -= len(doc)
        elif isinstance(doc, (Concat, Fill)):
            cmds.extend((ind, mode, part) for part in reversed(doc.parts))
        elif isinstance(doc, _FillFrom):
            cmds.extend((ind, mode, part) for part in reversed(doc.parts[doc.start:]))
        elif isinstance(doc, (Indent, Root)):
            cmds.append((ind, mode, doc.contents))
        elif isinstance(doc, Group):
            if must_be_flat and doc in broken:
                return False
            cmds.append((ind, MODE_BREAK if doc in broken else mode, doc.contents))
        elif isinstance(doc, Line):
            if mode == MODE_BREAK or doc.hard:
                return True
            if not doc.soft:
                width -= 1
    return False


def print_doc_to_string(doc: Doc, options: LayoutOptions) -> str:
    """Render ``doc`` to a string no wider than ``options.print_width`` where possible."""
    broken = propagate_breaks(doc)
    width = options.print_width
    pos = 0
    out: List[str] = []
    cmds: List[Command] = [(Indentation(), MODE_BREAK, doc)]

    while cmds:
        ind, mode, current = cmds.pop()
        if isinstance(current, str):
            out.append(current)
            pos += len(current)
        elif isinstance(current, Concat):
            cmds.extend((ind, mode, part) for part in reversed(current.parts))
        elif isinstance(current, Indent):
            cmds.append((_make_indent(ind, options), mode, current.contents))
        elif isinstance(current, Root):
            cmds.append((_make_root(ind), mode, current.contents))
        elif isinstance(current, Group):
            is_broken = current in broken
            if mode == MODE_FLAT:
                cmds.append((ind, MODE_BREAK if is_broken else MODE_FLAT, current.contents))
                continue
            next_cmd = (ind, MODE_FLAT, current.contents)
            if not is_broken and _fits(next_cmd, cmds, width - pos, broken):
                cmds.append(next_cmd)
            else:
                cmds.append((ind, MODE_BREAK, current.contents))
        elif isinstance(current, (Fill, _FillFrom)):
            parts = current.parts
            start = current.start if isinstance(current, _FillFrom) else 0
            remaining = len(parts) - start
            if remaining <= 0:
                continue
            rem = width - pos
            content = parts[start]
            content_flat = (ind, MODE_FLAT, content)
            content_break = (ind, MODE_BREAK, content)
            content_fits = _fits(content_flat, [], rem, broken, True)
            if remaining == 1:
                cmds.append(content_flat if content_fits else content_break)
                continue
            whitespace = parts[start + 1]
            whitespace_flat = (ind, MODE_FLAT, whitespace)
            whitespace_break = (ind, MODE_BREAK, whitespace)
            if remaining == 2:
                if content_fits:
                    cmds.extend((whitespace_flat, content_flat))
                else:
                    cmds.extend((whitespace_break, content_break))
                continue
            remaining_cmd = (ind, mode, _FillFrom(parts, start + 2))
            second_content = parts[start + 2]
            pair_flat = (ind, MODE_FLAT, concat([content, whitespace, second_content]))
            if _fits(pair_flat, [], rem, broken, True):
                cmds.extend((remaining_cmd, whitespace_flat, content_flat))
            elif content_fits:
                cmds.extend((remaining_cmd, whitespace_break, content_flat))
            else:
                cmds.extend((remaining_cmd, whitespace_break, content_break))
        elif isinstance(current, Line):
            if mode == MODE_FLAT and not current.hard:
                if not current.soft:
                    out.append(" ")
                    pos += 1
                continue
            if current.literal:
                if ind.root is not None:
                    out.append("\n" + ind.root.value)
                    pos = ind.root.length
                else:
                    out.append("\n")
                    pos = 0
            else:
                _trim(out)
                out.append("\n" + ind.value)
                pos = ind.length
        elif isinstance(current, BreakParent):
            continue
        else:
            raise TypeError(f"Unexpected doc type {type(current).__name__}")

    return "".join(out)
