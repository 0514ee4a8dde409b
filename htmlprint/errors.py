"""Exception hierarchy for htmlprint.

Keep this module dependency-free: every other module imports it.
"""

from __future__ import annotations

from typing import Any


def describe_node(node: Any) -> str:
    """Return ``"<kind> at line:column"`` for error messages."""
    kind = getattr(node, "kind", type(node).__name__)
    location = getattr(node, "start_location", None)
    if location is None:
        return f"{kind!r} (no position)"
    return f"{kind!r} at {location.line}:{location.column}"


class HtmlPrintError(Exception):
    """Base exception for all htmlprint errors."""


class UnexpectedNodeError(HtmlPrintError, ValueError):
    """Raised when a dispatch site meets a node kind it cannot render."""

    def __init__(self, node: Any, site: str = "print") -> None:
        self.node = node
        self.site = site
        super().__init__(f"Unexpected node type {describe_node(node)} in {site}")


class SelfClosingMarkerError(HtmlPrintError, AssertionError):
    """Raised when an end marker is requested for a self-closing node."""

    def __init__(self, node: Any, marker: str) -> None:
        self.node = node
        self.marker = marker
        super().__init__(f"{marker} requested for self-closing node {describe_node(node)}")


class NestingTooDeepError(HtmlPrintError):
    """Raised when the tree is nested deeper than the configured limit."""


class EmbedError(HtmlPrintError):
    """Raised by a sub-formatter that cannot format its input."""


class ConfigError(HtmlPrintError):
    """Raised for invalid print options."""
