"""Pydantic models for the annotated input tree and print options."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

NodeKind = Literal[
    "root",
    "tag",
    "ieConditionalComment",
    "text",
    "comment",
    "directive",
    "attribute",
    "yaml",
    "toml",
]

CONTAINER_KINDS = frozenset({"root", "tag", "ieConditionalComment"})


class SourceLocation(BaseModel):
    """A position in the source markup."""

    line: int = Field(..., ge=1, description="1-based line number.")
    column: int = Field(..., ge=0, description="0-based column.")
    offset: Optional[int] = Field(
        None, ge=0, description="Character offset into the source, when known."
    )

    model_config = ConfigDict(frozen=True)


class AttributeSpec(BaseModel):
    """A single ``key="value"`` pair on a tag."""

    key: str = Field(..., description="Attribute name as written in the source.")
    value: Optional[str] = Field(
        None, description="Raw value without quotes; None for valueless attributes."
    )
    start_location: Optional[SourceLocation] = Field(None, alias="startLocation")
    end_location: Optional[SourceLocation] = Field(None, alias="endLocation")

    model_config = ConfigDict(populate_by_name=True)


class NodeSpec(BaseModel):
    """One node of the annotated tree handed over by the preprocessor.

    Sensitivity flags and forced-break hints are already resolved; the printer
    only reads them.
    """

    kind: NodeKind = Field(..., alias="type", description="Node variant.")
    name: Optional[str] = Field(None, description="Tag or directive name.")
    condition: Optional[str] = Field(
        None, description="Test expression of a conditional comment."
    )
    data: Optional[str] = Field(None, description="Raw text, comment or directive payload.")
    value: Optional[str] = Field(None, description="Trimmed frontmatter payload.")
    raw: Optional[str] = Field(None, description="Verbatim frontmatter including fences.")
    is_self_closing: bool = Field(False, alias="isSelfClosing")
    attributes: List[AttributeSpec] = Field(default_factory=list)
    children: List["NodeSpec"] = Field(default_factory=list)

    is_leading_space_sensitive: bool = Field(False, alias="isLeadingSpaceSensitive")
    is_trailing_space_sensitive: bool = Field(False, alias="isTrailingSpaceSensitive")
    has_leading_spaces: bool = Field(False, alias="hasLeadingSpaces")
    has_trailing_spaces: bool = Field(False, alias="hasTrailingSpaces")
    is_white_space_sensitive: bool = Field(False, alias="isWhiteSpaceSensitive")
    is_indentation_sensitive: bool = Field(False, alias="isIndentationSensitive")
    is_dangling_space_sensitive: bool = Field(False, alias="isDanglingSpaceSensitive")
    has_dangling_spaces: bool = Field(False, alias="hasDanglingSpaces")

    force_break_children: bool = Field(
        False,
        alias="forceBreakChildren",
        description="The node's group must break regardless of fit.",
    )
    force_next_empty_line: bool = Field(
        False,
        alias="forceNextEmptyLine",
        description="Emit one blank line after this node.",
    )

    start_location: Optional[SourceLocation] = Field(None, alias="startLocation")
    end_location: Optional[SourceLocation] = Field(None, alias="endLocation")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def _check_variant_payload(self) -> "NodeSpec":
        if self.kind in ("tag", "directive") and not self.name:
            raise ValueError(f"{self.kind} node requires a name")
        if self.kind == "ieConditionalComment" and self.condition is None:
            raise ValueError("ieConditionalComment node requires a condition")
        if self.children and self.kind not in CONTAINER_KINDS:
            raise ValueError(f"{self.kind} node cannot have children")
        if self.attributes and self.kind != "tag":
            raise ValueError(f"{self.kind} node cannot have attributes")
        if self.kind == "root" and self.children:
            # The root has no markers to lend at its edges.
            first, last = self.children[0], self.children[-1]
            if first.is_leading_space_sensitive and not first.has_leading_spaces:
                raise ValueError("first child of root cannot borrow the root's opening tag")
            if last.is_trailing_space_sensitive and not last.has_trailing_spaces:
                raise ValueError("last child of root cannot borrow the root's closing tag")
        return self


class PrintOptions(BaseModel):
    """Layout and safety settings for a print pass."""

    print_width: int = Field(80, ge=1, description="Target line width.")
    tab_width: int = Field(2, ge=1, description="Columns per indentation level.")
    use_tabs: bool = Field(False, description="Indent with tabs instead of spaces.")
    max_depth: int = Field(
        128, ge=1, description="Deepest element nesting accepted before aborting."
    )
    ignore_pragma: str = Field(
        "format-ignore",
        description="Comment payload that makes the next sibling print verbatim.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    def embed_options(self) -> dict:
        """Options inherited by sub-formatters."""
        return {
            "print_width": self.print_width,
            "tab_width": self.tab_width,
            "use_tabs": self.use_tabs,
        }


NodeSpec.model_rebuild()
