"""Arena-backed markup tree read by the printer.

Nodes live in a flat tuple of frozen records addressed by index. Parent and
sibling links are optional indices, so the tree holds no reference cycles.
``Node`` is a throwaway view over one record that resolves those links.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .models import AttributeSpec, NodeSpec, SourceLocation


@dataclass(frozen=True)
class NodeRecord:
    kind: str
    parent: Optional[int] = None
    prev: Optional[int] = None
    next: Optional[int] = None
    children: Tuple[int, ...] = ()
    attributes: Tuple[int, ...] = ()
    depth: int = 0
    name: Optional[str] = None
    condition: Optional[str] = None
    data: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None
    raw: Optional[str] = None
    is_self_closing: bool = False
    is_leading_space_sensitive: bool = False
    is_trailing_space_sensitive: bool = False
    has_leading_spaces: bool = False
    has_trailing_spaces: bool = False
    is_white_space_sensitive: bool = False
    is_indentation_sensitive: bool = False
    is_dangling_space_sensitive: bool = False
    has_dangling_spaces: bool = False
    force_break_children: bool = False
    force_next_empty_line: bool = False
    start_location: Optional[SourceLocation] = None
    end_location: Optional[SourceLocation] = None


_SPEC_FIELDS = (
    "kind",
    "name",
    "condition",
    "data",
    "value",
    "raw",
    "is_self_closing",
    "is_leading_space_sensitive",
    "is_trailing_space_sensitive",
    "has_leading_spaces",
    "has_trailing_spaces",
    "is_white_space_sensitive",
    "is_indentation_sensitive",
    "is_dangling_space_sensitive",
    "has_dangling_spaces",
    "force_break_children",
    "force_next_empty_line",
    "start_location",
    "end_location",
)


class Tree:
    """An immutable, fully annotated markup tree."""

    def __init__(self, records: Sequence[NodeRecord], source: str | None = None) -> None:
        if not records or records[0].kind != "root":
            raise ValueError("tree must start with a root node")
        self._records: Tuple[NodeRecord, ...] = tuple(records)
        self.source = source

    def __len__(self) -> int:
        return len(self._records)

    def record(self, index: int) -> NodeRecord:
        return self._records[index]

    def node(self, index: int) -> "Node":
        return Node(self, index)

    @property
    def root(self) -> "Node":
        return Node(self, 0)

    def iter_nodes(self) -> Iterator["Node"]:
        """Yield every node, attributes included, in arena order."""
        for index in range(len(self._records)):
            yield Node(self, index)

    @property
    def max_depth(self) -> int:
        return max(record.depth for record in self._records)


class Node:
    """View of one arena slot; compares equal for the same tree and index."""

    __slots__ = ("tree", "index")

    def __init__(self, tree: Tree, index: int) -> None:
        self.tree = tree
        self.index = index

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and other.tree is self.tree and other.index == self.index

    def __hash__(self) -> int:
        return hash((id(self.tree), self.index))

    def __repr__(self) -> str:
        label = self.name or self.key or self.kind
        return f"Node({self.index}, {self.kind}, {label!r})"

    def __getattr__(self, attr: str) -> Any:
        # Payload and flags come straight from the frozen record.
        if attr.startswith("_") or attr in Node.__slots__:
            raise AttributeError(attr)
        return getattr(self.tree.record(self.index), attr)

    def _link(self, index: Optional[int]) -> Optional["Node"]:
        return None if index is None else Node(self.tree, index)

    @property
    def parent(self) -> Optional["Node"]:
        return self._link(self.tree.record(self.index).parent)

    @property
    def prev(self) -> Optional["Node"]:
        return self._link(self.tree.record(self.index).prev)

    @property
    def next(self) -> Optional["Node"]:
        return self._link(self.tree.record(self.index).next)

    @property
    def children(self) -> List["Node"]:
        return [Node(self.tree, index) for index in self.tree.record(self.index).children]

    @property
    def attributes(self) -> List["Node"]:
        return [Node(self.tree, index) for index in self.tree.record(self.index).attributes]

    @property
    def first_child(self) -> Optional["Node"]:
        children = self.tree.record(self.index).children
        return Node(self.tree, children[0]) if children else None

    @property
    def last_child(self) -> Optional["Node"]:
        children = self.tree.record(self.index).children
        return Node(self.tree, children[-1]) if children else None

    @property
    def attr_map(self) -> Dict[str, Optional[str]]:
        return {attr.key: attr.value for attr in self.attributes}

    @property
    def last_descendant(self) -> "Node":
        node = self
        while node.last_child is not None:
            node = node.last_child
        return node


def _attribute_record(attr: AttributeSpec, parent: int, depth: int) -> NodeRecord:
    return NodeRecord(
        kind="attribute",
        parent=parent,
        depth=depth,
        key=attr.key,
        value=attr.value,
        start_location=attr.start_location,
        end_location=attr.end_location,
    )


def build_tree(spec: NodeSpec, source: str | None = None) -> Tree:
    """Flatten a validated ``NodeSpec`` into an arena ``Tree``."""
    if spec.kind != "root":
        raise ValueError(f"tree must start with a root node, got {spec.kind!r}")

    slots: List[Dict[str, Any]] = []
    stack: List[Tuple[NodeSpec, Optional[int], int]] = [(spec, None, 0)]
    while stack:
        node_spec, parent, depth = stack.pop()
        index = len(slots)
        fields = {name: getattr(node_spec, name) for name in _SPEC_FIELDS}
        slots.append({"fields": fields, "parent": parent, "depth": depth, "children": [], "attributes": []})
        if parent is not None:
            slots[parent]["children"].append(index)
        for attr in node_spec.attributes:
            slots[index]["attributes"].append(len(slots))
            slots.append({"record": _attribute_record(attr, index, depth + 1)})
        for child in reversed(node_spec.children):
            stack.append((child, index, depth + 1))

    prev_of: Dict[int, int] = {}
    next_of: Dict[int, int] = {}
    for slot in slots:
        siblings = slot.get("children", [])
        for left, right in zip(siblings, siblings[1:]):
            next_of[left] = right
            prev_of[right] = left

    records: List[NodeRecord] = []
    for index, slot in enumerate(slots):
        if "record" in slot:
            records.append(slot["record"])
            continue
        records.append(
            NodeRecord(
                parent=slot["parent"],
                prev=prev_of.get(index),
                next=next_of.get(index),
                children=tuple(slot["children"]),
                attributes=tuple(slot["attributes"]),
                depth=slot["depth"],
                **slot["fields"],
            )
        )
    return Tree(records, source=source)


def tree_from_dict(data: Dict[str, Any], source: str | None = None) -> Tree:
    """Validate preprocessor output and build the arena in one step."""
    return build_tree(NodeSpec.model_validate(data), source=source)
