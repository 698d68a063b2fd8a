"""Typed document nodes for wrapdoc.

All nodes are frozen dataclasses with slots for:
- Immutability: a tree is built once and only ever read by the renderer
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements dispatch on the variant

Node Hierarchy:
Node (base)
├── Containers
│   ├── Group        (one fit/wrap decision, identified by id)
│   ├── Nodes        (plain concatenation)
│   └── Indent       (one indentation level when wrapped)
├── Conditional
│   └── IfWrap       (branch on whether a group wrapped)
└── Leaves
    ├── Text         (byte-width literal)
    ├── Unicode      (literal with cached character count)
    ├── SpaceOrLine  (space when flat, line break when wrapped)
    └── Line         (nothing when flat, line break when wrapped)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass

from wcwidth import iter_graphemes

from wrapdoc.errors import RenderError

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes."""


# =============================================================================
# Container Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Group(Node):
    """Content that should fit on one line if possible.

    The renderer decides once per ``id`` whether the group wraps. Ids are
    unique within a tree and allocated by the producer.

    """

    id: int
    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Nodes(Node):
    """Plain concatenation with no fit/wrap decision of its own."""

    children: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Indent(Node):
    """Children indented one level deeper when wrapped.

    Flat content is never indented.

    """

    children: tuple[Node, ...]


# =============================================================================
# Conditional Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class IfWrap(Node):
    """Render ``wrapped`` if group ``group_id`` wrapped, else ``flat``.

    An id that was never decided (unknown or not yet visited) counts as
    not wrapped.

    """

    group_id: int
    wrapped: Node
    flat: Node


# =============================================================================
# Leaf Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal content measured in bytes.

    Intended for ASCII, where bytes and columns coincide. Use ``Unicode``
    for anything else.

    """

    content: str

    @property
    def width(self) -> int:
        if self.content.isascii():
            return len(self.content)
        return len(self.content.encode("utf-8"))


@dataclass(frozen=True, slots=True)
class Unicode(Node):
    """Literal content with a display width cached at construction.

    Counting user-perceived characters is linear in the content length,
    so it happens once in ``Unicode.of`` and never during rendering.

    """

    content: str
    width: int

    @classmethod
    def of(cls, content: str) -> Unicode:
        """Create a Unicode node, counting its characters once.

        Example:
            >>> Unicode.of("cafe\\u0301").width
            4
        """
        return cls(content=content, width=char_count(content))


@dataclass(frozen=True, slots=True)
class SpaceOrLine(Node):
    """A single space when flat, a line break when wrapped."""


@dataclass(frozen=True, slots=True)
class Line(Node):
    """Nothing when flat, a line break when wrapped."""


# =============================================================================
# Width measurement
# =============================================================================


def char_count(content: str) -> int:
    """Count user-perceived characters (extended grapheme clusters) in ``content``.

    Combining marks, flags, skin-tone modifiers and ZWJ emoji sequences each
    count as one character together with their base.
    """
    if content.isascii():
        return len(content)
    return sum(1 for _ in iter_graphemes(content))


def flat_width(node: Node, wrapped: Container[int]) -> int:
    """Columns ``node`` occupies when rendered without line breaks.

    ``IfWrap`` nodes still follow the decisions already recorded in
    ``wrapped``. Nested groups not yet decided are measured flat, so the
    result depends on when it is asked; it is never cached.

    Args:
        node: Node to measure
        wrapped: Ids of groups decided to wrap so far

    Returns:
        Width in columns

    Raises:
        RenderError: If a non-node object is found in the tree
    """
    match node:
        case Group(children=children) | Nodes(children=children) | Indent(children=children):
            return sum(flat_width(child, wrapped) for child in children)
        case IfWrap():
            branch = node.wrapped if node.group_id in wrapped else node.flat
            return flat_width(branch, wrapped)
        case Text() | Unicode():
            return node.width
        case SpaceOrLine():
            return 1
        case Line():
            return 0
        case _:
            raise RenderError(f"Cannot measure {type(node).__name__}: not a document node")


__all__ = [
    "Group",
    "IfWrap",
    "Indent",
    "Line",
    "Node",
    "Nodes",
    "SpaceOrLine",
    "Text",
    "Unicode",
    "char_count",
    "flat_width",
]
