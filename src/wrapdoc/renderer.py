"""Single-pass width-aware renderer.

Walks a document tree once, top-down. At every Group it measures the flat
width of the group's children, commits a wrap decision for that group id,
then renders the children under the resulting mode. Decisions are never
revisited, so a group measured before a nested group wrapped assumes the
nested group is flat.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. A Renderer only holds configuration, so one instance can be
shared and reused across threads and documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from wrapdoc.config import get_render_config, validate_indent, validate_max_width
from wrapdoc.errors import RenderError
from wrapdoc.nodes import (
    Group,
    IfWrap,
    Indent,
    Line,
    Node,
    Nodes,
    SpaceOrLine,
    Text,
    Unicode,
    flat_width,
)
from wrapdoc.profiling import GroupDecision, RenderAccumulator, get_render_accumulator
from wrapdoc.stringbuilder import StringBuilder
from wrapdoc.utils.logger import get_logger
from wrapdoc.wrapstate import WrapState

logger = get_logger(__name__)


class WrapMode(Enum):
    """Ambient mode a node is rendered under.

    ENABLE: line breaks and indentation take effect.
    DETECT: render flat, but let each nested group decide for itself.
    """

    ENABLE = "enable"
    DETECT = "detect"


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Created fresh for each render() call and discarded afterwards.

    Attributes:
        max_width: Column budget
        indent: Indentation unit for one level
        sb: Output buffer
        wrapped: Ids of groups decided to wrap
        depth: Current indentation depth in levels
        column: Column position on the line being built
        accumulator: Active profiling accumulator, if any
    """

    max_width: int
    indent: str
    sb: StringBuilder = field(default_factory=StringBuilder)
    wrapped: WrapState = field(default_factory=WrapState)
    depth: int = 0
    column: int = 0
    accumulator: RenderAccumulator | None = None

    def write(self, s: str, width: int) -> None:
        self.sb.append(s)
        self.column += width

    def line_break(self) -> None:
        self.column = len(self.indent) * self.depth
        self.sb.newline(self.indent, self.depth)


class Renderer:
    """Render document trees to text under a column budget.

    Usage:
            >>> from wrapdoc.builder import example_document
            >>> print(Renderer(max_width=80).render(example_document()))
            foo(12345678901234567890, bar(98765432109876543210, "s", without_arguments()))

    Args:
        max_width: Column budget (defaults to the active RenderConfig)
        indent: Indentation unit (defaults to the active RenderConfig)

    Raises:
        ConfigError: If max_width is negative or indent is not a string
    """

    __slots__ = ("_max_width", "_indent")

    def __init__(self, max_width: int | None = None, indent: str | None = None) -> None:
        config = get_render_config()
        self._max_width = validate_max_width(config.max_width if max_width is None else max_width)
        self._indent = validate_indent(config.indent if indent is None else indent)

    @property
    def max_width(self) -> int:
        return self._max_width

    @property
    def indent(self) -> str:
        return self._indent

    def render(self, node: Node) -> str:
        """Render a document tree to a string.

        Args:
            node: Root of the document tree

        Returns:
            Rendered text, lines separated by ``\\n``

        Raises:
            RenderError: If the tree contains an object that is not a node
        """
        ctx = RenderContext(
            max_width=self._max_width,
            indent=self._indent,
            accumulator=get_render_accumulator(),
        )
        self._render_node(node, WrapMode.DETECT, ctx)
        result = ctx.sb.build()

        if ctx.accumulator is not None:
            from wrapdoc.visitor import count_nodes

            ctx.accumulator.record_render(
                node_count=count_nodes(node),
                output_length=len(result),
                line_count=ctx.sb.line_count,
            )
        return result

    def _render_node(self, node: Node, mode: WrapMode, ctx: RenderContext) -> None:
        match node:
            case Nodes():
                for child in node.children:
                    self._render_node(child, mode, ctx)
            case Group():
                self._render_group(node, ctx)
            case IfWrap():
                if node.group_id in ctx.wrapped:
                    self._render_node(node.wrapped, WrapMode.ENABLE, ctx)
                else:
                    self._render_node(node.flat, mode, ctx)
            case Text() | Unicode():
                ctx.write(node.content, node.width)
            case Line():
                if mode is WrapMode.ENABLE:
                    ctx.line_break()
            case SpaceOrLine():
                if mode is WrapMode.ENABLE:
                    ctx.line_break()
                else:
                    ctx.write(" ", 1)
            case Indent():
                self._render_indent(node, mode, ctx)
            case _:
                raise RenderError(f"Cannot render {type(node).__name__}: not a document node")

    def _render_group(self, group: Group, ctx: RenderContext) -> None:
        width = sum(flat_width(child, ctx.wrapped) for child in group.children)
        wraps = ctx.column + width > ctx.max_width
        if wraps:
            ctx.wrapped.add(group.id)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "group %d at column %d: width %d, budget %d -> %s",
                group.id,
                ctx.column,
                width,
                ctx.max_width,
                "wrap" if wraps else "flat",
            )
        if ctx.accumulator is not None:
            ctx.accumulator.record_decision(
                GroupDecision(
                    group_id=group.id,
                    column=ctx.column,
                    width=width,
                    max_width=ctx.max_width,
                    wrapped=wraps,
                )
            )

        mode = WrapMode.ENABLE if wraps else WrapMode.DETECT
        for child in group.children:
            self._render_node(child, mode, ctx)

    def _render_indent(self, indent: Indent, mode: WrapMode, ctx: RenderContext) -> None:
        if mode is WrapMode.DETECT:
            for child in indent.children:
                self._render_node(child, WrapMode.DETECT, ctx)
            return

        # Nothing is written here; the next line break materialises the indent.
        ctx.column += len(ctx.indent)
        ctx.depth += 1
        for child in indent.children:
            self._render_node(child, WrapMode.ENABLE, ctx)
        ctx.depth -= 1


def render(node: Node, max_width: int | None = None, *, indent: str | None = None) -> str:
    """Render a document tree to a string.

    Args:
        node: Root of the document tree
        max_width: Column budget (defaults to the active RenderConfig)
        indent: Indentation unit (defaults to the active RenderConfig)

    Returns:
        Rendered text

    Example:
        >>> from wrapdoc.nodes import Group, SpaceOrLine, Text
        >>> doc = Group(0, (Text("hello"), SpaceOrLine(), Text("world")))
        >>> render(doc, 80)
        'hello world'
        >>> render(doc, 5)
        'hello\\nworld'
    """
    return Renderer(max_width=max_width, indent=indent).render(node)


__all__ = ["RenderContext", "Renderer", "WrapMode", "render"]
