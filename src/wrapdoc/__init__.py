"""
wrapdoc: Wadler-style pretty printing for Python

Renders a tree of document nodes into text under a column budget. Each
group either fits on the current line or wraps, with line breaks and
indentation, in a single top-down pass.

Quick Start:
    >>> from wrapdoc import DocumentBuilder, render
    >>> b = DocumentBuilder()
    >>> doc = b.call("point", [b.number(1), b.number(2)])
    >>> render(doc)
    'point(1, 2)'
    >>> print(render(doc, max_width=8))
    point(
      1,
      2,
    )

Building trees by hand:
    >>> from wrapdoc import Group, Indent, Line, SpaceOrLine, Text
    >>> doc = Group(0, (Text("["), Indent((Line(), Text("a"), SpaceOrLine(), Text("b"))), Line(), Text("]")))
    >>> render(doc, max_width=4)
    '[\\n  a\\n  b\\n]'
"""

from wrapdoc.builder import DocumentBuilder, example_document
from wrapdoc.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from wrapdoc.errors import (
    BuildError,
    ConfigError,
    DocumentError,
    RenderError,
    SerializationError,
    WrapdocError,
)
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
from wrapdoc.profiling import GroupDecision, RenderAccumulator, profiled_render
from wrapdoc.renderer import Renderer, WrapMode, render
from wrapdoc.serialization import from_dict, from_json, to_dict, to_json
from wrapdoc.text import flatten
from wrapdoc.visitor import BaseVisitor, check_well_formed, collect_group_ids, count_nodes
from wrapdoc.wrapstate import WrapState

__version__ = "0.1.0"

__all__ = [
    # Nodes
    "Group",
    "IfWrap",
    "Indent",
    "Line",
    "Node",
    "Nodes",
    "SpaceOrLine",
    "Text",
    "Unicode",
    "flat_width",
    # Rendering
    "Renderer",
    "WrapMode",
    "WrapState",
    "render",
    # Building
    "DocumentBuilder",
    "example_document",
    # Config
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Profiling
    "GroupDecision",
    "RenderAccumulator",
    "profiled_render",
    # Tree utilities
    "BaseVisitor",
    "check_well_formed",
    "collect_group_ids",
    "count_nodes",
    "flatten",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "BuildError",
    "ConfigError",
    "DocumentError",
    "RenderError",
    "SerializationError",
    "WrapdocError",
    "__version__",
]
