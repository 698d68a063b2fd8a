"""Extract the flat, single-line text of a document tree.

This is what the renderer produces when every group fits: SpaceOrLine
becomes a space, Line disappears, and every IfWrap takes its flat branch.

Example:
    >>> from wrapdoc.builder import example_document
    >>> flatten(example_document())
    'foo(12345678901234567890, bar(98765432109876543210, "s", without_arguments()))'
"""

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
)


def flatten(node: Node) -> str:
    """Return the one-line text of ``node``.

    Raises:
        RenderError: If the tree contains an object that is not a node
    """
    parts: list[str] = []
    _flatten_into(node, parts)
    return "".join(parts)


def _flatten_into(node: Node, parts: list[str]) -> None:
    match node:
        case Group(children=children) | Nodes(children=children) | Indent(children=children):
            for child in children:
                _flatten_into(child, parts)
        case IfWrap(flat=flat):
            _flatten_into(flat, parts)
        case Text(content=content) | Unicode(content=content):
            parts.append(content)
        case SpaceOrLine():
            parts.append(" ")
        case Line():
            pass
        case _:
            raise RenderError(f"Cannot flatten {type(node).__name__}: not a document node")


__all__ = ["flatten"]
