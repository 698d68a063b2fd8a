"""Document serialization: JSON round-trip for wrapdoc trees.

Converts document nodes to/from JSON-compatible dicts. Useful for:
- Feeding documents to the command line (``wrapdoc --doc tree.json``)
- Storing fixtures for rendering tests
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from wrapdoc.builder import example_document
    from wrapdoc.serialization import to_json, from_json

    doc = example_document()
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from wrapdoc.errors import SerializationError
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

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Group": Group,
    "Nodes": Nodes,
    "Indent": Indent,
    "IfWrap": IfWrap,
    "Text": Text,
    "Unicode": Unicode,
    "SpaceOrLine": SpaceOrLine,
    "Line": Line,
}

# Fields holding a single child node
_NODE_FIELDS = {"wrapped", "flat"}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a document node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Raises:
        SerializationError: If ``node`` is not a document node
    """
    if _NODE_TYPES.get(type(node).__name__) is not type(node):
        raise SerializationError(f"Cannot serialize {type(node).__name__}: not a document node")

    result: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, Node):
            result[f.name] = to_dict(value)
        elif isinstance(value, tuple):
            result[f.name] = [to_dict(child) for child in value]
        else:
            result[f.name] = value
    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a document node from a dict.

    A ``Unicode`` entry without ``width`` has its width computed.

    Raises:
        SerializationError: If ``_type`` is missing or unknown, or fields
            are missing or malformed
    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected an object, got {type(data).__name__}")

    type_name = data.get("_type")
    if type_name is None:
        raise SerializationError("Missing '_type' field in serialized node")

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise SerializationError(f"Unknown node type: {type_name!r}")

    if node_cls is Unicode and "width" not in data:
        return Unicode.of(_expect(data, "content", str, type_name))

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name == "children":
            raw = _expect(data, f.name, list, type_name)
            kwargs[f.name] = tuple(from_dict(child) for child in raw)
        elif f.name in _NODE_FIELDS:
            kwargs[f.name] = from_dict(_expect(data, f.name, dict, type_name))
        elif f.name == "content":
            kwargs[f.name] = _expect(data, f.name, str, type_name)
        else:
            kwargs[f.name] = _expect(data, f.name, int, type_name)
    return node_cls(**kwargs)


def _expect(data: dict[str, Any], name: str, kind: type, type_name: str) -> Any:
    if name not in data:
        raise SerializationError(f"{type_name} is missing field {name!r}")
    value = data[name]
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SerializationError(
            f"{type_name}.{name} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a document tree to a JSON string.

    Args:
        node: Root of the tree.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a document tree from a JSON string.

    Raises:
        SerializationError: If the input is not valid JSON or not a tree
    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
