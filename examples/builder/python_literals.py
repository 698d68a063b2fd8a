"""Pretty-print nested Python data as literal syntax.

Lists, tuples and dicts become groups: each collapses onto one line when it
fits and otherwise puts one element per line with a trailing comma.
"""

from typing import Any

from wrapdoc import DocumentBuilder, Node, render
from wrapdoc.nodes import Line, Nodes, SpaceOrLine, Text


def _sequence(b: DocumentBuilder, open_: str, close: str, items: list[Node]) -> Node:
    if not items:
        return Text(open_ + close)

    def build(gid: int) -> list[Node]:
        body: list[Node] = [Line()]
        for i, item in enumerate(items):
            if i:
                body.extend((Text(","), SpaceOrLine()))
            body.append(item)
        body.append(b.if_wrap(gid, Text(","), Text("")))
        return [b.indent(*body), Line()]

    return Nodes((Text(open_), b.group(build), Text(close)))


def to_doc(b: DocumentBuilder, value: Any) -> Node:
    match value:
        case dict():
            items = [
                Nodes((to_doc(b, k), Text(": "), to_doc(b, v))) for k, v in value.items()
            ]
            return _sequence(b, "{", "}", items)
        case list():
            return _sequence(b, "[", "]", [to_doc(b, v) for v in value])
        case tuple():
            return _sequence(b, "(", ")", [to_doc(b, v) for v in value])
        case _:
            return b.text(repr(value))


data = {
    "name": "wrapdoc",
    "widths": [80, 60, 40, 20],
    "nested": {"point": (1, 2), "labels": ["α", "β", "γ"], "empty": []},
}

doc = to_doc(DocumentBuilder(), data)
for width in (100, 50, 20):
    print(f"--- width {width} ---")
    print(render(doc, width))
