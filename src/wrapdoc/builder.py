"""Document construction helpers.

DocumentBuilder hands out group ids and assembles common shapes, such as
call-like syntax with an argument list that wraps one argument per line.

Example:
    >>> from wrapdoc import render
    >>> b = DocumentBuilder()
    >>> doc = b.call("max", [b.number(1), b.number(2)])
    >>> render(doc, 80)
    'max(1, 2)'
    >>> print(render(doc, 6))
    max(
      1,
      2,
    )

Thread Safety:
    A builder owns a plain counter. Build one document per builder, from
    one thread.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from wrapdoc.errors import BuildError
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

EXAMPLE_LONG_A = 12345678901234567890
EXAMPLE_LONG_B = 98765432109876543210


class DocumentBuilder:
    """Assemble document trees with unique group ids.

    Ids start at 0 and increase by one per allocated group.
    """

    __slots__ = ("_next_id",)

    def __init__(self) -> None:
        self._next_id = 0

    @property
    def allocated(self) -> int:
        """Number of group ids handed out so far."""
        return self._next_id

    def next_id(self) -> int:
        group_id = self._next_id
        self._next_id += 1
        return group_id

    # -- Leaves ---------------------------------------------------------------

    def text(self, content: str) -> Node:
        """Literal content; non-ASCII content gets a cached width."""
        if content.isascii():
            return Text(content)
        return Unicode.of(content)

    def string(self, content: str) -> Node:
        """A double-quoted string literal. Content is not escaped."""
        return self.text(f'"{content}"')

    def number(self, value: int | float) -> Text:
        return Text(str(value))

    # -- Containers -----------------------------------------------------------

    def nodes(self, *children: Node) -> Nodes:
        return Nodes(children)

    def indent(self, *children: Node) -> Indent:
        return Indent(children)

    def group(self, build: Callable[[int], Iterable[Node]]) -> Group:
        """Allocate a group id, then build its children.

        ``build`` receives the new id so the children can refer to it
        through ``if_wrap``.

        Example:
            >>> b = DocumentBuilder()
            >>> g = b.group(lambda gid: [Text("a"), b.if_wrap(gid, Text(";"), Text(""))])
            >>> g.id
            0
        """
        group_id = self.next_id()
        return Group(group_id, tuple(build(group_id)))

    def if_wrap(self, group_id: int, wrapped: Node, flat: Node) -> IfWrap:
        """Content that depends on whether ``group_id`` wrapped.

        Raises:
            BuildError: If ``group_id`` was not allocated by this builder
        """
        if not 0 <= group_id < self._next_id:
            raise BuildError(f"Group id {group_id} was not allocated by this builder")
        return IfWrap(group_id, wrapped, flat)

    # -- Call syntax ----------------------------------------------------------

    def arguments(self, args: Sequence[Node]) -> Group:
        """A comma-separated argument list.

        When wrapped, each argument sits on its own line one level deeper,
        followed by a trailing comma.
        """

        def build(group_id: int) -> list[Node]:
            body: list[Node] = [Line()]
            for i, arg in enumerate(args):
                if i:
                    body.extend((Text(","), SpaceOrLine()))
                body.append(arg)
            body.append(self.if_wrap(group_id, Text(","), Text("")))
            return [Indent(tuple(body)), Line()]

        return self.group(build)

    def call(self, name: str, args: Sequence[Node]) -> Nodes:
        """Call syntax ``name(args...)``.

        An empty argument list is always rendered as ``()``.
        """
        if not args:
            return Nodes((self.text(name), Text("()")))
        return Nodes((self.text(name), Text("("), self.arguments(args), Text(")")))


def example_document() -> Node:
    """Build ``foo(A, bar(B, "s", without_arguments()))``.

    A and B are 20-digit numeric literals, so the document is 78 columns
    wide when flat.
    """
    b = DocumentBuilder()
    return b.call(
        "foo",
        [
            b.number(EXAMPLE_LONG_A),
            b.call(
                "bar",
                [
                    b.number(EXAMPLE_LONG_B),
                    b.string("s"),
                    b.call("without_arguments", []),
                ],
            ),
        ],
    )


__all__ = ["DocumentBuilder", "example_document"]
