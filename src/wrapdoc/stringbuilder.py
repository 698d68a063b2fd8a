"""StringBuilder for O(n) output accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Line breaks are emitted together with the
indentation of the line they open.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only text buffer.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("foo(")
            >>> sb.newline("  ", 1)
            >>> sb.append("x")
            >>> sb.build()
            'foo(\\n  x'

    """

    __slots__ = ("_parts", "_lines")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._lines = 1

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def newline(self, indent: str, depth: int) -> StringBuilder:
        """Append a line break followed by ``depth`` copies of ``indent``.

        Args:
            indent: Indentation unit for one level
            depth: Number of levels on the new line

        Returns:
            self for method chaining
        """
        self._parts.append("\n")
        if depth and indent:
            self._parts.append(indent * depth)
        self._lines += 1
        return self

    @property
    def line_count(self) -> int:
        """Number of lines in the output so far (at least 1)."""
        return self._lines

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
