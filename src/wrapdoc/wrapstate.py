"""Wrap-state tracking for a single render.

Records which groups were decided to wrap. Ids are only ever added: once
a group wraps it stays wrapped for the rest of the render.

Thread Safety:
A WrapState belongs to one RenderContext and is never shared.
"""

from __future__ import annotations

from collections.abc import Iterator


class WrapState:
    """Grow-only set of wrapped group ids.

    Usage:
            >>> state = WrapState()
            >>> state.add(3)
            >>> 3 in state
            True
            >>> 7 in state
            False

    """

    __slots__ = ("_ids", "_order")

    def __init__(self) -> None:
        self._ids: set[int] = set()
        self._order: list[int] = []

    def add(self, group_id: int) -> None:
        """Mark a group as wrapped. Adding an id twice is a no-op."""
        if group_id not in self._ids:
            self._ids.add(group_id)
            self._order.append(group_id)

    def __contains__(self, group_id: object) -> bool:
        return group_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        """Iterate ids in the order they were wrapped."""
        return iter(self._order)

    def snapshot(self) -> frozenset[int]:
        """Return an immutable copy of the current ids."""
        return frozenset(self._ids)

    def __repr__(self) -> str:
        return f"WrapState({self._order!r})"


__all__ = ["WrapState"]
