"""RenderAccumulator: opt-in profiling for document rendering.

This module provides accumulated metrics during rendering:
- Total render time
- Node count of rendered trees
- Output length and line count
- Every group decision, in the order it was made

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from wrapdoc import render
    from wrapdoc.profiling import profiled_render

    with profiled_render() as metrics:
        text = render(doc, 40)

    print(metrics.summary())
    # {"total_ms": 0.3, "render_calls": 1, "node_count": 21, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass(frozen=True, slots=True)
class GroupDecision:
    """One fit/wrap decision made by the renderer.

    Attributes:
        group_id: Id of the decided group
        column: Column at which the group started
        width: Flat width measured for the group's children
        max_width: Column budget in effect
        wrapped: Whether the group was marked wrapped

    """

    group_id: int
    column: int
    width: int
    max_width: int
    wrapped: bool

    @property
    def fits(self) -> bool:
        return self.column + self.width <= self.max_width


@dataclass
class RenderAccumulator:
    """Accumulated metrics during rendering.

    Attributes:
        start_time: Profiling start timestamp.
        render_calls: Number of render() calls recorded.
        node_count: Total nodes across rendered trees.
        output_length: Total characters produced.
        line_count: Total lines produced.
        decisions: Group decisions across all recorded renders.

    """

    start_time: float = field(default_factory=perf_counter)
    render_calls: int = 0
    node_count: int = 0
    output_length: int = 0
    line_count: int = 0
    decisions: list[GroupDecision] = field(default_factory=list)

    def record_decision(self, decision: GroupDecision) -> None:
        self.decisions.append(decision)

    def record_render(self, node_count: int, output_length: int, line_count: int) -> None:
        """Record a completed render call.

        Args:
            node_count: Number of nodes in the rendered tree.
            output_length: Length of the rendered string.
            line_count: Number of lines in the rendered string.

        """
        self.render_calls += 1
        self.node_count += node_count
        self.output_length += output_length
        self.line_count += line_count

    @property
    def wrapped_ids(self) -> list[int]:
        """Ids of wrapped groups, in decision order."""
        return [d.group_id for d in self.decisions if d.wrapped]

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics.

        Returns:
            Dict with total_ms, render_calls, node_count, output_length,
            line_count, groups and wrapped_groups.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_calls": self.render_calls,
            "node_count": self.node_count,
            "output_length": self.output_length,
            "line_count": self.line_count,
            "groups": len(self.decisions),
            "wrapped_groups": len(self.wrapped_ids),
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during render calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "GroupDecision",
    "RenderAccumulator",
    "get_render_accumulator",
    "profiled_render",
]
