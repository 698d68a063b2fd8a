"""cProfile wrapper for wrapdoc rendering.

Renders deeply nested call documents, where every group re-measures its
whole subtree, so the cost of measurement shows up clearly.

Run with:
    uv run python -m cProfile -o profile.prof benchmarks/profile_render.py
    uv run python -m snakeviz profile.prof

Or for direct profiling:
    uv run python benchmarks/profile_render.py
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys

from wrapdoc import DocumentBuilder, Node, Renderer
from wrapdoc.profiling import profiled_render


def nested_calls(depth: int, fanout: int) -> Node:
    """Build ``f0(f1(..., 1, 2), 1, 2)`` nested ``depth`` levels deep."""
    b = DocumentBuilder()

    def build(level: int) -> Node:
        args = [b.number(i) for i in range(fanout)]
        if level < depth:
            args.insert(0, build(level + 1))
        return b.call(f"f{level}", args)

    return build(0)


def render_corpus(iterations: int = 20) -> None:
    docs = [nested_calls(depth, 4) for depth in (5, 20, 40)]
    renderers = [Renderer(max_width=w) for w in (120, 80, 40)]
    for _ in range(iterations):
        for doc in docs:
            for renderer in renderers:
                renderer.render(doc)


def main() -> None:
    """Run profiling and print results."""
    print("wrapdoc Profiling")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}")

    with profiled_render() as metrics:
        Renderer(max_width=80).render(nested_calls(40, 4))
    print(f"\nSingle deep render: {metrics.summary()}")

    iterations = 20
    print(f"\nRendering corpus {iterations}x...")

    profiler = cProfile.Profile()
    profiler.enable()
    render_corpus(iterations)
    profiler.disable()

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY CUMULATIVE TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.CUMULATIVE)
    ps.print_stats(20)
    print(s.getvalue())

    print("\n" + "=" * 60)
    print("TOP 20 FUNCTIONS BY TOTAL (SELF) TIME")
    print("=" * 60 + "\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(pstats.SortKey.TIME)
    ps.print_stats(20)
    print(s.getvalue())


if __name__ == "__main__":
    main()
