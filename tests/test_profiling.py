"""Tests for wrapdoc.profiling: render profiling API."""

from wrapdoc import render
from wrapdoc.builder import example_document
from wrapdoc.profiling import (
    GroupDecision,
    RenderAccumulator,
    get_render_accumulator,
    profiled_render,
)
from wrapdoc.visitor import count_nodes


class TestGetRenderAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_render_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_render():
            pass
        assert get_render_accumulator() is None


class TestProfiledRender:
    def test_yields_accumulator(self) -> None:
        with profiled_render() as acc:
            assert isinstance(acc, RenderAccumulator)
            assert get_render_accumulator() is acc

    def test_records_render_call(self) -> None:
        doc = example_document()
        with profiled_render() as acc:
            out = render(doc, 40)
        assert acc.render_calls == 1
        assert acc.node_count == count_nodes(doc)
        assert acc.output_length == len(out)
        assert acc.line_count == out.count("\n") + 1

    def test_records_decisions_in_order(self) -> None:
        with profiled_render() as acc:
            render(example_document(), 60)
        assert acc.decisions == [
            GroupDecision(group_id=1, column=4, width=73, max_width=60, wrapped=True),
            GroupDecision(group_id=0, column=6, width=46, max_width=60, wrapped=False),
        ]
        assert acc.wrapped_ids == [1]

    def test_multiple_renders_accumulate(self) -> None:
        with profiled_render() as acc:
            render(example_document(), 80)
            render(example_document(), 0)
        assert acc.render_calls == 2
        assert len(acc.decisions) == 4
        assert acc.wrapped_ids == [1, 0]

    def test_nothing_recorded_when_disabled(self) -> None:
        acc = RenderAccumulator()
        render(example_document(), 0)
        assert acc.render_calls == 0
        assert acc.decisions == []


class TestGroupDecision:
    def test_fits(self) -> None:
        assert GroupDecision(0, column=4, width=6, max_width=10, wrapped=False).fits
        assert not GroupDecision(0, column=5, width=6, max_width=10, wrapped=True).fits


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = RenderAccumulator().summary()
        assert summary["render_calls"] == 0
        assert summary["groups"] == 0
        assert summary["wrapped_groups"] == 0

    def test_summary_after_render(self) -> None:
        with profiled_render() as acc:
            render(example_document(), 40)
        summary = acc.summary()
        assert summary["render_calls"] == 1
        assert summary["groups"] == 2
        assert summary["wrapped_groups"] == 2
        assert summary["line_count"] == 8
        assert summary["total_ms"] >= 0
