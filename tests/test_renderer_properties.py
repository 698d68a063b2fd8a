"""Property-based tests for the renderer using Hypothesis.

These tests verify invariants that should hold for any well-formed tree:
1. Rendering is deterministic
2. Every group is decided once, and an unwrapped group always fit
3. With a budget wider than the whole document, output is the flat text
4. With a zero budget, every group with content wraps
5. Conditional content follows the decision of the group it references
"""

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from wrapdoc import render
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
from wrapdoc.profiling import profiled_render
from wrapdoc.text import flatten
from wrapdoc.visitor import check_well_formed, collect_group_ids

UNKNOWN_ID = 10_000

words = st.text(alphabet=string.ascii_letters + string.digits + "(),.", max_size=8)
unicode_words = st.text(alphabet="äöüßéñ日本", min_size=1, max_size=4)
LEAF_KINDS = ["text", "text", "unicode", "space", "line"]
CONTAINER_KINDS = ["group", "group", "nodes", "indent", "if_wrap"]


@st.composite
def documents(draw: st.DrawFn, max_depth: int = 3) -> Node:
    """Draw a well-formed tree.

    Group ids are allocated in render order. IfWrap nodes reference either a
    group already reached or an id that never appears.
    """
    next_id = [0]

    def build(depth: int) -> Node:
        kinds = LEAF_KINDS + (CONTAINER_KINDS if depth < max_depth else [])
        kind = draw(st.sampled_from(kinds))
        match kind:
            case "text":
                return Text(draw(words))
            case "unicode":
                return Unicode.of(draw(unicode_words))
            case "space":
                return SpaceOrLine()
            case "line":
                return Line()
            case "group":
                gid = next_id[0]
                next_id[0] += 1
                return Group(gid, children(depth))
            case "nodes":
                return Nodes(children(depth))
            case "indent":
                return Indent(children(depth))
            case _:
                if next_id[0] and draw(st.booleans()):
                    gid = draw(st.integers(0, next_id[0] - 1))
                else:
                    gid = UNKNOWN_ID
                return IfWrap(gid, build(depth + 1), build(depth + 1))

    def children(depth: int) -> tuple[Node, ...]:
        count = draw(st.integers(0, 3))
        return tuple(build(depth + 1) for _ in range(count))

    return build(0)


widths = st.integers(min_value=0, max_value=60)


class TestRenderProperties:
    @given(doc=documents(), width=widths)
    @settings(max_examples=200)
    def test_deterministic(self, doc: Node, width: int) -> None:
        assert render(doc, width) == render(doc, width)

    @given(doc=documents(), width=widths)
    @settings(max_examples=200)
    def test_each_group_decided_once_in_order(self, doc: Node, width: int) -> None:
        with profiled_render() as acc:
            render(doc, width)
        decided = [d.group_id for d in acc.decisions]
        # Groups inside an IfWrap branch that was not taken are never reached.
        assert decided == sorted(set(decided))
        assert set(decided) <= set(collect_group_ids(doc))
        assert len(set(acc.wrapped_ids)) == len(acc.wrapped_ids)

    @given(doc=documents(), width=widths)
    @settings(max_examples=200)
    def test_unwrapped_groups_fit(self, doc: Node, width: int) -> None:
        with profiled_render() as acc:
            render(doc, width)
        for decision in acc.decisions:
            assert decision.wrapped != decision.fits

    @given(doc=documents())
    @settings(max_examples=200)
    def test_wide_budget_renders_flat_text(self, doc: Node) -> None:
        width = flat_width(doc, set())
        assert render(doc, width) == flatten(doc)
        assert render(doc, width + 25) == flatten(doc)

    @given(doc=documents())
    @settings(max_examples=200)
    def test_zero_budget_wraps_every_group_with_content(self, doc: Node) -> None:
        with profiled_render() as acc:
            render(doc, 0)
        for decision in acc.decisions:
            assert decision.wrapped == (decision.column + decision.width > 0)

    @given(doc=documents())
    @settings(max_examples=100)
    def test_generated_documents_are_well_formed(self, doc: Node) -> None:
        check_well_formed(doc)


class TestConditionalProperties:
    @given(head=words, width=widths)
    @settings(max_examples=100)
    def test_if_wrap_follows_owning_group(self, head: str, width: int) -> None:
        doc = Group(0, (Text(head), SpaceOrLine(), IfWrap(0, Text("[W]"), Text("[F]"))))
        with profiled_render() as acc:
            out = render(doc, width)
        if acc.decisions[0].wrapped:
            assert out.endswith("[W]")
        else:
            assert out.endswith("[F]")

    @given(width=widths)
    def test_unknown_id_always_flat(self, width: int) -> None:
        doc = Group(0, (Text("x" * 30), IfWrap(UNKNOWN_ID, Text("[W]"), Text("[F]"))))
        assert render(doc, width).endswith("[F]")
