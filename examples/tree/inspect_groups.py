"""Check a tree, list its groups, and see which ones wrapped."""

from wrapdoc import check_well_formed, collect_group_ids, example_document, render
from wrapdoc.profiling import profiled_render

doc = example_document()
check_well_formed(doc)
print("groups in render order:", collect_group_ids(doc))

with profiled_render() as metrics:
    render(doc, 60)

for decision in metrics.decisions:
    state = "wrapped" if decision.wrapped else "flat"
    print(
        f"group {decision.group_id}: column {decision.column} + width {decision.width}"
        f" vs budget {decision.max_width} -> {state}"
    )
print(metrics.summary())
