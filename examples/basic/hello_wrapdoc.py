"""Render the same call at three widths."""

from wrapdoc import example_document, render

doc = example_document()
for width in (80, 60, 40):
    print(f"--- width {width} ---")
    print(render(doc, width))
