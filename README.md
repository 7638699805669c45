# tuilayout

These are layout building blocks for terminal user interfaces. Each
function takes and returns plain integers, strings, tuples and enums. That
keeps them independent of any rendering loop. Character widths come from
`wcwidth`, so wide characters take up two cells.

## Modules

### `tuilayout.textlayout`

This module wraps text into lines that fit a maximum width and height.

- `Wrap` sets how lines break:
  - `NORMAL` breaks at whitespace and hyphens.
  - `WORD_BREAK` breaks anywhere.
  - `OVERFLOW` stops when the width is reached.
- `parse_wrap` maps `"overflow"` and `"break"` to their modes. Any other
  value gives `NORMAL`.
- `TextAlignment` has `LEFT`, `CENTRE` and `RIGHT`.
  - `parse_text_alignment` accepts `"center"`, `"centre"` and `"right"`.
    Any other value gives `LEFT`.
  - `line_offset` returns where a line starts for a given alignment.
- `TextLayout` takes successive runs of text, such as a text followed by
  its spans.
  - Call `process()` for each run, then `finish()`.
  - `lines` holds `Line` objects made of `LineSegment`s. Each segment
    records which run it slices (`index`), and `slice()` returns that
    slice.
  - `size()` returns `(width, height)`.
  - `process()` returns `ProcessOutput.INSUFFICIENT_SPACE` when the layout
    runs out of room.
- `layout_text(texts, max_width, max_height, wrap, squash, alignment)`
  performs all of the above and returns the rows as strings.
  - Each row starts with the padding its alignment needs.
  - With `squash`, whitespace at a break point is dropped rather than left
    trailing.

### `tuilayout.border`

- `Sides` is an `IntFlag` with `TOP`, `RIGHT`, `BOTTOM`, `LEFT`, `ALL` and
  `EMPTY`.
  - `parse_sides` accepts a side name or a collection of names.
  - `sides_to_names` turns flags back into names.
- `BorderStyle` can be `"thin"`, `"thick"`, or a custom string of up to
  eight characters.
  - The characters run clockwise from the top-left corner.
  - Missing characters become spaces.
  - `edges()` returns the eight characters.
  - `parse_border_style` builds a style from an attribute value.
- `border_size` returns the border's own thickness as `(width, height)`.
- `child_offset` returns where a child sits inside the border.
- `border_cells` yields `(x, y, char)` for each cell drawn. Corners are
  drawn only where two sides meet.
- `render_border` draws the border onto a grid of strings.

### `tuilayout.distribute`

- `distribute_size(weights, total)` splits `total` across `weights` with
  the Huntington–Hill method.
  - Every weight gets at least one unit.
  - The results add up to `total`.
  - It raises `ValueError` unless `total` is larger than the number of
    weights.

### `tuilayout.flow`

- `Axis` has `HORIZONTAL` and `VERTICAL`. `Direction` has `FORWARDS` and
  `BACKWARDS`.
- `UsedSize` keeps track of the space taken by children laid out in a row
  along an axis.
  - `apply()` adds a child's size.
  - `no_space_left()` reports whether the space is full.
  - `remaining()` returns the space still free.
- `ScrollOffset.skip()` uses up a scroll offset on the first children.
  - It returns `None` for a child that falls entirely inside the offset.
  - Otherwise it returns the child's visible size.
- `spacer_constraints` splits the remaining space along the axis evenly
  between spacers.

### `tuilayout.placement`

- `Align` has nine positions: the four corners, the four edges and
  `CENTRE`. `alignment_offset` returns a child's offset for a given
  alignment.
- `HorzEdge` and `VertEdge` work with `position_offset` to place a child a
  given distance from the left or right edge and the top or bottom edge.
- `viewport_offset` returns the scroll offset in use. A clamped viewport
  never scrolls below zero.
- `viewport_positions` returns the position of each child in a scrolling
  viewport. It supports both axes and both directions, with or without
  clamping.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from tuilayout.textlayout import Wrap, TextAlignment, layout_text
from tuilayout.border import Sides, BorderStyle, render_border

rows = layout_text(["hello how are you"], 16, 3, Wrap.NORMAL, True, TextAlignment.LEFT)
for row in rows:
    print(row)

for row in render_border(Sides.ALL, BorderStyle("thick").edges(), 5, 4):
    print(row)
# ╔═══╗
# ║   ║
# ║   ║
# ╚═══╝
```

## What this package does not do

This package only calculates sizes, offsets and characters. It does not
include:

- a widget tree
- a template language
- an event loop or input handling
- any output to a real terminal

Any application that uses it has to provide its own screen buffer and
drawing loop.