"""Placement of children: alignment, absolute positioning and scrolled viewports."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from tuilayout.flow import Axis, Direction


class Align(Enum):
    """Where a single child is placed inside its parent."""

    TOP_LEFT = "top_left"
    TOP = "top"
    TOP_RIGHT = "top_right"
    RIGHT = "right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM = "bottom"
    BOTTOM_LEFT = "bottom_left"
    LEFT = "left"
    CENTRE = "centre"

    def __str__(self) -> str:
        return self.value


class HorzEdge(Enum):
    """The horizontal edge a position is measured from."""

    LEFT = "left"
    RIGHT = "right"


class VertEdge(Enum):
    """The vertical edge a position is measured from."""

    TOP = "top"
    BOTTOM = "bottom"


def alignment_offset(
    align: Align, width: int, height: int, child_width: int, child_height: int
) -> tuple[int, int]:
    """Offset (x, y) of a child of the given size aligned inside width by height."""
    centre_x = width // 2 - child_width // 2
    centre_y = height // 2 - child_height // 2
    right = width - child_width
    bottom = height - child_height

    offsets = {
        Align.TOP_LEFT: (0, 0),
        Align.TOP: (centre_x, 0),
        Align.TOP_RIGHT: (right, 0),
        Align.RIGHT: (right, centre_y),
        Align.BOTTOM_RIGHT: (right, bottom),
        Align.BOTTOM: (centre_x, bottom),
        Align.BOTTOM_LEFT: (0, bottom),
        Align.LEFT: (0, centre_y),
        Align.CENTRE: (centre_x, centre_y),
    }
    return offsets[align]


def position_offset(
    horz_edge: HorzEdge,
    x: int | None,
    vert_edge: VertEdge,
    y: int | None,
    inner_width: int,
    inner_height: int,
    child_width: int,
    child_height: int,
) -> tuple[int, int]:
    """Offset (x, y) of a child placed ``x`` and ``y`` cells from the given edges.

    A missing distance counts as zero.
    """
    x = x or 0
    y = y or 0

    if horz_edge is HorzEdge.RIGHT:
        x = inner_width - x - child_width
    if vert_edge is VertEdge.BOTTOM:
        y = inner_height - y - child_height
    return x, y


def viewport_offset(offset: int | None, clamp: bool | None) -> int:
    """The effective scroll offset; a clamped viewport never scrolls below zero."""
    value = offset or 0
    if clamp and value < 0:
        value = 0
    return value


def viewport_positions(
    sizes: Iterable[tuple[int, int]],
    axis: Axis = Axis.VERTICAL,
    direction: Direction = Direction.FORWARDS,
    offset: int | None = 0,
    clamp: bool | None = False,
    inner_width: int = 0,
    inner_height: int = 0,
    origin_x: int = 0,
    origin_y: int = 0,
) -> list[tuple[int, int]]:
    """Positions (x, y) of children of the given (width, height) sizes in a viewport.

    Forwards, children flow from the origin and the offset scrolls them back;
    backwards, they flow from the far edge towards the origin. A clamped
    viewport keeps the end of the content from leaving the visible edge.
    """
    sizes = list(sizes)
    horizontal = axis is Axis.HORIZONTAL
    scroll = viewport_offset(offset, clamp)

    if clamp:
        total = sum(w if horizontal else h for w, h in sizes)
        visible = (inner_width if horizontal else inner_height) + scroll
        if visible > total:
            scroll -= visible - total

    x, y = origin_x, origin_y
    backwards = direction is Direction.BACKWARDS
    if backwards:
        if horizontal:
            x += inner_width
        else:
            y += inner_height

    shift = scroll if backwards else -scroll
    if horizontal:
        x += shift
    else:
        y += shift

    step = -1 if backwards else 1
    positions = []
    for width, height in sizes:
        if not backwards:
            positions.append((x, y))
        if horizontal:
            x += step * width
        else:
            y += step * height
        if backwards:
            positions.append((x, y))
    return positions