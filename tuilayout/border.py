"""Border geometry: sides, edge characters, thickness and the cells a border draws."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Iterator, Sequence

from wcwidth import wcwidth


class Edge(IntEnum):
    """Index into an edge set, starting top left and moving clockwise."""

    TOP_LEFT = 0
    TOP = 1
    TOP_RIGHT = 2
    RIGHT = 3
    BOTTOM_RIGHT = 4
    BOTTOM = 5
    BOTTOM_LEFT = 6
    LEFT = 7


DEFAULT_SLIM_EDGES: tuple[str, ...] = ("┌", "─", "┐", "│", "┘", "─", "└", "│")
DEFAULT_THICK_EDGES: tuple[str, ...] = ("╔", "═", "╗", "║", "╝", "═", "╚", "║")


class Sides(IntFlag):
    """Which sides of a border are drawn."""

    EMPTY = 0
    TOP = 0b0001
    RIGHT = 0b0010
    BOTTOM = 0b0100
    LEFT = 0b1000
    ALL = TOP | RIGHT | BOTTOM | LEFT


DEFAULT_SIDES = Sides.ALL

_SIDE_NAMES = {
    "all": Sides.ALL,
    "top": Sides.TOP,
    "left": Sides.LEFT,
    "right": Sides.RIGHT,
    "bottom": Sides.BOTTOM,
}

_NAMED_SIDES = (
    ("top", Sides.TOP),
    ("right", Sides.RIGHT),
    ("bottom", Sides.BOTTOM),
    ("left", Sides.LEFT),
)


def parse_sides(value) -> Sides:
    """Turn a side name, or a collection of side names, into `Sides`.

    Unknown names and values that are neither strings nor collections give `Sides.EMPTY`.
    """
    if isinstance(value, Sides):
        return value
    if isinstance(value, str):
        return _SIDE_NAMES.get(value, Sides.EMPTY)
    if isinstance(value, (list, tuple, set, frozenset)):
        sides = Sides.EMPTY
        for item in value:
            if isinstance(item, str):
                sides |= _SIDE_NAMES.get(item, Sides.EMPTY)
        return sides
    return Sides.EMPTY


def sides_to_names(sides: Sides) -> list[str]:
    """Names of the individual sides contained in `sides`, top, right, bottom, left."""
    return [name for name, flag in _NAMED_SIDES if flag in sides]


@dataclass(frozen=True)
class BorderStyle:
    """Style of a border: ``"thin"``, ``"thick"`` or a string of up to eight edge characters."""

    name: str = "thin"

    def edges(self) -> tuple[str, ...]:
        if self.name == "thin":
            return DEFAULT_SLIM_EDGES
        if self.name == "thick":
            return DEFAULT_THICK_EDGES
        chars = list(self.name[:8])
        return tuple(chars + [" "] * (8 - len(chars)))

    def __str__(self) -> str:
        return self.name


def parse_border_style(value) -> BorderStyle:
    """Map an attribute value to a border style; non-strings give the thin style."""
    if isinstance(value, BorderStyle):
        return value
    if isinstance(value, str):
        return BorderStyle(value)
    return BorderStyle()


def _width(char: str) -> int:
    return max(wcwidth(char), 0)


def border_size(sides: Sides, edges: Sequence[str]) -> tuple[int, int]:
    """Thickness of the border alone as (width, height), not counting the child."""
    border_width = 0
    if Sides.LEFT in sides:
        width = _width(edges[Edge.LEFT])
        if Sides.TOP | Sides.BOTTOM in sides:
            width = max(width, _width(edges[Edge.TOP_LEFT]), _width(edges[Edge.BOTTOM_LEFT]))
        border_width += width

    if Sides.RIGHT in sides:
        width = _width(edges[Edge.RIGHT])
        if Sides.TOP | Sides.BOTTOM in sides:
            width = max(width, _width(edges[Edge.TOP_RIGHT]), _width(edges[Edge.BOTTOM_RIGHT]))
        border_width += width

    border_height = 0
    if Sides.TOP in sides:
        height = 1
        if Sides.LEFT | Sides.RIGHT in sides:
            height = max(height, _width(edges[Edge.TOP_LEFT]), _width(edges[Edge.TOP_RIGHT]))
        border_height += height

    if Sides.BOTTOM in sides:
        height = 1
        if Sides.LEFT | Sides.RIGHT in sides:
            height = max(
                height, _width(edges[Edge.BOTTOM_LEFT]), _width(edges[Edge.BOTTOM_RIGHT])
            )
        border_height += height

    return border_width, border_height


def child_offset(sides: Sides, edges: Sequence[str]) -> tuple[int, int]:
    """Where the child sits relative to the border's own position, as (x, y)."""
    x = _width(edges[Edge.LEFT]) if Sides.LEFT in sides else 0
    y = 1 if Sides.TOP in sides else 0
    return x, y


def _corner(sides: Sides, edges, vert: Sides, horz: Sides, corner: Edge, horz_edge: Edge,
            vert_edge: Edge) -> str | None:
    if vert | horz in sides:
        return edges[corner]
    if horz in sides:
        return edges[horz_edge]
    if vert in sides:
        return edges[vert_edge]
    return None


def border_cells(
    sides: Sides, edges: Sequence[str], width: int, height: int
) -> Iterator[tuple[int, int, str]]:
    """Yield (x, y, char) for every cell the border draws, in drawing order.

    Corners come first, then the top, bottom, left and right runs; a later cell
    at the same position replaces an earlier one.
    """
    right = max(width - 1, 0)
    bottom = max(height - 1, 0)

    corners = (
        (0, 0, Sides.LEFT, Sides.TOP, Edge.TOP_LEFT, Edge.TOP, Edge.LEFT),
        (right, 0, Sides.RIGHT, Sides.TOP, Edge.TOP_RIGHT, Edge.TOP, Edge.RIGHT),
        (0, bottom, Sides.LEFT, Sides.BOTTOM, Edge.BOTTOM_LEFT, Edge.BOTTOM, Edge.LEFT),
        (right, bottom, Sides.RIGHT, Sides.BOTTOM, Edge.BOTTOM_RIGHT, Edge.BOTTOM, Edge.RIGHT),
    )
    for x, y, vert, horz, corner, horz_edge, vert_edge in corners:
        char = _corner(sides, edges, vert, horz, corner, horz_edge, vert_edge)
        if char is not None:
            yield x, y, char

    if Sides.TOP in sides:
        for x in range(1, right):
            yield x, 0, edges[Edge.TOP]
    if Sides.BOTTOM in sides:
        for x in range(1, right):
            yield x, bottom, edges[Edge.BOTTOM]
    if Sides.LEFT in sides:
        for y in range(1, bottom):
            yield 0, y, edges[Edge.LEFT]
    if Sides.RIGHT in sides:
        for y in range(1, bottom):
            yield right, y, edges[Edge.RIGHT]


def render_border(sides: Sides, edges: Sequence[str], width: int, height: int) -> list[str]:
    """Draw the border into a width by height grid and return its rows."""
    grid = [[" "] * width for _ in range(height)]
    for x, y, char in border_cells(sides, edges, width, height):
        if 0 <= x < width and 0 <= y < height:
            grid[y][x] = char
    return ["".join(row) for row in grid]