"""Bookkeeping for laying children out one after another along an axis."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Axis(Enum):
    """The axis children flow along."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Direction(Enum):
    """Whether children are laid out from the start or from the end."""

    FORWARDS = "forwards"
    BACKWARDS = "backwards"


@dataclass
class UsedSize:
    """Space used so far by children flowing along ``axis`` within a maximum size."""

    max_width: int
    max_height: int
    axis: Axis
    width: int = 0
    height: int = 0

    def apply(self, width: int, height: int) -> None:
        """Account for a child of the given size.

        Along the axis sizes add up, capped at the maximum; across it the
        largest child wins.
        """
        if self.axis is Axis.VERTICAL:
            self.width = max(self.width, width)
            self.height = min(self.height + height, self.max_height)
        else:
            self.height = max(self.height, height)
            self.width = min(self.width + width, self.max_width)

    def no_space_left(self) -> bool:
        """True once the space along the axis is used up."""
        if self.axis is Axis.HORIZONTAL:
            return self.width >= self.max_width
        return self.height >= self.max_height

    def remaining(self) -> tuple[int, int]:
        """The (width, height) left for the next child."""
        if self.axis is Axis.HORIZONTAL:
            return self.max_width - self.width, self.max_height
        return self.max_width, self.max_height - self.height


@dataclass
class ScrollOffset:
    """Scroll offset consumed by the leading children of a flow."""

    axis: Axis
    offset: int
    enabled: bool = True

    def skip(self, width: int, height: int) -> tuple[int, int] | None:
        """Consume the offset for a child of the given size.

        Returns ``None`` when the child lies wholly inside the offset and is
        skipped, otherwise the child's visible (width, height). The first child
        not skipped absorbs what is left of the offset and disables it.
        """
        if not self.enabled:
            return width, height

        along = height if self.axis is Axis.VERTICAL else width
        if self.offset >= along:
            self.offset -= along
            return None

        self.enabled = False
        if self.axis is Axis.VERTICAL:
            return width, height - self.offset
        return width - self.offset, height


def spacer_constraints(
    axis: Axis, max_width: int, max_height: int, count: int
) -> tuple[int, int]:
    """The (width, height) each of ``count`` spacers takes from the space left.

    The space along the axis is split evenly, rounding down; across the axis a
    spacer takes nothing. With no spacers the result is zero.
    """
    if count <= 0:
        return 0, 0
    if axis is Axis.HORIZONTAL:
        return max_width // count, 0
    return 0, max_height // count