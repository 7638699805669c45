"""Text layout: word wrapping, breaking and overflow of styled text runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from wcwidth import wcwidth


class Wrap(Enum):
    """Word wrapping strategy."""

    NORMAL = "normal"
    WORD_BREAK = "break"
    OVERFLOW = "overflow"


class TextAlignment(Enum):
    """Alignment of each line inside the text's own width."""

    LEFT = "left"
    CENTRE = "centre"
    RIGHT = "right"


class ProcessOutput(Enum):
    """Result of feeding a run of text to a layout."""

    DONE = "done"
    INSUFFICIENT_SPACE = "insufficient_space"


def parse_wrap(value) -> Wrap:
    """Map an attribute value to a wrap mode; anything unknown is normal."""
    if value == "overflow":
        return Wrap.OVERFLOW
    if value == "break":
        return Wrap.WORD_BREAK
    return Wrap.NORMAL


def parse_text_alignment(value) -> TextAlignment:
    """Map an attribute value to a text alignment; anything unknown is left."""
    if value in ("center", "centre"):
        return TextAlignment.CENTRE
    if value == "right":
        return TextAlignment.RIGHT
    return TextAlignment.LEFT


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def _is_word_break(char: str) -> bool:
    return char == "-" or char.isspace()


@dataclass
class LineSegment:
    """A slice of one input text (by index) placed on a line."""

    start: int
    end: int
    width: int
    index: int

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass
class Line:
    """A laid out line made of segments."""

    segments: list[LineSegment]
    width: int = field(init=False)

    def __post_init__(self) -> None:
        self.width = sum(segment.width for segment in self.segments)


class _Entry:
    """A run of segments where consecutive pushes from the same text join up."""

    def __init__(self) -> None:
        self.segments: list[LineSegment] = []

    def width(self) -> int:
        return sum(segment.width for segment in self.segments)

    def push(self, segment: LineSegment) -> None:
        if self.segments and self.segments[-1].index == segment.index:
            last = self.segments[-1]
            last.end = segment.end
            last.width += segment.width
        else:
            self.segments.append(segment)

    def merge(self, other: _Entry) -> None:
        if not self.segments:
            self.segments, other.segments = other.segments, self.segments
            return
        taken = other.drain()
        if len(taken) == 1:
            self.push(taken[0])
        else:
            self.segments.extend(taken)

    def drain(self) -> list[LineSegment]:
        segments, self.segments = self.segments, []
        return segments


class _Tree:
    """Left run, word boundary and right run of the line being built."""

    def __init__(self) -> None:
        self.left = _Entry()
        self.middle: LineSegment | None = None
        self.right = _Entry()
        self.focus_right = False

    def push(self, segment: LineSegment) -> None:
        (self.right if self.focus_right else self.left).push(segment)

    def set_middle(self, segment: LineSegment) -> None:
        if self.middle is not None:
            self.left.push(self.middle)
            self.left.merge(self.right)
        self.middle = segment

    def drain(self, everything: bool) -> Line:
        self.left, self.right = self.right, self.left
        segments = self.right.drain()
        if self.middle is not None:
            segments.append(self.middle)
            self.middle = None
        if everything:
            segments.extend(self.left.drain())
        return Line(segments)


class TextLayout:
    """Lays out successive runs of text into lines within a maximum size."""

    def __init__(
        self,
        max_width: int = 0,
        max_height: int = 0,
        squash: bool = False,
        wrap: Wrap = Wrap.NORMAL,
    ) -> None:
        self.wrap = wrap
        self.reset(max_width, max_height, squash)

    @property
    def lines(self) -> list[Line]:
        return self._lines

    def reset(self, max_width: int, max_height: int, squash: bool) -> None:
        self.max_width = max_width
        self.max_height = max_height
        self.squash = squash
        self._lines: list[Line] = []
        self._tree = _Tree()
        self._current_width = 0
        self._slice_index = 0

    def _process_word_wrap(self, text: str) -> ProcessOutput:
        tree = self._tree
        for i, char in enumerate(text):
            width = _char_width(char)
            squash_here = char.isspace() and self.squash

            if width + self._current_width > self.max_width:
                # Squashing drops whitespace that would trail the line.
                line = tree.drain(everything=squash_here)
                tree.focus_right = False
                self._current_width = tree.left.width()
                self._lines.append(line)
                if len(self._lines) == self.max_height:
                    return ProcessOutput.INSUFFICIENT_SPACE
                if squash_here:
                    continue

            self._current_width += width

            if char == "\n":
                self._lines.append(tree.drain(everything=True))
                tree.focus_right = False
            elif _is_word_break(char):
                tree.set_middle(LineSegment(i, i + 1, width, self._slice_index))
                tree.focus_right = True
            else:
                tree.push(LineSegment(i, i + 1, width, self._slice_index))

        self._slice_index += 1
        return ProcessOutput.DONE

    def _process_word_break(self, text: str) -> ProcessOutput:
        for i, char in enumerate(text):
            width = _char_width(char)
            if width + self._current_width > self.max_width:
                self._lines.append(self._tree.drain(everything=False))
                if len(self._lines) == self.max_height:
                    return ProcessOutput.INSUFFICIENT_SPACE
                self._current_width = 0
            self._current_width += width
            self._tree.push(LineSegment(i, i + 1, width, self._slice_index))
        return ProcessOutput.DONE

    def _process_overflow(self, text: str) -> ProcessOutput:
        for i, char in enumerate(text):
            width = _char_width(char)
            if width + self._current_width > self.max_width:
                return ProcessOutput.INSUFFICIENT_SPACE
            self._current_width += width
            self._tree.push(LineSegment(i, i + 1, width, self._slice_index))
        return ProcessOutput.DONE

    def process(self, text: str) -> ProcessOutput:
        """Feed the next run of text into the layout."""
        if self.wrap is Wrap.WORD_BREAK:
            return self._process_word_break(text)
        if self.wrap is Wrap.OVERFLOW:
            return self._process_overflow(text)
        return self._process_word_wrap(text)

    def finish(self) -> None:
        """Flush the pending line if there is room for it."""
        if len(self._lines) < self.max_height:
            self._lines.append(self._tree.drain(everything=True))

    def size(self) -> tuple[int, int]:
        """Return (width, height) of the laid out text."""
        width = max((line.width for line in self._lines), default=0)
        return width, len(self._lines)


def line_offset(alignment: TextAlignment, max_width: int, line_width: int) -> int:
    """Horizontal start of a line of the given width."""
    if alignment is TextAlignment.CENTRE:
        return max_width // 2 - line_width // 2
    if alignment is TextAlignment.RIGHT:
        return max_width - line_width
    return 0


def layout_text(
    texts: Iterable[str],
    max_width: int,
    max_height: int,
    wrap: Wrap = Wrap.NORMAL,
    squash: bool = True,
    alignment: TextAlignment = TextAlignment.LEFT,
) -> list[str]:
    """Lay out a text followed by its spans and return the rendered rows.

    Each row holds the leading alignment padding followed by the line's text.
    """
    texts = list(texts)
    if not texts:
        texts = [""]
    layout = TextLayout(max_width, max_height, squash, wrap)
    layout.process(texts[0])
    for span in texts[1:]:
        if layout.process(span) is ProcessOutput.INSUFFICIENT_SPACE:
            break
    layout.finish()

    width, _ = layout.size()
    rows = []
    for line in layout.lines:
        offset = line_offset(alignment, width, line.width)
        body = "".join(
            segment.slice(texts[segment.index]) if segment.index < len(texts) else ""
            for segment in line.segments
        )
        rows.append(" " * offset + body)
    return rows