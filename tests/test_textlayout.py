import pytest

from tuilayout.textlayout import (
    Line,
    LineSegment,
    ProcessOutput,
    TextAlignment,
    TextLayout,
    Wrap,
    layout_text,
    line_offset,
    parse_text_alignment,
    parse_wrap,
)


def rows(*args, **kwargs):
    return [row.rstrip() for row in layout_text(*args, **kwargs)]


def test_word_wrap_excessive_space():
    result = rows(["hello      how are     you"], 16, 6)
    assert result == ["hello      how", "are     you"]


def test_word_wrap():
    assert rows(["hello how are you"], 16, 3) == ["hello how are", "you"]


def test_no_word_wrap():
    result = rows(["hello how are you"], 16, 3, wrap=Wrap.OVERFLOW)
    assert result == ["hello how are yo"]


def test_break_word_wrap():
    result = rows(["hellohowareyoudoing"], 16, 3, wrap=Wrap.WORD_BREAK)
    assert result == ["hellohowareyoudo", "ing"]


def test_char_wrap_layout_multiple_spans():
    result = rows(["one", "two", " averylongword", " bunny "], 19, 3)
    assert result == ["onetwo", "averylongword bunny", ""]


def test_right_alignment():
    result = rows(
        ["a one xxxxxxxxxxxxxxxxxx"], 18, 3, alignment=parse_text_alignment("right")
    )
    assert result == ["            a one", "x" * 18]


def test_centre_alignment():
    result = rows(
        ["a one xxxxxxxxxxxxxxxxxx"], 18, 3, alignment=parse_text_alignment("center")
    )
    assert result == ["      a one", "x" * 18]


def test_word_wrap_keeps_trailing_boundary():
    assert layout_text(["hello how are you"], 16, 3) == ["hello how are ", "you"]


def test_height_limit_stops_processing():
    layout = TextLayout(16, 1, True, Wrap.NORMAL)
    assert layout.process("hello how are you") is ProcessOutput.INSUFFICIENT_SPACE
    layout.finish()
    assert len(layout.lines) == 1
    assert layout.size() == (14, 1)


def test_overflow_reports_insufficient_space():
    layout = TextLayout(3, 2, True, Wrap.OVERFLOW)
    assert layout.process("abcd") is ProcessOutput.INSUFFICIENT_SPACE
    layout.finish()
    assert layout.size() == (3, 1)


def test_empty_text_gives_single_empty_line():
    layout = TextLayout(10, 3, True, Wrap.NORMAL)
    assert layout.process("") is ProcessOutput.DONE
    layout.finish()
    assert layout.size() == (0, 1)


def test_newline_splits_lines():
    assert layout_text(["ab\ncd"], 10, 5) == ["ab", "cd"]


def test_wide_characters_break():
    assert layout_text(["日本"], 3, 5, wrap=Wrap.WORD_BREAK) == ["日", "本"]
    layout = TextLayout(3, 5, True, Wrap.WORD_BREAK)
    layout.process("日本")
    layout.finish()
    assert layout.size() == (2, 2)


def test_reset_clears_lines():
    layout = TextLayout(5, 5, True, Wrap.NORMAL)
    layout.process("abc def ghi")
    layout.finish()
    assert len(layout.lines) > 1
    layout.reset(20, 5, True)
    layout.process("abc")
    layout.finish()
    assert layout.size() == (3, 1)


def test_lines_width_never_exceeds_max_in_break_mode():
    layout = TextLayout(4, 100, False, Wrap.WORD_BREAK)
    layout.process("abcdefghijklmnopq")
    layout.finish()
    assert all(line.width <= 4 for line in layout.lines)
    assert "".join(
        seg.slice("abcdefghijklmnopq") for line in layout.lines for seg in line.segments
    ) == "abcdefghijklmnopq"


def test_line_segment_slice_and_line_width():
    segment = LineSegment(start=2, end=5, width=3, index=0)
    assert segment.slice("hello world") == "llo"
    line = Line([segment, LineSegment(0, 1, 1, 1)])
    assert line.width == 4


@pytest.mark.parametrize(
    "value,expected",
    [
        ("overflow", Wrap.OVERFLOW),
        ("break", Wrap.WORD_BREAK),
        ("normal", Wrap.NORMAL),
        ("anything", Wrap.NORMAL),
        (None, Wrap.NORMAL),
    ],
)
def test_parse_wrap(value, expected):
    assert parse_wrap(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("center", TextAlignment.CENTRE),
        ("centre", TextAlignment.CENTRE),
        ("right", TextAlignment.RIGHT),
        ("left", TextAlignment.LEFT),
        (3, TextAlignment.LEFT),
    ],
)
def test_parse_text_alignment(value, expected):
    assert parse_text_alignment(value) is expected


@pytest.mark.parametrize(
    "alignment,expected",
    [
        (TextAlignment.LEFT, 0),
        (TextAlignment.CENTRE, 6),
        (TextAlignment.RIGHT, 12),
    ],
)
def test_line_offset(alignment, expected):
    assert line_offset(alignment, 18, 6) == expected