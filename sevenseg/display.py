"""Terminal rendering of seven-segment digits."""

from typing import Iterable, List

from .catalog import DIGIT_SEGMENTS, Segment

_ANSI_RESET = "\033[0m"
_ANSI_LIT = "\033[91m"

# Each digit is drawn three rows high and three columns wide:
#  _
# |_|
# |_|
_CELLS = (
    (None, Segment.TOP, None),
    (Segment.TOP_LEFT, Segment.MIDDLE, Segment.TOP_RIGHT),
    (Segment.BOTTOM_LEFT, Segment.BOTTOM, Segment.BOTTOM_RIGHT),
)


def _glyph(segment: Segment) -> str:
    if segment in (Segment.TOP, Segment.MIDDLE, Segment.BOTTOM):
        return "_"
    return "|"


def render_digit_rows(digit: int, color: bool = False) -> List[str]:
    """
    Render one digit as three text rows.

    Args:
        digit: Digit 0-9 to draw.
        color: If True, wrap lit segments in ANSI colour codes.

    Returns:
        Three strings of three visible characters each.

    Raises:
        ValueError: If digit is outside 0..9.
    """
    if digit not in DIGIT_SEGMENTS:
        raise ValueError(f"digit must be in 0..9, got {digit}.")

    lit = DIGIT_SEGMENTS[digit]
    rows: List[str] = []
    for cells in _CELLS:
        row = ""
        for segment in cells:
            if segment is None or segment not in lit:
                row += " "
            elif color:
                row += f"{_ANSI_LIT}{_glyph(segment)}{_ANSI_RESET}"
            else:
                row += _glyph(segment)
        rows.append(row)
    return rows


def format_digits(digits: Iterable[int], color: bool = False) -> str:
    """
    Render a sequence of digits side by side as a multi-line string.

    Args:
        digits: Digits to draw, left to right.
        color: If True, highlight lit segments with ANSI colour.
    """
    rendered = [render_digit_rows(d, color=color) for d in digits]
    lines = [" ".join(r[i] for r in rendered) for i in range(len(_CELLS))]
    return "\n".join(line.rstrip() for line in lines)


def format_value(value: int, width: int = 4, color: bool = False) -> str:
    """Render a non-negative integer zero-padded to ``width`` digits."""
    if value < 0:
        raise ValueError("value must be non-negative.")
    return format_digits((int(c) for c in str(value).zfill(width)), color=color)
