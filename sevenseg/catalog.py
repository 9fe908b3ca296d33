"""Digit catalog for a correctly wired seven-segment display."""

from enum import IntEnum
from typing import Dict, FrozenSet, Tuple

WIRES = "abcdefg"


class Segment(IntEnum):
    """Physical segment positions, in wiring index order."""

    TOP = 0
    TOP_LEFT = 1
    TOP_RIGHT = 2
    MIDDLE = 3
    BOTTOM_LEFT = 4
    BOTTOM_RIGHT = 5
    BOTTOM = 6


SEGMENTS: Tuple[Segment, ...] = tuple(Segment)

_T = Segment.TOP
_TL = Segment.TOP_LEFT
_TR = Segment.TOP_RIGHT
_M = Segment.MIDDLE
_BL = Segment.BOTTOM_LEFT
_BR = Segment.BOTTOM_RIGHT
_B = Segment.BOTTOM

DIGIT_SEGMENTS: Dict[int, FrozenSet[Segment]] = {
    0: frozenset((_T, _TL, _TR, _BL, _BR, _B)),
    1: frozenset((_TR, _BR)),
    2: frozenset((_T, _TR, _M, _BL, _B)),
    3: frozenset((_T, _TR, _M, _BR, _B)),
    4: frozenset((_TL, _TR, _M, _BR)),
    5: frozenset((_T, _TL, _M, _BR, _B)),
    6: frozenset((_T, _TL, _M, _BL, _BR, _B)),
    7: frozenset((_T, _TR, _BR)),
    8: frozenset(SEGMENTS),
    9: frozenset((_T, _TL, _TR, _M, _BR, _B)),
}

# Module-level caches for tables derived from DIGIT_SEGMENTS.
_EXPECTED_FREQUENCIES: Dict[Segment, int] = {}
_DIGITS_BY_LENGTH: Dict[int, Tuple[int, ...]] = {}


def get_expected_frequencies() -> Dict[Segment, int]:
    """
    Count, for every segment, how many catalog digits light it.

    The counts do not depend on the wiring, so a wire lit in exactly that many
    of the ten scrambled patterns is a candidate for the segment.

    Returns:
        Mapping from each Segment to the number of digits 0-9 that use it.
    """
    if _EXPECTED_FREQUENCIES:
        return _EXPECTED_FREQUENCIES

    for segment in SEGMENTS:
        _EXPECTED_FREQUENCIES[segment] = sum(
            1 for segments in DIGIT_SEGMENTS.values() if segment in segments
        )
    return _EXPECTED_FREQUENCIES


def get_digits_by_length() -> Dict[int, Tuple[int, ...]]:
    """
    Group catalog digits by the number of segments they light.

    Returns:
        Mapping from pattern length to the ascending tuple of digits with
        that many segments, e.g. ``{2: (1,), 5: (2, 3, 5), ...}``.
    """
    if _DIGITS_BY_LENGTH:
        return _DIGITS_BY_LENGTH

    grouped: Dict[int, list] = {}
    for digit in sorted(DIGIT_SEGMENTS):
        grouped.setdefault(len(DIGIT_SEGMENTS[digit]), []).append(digit)

    for length in sorted(grouped):
        _DIGITS_BY_LENGTH[length] = tuple(grouped[length])
    return _DIGITS_BY_LENGTH


def get_unique_lengths() -> FrozenSet[int]:
    """Return the pattern lengths that identify a digit on their own (2, 3, 4, 7)."""
    return frozenset(
        length
        for length, digits in get_digits_by_length().items()
        if len(digits) == 1
    )
