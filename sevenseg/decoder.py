"""Resolved wirings and digit decoding."""

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Iterable, Optional, Sequence, Set, Tuple

from .catalog import DIGIT_SEGMENTS, SEGMENTS, WIRES, Segment, get_digits_by_length
from .errors import NoMatchingDigit
from .readout import Pattern


@dataclass(frozen=True)
class Wiring:
    """A resolved bijection from display segments to wire labels."""

    wires: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.wires) != len(SEGMENTS):
            raise ValueError(f"A wiring needs {len(SEGMENTS)} wires, got {len(self.wires)}.")
        if set(self.wires) != set(WIRES):
            raise ValueError(
                f"Wires must be a permutation of {WIRES!r}, got {''.join(self.wires)!r}."
            )

    @classmethod
    def from_string(cls, wires: str) -> "Wiring":
        """Build a wiring from wires listed in segment order, e.g. ``"deafgbc"``."""
        return cls(tuple(wires))

    def wire_for(self, segment: Segment) -> str:
        return self.wires[segment]

    def segment_for(self, wire: str) -> Segment:
        return Segment(self.wires.index(wire))

    def translate(self, segments: Iterable[Segment]) -> FrozenSet[str]:
        """Map a set of segments to the wires that drive them."""
        return frozenset(self.wires[s] for s in segments)

    def as_list(self) -> list:
        return list(self.wires)

    def __str__(self) -> str:
        return "".join(self.wires)


def possible_digits(
    pattern: AbstractSet[str], wiring: Sequence[Optional[str]]
) -> Set[int]:
    """
    Return the catalog digits a pattern may still represent.

    Args:
        pattern: Scrambled wire labels of one reading.
        wiring: Wire per segment index, ``None`` where still unresolved.

    Returns:
        Digits with the pattern's length. When the length is shared by
        several digits, a digit is dropped if some resolved segment it does
        not light has its wire in the pattern.
    """
    candidates = get_digits_by_length().get(len(pattern), ())
    if len(candidates) <= 1:
        return set(candidates)

    possible: Set[int] = set()
    for digit in candidates:
        lit = DIGIT_SEGMENTS[digit]
        excluded = any(
            wiring[s] is not None and wiring[s] in pattern
            for s in SEGMENTS
            if s not in lit
        )
        if not excluded:
            possible.add(digit)
    return possible


def decode_digit(wiring: Wiring, pattern: Pattern) -> int:
    """
    Decode one pattern under a resolved wiring.

    Raises:
        NoMatchingDigit: If no catalog digit of the pattern's length maps
            exactly onto the pattern.
    """
    for digit in get_digits_by_length().get(len(pattern), ()):
        if wiring.translate(DIGIT_SEGMENTS[digit]) == pattern:
            return digit

    raise NoMatchingDigit(
        f"Pattern {''.join(sorted(pattern))!r} matches no digit under wiring {wiring}."
    )


def decode_output(wiring: Wiring, patterns: Iterable[Pattern]) -> int:
    """Decode patterns and join the digits most significant first."""
    value = 0
    for pattern in patterns:
        value = value * 10 + decode_digit(wiring, pattern)
    return value


def encode_digit(wiring: Wiring, digit: int) -> Pattern:
    """Return the pattern a digit produces on a display with this wiring."""
    if digit not in DIGIT_SEGMENTS:
        raise ValueError(f"digit must be in 0..9, got {digit}.")
    return wiring.translate(DIGIT_SEGMENTS[digit])
