"""Scrambled display readouts and their text format."""

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, List, Tuple, Union

from .catalog import DIGIT_SEGMENTS, get_unique_lengths
from .errors import MalformedReadout

Pattern = FrozenSet[str]

CATALOG_SIZE = 10
OUTPUT_SIZE = 4

# Pattern length -> number of catalog digits with that length.
_EXPECTED_LENGTHS: Counter = Counter(len(s) for s in DIGIT_SEGMENTS.values())


def parse_pattern(token: str) -> Pattern:
    """
    Convert one whitespace-free token such as ``"cdfeb"`` into a Pattern.

    Raises:
        MalformedReadout: If the token is empty.
    """
    token = token.strip()
    if not token:
        raise MalformedReadout("Empty pattern.")
    return frozenset(token.lower())


def format_pattern(pattern: Pattern) -> str:
    """Render a Pattern as its wire labels in alphabetical order."""
    return "".join(sorted(pattern))


@dataclass(frozen=True)
class Readout:
    """
    One puzzle line: ten catalog patterns (digits 0-9 in unknown order)
    and four output patterns to decode.
    """

    patterns: Tuple[Pattern, ...]
    outputs: Tuple[Pattern, ...]

    def __post_init__(self) -> None:
        if len(self.patterns) != CATALOG_SIZE:
            raise MalformedReadout(
                f"Expected {CATALOG_SIZE} catalog patterns but got {len(self.patterns)}."
            )
        if len(self.outputs) != OUTPUT_SIZE:
            raise MalformedReadout(
                f"Expected {OUTPUT_SIZE} output patterns but got {len(self.outputs)}."
            )

        lengths = Counter(len(p) for p in self.patterns)
        if lengths != _EXPECTED_LENGTHS:
            raise MalformedReadout(
                "Catalog pattern lengths "
                f"{dict(sorted(lengths.items()))} do not match the digit catalog "
                f"{dict(sorted(_EXPECTED_LENGTHS.items()))}."
            )

    def known_output_digits(self) -> int:
        """Count output patterns whose length alone identifies the digit."""
        unique = get_unique_lengths()
        return sum(1 for p in self.outputs if len(p) in unique)

    def format_line(self) -> str:
        """Render the readout back into its ``p1 ... p10 | o1 ... o4`` form."""
        left = " ".join(format_pattern(p) for p in self.patterns)
        right = " ".join(format_pattern(p) for p in self.outputs)
        return f"{left} | {right}"


def parse_readout(line: str) -> Readout:
    """
    Parse ``<10 patterns> | <4 patterns>`` into a Readout.

    Raises:
        MalformedReadout: If the line does not split into exactly two groups,
            a group has the wrong number of patterns, or the catalog lengths
            do not match the digit catalog.
    """
    groups = line.split("|")
    if len(groups) != 2:
        raise MalformedReadout(f"Invalid readout {line.strip()!r}.")

    patterns = tuple(parse_pattern(t) for t in groups[0].split())
    outputs = tuple(parse_pattern(t) for t in groups[1].split())
    return Readout(patterns=patterns, outputs=outputs)


def parse_readouts(text: str) -> List[Readout]:
    """
    Parse every non-blank line of puzzle text.

    Raises:
        MalformedReadout: With the 1-based number of the offending line.
    """
    readouts: List[Readout] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            readouts.append(parse_readout(line))
        except MalformedReadout as exc:
            raise MalformedReadout(str(exc), line_number=line_number) from exc
    return readouts


def load_readouts(path: Union[str, Path]) -> List[Readout]:
    """Read and parse a puzzle input file."""
    return parse_readouts(Path(path).read_text())
