"""Seven-segment wiring solver using frequency and digit-shape narrowing."""

import copy
import logging
from typing import Any, Dict, List, Optional, Sequence, Set

from .catalog import DIGIT_SEGMENTS, SEGMENTS, WIRES, Segment, get_expected_frequencies
from .decoder import Wiring, possible_digits
from .errors import UnresolvableWiring
from .readout import CATALOG_SIZE, Pattern

logger = logging.getLogger(__name__)


class WiringSolver:
    """
    Deduce which wire drives which segment from ten scrambled digit patterns.

    Each pass narrows every unresolved segment with two heuristics:
    1. By-frequency: wires lit in as many patterns as the segment is lit
       across the digit catalog
    2. By-digit: wires shared by every pattern that, given the segments
       resolved so far, may still light the segment
    A segment is pinned when either heuristic leaves a single wire, or when
    their union does after removing wires already taken.
    """

    def __init__(
        self,
        patterns: Sequence[Pattern],
        max_passes: int = len(SEGMENTS),
        record_steps: bool = True,
    ) -> None:
        """
        Initialize a solver for one readout's catalog patterns.

        Args:
            patterns: The ten catalog patterns, one per digit in any order.
            max_passes: Upper bound on narrowing passes before giving up.
                Every productive pass pins at least one segment, so seven
                passes suffice for well-formed input.
            record_steps: If True, snapshot the partial wiring after every
                pass for replay.

        Raises:
            ValueError: If the pattern count or max_passes is invalid.
        """
        if len(patterns) != CATALOG_SIZE:
            raise ValueError(
                f"Expected {CATALOG_SIZE} catalog patterns, got {len(patterns)}."
            )
        if max_passes <= 0:
            raise ValueError("max_passes must be positive.")

        self.patterns: List[Pattern] = [frozenset(p) for p in patterns]
        self.max_passes: int = max_passes
        self.record_steps: bool = record_steps

        # wiring[segment] -> wire label, None while unresolved
        self.wiring: List[Optional[str]] = [None] * len(SEGMENTS)

        # Observed frequencies are wiring-independent, so compute them once.
        self._wire_frequencies: Dict[str, int] = {
            wire: sum(1 for p in self.patterns if wire in p) for wire in WIRES
        }

        # Metrics / counters (for analysis)
        self.passes: int = 0
        self.resolved_by_digit: int = 0
        self.resolved_by_frequency: int = 0
        self.resolved_by_exclusion: int = 0

        # Each step is a dict with: pass_number, resolved, wiring_snapshot
        self.steps_history: List[Dict[str, Any]] = []

    # -------------------------------------------------------------------------
    # Narrowing heuristics
    # -------------------------------------------------------------------------

    def get_wire_frequency(self, wire: str) -> int:
        """Return how many of the ten patterns light the given wire."""
        return self._wire_frequencies[wire]

    def possible_wires_by_frequency(self, segment: Segment) -> Set[str]:
        """Wires whose observed frequency equals the segment's catalog frequency."""
        expected = get_expected_frequencies()[segment]
        return {w for w in WIRES if self.get_wire_frequency(w) == expected}

    def may_activate_segment(
        self, pattern: Pattern, segment: Segment, wiring: Sequence[Optional[str]]
    ) -> bool:
        """Check whether any digit still possible for the pattern lights the segment."""
        return any(
            segment in DIGIT_SEGMENTS[digit]
            for digit in possible_digits(pattern, wiring)
        )

    def possible_wires_by_digit(
        self, segment: Segment, wiring: Sequence[Optional[str]]
    ) -> Set[str]:
        """Intersect the wires of every pattern that may light the segment."""
        candidates: Set[str] = set(WIRES)
        for pattern in self.patterns:
            if self.may_activate_segment(pattern, segment, wiring):
                candidates &= pattern
        return candidates

    def _resolve_segment(
        self, segment: Segment, wiring: Sequence[Optional[str]]
    ) -> Optional[str]:
        """
        Combine both heuristics for one unresolved segment.

        Returns:
            The single remaining wire, or None if the segment stays open.
        """
        by_digit = self.possible_wires_by_digit(segment, wiring)
        if len(by_digit) == 1:
            self.resolved_by_digit += 1
            return next(iter(by_digit))

        by_frequency = self.possible_wires_by_frequency(segment)
        if len(by_frequency) == 1:
            self.resolved_by_frequency += 1
            return next(iter(by_frequency))

        taken = {w for w in wiring if w is not None}
        remaining = (by_digit | by_frequency) - taken
        if len(remaining) == 1:
            self.resolved_by_exclusion += 1
            return next(iter(remaining))

        return None

    # -------------------------------------------------------------------------
    # Main solving loop
    # -------------------------------------------------------------------------

    def _record_step(self, resolved: Dict[Segment, str]) -> None:
        """Record a pass for replay functionality."""
        if not self.record_steps:
            return
        self.steps_history.append({
            "pass_number": self.passes,
            "resolved": {s.name: w for s, w in resolved.items()},
            "wiring_snapshot": copy.copy(self.wiring),
        })

    def run_pass(self) -> Dict[Segment, str]:
        """
        Narrow every unresolved segment once against the wiring as it stood
        at the start of the pass.

        Returns:
            The segments newly resolved in this pass and their wires.
        """
        snapshot = tuple(self.wiring)
        resolved: Dict[Segment, str] = {}

        for segment in SEGMENTS:
            if snapshot[segment] is not None:
                continue
            wire = self._resolve_segment(segment, snapshot)
            if wire is not None:
                resolved[segment] = wire

        for segment, wire in resolved.items():
            self.wiring[segment] = wire

        self.passes += 1
        self._record_step(resolved)
        logger.debug(
            "Pass %d resolved %s; wiring now %s",
            self.passes,
            {s.name: w for s, w in resolved.items()},
            "".join(w or "?" for w in self.wiring),
        )
        return resolved

    def solve(self) -> Wiring:
        """
        Run narrowing passes until every segment has a wire.

        Returns:
            The resolved Wiring.

        Raises:
            UnresolvableWiring: If a pass makes no progress, the pass limit is
                reached, two segments end up on the same wire, or the wiring
                does not map the digit catalog onto the ten patterns.
        """
        while None in self.wiring:
            if self.passes >= self.max_passes:
                logger.warning(
                    "Wiring unresolved after %d passes: %s",
                    self.passes,
                    "".join(w or "?" for w in self.wiring),
                )
                raise UnresolvableWiring(
                    f"Wiring still unresolved after {self.passes} passes."
                )

            if not self.run_pass():
                unresolved = [s.name for s in SEGMENTS if self.wiring[s] is None]
                logger.warning(
                    "Pass %d made no progress; unresolved segments: %s",
                    self.passes,
                    unresolved,
                )
                raise UnresolvableWiring(
                    f"No progress on pass {self.passes}; unresolved: {', '.join(unresolved)}."
                )

        wires = tuple(w for w in self.wiring if w is not None)
        if len(set(wires)) != len(wires):
            raise UnresolvableWiring(
                f"Deduced wiring {''.join(wires)!r} assigns a wire to two segments."
            )
        wiring = Wiring(wires)
        encoded = {wiring.translate(DIGIT_SEGMENTS[d]) for d in DIGIT_SEGMENTS}
        if encoded != set(self.patterns):
            logger.warning("Deduced wiring %s does not reproduce the catalog patterns", wiring)
            raise UnresolvableWiring(
                f"Deduced wiring {wiring} does not reproduce the ten catalog patterns."
            )
        return wiring

    def metrics(self) -> Dict[str, Any]:
        """Return solver counters for analysis."""
        return {
            "passes": self.passes,
            "resolved_by_digit": self.resolved_by_digit,
            "resolved_by_frequency": self.resolved_by_frequency,
            "resolved_by_exclusion": self.resolved_by_exclusion,
            "steps_history": self.steps_history,
        }


def deduce_wiring(patterns: Sequence[Pattern], **kwargs: Any) -> Wiring:
    """Solve the wiring for ten catalog patterns."""
    return WiringSolver(patterns, **kwargs).solve()
