"""Aggregation and benchmarking tools for the wiring solver."""

import random
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .catalog import DIGIT_SEGMENTS, WIRES
from .decoder import Wiring, decode_output, encode_digit
from .display import format_value
from .readout import OUTPUT_SIZE, Readout
from .solver import WiringSolver


def solve_readout(readout: Readout) -> int:
    """Deduce a readout's wiring and decode its four outputs into one integer."""
    wiring = WiringSolver(readout.patterns, record_steps=False).solve()
    return decode_output(wiring, readout.outputs)


def sum_outputs(readouts: Iterable[Readout]) -> int:
    """Sum the decoded output values of every readout."""
    return sum(solve_readout(r) for r in readouts)


def count_known_outputs(readouts: Iterable[Readout]) -> int:
    """Count output patterns identifiable by length alone across all readouts."""
    return sum(r.known_output_digits() for r in readouts)


def random_readout(
    rng: Optional[random.Random] = None,
) -> Tuple[Readout, Wiring, int]:
    """
    Generate a well-formed readout from a random wiring.

    Args:
        rng: Random source; a freshly seeded generator is used when omitted.

    Returns:
        Tuple of (readout, wiring used to scramble it, decoded output value).
    """
    rng = rng or random.Random()

    wires = list(WIRES)
    rng.shuffle(wires)
    wiring = Wiring(tuple(wires))

    digits = list(DIGIT_SEGMENTS)
    rng.shuffle(digits)
    patterns = tuple(encode_digit(wiring, d) for d in digits)

    output_digits = [rng.randrange(10) for _ in range(OUTPUT_SIZE)]
    outputs = tuple(encode_digit(wiring, d) for d in output_digits)

    value = 0
    for d in output_digits:
        value = value * 10 + d

    return Readout(patterns=patterns, outputs=outputs), wiring, value


def run_solver_single_test(
    readout: Readout, *, show_display: bool = False
) -> Dict[str, object]:
    """
    Solve one readout and return the solver metrics plus the decoded value.

    Args:
        readout: Readout to solve.
        show_display: If True, print the decoded value as seven-segment art.

    Returns:
        The solver's metrics augmented with "wiring" and "value".
    """
    solver = WiringSolver(readout.patterns, record_steps=False)
    wiring = solver.solve()
    value = decode_output(wiring, readout.outputs)

    if show_display:
        print(readout.format_line())
        print(f"Wiring: {wiring}")
        print(format_value(value))
        print()

    out: Dict[str, object] = dict(solver.metrics())
    out["wiring"] = str(wiring)
    out["value"] = value
    return out


def run_solver_many_readouts(readouts: Sequence[Readout]) -> Dict[str, float]:
    """
    Solve many readouts and return averaged solver metrics.

    Returns:
        Averages of the solver counters (prefixed with "avg_"), plus:
        - readouts
        - max_passes
        - total_value
        - known_outputs
        - passes_histogram_<n> for every observed pass count
    """
    if not readouts:
        raise ValueError("readouts must not be empty.")

    sums: Dict[str, float] = defaultdict(float)
    passes_seen: List[int] = []
    total_value = 0

    for readout in readouts:
        payload = run_solver_single_test(readout)
        passes = int(payload["passes"])  # type: ignore[call-overload]
        passes_seen.append(passes)
        total_value += int(payload["value"])  # type: ignore[call-overload]

        for key in ("passes", "resolved_by_digit", "resolved_by_frequency", "resolved_by_exclusion"):
            sums[f"avg_{key}"] += float(payload[key])  # type: ignore[arg-type]

    runs = len(readouts)
    out: Dict[str, float] = {k: total / runs for k, total in sums.items()}
    out["readouts"] = float(runs)
    out["max_passes"] = float(max(passes_seen))
    out["total_value"] = float(total_value)
    out["known_outputs"] = float(count_known_outputs(readouts))

    counts = np.bincount(np.array(passes_seen, dtype=int))
    for n, count in enumerate(counts):
        if count:
            out[f"passes_histogram_{n}"] = float(count)

    return out


def plot_solver_metrics(results: Dict[str, float]) -> None:
    """
    Plot how segments were resolved and how many passes readouts needed.

    Args:
        results: Statistics dict returned by run_solver_many_readouts().
    """
    methods = ["digit", "frequency", "exclusion"]
    averages = [results[f"avg_resolved_by_{m}"] for m in methods]
    x = np.arange(len(methods))

    # 1) Segments resolved per heuristic
    plt.figure()  # type: ignore[misc]
    plt.bar(x, averages)  # type: ignore[misc]
    plt.xticks(x, methods)  # type: ignore[misc]
    plt.ylabel("Average segments resolved")  # type: ignore[misc]
    plt.title("Segments resolved by heuristic (per readout)")  # type: ignore[misc]
    plt.tight_layout()
    plt.show()  # type: ignore[misc]

    # 2) Passes needed
    pass_counts = sorted(
        int(k.rsplit("_", 1)[1]) for k in results if k.startswith("passes_histogram_")
    )
    frequencies = [results[f"passes_histogram_{n}"] for n in pass_counts]

    plt.figure()  # type: ignore[misc]
    plt.bar(np.array(pass_counts), frequencies)  # type: ignore[misc]
    plt.xticks(pass_counts)  # type: ignore[misc]
    plt.xlabel("Passes")  # type: ignore[misc]
    plt.ylabel("Readouts")  # type: ignore[misc]
    plt.title("Solver passes per readout")  # type: ignore[misc]
    plt.tight_layout()
    plt.show()  # type: ignore[misc]
