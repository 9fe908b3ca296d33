"""
Quickstart example for the Seven-Segment Wiring Solver.

This script demonstrates basic usage of the solver.
"""

import random

from sevenseg import (
    WiringSolver,
    decode_output,
    parse_readout,
    random_readout,
    run_solver_many_readouts,
)
from sevenseg.display import format_value


def main():
    print("=" * 60)
    print("Seven-Segment Wiring Solver - Quickstart Example")
    print("=" * 60)

    # Example 1: Solve a single readout
    print("\n1. Solving the worked example readout...")
    print("-" * 60)

    readout = parse_readout(
        "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
        "cdfeb fcadb cdfeb cdbaf"
    )

    solver = WiringSolver(readout.patterns)
    wiring = solver.solve()
    value = decode_output(wiring, readout.outputs)

    metrics = solver.metrics()
    print(f"Wiring (top, top-left, top-right, middle, bottom-left, bottom-right, bottom): {wiring}")
    print(f"Passes: {metrics['passes']}")
    print(f"Resolved by digit: {metrics['resolved_by_digit']}")
    print(f"Resolved by frequency: {metrics['resolved_by_frequency']}")
    print(f"Resolved by exclusion: {metrics['resolved_by_exclusion']}")
    print(f"Known-length outputs: {readout.known_output_digits()}")

    # Example 2: Show the decoded value
    print("\n2. Decoded output:")
    print("-" * 60)
    print(format_value(value))

    # Example 3: Solve many random readouts
    print("\n3. Solving 200 random readouts...")
    print("-" * 60)

    rng = random.Random(2021)
    readouts = [random_readout(rng)[0] for _ in range(200)]
    results = run_solver_many_readouts(readouts)

    print(f"Average passes per readout: {results['avg_passes']:.2f}")
    print(f"Most passes needed: {results['max_passes']:.0f}")
    print(f"Sum of decoded outputs: {results['total_value']:.0f}")

    print("\n" + "=" * 60)
    print("Done!")
    print("=" * 60)


if __name__ == "__main__":
    main()
