"""
Seven-Segment Wiring Solver

Recovers the wire-to-segment mapping of a scrambled seven-segment display
from the ten patterns it shows for digits 0-9, using two narrowing heuristics:
- By-frequency: how many patterns light each wire
- By-digit: which wires every pattern that may light a segment has in common
The resolved wiring then decodes the display's four output readings.
"""

from .catalog import DIGIT_SEGMENTS, SEGMENTS, WIRES, Segment
from .decoder import Wiring, decode_digit, decode_output, encode_digit
from .errors import (
    MalformedReadout,
    NoMatchingDigit,
    SevenSegmentError,
    UnresolvableWiring,
)
from .readout import Readout, load_readouts, parse_readout, parse_readouts
from .solver import WiringSolver, deduce_wiring
from .analysis import (
    count_known_outputs,
    random_readout,
    run_solver_many_readouts,
    run_solver_single_test,
    solve_readout,
    sum_outputs,
)

__version__ = "1.0.0"

__all__ = [
    # Catalog
    "DIGIT_SEGMENTS",
    "SEGMENTS",
    "WIRES",
    "Segment",
    # Core classes
    "Readout",
    "Wiring",
    "WiringSolver",
    # Parsing
    "parse_readout",
    "parse_readouts",
    "load_readouts",
    # Solving and decoding
    "deduce_wiring",
    "decode_digit",
    "decode_output",
    "encode_digit",
    # Errors
    "SevenSegmentError",
    "MalformedReadout",
    "UnresolvableWiring",
    "NoMatchingDigit",
    # Analysis functions
    "solve_readout",
    "sum_outputs",
    "count_known_outputs",
    "random_readout",
    "run_solver_single_test",
    "run_solver_many_readouts",
]
