"""
Digit decoder tests

1. Worked example decodes to 5353
2. Any digit encoded through any wiring decodes back to itself
3. Inconsistent wirings raise NoMatchingDigit
"""

import random

import pytest

from sevenseg.catalog import DIGIT_SEGMENTS, SEGMENTS, WIRES
from sevenseg.decoder import (
    Wiring,
    decode_digit,
    decode_output,
    encode_digit,
    possible_digits,
)
from sevenseg.errors import NoMatchingDigit
from sevenseg.readout import parse_readout

IDENTITY = Wiring.from_string(WIRES)
EXAMPLE_WIRING = Wiring.from_string("deafgbc")


@pytest.mark.parametrize(
    "pattern, digit",
    [
        ("abcefg", 0),
        ("cf", 1),
        ("acdeg", 2),
        ("acdfg", 3),
        ("bcdf", 4),
        ("abdfg", 5),
        ("abdefg", 6),
        ("acf", 7),
        ("abcdefg", 8),
        ("abcdfg", 9),
    ],
)
def test_decode_identity_wiring(pattern, digit):
    assert decode_digit(IDENTITY, frozenset(pattern)) == digit


def test_decode_worked_example():
    readout = parse_readout(
        "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
        "cdfeb fcadb cdfeb cdbaf"
    )
    assert [decode_digit(EXAMPLE_WIRING, p) for p in readout.outputs] == [5, 3, 5, 3]
    assert decode_output(EXAMPLE_WIRING, readout.outputs) == 5353


def test_decode_is_deterministic():
    pattern = frozenset("cdfeb")
    assert decode_digit(EXAMPLE_WIRING, pattern) == decode_digit(EXAMPLE_WIRING, pattern)


def test_round_trip_through_random_wirings():
    rng = random.Random(8)
    for _ in range(50):
        wires = list(WIRES)
        rng.shuffle(wires)
        wiring = Wiring(tuple(wires))
        for digit in DIGIT_SEGMENTS:
            assert decode_digit(wiring, encode_digit(wiring, digit)) == digit


def test_decode_output_keeps_leading_zeros_in_value():
    patterns = [encode_digit(IDENTITY, d) for d in (0, 0, 4, 2)]
    assert decode_output(IDENTITY, patterns) == 42


@pytest.mark.parametrize("pattern", ["abcdf", "a", "abcde"])
def test_no_matching_digit(pattern):
    with pytest.raises(NoMatchingDigit):
        decode_digit(IDENTITY, frozenset(pattern))


def test_encode_digit_rejects_out_of_range():
    with pytest.raises(ValueError):
        encode_digit(IDENTITY, 10)


def test_wiring_inverse_lookup():
    for segment in SEGMENTS:
        assert EXAMPLE_WIRING.segment_for(EXAMPLE_WIRING.wire_for(segment)) is segment
    assert str(EXAMPLE_WIRING) == "deafgbc"


@pytest.mark.parametrize("wires", ["abcdef", "aacdefg", "abcdefh"])
def test_wiring_must_be_a_permutation(wires):
    with pytest.raises(ValueError):
        Wiring.from_string(wires)


def test_possible_digits_with_partial_wiring():
    """A resolved bottom-left wire rules out 3 and 5 for a five-wire pattern."""
    partial = [None, None, None, None, "e", None, None]
    assert possible_digits(frozenset("acdeg"), partial) == {2}
    assert possible_digits(frozenset("acdfg"), partial) == {2, 3, 5}


def test_possible_digits_unique_lengths_ignore_wiring():
    partial = ["z"] * 7
    assert possible_digits(frozenset("ab"), partial) == {1}
    assert possible_digits(frozenset("abcdefg"), partial) == {8}
