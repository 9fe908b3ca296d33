"""
Readout parsing tests

Covers the ``<10 patterns> | <4 patterns>`` format and MalformedReadout cases.
"""

import pytest

from sevenseg.errors import MalformedReadout
from sevenseg.readout import (
    Readout,
    format_pattern,
    load_readouts,
    parse_pattern,
    parse_readout,
    parse_readouts,
)

EXAMPLE_LINE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)
EXAMPLE_CATALOG = EXAMPLE_LINE.split(" | ")[0].split()


def test_parse_pattern_is_unordered():
    assert parse_pattern("cdfeb") == parse_pattern("bcdef")
    assert parse_pattern("ab") == frozenset({"a", "b"})
    assert format_pattern(parse_pattern("cdfeb")) == "bcdef"


def test_parse_pattern_rejects_empty():
    with pytest.raises(MalformedReadout):
        parse_pattern("  ")


def test_parse_readout_worked_example():
    readout = parse_readout(EXAMPLE_LINE)

    assert len(readout.patterns) == 10
    assert len(readout.outputs) == 4
    assert readout.outputs[0] == frozenset("cdfeb")
    assert readout.outputs[3] == frozenset("cdbaf")


def test_nine_catalog_patterns_is_malformed():
    line = " ".join(EXAMPLE_CATALOG[:9]) + " | cdfeb fcadb cdfeb cdbaf"
    with pytest.raises(MalformedReadout, match="10 catalog patterns"):
        parse_readout(line)


def test_three_outputs_is_malformed():
    line = " ".join(EXAMPLE_CATALOG) + " | cdfeb fcadb cdfeb"
    with pytest.raises(MalformedReadout, match="4 output patterns"):
        parse_readout(line)


@pytest.mark.parametrize(
    "line",
    [
        " ".join(EXAMPLE_CATALOG),
        EXAMPLE_LINE + " | ab",
    ],
)
def test_wrong_group_count_is_malformed(line):
    with pytest.raises(MalformedReadout):
        parse_readout(line)


def test_catalog_length_distribution_is_checked():
    """Ten patterns that cannot be the digits 0-9 are rejected."""
    catalog = list(EXAMPLE_CATALOG)
    catalog[catalog.index("dab")] = "da"
    line = " ".join(catalog) + " | cdfeb fcadb cdfeb cdbaf"

    with pytest.raises(MalformedReadout, match="do not match"):
        parse_readout(line)


def test_malformed_readout_is_value_error():
    with pytest.raises(ValueError):
        parse_readout("ab | cd")


def test_known_output_digits():
    """Only the length-2 pattern is identifiable by its length alone."""
    readout = Readout(
        patterns=tuple(frozenset(p) for p in EXAMPLE_CATALOG),
        outputs=tuple(frozenset(p) for p in ["ab", "abcdef", "abcdef", "abcde"]),
    )
    assert readout.known_output_digits() == 1


@pytest.mark.parametrize(
    "outputs, expected",
    [
        (["ab", "abc", "abcdef", "abcdef"], 2),
        (["ab", "abcd", "abc", "abcdef"], 3),
        (["ab", "abcd", "abc", "abcdefg"], 4),
        (["abcde", "abcdef", "abcdf", "bcdefg"], 0),
    ],
)
def test_known_output_digits_mixed(outputs, expected):
    readout = Readout(
        patterns=tuple(frozenset(p) for p in EXAMPLE_CATALOG),
        outputs=tuple(frozenset(p) for p in outputs),
    )
    assert readout.known_output_digits() == expected


def test_format_line_parses_back():
    readout = parse_readout(EXAMPLE_LINE)
    assert parse_readout(readout.format_line()) == readout


def test_parse_readouts_skips_blank_lines_and_numbers_errors():
    text = EXAMPLE_LINE + "\n\n" + EXAMPLE_LINE + "\n"
    assert len(parse_readouts(text)) == 2

    bad = EXAMPLE_LINE + "\n" + "ab cd | ef\n"
    with pytest.raises(MalformedReadout) as excinfo:
        parse_readouts(bad)
    assert excinfo.value.line_number == 2
    assert str(excinfo.value).startswith("line 2:")


def test_load_readouts(tmp_path):
    path = tmp_path / "input"
    path.write_text(EXAMPLE_LINE + "\n")

    readouts = load_readouts(path)
    assert len(readouts) == 1
    assert readouts[0] == parse_readout(EXAMPLE_LINE)
