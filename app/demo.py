"""
Seven-Segment Wiring Solver - Interactive Demo

Run with: streamlit run app/demo.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st
from typing import List, Optional

from sevenseg import (
    MalformedReadout,
    NoMatchingDigit,
    SEGMENTS,
    UnresolvableWiring,
    WiringSolver,
    decode_digit,
    parse_readout,
    random_readout,
)
from sevenseg.catalog import DIGIT_SEGMENTS

EXAMPLE_LINE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf"
)

# Segment layout inside a 3x3 cell grid (row, column)
_POSITIONS = {
    "TOP": (0, 1),
    "TOP_LEFT": (1, 0),
    "MIDDLE": (1, 1),
    "TOP_RIGHT": (1, 2),
    "BOTTOM_LEFT": (2, 0),
    "BOTTOM": (2, 1),
    "BOTTOM_RIGHT": (2, 2),
}


def render_digit_html(digit: int, label: str = "") -> str:
    """Render one digit as an HTML seven-segment cell."""
    lit = {s.name for s in DIGIT_SEGMENTS[digit]}
    grid = [[" "] * 3 for _ in range(3)]
    for name, (row, col) in _POSITIONS.items():
        if name in lit:
            grid[row][col] = "_" if name in ("TOP", "MIDDLE", "BOTTOM") else "|"

    html = '<div style="display: inline-block; margin: 6px; text-align: center;">'
    html += (
        '<pre style="font-family: monospace; font-size: 28px; line-height: 1.0; '
        'color: #ff3030; background: #111; padding: 6px; margin: 0;">'
    )
    html += "\n".join("".join(row) for row in grid)
    html += "</pre>"
    if label:
        html += f'<div style="font-family: monospace; font-size: 12px;">{label}</div>'
    html += "</div>"
    return html


def render_wiring_table(wiring: List[Optional[str]]) -> str:
    """Render a (possibly partial) wiring as a two-row HTML table."""
    html = '<table style="border-collapse: collapse; font-family: monospace;">'
    html += "<tr>" + "".join(
        f'<th style="border: 1px solid #999; padding: 4px;">{s.name}</th>'
        for s in SEGMENTS
    ) + "</tr>"
    html += "<tr>"
    for wire in wiring:
        bg = "#d0ffd0" if wire else "#e0e0e0"
        html += (
            f'<td style="border: 1px solid #999; padding: 4px; text-align: center; '
            f'background: {bg};">{wire or "?"}</td>'
        )
    html += "</tr></table>"
    return html


def main():
    st.set_page_config(
        page_title="Seven-Segment Wiring Solver",
        page_icon="🔢",
        layout="wide",
    )
    st.title("Seven-Segment Wiring Solver")

    if "line" not in st.session_state:
        st.session_state.line = EXAMPLE_LINE

    with st.sidebar:
        st.header("Readout")
        if st.button("Random readout"):
            readout, _, _ = random_readout()
            st.session_state.line = readout.format_line()
        if st.button("Worked example"):
            st.session_state.line = EXAMPLE_LINE

    line = st.text_area("Ten patterns | four outputs", key="line", height=80)

    try:
        readout = parse_readout(line)
    except MalformedReadout as exc:
        st.error(f"Malformed readout: {exc}")
        return

    solver = WiringSolver(readout.patterns, record_steps=True)
    try:
        wiring = solver.solve()
    except UnresolvableWiring as exc:
        st.error(f"Could not resolve wiring: {exc}")
        return

    st.subheader("Solver passes")
    steps = solver.steps_history
    step = st.slider("Pass", 1, len(steps), len(steps)) if len(steps) > 1 else 1
    current = steps[step - 1]
    st.markdown(render_wiring_table(current["wiring_snapshot"]), unsafe_allow_html=True)
    if current["resolved"]:
        st.caption(
            "Resolved this pass: "
            + ", ".join(f"{seg} → {wire}" for seg, wire in current["resolved"].items())
        )

    metrics = solver.metrics()
    cols = st.columns(4)
    cols[0].metric("Passes", metrics["passes"])
    cols[1].metric("By digit", metrics["resolved_by_digit"])
    cols[2].metric("By frequency", metrics["resolved_by_frequency"])
    cols[3].metric("By exclusion", metrics["resolved_by_exclusion"])

    st.subheader("Decoded output")
    try:
        digits = [decode_digit(wiring, p) for p in readout.outputs]
    except NoMatchingDigit as exc:
        st.error(f"Internal error: {exc}")
        return

    html = "".join(
        render_digit_html(d, "".join(sorted(p)))
        for d, p in zip(digits, readout.outputs)
    )
    st.markdown(html, unsafe_allow_html=True)
    st.write(f"Value: **{''.join(str(d) for d in digits)}** with wiring `{wiring}`")


if __name__ == "__main__":
    main()
