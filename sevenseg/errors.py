"""Error definitions for the seven-segment wiring solver."""

from __future__ import annotations

from typing import Optional


class SevenSegmentError(Exception):
    """Base exception for all custom errors."""


class MalformedReadout(SevenSegmentError, ValueError):
    """Raised when a readout line cannot be parsed into 10 + 4 patterns."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class UnresolvableWiring(SevenSegmentError, RuntimeError):
    """Raised when the solver cannot narrow the patterns to a single wiring."""


class NoMatchingDigit(SevenSegmentError, RuntimeError):
    """Raised when a pattern matches no digit under a resolved wiring.

    This indicates an inconsistent wiring rather than bad input.
    """
