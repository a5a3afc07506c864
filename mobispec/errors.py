"""Exceptions raised inside the extraction engine."""

from __future__ import annotations


class SpecParseError(Exception):
    """Base class for field-level extraction failures."""


class MalformedNumericToken(SpecParseError, ValueError):
    """Raised when a matched token cannot be read as a number."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Cannot read {token!r} as a number")
        self.token = token


class CalibrationError(Exception):
    """Raised when a calibration file cannot be loaded."""
