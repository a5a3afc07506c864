"""Performance section — cores, clock speed, chipset, RAM."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from mobispec.calibration import DEFAULT_CALIBRATION, Calibration
from mobispec.extractors.base import alternation, first_match, guarded
from mobispec.units import clock_speed_ghz, no_of_cores, ram_in_gb

_CORES_RE = re.compile(r"[A-Za-z]+(?= ?[Cc]ore)")


@lru_cache(maxsize=8)
def _chipset_re(
    vendors: tuple[str, ...],
    gb_sizes: tuple[str, ...],
    mb_sizes: tuple[str, ...],
) -> re.Pattern[str]:
    # Vendor name up to the RAM figure that follows it, or end of string.
    # Known sizes may be glued to the model number; other sizes need a space
    # and, for GB, must be plausible (1-32) so "Gen 212 GB" still splits.
    return re.compile(
        rf"(?:{alternation(vendors)}).*?"
        rf"(?=(?:{alternation(gb_sizes)})\s*GB"
        rf"|(?:{alternation(mb_sizes)})\s*MB RAM"
        r"|(?<=\s)(?:3[0-2]|[12]\d|[1-9])(?:\.\d+)?\s*GB RAM"
        r"|(?<=\s)\d+\s*MB RAM"
        r"|$)"
    )


def extract_cores(text: str | None) -> str | None:
    """Return the core-count word (``"Octa"`` from ``"Octa Core"``)."""
    return first_match(_CORES_RE, text)


def extract_chipset(text: str | None, calibration: Calibration | None = None) -> str | None:
    """Return the chipset name, starting at a known vendor token."""
    calibration = calibration or DEFAULT_CALIBRATION
    pattern = _chipset_re(
        tuple(calibration.chipset_vendors),
        tuple(calibration.ram_gb_sizes),
        tuple(calibration.ram_mb_sizes),
    )
    return first_match(pattern, text)


def extract_performance(
    text: str | None, calibration: Calibration | None = None,
) -> dict[str, Any]:
    """Extract processor and memory attributes from the performance section."""
    cores = guarded("cores", extract_cores, text)
    return {
        "no_of_cores": guarded("no_of_cores", no_of_cores, cores),
        "clock_speed_ghz": guarded("clock_speed_ghz", clock_speed_ghz, text),
        "chipset": guarded("chipset", extract_chipset, text, calibration),
        "ram_in_gb": guarded("ram_in_gb", ram_in_gb, text, calibration),
    }
