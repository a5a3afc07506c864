"""Unit normalization: clock speeds to GHz, memory sizes to GB, core names to counts.

Every helper returns ``None`` when its pattern does not match; numbers that
match a pattern but cannot be read raise :class:`MalformedNumericToken`.
"""

from __future__ import annotations

import logging
import re

from mobispec.calibration import DEFAULT_CALIBRATION, Calibration
from mobispec.config import (
    CORE_COUNTS,
    GB_PER_TB,
    MAX_PLAUSIBLE_RAM_GB,
    MAX_PLAUSIBLE_RAM_MB,
    MAX_PLAUSIBLE_TB,
    MB_PER_GB,
    MHZ_PER_GHZ,
)
from mobispec.errors import MalformedNumericToken

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Number parsing
# ---------------------------------------------------------------------------

_LEADING_NUMBER_RE = re.compile(r"\d+\.?\d*")
_DIGITS_RE = re.compile(r"\d+")
_NON_DIGITS_RE = re.compile(r"\D+")


def to_number(token: str) -> float:
    """Read *token* as a float, raising :class:`MalformedNumericToken`."""
    try:
        return float(token.strip())
    except (AttributeError, ValueError) as exc:
        raise MalformedNumericToken(str(token)) from exc


def digits_to_int(text: str | None) -> int | None:
    """Strip every non-digit from *text* and read the rest as an integer.

    ``"Rs. 12,999"`` gives ``12999``; text without digits gives ``None``.
    """
    if not text:
        return None
    digits = _NON_DIGITS_RE.sub("", text)
    return int(digits) if digits else None


def leading_number(text: str | None) -> float | None:
    """Return the first number in *text*, or ``None``."""
    if not text:
        return None
    m = _LEADING_NUMBER_RE.search(text)
    return to_number(m.group()) if m else None


# ---------------------------------------------------------------------------
# Processor
# ---------------------------------------------------------------------------

_GHZ_RE = re.compile(r"(\d+(?:\.\d+)?)\sGHz")


def clock_speed_ghz(text: str | None) -> float | None:
    """Return the clock speed in GHz.

    ``"1800 MHz"`` gives ``1.8``; ``"2.4 GHz"`` gives ``2.4``.
    """
    if not text:
        return None
    if "MHz" in text:
        mhz = leading_number(text)
        return round(mhz / MHZ_PER_GHZ, 2) if mhz is not None else None
    m = _GHZ_RE.search(text)
    return to_number(m.group(1)) if m else None


def no_of_cores(cores: str | None) -> int | None:
    """Map a core-count word (``"Octa"``) to an integer, ``None`` if unknown."""
    if not cores:
        return None
    return CORE_COUNTS.get(cores.strip().capitalize())


# ---------------------------------------------------------------------------
# Memory
# ---------------------------------------------------------------------------

# ``glued`` is the non-digit character a size runs into ("G" in "G856 GB RAM")
_RAM_MB_RE = re.compile(r"(?P<glued>[^\s\d])?(?P<size>\d+(?:\.\d+)?)\s*MB RAM")
_RAM_GB_RE = re.compile(r"(?P<glued>[^\s\d])?(?P<size>\d+(?:\.\d+)?)\s*GB RAM")


def fit_size_vocabulary(token: str, sizes: tuple[str, ...]) -> str:
    """Trim a number glued to a model name down to a known memory size.

    Catalog text runs the chipset model into the RAM size
    (``"Helio G856 GB RAM"``), so ``"856"`` is cut to its longest suffix that
    is a known size (``"6"``).  Tokens that are known sizes themselves, or
    have no known suffix, are returned unchanged.
    """
    if token in sizes:
        return token
    for start in range(1, len(token)):
        suffix = token[start:]
        if suffix in sizes:
            return suffix
    return token


def _ram_figure(m: re.Match[str], sizes: tuple[str, ...], ceiling: int) -> float:
    """Read a RAM size match, fitting it to *sizes* only when it is run into a model name.

    A size glued to a letter (``"G856"``) is always fitted.  A spaced size is
    read whole unless it is above *ceiling* (``"Gen 212 GB"``), which only
    happens when the model number's last digits were run into the size.
    """
    token = m.group("size")
    if m.group("glued") is None and to_number(token) <= ceiling:
        return to_number(token)
    return to_number(fit_size_vocabulary(token, sizes))


def ram_in_gb(text: str | None, calibration: Calibration | None = None) -> float | None:
    """Return the RAM size in GB.

    ``"4096 MB RAM"`` gives ``4.0``; ``"8 GB RAM"`` gives ``8.0``.
    """
    if not text:
        return None
    calibration = calibration or DEFAULT_CALIBRATION

    if "MB" in text:
        m = _RAM_MB_RE.search(text)
        if m is None:
            return None
        mb = _ram_figure(m, calibration.ram_mb_sizes, MAX_PLAUSIBLE_RAM_MB)
        return round(mb / MB_PER_GB, 2)
    if "GB" in text:
        m = _RAM_GB_RE.search(text)
        if m is None:
            return None
        return _ram_figure(m, calibration.ram_gb_sizes, MAX_PLAUSIBLE_RAM_GB)
    return None


_STORAGE_MB_RE = re.compile(r"((?:\d+\.)?\d+)\s?(?=MB)")
_STORAGE_GB_RE = re.compile(r"((?:\d+\.)?\d+)(?= GB)")
_STORAGE_TB_RE = re.compile(r"((?:\d+\.)?\d+)(?=\s?TB)")


def storage_in_gb(text: str | None) -> float | None:
    """Return the internal storage in GB from the features text.

    Units are checked in the order KB, MB, GB, TB.  A TB value above
    ``MAX_PLAUSIBLE_TB`` is taken to be a GB figure with the wrong unit and is
    returned as-is (``"500 TB"`` gives ``500.0``, ``"1 TB"`` gives ``1024.0``).
    """
    if not text:
        return None
    if "KB" in text:
        return 0.0
    if "MB" in text:
        m = _STORAGE_MB_RE.search(text)
        return round(to_number(m.group(1)) / MB_PER_GB, 2) if m else None
    if " GB" in text:
        m = _STORAGE_GB_RE.search(text)
        return to_number(m.group(1)) if m else None
    if "TB" in text:
        m = _STORAGE_TB_RE.search(text)
        if m is None:
            return None
        tb = to_number(m.group(1))
        if tb <= MAX_PLAUSIBLE_TB:
            return tb * GB_PER_TB
        logger.debug("Reading %s TB storage as GB", m.group(1))
        return tb
    return None


def correct_expandable_unit(token: str) -> str:
    """Rewrite an implausible TB expandable-storage figure to GB."""
    if "TB" not in token:
        return token
    m = _DIGITS_RE.search(token)
    if m and int(m.group()) > MAX_PLAUSIBLE_TB:
        logger.debug("Rewriting expandable storage %r as GB", token)
        return token.replace("TB", "GB")
    return token


def expandable_storage_in_gb(token: str | None) -> float | None:
    """Convert an expandable-storage token (``"1 TB"``, ``"256 GB"``, ``"0"``) to GB."""
    if not token:
        return None
    token = correct_expandable_unit(token.strip())
    if token == "0":
        return 0.0

    m = _DIGITS_RE.search(token)
    if m is None:
        return None
    value = to_number(m.group())
    if token.endswith("TB"):
        return value * GB_PER_TB
    if token.endswith("GB"):
        return value
    if token.endswith("MB"):
        return round(value / MB_PER_GB, 2)
    return None
