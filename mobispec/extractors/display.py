"""Display section — size, resolution, panel type."""

from __future__ import annotations

import re
from typing import Any

from mobispec.config import PLAIN_RESOLUTIONS, PLUS_RESOLUTIONS, REFRESH_RATES
from mobispec.extractors.base import alternation, first_match, guarded
from mobispec.resolution import ResolutionInfo, classify_resolution
from mobispec.units import to_number

_INCHES_RE = re.compile(r"(\d+(?:\.\d+)?)\s?(?=inch)")
_CM_RE = re.compile(r"(\d+(?:\.\d+)?)(?=\s?cm)")

_PIXELS_RE = re.compile(r"(\d+(?:\.\d+)?)\s?x\s?(\d+(?:\.\d+)?)(?=\s(?:px|pixels))")
_PLUS_RE = re.compile(rf"(?:{alternation(PLUS_RESOLUTIONS)})", re.I)
_PLAIN_RE = re.compile(rf"(?:{alternation(PLAIN_RESOLUTIONS)})", re.I)

_REFRESH = "|".join(str(rate) for rate in REFRESH_RATES)

# Words after ", " ending just before a refresh rate figure or end of text
_DISPLAY_TYPE_RE = re.compile(
    r"(?<=, )"
    r"(?:[A-Za-z]+-)?[A-Za-z]+"
    r"(?:\s[A-Za-z]+-[A-Za-z]+)?"
    r"(?:\s[A-Za-z]+){0,4}"
    r"(?:\s[0-9])?(?:\s[0-9][xX])?"
    rf"(?=(?:{_REFRESH})|$)"
)


def extract_size_inches(text: str | None) -> float | None:
    value = first_match(_INCHES_RE, text, 1)
    return to_number(value) if value else None


def extract_size_cm(text: str | None) -> float | None:
    value = first_match(_CM_RE, text, 1)
    return to_number(value) if value else None


def extract_raw_resolution(text: str | None) -> str | None:
    """Return the resolution as written, before classification.

    Explicit pixel pairs win over categorical names; ``+`` tiers are only
    looked for when the text contains a ``+``.
    """
    if not text:
        return None

    m = _PIXELS_RE.search(text)
    if m:
        width = int(to_number(m.group(1)))
        height = int(to_number(m.group(2)))
        return f"{width}x{height}"

    if "+" in text:
        token = first_match(_PLUS_RE, text)
    else:
        token = first_match(_PLAIN_RE, text)
    return token.upper() if token else None


def extract_display_type(text: str | None) -> str | None:
    """Return the panel technology (``"IPS LCD"``, ``"Super AMOLED"``)."""
    return first_match(_DISPLAY_TYPE_RE, text)


def extract_display(text: str | None) -> dict[str, Any]:
    """Extract display attributes and the classified resolution."""
    raw_resolution = guarded("resolution", extract_raw_resolution, text)
    info = guarded("resolution", classify_resolution, raw_resolution) or ResolutionInfo()

    return {
        "display_size_in_inches": guarded("display_size_in_inches", extract_size_inches, text),
        "display_size_in_cm": guarded("display_size_in_cm", extract_size_cm, text),
        **info.model_dump(),
        "display_type": guarded("display_type", extract_display_type, text),
    }
