"""Camera section — rear/front descriptions, flash, megapixels.

Normalized camera text reads like
``"50 MP + 2 MP Dual Primary Camera sLED Flash8 MP Front Camera"``: the
``s`` left over from "Cameras" is part of the layout the rules below expect.
"""

from __future__ import annotations

import re
from typing import Any

from mobispec.extractors.base import first_match, guarded
from mobispec.units import to_number

PRIMARY = "Primary Camera"
PRIMARY_PLURAL = "Primary Camera s"

_FRONT_RE = re.compile(
    r"(?:\d+\.)?\d+\s?[A-Za-z]+"
    r"(?:\s\+\s)?"
    r"(?:\d+\s[A-Za-z]+\s[A-Za-z]+)?"
    r"(?= Front)"
)
_MEGAPIXELS_RE = re.compile(r"^\d+(?:\.\d+)?")
_DIGITS_AND_DOTS_RE = re.compile(r"[0-9.]")


def _before(text: str, delimiter: str) -> str:
    return text.partition(delimiter)[0]


def _after_last(text: str, delimiter: str) -> str:
    return text.rpartition(delimiter)[2]


def extract_rear_camera(text: str | None) -> str | None:
    """Return the rear camera description, e.g. ``"50 MP + 2 MP Dual"``."""
    if not text or not text[0].isdigit():
        return None
    return _before(text, PRIMARY).strip() or None


def extract_front_camera(text: str | None) -> str | None:
    """Return the front camera description, e.g. ``"16 MP"``."""
    return first_match(_FRONT_RE, text)


def extract_flash(text: str | None) -> str | None:
    """Return the flash type (``"LED"``, ``"Dual LED"``), None if absent or "No"."""
    if not text:
        return None

    if "," in text:
        flash = _after_last(_before(_after_last(text, "Flash,"), "Flash"), PRIMARY_PLURAL)
    else:
        segment = _after_last(_after_last(_before(text, "Flash"), PRIMARY_PLURAL), PRIMARY)
        segment = _DIGITS_AND_DOTS_RE.sub("", segment)
        flash = _before(_before(segment, "MP"), "Front")

    flash = flash.strip()
    if not flash or flash == "No":
        return None
    return flash


def megapixels(description: str | None) -> float | None:
    """Return the leading megapixel figure of a camera description."""
    value = first_match(_MEGAPIXELS_RE, description)
    return to_number(value) if value else None


def extract_camera(text: str | None) -> dict[str, Any]:
    """Extract camera attributes from the camera section."""
    rear = guarded("rear_camera", extract_rear_camera, text)
    front = guarded("front_camera", extract_front_camera, text)
    return {
        "rear_camera": rear,
        "primary_cam_mp": guarded("primary_cam_mp", megapixels, rear),
        "front_camera": front,
        "front_cam_mp": guarded("front_cam_mp", megapixels, front),
        "flash": guarded("flash", extract_flash, text),
    }
