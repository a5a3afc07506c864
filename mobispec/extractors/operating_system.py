"""OS family and version from the raw OS field."""

from __future__ import annotations

import re
from typing import Any

from mobispec.calibration import DEFAULT_CALIBRATION, Calibration
from mobispec.extractors.base import first_match, guarded
from mobispec.units import to_number

# Family checks, in priority order
_FAMILY_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("Android", re.compile(r"\bAndroid", re.I)),
    ("iOS", re.compile(r"\biOS", re.I)),
    ("Blackberry", re.compile(r"\bBlackberry", re.I)),
]
_WINDOWS_RE = re.compile(r"\bWindows", re.I)

_VERSION = r"(\d+(?:\.\d+)?)"
_WINDOWS_MOBILE_RE = re.compile(r"Windows Mobile " + _VERSION, re.I)
_WINDOWS_PHONE_RE = re.compile(r"(?:Windows Phone v|Windows Phone |Windows v)" + _VERSION, re.I)
_WINDOWS_MODERN_RE = re.compile(r"(?:Windows Phone v|Windows v)" + _VERSION, re.I)

_VERSION_RE = re.compile(r"(?:\d+\.)?\d+")


def _windows_version(pattern: re.Pattern[str], text: str) -> float | None:
    value = first_match(pattern, text, 1)
    return to_number(value) if value else None


def classify_windows(text: str) -> str | None:
    """Tell Windows Mobile, Windows Phone and Windows 10+ apart by version."""
    version = _windows_version(_WINDOWS_MOBILE_RE, text)
    if version is not None and version < 7:
        return "Windows Mobile"

    version = _windows_version(_WINDOWS_PHONE_RE, text)
    if (version is not None and version < 10) or text.strip() == "Windows Phone":
        return "Windows Phone"

    version = _windows_version(_WINDOWS_MODERN_RE, text)
    if version is not None and version >= 10:
        return "Windows"
    return None


def classify_os_family(text: str | None) -> str | None:
    """Return the OS family ("Android", "iOS", ...) or None."""
    if not text:
        return None
    for family, pattern in _FAMILY_PATTERNS:
        if pattern.search(text):
            return family
    if _WINDOWS_RE.search(text):
        return classify_windows(text)
    return None


def extract_os_version(
    text: str | None, calibration: Calibration | None = None,
) -> str | None:
    """Return the OS version, read before the first comma.

    Versions listed in the calibration's correction table are replaced by
    their exact counterpart (``"5.2"`` -> ``"5.1"``); this is a fixed remap of
    values the source is known to misreport, not rounding.
    """
    if not text:
        return None
    calibration = calibration or DEFAULT_CALIBRATION
    head = text.partition(",")[0]
    version = first_match(_VERSION_RE, head)
    if version is None:
        return None
    return calibration.os_version_corrections.get(version, version)


def parse_os(text: str | None, calibration: Calibration | None = None) -> dict[str, Any]:
    """Extract the operating-system attributes."""
    return {
        "operating_system": guarded("operating_system", classify_os_family, text),
        "os_version": guarded("os_version", extract_os_version, text, calibration),
    }
