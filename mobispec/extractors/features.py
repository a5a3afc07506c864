"""Storage, SIM, Wi-Fi calling, fingerprint sensor and IP rating from the features field."""

from __future__ import annotations

import re
from typing import Any

from mobispec.extractors.base import first_match, guarded
from mobispec.units import expandable_storage_in_gb, storage_in_gb

_EXPANDABLE_RE = re.compile(r"(?:\d+\s?)?[A-Za-z]+(?= Expandable)")
_DUAL_SIM_TECH_RE = re.compile(r"Dual SIM:\s[A-Za-z]+(?:\s\+\s[A-Za-z]+)?")
_PROTECTION_RE = re.compile(
    r"IP\s?X?\d+X?"
    r"(?:,\s?IPX?\d+)?"
    r"(?:,\s?IP\d+X?)?"
)
_COMMA_RE = re.compile(r"\s*,\s*")


def extract_expandable_token(text: str | None) -> str | None:
    """Return the expandable-storage figure as written (``"1 TB"``); "Non" reads as ``"0"``."""
    value = first_match(_EXPANDABLE_RE, text)
    if value is None:
        return None
    return value.replace("Non", "0").strip()


def extract_sim(text: str | None) -> str | None:
    """Return the SIM configuration ("Dual SIM: Nano + Nano", "Dual SIM", "Triple SIM")."""
    if not text:
        return None
    if "Dual SIM:" in text:
        value = first_match(_DUAL_SIM_TECH_RE, text)
        if value is None:
            return None
        value = value.partition("Not")[0].partition("Supported")[0].strip()
        return value or None
    if "Dual SIM" in text:
        return "Dual SIM"
    if "Triple SIM" in text:
        return "Triple SIM"
    return None


def extract_wifi_calling(text: str | None) -> str:
    return "Yes" if text and "Wi-Fi Calling" in text else "No"


def extract_fingerprint(text: str | None) -> str | None:
    if not text:
        return None
    if "No Fingerprint" in text:
        return "No"
    if "Fingerprint" in text:
        return "Yes"
    return None


def extract_protection(text: str | None) -> str | None:
    """Return the ingress-protection rating(s), e.g. ``"IP68, IP69"``."""
    value = first_match(_PROTECTION_RE, text)
    return _COMMA_RE.sub(", ", value) if value else None


def extract_features(text: str | None) -> dict[str, Any]:
    """Extract the attributes of the "other features" field."""
    expandable = guarded("expandable_storage", extract_expandable_token, text)
    return {
        "storage_in_gb": guarded("storage_in_gb", storage_in_gb, text),
        "expandable_storage_in_gb": guarded(
            "expandable_storage_in_gb", expandable_storage_in_gb, expandable,
        ),
        "sim": guarded("sim", extract_sim, text),
        "wifi_calling": guarded("wifi_calling", extract_wifi_calling, text),
        "fingerprint_sensor": guarded("fingerprint_sensor", extract_fingerprint, text),
        "protection": guarded("protection", extract_protection, text),
    }
