"""Battery section extraction."""

from __future__ import annotations

import re
from typing import Any

from mobispec.config import CHARGING_PORTS
from mobispec.extractors.base import alternation, first_match, guarded

_CAPACITY_RE = re.compile(r"\d+(?=\s?mAh)")
_PORT_RE = re.compile(alternation(CHARGING_PORTS))
_USB_VERSION_RE = re.compile(r"\d\.\d(?=USB)")
_CHARGING_TYPE_RE = re.compile(r"(?:\d*[A-Za-z]+\s)?[A-Za-z]+(?= Charging)")


def extract_capacity(text: str | None) -> int | None:
    value = first_match(_CAPACITY_RE, text)
    return int(value) if value else None


def extract_charging_port(text: str | None) -> str | None:
    return first_match(_PORT_RE, text)


def extract_usb_version(text: str | None) -> str | None:
    return first_match(_USB_VERSION_RE, text)


def extract_charging_type(text: str | None) -> str | None:
    """Return the charging technology named before "Charging" (``"Fast"``)."""
    value = first_match(_CHARGING_TYPE_RE, text)
    if value is None:
        return None
    return value.replace("mAh", "").strip() or None


def extract_removable(text: str | None) -> str | None:
    """Return "Yes"/"No" for a removable battery, None when not stated."""
    if not text:
        return None
    if "Non-Removable" in text:
        return "No"
    if "Removable" in text:
        return "Yes"
    return None


def extract_battery(text: str | None) -> dict[str, Any]:
    """Extract battery attributes from the battery section."""
    return {
        "battery_mah": guarded("battery_mah", extract_capacity, text),
        "charging_port": guarded("charging_port", extract_charging_port, text),
        "usb_version": guarded("usb_version", extract_usb_version, text),
        "charging_type": guarded("charging_type", extract_charging_type, text),
        "removable_battery": guarded("removable_battery", extract_removable, text),
    }
