"""Missing-value policy applied to an assembled record.

Numeric columns keep ``None`` so that unknown values never drag averages
towards zero.  Categorical columns get a sentinel so the rows still show up
under equality filters and in BI tools.
"""

from __future__ import annotations

from typing import Any

from mobispec.config import MISSING_SENTINEL

CATEGORICAL_FIELDS = (
    "operating_system",
    "chipset",
    "resolution",
    "display_type",
    "rear_camera",
    "front_camera",
    "flash",
    "charging_port",
    "charging_type",
    "removable_battery",
    "sim",
    "wifi_calling",
    "fingerprint_sensor",
    "protection",
)


def apply_missing_policy(
    values: dict[str, Any], sentinel: str = MISSING_SENTINEL,
) -> dict[str, Any]:
    """Return a copy of *values* with categorical gaps filled by *sentinel*."""
    result = dict(values)
    for field in CATEGORICAL_FIELDS:
        if result.get(field) in (None, ""):
            result[field] = sentinel
    return result


def is_missing(value: Any, sentinel: str = MISSING_SENTINEL) -> bool:
    """Return True for either missing representation."""
    return value is None or value == sentinel
