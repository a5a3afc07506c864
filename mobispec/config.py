"""Global configuration: lookup tables, vocabularies, constants.

Everything here is read-only data shared by all records.  Tables that encode
quirks of the 91mobiles catalog export (chipset vendors, OS version fixes,
RAM size vocabularies) are only the *defaults* of
:class:`mobispec.calibration.Calibration` and can be swapped per dataset.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Sentinel written into categorical columns that could not be extracted
MISSING_SENTINEL = "No Data"

# ---------------------------------------------------------------------------
# Section markers
# ---------------------------------------------------------------------------

SECTION_NAMES = ("performance", "display", "camera", "battery")

# Canonical marker text, as found in normalized details
SECTION_MARKERS: Mapping[str, str] = MappingProxyType({
    "performance": "Performance ",
    "display": ", Display ",
    "camera": ", Camera ",
    "battery": ", Battery ",
})

# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

MHZ_PER_GHZ = 1000
MB_PER_GB = 1024
GB_PER_TB = 1024

# Above this many "TB" the unit is taken to be a mistyped GB
MAX_PLAUSIBLE_TB = 2

# A spaced RAM figure above these is a model number run into the size
MAX_PLAUSIBLE_RAM_GB = 32
MAX_PLAUSIBLE_RAM_MB = 8192

CORE_COUNTS: Mapping[str, int] = MappingProxyType({
    "Single": 1,
    "Dual": 2,
    "Quad": 4,
    "Hexa": 6,
    "Octa": 8,
    "Nona": 9,
    "Deca": 10,
})

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

RESOLUTION_PIXELS: Mapping[str, str] = MappingProxyType({
    "SD": "480x640",
    "HD": "720x1280",
    "HD+": "720x1520",
    "FHD": "1080x1920",
    "FULL HD": "1080x1920",
    "FHD+": "1080x2220",
    "QHD": "1440x2560",
    "QHD+": "1440x3120",
    "UHD": "2160x3840",
})

# (lower bound exclusive, upper bound inclusive, category), keyed on height
RESOLUTION_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (2500, 3150, "QHD+"),
    (2250, 2500, "QHD"),
    (1950, 2250, "FHD+"),
    (1650, 1950, "FHD"),
    (1300, 1650, "HD+"),
    (700, 1300, "HD"),
    (450, 700, "SD"),
    (0, 450, "SUB SD"),
)

# Marketing-name spellings folded into the short form
RESOLUTION_ALIASES: Mapping[str, str] = MappingProxyType({
    "FULL HD": "FHD",
    "FULL HD+": "FHD+",
})

PLUS_RESOLUTIONS = ("FULL HD+", "FHD+", "QHD+", "UHD+", "HD+")
PLAIN_RESOLUTIONS = ("FULL HD", "FHD", "QHD", "UHD", "SD", "HD")

REFRESH_RATES = (60, 90, 120, 144, 165, 240)

# ---------------------------------------------------------------------------
# Battery
# ---------------------------------------------------------------------------

CHARGING_PORTS = ("Micro-USB", "microUSB", "miniUSB", "Proprietary", "Type-C", "Lightning")

# ---------------------------------------------------------------------------
# Dataset calibration defaults
# ---------------------------------------------------------------------------

CHIPSET_VENDORS = (
    "MediaTek",
    "Helio",
    "Snapdragon",
    "Samsung",
    "Exynos",
    "Apple",
    "Unisoc",
    "Google",
    "Spreadtrum",
    "HiSilicon",
    "Broadcom",
    "Intel",
    "Marvell",
    "ST-Ericsson",
)

# Exact-value fixes for versions the source reports inconsistently
OS_VERSION_CORRECTIONS: Mapping[str, str] = MappingProxyType({
    "2.4": "2.3",
    "5.2": "5.1",
    "5.4": "5.1",
})

# RAM sizes seen in the catalog; used to split glued tokens like "G856 GB RAM"
RAM_GB_SIZES = ("1", "1.5", "2", "3", "4", "6", "8", "10", "12", "16")
RAM_MB_SIZES = (
    "380", "384", "576", "1", "8", "16", "32", "48", "52", "56", "64",
    "128", "160", "256", "290", "512", "768", "4",
)
