"""Dataset-specific vocabularies used by the extractors.

The defaults were fitted to the 91mobiles catalog export.  Another source can
ship its own JSON file::

    {
      "chipset_vendors": ["MediaTek", "Snapdragon", "Tensor"],
      "os_version_corrections": {"2.4": "2.3"}
    }

and load it with :func:`load_calibration`; unspecified keys keep the defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mobispec.config import (
    CHIPSET_VENDORS,
    OS_VERSION_CORRECTIONS,
    RAM_GB_SIZES,
    RAM_MB_SIZES,
)
from mobispec.errors import CalibrationError

logger = logging.getLogger(__name__)


class Calibration(BaseModel):
    """Swappable calibration constants for one source dataset."""

    model_config = ConfigDict(frozen=True)

    chipset_vendors: tuple[str, ...] = CHIPSET_VENDORS
    """Vendor tokens that open a chipset name."""

    os_version_corrections: dict[str, str] = Field(
        default_factory=lambda: dict(OS_VERSION_CORRECTIONS)
    )
    """Exact-value remap applied to extracted OS versions."""

    ram_gb_sizes: tuple[str, ...] = RAM_GB_SIZES
    """RAM sizes (GB) used to split numbers glued to a chipset model."""

    ram_mb_sizes: tuple[str, ...] = RAM_MB_SIZES
    """RAM sizes (MB) used the same way for legacy feature phones."""


DEFAULT_CALIBRATION = Calibration()


def load_calibration(path: str | Path) -> Calibration:
    """Read a JSON calibration file, falling back to defaults per key."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CalibrationError(f"Cannot read calibration file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CalibrationError(f"Calibration file {path} must hold a JSON object")

    try:
        calibration = Calibration(**data)
    except ValidationError as exc:
        raise CalibrationError(f"Invalid calibration in {path}: {exc}") from exc

    logger.info("Loaded calibration from %s", path)
    return calibration
