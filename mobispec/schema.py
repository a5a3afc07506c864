"""Record models: raw catalog rows in, typed spec records out."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RawSpecRecord(BaseModel):
    """One row of the catalog export, every field free text.

    ``details_text`` is the combined performance/display/camera/battery blob.
    """

    model_config = ConfigDict(frozen=True)

    mobile_name: str | None = None
    spec_score_text: str | None = None
    os_text: str | None = None
    price_text: str | None = None
    details_text: str | None = None
    features_text: str | None = None


class SectionText(BaseModel):
    """The four sections sliced out of the normalized details string.

    A section is ``None`` when its marker is absent or its body is empty.
    """

    model_config = ConfigDict(frozen=True)

    performance: str | None = None
    display: str | None = None
    camera: str | None = None
    battery: str | None = None


class TypedSpecRecord(BaseModel):
    """Fully typed, normalized spec record.

    Numeric attributes are ``None`` when unknown; categorical attributes hold
    the "No Data" sentinel instead (see :mod:`mobispec.missing`).
    """

    # Identity
    mobile_name: str | None = None
    price: int | None = None
    spec_score: int | None = None

    # Operating system
    operating_system: str | None = None
    os_version: str | None = None

    # Performance
    no_of_cores: int | None = None
    clock_speed_ghz: float | None = None
    chipset: str | None = None
    ram_in_gb: float | None = None

    # Display
    display_size_in_inches: float | None = None
    display_size_in_cm: float | None = None
    resolution: str | None = None
    resolution_in_px: str | None = None
    """Canonical ``WIDTHxHEIGHT`` string the pixel columns were read from."""
    px_width: int | None = None
    px_height: int | None = None
    display_type: str | None = None

    # Camera
    rear_camera: str | None = None
    primary_cam_mp: float | None = None
    front_camera: str | None = None
    front_cam_mp: float | None = None
    flash: str | None = None

    # Battery
    battery_mah: int | None = None
    charging_port: str | None = None
    usb_version: str | None = None
    charging_type: str | None = None
    removable_battery: str | None = None

    # Other features
    storage_in_gb: float | None = None
    expandable_storage_in_gb: float | None = None
    sim: str | None = None
    wifi_calling: str | None = None
    fingerprint_sensor: str | None = None
    protection: str | None = None


# Column order of the cleaned table; the surrogate id is assigned downstream
COLUMNS: tuple[str, ...] = tuple(TypedSpecRecord.model_fields)
