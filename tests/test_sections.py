"""Tests for details normalization and section splitting."""

from __future__ import annotations

import pytest

from mobispec.schema import SectionText
from mobispec.sections import normalize_details, split_sections

RAW_DETAILS = (
    "PerformanceOcta Core2.2 GHz ProcessorMediaTek Helio G856 GB RAM"
    "Display6.5 inches (16.51 cm)720x1600 px, IPS LCD90 Hz Refresh Rate"
    "Camera50 MP + 2 MP Dual Primary Cameras8 MP Front Camera"
    "Battery5000 mAhFast Charging"
)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------


class TestNormalizeDetails:
    def test_markers_inserted(self) -> None:
        text = normalize_details(RAW_DETAILS)
        assert text.startswith("Performance Octa Core")
        assert "RAM, Display 6.5 inches" in text
        assert "Refresh Rate, Camera 50 MP" in text
        assert ", Battery 5000 mAh" in text

    def test_primary_and_front_camera_not_split(self) -> None:
        text = normalize_details(RAW_DETAILS)
        assert "Dual Primary Camera s8 MP Front Camera" in text
        assert "Primary, Camera" not in text
        assert "Front, Camera" not in text

    def test_whitespace_collapsed(self) -> None:
        text = normalize_details("Performance   Quad   Core\t1.3 GHz  Display  5 inches")
        assert "  " not in text
        assert "\t" not in text
        assert text == "Performance Quad Core 1.3 GHz, Display 5 inches"

    def test_idempotent(self) -> None:
        once = normalize_details(RAW_DETAILS)
        assert normalize_details(once) == once

    def test_idempotent_with_existing_separators(self) -> None:
        raw = "Performance Quad Core , Display 5 inches,Camera 8 MP Primary , Camera, Battery 3000 mAh"
        once = normalize_details(raw)
        assert normalize_details(once) == once
        assert "Primary Camera" in once

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value: str | None) -> None:
        assert normalize_details(value) == ""


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


class TestSplitSections:
    def test_all_four_sections(self) -> None:
        sections = split_sections(normalize_details(RAW_DETAILS))
        assert sections.performance == "Octa Core2.2 GHz ProcessorMediaTek Helio G856 GB RAM"
        assert sections.display == "6.5 inches (16.51 cm)720x1600 px, IPS LCD90 Hz Refresh Rate"
        assert sections.camera == "50 MP + 2 MP Dual Primary Camera s8 MP Front Camera"
        assert sections.battery == "5000 mAhFast Charging"

    def test_missing_battery(self) -> None:
        text = normalize_details("PerformanceQuad Core1.3 GHzDisplay5 inchesCamera8 MP Primary Camera")
        sections = split_sections(text)
        assert sections.battery is None
        assert sections.performance == "Quad Core1.3 GHz"
        assert sections.display == "5 inches"
        assert sections.camera == "8 MP Primary Camera"

    def test_missing_middle_section_skips_to_next_marker(self) -> None:
        text = normalize_details("PerformanceQuad CoreBattery2000 mAh")
        sections = split_sections(text)
        assert sections.performance == "Quad Core"
        assert sections.display is None
        assert sections.camera is None
        assert sections.battery == "2000 mAh"

    def test_missing_performance(self) -> None:
        sections = split_sections(normalize_details("Display5 inchesBattery2000 mAh"))
        assert sections.performance is None
        assert sections.display == "5 inches"
        assert sections.battery == "2000 mAh"

    def test_empty_section_body_is_absent(self) -> None:
        sections = split_sections(normalize_details("PerformanceDisplay5 inches"))
        assert sections.performance is None
        assert sections.display == "5 inches"

    def test_empty_input(self) -> None:
        assert split_sections("") == SectionText()
        assert split_sections(None) == SectionText()
