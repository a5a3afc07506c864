"""Tests for ConfigManager, calibration loading and logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from mobispec.calibration import DEFAULT_CALIBRATION, load_calibration
from mobispec.errors import CalibrationError
from mobispec.settings import ConfigManager, configure_logging

_KEYS = (
    "MOBISPEC_ENV",
    "MOBISPEC_LOG_LEVEL",
    "MOBISPEC_MISSING_SENTINEL",
    "MOBISPEC_CALIBRATION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for key in _KEYS:
        monkeypatch.delenv(key, raising=False)
    package_logger = logging.getLogger("mobispec")
    level = package_logger.level
    yield
    package_logger.setLevel(level)


# ---------------------------------------------------------------------------
# Template
# ---------------------------------------------------------------------------


class TestEnvTemplate:
    def test_lists_every_key(self, tmp_path: Path) -> None:
        path = ConfigManager().generate_env_template(tmp_path)
        assert path == tmp_path / ".env.example"
        content = path.read_text(encoding="utf-8")
        for key in _KEYS:
            assert f"{key}=" in content
        assert "MOBISPEC_MISSING_SENTINEL=No Data" in content

    def test_profile_values_listed(self, tmp_path: Path) -> None:
        content = ConfigManager().generate_env_template(tmp_path).read_text(encoding="utf-8")
        assert "# profiles: development=DEBUG, production=WARNING, testing=DEBUG" in content

    def test_calibration_skeleton_points_to_file(self, tmp_path: Path) -> None:
        content = ConfigManager().generate_env_template(tmp_path).read_text(encoding="utf-8")
        assert "# MOBISPEC_CALIBRATION=.mobispec/calibration.example.json" in content
        assert (tmp_path / ".mobispec" / "calibration.example.json").is_file()

    def test_calibration_skeleton_loads_back(self, tmp_path: Path) -> None:
        path = ConfigManager().write_calibration_template(tmp_path)
        assert load_calibration(path) == DEFAULT_CALIBRATION


# ---------------------------------------------------------------------------
# Merge order
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = ConfigManager().load_config(tmp_path)
        assert config["MOBISPEC_ENV"] == "development"
        assert config["MOBISPEC_LOG_LEVEL"] == "DEBUG"
        assert config["MOBISPEC_MISSING_SENTINEL"] == "No Data"
        assert config["MOBISPEC_CALIBRATION"] == ""

    def test_profile(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MOBISPEC_ENV", "production")
        config = ConfigManager().load_config(tmp_path)
        assert config["MOBISPEC_LOG_LEVEL"] == "WARNING"

    def test_config_json_over_profile(self, tmp_path: Path) -> None:
        (tmp_path / ".mobispec").mkdir()
        (tmp_path / ".mobispec" / "config.json").write_text(
            json.dumps({"MOBISPEC_LOG_LEVEL": "ERROR"}), encoding="utf-8",
        )
        assert ConfigManager().load_config(tmp_path)["MOBISPEC_LOG_LEVEL"] == "ERROR"

    def test_unreadable_config_json_ignored(self, tmp_path: Path) -> None:
        (tmp_path / ".mobispec").mkdir()
        (tmp_path / ".mobispec" / "config.json").write_text("{not json", encoding="utf-8")
        assert ConfigManager().load_config(tmp_path)["MOBISPEC_LOG_LEVEL"] == "DEBUG"

    def test_env_file_over_config_json(self, tmp_path: Path) -> None:
        (tmp_path / ".mobispec").mkdir()
        (tmp_path / ".mobispec" / "config.json").write_text(
            json.dumps({"MOBISPEC_MISSING_SENTINEL": "json"}), encoding="utf-8",
        )
        (tmp_path / ".env").write_text(
            "# local overrides\n\nMOBISPEC_MISSING_SENTINEL = N/A\n", encoding="utf-8",
        )
        assert ConfigManager().load_config(tmp_path)["MOBISPEC_MISSING_SENTINEL"] == "N/A"

    def test_environment_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text("MOBISPEC_LOG_LEVEL=ERROR\n", encoding="utf-8")
        monkeypatch.setenv("MOBISPEC_LOG_LEVEL", "CRITICAL")
        assert ConfigManager().load_config(tmp_path)["MOBISPEC_LOG_LEVEL"] == "CRITICAL"


# ---------------------------------------------------------------------------
# Calibration
# ---------------------------------------------------------------------------


class TestCalibration:
    def test_defaults_without_path(self, tmp_path: Path) -> None:
        config = ConfigManager().load_config(tmp_path)
        assert ConfigManager().load_calibration(config, tmp_path) is DEFAULT_CALIBRATION

    def test_relative_path(self, tmp_path: Path) -> None:
        (tmp_path / "cal.json").write_text(
            json.dumps({"chipset_vendors": ["Tensor"]}), encoding="utf-8",
        )
        calibration = ConfigManager().load_calibration(
            {"MOBISPEC_CALIBRATION": "cal.json"}, tmp_path,
        )
        assert calibration.chipset_vendors == ("Tensor",)
        assert calibration.os_version_corrections == DEFAULT_CALIBRATION.os_version_corrections

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CalibrationError):
            load_calibration(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "cal.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(CalibrationError):
            load_calibration(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "cal.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(CalibrationError, match="JSON object"):
            load_calibration(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "cal.json"
        path.write_text(json.dumps({"chipset_vendors": 5}), encoding="utf-8")
        with pytest.raises(CalibrationError, match="Invalid calibration"):
            load_calibration(path)


# ---------------------------------------------------------------------------
# Parser and logging
# ---------------------------------------------------------------------------


class TestBuildParser:
    def test_configured_parser(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "cal.json").write_text(
            json.dumps({"os_version_corrections": {}}), encoding="utf-8",
        )
        monkeypatch.setenv("MOBISPEC_CALIBRATION", "cal.json")
        monkeypatch.setenv("MOBISPEC_MISSING_SENTINEL", "N/A")
        monkeypatch.setenv("MOBISPEC_LOG_LEVEL", "ERROR")

        parser = ConfigManager().build_parser(tmp_path)
        assert parser.sentinel == "N/A"
        assert parser.calibration.os_version_corrections == {}
        assert logging.getLogger("mobispec").level == logging.ERROR


class TestConfigureLogging:
    def test_named_level(self) -> None:
        configure_logging("warning")
        assert logging.getLogger("mobispec").level == logging.WARNING

    def test_numeric_level(self) -> None:
        configure_logging(logging.DEBUG)
        assert logging.getLogger("mobispec").level == logging.DEBUG

    def test_unknown_level(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger("mobispec").level == logging.INFO
