"""ConfigManager — environment profiles, logging level, calibration source."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from mobispec.calibration import DEFAULT_CALIBRATION, Calibration, load_calibration
from mobispec.config import MISSING_SENTINEL
from mobispec.parser import SpecParser

logger = logging.getLogger(__name__)

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "MOBISPEC_ENV": {"default": "development", "description": "Environment profile"},
    "MOBISPEC_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
    "MOBISPEC_MISSING_SENTINEL": {
        "default": MISSING_SENTINEL,
        "description": "Value for categorical columns that could not be extracted",
    },
    "MOBISPEC_CALIBRATION": {
        "default": "",
        "description": "Path to a JSON calibration file (empty = built-in defaults)",
    },
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "MOBISPEC_ENV": "development",
        "MOBISPEC_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "MOBISPEC_ENV": "production",
        "MOBISPEC_LOG_LEVEL": "WARNING",
    },
    "testing": {
        "MOBISPEC_ENV": "testing",
        "MOBISPEC_LOG_LEVEL": "DEBUG",
    },
}


def _read_json_overrides(path: Path) -> dict[str, str]:
    """Return the flat key/value pairs of a project config.json, if readable."""
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return {key: str(value) for key, value in data.items()}
    except (json.JSONDecodeError, OSError, AttributeError):
        logger.warning("Could not read %s", path, exc_info=True)
        return {}


def _read_env_file(path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines of a .env file; comments and blanks are skipped."""
    if not path.is_file():
        return {}
    values: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip()
    return values


class ConfigManager:
    """Load mobispec configuration and build a configured parser."""

    def generate_env_template(self, project_path: str | Path) -> Path:
        """Write ``.env.example`` plus a calibration skeleton next to it.

        Each key is listed with its default and the value each profile sets;
        ``MOBISPEC_CALIBRATION`` is pre-filled (commented out) with the
        skeleton written by :meth:`write_calibration_template`.
        """
        root = Path(project_path)
        calibration_path = self.write_calibration_template(root)

        lines = ["# mobispec settings; copy to .env", ""]
        for key, info in _CONFIG_KEYS.items():
            lines.append(f"# {info['description']}")
            overrides = [
                f"{profile}={values[key]}" for profile, values in _PROFILES.items() if key in values
            ]
            if overrides:
                lines.append(f"# profiles: {', '.join(overrides)}")
            if key == "MOBISPEC_CALIBRATION":
                lines.append(f"# {key}={calibration_path.relative_to(root).as_posix()}")
            else:
                lines.append(f"{key}={info['default']}")
            lines.append("")

        env_path = root / ".env.example"
        env_path.write_text("\n".join(lines), encoding="utf-8")
        return env_path

    def write_calibration_template(self, project_path: str | Path) -> Path:
        """Dump the built-in calibration as an editable JSON file.

        The file is written to ``.mobispec/calibration.example.json`` and can be
        read back with :func:`mobispec.calibration.load_calibration`.
        """
        path = Path(project_path) / ".mobispec" / "calibration.example.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = DEFAULT_CALIBRATION.model_dump(mode="json")
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return path

    def load_config(self, project_path: str | Path = ".") -> dict[str, str]:
        """Load merged config: defaults -> profile -> config.json -> .env -> env vars.

        Returns a flat dict of configuration values.
        """
        root = Path(project_path)
        config = {key: str(info["default"]) for key, info in _CONFIG_KEYS.items()}

        profile = os.environ.get("MOBISPEC_ENV", config["MOBISPEC_ENV"])
        config.update(_PROFILES.get(profile, {}))
        config.update(_read_json_overrides(root / ".mobispec" / "config.json"))
        config.update(_read_env_file(root / ".env"))
        config.update({key: os.environ[key] for key in _CONFIG_KEYS if key in os.environ})
        return config

    def load_calibration(self, config: dict[str, str], project_path: str | Path = ".") -> Calibration:
        """Return the calibration named by ``MOBISPEC_CALIBRATION``, or the defaults."""
        path = config.get("MOBISPEC_CALIBRATION", "")
        if not path:
            return DEFAULT_CALIBRATION
        calibration_path = Path(path)
        if not calibration_path.is_absolute():
            calibration_path = Path(project_path) / calibration_path
        return load_calibration(calibration_path)

    def build_parser(self, project_path: str | Path = ".") -> SpecParser:
        """Create a :class:`SpecParser` from the merged configuration."""
        config = self.load_config(project_path)
        configure_logging(config["MOBISPEC_LOG_LEVEL"])
        return SpecParser(
            calibration=self.load_calibration(config, project_path),
            sentinel=config["MOBISPEC_MISSING_SENTINEL"],
        )


def configure_logging(level: str | int = "INFO") -> None:
    """Set the level of the ``mobispec`` logger hierarchy."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            logger.warning("Unknown log level %r, using INFO", level)
            resolved = logging.INFO
        level = resolved
    logging.getLogger("mobispec").setLevel(level)
