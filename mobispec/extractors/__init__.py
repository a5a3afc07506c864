"""Section extractors, one rule set per section of the catalog text."""

from mobispec.extractors.battery import extract_battery
from mobispec.extractors.camera import extract_camera
from mobispec.extractors.display import extract_display
from mobispec.extractors.features import extract_features
from mobispec.extractors.operating_system import parse_os
from mobispec.extractors.performance import extract_performance

__all__ = [
    "extract_battery",
    "extract_camera",
    "extract_display",
    "extract_features",
    "extract_performance",
    "parse_os",
]
