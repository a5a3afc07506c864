"""Turn free-text mobile phone catalog rows into typed spec records."""

__version__ = "1.0.0"

from mobispec.batch import BatchResult, RecordFailure, transform_records
from mobispec.calibration import DEFAULT_CALIBRATION, Calibration, load_calibration
from mobispec.errors import CalibrationError, MalformedNumericToken, SpecParseError
from mobispec.parser import SpecParser, parse_record
from mobispec.resolution import ResolutionInfo, classify_resolution
from mobispec.schema import COLUMNS, RawSpecRecord, SectionText, TypedSpecRecord
from mobispec.sections import normalize_details, split_sections
from mobispec.settings import ConfigManager, configure_logging

__all__ = [
    "__version__",
    # Engine
    "SpecParser",
    "parse_record",
    "normalize_details",
    "split_sections",
    "classify_resolution",
    # Models
    "COLUMNS",
    "RawSpecRecord",
    "ResolutionInfo",
    "SectionText",
    "TypedSpecRecord",
    # Batch
    "BatchResult",
    "RecordFailure",
    "transform_records",
    # Configuration
    "Calibration",
    "ConfigManager",
    "DEFAULT_CALIBRATION",
    "configure_logging",
    "load_calibration",
    # Errors
    "CalibrationError",
    "MalformedNumericToken",
    "SpecParseError",
]
