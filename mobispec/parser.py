"""SpecParser — main entry point of the extraction engine.

Usage::

    from mobispec import SpecParser, RawSpecRecord

    parser = SpecParser()
    record = parser.parse(RawSpecRecord(
        mobile_name="Redmi Note 12",
        os_text="Android v13",
        details_text="PerformanceOcta Core2.2 GHz ProcessorSnapdragon 6856 GB RAM...",
    ))
"""

from __future__ import annotations

import logging
from typing import Any

from mobispec.calibration import DEFAULT_CALIBRATION, Calibration
from mobispec.config import MISSING_SENTINEL
from mobispec.extractors import (
    extract_battery,
    extract_camera,
    extract_display,
    extract_features,
    extract_performance,
    parse_os,
)
from mobispec.extractors.base import guarded
from mobispec.missing import apply_missing_policy
from mobispec.schema import RawSpecRecord, SectionText, TypedSpecRecord
from mobispec.sections import normalize_details, split_sections
from mobispec.units import digits_to_int

logger = logging.getLogger(__name__)


class SpecParser:
    """Turn one raw catalog row into a :class:`TypedSpecRecord`.

    The parser holds no per-record state; one instance can be shared by any
    number of callers.

    Parameters
    ----------
    calibration:
        Dataset-specific vocabularies.  Defaults to the 91mobiles calibration.
    sentinel:
        Value written into categorical columns that could not be extracted.
    """

    def __init__(
        self,
        calibration: Calibration | None = None,
        sentinel: str = MISSING_SENTINEL,
    ) -> None:
        self.calibration = calibration or DEFAULT_CALIBRATION
        self.sentinel = sentinel

    def sections(self, details_text: str | None) -> SectionText:
        """Normalize and split the combined details blob."""
        return split_sections(normalize_details(details_text))

    def extract(self, raw: RawSpecRecord) -> dict[str, Any]:
        """Run every extractor and return the raw field values.

        Missing values are still ``None`` here; see :meth:`parse`.
        """
        sections = self.sections(raw.details_text)

        values: dict[str, Any] = {
            "mobile_name": raw.mobile_name,
            "price": guarded("price", digits_to_int, raw.price_text),
            "spec_score": guarded("spec_score", digits_to_int, raw.spec_score_text),
        }
        values.update(parse_os(raw.os_text, self.calibration))
        values.update(extract_performance(sections.performance, self.calibration))
        values.update(extract_display(sections.display))
        values.update(extract_camera(sections.camera))
        values.update(extract_battery(sections.battery))
        values.update(extract_features(raw.features_text))
        return values

    def parse(self, raw: RawSpecRecord) -> TypedSpecRecord:
        """Parse one raw record into a typed, normalized record."""
        values = self.extract(raw)
        logger.debug("Parsed %s", raw.mobile_name or "<unnamed>")
        return TypedSpecRecord(**apply_missing_policy(values, self.sentinel))


_DEFAULT_PARSER = SpecParser()


def parse_record(
    mobile_name: str | None = None,
    spec_score_text: str | None = None,
    os_text: str | None = None,
    price_text: str | None = None,
    details_text: str | None = None,
    features_text: str | None = None,
) -> TypedSpecRecord:
    """Parse the six raw text fields of one row with the default parser."""
    raw = RawSpecRecord(
        mobile_name=mobile_name,
        spec_score_text=spec_score_text,
        os_text=os_text,
        price_text=price_text,
        details_text=details_text,
        features_text=features_text,
    )
    return _DEFAULT_PARSER.parse(raw)
