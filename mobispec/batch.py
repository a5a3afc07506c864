"""Batch transform with per-record isolation.

A record whose transform raises is logged, reported in
:attr:`BatchResult.failures` and skipped; the rest of the batch carries on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from mobispec.config import MISSING_SENTINEL
from mobispec.missing import is_missing
from mobispec.parser import SpecParser
from mobispec.schema import COLUMNS, RawSpecRecord, TypedSpecRecord

logger = logging.getLogger(__name__)


class RecordFailure(BaseModel):
    """A record that could not be transformed."""

    index: int
    """Position of the record in the input batch."""

    mobile_name: str | None = None
    error: str = ""


class BatchResult(BaseModel):
    """Outcome of transforming a batch of raw records."""

    records: list[TypedSpecRecord] = Field(default_factory=list)
    failures: list[RecordFailure] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records) + len(self.failures)

    def missing_counts(self, sentinel: str = MISSING_SENTINEL) -> dict[str, int]:
        """Count missing values per column across the transformed records."""
        counts = dict.fromkeys(COLUMNS, 0)
        for record in self.records:
            for column in COLUMNS:
                if is_missing(getattr(record, column), sentinel):
                    counts[column] += 1
        return counts


def _record_name(record: Any) -> str | None:
    if isinstance(record, Mapping):
        name = record.get("mobile_name")
    else:
        name = getattr(record, "mobile_name", None)
    return None if name is None else str(name)


def _coerce(record: RawSpecRecord | Mapping[str, Any]) -> RawSpecRecord:
    if isinstance(record, RawSpecRecord):
        return record
    if not isinstance(record, Mapping):
        raise TypeError(f"Expected a RawSpecRecord or a mapping, got {type(record).__name__}")
    return RawSpecRecord(**record)


def transform_records(
    records: Iterable[RawSpecRecord | Mapping[str, Any]],
    parser: SpecParser | None = None,
) -> BatchResult:
    """Transform every record, isolating the ones that fail.

    Parameters
    ----------
    records:
        Raw records, or mappings with the :class:`RawSpecRecord` field names.
        Anything else is reported as a failure.
    parser:
        Parser to use; a default :class:`SpecParser` when omitted.
    """
    parser = parser or SpecParser()
    result = BatchResult()

    for index, record in enumerate(records):
        name = None
        try:
            name = _record_name(record)
            result.records.append(parser.parse(_coerce(record)))
        except Exception as exc:
            logger.warning(
                "Skipping record %d (%s) due to error", index, name, exc_info=True,
            )
            result.failures.append(
                RecordFailure(index=index, mobile_name=name, error=str(exc)),
            )

    logger.info(
        "Transformed %d records, %d failed", len(result.records), len(result.failures),
    )
    return result
