"""Shared helpers for the section extractors."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, TypeVar

from mobispec.errors import SpecParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def guarded(field: str, func: Callable[..., T | None], *args: Any) -> T | None:
    """Run one field extraction, turning any failure into a missing value.

    Fields are independent: a field that raises must not stop its siblings
    from being extracted.
    """
    try:
        return func(*args)
    except SpecParseError as exc:
        logger.debug("Field %s left missing: %s", field, exc)
    except Exception:
        logger.warning("Extraction of field %s failed", field, exc_info=True)
    return None


def first_match(pattern: re.Pattern[str], text: str | None, group: int | str = 0) -> str | None:
    """Return the stripped *group* of the first match of *pattern*, or None."""
    if not text:
        return None
    m = pattern.search(text)
    if m is None:
        return None
    value = (m.group(group) or "").strip()
    return value or None


def alternation(words: tuple[str, ...] | list[str]) -> str:
    """Build a regex alternation, longest words first."""
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))
