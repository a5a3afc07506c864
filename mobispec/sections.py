"""Details-blob normalization and section splitting.

The catalog packs performance, display, camera and battery specs into one
string with no reliable delimiters (``"PerformanceOcta Core2.2 GHz ...Display6.5
inches ..."``).  :func:`normalize_details` turns the section keywords into
canonical markers and :func:`split_sections` slices the marked string.
"""

from __future__ import annotations

import logging
import re

from mobispec.config import SECTION_MARKERS, SECTION_NAMES
from mobispec.schema import SectionText

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

# "Primary Camera"/"Front Camera" name a camera, they do not open a section.
# Any separator already in front of a keyword is consumed so that
# re-normalizing a marked string rewrites each marker to itself.
_KEYWORD_RE = re.compile(
    r"(?P<lead>Primary|Front)?[\s,]*(?P<key>Performance|Display|Camera|Battery)\s*"
)
_WHITESPACE_RE = re.compile(r"\s+")


def _mark(m: re.Match[str]) -> str:
    lead, key = m.group("lead") or "", m.group("key")
    if lead and key == "Camera":
        return f"{lead} Camera "
    if key == "Performance":
        return f"{lead} Performance "
    return f"{lead}, {key} "


def normalize_details(text: str | None) -> str:
    """Insert canonical section markers into a raw details blob.

    Idempotent: ``normalize_details(normalize_details(s)) == normalize_details(s)``.
    """
    if not text:
        return ""
    marked = _KEYWORD_RE.sub(_mark, text)
    return _WHITESPACE_RE.sub(" ", marked).strip()


# ---------------------------------------------------------------------------
# Splitting
# ---------------------------------------------------------------------------


def _section_patterns(name: str) -> tuple[re.Pattern[str], ...]:
    """Build the ordered patterns for one section.

    One pattern per later marker, in fixed order, then one running to the end
    of the string.  The first pattern that matches decides the section end.
    """
    start = re.escape(SECTION_MARKERS[name].strip())
    later = SECTION_NAMES[SECTION_NAMES.index(name) + 1:]
    patterns = [
        re.compile(start + r"(?P<body>.*?)" + re.escape(SECTION_MARKERS[other].rstrip()))
        for other in later
    ]
    patterns.append(re.compile(start + r"(?P<body>.*)$"))
    return tuple(patterns)


_SECTION_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    name: _section_patterns(name) for name in SECTION_NAMES
}


def _extract_section(name: str, text: str) -> str | None:
    for pattern in _SECTION_PATTERNS[name]:
        m = pattern.search(text)
        if m:
            body = m.group("body").strip()
            return body or None
    return None


def split_sections(normalized: str | None) -> SectionText:
    """Slice a normalized details string into its four sections."""
    if not normalized:
        return SectionText()
    sections = {name: _extract_section(name, normalized) for name in SECTION_NAMES}
    missing = [name for name, body in sections.items() if body is None]
    if missing:
        logger.debug("Sections not found: %s", ", ".join(missing))
    return SectionText(**sections)
