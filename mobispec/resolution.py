"""Resolution classification between category names and pixel dimensions.

Sources report resolution either as explicit pixels (``"1080x2400"``) or as a
marketing tier (``"FHD+"``).  Tiers are mapped to canonical pixel strings so
every record gets width/height columns, and explicit pixel resolutions are
re-categorized from their height so that both spellings share one category
vocabulary.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from mobispec.config import RESOLUTION_ALIASES, RESOLUTION_BUCKETS, RESOLUTION_PIXELS

_PIXELS_RE = re.compile(r"^(\d+)x(\d+)$")


class ResolutionInfo(BaseModel):
    """Classified resolution of one display."""

    resolution: str | None = None
    """Category name ('FHD+', 'HD', 'SUB SD', ...)."""

    resolution_in_px: str | None = None
    """``WIDTHxHEIGHT`` string the pixel columns come from."""

    px_width: int | None = None
    px_height: int | None = None


def is_pixel_format(resolution: str | None) -> bool:
    """Return True if *resolution* is a ``WIDTHxHEIGHT`` string."""
    return bool(resolution) and _PIXELS_RE.match(resolution) is not None


def canonical_category(category: str) -> str:
    """Fold alias spellings (``"FULL HD"``) into the short form (``"FHD"``)."""
    category = category.strip().upper()
    return RESOLUTION_ALIASES.get(category, category)


def category_to_pixels(category: str | None) -> str | None:
    """Return the canonical pixel string for a category, ``None`` if unknown.

    Pixel strings pass through unchanged.
    """
    if not category:
        return None
    if is_pixel_format(category):
        return category
    return RESOLUTION_PIXELS.get(canonical_category(category))


def split_pixels(pixels: str | None) -> tuple[int | None, int | None]:
    """Split ``"1080x2400"`` into ``(1080, 2400)``."""
    if not pixels:
        return None, None
    m = _PIXELS_RE.match(pixels)
    if m is None:
        return None, None
    return int(m.group(1)), int(m.group(2))


def classify_height(height: int | None) -> str | None:
    """Return the category whose half-open height bucket holds *height*."""
    if height is None:
        return None
    for lower, upper, category in RESOLUTION_BUCKETS:
        if lower < height <= upper:
            return category
    return None


def classify_resolution(raw: str | None) -> ResolutionInfo:
    """Classify a raw resolution token from the display section.

    Pixel-formatted tokens are re-categorized from their height; categorical
    tokens keep their (alias-folded) name and borrow canonical pixels.
    """
    if not raw:
        return ResolutionInfo()

    pixels = category_to_pixels(raw)
    width, height = split_pixels(pixels)

    if is_pixel_format(raw):
        category = classify_height(height)
    else:
        category = canonical_category(raw)

    return ResolutionInfo(
        resolution=category,
        resolution_in_px=pixels,
        px_width=width,
        px_height=height,
    )
