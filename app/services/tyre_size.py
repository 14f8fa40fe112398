"""Tyre size parsing and formatting.

Accepts "265/30 R20" or "265/30R20" (any case, any internal whitespace) and
renders the canonical "265/30 R20" form.
"""

import math
import re

from app.models.tyre import TyreSize

ASPECT_MIN, ASPECT_MAX = 10, 95
RIM_MIN, RIM_MAX = 10, 30

# ASCII digits only; float() would also accept other Unicode digits
_NUMBER_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)(E[+-]?[0-9]+)?$", re.ASCII)


class TyreSizeParseError(ValueError):
    """Raised when a tyre size string is malformed or out of range."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid tyre size: {text!r}")
        self.text = text


def normalise(text: str) -> str:
    """Trim, upper-case and strip all whitespace."""
    return "".join(str(text).upper().split())


def _parse_whole_number(segment: str) -> int | None:
    if not _NUMBER_RE.match(segment):
        return None
    value = float(segment)
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


def parse_tyre_size(text: str) -> TyreSize | None:
    """Parse a tyre size string like '265/30 R20' → TyreSize(265, 30, 20).

    Returns None for anything malformed or out of range; never a partial result.
    """
    parts = normalise(text).split("R")
    if len(parts) != 2:
        return None
    left, rim_str = parts
    width_aspect = left.split("/")
    if len(width_aspect) != 2:
        return None
    if not all(width_aspect) or not rim_str:
        return None

    width = _parse_whole_number(width_aspect[0])
    aspect = _parse_whole_number(width_aspect[1])
    rim = _parse_whole_number(rim_str)
    if width is None or aspect is None or rim is None:
        return None

    # Sanity bound: widths render as exactly three digits
    if not 100 <= width <= 999:
        return None
    if not ASPECT_MIN <= aspect <= ASPECT_MAX:
        return None
    if not RIM_MIN <= rim <= RIM_MAX:
        return None

    return TyreSize(width_mm=width, aspect_ratio=aspect, rim_diameter_in=rim)


def require_tyre_size(text: str) -> TyreSize:
    """Like parse_tyre_size but raises TyreSizeParseError on failure."""
    tyre = parse_tyre_size(text)
    if tyre is None:
        raise TyreSizeParseError(text)
    return tyre


def format_tyre_size(tyre: TyreSize) -> str:
    return f"{tyre.width_mm}/{tyre.aspect_ratio:02d} R{tyre.rim_diameter_in}"


def size_to_slug(size: str) -> str | None:
    """Convert a size string to a retailer URL slug, e.g. '265-30-20'."""
    tyre = parse_tyre_size(size)
    if tyre is None:
        return None
    return f"{tyre.width_mm}-{tyre.aspect_ratio:02d}-{tyre.rim_diameter_in}"
