"""Tyre geometry calculations.

This module is the single source of truth for tyre size math.

## Core Formulas

### Sidewall Height
    sidewall_mm = width_mm × (aspect_ratio / 100)

### Overall (Rolling) Diameter
    overall_diameter_mm = (rim_diameter_in × 25.4) + (2 × sidewall_mm)

### Percentage Difference
    pct_diff = |b - a| / a × 100

Sources:
- ISO 4000-1 (Passenger car tyres and rims)
"""

from app.models.tyre import TyreSize

# Conversion factor
MM_PER_INCH = 25.4


def sidewall_height_mm(tyre: TyreSize) -> float:
    """Calculate tyre sidewall height in mm.

    Example:
        >>> sidewall_height_mm(TyreSize(width_mm=265, aspect_ratio=30, rim_diameter_in=20))
        79.5
    """
    return tyre.width_mm * (tyre.aspect_ratio / 100)


def overall_diameter_mm(tyre: TyreSize) -> float:
    """Calculate the overall rolling diameter of a mounted tyre in mm.

    Rim bead diameter (inches converted to mm) plus two sidewalls.

    Example:
        >>> overall_diameter_mm(TyreSize(width_mm=265, aspect_ratio=30, rim_diameter_in=20))
        667.0  # (20 × 25.4) + (2 × 79.5) = 508 + 159
    """
    rim_mm = tyre.rim_diameter_in * MM_PER_INCH
    return rim_mm + 2 * sidewall_height_mm(tyre)


def pct_diff(a: float, b: float) -> float:
    """Absolute difference between ``b`` and ``a`` as a percentage of ``a``.

    Used to compare an alternative's overall diameter against the OEM
    diameter, so ``a`` is the OEM value.

    Raises:
        ValueError: if ``a`` is zero.
    """
    if a == 0:
        raise ValueError("pct_diff base value must be non-zero")
    return abs((b - a) / a) * 100
