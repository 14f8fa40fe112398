"""Safety gates and weighted suitability scoring for alternative tyre sizes.

A candidate passes through ordered hard gates; the first failing gate
rejects it outright. Survivors are scored 0-100 by subtracting three
penalties, each scaled by how close its delta is to its limit:

    diameter  up to 55  (speedometer accuracy, ABS/ESP calibration)
    width     up to 25  (clearance, load distribution)
    aspect    up to 20  (handling feel)
"""

import logging
import math

from app.models.tyre import FitmentLimits, RejectionReason, ScoredCandidate, TyreSize
from app.services.tyre_size import format_tyre_size
from app.utils.tyre_math import overall_diameter_mm, pct_diff

logger = logging.getLogger(__name__)

DEFAULT_LIMITS = FitmentLimits()

DIAMETER_WEIGHT = 55
WIDTH_WEIGHT = 25
ASPECT_WEIGHT = 20

# (minimum score, label), highest first
SCORE_LABELS: list[tuple[int, str]] = [
    (90, "S-Tier Fit"),
    (80, "Great Fit"),
    (70, "OK Fit"),
]
FALLBACK_LABEL = "Nope"


def score_label(score: int) -> str:
    for threshold, label in SCORE_LABELS:
        if score >= threshold:
            return label
    return FALLBACK_LABEL


def _clamp(n: float, low: float, high: float) -> float:
    return max(low, min(high, n))


def _round_half_up(n: float) -> int:
    return math.floor(n + 0.5)


def _penalty(delta: float, limit: float, weight: int) -> float:
    return _clamp(delta / limit * weight, 0, weight)


def score_candidate(
    oem: TyreSize,
    candidate: TyreSize,
    limits: FitmentLimits = DEFAULT_LIMITS,
) -> ScoredCandidate:
    """Score an alternative size against the OEM size.

    Gates, in order:
      0. candidate width, aspect and rim must be positive
      1. overall diameter within ``limits.diameter_pct_max`` percent
      2. same rim diameter as OEM (rim changes are never offered)
      3. width within ``limits.width_delta_max_mm``

    The returned reasons always end with the three measured deltas; a
    rejected candidate has its rejection reason first and a score of 0.
    """
    dia_pct = pct_diff(overall_diameter_mm(oem), overall_diameter_mm(candidate))
    width_delta = abs(candidate.width_mm - oem.width_mm)
    aspect_delta = abs(candidate.aspect_ratio - oem.aspect_ratio)

    measured = [
        f"Diameter Δ {dia_pct:.2f}%",
        f"Width Δ {width_delta}mm",
        f"Aspect Δ {aspect_delta}",
    ]

    rejection: RejectionReason | None = None
    message = ""
    if min(candidate.width_mm, candidate.aspect_ratio, candidate.rim_diameter_in) <= 0:
        rejection = RejectionReason.INVALID_GEOMETRY
        message = "Width, aspect and rim must all be positive"
    elif dia_pct > limits.diameter_pct_max:
        rejection = RejectionReason.DIAMETER
        message = f"Diameter Δ {dia_pct:.2f}% exceeds limit {limits.diameter_pct_max:g}%"
    elif candidate.rim_diameter_in != oem.rim_diameter_in:
        rejection = RejectionReason.RIM
        message = "Rim size differs from OEM"
    elif width_delta > limits.width_delta_max_mm:
        rejection = RejectionReason.WIDTH
        message = f"Width Δ {width_delta}mm exceeds limit ±{limits.width_delta_max_mm}mm"

    size = format_tyre_size(candidate)
    common = {
        "size": size,
        "diameter_delta_pct": round(dia_pct, 2),
        "width_delta_mm": width_delta,
        "aspect_delta": aspect_delta,
    }

    if rejection is not None:
        logger.debug("Rejected %s (%s): %s", size, rejection.value, message)
        return ScoredCandidate(
            safe=False,
            score=0,
            label=score_label(0),
            reasons=[message, *measured],
            rejection=rejection,
            **common,
        )

    total_penalty = (
        _penalty(dia_pct, limits.diameter_pct_max, DIAMETER_WEIGHT)
        + _penalty(width_delta, limits.width_delta_max_mm, WIDTH_WEIGHT)
        + _penalty(aspect_delta, limits.aspect_delta_max_for_full_penalty, ASPECT_WEIGHT)
    )
    score = int(_clamp(_round_half_up(100 - total_penalty), 0, 100))

    return ScoredCandidate(
        safe=True,
        score=score,
        label=score_label(score),
        reasons=measured,
        **common,
    )
