"""Alternative tyre size engine.

Given an OEM size, generate nearby sizes on the same rim, score each against
the OEM size and return the safe ones ranked by suitability. Geometry only:
load index and speed rating are not considered.
"""

import logging

from app.models.tyre import FitmentEvaluation, FitmentLimits, ScoredCandidate, TyreSize
from app.services.candidates import DEFAULT_STEP_POLICY, StepPolicy, generate_candidates
from app.services.scoring import DEFAULT_LIMITS, score_candidate
from app.services.tyre_size import format_tyre_size, parse_tyre_size

logger = logging.getLogger(__name__)


def rank_alternatives(
    oem: TyreSize,
    limits: FitmentLimits = DEFAULT_LIMITS,
    policy: StepPolicy = DEFAULT_STEP_POLICY,
) -> list[ScoredCandidate]:
    """Score every candidate and return the surfaced ones, best first.

    Rejected candidates and safe ones scoring below ``limits.min_score_shown``
    are dropped. Equal scores keep candidate generation order. An empty list
    means nothing cleared the bar.
    """
    scored = [score_candidate(oem, c, limits) for c in generate_candidates(oem, policy)]
    shown = [s for s in scored if s.safe and s.score >= limits.min_score_shown]
    # sorted() is stable, so ties keep generation order
    shown = sorted(shown, key=lambda s: s.score, reverse=True)

    logger.info(
        "Evaluated %s: %d candidates, %d rejected, %d shown",
        format_tyre_size(oem),
        len(scored),
        sum(1 for s in scored if not s.safe),
        len(shown),
    )
    return shown


def evaluate_fitment(
    oem_size: str,
    vehicle_id: str | None = None,
    limits: FitmentLimits = DEFAULT_LIMITS,
    policy: StepPolicy = DEFAULT_STEP_POLICY,
) -> FitmentEvaluation:
    """Parse an OEM size string and rank its alternatives.

    An unparseable OEM size is not a fault: the evaluation comes back with
    ``oem=None``, an error message and no alternatives. ``vehicle_id`` is
    carried through for display only.
    """
    oem = parse_tyre_size(oem_size)
    if oem is None:
        logger.info("OEM tyre size %r could not be parsed", oem_size)
        return FitmentEvaluation(
            vehicle_id=vehicle_id,
            oem_size=oem_size,
            error=f"Invalid OEM tyre size: {oem_size!r}",
        )

    return FitmentEvaluation(
        vehicle_id=vehicle_id,
        oem_size=oem_size,
        oem=oem,
        oem_canonical=format_tyre_size(oem),
        alternatives=rank_alternatives(oem, limits, policy),
    )
