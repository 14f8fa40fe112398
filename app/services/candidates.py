"""Candidate alternative sizes around an OEM size.

The step policy mirrors realistic retail size steps on the same rim rather
than an exhaustive search.
"""

import logging

from pydantic import BaseModel, ConfigDict

from app.models.tyre import TyreSize
from app.services.tyre_size import format_tyre_size

logger = logging.getLogger(__name__)


class StepPolicy(BaseModel):
    """Offsets applied to the OEM size to derive candidates, in evaluation order."""

    model_config = ConfigDict(frozen=True)

    width_offsets_mm: tuple[int, ...] = (-20, -10, 10, 20)
    aspect_offsets: tuple[int, ...] = (-5, 5)
    # (width, aspect) pairs: narrower+lower profile, wider+lower profile
    combined_offsets: tuple[tuple[int, int], ...] = ((-10, -5), (10, -5))


DEFAULT_STEP_POLICY = StepPolicy()


def _raw_candidates(oem: TyreSize, policy: StepPolicy) -> list[TyreSize]:
    candidates = [oem.with_offsets(width_delta_mm=dw) for dw in policy.width_offsets_mm]
    candidates += [oem.with_offsets(aspect_delta=da) for da in policy.aspect_offsets]
    candidates += [oem.with_offsets(dw, da) for dw, da in policy.combined_offsets]
    return candidates


def generate_candidates(
    oem: TyreSize,
    policy: StepPolicy = DEFAULT_STEP_POLICY,
) -> list[TyreSize]:
    """Derive candidate sizes from the OEM size.

    Candidates are not checked against parser bounds; the scoring gates deal
    with anything too far from OEM. Sizes with a non-positive width or aspect
    are dropped since they cannot describe a tyre. The OEM size itself and
    duplicates (by canonical string, first occurrence wins) are removed.
    """
    seen = {format_tyre_size(oem)}
    result: list[TyreSize] = []
    for candidate in _raw_candidates(oem, policy):
        if candidate.width_mm <= 0 or candidate.aspect_ratio <= 0:
            logger.debug("Dropping degenerate candidate %s", format_tyre_size(candidate))
            continue
        size = format_tyre_size(candidate)
        if size in seen:
            continue
        seen.add(size)
        result.append(candidate)
    return result
