"""FastAPI route definitions for the TyreWise API."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.api.deps import get_app_settings, get_limits
from app.config import Settings
from app.models.tyre import FitmentEvaluation, FitmentLimits, RetailerLinks, ScoredCandidate
from app.services.fitment_engine import evaluate_fitment
from app.services.retailers import retailer_links
from app.services.tyre_size import format_tyre_size, parse_tyre_size, size_to_slug
from app.services.vehicles import DEMO_VRM, lookup_oem_tyre, normalise_vrm
from app.utils.tyre_math import overall_diameter_mm, sidewall_height_mm

router = APIRouter()


# ---------------------------------------------------------------------------
# Request / Response Models
# ---------------------------------------------------------------------------


class AlternativesRequest(BaseModel):
    oem_size: str
    vehicle_id: Optional[str] = None


class AlternativeOut(BaseModel):
    candidate: ScoredCandidate
    links: RetailerLinks


class AlternativesResponse(BaseModel):
    vehicle_id: Optional[str] = None
    oem_size: str
    oem_links: RetailerLinks
    alternatives: list[AlternativeOut]
    total_shown: int


class SizeResponse(BaseModel):
    size: str
    slug: str
    width_mm: int
    aspect_ratio: int
    rim_diameter_in: int
    sidewall_mm: float
    overall_diameter_mm: float
    links: RetailerLinks


def _build_response(evaluation: FitmentEvaluation, settings: Settings) -> AlternativesResponse:
    if not evaluation.ok or evaluation.oem_canonical is None:
        raise HTTPException(status_code=422, detail=evaluation.error)

    return AlternativesResponse(
        vehicle_id=evaluation.vehicle_id,
        oem_size=evaluation.oem_canonical,
        oem_links=retailer_links(evaluation.oem_canonical, settings),
        alternatives=[
            AlternativeOut(candidate=c, links=retailer_links(c.size, settings))
            for c in evaluation.alternatives
        ],
        total_shown=len(evaluation.alternatives),
    )


# ---------------------------------------------------------------------------
# Alternatives
# ---------------------------------------------------------------------------


@router.post("/alternatives", response_model=AlternativesResponse)
async def get_alternatives(
    req: AlternativesRequest,
    settings: Settings = Depends(get_app_settings),
    limits: FitmentLimits = Depends(get_limits),
):
    """Rank geometrically safe alternatives for an OEM tyre size."""
    evaluation = evaluate_fitment(req.oem_size, vehicle_id=req.vehicle_id, limits=limits)
    return _build_response(evaluation, settings)


@router.get("/vehicles/{vrm}/alternatives", response_model=AlternativesResponse)
async def get_vehicle_alternatives(
    vrm: str,
    settings: Settings = Depends(get_app_settings),
    limits: FitmentLimits = Depends(get_limits),
):
    """Demo registration lookup followed by alternative ranking."""
    oem_size = lookup_oem_tyre(vrm)
    if oem_size is None:
        raise HTTPException(
            status_code=404,
            detail=f'Unknown registration {normalise_vrm(vrm)!r}. DEMO ONLY: try "{DEMO_VRM}"',
        )
    evaluation = evaluate_fitment(oem_size, vehicle_id=normalise_vrm(vrm), limits=limits)
    return _build_response(evaluation, settings)


# ---------------------------------------------------------------------------
# Size lookup
# ---------------------------------------------------------------------------


@router.get("/sizes/{size:path}", response_model=SizeResponse)
async def get_size(size: str, settings: Settings = Depends(get_app_settings)):
    """Parse a tyre size and return its geometry and retailer links."""
    tyre = parse_tyre_size(size)
    if tyre is None:
        raise HTTPException(status_code=422, detail=f"Invalid tyre size: {size!r}")

    canonical = format_tyre_size(tyre)
    return SizeResponse(
        size=canonical,
        slug=size_to_slug(canonical) or "",
        width_mm=tyre.width_mm,
        aspect_ratio=tyre.aspect_ratio,
        rim_diameter_in=tyre.rim_diameter_in,
        sidewall_mm=round(sidewall_height_mm(tyre), 1),
        overall_diameter_mm=round(overall_diameter_mm(tyre), 1),
        links=retailer_links(canonical, settings),
    )
