from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TyreSize(BaseModel):
    """A tyre size such as 265/30 R20.

    Bounds are only enforced when parsing text; sizes derived from another
    size by arithmetic may hold any values.
    """

    model_config = ConfigDict(frozen=True)

    width_mm: int
    aspect_ratio: int  # sidewall height as % of width
    rim_diameter_in: int

    def with_offsets(self, width_delta_mm: int = 0, aspect_delta: int = 0) -> "TyreSize":
        """Return a variant on the same rim with width and/or aspect moved."""
        return TyreSize(
            width_mm=self.width_mm + width_delta_mm,
            aspect_ratio=self.aspect_ratio + aspect_delta,
            rim_diameter_in=self.rim_diameter_in,
        )


class FitmentLimits(BaseModel):
    """Geometry-only safety limits applied when scoring alternatives."""

    model_config = ConfigDict(frozen=True)

    diameter_pct_max: float = Field(default=3.0, gt=0)
    width_delta_max_mm: int = Field(default=25, gt=0)
    aspect_delta_max_for_full_penalty: int = Field(default=10, gt=0)
    min_score_shown: int = Field(default=65, ge=0, le=100)


class RejectionReason(str, Enum):
    """Which safety gate rejected a candidate."""

    INVALID_GEOMETRY = "invalid_geometry"
    DIAMETER = "diameter"
    RIM = "rim"
    WIDTH = "width"


class ScoredCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    size: str  # canonical, e.g. "255/30 R20"
    safe: bool
    score: int = Field(ge=0, le=100)  # only meaningful when safe
    label: str = ""  # e.g. "Great Fit"
    reasons: list[str]
    rejection: Optional[RejectionReason] = None
    diameter_delta_pct: float
    width_delta_mm: int
    aspect_delta: int

    @model_validator(mode="after")
    def check_rejection_matches_safe(self) -> "ScoredCandidate":
        if self.safe == (self.rejection is not None):
            raise ValueError("a candidate is either safe or carries a rejection")
        return self


class RetailerLinks(BaseModel):
    blackcircles: Optional[str] = None
    national: Optional[str] = None


class FitmentEvaluation(BaseModel):
    """Outcome of evaluating an OEM size: the parsed size plus ranked alternatives."""

    vehicle_id: Optional[str] = None  # display only
    oem_size: str  # text as supplied
    oem: Optional[TyreSize] = None
    oem_canonical: Optional[str] = None
    error: Optional[str] = None
    alternatives: list[ScoredCandidate] = []

    @property
    def ok(self) -> bool:
        return self.oem is not None
