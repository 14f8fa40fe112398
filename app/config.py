"""Application configuration with environment variable validation."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.tyre import FitmentLimits

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Geometry-only safety limits (no load index / speed rating filter)
    diameter_pct_max: float = Field(default=3.0, gt=0, validation_alias="DIAMETER_PCT_MAX")
    width_delta_max_mm: int = Field(default=25, gt=0, validation_alias="WIDTH_DELTA_MAX_MM")
    aspect_delta_max_for_full_penalty: int = Field(
        default=10,
        gt=0,
        validation_alias="ASPECT_DELTA_MAX_FOR_FULL_PENALTY",
    )
    min_score_shown: int = Field(default=65, ge=0, le=100, validation_alias="MIN_SCORE_SHOWN")

    # Retailer search pages, "<base>/<slug>"
    blackcircles_base_url: str = Field(
        default="https://www.blackcircles.com/tyres",
        validation_alias="BLACKCIRCLES_BASE_URL",
    )
    national_base_url: str = Field(
        default="https://www.national.co.uk/tyres-search",
        validation_alias="NATIONAL_BASE_URL",
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # CORS, comma-separated
    allowed_origins: str = Field(default="*", validation_alias="ALLOWED_ORIGINS")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def limits(self) -> FitmentLimits:
        return FitmentLimits(
            diameter_pct_max=self.diameter_pct_max,
            width_delta_max_mm=self.width_delta_max_mm,
            aspect_delta_max_for_full_penalty=self.aspect_delta_max_for_full_penalty,
            min_score_shown=self.min_score_shown,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
