"""FastAPI dependency injection."""

from app.config import Settings, get_settings
from app.models.tyre import FitmentLimits


def get_app_settings() -> Settings:
    """Dependency for application settings."""
    return get_settings()


def get_limits() -> FitmentLimits:
    """Dependency for the configured safety limits."""
    return get_settings().limits
