"""Retailer search links for a tyre size. No scraping, links only."""

from app.config import Settings, get_settings
from app.models.tyre import RetailerLinks
from app.services.tyre_size import size_to_slug


def retailer_links(size: str, settings: Settings | None = None) -> RetailerLinks:
    """Build retailer search URLs for a size; both None if it doesn't parse."""
    slug = size_to_slug(size)
    if slug is None:
        return RetailerLinks()

    settings = settings or get_settings()
    return RetailerLinks(
        blackcircles=f"{settings.blackcircles_base_url.rstrip('/')}/{slug}",
        national=f"{settings.national_base_url.rstrip('/')}/{slug}",
    )
