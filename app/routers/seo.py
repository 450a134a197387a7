"""SEO endpoints: per-item SEO records and site-wide SEO settings."""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Path, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import Settings, get_settings
from app.dependencies import get_extension, get_store
from app.models.error import ErrorResponse
from app.models.seo import SEORecord
from app.models.settings import SEOSettings
from app.services.content_store import ContentStore
from app.services.extensions import ContentKind, ExtensionIdentity
from app.services.seo import get_item_seo, get_seo_settings

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.get(
    "/seo/settings",
    response_model=SEOSettings,
    summary="Site-wide SEO settings",
    description=(
        "Site name, description, separator, default share image, social profiles "
        "and organization schema, merged from the site and the active SEO plugin."
    ),
)
@limiter.limit("60/minute")
async def seo_settings(
    request: Request,
    store: ContentStore = Depends(get_store),
    extension: ExtensionIdentity = Depends(get_extension),
    settings: Settings = Depends(get_settings),
) -> SEOSettings:
    logger.info("SEO settings request", extra={"extension": extension.value})
    try:
        return await get_seo_settings(store, extension, default_language=settings.site_language)
    except httpx.HTTPError as exc:
        logger.error("Content backend error reading site settings: %s", exc)
        raise HTTPException(status_code=502, detail="The content backend is unavailable.")


@router.get(
    "/seo/{type}/{identifier}",
    response_model=SEORecord,
    responses={404: {"model": ErrorResponse}},
    summary="Normalized SEO data for one content item or taxonomy term",
)
@limiter.limit("60/minute")
async def seo_for_content(
    request: Request,
    type: ContentKind,
    identifier: str = Path(pattern=r"^[a-zA-Z0-9_-]+$", max_length=200),
    store: ContentStore = Depends(get_store),
    extension: ExtensionIdentity = Depends(get_extension),
) -> SEORecord:
    """Return the SEO record for the published *type* item (or term) *identifier*.

    Missing or malformed plugin data never fails the request: the record is
    completed from defaults.  Only a missing item or term yields 404.
    """
    logger.info(
        "SEO request received",
        extra={"type": type.value, "identifier": identifier, "extension": extension.value},
    )
    try:
        return await get_item_seo(store, extension, type, identifier)
    except httpx.HTTPError as exc:
        logger.error("Content backend error for %s/%s: %s", type.value, identifier, exc)
        raise HTTPException(status_code=502, detail="The content backend is unavailable.")
