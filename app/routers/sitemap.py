import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request

from app.dependencies import get_extension, get_store
from app.models.sitemap import Sitemap
from app.routers.seo import limiter
from app.services.content_store import ContentStore
from app.services.extensions import ExtensionIdentity
from app.services.sitemap import build_sitemap

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/sitemap",
    response_model=Sitemap,
    summary="Indexable content for sitemap generation",
    description=(
        "Published pages, posts, services, portfolio items and success stories "
        "with their last-modified time and priority.  Items the active SEO plugin "
        "marks noindex are excluded."
    ),
)
@limiter.limit("20/minute")
async def sitemap(
    request: Request,
    store: ContentStore = Depends(get_store),
    extension: ExtensionIdentity = Depends(get_extension),
) -> Sitemap:
    try:
        return await build_sitemap(store, extension)
    except httpx.HTTPError as exc:
        logger.error("Content backend error building sitemap: %s", exc)
        raise HTTPException(status_code=502, detail="The content backend is unavailable.")
