"""FastAPI dependency providers for the content store and extension identity."""

import logging
from typing import Optional

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.services.content_store import ContentStore, JsonContentStore
from app.services.detector import resolve_extension
from app.services.extensions import ExtensionIdentity
from app.services.wordpress import WordPressRestStore

logger = logging.getLogger(__name__)

_store: Optional[ContentStore] = None


def build_store(settings: Settings) -> ContentStore:
    """Construct the content store selected by *settings*.

    Raises:
        RuntimeError: if the wordpress backend is selected without a URL.
    """
    if settings.content_backend == "wordpress":
        if not settings.wordpress_url:
            raise RuntimeError("WORDPRESS_URL must be set when CONTENT_BACKEND=wordpress")
        return WordPressRestStore(settings.wordpress_url, timeout=settings.wordpress_timeout)
    return JsonContentStore.from_path(settings.content_export_path)


async def close_store() -> None:
    """Release the process-wide content store, if one was created."""
    global _store

    if _store is not None:
        await _store.aclose()
        _store = None


def get_store() -> ContentStore:
    """Return the process-wide content store, creating it on first use."""
    global _store

    if _store is None:
        _store = build_store(get_settings())
    return _store


async def get_extension(
    request: Request,
    store: ContentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> ExtensionIdentity:
    """Return the active SEO extension, resolved once per process.

    The identity cannot change while the process runs, so it is memoized on
    the application state; a new deployment starts a fresh process.
    """
    identity = getattr(request.app.state, "seo_extension", None)
    if identity is None:
        capabilities = None
        if settings.seo_extension == "auto":
            capabilities = await store.get_capabilities()
        identity = resolve_extension(settings.seo_extension, capabilities)
        request.app.state.seo_extension = identity
    return identity
