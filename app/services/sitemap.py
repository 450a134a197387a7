"""Sitemap data: every published, indexable item grouped by content type."""

import logging
from typing import Dict, List, Tuple

from app.models.sitemap import Sitemap, SitemapEntry
from app.services.adapters.registry import get_adapter
from app.services.content_store import ContentStore
from app.services.extensions import ContentKind, ExtensionIdentity

logger = logging.getLogger(__name__)

# Sitemap section → (content kind, priority)
SECTIONS: Dict[str, Tuple[ContentKind, float]] = {
    "pages": (ContentKind.PAGE, 0.8),
    "posts": (ContentKind.POST, 0.6),
    "services": (ContentKind.SERVICE, 0.8),
    "portfolio": (ContentKind.PORTFOLIO, 0.7),
    "success_stories": (ContentKind.SUCCESS_STORY, 0.7),
}

HOME_SLUG = "home"
HOME_PRIORITY = 1.0


async def build_sitemap(store: ContentStore, extension: ExtensionIdentity) -> Sitemap:
    """Collect indexable items for every sitemap section.

    Items the active extension explicitly marks ``noindex`` are left out.
    Within a section entries are ordered by modification time, newest first.
    """
    adapter = get_adapter(extension)
    site = await store.get_site_info()
    sections: Dict[str, List[SitemapEntry]] = {}

    for section, (kind, priority) in SECTIONS.items():
        items = await store.list_content_items(kind)
        items.sort(key=lambda item: item.modified_at, reverse=True)

        entries: List[SitemapEntry] = []
        for item in items:
            if extension is not ExtensionIdentity.NONE:
                raw = await store.get_raw_extension_record(extension, item)
                if adapter.is_noindex(item, raw, site):
                    logger.debug("Skipping noindex %s '%s'", kind.value, item.slug)
                    continue
            entries.append(
                SitemapEntry(
                    slug=item.slug,
                    modified_at=item.modified_at.isoformat(),
                    priority=HOME_PRIORITY if item.slug == HOME_SLUG else priority,
                )
            )
        sections[section] = entries

    return Sitemap(**sections)
