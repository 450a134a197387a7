"""Async glue between the content store and the pure SEO normalizers."""

import logging
from typing import Optional

from app.models.content import RawExtensionRecord, SiteInfo
from app.models.seo import SEORecord
from app.models.settings import SEOSettings
from app.services.adapters.base import ExtensionAdapter
from app.services.adapters.registry import get_adapter
from app.services.content_store import ContentStore
from app.services.extensions import ContentKind, ExtensionIdentity
from app.services.normalizer import normalize, normalize_term
from app.services.site_settings import normalize_settings

logger = logging.getLogger(__name__)


async def _with_attachments(
    store: ContentStore, adapter: ExtensionAdapter, raw: RawExtensionRecord
) -> RawExtensionRecord:
    """Resolve the attachment ids *adapter* reads from *raw* into media records."""
    attachments = dict(raw.attachments)
    for media_id in adapter.attachment_ids(raw):
        if media_id in attachments:
            continue
        media = await store.get_media(media_id)
        if media is None:
            logger.info(
                "Attachment %s referenced by %s data does not exist", media_id, adapter.identity.value
            )
            continue
        attachments[media_id] = media
    return raw.model_copy(update={"attachments": attachments})


async def _load_options(
    store: ContentStore, adapter: ExtensionAdapter
) -> Optional[RawExtensionRecord]:
    """Read the site options *adapter* understands, with their attachments resolved."""
    if not adapter.option_names:
        return None
    options = RawExtensionRecord(fields=await store.get_options(adapter.option_names))
    return await _with_attachments(store, adapter, options)


def _with_title_separator(
    site: SiteInfo, adapter: ExtensionAdapter, options: Optional[RawExtensionRecord]
) -> SiteInfo:
    if options is None:
        return site
    separator = adapter.extract_site_settings(options).separator
    if not separator or not separator.strip():
        return site
    return site.model_copy(update={"title_separator": separator.strip()})


async def get_item_seo(
    store: ContentStore,
    extension: ExtensionIdentity,
    kind: ContentKind,
    identifier: str,
) -> SEORecord:
    """Return the SEO record for the published item or term at *kind*/*identifier*.

    Raises:
        ContentNotFoundError: if the item or term does not exist.
    """
    site = await store.get_site_info()

    if kind.is_taxonomy:
        term = await store.get_taxonomy_term(kind.taxonomy, identifier)
        raw = None
        if extension is not ExtensionIdentity.NONE:
            raw = await store.get_term_extension_record(extension, term)
        return normalize_term(term, extension, raw, site=site, link=store.compute_term_link(term))

    item = await store.get_content_item(kind, identifier)

    raw = None
    if extension is not ExtensionIdentity.NONE:
        adapter = get_adapter(extension)
        raw = await store.get_raw_extension_record(extension, item)
        raw = await _with_attachments(store, adapter, raw)
        site = _with_title_separator(site, adapter, await _load_options(store, adapter))

    featured_media = None
    if item.featured_media_id:
        featured_media = await store.get_media(item.featured_media_id)

    return normalize(
        item,
        extension,
        raw,
        site=site,
        permalink=store.compute_permalink(item),
        featured_media=featured_media,
    )


async def get_seo_settings(
    store: ContentStore,
    extension: ExtensionIdentity,
    default_language: str = "en-US",
) -> SEOSettings:
    site = await store.get_site_info()
    adapter = get_adapter(extension)

    options = await _load_options(store, adapter)
    return normalize_settings(site, extension, options, default_language=default_language)
