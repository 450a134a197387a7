"""SEO normalization: adapter output plus an ordered default cascade.

:func:`normalize` and :func:`normalize_term` are pure: given the same content
and raw extension data they always return the same :class:`SEORecord`, and
every field of that record is populated no matter what the adapter supplied.
"""

from typing import Optional

from app.models.content import ContentItem, MediaInfo, RawExtensionRecord, SiteInfo, Term
from app.models.seo import OpenGraph, PartialSEORecord, Robots, SEORecord, TwitterCard
from app.services.adapters.registry import get_adapter
from app.services.extensions import ExtensionIdentity
from app.services.sanitizer import strip_all_tags, summarize_html

DESCRIPTION_WORDS = 30
TITLE_SEPARATOR = " | "


def normalize(
    item: ContentItem,
    extension: ExtensionIdentity,
    raw: Optional[RawExtensionRecord],
    *,
    site: SiteInfo,
    permalink: str,
    featured_media: Optional[MediaInfo] = None,
) -> SEORecord:
    """Build the canonical SEO record for one content item.

    Args:
        item: The published content item.
        extension: The SEO extension resolved for this process.
        raw: The extension's stored data for *item* (``None`` when it has none).
        site: Site-wide name and description used by the default cascade.
        permalink: The computed permalink of *item*, used as the default canonical URL.
        featured_media: The item's featured image, if any.
    """
    if extension is ExtensionIdentity.NONE:
        partial = PartialSEORecord()
    else:
        partial = get_adapter(extension).extract_item_seo(
            item, raw or RawExtensionRecord(), site
        )

    title = partial.title or _default_title(item.title, site.name)
    description = partial.description or _default_description(item, site, title)

    og_title = partial.og_title or title
    og_description = partial.og_description or description

    og_image_url = partial.og_image_url
    og_image_width = partial.og_image_width
    og_image_height = partial.og_image_height
    if not og_image_url and featured_media is not None:
        og_image_url = featured_media.url
        og_image_width = featured_media.width
        og_image_height = featured_media.height

    return SEORecord(
        title=title,
        description=description,
        canonical_url=partial.canonical_url or permalink,
        robots=Robots(
            index=True if partial.robots_index is None else partial.robots_index,
            follow=True if partial.robots_follow is None else partial.robots_follow,
        ),
        og=OpenGraph(
            title=og_title,
            description=og_description,
            image_url=og_image_url or "",
            image_width=og_image_width or 0,
            image_height=og_image_height or 0,
            type="article",
        ),
        twitter=TwitterCard(
            title=partial.twitter_title or og_title,
            description=partial.twitter_description or og_description,
            image_url=partial.twitter_image_url or og_image_url or "",
        ),
        keywords=partial.keywords or "",
        published_at=item.published_at.isoformat(),
        modified_at=item.modified_at.isoformat(),
        extension_identity=extension.value,
    )


def normalize_term(
    term: Term,
    extension: ExtensionIdentity,
    raw: Optional[RawExtensionRecord],
    *,
    site: SiteInfo,
    link: str,
) -> SEORecord:
    """Build the canonical SEO record for a taxonomy term archive.

    Terms carry no media or body, so only the title/description bases and the
    Open Graph / Twitter mirroring apply.
    """
    if extension is ExtensionIdentity.NONE:
        partial = PartialSEORecord()
    else:
        partial = get_adapter(extension).extract_term_seo(term, raw or RawExtensionRecord())

    title = partial.title or _default_title(term.name, site.name)
    description = (
        partial.description
        or strip_all_tags(term.description)
        or f"Browse {term.name} content"
    )

    return SEORecord(
        title=title,
        description=description,
        canonical_url=link,
        robots=Robots(),
        og=OpenGraph(title=title, description=description, type="website"),
        twitter=TwitterCard(title=title, description=description),
        extension_identity=extension.value,
    )


def _default_title(name: str, site_name: str) -> str:
    if not name:
        return site_name
    if not site_name:
        return name
    return f"{name}{TITLE_SEPARATOR}{site_name}"


def _default_description(item: ContentItem, site: SiteInfo, title: str) -> str:
    excerpt = strip_all_tags(item.excerpt)
    if excerpt:
        return excerpt
    summary = summarize_html(item.body, DESCRIPTION_WORDS, "...")
    # An item with neither excerpt nor body still needs a renderable description
    return summary or site.description or title
