"""Read-only access to WordPress content, options and plugin storage.

:class:`ContentStore` is the interface the SEO layer consumes.  Two backends
implement it: :class:`JsonContentStore` (a JSON export of the site, used for
local development and tests) and
:class:`~app.services.wordpress.WordPressRestStore` (a live site's REST API).
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from app.models.content import ContentItem, MediaInfo, RawExtensionRecord, SiteInfo, Term
from app.services.extensions import ContentKind, ExtensionIdentity

logger = logging.getLogger(__name__)

PUBLISHED = "publish"

# Rewrite slug per post type; pages and posts live at the site root
PERMALINK_BASES: Dict[str, str] = {
    "page": "",
    "post": "",
    "service": "services",
    "portfolio": "portfolio",
    "success_story": "success-stories",
}

TERM_LINK_BASES: Dict[str, str] = {
    "category": "category",
    "post_tag": "tag",
}

# Extensions whose per-item data lives in a side table instead of post meta
SIDE_TABLES: Dict[ExtensionIdentity, str] = {
    ExtensionIdentity.AIOSEO: "aioseo_posts",
}


class ContentNotFoundError(LookupError):
    """The requested item or term does not exist or is not published."""


def build_link(site_url: str, base: str, slug: str) -> str:
    parts = [site_url.rstrip("/")]
    if base:
        parts.append(base)
    parts.append(slug)
    return "/".join(parts) + "/"


class ContentStore(ABC):
    """Async, read-only view over one WordPress site."""

    @abstractmethod
    async def get_site_info(self) -> SiteInfo: ...

    @abstractmethod
    async def get_capabilities(self) -> List[str]:
        """Return capability probes used to detect the active SEO plugin."""

    @abstractmethod
    async def get_content_item(self, kind: ContentKind, slug: str) -> ContentItem:
        """Return the published item of *kind* with *slug*.

        Raises:
            ContentNotFoundError: if no published item matches.
        """

    @abstractmethod
    async def list_content_items(self, kind: ContentKind) -> List[ContentItem]: ...

    @abstractmethod
    async def get_taxonomy_term(self, taxonomy: str, slug: str) -> Term:
        """Return the term of *taxonomy* with *slug*.

        Raises:
            ContentNotFoundError: if the term does not exist.
        """

    @abstractmethod
    async def get_raw_extension_record(
        self, extension: ExtensionIdentity, item: ContentItem
    ) -> RawExtensionRecord:
        """Return *extension*'s stored fields for *item* (empty when it has none)."""

    @abstractmethod
    async def get_term_extension_record(
        self, extension: ExtensionIdentity, term: Term
    ) -> RawExtensionRecord: ...

    @abstractmethod
    async def get_options(self, names: Sequence[str]) -> Dict[str, Any]: ...

    @abstractmethod
    async def get_media(self, media_id: int) -> Optional[MediaInfo]: ...

    @abstractmethod
    def compute_permalink(self, item: ContentItem) -> str: ...

    @abstractmethod
    def compute_term_link(self, term: Term) -> str: ...

    async def aclose(self) -> None:
        """Release backend resources."""


# ---------------------------------------------------------------------------
# JSON export backend
# ---------------------------------------------------------------------------

class _StoredSite(SiteInfo):
    logo_id: Optional[int] = None


class _StoredItem(ContentItem):
    meta: Dict[str, Any] = Field(default_factory=dict)


class _StoredTerm(Term):
    meta: Dict[str, Any] = Field(default_factory=dict)


class ContentExport(BaseModel):
    """On-disk shape of a WordPress content export."""

    site: _StoredSite = Field(default_factory=_StoredSite)
    capabilities: List[str] = Field(default_factory=list)
    options: Dict[str, Any] = Field(default_factory=dict)
    media: Dict[int, MediaInfo] = Field(default_factory=dict)
    items: List[_StoredItem] = Field(default_factory=list)
    terms: List[_StoredTerm] = Field(default_factory=list)
    # Plugin side tables: table name → rows carrying a ``post_id`` column
    tables: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)


class JsonContentStore(ContentStore):
    """Content store backed by an in-memory :class:`ContentExport`."""

    def __init__(self, export: ContentExport) -> None:
        self._export = export

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JsonContentStore":
        return cls(ContentExport.model_validate(data))

    @classmethod
    def from_path(cls, path: str) -> "JsonContentStore":
        logger.info("Loading content export from %s", path)
        with Path(path).open(encoding="utf-8") as fh:
            return cls.from_dict(json.load(fh))

    async def get_site_info(self) -> SiteInfo:
        site = self._export.site
        logo = self._export.media.get(site.logo_id) if site.logo_id else None
        return SiteInfo(
            name=site.name,
            description=site.description,
            url=site.url,
            language=site.language,
            logo=logo,
        )

    async def get_capabilities(self) -> List[str]:
        return list(self._export.capabilities)

    async def get_content_item(self, kind: ContentKind, slug: str) -> ContentItem:
        for item in self._export.items:
            if item.type == kind.value and item.slug == slug and item.status == PUBLISHED:
                return _public_item(item)
        raise ContentNotFoundError(f"No published {kind.value} with slug '{slug}'")

    async def list_content_items(self, kind: ContentKind) -> List[ContentItem]:
        return [
            _public_item(item)
            for item in self._export.items
            if item.type == kind.value and item.status == PUBLISHED
        ]

    async def get_taxonomy_term(self, taxonomy: str, slug: str) -> Term:
        for term in self._export.terms:
            if term.taxonomy == taxonomy and term.slug == slug:
                return Term.model_validate(term.model_dump(exclude={"meta"}))
        raise ContentNotFoundError(f"No {taxonomy} term with slug '{slug}'")

    async def get_raw_extension_record(
        self, extension: ExtensionIdentity, item: ContentItem
    ) -> RawExtensionRecord:
        table = SIDE_TABLES.get(extension)
        if table is not None:
            return RawExtensionRecord(fields=self._side_table_row(table, item.id))

        for stored in self._export.items:
            if stored.id == item.id:
                return RawExtensionRecord(fields=dict(stored.meta))
        return RawExtensionRecord()

    async def get_term_extension_record(
        self, extension: ExtensionIdentity, term: Term
    ) -> RawExtensionRecord:
        for stored in self._export.terms:
            if stored.taxonomy == term.taxonomy and stored.slug == term.slug:
                return RawExtensionRecord(fields=dict(stored.meta))
        return RawExtensionRecord()

    async def get_options(self, names: Sequence[str]) -> Dict[str, Any]:
        return {name: self._export.options[name] for name in names if name in self._export.options}

    async def get_media(self, media_id: int) -> Optional[MediaInfo]:
        return self._export.media.get(media_id)

    def compute_permalink(self, item: ContentItem) -> str:
        if item.link:
            return item.link
        base = PERMALINK_BASES.get(item.type, item.type)
        return build_link(self._export.site.url, base, item.slug)

    def compute_term_link(self, term: Term) -> str:
        if term.link:
            return term.link
        base = TERM_LINK_BASES.get(term.taxonomy, term.taxonomy)
        return build_link(self._export.site.url, base, term.slug)

    def _side_table_row(self, table: str, item_id: int) -> Dict[str, Any]:
        rows = self._export.tables.get(table)
        if rows is None:
            # Plugin table not installed: no data, not an error
            return {}
        for row in rows:
            if row.get("post_id") == item_id:
                return dict(row)
        return {}


def _public_item(item: _StoredItem) -> ContentItem:
    return ContentItem.model_validate(item.model_dump(exclude={"meta"}))
