"""Content store backed by a live site's WordPress REST API."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import urljoin

import httpx

from app.models.content import ContentItem, MediaInfo, RawExtensionRecord, SiteInfo, Term
from app.services.content_store import (
    PERMALINK_BASES,
    SIDE_TABLES,
    TERM_LINK_BASES,
    ContentNotFoundError,
    ContentStore,
    build_link,
)
from app.services.extensions import ContentKind, ExtensionIdentity
from app.services.sanitizer import strip_all_tags

logger = logging.getLogger(__name__)

_WP_API_TIMEOUT = 15
_WP_PAGE_SIZE = 100

# REST route base per post type / taxonomy (``rest_base`` in register_post_type)
_REST_BASES: Dict[str, str] = {
    "post": "posts",
    "page": "pages",
    "service": "services",
    "portfolio": "portfolio",
    "success_story": "success_story",
    "category": "categories",
    "post_tag": "tags",
}

_ITEM_FIELDS = (
    "id,type,slug,status,title,excerpt,content,featured_media,"
    "date_gmt,modified_gmt,author,link,_links,_embedded"
)


class WordPressRestStore(ContentStore):
    """Read content through ``/wp-json/``.

    Plugin post meta is only visible when registered with ``show_in_rest``;
    site options and plugin side tables are not reachable over REST and are
    reported as absent.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = _WP_API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_url = urljoin(self.base_url + "/", "wp-json/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        # One pooled client for the store's lifetime, released by aclose()
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.api_url,
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get(
        self, path: str, params: Optional[Dict[str, Any]] = None
    ) -> Tuple[Any, httpx.Headers]:
        """GET *path* under the API root; return the decoded body and headers.

        Returns ``(None, headers)`` on 404 and raises :class:`httpx.HTTPError`
        on any other failure.
        """
        resp = await self._get_client().get(path, params=params)
        if resp.status_code == 404:
            return None, resp.headers
        resp.raise_for_status()
        return resp.json(), resp.headers

    # -- site ---------------------------------------------------------------

    async def get_site_info(self) -> SiteInfo:
        index, _ = await self._get("")
        index = index or {}
        logo = None
        if index.get("site_logo"):
            logo = await self.get_media(int(index["site_logo"]))
        return SiteInfo(
            name=index.get("name", ""),
            description=index.get("description", ""),
            url=index.get("home") or index.get("url") or self.base_url,
            logo=logo,
        )

    async def get_capabilities(self) -> List[str]:
        index, _ = await self._get("")
        return list((index or {}).get("namespaces", []))

    async def get_options(self, names: Sequence[str]) -> Dict[str, Any]:
        logger.debug("Site options %s are not exposed over REST", list(names))
        return {}

    async def get_media(self, media_id: int) -> Optional[MediaInfo]:
        data, _ = await self._get(f"wp/v2/media/{media_id}")
        if not data or not data.get("source_url"):
            return None
        details = data.get("media_details") or {}
        return MediaInfo(
            url=data["source_url"],
            width=int(details.get("width") or 0),
            height=int(details.get("height") or 0),
        )

    # -- content ------------------------------------------------------------

    async def get_content_item(self, kind: ContentKind, slug: str) -> ContentItem:
        items, _ = await self._get(
            f"wp/v2/{_rest_base(kind.value)}",
            params={"slug": slug, "status": "publish", "_embed": 1, "_fields": _ITEM_FIELDS},
        )
        if not items:
            raise ContentNotFoundError(f"No published {kind.value} with slug '{slug}'")
        return _item_from_json(items[0], kind.value)

    async def list_content_items(self, kind: ContentKind) -> List[ContentItem]:
        """Fetch every published item of *kind*, following ``X-WP-TotalPages``."""
        results: List[ContentItem] = []
        page = 1
        path = f"wp/v2/{_rest_base(kind.value)}"

        while True:
            try:
                items, headers = await self._get(
                    path,
                    params={
                        "per_page": _WP_PAGE_SIZE,
                        "page": page,
                        "orderby": "modified",
                        "order": "desc",
                        "_fields": "id,type,slug,status,title,date_gmt,modified_gmt,link",
                    },
                )
            except httpx.HTTPStatusError as exc:
                # 400 means the page number is past the last page
                if exc.response.status_code == 400:
                    break
                raise
            if not items:
                break
            results.extend(_item_from_json(item, kind.value) for item in items)
            total_pages = int(headers.get("X-WP-TotalPages", 1))
            if page >= total_pages:
                break
            page += 1

        return results

    async def get_taxonomy_term(self, taxonomy: str, slug: str) -> Term:
        terms, _ = await self._get(f"wp/v2/{_rest_base(taxonomy)}", params={"slug": slug})
        if not terms:
            raise ContentNotFoundError(f"No {taxonomy} term with slug '{slug}'")
        return _term_from_json(terms[0], taxonomy)

    async def get_raw_extension_record(
        self, extension: ExtensionIdentity, item: ContentItem
    ) -> RawExtensionRecord:
        if extension in SIDE_TABLES:
            logger.debug("%s stores data in a side table; not reachable over REST", extension.value)
            return RawExtensionRecord()
        data, _ = await self._get(
            f"wp/v2/{_rest_base(item.type)}/{item.id}", params={"_fields": "meta"}
        )
        return RawExtensionRecord(fields=_meta(data))

    async def get_term_extension_record(
        self, extension: ExtensionIdentity, term: Term
    ) -> RawExtensionRecord:
        data, _ = await self._get(
            f"wp/v2/{_rest_base(term.taxonomy)}/{term.id}", params={"_fields": "meta"}
        )
        return RawExtensionRecord(fields=_meta(data))

    def compute_permalink(self, item: ContentItem) -> str:
        if item.link:
            return item.link
        return build_link(self.base_url, PERMALINK_BASES.get(item.type, item.type), item.slug)

    def compute_term_link(self, term: Term) -> str:
        if term.link:
            return term.link
        return build_link(
            self.base_url, TERM_LINK_BASES.get(term.taxonomy, term.taxonomy), term.slug
        )


# ---------------------------------------------------------------------------
# Response mapping
# ---------------------------------------------------------------------------

def _rest_base(name: str) -> str:
    return _REST_BASES.get(name, name)


def _rendered(item: Dict[str, Any], key: str) -> str:
    value = item.get(key)
    if isinstance(value, dict):
        return value.get("rendered", "") or ""
    return value or ""


def _meta(data: Any) -> Dict[str, Any]:
    # PHP serializes an empty meta array as []
    meta = (data or {}).get("meta")
    return meta if isinstance(meta, dict) else {}


def _item_from_json(item: Dict[str, Any], post_type: str) -> ContentItem:
    embedded = item.get("_embedded") or {}

    terms: List[Term] = []
    for group in embedded.get("wp:term") or []:
        for term in group or []:
            if isinstance(term, dict) and term.get("taxonomy"):
                terms.append(_term_from_json(term, term["taxonomy"]))

    authors = embedded.get("author") or []
    author_name = authors[0].get("name", "") if authors and isinstance(authors[0], dict) else ""

    return ContentItem(
        id=item["id"],
        type=item.get("type") or post_type,
        slug=item.get("slug", ""),
        title=strip_all_tags(_rendered(item, "title")),
        excerpt=_rendered(item, "excerpt"),
        body=_rendered(item, "content"),
        status=item.get("status") or "publish",
        featured_media_id=item.get("featured_media") or None,
        taxonomy_terms=terms,
        published_at=item["date_gmt"],
        modified_at=item.get("modified_gmt") or item["date_gmt"],
        author_id=item.get("author") or 0,
        author_name=author_name,
        link=item.get("link", ""),
    )


def _term_from_json(term: Dict[str, Any], taxonomy: str) -> Term:
    return Term(
        id=term.get("id", 0),
        taxonomy=taxonomy,
        slug=term.get("slug", ""),
        name=strip_all_tags(term.get("name", "")),
        description=term.get("description", "") or "",
        link=term.get("link", ""),
    )
