"""Extension identities and the content kinds the SEO endpoints accept."""

from enum import Enum
from typing import Dict


class ExtensionIdentity(str, Enum):
    """Which third-party SEO plugin is authoritative for stored SEO data."""

    YOAST = "yoast"
    RANKMATH = "rankmath"
    AIOSEO = "aioseo"
    SEOPRESS = "seopress"
    SEOFRAMEWORK = "seoframework"
    SLIMSEO = "slimseo"
    NONE = "none"


class ContentKind(str, Enum):
    POST = "post"
    PAGE = "page"
    SERVICE = "service"
    PORTFOLIO = "portfolio"
    SUCCESS_STORY = "success_story"
    CATEGORY = "category"
    TAG = "tag"

    @property
    def is_taxonomy(self) -> bool:
        return self in (ContentKind.CATEGORY, ContentKind.TAG)

    @property
    def taxonomy(self) -> str:
        """WordPress taxonomy name for the term kinds."""
        return _TAXONOMIES[self]


_TAXONOMIES: Dict[ContentKind, str] = {
    ContentKind.CATEGORY: "category",
    ContentKind.TAG: "post_tag",
}

POST_KINDS = (
    ContentKind.POST,
    ContentKind.PAGE,
    ContentKind.SERVICE,
    ContentKind.PORTFOLIO,
    ContentKind.SUCCESS_STORY,
)
