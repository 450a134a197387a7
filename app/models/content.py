from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class MediaInfo(BaseModel):
    """A resolved image attachment (full size)."""

    url: str
    width: int = 0
    height: int = 0


class Term(BaseModel):
    id: int = 0
    taxonomy: str
    slug: str
    name: str
    description: str = ""
    link: str = ""


class ContentItem(BaseModel):
    """A published document read from the content store."""

    id: int
    type: str
    slug: str
    title: str = ""
    excerpt: str = ""
    body: str = ""
    status: str = "publish"
    featured_media_id: Optional[int] = None
    taxonomy_terms: List[Term] = Field(default_factory=list)
    published_at: datetime
    modified_at: datetime
    author_id: int = 0
    author_name: str = ""
    link: str = ""  # permalink reported by the backend, when it has one

    @field_validator("published_at", "modified_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # WordPress GMT columns carry no offset
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    def primary_term(self, taxonomy: str) -> str:
        """Return the name of the first term in *taxonomy*, or an empty string."""
        for term in self.taxonomy_terms:
            if term.taxonomy == taxonomy:
                return term.name
        return ""


class SiteInfo(BaseModel):
    name: str = ""
    description: str = ""
    url: str = ""
    language: str = ""
    logo: Optional[MediaInfo] = None
    # Separator the active SEO plugin renders between title parts, if configured
    title_separator: str = ""


class RawExtensionRecord(BaseModel):
    """Extension-specific stored values for one item, term or site.

    ``fields`` is opaque: flat meta keys, a side-table row or option blobs,
    depending on the extension.  ``attachments`` holds the media the
    extension's fields reference, resolved by the store layer.
    """

    fields: Dict[str, Any] = Field(default_factory=dict)
    attachments: Dict[int, MediaInfo] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)
