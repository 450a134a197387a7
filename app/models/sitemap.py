from typing import List

from pydantic import BaseModel, Field


class SitemapEntry(BaseModel):
    slug: str
    modified_at: str
    priority: float


class Sitemap(BaseModel):
    """Indexable content grouped by content type."""

    pages: List[SitemapEntry] = Field(default_factory=list)
    posts: List[SitemapEntry] = Field(default_factory=list)
    services: List[SitemapEntry] = Field(default_factory=list)
    portfolio: List[SitemapEntry] = Field(default_factory=list)
    success_stories: List[SitemapEntry] = Field(default_factory=list)
