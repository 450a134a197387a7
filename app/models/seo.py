from typing import Optional

from pydantic import BaseModel, ConfigDict


class PartialSEORecord(BaseModel):
    """The subset of SEO fields one extension could supply.

    ``None`` means absent: the normalizer fills it from the default cascade.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    canonical_url: Optional[str] = None
    robots_index: Optional[bool] = None
    robots_follow: Optional[bool] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image_url: Optional[str] = None
    og_image_width: Optional[int] = None
    og_image_height: Optional[int] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image_url: Optional[str] = None
    keywords: Optional[str] = None


class Robots(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: bool = True
    follow: bool = True


class OpenGraph(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    image_url: str = ""
    image_width: int = 0
    image_height: int = 0
    type: str = "article"


class TwitterCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    image_url: str = ""
    card_type: str = "summary_large_image"


class SEORecord(BaseModel):
    """Normalized, always-complete SEO metadata for one item or term."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    canonical_url: str
    robots: Robots
    og: OpenGraph
    twitter: TwitterCard
    keywords: str = ""
    published_at: str = ""
    modified_at: str = ""
    extension_identity: str
