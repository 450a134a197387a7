"""Shared fixtures: a small site export and helpers for building content items."""

import copy
from datetime import datetime, timezone

import pytest

from app.models.content import ContentItem, MediaInfo, SiteInfo

SITE_NAME = "AdWrap Graphics"
SITE_URL = "https://example.com"

_EXPORT = {
    "site": {
        "name": SITE_NAME,
        "description": "Vehicle wraps and fleet graphics",
        "url": SITE_URL,
        "language": "en-US",
        "logo_id": 1,
    },
    "capabilities": ["WPSEO_VERSION"],
    "options": {
        "wpseo_social": {
            "facebook_site": "https://facebook.com/adwrap",
            "twitter_site": "adwrap",
            "og_default_image_id": 2,
        },
        "wpseo_titles": {"separator": "sc-dash", "company_name": "AdWrap Graphics LLC"},
        "rank-math-options-general": {
            "social_url_facebook": "https://facebook.com/adwrap-rm",
            "open_graph_image": "https://example.com/rm-default.jpg",
        },
        "rank-math-options-titles": {"title_separator": "|"},
    },
    "media": {
        "1": {"url": f"{SITE_URL}/logo.png", "width": 200, "height": 50},
        "2": {"url": f"{SITE_URL}/share.jpg", "width": 1200, "height": 630},
        "3": {"url": "/a.jpg", "width": 800, "height": 600},
        "4": {"url": f"{SITE_URL}/og.jpg", "width": 1000, "height": 500},
    },
    "items": [
        {
            "id": 1,
            "type": "page",
            "slug": "home",
            "title": "Home",
            "body": "<p>Welcome to our shop.</p>",
            "published_at": "2024-01-01T00:00:00",
            "modified_at": "2024-03-01T00:00:00",
            "meta": {},
        },
        {
            "id": 2,
            "type": "page",
            "slug": "about",
            "title": "About",
            "body": "<p>About us.</p>",
            "published_at": "2024-01-01T00:00:00",
            "modified_at": "2024-04-01T00:00:00",
            "meta": {"_yoast_wpseo_title": "About %%sitename%%"},
        },
        {
            "id": 3,
            "type": "page",
            "slug": "thank-you",
            "title": "Thank You",
            "body": "<p>Thanks.</p>",
            "published_at": "2024-01-01T00:00:00",
            "modified_at": "2024-02-01T00:00:00",
            "meta": {
                "_yoast_wpseo_meta-robots-noindex": "1",
                "rank_math_robots": ["noindex"],
            },
        },
        {
            "id": 4,
            "type": "service",
            "slug": "fleet-wraps",
            "title": "Fleet Wraps",
            "excerpt": "<p>Wraps for <strong>every</strong> vehicle.</p>",
            "body": "<p>Body text.</p>",
            "featured_media_id": 3,
            "published_at": "2024-02-10T10:00:00",
            "modified_at": "2024-05-20T08:15:00",
            "meta": {
                "_yoast_wpseo_opengraph-image-id": "4",
                "_yoast_wpseo_focuskw": "fleet wraps",
            },
        },
        {
            "id": 5,
            "type": "post",
            "slug": "draft-post",
            "title": "Draft",
            "status": "draft",
            "published_at": "2024-01-01T00:00:00",
            "modified_at": "2024-01-01T00:00:00",
        },
        {
            "id": 6,
            "type": "success_story",
            "slug": "city-buses",
            "title": "City Buses",
            "published_at": "2024-01-01T00:00:00",
            "modified_at": "2024-01-02T00:00:00",
        },
    ],
    "terms": [
        {
            "id": 7,
            "taxonomy": "category",
            "slug": "news",
            "name": "News",
            "description": "",
            "meta": {"wpseo_title": "Latest News"},
        },
        {"id": 8, "taxonomy": "post_tag", "slug": "vinyl", "name": "Vinyl", "description": ""},
    ],
    "tables": {
        "aioseo_posts": [
            {"post_id": 2, "title": "AIOSEO About", "robots_default": 0, "robots_noindex": 1},
        ],
    },
}


@pytest.fixture
def export_data() -> dict:
    """A fresh, mutable copy of the sample site export."""
    return copy.deepcopy(_EXPORT)


@pytest.fixture
def site() -> SiteInfo:
    return SiteInfo(name=SITE_NAME, description="Vehicle wraps and fleet graphics", url=SITE_URL)


def _make_item(**overrides) -> ContentItem:
    """Build a :class:`ContentItem` with sensible defaults."""
    data = {
        "id": 42,
        "type": "post",
        "slug": "fleet-wraps",
        "title": "Fleet Wraps",
        "excerpt": "",
        "body": "<p>Body.</p>",
        "published_at": datetime(2024, 1, 5, 9, 0, tzinfo=timezone.utc),
        "modified_at": datetime(2024, 2, 6, 10, 0, tzinfo=timezone.utc),
        "author_name": "Dana",
    }
    data.update(overrides)
    return ContentItem(**data)


@pytest.fixture
def make_item():
    return _make_item


@pytest.fixture
def item() -> ContentItem:
    return _make_item()


@pytest.fixture
def media() -> MediaInfo:
    return MediaInfo(url="/a.jpg", width=800, height=600)
