"""Tests for the SEO normalizer's default cascade."""

import pytest
from pydantic import ValidationError

from app.models.content import RawExtensionRecord, Term
from app.services.extensions import ExtensionIdentity
from app.services.normalizer import normalize, normalize_term

PERMALINK = "https://example.com/fleet-wraps/"

_FORTY_WORDS = " ".join(f"word{i}" for i in range(40))


def _normalize(item, site, extension=ExtensionIdentity.NONE, raw=None, featured_media=None):
    return normalize(
        item, extension, raw, site=site, permalink=PERMALINK, featured_media=featured_media
    )


def _all_fields_populated(record) -> bool:
    data = record.model_dump()
    required = [
        data["title"],
        data["description"],
        data["canonical_url"],
        data["og"]["title"],
        data["og"]["description"],
        data["og"]["type"],
        data["twitter"]["title"],
        data["twitter"]["description"],
        data["twitter"]["card_type"],
        data["published_at"],
        data["modified_at"],
        data["extension_identity"],
    ]
    return all(isinstance(value, str) and value for value in required) and all(
        isinstance(value, bool) for value in data["robots"].values()
    )


class TestScenarios:
    def test_no_extension_full_defaults(self, make_item, site, media):
        item = make_item(excerpt="", body=f"<p>{_FORTY_WORDS}</p>")
        record = _normalize(item, site, featured_media=media)

        assert record.title == "Fleet Wraps | AdWrap Graphics"
        assert record.description == " ".join(f"word{i}" for i in range(30)) + "..."
        assert (record.og.image_url, record.og.image_width, record.og.image_height) == (
            "/a.jpg",
            800,
            600,
        )
        assert record.robots.index is True
        assert record.robots.follow is True
        assert record.canonical_url == PERMALINK
        assert record.extension_identity == "none"

    def test_adapter_robots_index_only(self, item, site):
        raw = RawExtensionRecord(fields={"slim_seo": {"noindex": "1"}})
        record = _normalize(item, site, ExtensionIdentity.SLIMSEO, raw)
        assert record.robots.index is False
        assert record.robots.follow is True

    def test_excerpt_is_preferred_and_stripped(self, make_item, site):
        item = make_item(excerpt="<p>Wraps for <em>every</em> vehicle.</p>", body="<p>Body</p>")
        assert _normalize(item, site).description == "Wraps for every vehicle."

    def test_short_body_has_no_ellipsis(self, make_item, site):
        item = make_item(body="<p>Just a few words.</p>")
        assert _normalize(item, site).description == "Just a few words."

    def test_empty_excerpt_and_body_fall_back_to_site_description(self, make_item, site):
        record = _normalize(make_item(body=""), site)
        assert record.description == site.description

    def test_no_featured_media_leaves_image_empty(self, item, site):
        record = _normalize(item, site)
        assert record.og.image_url == ""
        assert record.og.image_width == 0
        assert record.twitter.image_url == ""


class TestCascadeOrdering:
    def test_twitter_title_mirrors_supplied_og_title(self, item, site):
        raw = RawExtensionRecord(fields={"_yoast_wpseo_opengraph-title": "Share me"})
        record = _normalize(item, site, ExtensionIdentity.YOAST, raw)
        assert record.title == "Fleet Wraps | AdWrap Graphics"
        assert record.og.title == "Share me"
        assert record.twitter.title == "Share me"

    def test_og_mirrors_adapter_title_and_description(self, item, site):
        raw = RawExtensionRecord(
            fields={"_seopress_titles_title": "Custom", "_seopress_titles_desc": "Desc"}
        )
        record = _normalize(item, site, ExtensionIdentity.SEOPRESS, raw)
        assert (record.og.title, record.og.description) == ("Custom", "Desc")
        assert (record.twitter.title, record.twitter.description) == ("Custom", "Desc")

    def test_adapter_og_image_beats_featured_media(self, item, site, media):
        raw = RawExtensionRecord(fields={"_seopress_social_fb_img": "/custom.jpg"})
        record = _normalize(item, site, ExtensionIdentity.SEOPRESS, raw, featured_media=media)
        assert record.og.image_url == "/custom.jpg"
        assert record.og.image_width == 0
        assert record.twitter.image_url == "/custom.jpg"

    def test_twitter_image_mirrors_featured_media(self, item, site, media):
        record = _normalize(item, site, featured_media=media)
        assert record.twitter.image_url == "/a.jpg"

    def test_adapter_canonical_wins(self, item, site):
        raw = RawExtensionRecord(fields={"_yoast_wpseo_canonical": "https://other.test/x/"})
        record = _normalize(item, site, ExtensionIdentity.YOAST, raw)
        assert record.canonical_url == "https://other.test/x/"


class TestProperties:
    @pytest.mark.parametrize("extension", list(ExtensionIdentity))
    @pytest.mark.parametrize(
        "fields",
        [
            {},
            {"rank_math_robots": "{oops", "keyphrases": "[", "slim_seo": "nope"},
            {"_yoast_wpseo_title": "", "title": None, "robots_default": "garbage"},
        ],
    )
    def test_totality(self, make_item, site, extension, fields):
        item = make_item(excerpt="", body="")
        record = _normalize(item, site, extension, RawExtensionRecord(fields=fields))
        assert _all_fields_populated(record)
        assert record.extension_identity == extension.value

    def test_idempotence(self, item, site, media):
        raw = RawExtensionRecord(fields={"_yoast_wpseo_title": "%%title%% %%sep%% %%sitename%%"})
        first = _normalize(item, site, ExtensionIdentity.YOAST, raw, featured_media=media)
        second = _normalize(item, site, ExtensionIdentity.YOAST, raw, featured_media=media)
        assert first.model_dump_json() == second.model_dump_json()

    def test_extension_isolation(self, item, site):
        yoast_raw = RawExtensionRecord(
            fields={"_yoast_wpseo_title": "Yoast title", "_yoast_wpseo_meta-robots-noindex": "1"}
        )
        _normalize(item, site, ExtensionIdentity.YOAST, yoast_raw)
        after = _normalize(item, site, ExtensionIdentity.RANKMATH, RawExtensionRecord())
        baseline = _normalize(item, site)

        assert after.title == baseline.title
        assert after.robots == baseline.robots
        assert after.extension_identity == "rankmath"

    def test_none_extension_ignores_raw_record(self, item, site):
        raw = RawExtensionRecord(fields={"_yoast_wpseo_title": "Ignored"})
        assert _normalize(item, site, ExtensionIdentity.NONE, raw).title == (
            "Fleet Wraps | AdWrap Graphics"
        )

    def test_record_is_immutable(self, item, site):
        record = _normalize(item, site)
        with pytest.raises(ValidationError):
            record.title = "changed"


class TestNormalizeTerm:
    def _term(self, **overrides):
        data = {"id": 7, "taxonomy": "category", "slug": "news", "name": "News"}
        data.update(overrides)
        return Term(**data)

    def test_defaults(self, site):
        link = "https://example.com/category/news/"
        record = normalize_term(self._term(), ExtensionIdentity.NONE, None, site=site, link=link)
        assert record.title == "News | AdWrap Graphics"
        assert record.description == "Browse News content"
        assert record.og.type == "website"
        assert record.twitter.title == record.title
        assert record.canonical_url == link

    def test_term_description_is_used(self, site):
        term = self._term(description="<p>Shop news.</p>")
        record = normalize_term(term, ExtensionIdentity.NONE, None, site=site, link="/")
        assert record.description == "Shop news."
        assert record.og.description == "Shop news."

    def test_rankmath_term_meta_is_mirrored(self, site):
        raw = RawExtensionRecord(
            fields={"rank_math_title": "RM News", "rank_math_description": "RM desc"}
        )
        record = normalize_term(self._term(), ExtensionIdentity.RANKMATH, raw, site=site, link="/")
        assert (record.title, record.og.title, record.twitter.title) == ("RM News",) * 3
        assert record.twitter.description == "RM desc"

    def test_extension_without_term_support_uses_defaults(self, site):
        raw = RawExtensionRecord(fields={"_seopress_titles_title": "x"})
        record = normalize_term(self._term(), ExtensionIdentity.SEOPRESS, raw, site=site, link="/")
        assert record.title == "News | AdWrap Graphics"
