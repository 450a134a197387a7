"""Yoast SEO: flat ``_yoast_wpseo_*`` post meta, ``%%var%%`` templates."""

from typing import Dict, Optional

from app.models.content import ContentItem, RawExtensionRecord, SiteInfo
from app.models.seo import PartialSEORecord
from app.models.settings import PartialSettings
from app.services.adapters.base import (
    ExtensionAdapter,
    attachment,
    int_field,
    option_dict,
    text_field,
)
from app.services.extensions import ExtensionIdentity
from app.services.templating import build_context, replace_vars

_PREFIX = "_yoast_wpseo_"

_PLACEHOLDERS: Dict[str, str] = {
    "title": "title",
    "sitename": "sitename",
    "sitedesc": "sitedesc",
    "sep": "sep",
    "excerpt": "excerpt",
    "date": "date",
    "modified": "modified",
    "name": "author",
    "category": "category",
    "primary_category": "category",
    "tag": "tag",
}

# Yoast stores the title separator as a key into its own symbol table
_SEPARATORS: Dict[str, str] = {
    "sc-dash": "-",
    "sc-ndash": "–",
    "sc-mdash": "—",
    "sc-colon": ":",
    "sc-middot": "·",
    "sc-bull": "•",
    "sc-star": "*",
    "sc-smstar": "⋆",
    "sc-pipe": "|",
    "sc-tilde": "~",
    "sc-laquo": "«",
    "sc-raquo": "»",
    "sc-lt": "<",
    "sc-gt": ">",
}


class YoastAdapter(ExtensionAdapter):
    identity = ExtensionIdentity.YOAST
    attachment_keys = (_PREFIX + "opengraph-image-id", _PREFIX + "twitter-image-id")
    option_names = ("wpseo_social", "wpseo_titles")
    term_title_key = "wpseo_title"
    term_description_key = "wpseo_desc"

    def extract_item_seo(
        self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo
    ) -> PartialSEORecord:
        context = build_context(
            item, site.name, site.description, sep=site.title_separator or "-"
        )

        def template(key: str) -> Optional[str]:
            value = text_field(raw, _PREFIX + key)
            if value is None:
                return None
            return replace_vars(value, context, prefix="%%", suffix="%%", names=_PLACEHOLDERS)

        og_image = attachment(raw, _PREFIX + "opengraph-image-id")
        twitter_image = attachment(raw, _PREFIX + "twitter-image-id")

        return PartialSEORecord(
            title=template("title"),
            description=template("metadesc"),
            canonical_url=text_field(raw, _PREFIX + "canonical"),
            robots_index=_robots_flag(raw, _PREFIX + "meta-robots-noindex"),
            robots_follow=_robots_flag(raw, _PREFIX + "meta-robots-nofollow"),
            og_title=template("opengraph-title"),
            og_description=template("opengraph-description"),
            og_image_url=og_image.url if og_image else text_field(raw, _PREFIX + "opengraph-image"),
            og_image_width=og_image.width if og_image else None,
            og_image_height=og_image.height if og_image else None,
            twitter_title=template("twitter-title"),
            twitter_description=template("twitter-description"),
            twitter_image_url=(
                twitter_image.url if twitter_image else text_field(raw, _PREFIX + "twitter-image")
            ),
            keywords=text_field(raw, _PREFIX + "focuskw"),
        )

    def extract_site_settings(self, options: RawExtensionRecord) -> PartialSettings:
        social = option_dict(options, "wpseo_social")
        titles = option_dict(options, "wpseo_titles")
        image_id = int_field(social, "og_default_image_id")
        image = options.attachments.get(image_id) if image_id else None

        separator = text_field(titles, "separator")
        if separator is not None:
            separator = f" {_SEPARATORS.get(separator, separator)} "

        return PartialSettings(
            separator=separator,
            organization_name=text_field(titles, "company_name"),
            default_og_image_url=image.url if image else text_field(social, "og_default_image"),
            default_og_image_width=image.width if image else None,
            default_og_image_height=image.height if image else None,
            facebook=text_field(social, "facebook_site"),
            twitter=text_field(social, "twitter_site"),
            instagram=text_field(social, "instagram_url"),
            linkedin=text_field(social, "linkedin_url"),
            youtube=text_field(social, "youtube_url"),
        )

    def attachment_ids(self, raw: RawExtensionRecord):
        ids = super().attachment_ids(raw)
        if "wpseo_social" in raw.fields:
            media_id = int_field(option_dict(raw, "wpseo_social"), "og_default_image_id")
            if media_id:
                ids.append(media_id)
        return ids


def _robots_flag(raw: RawExtensionRecord, key: str) -> Optional[bool]:
    # "1" forces no(index|follow), "2" forces the positive value, "0"/blank defers
    value = text_field(raw, key)
    if value is None or value == "0":
        return None
    return value != "1"
