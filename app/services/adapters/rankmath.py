"""Rank Math: ``rank_math_*`` post meta, ``%var%`` templates."""

from typing import List, Optional

from app.models.content import ContentItem, RawExtensionRecord, SiteInfo
from app.models.seo import PartialSEORecord
from app.models.settings import PartialSettings
from app.services.adapters.base import (
    ExtensionAdapter,
    attachment,
    json_field,
    option_dict,
    text_field,
)
from app.services.extensions import ExtensionIdentity
from app.services.templating import build_context, replace_vars


class RankMathAdapter(ExtensionAdapter):
    identity = ExtensionIdentity.RANKMATH
    attachment_keys = ("rank_math_facebook_image_id",)
    option_names = ("rank-math-options-general", "rank-math-options-titles")
    term_title_key = "rank_math_title"
    term_description_key = "rank_math_description"

    def extract_item_seo(
        self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo
    ) -> PartialSEORecord:
        context = build_context(
            item, site.name, site.description, sep=site.title_separator or "-"
        )

        def template(key: str) -> Optional[str]:
            value = text_field(raw, key)
            return replace_vars(value, context) if value is not None else None

        robots = _robots(raw, item.id)
        og_image_url = text_field(raw, "rank_math_facebook_image")
        # Dimensions only make sense alongside the image Rank Math points at
        og_image = attachment(raw, "rank_math_facebook_image_id") if og_image_url else None

        return PartialSEORecord(
            title=template("rank_math_title"),
            description=template("rank_math_description"),
            canonical_url=text_field(raw, "rank_math_canonical_url"),
            robots_index=None if robots is None else "noindex" not in robots,
            robots_follow=None if robots is None else "nofollow" not in robots,
            og_title=text_field(raw, "rank_math_facebook_title"),
            og_description=text_field(raw, "rank_math_facebook_description"),
            og_image_url=og_image_url,
            og_image_width=og_image.width if og_image else None,
            og_image_height=og_image.height if og_image else None,
            twitter_title=text_field(raw, "rank_math_twitter_title"),
            twitter_description=text_field(raw, "rank_math_twitter_description"),
            keywords=text_field(raw, "rank_math_focus_keyword"),
        )

    def extract_site_settings(self, options: RawExtensionRecord) -> PartialSettings:
        general = option_dict(options, "rank-math-options-general")
        titles = option_dict(options, "rank-math-options-titles")

        separator = text_field(titles, "title_separator")
        return PartialSettings(
            separator=f" {separator} " if separator else None,
            organization_name=text_field(titles, "knowledgegraph_name"),
            default_og_image_url=text_field(general, "open_graph_image"),
            facebook=text_field(general, "social_url_facebook"),
            twitter=text_field(general, "twitter_author_names"),
            instagram=text_field(general, "social_url_instagram"),
            linkedin=text_field(general, "social_url_linkedin"),
            youtube=text_field(general, "social_url_youtube"),
        )


def _robots(raw: RawExtensionRecord, item_id: int) -> Optional[List[str]]:
    """Return the stored robots directives, or ``None`` when nothing usable is stored."""
    value = raw.get("rank_math_robots")
    if isinstance(value, str):
        value = json_field(raw, "rank_math_robots", owner=item_id)
    if not isinstance(value, list):
        return None
    return [str(directive) for directive in value]
