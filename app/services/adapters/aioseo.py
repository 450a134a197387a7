"""All in One SEO: one row per post in the ``aioseo_posts`` side table.

The store hands over the row as the raw record; a missing table or row
arrives as an empty record and simply yields no data.
"""

from typing import Dict, Optional, Tuple

from app.models.content import ContentItem, RawExtensionRecord, SiteInfo
from app.models.seo import PartialSEORecord
from app.services.adapters.base import (
    ExtensionAdapter,
    flag_field,
    int_field,
    json_field,
    text_field,
)
from app.services.extensions import ExtensionIdentity
from app.services.templating import build_context, replace_vars

SIDE_TABLE = "aioseo_posts"

_TAGS: Dict[str, str] = {
    "post_title": "title",
    "site_title": "sitename",
    "tagline": "sitedesc",
    "separator_sa": "sep",
    "post_excerpt": "excerpt",
    "post_date": "date",
    "post_modified_date": "modified",
    "author_name": "author",
    "categories": "category",
    "taxonomy_title": "category",
}


class AioseoAdapter(ExtensionAdapter):
    identity = ExtensionIdentity.AIOSEO

    def extract_item_seo(
        self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo
    ) -> PartialSEORecord:
        if not raw.fields:
            return PartialSEORecord()

        context = build_context(item, site.name, site.description)

        def template(key: str) -> Optional[str]:
            value = text_field(raw, key)
            if value is None:
                return None
            return replace_vars(value, context, prefix="#", suffix="", names=_TAGS) or None

        index, follow = _robots(raw, item.id)

        og_image_url = text_field(raw, "og_image_custom_url")

        return PartialSEORecord(
            title=template("title"),
            description=template("description"),
            canonical_url=text_field(raw, "canonical_url"),
            robots_index=index,
            robots_follow=follow,
            og_title=template("og_title"),
            og_description=template("og_description"),
            og_image_url=og_image_url,
            og_image_width=int_field(raw, "og_image_width") if og_image_url else None,
            og_image_height=int_field(raw, "og_image_height") if og_image_url else None,
            twitter_title=template("twitter_title"),
            twitter_description=template("twitter_description"),
            twitter_image_url=text_field(raw, "twitter_image_custom_url"),
            keywords=_focus_keyphrase(raw, item.id),
        )


def _robots(raw: RawExtensionRecord, item_id: int) -> Tuple[Optional[bool], Optional[bool]]:
    """Return the (index, follow) directives stored for the post.

    ``robots_default`` is either a JSON object carrying ``noindex`` and
    ``nofollow`` or a plain flag; a set flag defers to the global robots
    settings, a cleared one makes the per-post columns authoritative.
    """
    value = raw.get("robots_default")
    if isinstance(value, dict) or (isinstance(value, str) and value.lstrip().startswith("{")):
        directives = json_field(raw, "robots_default", owner=item_id)
        if not isinstance(directives, dict):
            return None, None
    elif flag_field(raw, "robots_default") is False:
        directives = {"noindex": raw.get("robots_noindex"), "nofollow": raw.get("robots_nofollow")}
    else:
        return None, None

    noindex = flag_field(directives, "noindex")
    nofollow = flag_field(directives, "nofollow")
    return (
        None if noindex is None else not noindex,
        None if nofollow is None else not nofollow,
    )


def _focus_keyphrase(raw: RawExtensionRecord, item_id: int) -> Optional[str]:
    keyphrases = json_field(raw, "keyphrases", owner=item_id)
    if not isinstance(keyphrases, dict):
        return None
    focus = keyphrases.get("focus")
    if not isinstance(focus, dict):
        return None
    return text_field(focus, "keyphrase")
