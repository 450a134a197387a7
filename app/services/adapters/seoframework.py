"""The SEO Framework: ``_genesis_*`` and ``_open_graph_*`` post meta."""

from typing import Optional

from app.models.content import ContentItem, RawExtensionRecord, SiteInfo
from app.models.seo import PartialSEORecord
from app.services.adapters.base import ExtensionAdapter, attachment, flag_field, text_field
from app.services.extensions import ExtensionIdentity


class SeoFrameworkAdapter(ExtensionAdapter):
    identity = ExtensionIdentity.SEOFRAMEWORK
    attachment_keys = ("_social_image_id",)

    def extract_item_seo(
        self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo
    ) -> PartialSEORecord:
        image_url = text_field(raw, "_social_image_url")
        image = attachment(raw, "_social_image_id")
        if image_url is None and image is not None:
            image_url = image.url

        return PartialSEORecord(
            title=text_field(raw, "_genesis_title"),
            description=text_field(raw, "_genesis_description"),
            canonical_url=text_field(raw, "_genesis_canonical_uri"),
            robots_index=_inverted(flag_field(raw, "_genesis_noindex")),
            robots_follow=_inverted(flag_field(raw, "_genesis_nofollow")),
            og_title=text_field(raw, "_open_graph_title"),
            og_description=text_field(raw, "_open_graph_description"),
            og_image_url=image_url,
            og_image_width=image.width if image and image.url == image_url else None,
            og_image_height=image.height if image and image.url == image_url else None,
            twitter_title=text_field(raw, "_twitter_title"),
            twitter_description=text_field(raw, "_twitter_description"),
        )


def _inverted(flag: Optional[bool]) -> Optional[bool]:
    return None if flag is None else not flag
