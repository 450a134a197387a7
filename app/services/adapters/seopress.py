"""SEOPress: flat ``_seopress_*`` post meta."""

from typing import Optional

from app.models.content import ContentItem, RawExtensionRecord, SiteInfo
from app.models.seo import PartialSEORecord
from app.models.settings import PartialSettings
from app.services.adapters.base import ExtensionAdapter, option_dict, text_field
from app.services.extensions import ExtensionIdentity

_SOCIAL = "seopress_social_option_name"


class SeoPressAdapter(ExtensionAdapter):
    identity = ExtensionIdentity.SEOPRESS
    option_names = (_SOCIAL,)

    def extract_item_seo(
        self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo
    ) -> PartialSEORecord:
        return PartialSEORecord(
            title=text_field(raw, "_seopress_titles_title"),
            description=text_field(raw, "_seopress_titles_desc"),
            canonical_url=text_field(raw, "_seopress_robots_canonical"),
            robots_index=_negated(raw, "_seopress_robots_index"),
            robots_follow=_negated(raw, "_seopress_robots_follow"),
            og_title=text_field(raw, "_seopress_social_fb_title"),
            og_description=text_field(raw, "_seopress_social_fb_desc"),
            og_image_url=text_field(raw, "_seopress_social_fb_img"),
            twitter_title=text_field(raw, "_seopress_social_twitter_title"),
            twitter_description=text_field(raw, "_seopress_social_twitter_desc"),
            twitter_image_url=text_field(raw, "_seopress_social_twitter_img"),
            keywords=text_field(raw, "_seopress_analysis_target_kw"),
        )

    def extract_site_settings(self, options: RawExtensionRecord) -> PartialSettings:
        social = option_dict(options, _SOCIAL)
        return PartialSettings(
            default_og_image_url=text_field(social, "seopress_social_facebook_img"),
            facebook=text_field(social, "seopress_social_accounts_facebook"),
            twitter=text_field(social, "seopress_social_accounts_twitter"),
            instagram=text_field(social, "seopress_social_accounts_instagram"),
            linkedin=text_field(social, "seopress_social_accounts_linkedin"),
            youtube=text_field(social, "seopress_social_accounts_youtube"),
        )


def _negated(raw: RawExtensionRecord, key: str) -> Optional[bool]:
    # SEOPress stores "yes" in *_robots_index to mean noindex
    value = text_field(raw, key)
    if value is None:
        return None
    return value != "yes"
