"""Slim SEO: a single ``slim_seo`` meta array per post."""

import logging

from app.models.content import ContentItem, RawExtensionRecord, SiteInfo
from app.models.seo import PartialSEORecord
from app.services.adapters.base import ExtensionAdapter, first_text, flag_field, json_field
from app.services.extensions import ExtensionIdentity

logger = logging.getLogger(__name__)


class SlimSeoAdapter(ExtensionAdapter):
    identity = ExtensionIdentity.SLIMSEO

    def extract_item_seo(
        self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo
    ) -> PartialSEORecord:
        data = json_field(raw, "slim_seo", owner=item.id)
        if data is not None and not isinstance(data, dict):
            logger.warning("Unexpected slim_seo value for item %s – ignoring", item.id)
            data = None
        data = data or {}

        noindex = flag_field(data, "noindex")
        if noindex is None:
            noindex = flag_field(raw, "slim_seo_noindex")

        return PartialSEORecord(
            title=first_text(data, ("title",)) or first_text(raw, ("slim_seo_title",)),
            description=(
                first_text(data, ("description",)) or first_text(raw, ("slim_seo_description",))
            ),
            canonical_url=first_text(data, ("canonical",)),
            robots_index=None if noindex is None else not noindex,
            og_image_url=first_text(data, ("facebook_image",)),
            twitter_image_url=first_text(data, ("twitter_image",)),
        )
