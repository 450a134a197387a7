"""Site-wide SEO settings: site info plus whatever the active extension stores."""

from typing import Optional

from app.models.content import RawExtensionRecord, SiteInfo
from app.models.settings import (
    DefaultImage,
    OrganizationSchema,
    PartialSettings,
    SEOSettings,
    SocialLinks,
)
from app.services.adapters.registry import get_adapter
from app.services.extensions import ExtensionIdentity

DEFAULT_SEPARATOR = " | "


def normalize_settings(
    site: SiteInfo,
    extension: ExtensionIdentity,
    options: Optional[RawExtensionRecord],
    *,
    default_language: str = "en-US",
) -> SEOSettings:
    """Merge *site* and the extension's stored *options* into one settings record."""
    if extension is ExtensionIdentity.NONE:
        partial = PartialSettings()
    else:
        partial = get_adapter(extension).extract_site_settings(options or RawExtensionRecord())

    return SEOSettings(
        site_name=site.name,
        site_description=site.description,
        site_url=site.url,
        language=site.language or default_language,
        separator=partial.separator or DEFAULT_SEPARATOR,
        default_og_image=DefaultImage(
            url=partial.default_og_image_url or "",
            width=partial.default_og_image_width or 0,
            height=partial.default_og_image_height or 0,
        ),
        social=SocialLinks(
            facebook=partial.facebook or "",
            twitter=partial.twitter or "",
            instagram=partial.instagram or "",
            linkedin=partial.linkedin or "",
            youtube=partial.youtube or "",
        ),
        schema_=OrganizationSchema(
            organization_name=partial.organization_name or site.name,
            organization_logo=site.logo.url if site.logo else "",
        ),
        extension_identity=extension.value,
    )
