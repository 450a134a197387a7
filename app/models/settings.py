from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PartialSettings(BaseModel):
    """Site-wide values one extension could supply; ``None`` means absent."""

    separator: Optional[str] = None
    organization_name: Optional[str] = None
    default_og_image_url: Optional[str] = None
    default_og_image_width: Optional[int] = None
    default_og_image_height: Optional[int] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    youtube: Optional[str] = None


class SocialLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    facebook: str = ""
    twitter: str = ""
    instagram: str = ""
    linkedin: str = ""
    youtube: str = ""


class DefaultImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = ""
    width: int = 0
    height: int = 0


class OrganizationSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    organization_name: str = ""
    organization_logo: str = ""


class SEOSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    site_name: str
    site_description: str
    site_url: str
    language: str
    separator: str
    default_og_image: DefaultImage
    social: SocialLinks
    schema_: OrganizationSchema = Field(serialization_alias="schema")
    extension_identity: str
