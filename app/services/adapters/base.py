"""Common contract for SEO extension adapters.

An adapter reads one plugin's storage schema and reports the canonical SEO
fields it can supply.  Adapters never fill defaults: a missing or unusable
stored value is reported as absent (``None``) and the normalizer decides what
to fall back to.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from app.models.content import ContentItem, MediaInfo, RawExtensionRecord, SiteInfo, Term
from app.models.seo import PartialSEORecord
from app.models.settings import PartialSettings
from app.services.extensions import ExtensionIdentity

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


class ExtensionAdapter:
    """Base adapter: supplies nothing, so every field falls back to defaults."""

    identity: ExtensionIdentity = ExtensionIdentity.NONE
    # Raw fields holding attachment ids the store must resolve to media
    attachment_keys: Tuple[str, ...] = ()
    # Site options the settings extractor reads
    option_names: Tuple[str, ...] = ()
    # Term meta keys for the taxonomy-term variant
    term_title_key: Optional[str] = None
    term_description_key: Optional[str] = None

    def extract_item_seo(
        self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo
    ) -> PartialSEORecord:
        return PartialSEORecord()

    def extract_term_seo(self, term: Term, raw: RawExtensionRecord) -> PartialSEORecord:
        title = self.term_title_key and text_field(raw, self.term_title_key)
        description = self.term_description_key and text_field(raw, self.term_description_key)
        return PartialSEORecord(title=title or None, description=description or None)

    def extract_site_settings(self, options: RawExtensionRecord) -> PartialSettings:
        return PartialSettings()

    def attachment_ids(self, raw: RawExtensionRecord) -> List[int]:
        """Return the attachment ids referenced by *raw* that need resolving."""
        ids: List[int] = []
        for key in self.attachment_keys:
            value = int_field(raw, key)
            if value:
                ids.append(value)
        return ids

    def is_noindex(self, item: ContentItem, raw: RawExtensionRecord, site: SiteInfo) -> bool:
        """Return *True* when the stored data explicitly excludes *item* from indexing."""
        return self.extract_item_seo(item, raw, site).robots_index is False


# ---------------------------------------------------------------------------
# Field readers shared by the concrete adapters
# ---------------------------------------------------------------------------

def text_field(raw: Any, key: str) -> Optional[str]:
    """Return the stripped string at *key*, or ``None`` when missing or blank."""
    value = raw.get(key)
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def int_field(raw: Any, key: str) -> Optional[int]:
    value = raw.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def flag_field(raw: Any, key: str) -> Optional[bool]:
    """Interpret a PHP-style stored flag; ``None`` when the key is absent or blank."""
    value = raw.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def json_field(raw: Any, key: str, owner: Any = None) -> Any:
    """Decode a JSON-encoded stored value.

    Already-decoded values are returned unchanged.  Unparsable data is logged
    and reported as absent rather than raised.
    """
    value = raw.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, (str, bytes)):
        return value
    try:
        return json.loads(value)
    except ValueError:
        logger.warning("Malformed JSON in stored field %s (owner %s) – ignoring", key, owner)
        return None


def option_dict(options: Any, name: str) -> Dict[str, Any]:
    """Return the site option *name* as a mapping.

    JSON-encoded options are decoded; anything that still is not a mapping
    (a PHP-serialized string WordPress could not unserialize, a list) is
    logged and treated as an empty option.
    """
    value = json_field(options, name, owner="site options")
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("Unexpected value for site option %s – ignoring", name)
        return {}
    return value


def attachment(raw: RawExtensionRecord, key: str) -> Optional[MediaInfo]:
    """Return the resolved attachment whose id is stored at *key*."""
    media_id = int_field(raw, key)
    if not media_id:
        return None
    return raw.attachments.get(media_id)


def first_text(raw: Any, keys: Iterable[str]) -> Optional[str]:
    for key in keys:
        value = text_field(raw, key)
        if value:
            return value
    return None
