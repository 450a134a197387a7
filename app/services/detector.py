"""SEO extension detection from capability probes.

The content store reports a set of capability strings for the WordPress
install it reads from: defined constants, class or function names exported
by plugins, or the REST namespaces the site advertises.  :func:`detect_extension`
maps that set onto the one :class:`ExtensionIdentity` whose data should be
trusted.

Detection order matters: when several SEO plugins are installed side by side
the first match in :data:`_FINGERPRINTS` wins.
"""

import logging
from typing import Iterable, Optional, Tuple

from app.services.extensions import ExtensionIdentity

logger = logging.getLogger(__name__)

_FINGERPRINTS: Tuple[Tuple[ExtensionIdentity, frozenset], ...] = (
    (ExtensionIdentity.YOAST, frozenset({"WPSEO_VERSION", "WPSEO_Meta", "yoast/v1"})),
    (ExtensionIdentity.RANKMATH, frozenset({"RankMath", "RANK_MATH_VERSION", "rankmath/v1"})),
    (
        ExtensionIdentity.AIOSEO,
        frozenset({"AIOSEO_VERSION", "AIOSEO\\Plugin\\AIOSEO", "aioseo/v1"}),
    ),
    (
        ExtensionIdentity.SEOPRESS,
        frozenset({"SEOPRESS_VERSION", "seopress_get_service", "seopress/v1"}),
    ),
    (
        ExtensionIdentity.SEOFRAMEWORK,
        frozenset({"THE_SEO_FRAMEWORK_VERSION", "the_seo_framework", "tsf/v1"}),
    ),
    (ExtensionIdentity.SLIMSEO, frozenset({"SLIM_SEO_VER", "SlimSEO\\Plugin", "slim-seo/v1"})),
)


def detect_extension(capabilities: Iterable[str]) -> ExtensionIdentity:
    """Return the authoritative SEO extension for a set of capability probes.

    Args:
        capabilities: Capability strings reported by the content store.

    Returns:
        The first matching :class:`ExtensionIdentity`, or ``NONE`` when no
        known SEO plugin is present.
    """
    probes = set(capabilities)
    for identity, fingerprints in _FINGERPRINTS:
        if probes & fingerprints:
            return identity
    return ExtensionIdentity.NONE


def resolve_extension(configured: str, capabilities: Optional[Iterable[str]]) -> ExtensionIdentity:
    """Apply the configured override, falling back to detection when it is ``auto``."""
    if configured != "auto":
        return ExtensionIdentity(configured)
    identity = detect_extension(capabilities or ())
    logger.info("Detected SEO extension: %s", identity.value)
    return identity
