from typing import Dict

from app.services.adapters.aioseo import AioseoAdapter
from app.services.adapters.base import ExtensionAdapter
from app.services.adapters.rankmath import RankMathAdapter
from app.services.adapters.seoframework import SeoFrameworkAdapter
from app.services.adapters.seopress import SeoPressAdapter
from app.services.adapters.slimseo import SlimSeoAdapter
from app.services.adapters.yoast import YoastAdapter
from app.services.extensions import ExtensionIdentity

ADAPTERS: Dict[ExtensionIdentity, ExtensionAdapter] = {
    ExtensionIdentity.YOAST: YoastAdapter(),
    ExtensionIdentity.RANKMATH: RankMathAdapter(),
    ExtensionIdentity.AIOSEO: AioseoAdapter(),
    ExtensionIdentity.SEOPRESS: SeoPressAdapter(),
    ExtensionIdentity.SEOFRAMEWORK: SeoFrameworkAdapter(),
    ExtensionIdentity.SLIMSEO: SlimSeoAdapter(),
    ExtensionIdentity.NONE: ExtensionAdapter(),
}


def get_adapter(identity: ExtensionIdentity) -> ExtensionAdapter:
    """Return the adapter for *identity*; unknown identities supply no data."""
    return ADAPTERS.get(identity, ADAPTERS[ExtensionIdentity.NONE])
