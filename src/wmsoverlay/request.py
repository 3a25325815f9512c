"""
WMS GetMap URL assembly.
"""

from typing import Optional

from .config import ServiceConfig
from .types import BoundingBox


def build_getmap_url(
    base_url: str,
    params: ServiceConfig,
    bbox: BoundingBox,
    cache_buster: Optional[int] = None,
) -> str:
    """
    Create the GetMap URL for one tile.
    
    Args:
        base_url: WMS service endpoint
        params: Service parameters, serialised in their request order
        bbox: Projected tile bounds, always placed after the service parameters
        cache_buster: Epoch milliseconds appended last as ``cache`` to defeat
            image caching, or None to leave the URL stable
        
    Returns:
        Request URL. Values are written as-is so that ``image/png`` and
        ``EPSG:3857`` reach the server unescaped.
    """
    url = base_url + "?"
    for key, value in params.query_items():
        url += f"{key}={value}&"

    url += f"bbox={bbox.to_wms()}"

    if cache_buster is not None:
        url += f"&cache={cache_buster}"

    return url
