"""
High-level helpers for building WMS overlays.
"""

from typing import Any, List, Optional, Union

from .overlay import WMSOverlay


def create_wms_overlay(
    url: str,
    layers: Union[str, List[str]],
    name: Optional[str] = None,
    opacity: float = 0.5,
    cache: bool = False,
    **params: Any
) -> WMSOverlay:
    """
    Create a WMS overlay for the given layer(s).
    
    Args:
        url: WMS service URL
        layers: Layer name(s) to request
        name: Overlay name (default: the layer names)
        opacity: Initial tile opacity
        cache: Allow the viewer to reuse cached tile images
        **params: Additional GetMap parameters (styles, transparent, vendor keys)
        
    Returns:
        Configured overlay, not yet attached to a map
    """
    if isinstance(layers, list):
        layers = ','.join(layers)

    return WMSOverlay(
        name or layers,
        url,
        params={'layers': layers, **params},
        options={'opacity': opacity, 'cache': cache},
    )
