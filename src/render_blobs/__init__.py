"""
Blob labelings -> rasters for visual inspection.

Rendering is a pure consumer of (lines, blob indices): it does not label,
and it does not compare against any reference.
"""

from .contracts import RenderConfig, RenderError, RenderFormat, RenderResult
from .module import raster_extent, render_blobs

__all__ = [
    "RenderConfig",
    "RenderError",
    "RenderFormat",
    "RenderResult",
    "raster_extent",
    "render_blobs",
]
