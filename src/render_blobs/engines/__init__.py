from .ascii_text import AsciiTextEngine
from .base import BlobRenderEngine
from .pillow_png import PillowPngEngine, blob_color

__all__ = ["AsciiTextEngine", "BlobRenderEngine", "PillowPngEngine", "blob_color"]
