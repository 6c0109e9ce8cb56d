from __future__ import annotations

import colorsys
from pathlib import Path
from typing import Any, Sequence

from blob_contracts.geometry import Line

from .base import BlobRenderEngine

BACKGROUND_RGB = (255, 255, 255)
_GOLDEN_RATIO_CONJUGATE = 0.618033988749895


def blob_color(blob_index: int) -> tuple[int, int, int]:
    """
    Deterministic, well-spread color per blob index.

    Hues advance by the golden ratio so neighbouring indices never share a
    similar color; saturation/value stay fixed to keep every blob visible on
    white.
    """
    hue = (blob_index * _GOLDEN_RATIO_CONJUGATE) % 1.0
    r, g, b = colorsys.hsv_to_rgb(hue, 0.65, 0.85)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


class PillowPngEngine(BlobRenderEngine):
    def __init__(self, scale: int = 1) -> None:
        if scale < 1:
            raise ValueError("scale must be a positive integer")
        self.scale = scale

    def backend_id(self) -> str:
        return "pillow"

    def backend_version(self) -> str | None:
        try:
            import PIL

            return getattr(PIL, "__version__", None)
        except Exception:
            return None

    def _require_pil(self):
        try:
            from PIL import Image, ImageDraw

            return Image, ImageDraw
        except ImportError as e:
            raise RuntimeError("Missing dependency: Pillow is required for PNG rendering.") from e

    def render(
        self,
        *,
        lines: Sequence[Line],
        blob_indices: Sequence[int],
        width: int,
        height: int,
        out_file: Path | None,
    ) -> tuple[list[str] | None, dict[str, Any]]:
        Image, ImageDraw = self._require_pil()
        s = self.scale

        img = Image.new("RGB", (width * s, height * s), BACKGROUND_RGB)
        draw = ImageDraw.Draw(img)
        for line, b in zip(lines, blob_indices):
            # rectangle() bounds are inclusive.
            draw.rectangle(
                [line.x * s, line.y * s, line.x_end * s - 1, (line.y + 1) * s - 1],
                fill=blob_color(b),
            )

        if out_file is not None:
            out_file.parent.mkdir(parents=True, exist_ok=True)
            img.save(out_file, format="PNG")

        render_params: dict[str, Any] = {
            "backend": self.backend_id(),
            "backend_version": self.backend_version(),
            "scale": s,
            "width_px": int(img.size[0]),
            "height_px": int(img.size[1]),
        }
        return None, render_params
