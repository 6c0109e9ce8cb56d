from __future__ import annotations

from typing import Any, Sequence

from blob_contracts.geometry import Line

from .contracts import RenderConfig, RenderError, RenderFormat, RenderResult
from .engines import AsciiTextEngine, BlobRenderEngine, PillowPngEngine


def raster_extent(lines: Sequence[Line]) -> tuple[int, int]:
    """Smallest (width, height) holding every line: max column + 1, max row + 1."""
    if not lines:
        return 0, 0
    return max(ln.x_end for ln in lines), max(ln.y for ln in lines) + 1


def _get_engine(config: RenderConfig) -> BlobRenderEngine:
    if config.format == RenderFormat.ASCII:
        return AsciiTextEngine()
    if config.format == RenderFormat.PNG:
        return PillowPngEngine(scale=config.scale)
    raise ValueError(f"Unsupported render format: {config.format}")


def _not_rendered(config: RenderConfig, errors: list[RenderError], meta: dict[str, Any]) -> RenderResult:
    return RenderResult(
        ok=len(errors) == 0,
        format=config.format,
        width=0,
        height=0,
        rows=None,
        out_file=None,
        errors=errors,
        meta=meta,
    )


def render_blobs(*, lines: Sequence[Line], blob_indices: Sequence[int], config: RenderConfig) -> RenderResult:
    """
    Paint every line with its blob's value on a minimal background raster.

    Problems with the inputs are reported in the result and nothing is
    rendered or written; rendering never raises for bad labelings.
    """
    engine = _get_engine(config)
    meta: dict[str, Any] = {"backend": engine.backend_id(), "lines": len(lines)}

    if len(lines) != len(blob_indices):
        return _not_rendered(
            config,
            [
                RenderError(
                    code="RENDER_LENGTH_MISMATCH",
                    message="The number of lines does not match the number of blob indices.",
                    detail={"lines": len(lines), "blob_indices": len(blob_indices)},
                )
            ],
            meta,
        )

    if not lines:
        return _not_rendered(config, [], meta)

    limit = engine.max_blob_index()
    bad = sorted({b for b in blob_indices if b < 0 or (limit is not None and b > limit)})
    if bad:
        return _not_rendered(
            config,
            [
                RenderError(
                    code="RENDER_INDEX_UNREPRESENTABLE",
                    message=f"Backend {engine.backend_id()} cannot represent some blob indices.",
                    detail={"indices": bad[:10], "max_blob_index": limit},
                )
            ],
            meta,
        )

    width, height = raster_extent(lines)
    rows, render_params = engine.render(
        lines=lines,
        blob_indices=blob_indices,
        width=width,
        height=height,
        out_file=config.out_file,
    )
    meta.update(render_params)

    return RenderResult(
        ok=True,
        format=config.format,
        width=width,
        height=height,
        rows=rows,
        out_file=(None if config.out_file is None else config.out_file.as_posix()),
        errors=[],
        meta=meta,
    )
