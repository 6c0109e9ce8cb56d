from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .geometry import BBox


@dataclass(frozen=True, slots=True)
class LabelingIssue:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LabelingIssue":
        detail = d.get("detail")
        return LabelingIssue(
            code=str(d["code"]),
            message=str(d.get("message", "")),
            detail=(None if detail is None else dict(detail)),
        )


@dataclass(frozen=True, slots=True)
class BlobSummary:
    blob_index: int
    line_indices: list[int]  # ascending
    bbox: BBox
    pixel_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "blob_index": self.blob_index,
            "line_indices": list(self.line_indices),
            "bbox": self.bbox.to_dict(),
            "pixel_count": self.pixel_count,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "BlobSummary":
        return BlobSummary(
            blob_index=int(d["blob_index"]),
            line_indices=[int(x) for x in (d.get("line_indices") or [])],
            bbox=BBox.from_dict(d["bbox"]),
            pixel_count=int(d["pixel_count"]),
        )


@dataclass(frozen=True, slots=True)
class LabelingResult:
    ok: bool
    errors: list[LabelingIssue]
    meta: dict[str, Any]  # stage/version, config echo, counts
    blob_indices: list[int]  # parallel to the input line sequence
    blobs: list[BlobSummary]  # ordered by blob_index

    @property
    def blob_count(self) -> int:
        return len(self.blobs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "errors": [e.to_dict() for e in self.errors],
            "meta": dict(self.meta),
            "blob_indices": list(self.blob_indices),
            "blobs": [b.to_dict() for b in self.blobs],
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LabelingResult":
        blobs_raw = d.get("blobs") or []
        if not isinstance(blobs_raw, list):
            raise TypeError("LabelingResult.blobs must be a list")
        return LabelingResult(
            ok=bool(d.get("ok", False)),
            errors=[LabelingIssue.from_dict(e) for e in (d.get("errors") or [])],
            meta=dict(d.get("meta") or {}),
            blob_indices=[int(x) for x in (d.get("blob_indices") or [])],
            blobs=[BlobSummary.from_dict(b) for b in blobs_raw],
        )
