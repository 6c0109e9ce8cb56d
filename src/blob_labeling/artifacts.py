from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from blob_contracts.geometry import Line
from blob_contracts.labeling import LabelingResult


def labeling_payload(
    result: LabelingResult,
    *,
    lines: Sequence[Line],
    source_relpath: str | None = None,
) -> dict[str, Any]:
    """
    Self-contained labeling artifact: the result plus the lines it labels.

    `lines[i]` and `blob_indices[i]` describe the same run, so the artifact
    can be rendered or audited without re-decoding the source image.
    """
    if result.ok and len(lines) != len(result.blob_indices):
        raise ValueError(
            f"lines ({len(lines)}) and blob_indices ({len(result.blob_indices)}) must be parallel"
        )
    payload: dict[str, Any] = result.to_dict()
    payload["lines"] = [ln.to_dict() for ln in lines]
    payload["source_relpath"] = source_relpath
    return payload


def lines_from_payload(payload: dict[str, Any]) -> list[Line]:
    return [Line.from_dict(d) for d in (payload.get("lines") or [])]


def serialize_labeling_result(
    result: LabelingResult,
    *,
    lines: Sequence[Line],
    source_relpath: str | None = None,
) -> str:
    payload = labeling_payload(result, lines=lines, source_relpath=source_relpath)
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"), indent=2) + "\n"


def write_labeling_json_artifact(
    *,
    result: LabelingResult,
    lines: Sequence[Line],
    out_file: Path,
    source_relpath: str | None = None,
) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(
        serialize_labeling_result(result, lines=lines, source_relpath=source_relpath),
        encoding="utf-8",
    )
