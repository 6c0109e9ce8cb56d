from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from letter_image.module import decode_letter_file
from render_blobs.contracts import RenderConfig, RenderFormat
from render_blobs.module import render_blobs

from .artifacts import write_labeling_json_artifact
from .config import LabelingConfig, LabelingStrategy
from .label_lines import label_lines


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="blob-label",
        description="Decode a letter image, label its line blobs and write a JSON artifact.",
    )
    p.add_argument("--input", required=True, type=Path, help="Letter image text file ('.' and 'A'-'Z').")
    p.add_argument("--output", required=True, type=Path, help="Path to write the labeling JSON artifact.")
    p.add_argument(
        "--strategy",
        choices=[s.value for s in LabelingStrategy],
        default=LabelingStrategy.DISJOINT_SET.value,
    )
    p.add_argument("--render-ascii", type=Path, default=None, help="Optional text rendering of the labeling.")
    p.add_argument("--render-png", type=Path, default=None, help="Optional PNG rendering of the labeling.")
    p.add_argument("--png-scale", type=_positive_int, default=1, help="Pixels per image cell (>= 1).")
    return p


def _print_summary(summary: dict[str, Any]) -> None:
    print(json.dumps(summary, sort_keys=True, separators=(",", ":"), ensure_ascii=False))


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    decoded = decode_letter_file(args.input)
    if not decoded.ok:
        _print_summary(
            {
                "ok": False,
                "lines": 0,
                "blobs": 0,
                "errors": [e.code for e in decoded.errors],
            }
        )
        return 2

    result = label_lines(decoded.lines, LabelingConfig(strategy=LabelingStrategy(args.strategy)))
    write_labeling_json_artifact(
        result=result,
        lines=decoded.lines,
        out_file=args.output,
        source_relpath=str(args.input),
    )

    errors = [e.code for e in result.errors]
    render_errors: list[str] = []
    if result.ok:
        renders = []
        if args.render_ascii is not None:
            renders.append(RenderConfig(format=RenderFormat.ASCII, out_file=args.render_ascii))
        if args.render_png is not None:
            renders.append(RenderConfig(format=RenderFormat.PNG, out_file=args.render_png, scale=args.png_scale))
        for rcfg in renders:
            rendered = render_blobs(lines=decoded.lines, blob_indices=result.blob_indices, config=rcfg)
            render_errors.extend(e.code for e in rendered.errors)
    errors.extend(render_errors)

    # A requested rendering that failed fails the run.
    ok = result.ok and not render_errors
    _print_summary(
        {
            "ok": ok,
            "lines": len(result.blob_indices),
            "blobs": result.blob_count,
            "errors": errors,
        }
    )
    return 0 if ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
