from __future__ import annotations

import shutil
import unittest
from pathlib import Path

from blob_contracts.geometry import Line
from render_blobs.contracts import RenderConfig, RenderFormat
from render_blobs.engines.pillow_png import BACKGROUND_RGB, blob_color
from render_blobs.module import raster_extent, render_blobs


class TestRenderAscii(unittest.TestCase):
    def test_minimal_raster(self) -> None:
        lines = [Line(x=1, y=0, length=2), Line(x=0, y=2, length=1), Line(x=3, y=2, length=2)]
        r = render_blobs(lines=lines, blob_indices=[0, 1, 2], config=RenderConfig())
        self.assertTrue(r.ok)
        self.assertEqual((r.width, r.height), (5, 3))
        self.assertEqual(r.rows, [".AA..", ".....", "B..CC"])
        self.assertIsNone(r.out_file)
        self.assertEqual(r.meta["backend"], "ascii_text")

    def test_height_uses_max_row(self) -> None:
        self.assertEqual(raster_extent([Line(0, 4, 1), Line(2, 1, 3)]), (5, 5))
        self.assertEqual(raster_extent([]), (0, 0))

    def test_length_mismatch_renders_nothing(self) -> None:
        r = render_blobs(lines=[Line(0, 0, 1)], blob_indices=[], config=RenderConfig())
        self.assertFalse(r.ok)
        self.assertEqual([e.code for e in r.errors], ["RENDER_LENGTH_MISMATCH"])
        self.assertEqual(r.errors[0].detail, {"lines": 1, "blob_indices": 0})
        self.assertIsNone(r.rows)

    def test_empty_input_renders_nothing(self) -> None:
        r = render_blobs(lines=[], blob_indices=[], config=RenderConfig())
        self.assertTrue(r.ok)
        self.assertIsNone(r.rows)
        self.assertEqual((r.width, r.height), (0, 0))

    def test_index_without_letter_is_reported(self) -> None:
        r = render_blobs(lines=[Line(0, 0, 1), Line(2, 0, 1)], blob_indices=[0, 26], config=RenderConfig())
        self.assertFalse(r.ok)
        self.assertEqual([e.code for e in r.errors], ["RENDER_INDEX_UNREPRESENTABLE"])
        self.assertEqual(r.errors[0].detail["indices"], [26])
        self.assertIsNone(r.rows)

    def test_writes_text_file(self) -> None:
        repo_root = Path(__file__).resolve().parents[1]
        out_root = repo_root / "artifacts" / "_test_render_ascii"
        if out_root.exists():
            shutil.rmtree(out_root)

        out_file = out_root / "blobs.txt"
        r = render_blobs(
            lines=[Line(0, 0, 2), Line(1, 1, 1)],
            blob_indices=[0, 0],
            config=RenderConfig(out_file=out_file),
        )
        self.assertTrue(r.ok)
        self.assertEqual(r.out_file, out_file.as_posix())
        self.assertEqual(out_file.read_text(encoding="utf-8"), "AA\n.A\n")


class TestRenderPng(unittest.TestCase):
    def test_png_requires_out_file(self) -> None:
        with self.assertRaises(ValueError):
            RenderConfig(format=RenderFormat.PNG)
        with self.assertRaises(ValueError):
            RenderConfig(scale=0)

    def test_writes_scaled_png(self) -> None:
        from PIL import Image

        repo_root = Path(__file__).resolve().parents[1]
        out_root = repo_root / "artifacts" / "_test_render_png"
        if out_root.exists():
            shutil.rmtree(out_root)

        out_file = out_root / "blobs.png"
        lines = [Line(0, 0, 2), Line(3, 1, 1)]
        r = render_blobs(
            lines=lines,
            blob_indices=[0, 30],
            config=RenderConfig(format=RenderFormat.PNG, out_file=out_file, scale=2),
        )
        self.assertTrue(r.ok, r.errors)
        self.assertIsNone(r.rows)
        self.assertEqual((r.width, r.height), (4, 2))
        self.assertEqual((r.meta["width_px"], r.meta["height_px"]), (8, 4))

        with Image.open(out_file) as img:
            img = img.convert("RGB")
            self.assertEqual(img.size, (8, 4))
            self.assertEqual(img.getpixel((0, 0)), blob_color(0))
            self.assertEqual(img.getpixel((3, 1)), blob_color(0))
            self.assertEqual(img.getpixel((4, 0)), BACKGROUND_RGB)
            self.assertEqual(img.getpixel((6, 2)), blob_color(30))
            self.assertEqual(img.getpixel((7, 3)), blob_color(30))
            self.assertEqual(img.getpixel((5, 3)), BACKGROUND_RGB)

    def test_colors_are_deterministic_and_distinct(self) -> None:
        self.assertEqual(blob_color(5), blob_color(5))
        self.assertEqual(len({blob_color(i) for i in range(26)}), 26)
        self.assertNotIn(BACKGROUND_RGB, {blob_color(i) for i in range(100)})


if __name__ == "__main__":
    unittest.main()
