from __future__ import annotations

import unittest
from pathlib import Path

from blob_labeling.config import LabelingConfig, LabelingStrategy
from blob_labeling.label_lines import BlobLabeler, label_lines
from letter_image.module import decode_letter_file, read_letter_rows
from render_blobs.contracts import RenderConfig
from render_blobs.module import render_blobs

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class TestFixtureImagesEndToEnd(unittest.TestCase):
    def _decode(self, name: str):
        decoded = decode_letter_file(FIXTURES / name)
        self.assertTrue(decoded.ok, decoded.errors)
        return decoded

    def test_labels_reproduce_letters(self) -> None:
        for name in ("simple.txt", "complex.txt"):
            decoded = self._decode(name)
            for strategy in (LabelingStrategy.DISJOINT_SET, LabelingStrategy.GROUP_LIST):
                with self.subTest(image=name, strategy=strategy.value):
                    out = BlobLabeler(LabelingConfig(strategy=strategy)).process(decoded.lines)
                    self.assertEqual(out, decoded.reference_blob_indices)

    def test_fixture_blob_counts(self) -> None:
        simple = label_lines(self._decode("simple.txt").lines, LabelingConfig())
        complex_ = label_lines(self._decode("complex.txt").lines, LabelingConfig())
        self.assertEqual(simple.blob_count, 15)  # A..O
        self.assertEqual(complex_.blob_count, 23)  # A..W
        self.assertGreater(complex_.meta["counts"]["bridge_merges"], 0)

    def test_render_of_labeling_reproduces_image(self) -> None:
        for name in ("simple.txt", "complex.txt"):
            with self.subTest(image=name):
                decoded = self._decode(name)
                indices = BlobLabeler().process(decoded.lines)
                rendered = render_blobs(lines=decoded.lines, blob_indices=indices, config=RenderConfig())
                self.assertTrue(rendered.ok)
                self.assertEqual(rendered.rows, read_letter_rows(FIXTURES / name))


if __name__ == "__main__":
    unittest.main()
