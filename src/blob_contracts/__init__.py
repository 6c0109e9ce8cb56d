"""
Shared contracts for the line-blob pipeline.

These models are the schema boundary between the decoding, labeling and
rendering stages. Stage code should consume/produce these contract objects
(not ad-hoc dicts).
"""

from .geometry import BBox, Line
from .labeling import BlobSummary, LabelingIssue, LabelingResult

__all__ = [
    "BBox",
    "Line",
    "BlobSummary",
    "LabelingIssue",
    "LabelingResult",
]
