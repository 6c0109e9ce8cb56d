"""
Connected-component labeling of horizontal pixel runs ("lines").

Two lines share a blob iff a chain of lines on adjacent rows with
overlapping columns connects them. Input must be sorted row-major by (y, x);
output is one blob index per line, numbered by first appearance.

No pixel masks, no diagonal adjacency.
"""

from .config import LabelingConfig, LabelingStrategy
from .disjoint_set import DisjointSet
from .errors import BlobInvariantError, UnsortedLinesError
from .label_lines import BlobLabeler, check_sorted, label_lines, summarize_blobs
from .renumber import canonical_blob_indices, owners_from_groups
from .touching import lines_touch

__all__ = [
    "BlobInvariantError",
    "BlobLabeler",
    "DisjointSet",
    "LabelingConfig",
    "LabelingStrategy",
    "UnsortedLinesError",
    "canonical_blob_indices",
    "check_sorted",
    "label_lines",
    "lines_touch",
    "owners_from_groups",
    "summarize_blobs",
]
