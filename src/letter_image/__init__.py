"""
Letter-encoded test images -> line sequences.

Each row of the image is a string: '.' for background, 'A'-'Z' for pixels
of the blob with that index. Decoding yields the row-major line sequence the
labeler consumes, plus the labeling the letters already spell out.

No labeling happens here; the reference indices are read off the letters.
"""

from .contracts import DecodeError, DecodeResult
from .module import decode_letter_file, decode_letter_rows, index_to_letter, letter_to_index, read_letter_rows

__all__ = [
    "DecodeError",
    "DecodeResult",
    "decode_letter_file",
    "decode_letter_rows",
    "index_to_letter",
    "letter_to_index",
    "read_letter_rows",
]
