"""Extended grapheme cluster segmentation."""

from .segmentation import (
    Category,
    DecodeError,
    StreamSegmenter,
    classify,
    first_grapheme_cluster,
    grapheme_count,
    iter_graphemes,
    next_boundary,
    split_graphemes,
    truncate_graphemes,
)

__version__ = "0.1.0"

__all__ = [
    "Category",
    "DecodeError",
    "StreamSegmenter",
    "classify",
    "first_grapheme_cluster",
    "grapheme_count",
    "iter_graphemes",
    "next_boundary",
    "split_graphemes",
    "truncate_graphemes",
    "__version__",
]
