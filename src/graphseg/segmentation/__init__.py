"""
Grapheme cluster segmentation

Unicode Annex #29 extended grapheme cluster boundaries over ``str`` or UTF-8
``bytes``, with an incremental engine that reports when a boundary cannot be
decided until more input arrives.
"""

from .categories import Category
from .classify import classify
from .driver import (
    DecodeError,
    first_grapheme_cluster,
    grapheme_count,
    iter_graphemes,
    next_boundary,
    split_graphemes,
    truncate_graphemes,
)
from .engine import BOUNDARY, NO_BOUNDARY, UNDETERMINED, Decision, Segmenter
from .stream import StreamSegmenter

__all__ = [
    "Category",
    "classify",
    "DecodeError",
    "first_grapheme_cluster",
    "grapheme_count",
    "iter_graphemes",
    "next_boundary",
    "split_graphemes",
    "truncate_graphemes",
    "BOUNDARY",
    "NO_BOUNDARY",
    "UNDETERMINED",
    "Decision",
    "Segmenter",
    "StreamSegmenter",
]
