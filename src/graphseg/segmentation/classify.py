"""
Code point classification against the range table.
"""

from bisect import bisect_right
from typing import Tuple

from .categories import Category
from .table import RANGES

_ENDS: Tuple[int, ...] = tuple(end for _, end, _ in RANGES)


def classify(code_point: int) -> Category:
    """Return the grapheme break category of ``code_point``.

    Finds the first range whose end exceeds the code point; anything not
    covered by a range is ``Category.NONE``.
    """
    i = bisect_right(_ENDS, code_point)
    if i == len(RANGES) or code_point < RANGES[i][0]:
        return Category.NONE
    return RANGES[i][2]
