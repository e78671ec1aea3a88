"""
Incremental grapheme cluster boundary engine (Unicode Annex #29).

The engine is fed one category per code point. Before consuming a category it
can be asked whether a cluster boundary lies in front of it; the answer is one
of three values because the decision sometimes needs a code point that has not
arrived yet.
"""

from __future__ import annotations

from typing import NamedTuple

from .categories import Category

_CONTROLS = frozenset({Category.CONTROL, Category.CR, Category.LF})
_GROWS_CLUSTER = frozenset({Category.EXTEND, Category.ZWJ, Category.SPACING_MARK})
_EMOJI_BASES = frozenset({Category.E_BASE, Category.E_BASE_GAZ})
_AFTER_ZWJ = frozenset({Category.GLUE_AFTER_ZWJ, Category.E_BASE_GAZ})

# Hangul syllable sequences: last category -> categories that continue it.
_HANGUL_JOINS = {
    Category.L: frozenset({Category.L, Category.V, Category.LV, Category.LVT}),
    Category.LV: frozenset({Category.V, Category.T}),
    Category.V: frozenset({Category.V, Category.T}),
    Category.LVT: frozenset({Category.T}),
    Category.T: frozenset({Category.T}),
}


class Decision(NamedTuple):
    """Answer to "is there a boundary before the next code point?".

    ``certain`` false means the answer depends on input not yet available; in
    that case ``found`` is always false.
    """

    found: bool
    certain: bool

    @property
    def undetermined(self) -> bool:
        return not self.certain


BOUNDARY = Decision(True, True)
NO_BOUNDARY = Decision(False, True)
UNDETERMINED = Decision(False, False)


class Segmenter:
    """Boundary state for a single segmentation session.

    Instances are cheap and must not be shared between concurrent scans.
    """

    __slots__ = (
        "last_category",
        "consumed_any",
        "in_emoji_sequence",
        "regional_indicator_run",
    )

    def __init__(self) -> None:
        self.last_category: Category | None = None
        self.consumed_any = False
        self.in_emoji_sequence = False
        self.regional_indicator_run = 0

    def __repr__(self) -> str:
        return (
            f"Segmenter(last_category={self.last_category}, "
            f"consumed_any={self.consumed_any}, "
            f"in_emoji_sequence={self.in_emoji_sequence}, "
            f"regional_indicator_run={self.regional_indicator_run})"
        )

    def boundary_before(self, category: Category) -> Decision:
        """Decide whether a boundary precedes a code point of ``category``.

        Rules are checked in order and the first match wins. ``category`` may
        be ``END_OF_TEXT`` at the true end of input, or ``UNKNOWN`` when the
        buffer is exhausted but more input may follow.
        """
        # Start of text is implicit and never reported (GB1).
        if not self.consumed_any:
            return NO_BOUNDARY

        # GB2
        if category is Category.END_OF_TEXT:
            return BOUNDARY

        last = self.last_category

        # GB3
        if last is Category.CR:
            if category is Category.LF:
                return NO_BOUNDARY
            if category is Category.UNKNOWN:
                return UNDETERMINED
            return BOUNDARY

        # GB4, GB5. A control on the left needs no lookahead.
        if last in _CONTROLS or category in _CONTROLS:
            return BOUNDARY

        # GB6, GB7, GB8
        joins = _HANGUL_JOINS.get(last)  # type: ignore[arg-type]
        if joins is not None:
            if category is Category.UNKNOWN:
                return UNDETERMINED
            if category in joins:
                return NO_BOUNDARY
            # No join: fall through, GB9 and later still apply (L x Extend).

        if category is Category.UNKNOWN:
            return UNDETERMINED

        # GB9, GB9a
        if category in _GROWS_CLUSTER:
            return NO_BOUNDARY

        # GB9b
        if last is Category.PREPEND:
            return NO_BOUNDARY

        # GB10
        if self.in_emoji_sequence and category is Category.E_MODIFIER:
            return NO_BOUNDARY

        # GB11
        if last is Category.ZWJ and category in _AFTER_ZWJ:
            return NO_BOUNDARY

        # GB12, GB13: an odd run means the next indicator completes a pair.
        if self.regional_indicator_run % 2 == 1 and category is Category.REGIONAL_INDICATOR:
            return NO_BOUNDARY

        # GB999
        return BOUNDARY

    def advance(self, category: Category) -> None:
        """Commit a consumed code point of ``category`` to the state."""
        if category is Category.UNKNOWN:
            raise ValueError("cannot advance past an unknown category")

        self.last_category = category
        self.consumed_any = True

        if category is Category.REGIONAL_INDICATOR:
            self.regional_indicator_run += 1
        else:
            self.regional_indicator_run = 0

        if category in _EMOJI_BASES:
            self.in_emoji_sequence = True
        elif category is not Category.EXTEND:
            self.in_emoji_sequence = False
