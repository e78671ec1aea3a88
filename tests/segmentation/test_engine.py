"""Tests for the incremental boundary engine."""

import pytest

from graphseg.segmentation.categories import Category
from graphseg.segmentation.engine import (
    BOUNDARY,
    NO_BOUNDARY,
    UNDETERMINED,
    Decision,
    Segmenter,
)

pytestmark = pytest.mark.unit

C = Category


def after(*categories):
    """Segmenter that has consumed ``categories``."""
    seg = Segmenter()
    for c in categories:
        seg.advance(c)
    return seg


class TestDecision:
    """Test the three-valued decision type."""

    def test_named_values(self):
        assert BOUNDARY == Decision(found=True, certain=True)
        assert NO_BOUNDARY == Decision(found=False, certain=True)
        assert UNDETERMINED == Decision(found=False, certain=False)

    def test_undetermined_flag(self):
        assert UNDETERMINED.undetermined
        assert not BOUNDARY.undetermined
        assert not NO_BOUNDARY.undetermined


class TestStartAndEnd:
    """Rules for the start and end of text."""

    @pytest.mark.parametrize("category", list(Category))
    def test_no_boundary_reported_at_start(self, category):
        assert Segmenter().boundary_before(category) == NO_BOUNDARY

    @pytest.mark.parametrize("last", [C.NONE, C.CR, C.L, C.ZWJ, C.PREPEND, C.REGIONAL_INDICATOR])
    def test_end_of_text_always_breaks(self, last):
        assert after(last).boundary_before(C.END_OF_TEXT) == BOUNDARY


class TestLineBreaks:
    """CR, LF and control rules."""

    def test_crlf_is_one_cluster(self):
        assert after(C.CR).boundary_before(C.LF) == NO_BOUNDARY

    def test_cr_waits_for_next_code_point(self):
        assert after(C.CR).boundary_before(C.UNKNOWN) == UNDETERMINED

    @pytest.mark.parametrize("next_category", [C.CR, C.NONE, C.EXTEND, C.CONTROL])
    def test_cr_breaks_before_anything_but_lf(self, next_category):
        assert after(C.CR).boundary_before(next_category) == BOUNDARY

    @pytest.mark.parametrize("last", [C.LF, C.CONTROL])
    def test_control_on_left_is_certain_without_lookahead(self, last):
        assert after(last).boundary_before(C.UNKNOWN) == BOUNDARY

    @pytest.mark.parametrize("last", [C.LF, C.CONTROL])
    def test_control_on_left_is_not_extended(self, last):
        assert after(last).boundary_before(C.EXTEND) == BOUNDARY
        assert after(last).boundary_before(C.ZWJ) == BOUNDARY

    @pytest.mark.parametrize("next_category", [C.CONTROL, C.CR, C.LF])
    def test_control_on_right_breaks(self, next_category):
        assert after(C.NONE).boundary_before(next_category) == BOUNDARY
        assert after(C.PREPEND).boundary_before(next_category) == BOUNDARY


class TestHangul:
    """Conjoining jamo rules."""

    @pytest.mark.parametrize(
        "last,next_category",
        [
            (C.L, C.L),
            (C.L, C.V),
            (C.L, C.LV),
            (C.L, C.LVT),
            (C.LV, C.V),
            (C.LV, C.T),
            (C.V, C.V),
            (C.V, C.T),
            (C.LVT, C.T),
            (C.T, C.T),
        ],
    )
    def test_syllable_sequences_join(self, last, next_category):
        assert after(last).boundary_before(next_category) == NO_BOUNDARY

    @pytest.mark.parametrize(
        "last,next_category",
        [(C.L, C.T), (C.LV, C.L), (C.V, C.LV), (C.LVT, C.V), (C.T, C.L), (C.T, C.NONE)],
    )
    def test_other_jamo_sequences_break(self, last, next_category):
        assert after(last).boundary_before(next_category) == BOUNDARY

    @pytest.mark.parametrize("last", [C.L, C.V, C.T, C.LV, C.LVT])
    def test_jamo_waits_for_next_code_point(self, last):
        assert after(last).boundary_before(C.UNKNOWN) == UNDETERMINED

    @pytest.mark.parametrize("last", [C.L, C.V, C.T, C.LV, C.LVT])
    def test_marks_still_extend_jamo(self, last):
        assert after(last).boundary_before(C.EXTEND) == NO_BOUNDARY
        assert after(last).boundary_before(C.SPACING_MARK) == NO_BOUNDARY


class TestExtendingAndPrepend:
    """Extend, ZWJ, SpacingMark and Prepend rules."""

    @pytest.mark.parametrize("next_category", [C.EXTEND, C.ZWJ, C.SPACING_MARK])
    def test_marks_never_start_a_cluster(self, next_category):
        assert after(C.NONE).boundary_before(next_category) == NO_BOUNDARY
        assert after(C.REGIONAL_INDICATOR).boundary_before(next_category) == NO_BOUNDARY

    def test_prepend_attaches_to_following(self):
        assert after(C.PREPEND).boundary_before(C.NONE) == NO_BOUNDARY
        assert after(C.PREPEND).boundary_before(C.E_BASE) == NO_BOUNDARY

    def test_unknown_after_plain_character(self):
        assert after(C.NONE).boundary_before(C.UNKNOWN) == UNDETERMINED
        assert after(C.PREPEND).boundary_before(C.UNKNOWN) == UNDETERMINED

    def test_default_is_boundary(self):
        assert after(C.NONE).boundary_before(C.NONE) == BOUNDARY
        assert after(C.EXTEND).boundary_before(C.NONE) == BOUNDARY
        assert after(C.NONE).boundary_before(C.PREPEND) == BOUNDARY


class TestEmoji:
    """Emoji modifier and ZWJ sequence rules."""

    @pytest.mark.parametrize("base", [C.E_BASE, C.E_BASE_GAZ])
    def test_modifier_after_base(self, base):
        assert after(base).boundary_before(C.E_MODIFIER) == NO_BOUNDARY

    def test_modifier_after_base_and_extends(self):
        seg = after(C.E_BASE, C.EXTEND, C.EXTEND)
        assert seg.in_emoji_sequence
        assert seg.boundary_before(C.E_MODIFIER) == NO_BOUNDARY

    def test_modifier_without_base_breaks(self):
        assert after(C.NONE).boundary_before(C.E_MODIFIER) == BOUNDARY
        assert after(C.E_MODIFIER).boundary_before(C.E_MODIFIER) == BOUNDARY

    @pytest.mark.parametrize("interrupt", [C.NONE, C.ZWJ, C.SPACING_MARK, C.REGIONAL_INDICATOR])
    def test_emoji_sequence_ends_on_non_extend(self, interrupt):
        seg = after(C.E_BASE, interrupt)
        assert not seg.in_emoji_sequence

    @pytest.mark.parametrize("next_category", [C.GLUE_AFTER_ZWJ, C.E_BASE_GAZ])
    def test_zwj_glue(self, next_category):
        assert after(C.E_BASE_GAZ, C.ZWJ).boundary_before(next_category) == NO_BOUNDARY

    def test_zwj_before_other_breaks(self):
        assert after(C.ZWJ).boundary_before(C.NONE) == BOUNDARY
        assert after(C.ZWJ).boundary_before(C.E_BASE) == BOUNDARY


class TestRegionalIndicators:
    """Flag pairing by run parity."""

    def test_pairs(self):
        seg = after(C.REGIONAL_INDICATOR)
        assert seg.boundary_before(C.REGIONAL_INDICATOR) == NO_BOUNDARY

    def test_third_indicator_starts_new_pair(self):
        seg = after(C.REGIONAL_INDICATOR, C.REGIONAL_INDICATOR)
        assert seg.boundary_before(C.REGIONAL_INDICATOR) == BOUNDARY

    def test_run_resets(self):
        seg = after(C.REGIONAL_INDICATOR, C.NONE)
        assert seg.regional_indicator_run == 0
        seg.advance(C.REGIONAL_INDICATOR)
        assert seg.regional_indicator_run == 1

    def test_extend_resets_run(self):
        seg = after(C.REGIONAL_INDICATOR, C.EXTEND)
        assert seg.boundary_before(C.REGIONAL_INDICATOR) == BOUNDARY


class TestAdvance:
    """State transitions."""

    def test_initial_state(self):
        seg = Segmenter()
        assert seg.last_category is None
        assert not seg.consumed_any
        assert not seg.in_emoji_sequence
        assert seg.regional_indicator_run == 0

    def test_unknown_is_never_state(self):
        seg = after(C.NONE)
        with pytest.raises(ValueError):
            seg.advance(C.UNKNOWN)
        assert seg.last_category is C.NONE

    def test_records_last_category(self):
        seg = after(C.L, C.V)
        assert seg.last_category is C.V
        assert seg.consumed_any

    def test_repr_mentions_state(self):
        assert "regional_indicator_run=2" in repr(after(C.REGIONAL_INDICATOR, C.REGIONAL_INDICATOR))


def test_undetermined_never_asserts_a_boundary():
    """Every (state, next) pair yields a decision that is never (True, False)."""
    concrete = [c for c in Category if c is not C.UNKNOWN]
    states = [Segmenter()] + [after(c) for c in concrete] + [after(C.E_BASE, C.EXTEND)]
    for seg in states:
        for nxt in Category:
            decision = seg.boundary_before(nxt)
            assert isinstance(decision, Decision)
            if not decision.certain:
                assert decision.found is False
