"""Tests for conformance fixture generation and checking."""

import json

import pytest
from pydantic import ValidationError

from graphseg.ucd.conformance import check_cases, describe
from graphseg.ucd.gentest import (
    ConformanceCase,
    dump_cases,
    load_cases,
    parse_break_test,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def sample_cases(break_test_file):
    return parse_break_test(break_test_file.read_text(encoding="utf-8").splitlines())


class TestParseBreakTest:
    """Test parsing of the UCD break test format."""

    def test_sample_file(self, sample_cases):
        assert len(sample_cases) == 22

    def test_clusters(self):
        cases = parse_break_test(["÷ 000D × 000A ÷ 0061 × 0308 ÷\t# comment"])
        assert cases[0].input == "\r\na\N{COMBINING DIAERESIS}"
        assert cases[0].clusters == ["\r\n", "a\N{COMBINING DIAERESIS}"]
        assert cases[0].line == 1

    def test_surrogates_skipped(self, sample_cases):
        assert all("\ud800" not in c.input for c in sample_cases)

    def test_invalid_hex_skipped(self):
        assert parse_break_test(["÷ 00GG ÷", "÷ 0041 ÷"])[0].line == 2

    def test_comment_lines_skipped(self):
        assert parse_break_test(["# only a comment", "", "#EOF"]) == []


class TestConformanceCase:
    """Test the fixture model."""

    def test_clusters_must_cover_input(self):
        with pytest.raises(ValidationError):
            ConformanceCase(input="abc", clusters=["a", "b"])

    def test_empty_cluster_rejected(self):
        with pytest.raises(ValidationError):
            ConformanceCase(input="ab", clusters=["a", "", "b"])

    def test_json_round_trip(self, sample_cases, tmp_path):
        path = tmp_path / "fixtures.json"
        path.write_text(dump_cases(sample_cases), encoding="utf-8")
        assert load_cases(path) == sample_cases

    def test_dump_is_ascii_json(self, sample_cases):
        text = dump_cases(sample_cases[:3])
        assert text.isascii()
        assert json.loads(text)[0] == {"input": "  ", "clusters": [" ", " "], "line": 10}


class TestConformance:
    """Run the sample fixtures through the segmenter."""

    def test_sample_passes(self, sample_cases):
        assert check_cases(sample_cases) == []

    def test_reports_mismatch(self):
        wrong = ConformanceCase(input="ab", clusters=["ab"], line=5)
        failures = check_cases([wrong])
        assert len(failures) == 1
        assert failures[0].got == ["a", "b"]
        assert failures[0].line == 5

    def test_describe(self):
        assert describe(["a\N{COMBINING DIAERESIS}", "b"]) == "÷ 0061 × 0308 ÷ 0062 ÷"
        assert describe([]) == "÷"


class TestPairConformance:
    """Every pair of property values, with and without an Extend between."""

    @pytest.fixture
    def pair_cases(self, pair_test_file):
        return parse_break_test(pair_test_file.read_text(encoding="utf-8").splitlines())

    def test_all_pairs_loaded(self, pair_cases):
        # 20 samples squared, twice; pairs with a surrogate are dropped.
        assert len(pair_cases) == 722

    def test_every_property_value_present(self, pair_cases):
        from graphseg.segmentation.categories import PROPERTY_NAMES, Category
        from graphseg.segmentation.classify import classify

        seen = {classify(ord(c)) for case in pair_cases for c in case.input}
        expected = {Category.from_property(name) for name in PROPERTY_NAMES}
        assert expected <= seen

    def test_all_pairs_pass(self, pair_cases):
        failures = check_cases(pair_cases)
        assert [(f.line, describe(f.got)) for f in failures] == []

    def test_all_pairs_pass_from_json(self, pair_cases, tmp_path):
        path = tmp_path / "pairs.json"
        path.write_text(dump_cases(pair_cases), encoding="utf-8")
        assert check_cases(load_cases(path)) == []
