"""Tests for chunk-fed segmentation and whole-buffer equivalence."""

import pytest

from graphseg.segmentation.driver import next_boundary, split_graphemes
from graphseg.segmentation.stream import StreamSegmenter

pytestmark = pytest.mark.unit

ACUTE = "\N{COMBINING ACUTE ACCENT}"
ZWJ = "\N{ZERO WIDTH JOINER}"
RI_F = "\N{REGIONAL INDICATOR SYMBOL LETTER F}"
RI_R = "\N{REGIONAL INDICATOR SYMBOL LETTER R}"
FAMILY = "\N{MAN}" + ZWJ + "\N{WOMAN}" + ZWJ + "\N{BOY}"

SAMPLES = [
    "",
    "plain ascii",
    "e" + ACUTE + "te" + ACUTE,
    "line one\r\nline two\nline three\r",
    RI_F + RI_R + RI_F + RI_R + RI_F,
    FAMILY + " and " + "\N{THUMBS UP SIGN}\N{EMOJI MODIFIER FITZPATRICK TYPE-5}",
    "\N{HANGUL CHOSEONG KIYEOK}\N{HANGUL JUNGSEONG A}\N{HANGUL JONGSEONG KIYEOK}\N{HANGUL SYLLABLE GA}",
    "\N{DEVANAGARI LETTER KA}\N{DEVANAGARI SIGN VIRAMA}\N{DEVANAGARI LETTER SSA}\N{DEVANAGARI VOWEL SIGN I}",
    "\x00\x01\t" + ACUTE + "\N{EURO SIGN}3",
]


def feed_all(segmenter, pieces):
    clusters = []
    for piece in pieces:
        clusters.extend(segmenter.feed(piece))
    clusters.extend(segmenter.close())
    return clusters


class TestStreamSegmenter:
    """Test incremental feeding."""

    def test_holds_back_undecided_cluster(self):
        seg = StreamSegmenter()
        assert seg.feed("a") == []
        assert seg.pending == "a"
        assert seg.feed(ACUTE + "b") == ["a" + ACUTE]
        assert seg.pending == "b"
        assert seg.close() == ["b"]

    def test_crlf_across_chunks(self):
        seg = StreamSegmenter()
        assert seg.feed("x\r") == ["x"]
        assert seg.feed("\n") == ["\r\n"]
        assert seg.close() == []

    def test_flag_across_chunks(self):
        seg = StreamSegmenter()
        assert seg.feed(RI_F) == []
        assert seg.feed(RI_R + RI_F) == [RI_F + RI_R]
        assert seg.close() == [RI_F]

    def test_bytes_split_inside_code_point(self):
        seg = StreamSegmenter(binary=True)
        euro = "\N{EURO SIGN}".encode("utf-8")
        assert seg.feed(euro[:2]) == []
        assert seg.feed(euro[2:] + b"3") == [euro]
        assert seg.close() == [b"3"]

    def test_line_feed_not_held_for_partial_code_point(self):
        seg = StreamSegmenter(binary=True)
        assert seg.feed(b"x\n\xe2\x82") == [b"x", b"\n"]
        assert seg.pending == b"\xe2\x82"
        assert seg.feed(b"\xac") == []
        assert seg.close() == ["\N{EURO SIGN}".encode("utf-8")]

    def test_many_clusters_in_one_chunk(self):
        seg = StreamSegmenter()
        assert seg.feed("abc" * 1000) == list("abc" * 1000)[:-1]
        assert seg.pending == "c"

    def test_close_is_final(self):
        seg = StreamSegmenter()
        seg.feed("ab")
        assert seg.close() == ["b"]
        assert seg.close() == []
        with pytest.raises(RuntimeError):
            seg.feed("c")

    def test_rejects_mixed_chunk_types(self):
        with pytest.raises(TypeError):
            StreamSegmenter().feed(b"a")
        with pytest.raises(TypeError):
            StreamSegmenter(binary=True).feed("a")


class TestStreamingEquivalence:
    """Feeding prefixes must find the same boundaries as the whole buffer."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_one_code_point_at_a_time(self, text):
        assert feed_all(StreamSegmenter(), list(text)) == split_graphemes(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_one_byte_at_a_time(self, text):
        data = text.encode("utf-8")
        pieces = [data[i : i + 1] for i in range(len(data))]
        expected = [c.encode("utf-8") for c in split_graphemes(text)]
        assert feed_all(StreamSegmenter(binary=True), pieces) == expected

    @pytest.mark.parametrize("text", SAMPLES)
    def test_growing_buffer_retry(self, text):
        """Retry next_boundary with a longer prefix until it is decided."""
        boundaries = []
        start = 0
        end = start
        while start < len(text):
            end = max(end, start + 1)
            at_eof = end >= len(text)
            found = next_boundary(text[start:end], at_eof)
            if found is None:
                end += 1
                continue
            start += found
            boundaries.append(start)

        whole = []
        offset = 0
        for cluster in split_graphemes(text):
            offset += len(cluster)
            whole.append(offset)
        assert boundaries == whole


class TestProperties:
    """Invariants over the sample texts."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_concatenation(self, text):
        clusters = split_graphemes(text)
        assert "".join(clusters) == text
        assert all(clusters)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_offsets_strictly_increase(self, text):
        offsets = []
        rest = text
        consumed = 0
        while rest:
            step = next_boundary(rest, True)
            assert step and step > 0
            consumed += step
            offsets.append(consumed)
            rest = text[consumed:]
        assert offsets == sorted(set(offsets))
        assert not offsets or offsets[-1] == len(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_first_cluster_idempotent(self, text):
        from graphseg.segmentation.driver import first_grapheme_cluster

        first = first_grapheme_cluster(text)
        assert first_grapheme_cluster(first) == first
