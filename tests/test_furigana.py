"""
Tests for furigana.py - bracket transcription segmenter.
"""

import pytest

from kanjistudy.furigana import segment, segments_to_plain, segments_to_reading
from kanjistudy.models import Segment


class TestSegmentBasics:
    """Tests for the documented input/output pairs."""

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty_input(self, text):
        assert segment(text) == []

    def test_annotated_then_plain(self):
        assert segment("[電車|でんしゃ]に乗る") == [
            Segment(text="電車", reading="でんしゃ"),
            Segment(text="に乗る"),
        ]

    def test_plain_only(self):
        result = segment("plain text only")
        assert result == [Segment(text="plain text only")]
        assert result[0].reading is None

    def test_empty_annotation_keeps_base(self):
        assert segment("[X|]") == [Segment(text="X", reading="")]

    def test_empty_base_is_dropped(self):
        assert segment("[|Y]") == []

    def test_blank_base_is_dropped(self):
        assert segment("[  |Y]に") == [Segment(text="に")]


class TestSegmentGrammar:
    """Tests for token classification edge cases."""

    def test_extra_pipes_collapse_into_reading(self):
        assert segment("[日|に|ち]") == [Segment(text="日", reading="にち")]

    def test_whitespace_runs_are_dropped(self):
        assert segment("[電|でん] [車|しゃ]") == [
            Segment(text="電", reading="でん"),
            Segment(text="車", reading="しゃ"),
        ]

    def test_plain_run_keeps_inner_whitespace(self):
        assert segment(" a b ") == [Segment(text=" a b ")]

    def test_unterminated_bracket_is_skipped(self):
        assert segment("[abc") == [Segment(text="abc")]

    def test_stray_closing_bracket_is_skipped(self):
        assert segment("a]b") == [Segment(text="a"), Segment(text="b")]

    def test_bracket_without_pipe_is_skipped(self):
        assert segment("[abc]def") == [Segment(text="abc"), Segment(text="def")]

    def test_multiple_annotations(self):
        result = segment("[今日|きょう]は[天気|てんき]がいい")
        assert [s.text for s in result] == ["今日", "は", "天気", "がいい"]
        assert [s.reading for s in result] == ["きょう", None, "てんき", None]

    def test_never_raises_on_junk(self):
        for junk in ["[", "]", "[|]", "||", "[[[|]]]", "\n\t", "[a|b", "|]["]:
            assert isinstance(segment(junk), list)

    def test_same_input_same_output(self):
        text = "[電車|でんしゃ]に[乗|の]る"
        assert segment(text) == segment(text)


class TestRoundTrip:
    """Concatenated texts reproduce the sentence without annotation syntax."""

    @pytest.mark.parametrize("text, plain", [
        ("[今日|きょう]は[天気|てんき]がいい", "今日は天気がいい"),
        ("[電車|でんしゃ]に[乗|の]る", "電車に乗る"),
        ("彼は[学生|がく|せい]です", "彼は学生です"),
        ("no annotations", "no annotations"),
    ])
    def test_plain_text(self, text, plain):
        assert segments_to_plain(segment(text)) == plain

    def test_reading(self):
        segments = segment("[電車|でんしゃ]に[乗|の]る")
        assert segments_to_reading(segments) == "でんしゃにのる"


class TestSegmentSerialization:
    """Tests for Segment.to_dict()."""

    def test_plain_segment_omits_reading(self):
        assert Segment(text="に乗る").to_dict() == {"text": "に乗る"}

    def test_annotated_segment(self):
        assert Segment(text="電車", reading="でんしゃ").to_dict() == {
            "text": "電車",
            "reading": "でんしゃ",
        }

    def test_empty_reading_is_kept(self):
        assert Segment(text="X", reading="").to_dict() == {"text": "X", "reading": ""}
