"""标记解析器测试"""

import dataclasses

import pytest

from tutor_markup.formatting import (
    MarkerName,
    Segment,
    SegmentMetadata,
    SegmentType,
    parse_formatted_content,
    sanitize,
    segment,
)
from tutor_markup.formatting.segmenter import PAYLOAD_RESOLVERS, resolve_marker


def _types(segments):
    return [s.type for s in segments]


class TestSimpleMarkers:
    """普通标记"""

    def test_note_between_text(self):
        segments = parse_formatted_content("A [NOTE:hello world] B")
        assert segments == (
            Segment(SegmentType.TEXT, "A "),
            Segment(SegmentType.NOTE, "hello world"),
            Segment(SegmentType.TEXT, " B"),
        )

    def test_payload_is_trimmed(self):
        segments = parse_formatted_content("[TIP:   practice daily  ]")
        assert segments == (Segment(SegmentType.TIP, "practice daily"),)

    @pytest.mark.parametrize("marker", list(MarkerName))
    def test_every_marker_name_is_recognized(self, marker):
        segments = parse_formatted_content(f"[{marker.value}:alpha|beta]")
        assert len(segments) == 1
        assert segments[0].type is marker.segment_type

    def test_marker_name_is_case_insensitive(self):
        segments = parse_formatted_content("[grammar_point:ser vs estar]")
        assert segments == (Segment(SegmentType.GRAMMAR_POINT, "ser vs estar"),)

    def test_multiline_payload(self):
        segments = parse_formatted_content("[NOTE:line one\nline two]")
        assert segments == (Segment(SegmentType.NOTE, "line one\nline two"),)

    def test_markdown_inside_payload_is_cleaned(self):
        segments = parse_formatted_content("[IMPORTANT:**always** conjugate]")
        assert segments == (Segment(SegmentType.IMPORTANT, "always conjugate"),)


class TestCompoundMarkers:
    """复合标记（`head|tail`）"""

    def test_translation_split(self):
        segments = parse_formatted_content("[TRANSLATION:es|Hola amigo]")
        assert len(segments) == 1
        seg = segments[0]
        assert seg.type is SegmentType.TRANSLATION
        assert seg.content == "Hola amigo"
        assert seg.metadata == SegmentMetadata(language="es")

    def test_vocab_word_keeps_pipes_in_content(self):
        segments = parse_formatted_content("[VOCAB_WORD:run|to move|quickly]")
        assert segments[0].metadata.word == "run"
        assert segments[0].content == "to move|quickly"

    def test_compound_parts_are_trimmed(self):
        segments = parse_formatted_content("[STORY_ELEMENT: plot | The hero leaves ]")
        assert segments == (
            Segment(SegmentType.STORY_ELEMENT, "The hero leaves", SegmentMetadata(category="plot")),
        )

    def test_translation_without_separator_is_dropped(self):
        segments = parse_formatted_content("Say [TRANSLATION:Hola] now")
        assert segments == (
            Segment(SegmentType.TEXT, "Say "),
            Segment(SegmentType.TEXT, " now"),
        )

    def test_vocab_word_without_separator_is_dropped(self):
        segments = parse_formatted_content("x [VOCAB_WORD:run] y")
        assert SegmentType.VOCAB_WORD not in _types(segments)

    def test_essay_section_without_separator_falls_back(self):
        segments = parse_formatted_content("[ESSAY_SECTION:Intro paragraph]")
        assert segments == (Segment(SegmentType.ESSAY_SECTION, "Intro paragraph"),)
        assert segments[0].metadata is None

    def test_story_element_without_separator_falls_back(self):
        segments = parse_formatted_content("[STORY_ELEMENT:The hero leaves home]")
        assert segments == (Segment(SegmentType.STORY_ELEMENT, "The hero leaves home"),)
        assert segments[0].metadata is None

    def test_translation_with_empty_text_is_kept(self):
        segments = parse_formatted_content("[TRANSLATION:fr|]")
        assert segments == (Segment(SegmentType.TRANSLATION, "", SegmentMetadata(language="fr")),)


class TestTextSpans:
    """标记之间的文本间隔"""

    def test_whitespace_gap_without_newline_is_dropped(self):
        segments = parse_formatted_content("[NOTE:a] [TIP:b]")
        assert _types(segments) == [SegmentType.NOTE, SegmentType.TIP]

    def test_whitespace_gap_with_newline_is_kept(self):
        segments = parse_formatted_content("[NOTE:a]\n[TIP:b]")
        assert segments == (
            Segment(SegmentType.NOTE, "a"),
            Segment(SegmentType.TEXT, "\n"),
            Segment(SegmentType.TIP, "b"),
        )

    def test_text_order_is_preserved(self):
        raw = "Hi [ERROR:goed] there [CORRECTION:went] ok"
        segments = parse_formatted_content(raw)
        texts = "".join(s.content for s in segments if s.type is SegmentType.TEXT)
        assert texts == "Hi  there  ok"
        assert _types(segments) == [
            SegmentType.TEXT,
            SegmentType.ERROR,
            SegmentType.TEXT,
            SegmentType.CORRECTION,
            SegmentType.TEXT,
        ]


class TestDegradedInput:
    """异常输入：不抛异常，按规则降级"""

    def test_empty_marker_falls_back_to_whole_text(self):
        segments = parse_formatted_content("[TIP:]")
        assert segments == (Segment(SegmentType.TEXT, "[TIP:]"),)

    def test_empty_marker_is_dropped_between_text(self):
        segments = parse_formatted_content("Start [NOTE:   ] end")
        assert segments == (
            Segment(SegmentType.TEXT, "Start "),
            Segment(SegmentType.TEXT, " end"),
        )

    def test_unterminated_marker_is_literal(self):
        segments = parse_formatted_content("Look [NOTE:unfinished")
        assert segments == (Segment(SegmentType.TEXT, "Look [NOTE:unfinished"),)

    def test_unknown_marker_is_literal(self):
        segments = parse_formatted_content("[FOO:bar]")
        assert segments == (Segment(SegmentType.TEXT, "[FOO:bar]"),)

    def test_markers_do_not_nest(self):
        segments = parse_formatted_content("[NOTE:a [TIP:b] c]")
        assert segments == (
            Segment(SegmentType.NOTE, "a [TIP:b"),
            Segment(SegmentType.TEXT, " c]"),
        )

    @pytest.mark.parametrize("raw", ["", "   ", "\n", "[TIP:]", "[TRANSLATION:x]", "plain", "[NOTE:a]"])
    def test_result_is_never_empty(self, raw):
        assert len(parse_formatted_content(raw)) >= 1

    def test_empty_string(self):
        assert parse_formatted_content("") == (Segment(SegmentType.TEXT, ""),)

    def test_whitespace_only_input_is_returned_verbatim(self):
        assert parse_formatted_content("   ") == (Segment(SegmentType.TEXT, "   "),)


class TestSegmentModel:
    """片段模型与解析器注册表"""

    def test_every_marker_has_resolver(self):
        assert set(PAYLOAD_RESOLVERS) == set(MarkerName)

    def test_marker_maps_to_segment_type(self):
        for marker in MarkerName:
            assert marker.segment_type.value == marker.value.lower()

    def test_from_wire_is_case_insensitive(self):
        assert MarkerName.from_wire("vocab_word") is MarkerName.VOCAB_WORD

    def test_resolve_marker_drops_blank_payload(self):
        assert resolve_marker("NOTE", "  ") is None

    def test_segments_are_immutable(self):
        segments = parse_formatted_content("[NOTE:x]")
        assert isinstance(segments, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            segments[0].content = "changed"

    def test_segment_to_dict(self):
        seg = parse_formatted_content("[TRANSLATION:es|Hola amigo]")[0]
        assert seg.to_dict() == {
            "type": "translation",
            "content": "Hola amigo",
            "metadata": {"language": "es"},
        }

    def test_text_segment_to_dict_has_no_metadata(self):
        assert Segment(SegmentType.TEXT, "hi").to_dict() == {"type": "text", "content": "hi"}

    def test_segment_expects_sanitized_input(self):
        raw = "**Nice** [NOTE:x]"
        assert segment(sanitize(raw)) == parse_formatted_content(raw)
        assert segment(raw)[0].content == "**Nice** "
