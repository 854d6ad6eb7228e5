"""Markdown 清理流水线测试

逐个验证清理步骤，再验证整条流水线的顺序与组合效果。
"""

from tutor_markup.formatting.sanitizer import (
    MARKDOWN_CLEANUP_STEPS,
    clean_markdown,
    collapse_newlines,
    remove_code_blocks,
    sanitize,
    strip_blockquotes,
    strip_bullets,
    strip_headers,
    strip_horizontal_rules,
    strip_numbered,
    unwrap_bold,
    unwrap_inline_code,
    unwrap_italic,
    unwrap_strikethrough,
)


class TestCleanupSteps:
    """单个清理步骤"""

    def test_strip_headers_keeps_text(self):
        assert strip_headers("# Title\nbody") == "Title\nbody"
        assert strip_headers("###### Deep") == "Deep"

    def test_strip_headers_only_at_line_start(self):
        assert strip_headers("a # b") == "a # b"
        # 超过 6 个 # 不算标题
        assert strip_headers("####### Seven") == "####### Seven"

    def test_unwrap_bold(self):
        assert unwrap_bold("**bold** and __strong__") == "bold and strong"

    def test_unwrap_italic(self):
        assert unwrap_italic("*a* and _b_") == "a and b"

    def test_unwrap_italic_leaves_bold_delimiters(self):
        assert unwrap_italic("**x**") == "**x**"
        assert unwrap_italic("__x__") == "__x__"

    def test_strip_bullets(self):
        assert strip_bullets("- one\n* two\n+ three\n• four") == "one\ntwo\nthree\nfour"

    def test_strip_bullets_requires_space(self):
        assert strip_bullets("-5 degrees") == "-5 degrees"

    def test_strip_numbered(self):
        assert strip_numbered("1. first\n10. tenth") == "first\ntenth"
        assert strip_numbered("Version 1. stable") == "Version 1. stable"

    def test_strip_blockquotes(self):
        assert strip_blockquotes("> quoted\nplain") == "quoted\nplain"

    def test_strip_horizontal_rules_blanks_line(self):
        assert strip_horizontal_rules("above\n---\nbelow") == "above\n\nbelow"
        assert strip_horizontal_rules("above\n*****\nbelow") == "above\n\nbelow"
        assert strip_horizontal_rules("a -- b") == "a -- b"

    def test_remove_code_blocks_discards_content(self):
        text = "before\n```python\nprint(1)\n```\nafter"
        assert remove_code_blocks(text) == "before\n\nafter"

    def test_unwrap_inline_code(self):
        assert unwrap_inline_code("use `ser` here") == "use ser here"

    def test_unwrap_strikethrough(self):
        assert unwrap_strikethrough("~~old~~ new") == "old new"

    def test_collapse_newlines(self):
        assert collapse_newlines("a\n\n\n\nb") == "a\n\nb"
        assert collapse_newlines("a\n\nb") == "a\n\nb"


class TestCleanupPipeline:
    """整条流水线"""

    def test_step_order(self):
        names = [name for name, _ in MARKDOWN_CLEANUP_STEPS]
        assert names == [
            "headers",
            "bold",
            "italic",
            "bullets",
            "numbered",
            "blockquotes",
            "horizontal_rules",
            "code_blocks",
            "inline_code",
            "strikethrough",
            "newlines",
        ]

    def test_markdown_defense(self):
        assert sanitize("**bold** and _ital_\n# Heading") == "bold and ital\nHeading"

    def test_inline_hash_is_not_a_header(self):
        assert sanitize("**bold** and _ital_ and # Heading") == "bold and ital and # Heading"

    def test_combined_document(self):
        text = "# Title\n\n- **one**\n- two\n\n\n\n> quote"
        assert clean_markdown(text) == "Title\n\none\ntwo\n\nquote"

    def test_plain_text_passes_through(self):
        text = "Hola! [NOTE:keep me] como estas?"
        assert sanitize(text) == text

    def test_empty_string(self):
        assert sanitize("") == ""
