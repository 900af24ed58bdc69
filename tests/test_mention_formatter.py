"""
Unit Tests — Mention Formatter
==============================
Validates byte-perfect mention string generation for every format.
"""
import pytest
from cliagent_mention.core.mention_formatter import (
    MENTION_FORMATS,
    MentionFormat,
    claude_code_line_suffix,
    codex_line_suffix,
    custom_line_suffix,
    format_mention,
    line_suffix,
    validate_mention_format,
)
from cliagent_mention.models.mention_config import MentionConfig
from cliagent_mention.models.selection import LineRange


@pytest.fixture
def cfg():
    return MentionConfig()


# ---------------------------------------------------------------------------
# 1. Format constants
# ---------------------------------------------------------------------------
class TestFormatConstants:

    def test_all_formats_present(self):
        assert MENTION_FORMATS == {"claude_code", "codex", "custom"}

    def test_valid_formats_do_not_raise(self):
        for mode in MENTION_FORMATS:
            validate_mention_format(mode)

    def test_unknown_format_raises_value_error(self):
        with pytest.raises(ValueError, match="Unknown mention format"):
            validate_mention_format("cursor")

    def test_non_string_format_raises_type_error(self):
        with pytest.raises(TypeError):
            validate_mention_format(3)


# ---------------------------------------------------------------------------
# 2. Line suffixes
# ---------------------------------------------------------------------------
class TestLineSuffixes:

    def test_claude_code_single(self):
        assert claude_code_line_suffix(15, 15) == "#L15"

    def test_claude_code_range(self):
        assert claude_code_line_suffix(15, 30) == "#L15-30"

    def test_codex_single(self):
        assert codex_line_suffix(7, 7) == ":7"

    def test_codex_range(self):
        assert codex_line_suffix(7, 9) == ":7-9"

    def test_custom_single(self):
        assert custom_line_suffix(3, 3, "@L") == "@L3"

    def test_custom_range(self):
        assert custom_line_suffix(3, 4, "#L") == "#L3-4"

    def test_no_selection_is_empty(self, cfg):
        for mode in MENTION_FORMATS:
            assert line_suffix(None, mode, cfg) == ""

    def test_custom_uses_live_config_suffix(self):
        assert line_suffix(LineRange(2, 5), MentionFormat.CUSTOM, MentionConfig(suffix="~")) == "~2-5"

    def test_codex_ignores_config_suffix(self):
        assert line_suffix(LineRange(2, 5), MentionFormat.CODEX, MentionConfig(suffix="~")) == ":2-5"


# ---------------------------------------------------------------------------
# 3. format_mention()
# ---------------------------------------------------------------------------
class TestFormatMention:

    def test_codex_no_selection(self, cfg):
        assert format_mention("a/b.js", None, MentionFormat.CODEX, cfg) == "@a/b.js "

    def test_codex_single_line(self, cfg):
        assert format_mention("a/b.js", LineRange(15, 15), MentionFormat.CODEX, cfg) == "@a/b.js:15 "

    def test_claude_code_range(self, cfg):
        assert (
            format_mention("a/b.js", LineRange(15, 30), MentionFormat.CLAUDE_CODE, cfg)
            == "@a/b.js#L15-30 "
        )

    def test_claude_code_single_line(self, cfg):
        assert (
            format_mention("a/b.js", LineRange(4, 4), MentionFormat.CLAUDE_CODE, cfg)
            == "@a/b.js#L4 "
        )

    def test_custom_prefix_and_suffix(self):
        config = MentionConfig(prefix="#", suffix="#L")
        assert (
            format_mention("a/b.js", LineRange(15, 30), MentionFormat.CUSTOM, config)
            == "#a/b.js#L15-30 "
        )

    def test_prefix_applies_to_fixed_formats_too(self):
        config = MentionConfig(prefix="$")
        assert format_mention("x.py", LineRange(1, 2), MentionFormat.CODEX, config) == "$x.py:1-2 "

    def test_windows_relative_path_kept_verbatim(self, cfg):
        assert (
            format_mention("..\\..\\note.txt", None, MentionFormat.CLAUDE_CODE, cfg)
            == "@..\\..\\note.txt "
        )

    def test_exactly_one_trailing_space(self, cfg):
        result = format_mention("a.py", LineRange(1, 1), MentionFormat.CODEX, cfg)
        assert result.endswith(" ")
        assert not result.endswith("  ")

    def test_empty_prefix(self):
        assert format_mention("a.py", None, MentionFormat.CUSTOM, MentionConfig(prefix="")) == "a.py "
