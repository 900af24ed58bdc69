"""
Mention Formatter
=================
Builds the final mention text typed into an agent's terminal prompt.

DETERMINISM CONTRACT:
  - This module NEVER reads environment variables or the ConfigStore.
  - The MentionConfig snapshot is passed in by the caller.
  - Given the same inputs, it ALWAYS returns the exact same string.

OUTPUT (byte-for-byte):
    {prefix}{relative_path}{line_suffix}<space>

  The trailing space is always present so the cursor is ready for more
  typed input.  line_suffix is omitted entirely when there is no selection.

Line suffix grammar per format (single line / range):
    claude_code : #L15   / #L15-30
    codex       : :15    / :15-30
    custom      : {suffix}15 / {suffix}15-30
"""
from typing import Optional

from cliagent_mention.models.mention_config import MentionConfig
from cliagent_mention.models.selection import LineRange


# ---------------------------------------------------------------------------
# Mention Format Constants
# ---------------------------------------------------------------------------
class MentionFormat:
    """Supported mention formats."""
    CLAUDE_CODE = "claude_code"
    CODEX       = "codex"
    CUSTOM      = "custom"


MENTION_FORMATS: frozenset[str] = frozenset({
    MentionFormat.CLAUDE_CODE,
    MentionFormat.CODEX,
    MentionFormat.CUSTOM,
})

CLAUDE_CODE_LINE_MARKER = "#L"
CODEX_LINE_MARKER = ":"
MENTION_TERMINATOR = " "


def validate_mention_format(mode: str) -> None:
    """
    Raises ValueError if mode is not a recognised MENTION_FORMATS member.
    """
    if not isinstance(mode, str):
        raise TypeError(f"mode must be str, got {type(mode).__name__}")
    if mode not in MENTION_FORMATS:
        raise ValueError(
            f"Unknown mention format '{mode}'. "
            f"Allowed values: {sorted(MENTION_FORMATS)}"
        )


# ---------------------------------------------------------------------------
# Line Suffixes
# ---------------------------------------------------------------------------
def _line_span(marker: str, start_line: int, end_line: int) -> str:
    if start_line == end_line:
        return f"{marker}{start_line}"
    return f"{marker}{start_line}-{end_line}"


def claude_code_line_suffix(start_line: int, end_line: int) -> str:
    """``#L15`` or ``#L15-30``."""
    return _line_span(CLAUDE_CODE_LINE_MARKER, start_line, end_line)


def codex_line_suffix(start_line: int, end_line: int) -> str:
    """``:15`` or ``:15-30``."""
    return _line_span(CODEX_LINE_MARKER, start_line, end_line)


def custom_line_suffix(start_line: int, end_line: int, suffix: str) -> str:
    """Same shape as codex but with the configured suffix string as marker."""
    return _line_span(suffix, start_line, end_line)


def line_suffix(
    selection: Optional[LineRange],
    mode: str,
    config: MentionConfig,
) -> str:
    """
    Line-range suffix for ``mode``, or "" when there is no selection.

    Unknown modes fall back to the custom grammar.
    """
    if selection is None:
        return ""
    start, end = selection.start_line, selection.end_line
    if mode == MentionFormat.CLAUDE_CODE:
        return claude_code_line_suffix(start, end)
    if mode == MentionFormat.CODEX:
        return codex_line_suffix(start, end)
    return custom_line_suffix(start, end, config.suffix)


# ---------------------------------------------------------------------------
# Core Format Function
# ---------------------------------------------------------------------------
def format_mention(
    relative_path: str,
    selection: Optional[LineRange],
    mode: str,
    config: MentionConfig,
) -> str:
    """
    Assemble the mention text.

    Parameters
    ----------
    relative_path : str
        Path from the terminal working directory to the file.
    selection : LineRange | None
        1-based inclusive selection, or None for a whole-file mention.
    mode : str
        One of MENTION_FORMATS.
    config : MentionConfig
        Snapshot supplying prefix and (for custom mode) suffix.

    Returns
    -------
    str
        ``prefix + relative_path + line_suffix + " "``.

    Examples
    --------
    >>> format_mention("a/b.js", LineRange(15, 30), "claude_code", MentionConfig())
    '@a/b.js#L15-30 '
    """
    return (
        f"{config.prefix}{relative_path}"
        f"{line_suffix(selection, mode, config)}"
        f"{MENTION_TERMINATOR}"
    )
