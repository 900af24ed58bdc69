"""
Mention Service
===============
Turns the editor host's raw state into a mention string.

Pipeline:
    terminal cwd + active file → tag dialects → relativize → format

Unavailable input (no terminal cwd, no active file) is NOT an exception.
The outcome carries text=None and a reason the host shows to the user; the
relativization step is never reached.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from cliagent_mention.core.mention_formatter import format_mention
from cliagent_mention.models.mention_config import MentionConfig
from cliagent_mention.models.selection import EditorSelection
from cliagent_mention.utils.logging_config import TRACE
from cliagent_mention.utils.path_relativizer import relative_path_between

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# User-facing reasons
# ---------------------------------------------------------------------------
NO_TERMINAL_PATH = "Unable to get terminal path. Shell integration may not be available."
NO_ACTIVE_FILE = "No active text editor found. Please open a file and try again."
NO_RELATIVE_PATH = "Unable to compute relative path."


@dataclass(frozen=True)
class MentionOutcome:
    """Result of build_mention(): text on success, reason otherwise."""
    text: Optional[str] = None
    relative_path: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.text is not None


def build_mention(
    terminal_cwd: Optional[str],
    file_path: Optional[str],
    selection: Optional[EditorSelection],
    mode: str,
    config: MentionConfig,
) -> MentionOutcome:
    """
    Build the mention for the active file as seen from the terminal.

    Parameters
    ----------
    terminal_cwd : str | None
        Working directory reported by the terminal's shell integration.
    file_path : str | None
        Filesystem path of the active document.
    selection : EditorSelection | None
        0-based editor selection; empty selections add no line suffix.
    mode : str
        One of MENTION_FORMATS.
    config : MentionConfig
        Snapshot taken once for this request.

    Returns
    -------
    MentionOutcome
    """
    if not terminal_cwd:
        logger.info(NO_TERMINAL_PATH)
        return MentionOutcome(reason=NO_TERMINAL_PATH)
    if not file_path:
        logger.info(NO_ACTIVE_FILE)
        return MentionOutcome(reason=NO_ACTIVE_FILE)

    logger.debug("Current terminal path: %s", terminal_cwd)
    logger.debug("Active file path: %s", file_path)

    relative_path = relative_path_between(terminal_cwd, file_path)
    if not relative_path:
        logger.warning(NO_RELATIVE_PATH)
        return MentionOutcome(reason=NO_RELATIVE_PATH)
    logger.debug("Relative path from terminal to file: %s", relative_path)

    line_range = selection.to_line_range() if selection is not None else None
    text = format_mention(relative_path, line_range, mode, config)

    logger.debug("%s mentionedText: [%s]", mode, text)
    logger.log(TRACE, "Mention emitted: %s", text)
    return MentionOutcome(text=text, relative_path=relative_path)
