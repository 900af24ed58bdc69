"""
Quick Fix Service
=================
"Ask to Claude Code" support for editor diagnostics.

Responsibilities:
    - One code action per diagnostic at the requested position
    - Locate the diagnostic under the cursor (command-palette entry point)
    - Build the quick-fix prompt block with a workspace-relative mention
"""
import logging
from typing import List, Optional

from cliagent_mention.core.quick_fix_formatter import format_quick_fix
from cliagent_mention.models.diagnostic import CodeAction, Diagnostic
from cliagent_mention.models.mention_config import MentionConfig
from cliagent_mention.utils.path_utils import workspace_relative_path

logger = logging.getLogger(__name__)

NO_DIAGNOSTIC_AT_CURSOR = "No diagnostic found at current cursor position"


def provide_code_actions(diagnostics: List[Diagnostic]) -> List[CodeAction]:
    """Create one "Ask to Claude Code" quick fix per diagnostic."""
    logger.info("Diagnostics count: %d", len(diagnostics))
    if not diagnostics:
        logger.warning("No diagnostics found at this position")
        return []

    actions = []
    for diagnostic in diagnostics:
        logger.info("Creating action for diagnostic: %s", diagnostic.message)
        actions.append(CodeAction(diagnostics=[diagnostic]))

    logger.info("Returning %d code actions", len(actions))
    return actions


def find_diagnostic_at(
    diagnostics: List[Diagnostic],
    line: int,
    character: int,
) -> Optional[Diagnostic]:
    """First diagnostic whose range contains the 0-based cursor position."""
    for diagnostic in diagnostics:
        if diagnostic.contains(line, character):
            logger.debug("Found diagnostic at cursor: %s", diagnostic.message)
            return diagnostic
    logger.warning("No diagnostic at cursor position")
    return None


def build_quick_fix_text(
    file_path: str,
    diagnostic: Diagnostic,
    config: MentionConfig,
    workspace_root: Optional[str] = None,
) -> str:
    """
    Quick-fix block for ``diagnostic`` in ``file_path``.

    The mention uses the workspace-relative path when the file is inside
    ``workspace_root``; otherwise the absolute path is used.
    """
    mention_path = workspace_relative_path(file_path, workspace_root)
    logger.debug(
        "Diagnostic range: %d-%d", diagnostic.start_line, diagnostic.end_line
    )
    text = format_quick_fix(config.quick_fix_prompt, mention_path, diagnostic)
    logger.info("Quick fix text: %s", text)
    return text
