"""
Quick Fix Formatter
===================
Renders an editor diagnostic as an "Ask to Claude Code" prompt block.

OUTPUT (byte-for-byte):
    {quick_fix_prompt}
    <blank line>
    @{file_path}#L{start}[-{end}]
    {Severity}: {message}

Unlike the mention formatter, the "@" and "#L" markers here are fixed and
never follow the configured prefix/suffix strings.  No trailing newline is
appended so the block is not submitted when typed into the terminal.
"""
from cliagent_mention.core.mention_formatter import claude_code_line_suffix
from cliagent_mention.models.diagnostic import Diagnostic, DiagnosticSeverity

QUICK_FIX_MENTION_PREFIX = "@"

SEVERITY_LABELS: dict[int, str] = {
    DiagnosticSeverity.ERROR:       "Error",
    DiagnosticSeverity.WARNING:     "Warning",
    DiagnosticSeverity.INFORMATION: "Information",
    DiagnosticSeverity.HINT:        "Hint",
}


def severity_label(severity: int) -> str:
    """Human-readable severity name; "Unknown" for unrecognised codes."""
    return SEVERITY_LABELS.get(severity, "Unknown")


def format_diagnostic_mention(file_path: str, start_line: int, end_line: int) -> str:
    """``@src/app.py#L10`` or ``@src/app.py#L10-15`` from 1-based lines."""
    return f"{QUICK_FIX_MENTION_PREFIX}{file_path}{claude_code_line_suffix(start_line, end_line)}"


def format_quick_fix(prompt: str, file_path: str, diagnostic: Diagnostic) -> str:
    """
    Build the full quick-fix block for one diagnostic.

    Parameters
    ----------
    prompt : str
        Configured quick-fix prompt (first line of the block).
    file_path : str
        Workspace-relative path, or the absolute path outside a workspace.
    diagnostic : Diagnostic
        Diagnostic with a 0-based range; converted to 1-based lines here.
    """
    mention = format_diagnostic_mention(
        file_path,
        diagnostic.start_line + 1,
        diagnostic.end_line + 1,
    )
    return f"{prompt}\n\n{mention}\n{severity_label(diagnostic.severity)}: {diagnostic.message}"
