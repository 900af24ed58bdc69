"""
Diagnostic Models
=================
Pydantic models for editor diagnostics and the quick-fix actions built on them.

Diagnostic fields:
    start_line / start_character — 0-based range start
    end_line / end_character     — 0-based range end (inclusive position)
    severity                     — 0 Error, 1 Warning, 2 Information, 3 Hint
    message                      — diagnostic text shown to the agent
    source                       — optional producer name (eslint, pylint, ...)
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class DiagnosticSeverity:
    """Editor severity codes."""
    ERROR       = 0
    WARNING     = 1
    INFORMATION = 2
    HINT        = 3


class Diagnostic(BaseModel):
    start_line: int = Field(ge=0)
    start_character: int = Field(default=0, ge=0)
    end_line: int = Field(ge=0)
    end_character: int = Field(default=0, ge=0)
    severity: int = DiagnosticSeverity.ERROR
    message: str
    source: Optional[str] = None

    def contains(self, line: int, character: int) -> bool:
        """True if the 0-based position falls inside this diagnostic's range."""
        position = (line, character)
        return (
            (self.start_line, self.start_character)
            <= position
            <= (self.end_line, self.end_character)
        )


class CodeAction(BaseModel):
    title: str = "Ask to Claude Code"
    kind: str = "quickfix"
    command: str = "cliagent-mention.askClaudeCode"
    command_title: str = "Ask Claude Code about this problem"
    is_preferred: bool = False
    diagnostics: List[Diagnostic] = []
