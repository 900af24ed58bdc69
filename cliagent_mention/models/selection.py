"""
Selection Models
================
Line ranges attached to a mention.

Two coordinate systems meet here:
    EditorSelection — 0-based line/character positions as reported by the editor
    LineRange       — 1-based inclusive line numbers as written into a mention

EditorSelection.to_line_range() is the only conversion point between them.
"""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class LineRange:
    """
    Immutable 1-based inclusive line selection.

    Fields
    ------
    start_line : int
        First selected line, >= 1.
    end_line : int
        Last selected line, >= start_line.
    """
    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if self.start_line < 1 or self.end_line < 1:
            raise ValueError(
                f"line numbers must be >= 1, got {self.start_line}-{self.end_line}"
            )
        if self.start_line > self.end_line:
            raise ValueError(
                f"start_line must be <= end_line, got {self.start_line}-{self.end_line}"
            )


class EditorSelection(BaseModel):
    start_line: int = Field(ge=0)
    start_character: int = Field(default=0, ge=0)
    end_line: int = Field(ge=0)
    end_character: int = Field(default=0, ge=0)

    @property
    def is_empty(self) -> bool:
        return (
            self.start_line == self.end_line
            and self.start_character == self.end_character
        )

    def to_line_range(self) -> Optional[LineRange]:
        """1-based LineRange for a non-empty selection, None for a bare cursor."""
        if self.is_empty:
            return None
        start, end = sorted((self.start_line, self.end_line))
        return LineRange(start_line=start + 1, end_line=end + 1)
