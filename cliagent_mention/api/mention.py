"""
POST /mention
=============
Builds a mention for the active file relative to the terminal's working
directory.

Routes:
    POST /mention            — format given in the body
    POST /mention/{format}   — codex / claude_code / custom shortcut

The returned text is meant to be typed into the terminal WITHOUT pressing
Enter; it always ends with a single space.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from cliagent_mention.core.mention_formatter import validate_mention_format
from cliagent_mention.models.selection import EditorSelection
from cliagent_mention.services.config_store import config_store
from cliagent_mention.services.mention_service import build_mention

router = APIRouter(tags=["Mention"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class MentionTarget(BaseModel):
    terminal_cwd: Optional[str] = None
    file_path: Optional[str] = None
    selection: Optional[EditorSelection] = None


class MentionRequest(MentionTarget):
    format: str

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        validate_mention_format(v)
        return v


class MentionResponse(BaseModel):
    mention: str
    relative_path: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
def _mention(target: MentionTarget, mode: str) -> MentionResponse:
    outcome = build_mention(
        target.terminal_cwd,
        target.file_path,
        target.selection,
        mode,
        config_store.current(),
    )
    if not outcome.ok:
        raise HTTPException(status_code=400, detail=outcome.reason)
    return MentionResponse(
        mention=outcome.text,
        relative_path=outcome.relative_path,
    )


@router.post("/mention", response_model=MentionResponse)
def create_mention(request: MentionRequest):
    return _mention(request, request.format)


@router.post("/mention/{mention_format}", response_model=MentionResponse)
def create_mention_for_format(mention_format: str, target: MentionTarget):
    try:
        validate_mention_format(mention_format)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _mention(target, mention_format)
