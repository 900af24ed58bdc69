"""
Quick Fix API
=============
"Ask to Claude Code" endpoints for editor diagnostics.

Routes:
    POST /code-actions         — one quick-fix action per diagnostic
    POST /quick-fix            — prompt block for a known diagnostic (from a quick fix)
    POST /quick-fix/at-cursor  — prompt block for the diagnostic under the cursor
                                 (from the command palette)
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from cliagent_mention.models.diagnostic import CodeAction, Diagnostic
from cliagent_mention.services.config_store import config_store
from cliagent_mention.services.quick_fix_service import (
    NO_DIAGNOSTIC_AT_CURSOR,
    build_quick_fix_text,
    find_diagnostic_at,
    provide_code_actions,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Quick Fix"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------
class CodeActionsRequest(BaseModel):
    diagnostics: List[Diagnostic] = []


class CodeActionsResponse(BaseModel):
    actions: List[CodeAction]


class QuickFixRequest(BaseModel):
    file_path: str
    workspace_root: Optional[str] = None
    diagnostic: Diagnostic


class QuickFixAtCursorRequest(BaseModel):
    file_path: str
    workspace_root: Optional[str] = None
    diagnostics: List[Diagnostic] = []
    line: int = Field(ge=0)
    character: int = Field(default=0, ge=0)


class QuickFixResponse(BaseModel):
    text: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
@router.post("/code-actions", response_model=CodeActionsResponse)
def code_actions(request: CodeActionsRequest):
    return CodeActionsResponse(actions=provide_code_actions(request.diagnostics))


@router.post("/quick-fix", response_model=QuickFixResponse)
def quick_fix(request: QuickFixRequest):
    logger.debug("Command called from Quick Fix")
    text = build_quick_fix_text(
        request.file_path,
        request.diagnostic,
        config_store.current(),
        request.workspace_root,
    )
    return QuickFixResponse(text=text)


@router.post("/quick-fix/at-cursor", response_model=QuickFixResponse)
def quick_fix_at_cursor(request: QuickFixAtCursorRequest):
    logger.debug("Command called from Command Palette")
    diagnostic = find_diagnostic_at(request.diagnostics, request.line, request.character)
    if diagnostic is None:
        raise HTTPException(status_code=404, detail=NO_DIAGNOSTIC_AT_CURSOR)
    text = build_quick_fix_text(
        request.file_path,
        diagnostic,
        config_store.current(),
        request.workspace_root,
    )
    return QuickFixResponse(text=text)
