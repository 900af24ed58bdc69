"""
GET / PUT /settings
===================
Runtime mention settings, keyed the way the editor host names them.

    prefixString    — text placed before every mention
    suffixString    — line separator used by the custom format
    quickFixPrompt  — first line of every quick-fix block
    logLevel        — off / trace / debug / info / warn / error

PUT applies a partial update and returns the new snapshot.  This replaces
the editor's configuration-change notification.
"""
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from cliagent_mention.services.config_store import config_store

router = APIRouter(tags=["Settings"])


class Settings(BaseModel):
    prefixString: str
    suffixString: str
    quickFixPrompt: str
    logLevel: str


class SettingsUpdate(BaseModel):
    prefixString: Optional[str] = None
    suffixString: Optional[str] = None
    quickFixPrompt: Optional[str] = None
    logLevel: Optional[str] = None


@router.get("/settings", response_model=Settings)
def get_settings():
    return Settings(**config_store.as_settings())


@router.put("/settings", response_model=Settings)
def update_settings(update: SettingsUpdate):
    updated = config_store.update(update.model_dump(exclude_none=True))
    return Settings(**config_store.as_settings(updated))
