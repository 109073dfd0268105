"""Pydantic request models for API endpoints."""

from typing import Literal

from pydantic import BaseModel

from field_codex.models import Category


class SelectCategory(BaseModel):
    category: Category


class SelectEntry(BaseModel):
    category: Category
    id: str


class SearchBody(BaseModel):
    query: str = ""


class OpenTool(BaseModel):
    tool: Literal["destiny"] = "destiny"


class KeyPress(BaseModel):
    key: str


class UnlockBody(BaseModel):
    id: str
    unlocked: bool


class DestinyActionBody(BaseModel):
    action: Literal["add", "remove", "flip", "reset"]
    side: Literal["light", "dark"] | None = None
    to_side: Literal["light", "dark"] | None = None


class UpdateSettings(BaseModel):
    title: str | None = None
    gm_shortcut: str | None = None
    log_time_format: str | None = None
