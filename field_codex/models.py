"""Core domain models.

Loader, resolver, destiny pool and navigation all operate on these types.
Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

CATEGORIES: tuple[str, ...] = (
    "planets",
    "characters",
    "vehicles",
    "items",
    "factions",
    "missions",
    "threats",
)

Category = Literal[
    "planets",
    "characters",
    "vehicles",
    "items",
    "factions",
    "missions",
    "threats",
]

Side = Literal["light", "dark"]

ToolId = Literal["destiny"]


class Entry(BaseModel):
    """One codex record, as loaded from ``entries/<category>/<file>.json``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str
    description: str = ""
    image: str | None = None
    gm_mode: bool = Field(default=False, alias="gmMode")
    category: str

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("gm_mode", mode="before")
    @classmethod
    def _truthy_gm_mode(cls, value: Any) -> bool:
        # Any non-empty string counts, "false" included
        if isinstance(value, float) and math.isnan(value):
            return False
        return bool(value)


class DestinyPoolState(BaseModel):
    """Light/dark destiny token counts."""

    light: int = Field(default=0, ge=0)
    dark: int = Field(default=0, ge=0)


# ---------------------------------------------------------------------------
# Navigation: exactly one mode is active at a time
# ---------------------------------------------------------------------------

class Idle(BaseModel):
    """Home screen, nothing selected."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["idle"] = "idle"


class Browsing(BaseModel):
    """A category list, optionally with one entry opened in detail."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["browsing"] = "browsing"
    category: Category
    entry_id: str | None = None


class Searching(BaseModel):
    """Cross-category search results (no category selected)."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["searching"] = "searching"
    query: str = ""


class ToolOpen(BaseModel):
    """A GM tool panel."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["tool"] = "tool"
    tool: ToolId = "destiny"


NavigationState = Annotated[
    Union[Idle, Browsing, Searching, ToolOpen],
    Field(discriminator="mode"),
]


class AppState(BaseModel):
    """Everything a render needs to know about the current UI session.

    GM mode lives here and only here: it is never persisted.
    """

    model_config = ConfigDict(frozen=True)

    nav: NavigationState = Field(default_factory=Idle)
    is_gm: bool = False
    query: str = ""  # raw search-field text
