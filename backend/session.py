"""The single UI session: current AppState plus the services it renders with.

Every event method swaps in a new AppState (see backend.navigation) and
returns the view for it. GM mode is held here in memory only; what persists
is its effects (entry unlocks, destiny pool).
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from field_codex.models import AppState, Browsing, Category, ToolId

from . import navigation
from .destiny import DestinyPool
from .entries import EntryRepository, UnknownCategoryError
from .storage.kv import KeyValueStore
from .storage.unlocks import set_unlocked
from .views import View, build_view

logger = logging.getLogger(__name__)

DestinyAction = Literal["add", "remove", "flip", "reset"]


class Session:
    def __init__(
        self,
        repository: EntryRepository,
        store: KeyValueStore,
        pool: DestinyPool,
        settings: dict[str, Any] | None = None,
    ) -> None:
        self.repository = repository
        self.store = store
        self.pool = pool
        self.settings = dict(settings or {})
        self.state = AppState()

    @property
    def title(self) -> str:
        return self.settings.get("title", "Field Codex")

    @property
    def shortcut(self) -> str:
        return self.settings.get("gm_shortcut", "g")

    async def view(self) -> View:
        return await build_view(
            self.state, self.repository, self.store, self.pool, self.title, self.shortcut
        )

    # ── Navigation events ─────────────────────────────────

    async def select_category(self, category: Category) -> View:
        if category not in self.repository.categories:
            logger.warning("unknown category %s", category)
            raise UnknownCategoryError(category)
        await self.repository.load_category(category)
        self.state = navigation.select_category(self.state, category)
        return await self.view()

    async def select_entry(self, category: Category, entry_id: str) -> View:
        entry = await self.repository.get_entry(category, entry_id)
        if entry is None:
            raise LookupError(f"No entry {entry_id!r} in {category}")
        self.state = navigation.select_entry(self.state, entry)
        return await self.view()

    async def back(self) -> View:
        self.state = navigation.back_to_list(self.state)
        return await self.view()

    async def search(self, text: str) -> View:
        self.state = navigation.type_search(self.state, text)
        return await self.view()

    async def open_tool(self, tool: ToolId = "destiny") -> View:
        self.state = navigation.open_tool(self.state, tool)
        return await self.view()

    async def press_key(self, key: str) -> View:
        before = self.state.is_gm
        self.state = navigation.press_key(self.state, key, self.shortcut)
        if self.state.is_gm != before:
            logger.info("GM Mode %s", "ON" if self.state.is_gm else "OFF")
        return await self.view()

    async def toggle_gm(self) -> View:
        return await self.press_key(self.shortcut)

    async def home(self) -> View:
        self.state = navigation.go_home(self.state)
        return await self.view()

    # ── GM-only actions ───────────────────────────────────

    def _require_gm(self) -> None:
        if not self.state.is_gm:
            raise PermissionError("GM mode required")

    async def set_unlocked(self, entry_id: str, unlocked: bool) -> View:
        """Show or hide a GM-only entry for players, then re-render."""
        self._require_gm()
        set_unlocked(self.store, entry_id, unlocked)
        # Toggling from a detail view lands on its category list
        if isinstance(self.state.nav, Browsing):
            self.state = navigation.back_to_list(self.state)
        return await self.view()

    async def destiny_action(
        self,
        action: DestinyAction,
        side: str | None = None,
        to_side: str | None = None,
    ) -> View:
        self._require_gm()
        if action == "add":
            self.pool.add_token(side or "")
        elif action == "remove":
            self.pool.remove_token(side or "")
        elif action == "flip":
            self.pool.flip(side or "", to_side or "")
        elif action == "reset":
            self.pool.reset()
        else:
            raise ValueError(f"Unknown destiny action {action!r}")
        return await self.view()


_session: Session | None = None


def init_session(session: Session) -> None:
    global _session
    _session = session


def current_session() -> Session:
    assert _session is not None, "Call init_session() before using the session"
    return _session
