"""Navigation transitions.

Each UI event is a pure function from one AppState to the next. The
navigation variant makes the modes mutually exclusive: browsing a category,
searching across categories, or having a GM tool open.
"""

from field_codex.models import (
    AppState,
    Browsing,
    Category,
    Entry,
    Idle,
    Searching,
    ToolId,
    ToolOpen,
)


def select_category(state: AppState, category: Category) -> AppState:
    """Open a category list. The search text is kept and filters the list."""
    return state.model_copy(update={"nav": Browsing(category=category)})


def select_entry(state: AppState, entry: Entry) -> AppState:
    """Open an entry's detail view inside its own category."""
    nav = Browsing(category=entry.category, entry_id=entry.id)
    return state.model_copy(update={"nav": nav})


def back_to_list(state: AppState) -> AppState:
    if isinstance(state.nav, Browsing) and state.nav.entry_id is not None:
        return state.model_copy(update={"nav": Browsing(category=state.nav.category)})
    return state


def open_tool(state: AppState, tool: ToolId = "destiny") -> AppState:
    return state.model_copy(update={"nav": ToolOpen(tool=tool)})


def type_search(state: AppState, text: str) -> AppState:
    """Apply new search-field text.

    Ignored while a tool is open. In a category it re-filters that list;
    with no category it switches to cross-category search.
    """
    if isinstance(state.nav, ToolOpen):
        return state
    if isinstance(state.nav, Browsing):
        nav = Browsing(category=state.nav.category)
    else:
        nav = Searching(query=text)
    return state.model_copy(update={"nav": nav, "query": text})


def toggle_gm(state: AppState) -> AppState:
    """Flip GM mode and re-render. A cleared global search falls back home."""
    update: dict = {"is_gm": not state.is_gm}
    if isinstance(state.nav, Searching) and not state.nav.query.strip():
        update["nav"] = Idle()
    return state.model_copy(update=update)


def press_key(state: AppState, key: str, shortcut: str = "g") -> AppState:
    """The hidden GM shortcut; every other key is a no-op."""
    if key.lower() == shortcut.lower():
        return toggle_gm(state)
    return state


def go_home(state: AppState) -> AppState:
    return state.model_copy(update={"nav": Idle(), "query": ""})
