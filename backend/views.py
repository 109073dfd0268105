"""View building: turn an AppState into what the client should display.

build_view() dispatches on the navigation variant, runs the resolver against
the repository and the local store, and returns a View with structured data
plus a rendered HTML fragment.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from field_codex.models import (
    AppState,
    Browsing,
    DestinyPoolState,
    Entry,
    Idle,
    Searching,
    ToolOpen,
)

from .codex import VisualState, normalize_query, resolve_entries, visual_state
from .destiny import DestinyPool
from .entries import EntryRepository
from .render import render_template
from .storage.kv import KeyValueStore
from .storage.unlocks import is_unlocked, unlock_checker

ViewKind = Literal["home", "list", "detail", "search", "destiny", "denied"]

HOME_MESSAGE = (
    "Entries are not loaded until a category is selected. "
    "Click a category on the left to begin."
)
SEARCH_PROMPT = "Type in the search box or choose a category on the left to begin."
LIST_EMPTY_GM = "No entries match the current filter."
LIST_EMPTY_PLAYER = "No entries available (locked or none)."
SEARCH_EMPTY_GM = "No entries match this search."
SEARCH_EMPTY_PLAYER = "No visible entries match this search."
LOG_EMPTY = "No changes logged yet."


class ViewRow(BaseModel):
    id: str
    category: str
    label: str
    state: VisualState
    can_toggle: bool = False  # GM unlock control shown
    unlocked: bool = True


class View(BaseModel):
    kind: ViewKind
    title: str
    breadcrumbs: list[str] = Field(default_factory=list)
    is_gm: bool = False
    query: str = ""
    message: str = ""
    rows: list[ViewRow] = Field(default_factory=list)
    entry: Entry | None = None
    can_toggle: bool = False
    unlocked: bool | None = None
    pool: DestinyPoolState | None = None
    log: list[str] = Field(default_factory=list)
    html: str = ""


# ── Templates ───────────────────────────────────────────


_BREADCRUMBS = (
    '<nav class="breadcrumbs">{{#each crumbs}}'
    '{{#if sep}} &gt; {{/if}}<span>{{text}}</span>{{/each}}</nav>'
)

TEMPLATES: dict[str, str] = {
    "home": "<h1>{{title}}</h1><p>{{message}}</p>",
    "list": (
        _BREADCRUMBS
        + '{{#if rows}}<div class="entry-list">{{#each rows}}<div class="entry-row">'
        '<button class="entry-title {{state}}" data-category="{{category}}" '
        'data-entry="{{id}}">{{label}}</button>'
        "{{#if can_toggle}}{{#if unlocked}}"
        '<button class="unlock-btn remove" data-entry="{{id}}" '
        'title="Remove from player view">Remove</button>'
        "{{else}}"
        '<button class="unlock-btn add" data-entry="{{id}}" '
        'title="Add to player view">Add</button>'
        "{{/if}}{{/if}}</div>{{/each}}</div>"
        "{{else}}<p>{{message}}</p>{{/if}}"
    ),
    "detail": (
        _BREADCRUMBS
        + "<h1>{{entry.name}}</h1>"
        '{{#if entry.image}}<img src="{{entry.image}}" alt="{{entry.name}}">{{/if}}'
        "<p>{{entry.description}}</p>"
        "{{#if can_toggle}}{{#if unlocked}}"
        '<button class="unlock-btn remove" data-entry="{{entry.id}}">Remove</button>'
        "{{else}}"
        '<button class="unlock-btn add" data-entry="{{entry.id}}">Add</button>'
        "{{/if}}{{/if}}"
        '<button class="category-btn back">Back to {{capitalize entry.category}}</button>'
    ),
    "destiny": (
        _BREADCRUMBS
        + "<h1>GM Destiny Pool</h1>"
        '<div class="destiny-grid">'
        '<div class="destiny-column"><h2>Light Side</h2><div class="destiny-token-row">'
        '{{#each light_tokens}}<div class="destiny-token light"></div>{{/each}}</div></div>'
        '<div class="destiny-column"><h2>Dark Side</h2><div class="destiny-token-row">'
        '{{#each dark_tokens}}<div class="destiny-token dark"></div>{{/each}}</div></div>'
        "</div>"
        '<div class="destiny-log"><h3>Destiny Log</h3>'
        '{{#if log}}{{#each log}}<div class="destiny-log-entry">{{this}}</div>{{/each}}'
        '{{else}}<div class="destiny-log-entry empty">{{message}}</div>{{/if}}</div>'
    ),
    "denied": (
        _BREADCRUMBS
        + "<h1>GM Tools – Destiny Pool</h1>"
        "<p>GM Tools are restricted. Toggle GM Mode (press <strong>{{shortcut}}</strong>) "
        "to manage the Destiny Pool.</p>"
    ),
}
TEMPLATES["search"] = TEMPLATES["list"]


def _category_label(category: str) -> str:
    return category[:1].upper() + category[1:]


def _render(view: View, **extra) -> View:
    context = view.model_dump(by_alias=True)
    context["crumbs"] = [{"text": text, "sep": i > 0} for i, text in enumerate(view.breadcrumbs)]
    context.update(extra)
    view.html = render_template(TEMPLATES[view.kind], context)
    return view


# ── Builders ────────────────────────────────────────────


async def _list_view(state: AppState, nav: Browsing, repository: EntryRepository,
                     store: KeyValueStore, title: str) -> View:
    entries = await repository.load_category(nav.category)
    visible = resolve_entries(entries, state.is_gm, state.query, unlock_checker(store))
    rows = []
    for entry in visible:
        unlocked = is_unlocked(store, entry.id) if entry.gm_mode else True
        rows.append(ViewRow(
            id=entry.id,
            category=entry.category,
            label=entry.name,
            state=visual_state(entry, state.is_gm, unlocked),
            can_toggle=state.is_gm and entry.gm_mode,
            unlocked=unlocked,
        ))
    view = View(
        kind="list",
        title=title,
        breadcrumbs=[_category_label(nav.category)],
        is_gm=state.is_gm,
        query=state.query,
        rows=rows,
        message="" if rows else (LIST_EMPTY_GM if state.is_gm else LIST_EMPTY_PLAYER),
    )
    return _render(view)


async def _detail_view(state: AppState, nav: Browsing, repository: EntryRepository,
                       store: KeyValueStore, title: str) -> View:
    entry = await repository.get_entry(nav.category, nav.entry_id or "")
    unlocked = entry is not None and (not entry.gm_mode or is_unlocked(store, entry.id))
    if entry is None or not (unlocked or state.is_gm):
        # Gone or hidden from the current viewer: show the list instead
        return await _list_view(state, Browsing(category=nav.category), repository, store, title)
    view = View(
        kind="detail",
        title=title,
        breadcrumbs=[_category_label(nav.category), entry.name],
        is_gm=state.is_gm,
        query=state.query,
        entry=entry,
        can_toggle=state.is_gm and entry.gm_mode,
        unlocked=unlocked,
    )
    return _render(view)


async def _search_view(state: AppState, nav: Searching, repository: EntryRepository,
                       store: KeyValueStore, title: str) -> View:
    view = View(kind="search", title=title, breadcrumbs=["Search"],
                is_gm=state.is_gm, query=nav.query)
    if not normalize_query(nav.query):
        view.message = SEARCH_PROMPT
        return _render(view)

    entries = await repository.load_all()
    checker = unlock_checker(store)
    for entry in resolve_entries(entries, state.is_gm, nav.query, checker, global_search=True):
        unlocked = checker(entry.id) if entry.gm_mode else True
        view.rows.append(ViewRow(
            id=entry.id,
            category=entry.category,
            label=f"[{entry.category}] {entry.name}",
            state=visual_state(entry, state.is_gm, unlocked),
            unlocked=unlocked,
        ))
    if not view.rows:
        view.message = SEARCH_EMPTY_GM if state.is_gm else SEARCH_EMPTY_PLAYER
    return _render(view)


def _destiny_view(state: AppState, pool: DestinyPool, title: str, shortcut: str) -> View:
    crumbs = ["GM Tools", "Destiny Pool"]
    if not state.is_gm:
        view = View(kind="denied", title=title, breadcrumbs=crumbs, is_gm=False, query=state.query)
        return _render(view, shortcut=shortcut.upper())
    current = pool.state
    view = View(
        kind="destiny",
        title=title,
        breadcrumbs=crumbs,
        is_gm=True,
        query=state.query,
        pool=current,
        log=pool.log,
    )
    if not view.log:
        view.message = LOG_EMPTY
    return _render(view, light_tokens=list(range(current.light)), dark_tokens=list(range(current.dark)))


async def build_view(
    state: AppState,
    repository: EntryRepository,
    store: KeyValueStore,
    pool: DestinyPool,
    title: str,
    shortcut: str = "g",
) -> View:
    """Build the view for whatever the navigation state says is on screen."""
    nav = state.nav
    if isinstance(nav, ToolOpen):
        return _destiny_view(state, pool, title, shortcut)
    if isinstance(nav, Searching):
        return await _search_view(state, nav, repository, store, title)
    if isinstance(nav, Browsing):
        if nav.entry_id is not None:
            return await _detail_view(state, nav, repository, store, title)
        return await _list_view(state, nav, repository, store, title)
    assert isinstance(nav, Idle)
    return _render(View(kind="home", title=title, is_gm=state.is_gm, message=HOME_MESSAGE))
