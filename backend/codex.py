"""Entry visibility and search resolution.

Visibility: entries without gmMode are always visible. GM-only entries are
visible when unlocked for players, or to the GM regardless of unlock state.

Search: case-insensitive substring match on name and description, plus
category in global (cross-category) search. No tokenizing, no ranking;
filtering is stable and keeps the input order.
"""

from collections.abc import Callable, Iterable
from typing import Literal

from field_codex.models import Entry

VisualState = Literal["unlocked", "gm-locked", "locked"]


def normalize_query(text: str | None) -> str:
    return (text or "").strip().lower()


def is_visible(entry: Entry, is_gm: bool, is_unlocked: bool) -> bool:
    if not entry.gm_mode:
        return True
    return is_unlocked or is_gm


def matches_query(entry: Entry, query: str, include_category: bool = False) -> bool:
    """True if the (already normalized) query is a substring of a searchable field."""
    if not query:
        return True
    if query in entry.name.lower() or query in entry.description.lower():
        return True
    return include_category and query in entry.category.lower()


def resolve_entries(
    entries: Iterable[Entry],
    is_gm: bool,
    query: str,
    unlock_checker: Callable[[str], bool],
    global_search: bool = False,
) -> list[Entry]:
    """Visible entries matching ``query``, in input order."""
    q = normalize_query(query)
    result = []
    for entry in entries:
        unlocked = unlock_checker(entry.id) if entry.gm_mode else True
        if not is_visible(entry, is_gm, unlocked):
            continue
        if not matches_query(entry, q, include_category=global_search):
            continue
        result.append(entry)
    return result


def visual_state(entry: Entry, is_gm: bool, unlocked: bool) -> VisualState:
    """Label for a row: presentation only, never used for filtering."""
    if not entry.gm_mode or unlocked:
        return "unlocked"
    if is_gm:
        return "gm-locked"
    return "locked"
