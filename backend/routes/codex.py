"""Read-only codex endpoints: categories, entry lists, entry detail, search.

These are stateless: the caller says whether it is viewing as GM.
"""

from fastapi import APIRouter, HTTPException

from backend.codex import resolve_entries
from backend.entries import UnknownCategoryError
from backend.session import current_session
from backend.storage import unlock_checker

router = APIRouter()


@router.get("/categories")
async def list_categories():
    """The fixed category list, in display order."""
    return list(current_session().repository.categories)


@router.get("/categories/{category}/entries")
async def list_entries(category: str, q: str = "", gm: bool = False):
    """Visible entries in a category, filtered by an optional search query."""
    session = current_session()
    try:
        entries = await session.repository.load_category(category)
    except UnknownCategoryError:
        raise HTTPException(404, "Category not found")
    return resolve_entries(entries, gm, q, unlock_checker(session.store))


@router.get("/categories/{category}/entries/{entry_id}")
async def get_entry(category: str, entry_id: str, gm: bool = False):
    """A single entry. GM-only entries still locked are hidden from players."""
    session = current_session()
    try:
        entries = await session.repository.load_category(category)
    except UnknownCategoryError:
        raise HTTPException(404, "Category not found")
    visible = resolve_entries(entries, gm, "", unlock_checker(session.store))
    for entry in visible:
        if entry.id == entry_id:
            return entry
    raise HTTPException(404, "Entry not found")


@router.get("/search")
async def search(q: str = "", gm: bool = False):
    """Cross-category search over name, description and category."""
    session = current_session()
    if not q.strip():
        return []
    entries = await session.repository.load_all()
    return resolve_entries(entries, gm, q, unlock_checker(session.store), global_search=True)
