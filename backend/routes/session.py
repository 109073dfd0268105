"""Session endpoints: one per UI event, each returning the new view."""

from fastapi import APIRouter, HTTPException

from backend.entries import UnknownCategoryError
from backend.session import current_session

from .models import (
    DestinyActionBody,
    KeyPress,
    OpenTool,
    SearchBody,
    SelectCategory,
    SelectEntry,
    UnlockBody,
)

router = APIRouter(prefix="/session")


@router.get("")
async def get_view():
    """Whatever is currently on screen."""
    return await current_session().view()


@router.post("/category")
async def select_category(body: SelectCategory):
    """Open a category list."""
    try:
        return await current_session().select_category(body.category)
    except UnknownCategoryError:
        raise HTTPException(404, "Category not found")


@router.post("/entry")
async def select_entry(body: SelectEntry):
    """Open an entry's detail view."""
    try:
        return await current_session().select_entry(body.category, body.id)
    except LookupError:
        raise HTTPException(404, "Entry not found")


@router.post("/back")
async def back():
    """Return from a detail view to its category list."""
    return await current_session().back()


@router.post("/search")
async def search(body: SearchBody):
    """Apply search-field text (ignored while a GM tool is open)."""
    return await current_session().search(body.query)


@router.post("/tool")
async def open_tool(body: OpenTool):
    """Open a GM tool panel."""
    return await current_session().open_tool(body.tool)


@router.post("/key")
async def press_key(body: KeyPress):
    """Keyboard input; the GM shortcut toggles GM mode."""
    return await current_session().press_key(body.key)


@router.post("/gm")
async def toggle_gm():
    """Toggle GM mode directly."""
    return await current_session().toggle_gm()


@router.post("/home")
async def home():
    """Clear navigation and search text."""
    return await current_session().home()


@router.post("/unlock")
async def set_unlocked(body: UnlockBody):
    """Show or hide a GM-only entry for players (GM only)."""
    try:
        return await current_session().set_unlocked(body.id, body.unlocked)
    except PermissionError:
        raise HTTPException(403, "GM mode required")


@router.post("/destiny")
async def destiny_action(body: DestinyActionBody):
    """Adjust the destiny pool (GM only)."""
    try:
        return await current_session().destiny_action(body.action, body.side, body.to_side)
    except PermissionError:
        raise HTTPException(403, "GM mode required")
    except ValueError as e:
        raise HTTPException(422, str(e))
