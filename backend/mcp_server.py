"""FastMCP server exposing the codex (player view) as MCP tools.

Tools:
  - list_categories()                 — the fixed category list
  - search_codex(query, category)     — visible entries matching a query, or an error dict
  - get_entry(category, entry_id)     — one visible entry, or an error dict
  - destiny_pool()                    — current light/dark counts and log

Tools never see GM-only entries that are still locked. They read through the
active session (backend.session.current_session), so the app or a test must
call init_session() first.

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from backend.codex import resolve_entries
from backend.entries import UnknownCategoryError
from backend.session import current_session
from backend.storage import unlock_checker

mcp = FastMCP("field-codex")


def _unknown_category(category: str) -> dict:
    return {"error": f"Unknown category {category!r}"}


@mcp.tool()
def list_categories() -> list[str]:
    """List codex categories in display order."""
    return list(current_session().repository.categories)


@mcp.tool()
async def search_codex(query: str, category: str | None = None) -> list[dict] | dict:
    """Search visible entries by name or description, optionally within one category."""
    session = current_session()
    checker = unlock_checker(session.store)
    if category:
        try:
            entries = await session.repository.load_category(category)
        except UnknownCategoryError:
            return _unknown_category(category)
        found = resolve_entries(entries, False, query, checker)
    else:
        entries = await session.repository.load_all()
        found = resolve_entries(entries, False, query, checker, global_search=True)
    return [e.model_dump(by_alias=True) for e in found]


@mcp.tool()
async def get_entry(category: str, entry_id: str) -> dict:
    """Fetch one visible entry by category and id."""
    session = current_session()
    try:
        entries = await session.repository.load_category(category)
    except UnknownCategoryError:
        return _unknown_category(category)
    for entry in resolve_entries(entries, False, "", unlock_checker(session.store)):
        if entry.id == entry_id:
            return entry.model_dump(by_alias=True)
    return {"error": f"No visible entry {entry_id!r} in {category}"}


@mcp.tool()
def destiny_pool() -> dict:
    """Current destiny pool counts and change log, newest first."""
    pool = current_session().pool
    return {"pool": pool.state.model_dump(), "log": pool.log}


if __name__ == "__main__":
    from backend.app import create_app

    create_app()
    mcp.run()
