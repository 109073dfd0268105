"""Destiny pool read endpoint."""

from fastapi import APIRouter

from backend.session import current_session

router = APIRouter()


@router.get("/destiny")
async def get_destiny():
    """Current light/dark counts and the change log (newest first)."""
    pool = current_session().pool
    return {"pool": pool.state, "log": pool.log}
