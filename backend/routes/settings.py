"""Health check and settings endpoints."""

from fastapi import APIRouter

from backend import storage
from backend.session import current_session

from .models import UpdateSettings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/settings")
async def get_settings():
    """Get app settings (title, GM shortcut, log time format)."""
    return storage.get_config()


@router.patch("/settings")
async def update_settings(body: UpdateSettings):
    """Update app settings (partial merge). Applies to the running session."""
    config = storage.update_config(body.model_dump(exclude_none=True))
    session = current_session()
    session.settings.update(config)
    session.pool.time_format = config["log_time_format"]
    return config
