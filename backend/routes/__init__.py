"""FastAPI API endpoints under /api.

Endpoint groups: health + settings, codex reads (categories, entries, search),
destiny pool read, and session events. Session endpoints drive the single
in-memory UI session and return the rendered view for the new state.
"""

from fastapi import APIRouter

from .codex import router as codex_router
from .destiny import router as destiny_router
from .session import router as session_router
from .settings import router as settings_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(codex_router)
router.include_router(destiny_router)
router.include_router(session_router)
