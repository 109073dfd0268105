import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from backend import storage
from backend.destiny import DestinyPool
from backend.entries import EntryRepository
from backend.routes import router
from backend.session import Session, init_session
from field_codex.sources import FileSource, source_from_location

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"
DEFAULT_ENTRIES_DIR = Path(__file__).parent.parent / "entries"


def create_app(data_dir: Path | None = None, entries: str | Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved)
    location = entries or os.getenv("ENTRIES_LOCATION", str(DEFAULT_ENTRIES_DIR))
    source = source_from_location(location)

    config = storage.get_config()
    store = storage.local_store()
    init_session(Session(
        repository=EntryRepository(source),
        store=store,
        pool=DestinyPool(store, time_format=config["log_time_format"]),
        settings=config,
    ))

    app = FastAPI(title="Field Codex")
    app.include_router(router, prefix="/api")

    if isinstance(source, FileSource) and source.root.is_dir():
        # Same static layout the codex documents are authored in
        app.mount("/entries", StaticFiles(directory=source.root), name="entries")

    return app


# Default app instance for uvicorn (uses DATA_DIR / ENTRIES_LOCATION env vars)
app = create_app()
