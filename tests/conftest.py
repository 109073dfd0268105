from pathlib import Path

import pytest

from backend.demo import create_demo_entries


class StubSource:
    """In-memory EntrySource keyed by relative path; records every fetch."""

    def __init__(self, documents: dict | None = None) -> None:
        self.documents = dict(documents or {})
        self.calls: list[str] = []

    async def fetch_json(self, path: str):
        self.calls.append(path)
        return self.documents.get(path)


@pytest.fixture
def stub_source():
    return StubSource


@pytest.fixture
def entries_dir(tmp_path) -> Path:
    """A demo entries tree on disk (see backend.demo)."""
    path = tmp_path / "entries"
    create_demo_entries(path)
    return path
