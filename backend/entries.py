"""Entry repository: manifest-driven loading with a per-category cache.

Layout read through the EntrySource:
  <category>/manifest.json   JSON array of filenames, in display order
  <category>/<file>.json     One entry document per filename

A category whose manifest is missing or not an array has zero entries; that
result is cached like any other. A document that fails to load or validate is
skipped on its own. The cache lives for the lifetime of the repository and is
never invalidated.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from field_codex.models import CATEGORIES, Entry
from field_codex.sources import EntrySource

logger = logging.getLogger(__name__)


class UnknownCategoryError(KeyError):
    """Raised for a category outside the fixed enumeration."""


def _default_id(filename: str) -> str:
    """Filename with its last extension stripped: "yoda.json" -> "yoda"."""
    return re.sub(r"\.[^/.]+$", "", filename)


def _build_entry(data: Any, filename: str, category: str) -> Entry | None:
    if not isinstance(data, dict):
        return None
    fields = dict(data)
    if not fields.get("id"):
        fields["id"] = _default_id(filename)
    else:
        fields["id"] = str(fields["id"])
    fields["category"] = category
    try:
        return Entry.model_validate(fields)
    except ValidationError as e:
        logger.warning("invalid entry %s/%s: %s", category, filename, e.errors())
        return None


class EntryRepository:
    def __init__(self, source: EntrySource, categories: tuple[str, ...] = CATEGORIES) -> None:
        self.source = source
        self.categories = categories
        self._cache: dict[str, list[Entry]] = {}

    def cached_categories(self) -> list[str]:
        return list(self._cache)

    async def load_category(self, category: str) -> list[Entry]:
        """Load (or return cached) entries for one category, in manifest order."""
        if category not in self.categories:
            raise UnknownCategoryError(category)
        if category in self._cache:
            return list(self._cache[category])

        manifest_path = f"{category}/manifest.json"
        files = await self.source.fetch_json(manifest_path)
        if not isinstance(files, list):
            logger.warning("manifest missing or invalid for %s (%s)", category, manifest_path)
            self._cache[category] = []
            return []

        entries: list[Entry] = []
        for filename in files:
            if not isinstance(filename, str) or not filename:
                logger.warning("skipping non-filename manifest item in %s: %r", category, filename)
                continue
            entry = _build_entry(
                await self.source.fetch_json(f"{category}/{filename}"),
                filename,
                category,
            )
            if entry is None:
                logger.warning("failed to load entry %s/%s", category, filename)
                continue
            entries.append(entry)

        self._cache[category] = entries
        return list(entries)

    async def load_all(self) -> list[Entry]:
        """Every category in fixed order, one fully loaded before the next."""
        all_entries: list[Entry] = []
        for category in self.categories:
            all_entries.extend(await self.load_category(category))
        return all_entries

    async def get_entry(self, category: str, entry_id: str) -> Entry | None:
        for entry in await self.load_category(category):
            if entry.id == entry_id:
                return entry
        return None
