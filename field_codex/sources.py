"""Entry sources: where the static codex documents come from.

The repository fetches documents through an object matching the protocol:

    async def fetch_json(self, path: str) -> Any | None: ...

`path` is relative to the entries root, e.g. "planets/manifest.json" or
"planets/alderaan.json". Every failure (missing file, non-2xx status,
transport error, invalid JSON) is reported as None and logged; sources never
raise for data problems.

Two implementations are provided:

    FileSource  — reads from a local directory tree.
    HttpSource  — fetches from a static HTTP host with httpx. No timeout is
                  applied, matching a browser fetch.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

import httpx

logger = logging.getLogger(__name__)


class EntrySource(Protocol):
    async def fetch_json(self, path: str) -> Any | None: ...


# ---------------------------------------------------------------------------
# FileSource: local directory
# ---------------------------------------------------------------------------

class FileSource:
    """Reads entry documents from ``root/<path>``.

    Paths that resolve outside ``root`` are refused.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _resolve(self, path: str) -> Path | None:
        root = self.root.resolve()
        target = (root / path).resolve()
        if target != root and root not in target.parents:
            return None
        return target

    async def fetch_json(self, path: str) -> Any | None:
        target = self._resolve(path)
        if target is None:
            logger.warning("refusing path outside entries root: %s", path)
            return None
        if not target.is_file():
            logger.debug("entry file not found: %s", target)
            return None
        try:
            return json.loads(target.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("fetch error %s: %s", target, e)
            return None


# ---------------------------------------------------------------------------
# HttpSource: static HTTP host
# ---------------------------------------------------------------------------

class HttpSource:
    """Fetches entry documents from ``base_url/<path>``.

    Args:
        base_url:  Root URL of the entries tree, e.g. "http://localhost:8000/entries".
        transport: Optional httpx transport (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    async def fetch_json(self, path: str) -> Any | None:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("fetch %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=None,
                transport=self._transport,
                headers={"Cache-Control": "no-cache"},
            ) as client:
                resp = await client.get(url)
        except httpx.HTTPError as e:
            logger.error("fetch error %s: %s", url, e)
            return None

        if not resp.is_success:
            logger.debug("fetch %s returned HTTP %d", url, resp.status_code)
            return None
        try:
            return resp.json()
        except ValueError as e:
            logger.error("invalid JSON from %s: %s", url, e)
            return None


def source_from_location(location: str | Path) -> EntrySource:
    """Build an HttpSource for http(s) URLs, a FileSource for anything else."""
    text = str(location)
    if text.startswith(("http://", "https://")):
        return HttpSource(text)
    return FileSource(Path(text))
