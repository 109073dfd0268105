"""Tests for field_codex.sources: FileSource and HttpSource."""

import json

import httpx

from field_codex.sources import FileSource, HttpSource, source_from_location


# ---------------------------------------------------------------------------
# FileSource
# ---------------------------------------------------------------------------

class TestFileSource:
    async def test_reads_json(self, tmp_path) -> None:
        (tmp_path / "planets").mkdir()
        (tmp_path / "planets" / "manifest.json").write_text('["hoth.json"]')
        source = FileSource(tmp_path)
        assert await source.fetch_json("planets/manifest.json") == ["hoth.json"]

    async def test_missing_file_is_none(self, tmp_path) -> None:
        assert await FileSource(tmp_path).fetch_json("planets/manifest.json") is None

    async def test_invalid_json_is_none(self, tmp_path) -> None:
        (tmp_path / "bad.json").write_text("{nope")
        assert await FileSource(tmp_path).fetch_json("bad.json") is None

    async def test_refuses_paths_outside_root(self, tmp_path) -> None:
        root = tmp_path / "entries"
        root.mkdir()
        (tmp_path / "secret.json").write_text('{"name": "x"}')
        assert await FileSource(root).fetch_json("../secret.json") is None


# ---------------------------------------------------------------------------
# HttpSource
# ---------------------------------------------------------------------------

def _transport(routes: dict[str, httpx.Response], seen: list | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return routes.get(request.url.path, httpx.Response(404))
    return httpx.MockTransport(handler)


class TestHttpSource:
    async def test_fetches_json(self) -> None:
        seen: list[httpx.Request] = []
        transport = _transport(
            {"/entries/planets/manifest.json": httpx.Response(200, json=["hoth.json"])},
            seen,
        )
        source = HttpSource("http://codex.test/entries/", transport=transport)
        assert await source.fetch_json("planets/manifest.json") == ["hoth.json"]
        assert str(seen[0].url) == "http://codex.test/entries/planets/manifest.json"
        assert seen[0].headers["Cache-Control"] == "no-cache"

    async def test_not_found_is_none(self) -> None:
        source = HttpSource("http://codex.test", transport=_transport({}))
        assert await source.fetch_json("planets/yoda.json") is None

    async def test_invalid_json_is_none(self) -> None:
        transport = _transport({"/bad.json": httpx.Response(200, text="<html>")})
        source = HttpSource("http://codex.test", transport=transport)
        assert await source.fetch_json("bad.json") is None

    async def test_transport_error_is_none(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        source = HttpSource("http://codex.test", transport=httpx.MockTransport(handler))
        assert await source.fetch_json("planets/manifest.json") is None


def test_source_from_location(tmp_path) -> None:
    assert isinstance(source_from_location("https://example.org/entries"), HttpSource)
    assert isinstance(source_from_location("http://localhost:8000/entries"), HttpSource)
    file_source = source_from_location(tmp_path)
    assert isinstance(file_source, FileSource)
    assert file_source.root == tmp_path
