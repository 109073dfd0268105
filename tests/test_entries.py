"""Tests for the entry repository: manifests, skipping, caching, load order."""

import pytest

from backend.entries import EntryRepository, UnknownCategoryError
from backend.codex import resolve_entries
from field_codex.models import CATEGORIES
from field_codex.sources import FileSource


async def test_loads_entries_in_manifest_order(stub_source):
    source = stub_source({
        "planets/manifest.json": ["hoth.json", "alak.json"],
        "planets/hoth.json": {"name": "Hoth"},
        "planets/alak.json": {"name": "Alak Prime", "description": "a dark moon"},
    })
    entries = await EntryRepository(source).load_category("planets")
    assert [e.name for e in entries] == ["Hoth", "Alak Prime"]
    assert [e.id for e in entries] == ["hoth", "alak"]
    assert all(e.category == "planets" for e in entries)


async def test_explicit_id_wins_over_filename(stub_source):
    source = stub_source({
        "characters/manifest.json": ["commander-rhee.json"],
        "characters/commander-rhee.json": {"id": "rhee", "name": "Rhee"},
    })
    entries = await EntryRepository(source).load_category("characters")
    assert entries[0].id == "rhee"


async def test_id_strips_only_last_extension(stub_source):
    source = stub_source({
        "items/manifest.json": ["mk.ii.json"],
        "items/mk.ii.json": {"name": "Mk II"},
    })
    entries = await EntryRepository(source).load_category("items")
    assert entries[0].id == "mk.ii"


async def test_missing_entry_skipped(stub_source):
    """Manifest lists yoda.json, yoda.json 404s → empty, no exception."""
    source = stub_source({"characters/manifest.json": ["yoda.json"]})
    assert await EntryRepository(source).load_category("characters") == []


async def test_one_bad_entry_does_not_fail_category(stub_source):
    source = stub_source({
        "items/manifest.json": ["a.json", "b.json", "c.json", 7],
        "items/a.json": {"name": "A"},
        "items/b.json": ["not", "an", "object"],
        "items/c.json": {"description": "no name"},
    })
    entries = await EntryRepository(source).load_category("items")
    assert [e.name for e in entries] == ["A"]


async def test_missing_manifest_cached_as_empty(stub_source):
    source = stub_source({})
    repo = EntryRepository(source)
    assert await repo.load_category("threats") == []
    assert await repo.load_category("threats") == []
    assert source.calls == ["threats/manifest.json"]
    assert repo.cached_categories() == ["threats"]


async def test_invalid_manifest_is_empty(stub_source):
    source = stub_source({"threats/manifest.json": {"files": ["x.json"]}})
    assert await EntryRepository(source).load_category("threats") == []


async def test_results_cached(stub_source):
    source = stub_source({
        "planets/manifest.json": ["hoth.json"],
        "planets/hoth.json": {"name": "Hoth"},
    })
    repo = EntryRepository(source)
    first = await repo.load_category("planets")
    source.documents["planets/hoth.json"] = {"name": "Changed"}
    second = await repo.load_category("planets")
    assert first == second
    assert source.calls == ["planets/manifest.json", "planets/hoth.json"]


async def test_unknown_category(stub_source):
    with pytest.raises(UnknownCategoryError):
        await EntryRepository(stub_source({})).load_category("droids")


async def test_load_all_sequential_fixed_order(stub_source):
    source = stub_source({
        "threats/manifest.json": ["t.json"],
        "threats/t.json": {"name": "Inquisitor"},
        "planets/manifest.json": ["p.json"],
        "planets/p.json": {"name": "Hoth"},
    })
    repo = EntryRepository(source)
    entries = await repo.load_all()
    assert [e.name for e in entries] == ["Hoth", "Inquisitor"]
    manifests = [c.split("/")[0] for c in source.calls if c.endswith("manifest.json")]
    assert manifests == list(CATEGORIES)
    assert repo.cached_categories() == list(CATEGORIES)


async def test_get_entry(stub_source):
    source = stub_source({
        "planets/manifest.json": ["hoth.json"],
        "planets/hoth.json": {"name": "Hoth"},
    })
    repo = EntryRepository(source)
    assert (await repo.get_entry("planets", "hoth")).name == "Hoth"
    assert await repo.get_entry("planets", "tatooine") is None


async def test_demo_tree_from_disk(entries_dir):
    repo = EntryRepository(FileSource(entries_dir))
    planets = await repo.load_category("planets")
    assert [e.id for e in planets] == ["alak-prime", "hoth", "vessk"]
    assert planets[2].gm_mode is True
    assert await repo.load_category("threats") == []


@pytest.mark.parametrize("flag", ["false", "0", "no", "off", 1, ["x"]])
async def test_truthy_gm_flag_hides_entry_from_players(stub_source, flag):
    source = stub_source({
        "factions/manifest.json": ["cell.json"],
        "factions/cell.json": {"name": "Sleeper Cell", "gmMode": flag},
    })
    entries = await EntryRepository(source).load_category("factions")
    assert entries[0].gm_mode is True
    assert resolve_entries(entries, False, "", lambda _: False) == []


@pytest.mark.parametrize("flag", [None, False, 0, "", float("nan")])
async def test_falsy_gm_flag_is_public(stub_source, flag):
    source = stub_source({
        "factions/manifest.json": ["alliance.json"],
        "factions/alliance.json": {"name": "Alliance", "gmMode": flag},
    })
    entries = await EntryRepository(source).load_category("factions")
    assert entries[0].gm_mode is False
    assert resolve_entries(entries, False, "", lambda _: False) == entries
