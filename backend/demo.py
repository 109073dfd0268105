"""Create a demo entries tree for development/testing."""

import json
import shutil
from pathlib import Path

from field_codex.models import CATEGORIES

DEMO_ENTRIES: dict[str, list[dict]] = {
    "planets": [
        {
            "file": "alak-prime.json",
            "name": "Alak Prime",
            "description": "A storm-wrapped world orbited by a dark moon. "
            "The Alliance keeps a listening post in its northern canyons.",
        },
        {
            "file": "hoth.json",
            "name": "Hoth",
            "description": "Frozen ice world, sixth planet of its system. "
            "Echo Base was carved into its glaciers.",
        },
        {
            "file": "vessk.json",
            "name": "Vessk",
            "description": "Imperial fuel depot disguised as a mining colony.",
            "gmMode": True,
        },
    ],
    "characters": [
        {
            "file": "commander-rhee.json",
            "id": "rhee",
            "name": "Commander Talia Rhee",
            "description": "Cell leader and the party's handler. Dry humour, short temper.",
        },
        {
            "file": "the-informant.json",
            "name": "The Informant",
            "description": "A voice on an encrypted channel who knows too much.",
            "gmMode": True,
        },
    ],
    "vehicles": [
        {
            "file": "t-47.json",
            "name": "T-47 Airspeeder",
            "description": "Two-seat snowspeeder with a rear-facing harpoon gun.",
        },
    ],
    "items": [
        {
            "file": "datacard.json",
            "name": "Encrypted Datacard",
            "description": "Recovered from the wreck above Alak Prime. Nobody has cracked it yet.",
        },
    ],
    "factions": [
        {
            "file": "alliance.json",
            "name": "Rebel Alliance",
            "description": "The party's employers, stretched thin across the Outer Rim.",
        },
        {
            "file": "black-sun.json",
            "name": "Black Sun",
            "description": "Criminal syndicate quietly buying up Alliance supply routes.",
            "gmMode": True,
        },
    ],
    "missions": [
        {
            "file": "listening-post.json",
            "name": "Silence the Listening Post",
            "description": "Recover the post's logs before the Empire finds them.",
        },
    ],
    "threats": [],
}


def create_demo_entries(entries_dir: Path) -> None:
    """Wipe ``entries_dir`` and write manifests plus one JSON file per demo entry."""
    if entries_dir.exists():
        shutil.rmtree(entries_dir)
    for category in CATEGORIES:
        cat_dir = entries_dir / category
        cat_dir.mkdir(parents=True, exist_ok=True)
        manifest = []
        for demo in DEMO_ENTRIES.get(category, []):
            doc = {k: v for k, v in demo.items() if k != "file"}
            (cat_dir / demo["file"]).write_text(json.dumps(doc, indent=2))
            manifest.append(demo["file"])
        (cat_dir / "manifest.json").write_text(json.dumps(manifest, indent=2))
