"""Field Codex — dev launcher. Starts the backend in watch mode."""

import argparse
import os
import signal
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def main():
    parser = argparse.ArgumentParser(description="Field Codex dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Local store and settings directory (default: ./data)")
    parser.add_argument("--entries", default=None,
                        help="Entries directory or http(s) URL (default: ./entries)")
    parser.add_argument("--demo", action="store_true",
                        help="Clean and create demo entries in the entries directory")
    args = parser.parse_args()

    if args.demo:
        if args.entries and args.entries.startswith(("http://", "https://")):
            parser.error("--demo needs a local --entries directory")
        from backend.demo import create_demo_entries
        create_demo_entries(Path(args.entries or ROOT / "entries"))

    # Build env for the subprocess so the backend picks up the same locations
    env = os.environ.copy()
    if args.data_dir:
        env["DATA_DIR"] = str(args.data_dir.resolve())
    if args.entries:
        entries = args.entries
        if not entries.startswith(("http://", "https://")):
            entries = str(Path(entries).resolve())
        env["ENTRIES_LOCATION"] = entries

    procs: list[subprocess.Popen] = []

    def shutdown(*_):
        print("\nShutting down...")
        for p in procs:
            p.terminate()
        for p in procs:
            p.wait()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    print(f"Starting backend on http://localhost:{BACKEND_PORT} ...")
    procs.append(subprocess.Popen(
        ["uv", "run", "uvicorn", "backend.app:app", "--reload", "--host", HOST, "--port", BACKEND_PORT],
        cwd=ROOT, env=env,
    ))

    for p in procs:
        p.wait()


if __name__ == "__main__":
    main()
