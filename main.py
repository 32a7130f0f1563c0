"""Cypher Character dev launcher. Serves the character sheet with uvicorn."""

import argparse
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cypher Character dev server")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: DATA_DIR or ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Replace the stored character with demo data before serving")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.getenv("BACKEND_PORT", "8000")))
    parser.add_argument("--no-reload", dest="reload", action="store_false",
                        help="Disable auto-reload on code changes")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    data_dir = args.data_dir or Path(os.getenv("DATA_DIR", "data"))
    # The app is imported by uvicorn (possibly in a reload worker), so hand
    # the data dir over through the environment.
    os.environ["DATA_DIR"] = str(data_dir.resolve())

    if args.demo:
        from backend import storage
        from backend.demo import create_demo_data

        storage.init_storage(data_dir)
        create_demo_data()

    uvicorn.run("backend.app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
