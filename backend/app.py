import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.routes import pages_router, router
from backend import storage

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def configure_logging() -> None:
    """Log to stderr at LOG_LEVEL (default INFO)."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(data_dir: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved)

    app = FastAPI(title="Cypher Character")
    app.include_router(router, prefix="/api")
    app.include_router(pages_router)
    return app


configure_logging()

# Default app instance for uvicorn (uses DATA_DIR env var or default)
app = create_app()
