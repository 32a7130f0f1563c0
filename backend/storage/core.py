"""Storage initialization, path helpers, and the character lock."""

import asyncio
from pathlib import Path

_data_dir: Path | None = None
_lock: asyncio.Lock | None = None


def init_storage(data_dir: Path) -> None:
    global _data_dir, _lock
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    _lock = asyncio.Lock()


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def character_lock() -> asyncio.Lock:
    """The lock every read-modify-write of the character must hold."""
    assert _lock is not None, "Call init_storage() before using storage"
    return _lock
