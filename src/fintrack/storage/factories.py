"""Storage factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

from fintrack.storage.sqlalchemy_storage import SQLAlchemyStorage


def default_state_path() -> str:
    """Return ~/.fintrack/fintrack.db, creating the directory if needed."""
    state_dir = Path.home() / ".fintrack"
    state_dir.mkdir(exist_ok=True)
    return str(state_dir / "fintrack.db")


def create_sqlite_storage(state_path: Optional[str] = None) -> SQLAlchemyStorage:
    """Create a SQLite-backed storage instance.

    Args:
        state_path: Path to SQLite database file. If None, checks
            FINTRACK_STATE_PATH environment variable, then defaults to
            ~/.fintrack/fintrack.db

    Returns:
        SQLAlchemyStorage instance configured for SQLite
    """
    if state_path is None:
        state_path = os.environ.get("FINTRACK_STATE_PATH")

    if state_path is None:
        state_path = default_state_path()

    return SQLAlchemyStorage(f"sqlite:///{state_path}")
