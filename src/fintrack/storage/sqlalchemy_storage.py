"""Generic SQLAlchemy key-value storage implementation."""

from typing import Optional
from sqlalchemy.orm import Session

from fintrack.storage.base import KeyValueStorage
from fintrack.storage.models import StorageEntry, create_session_factory


class SQLAlchemyStorage(KeyValueStorage):
    """SQLAlchemy-based implementation of KeyValueStorage interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the storage backend."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def get(self, key: str) -> Optional[str]:
        session = self._get_session()
        entry = session.get(StorageEntry, key)
        if entry is None:
            return None
        return entry.value

    def set(self, key: str, value: str) -> None:
        session = self._get_session()
        entry = session.get(StorageEntry, key)
        if entry is None:
            session.add(StorageEntry(key=key, value=value))
        else:
            entry.value = value
        session.commit()

    def delete(self, key: str) -> None:
        session = self._get_session()
        entry = session.get(StorageEntry, key)
        if entry is not None:
            session.delete(entry)
            session.commit()
