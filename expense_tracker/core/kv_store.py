"""
Local key-value storage for persisted application state

Backends:
1. SQLKeyValueStore - one row per key in a SQLite table (default)
2. MemoryKeyValueStore - process-local dict (tests, throwaway sessions)

Both expose the same two-call surface a platform preference
store offers: get(key) -> bytes | None and set(key, bytes).
"""

import logging
from typing import Dict, Optional, Protocol

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from expense_tracker.db.base import Base
from expense_tracker.models.preference import Preference

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal persistence primitive consumed by the transaction store"""

    def get(self, key: str) -> Optional[bytes]:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...


class SQLKeyValueStore:
    """
    Key-value store on top of the preferences table

    Usage:
        kv = SQLKeyValueStore(SessionLocal)
        kv.set("saved_transactions", b"[]")
        kv.get("saved_transactions")
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[bytes]:
        """
        Read the value stored under key

        Returns:
            Stored bytes or None if the key was never written
        """
        with self._session_factory() as db:
            preference = db.get(Preference, key)
            if preference is None:
                logger.debug(f"Key not found: {key}")
                return None
            return bytes(preference.value)

    def set(self, key: str, value: bytes) -> None:
        """
        Store value under key, replacing any previous value

        Errors from the database propagate to the caller.
        """
        with self._session_factory() as db:
            self._upsert(db, key, value)
            db.commit()
        logger.debug(f"Stored {len(value)} bytes under key: {key}")

    @staticmethod
    def _upsert(db: Session, key: str, value: bytes) -> None:
        preference = db.get(Preference, key)
        if preference is None:
            db.add(Preference(key=key, value=value))
        else:
            preference.value = value


class MemoryKeyValueStore:
    """Dict-backed key-value store, lives as long as the process"""

    def __init__(self):
        self.data: Dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)


def create_tables(engine: Engine) -> None:
    """Create the preferences table if it does not exist yet"""
    Base.metadata.create_all(bind=engine)
    logger.info("Preference storage initialized")
