"""
Key-value storage used for local persistence of the user profile
"""

from typing import Dict, Optional, Protocol
import logging

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from storefront.core.database import get_db_sync_context
from storefront.models.key_value import KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Opaque bytes keyed by string"""

    def get(self, key: str) -> Optional[bytes]:
        ...

    def set(self, key: str, value: bytes) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local store; contents are lost on restart"""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)


class SQLKeyValueStore:
    """Store backed by the key_value_entries table"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[bytes]:
        with get_db_sync_context(self.session_factory) as session:
            result = session.execute(
                select(KeyValueEntry.value).where(KeyValueEntry.key == key)
            )
            return result.scalar_one_or_none()

    def set(self, key: str, value: bytes) -> None:
        with get_db_sync_context(self.session_factory) as session:
            entry = session.get(KeyValueEntry, key)
            if entry:
                entry.value = value
            else:
                session.add(KeyValueEntry(key=key, value=value))
        logger.debug(f"Stored {len(value)} bytes under {key}")
