"""
Key-value entry model backing local persistence
"""

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampedModel


class KeyValueEntry(Base, TimestampedModel):
    """Opaque bytes stored under a unique key"""

    __tablename__ = "key_value_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary)

    def __repr__(self):
        return f"<KeyValueEntry(key={self.key!r}, size={len(self.value or b'')})>"
