"""Database models"""

from .base import Base, TimestampedModel
from .key_value import KeyValueEntry

__all__ = ["Base", "TimestampedModel", "KeyValueEntry"]
