"""Storage layer for portal records.

Provides the storage contract and its in-memory implementation.
"""

from boardroom.storage.base import Repository, Storage
from boardroom.storage.errors import StorageError, UsernameTakenError
from boardroom.storage.memory import MemoryRepository, MemoryStorage, generate_id

__all__ = [
    "Repository",
    "Storage",
    "MemoryRepository",
    "MemoryStorage",
    "generate_id",
    "StorageError",
    "UsernameTakenError",
]
