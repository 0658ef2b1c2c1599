"""Storage layer exceptions.

Missing records are not errors here: lookups return ``None`` and
deletes return ``False``.
"""


class StorageError(Exception):
    """Base class for storage failures."""


class UsernameTakenError(StorageError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already exists: {username}")
