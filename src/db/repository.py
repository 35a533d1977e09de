"""Protocol for the durable key-value store (can implement for SQL Alchemy / in memory / a file etc.)"""

from typing import Protocol


class KeyValueStore(Protocol):
    """Durable mapping from a key to a serialized value."""

    def get_item(self, key: str) -> str | None:
        """Get the value stored under key, if any."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing whatever was there."""
        ...
