"""Backing store port - slow source of values behind a cache."""

from typing import Any, Protocol


class BackingStore(Protocol):
    """Port for reading a value by key."""

    async def try_read(self, key: str) -> Any | None:
        """Return the value for key, or None on a miss or read failure."""
        ...
