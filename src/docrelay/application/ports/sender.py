"""Sender port - transmits signed payloads."""

from typing import Protocol


class Sender(Protocol):
    """Port for transmitting a signed payload."""

    async def try_send(self, payload: bytes) -> bool: ...
