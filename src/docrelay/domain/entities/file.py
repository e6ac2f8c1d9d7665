"""File entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class File:
    """Named, immutable blob of input bytes."""

    name: str
    content: bytes
