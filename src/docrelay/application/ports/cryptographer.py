"""Cryptographer port - signs document content."""

from typing import Protocol

from docrelay.domain.value_objects import Credential


class Cryptographer(Protocol):
    """Port for signing content under a credential."""

    def sign(self, content: bytes, credential: Credential) -> bytes: ...
