"""Signing credential."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Credential:
    """Opaque signing token handed to the cryptographer as-is."""

    value: Any
