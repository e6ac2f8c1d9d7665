"""Document entity."""

from dataclasses import dataclass
from datetime import datetime

from docrelay.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Document:
    """Recognized representation of a file, with format token and creation time."""

    name: str
    content: bytes
    created_at: datetime
    format: str

    def __post_init__(self) -> None:
        if self.created_at.tzinfo is None or self.created_at.utcoffset() is None:
            raise ValidationError("Document created_at must be timezone-aware")
