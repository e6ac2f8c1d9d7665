"""Domain entities."""

from docrelay.domain.entities.document import Document
from docrelay.domain.entities.file import File

__all__ = [
    "Document",
    "File",
]
