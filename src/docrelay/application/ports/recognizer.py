"""Recognizer port - turns raw files into documents."""

from typing import Protocol

from docrelay.domain.entities import Document, File


class Recognizer(Protocol):
    """Port for parsing a file into a structured document."""

    def recognize(self, file: File) -> Document | None:
        """Return the recognized document, or None when the file cannot be parsed."""
        ...
