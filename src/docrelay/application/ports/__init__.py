"""Application ports - interfaces for external collaborators."""

from docrelay.application.ports.backing_store import BackingStore
from docrelay.application.ports.cryptographer import Cryptographer
from docrelay.application.ports.recognizer import Recognizer
from docrelay.application.ports.sender import Sender

__all__ = [
    "BackingStore",
    "Cryptographer",
    "Recognizer",
    "Sender",
]
