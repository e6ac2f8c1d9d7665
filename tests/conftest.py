"""Pytest fixtures for docrelay tests."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import Any

import pytest

from docrelay.domain.entities import Document, File
from docrelay.domain.value_objects import Credential

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)


# --- Fake collaborators ---


class FakeRecognizer:
    """Recognizer backed by a file -> document mapping; unknown files fail."""

    def __init__(self) -> None:
        self.documents: dict[File, Document] = {}
        self.calls: list[File] = []

    def add(self, file: File, document: Document) -> None:
        self.documents[file] = document

    def recognize(self, file: File) -> Document | None:
        self.calls.append(file)
        return self.documents.get(file)


class FakeCryptographer:
    """Cryptographer that prefixes content with a fixed signature marker."""

    def __init__(self) -> None:
        self.calls: list[tuple[bytes, Credential]] = []

    def sign(self, content: bytes, credential: Credential) -> bytes:
        self.calls.append((content, credential))
        return b"signed:" + content


class FakeSender:
    """Sender that rejects a configured set of payloads.

    Optional per-payload delays let tests force out-of-order completion.
    """

    def __init__(self) -> None:
        self.rejected: set[bytes] = set()
        self.delays: dict[bytes, float] = {}
        self.sent: list[bytes] = []

    async def try_send(self, payload: bytes) -> bool:
        delay = self.delays.get(payload)
        if delay:
            await asyncio.sleep(delay)
        self.sent.append(payload)
        return payload not in self.rejected


class FakeBackingStore:
    """In-memory backing store counting reads per key."""

    def __init__(self, values: dict[str, Any] | None = None, delay: float = 0.0) -> None:
        self.values = dict(values or {})
        self.delay = delay
        self.reads: list[str] = []

    async def try_read(self, key: str) -> Any | None:
        self.reads.append(key)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.values.get(key)

    def read_count(self, key: str) -> int:
        return self.reads.count(key)


# --- Fixtures ---


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation time for freshness checks."""
    return FIXED_NOW


@pytest.fixture
def clock(now: datetime):
    """Clock returning the fixed evaluation time."""
    return lambda: now


@pytest.fixture
def credential() -> Credential:
    """Opaque signing credential."""
    return Credential(value=object())


@pytest.fixture
def file() -> File:
    """A file that clears every stage under the default fake setup."""
    return File(name="someFile", content=b"\x01\x02\x03")


@pytest.fixture
def make_document(now: datetime):
    """Build a document for a file, fresh and in format 4.0 unless overridden."""

    def _make(file: File, created_at: datetime | None = None, format: str = "4.0") -> Document:
        return Document(
            name=file.name,
            content=file.content,
            created_at=created_at or now,
            format=format,
        )

    return _make


@pytest.fixture
def recognizer(file: File, make_document) -> FakeRecognizer:
    """Recognizer that knows the default file."""
    fake = FakeRecognizer()
    fake.add(file, make_document(file))
    return fake


@pytest.fixture
def cryptographer() -> FakeCryptographer:
    return FakeCryptographer()


@pytest.fixture
def sender() -> FakeSender:
    return FakeSender()


@pytest.fixture
def backing_store() -> FakeBackingStore:
    """Backing store resolving two known keys."""
    return FakeBackingStore({"TheDress": {"id": "TheDress"}, "CoolBoots": {"id": "CoolBoots"}})


@pytest.fixture
def restore_root_logger():
    """Yield the root logger and put its handlers and level back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
