"""Dispatch files use case."""

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import UTC, datetime

from docrelay.application.dto.dispatch_dto import DispatchResult
from docrelay.application.ports import Cryptographer, Recognizer, Sender
from docrelay.domain.entities import Document, File
from docrelay.domain.exceptions import ValidationError
from docrelay.domain.value_objects import (
    Credential,
    DocumentFormat,
    FreshnessWindow,
    SkipReason,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DispatchFilesUseCase:
    """Recognize, validate, sign and send a batch of files; report the skipped ones.

    Every file runs through the stages on its own. A file that fails a stage
    skips the remaining ones and ends up in the result; nothing is raised for
    such failures.
    """

    def __init__(
        self,
        recognizer: Recognizer,
        cryptographer: Cryptographer,
        sender: Sender,
        accepted_formats: Iterable[str] | None = None,
        freshness_window: FreshnessWindow | None = None,
        max_concurrency: int = 8,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if isinstance(accepted_formats, str):
            raise ValidationError(
                "accepted_formats must be a collection of format tokens, not a string"
            )
        formats = (
            DocumentFormat.defaults()
            if accepted_formats is None
            else frozenset(accepted_formats)
        )
        if not formats:
            raise ValidationError("At least one accepted format is required")
        if max_concurrency < 1:
            raise ValidationError("max_concurrency must be at least 1")

        self._recognizer = recognizer
        self._cryptographer = cryptographer
        self._sender = sender
        self._accepted_formats = formats
        self._freshness_window = freshness_window or FreshnessWindow()
        self._max_concurrency = max_concurrency
        self._clock = clock

    async def execute(self, files: Sequence[File], credential: Credential) -> DispatchResult:
        """Dispatch all files under one credential."""
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _bounded(file: File) -> SkipReason | None:
            async with semaphore:
                return await self._try_send_file(file, credential)

        # gather keeps results positional, so skipped files stay in input order
        outcomes = await asyncio.gather(*(_bounded(f) for f in files))

        skipped = tuple(f for f, reason in zip(files, outcomes, strict=True) if reason is not None)
        logger.info(
            "Dispatched %d file(s): %d sent, %d skipped",
            len(files),
            len(files) - len(skipped),
            len(skipped),
        )
        return DispatchResult(skipped_files=skipped)

    async def _try_send_file(self, file: File, credential: Credential) -> SkipReason | None:
        """Run one file through the pipeline; return why it was skipped, if it was."""
        document = self._recognizer.recognize(file)
        if document is None:
            return self._skip(file, SkipReason.UNRECOGNIZED)
        if not self._check_format(document):
            return self._skip(file, SkipReason.UNSUPPORTED_FORMAT)
        if not self._check_actual(document):
            return self._skip(file, SkipReason.STALE)

        payload = self._cryptographer.sign(document.content, credential)
        if not await self._sender.try_send(payload):
            return self._skip(file, SkipReason.SEND_FAILED)
        return None

    def _check_format(self, document: Document) -> bool:
        return document.format in self._accepted_formats

    def _check_actual(self, document: Document) -> bool:
        return self._freshness_window.is_fresh(document.created_at, self._clock())

    @staticmethod
    def _skip(file: File, reason: SkipReason) -> SkipReason:
        logger.info("Skipping file %r: %s", file.name, reason.value)
        return reason
