"""Composition root and CLI entry point."""

from docrelay import __version__
from docrelay.app_logging import configure_logging
from docrelay.application.ports import BackingStore, Cryptographer, Recognizer, Sender
from docrelay.application.use_cases.dispatch.dispatch_files import DispatchFilesUseCase
from docrelay.config import Settings, get_settings
from docrelay.domain.value_objects import FreshnessWindow
from docrelay.infrastructure.caching.memoizing_lookup import MemoizingLookup


def main() -> None:
    """CLI entry point."""
    configure_logging()
    print(f"docrelay v{__version__}")


def create_dispatcher(
    recognizer: Recognizer,
    cryptographer: Cryptographer,
    sender: Sender,
    settings: Settings | None = None,
) -> DispatchFilesUseCase:
    """Wire a dispatcher from caller-owned collaborators and settings."""
    settings = settings or get_settings()
    return DispatchFilesUseCase(
        recognizer=recognizer,
        cryptographer=cryptographer,
        sender=sender,
        accepted_formats=settings.accepted_formats,
        freshness_window=FreshnessWindow(months=settings.freshness_months),
        max_concurrency=settings.dispatch_concurrency,
    )


def create_lookup(backing_store: BackingStore) -> MemoizingLookup:
    """Wrap a caller-owned backing store in a fresh cache."""
    return MemoizingLookup(backing_store)
