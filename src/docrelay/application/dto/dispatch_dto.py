"""Dispatch DTOs."""

from dataclasses import dataclass, field

from docrelay.domain.entities import File


@dataclass(frozen=True)
class DispatchResult:
    """Output of a dispatch run: inputs that failed any stage, in input order."""

    skipped_files: tuple[File, ...] = field(default_factory=tuple)
