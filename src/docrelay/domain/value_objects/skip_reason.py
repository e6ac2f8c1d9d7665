"""Reasons a file can be skipped during dispatch."""

from enum import StrEnum


class SkipReason(StrEnum):
    """Pipeline stage at which a file dropped out. Logged, never returned."""

    UNRECOGNIZED = "unrecognized"
    UNSUPPORTED_FORMAT = "unsupported_format"
    STALE = "stale"
    SEND_FAILED = "send_failed"
