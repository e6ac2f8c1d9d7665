"""Domain value objects."""

from docrelay.domain.value_objects.credential import Credential
from docrelay.domain.value_objects.document_format import DocumentFormat
from docrelay.domain.value_objects.freshness_window import FreshnessWindow
from docrelay.domain.value_objects.skip_reason import SkipReason

__all__ = [
    "Credential",
    "DocumentFormat",
    "FreshnessWindow",
    "SkipReason",
]
