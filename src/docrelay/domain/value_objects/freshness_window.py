"""Calendar-month freshness window for recognized documents."""

from dataclasses import dataclass
from datetime import datetime

from dateutil.relativedelta import relativedelta


@dataclass(frozen=True)
class FreshnessWindow:
    """Documents stay fresh for a whole number of calendar months after creation.

    Month addition clamps to the last day of the target month, so a document
    created on Jan 31 expires on Feb 28 (or Feb 29 in a leap year).
    """

    months: int = 1

    def __post_init__(self) -> None:
        if self.months < 1:
            raise ValueError("Freshness window must be at least one month")

    def expires_at(self, created_at: datetime) -> datetime:
        return created_at + relativedelta(months=self.months)

    def is_fresh(self, created_at: datetime, now: datetime) -> bool:
        """True while expiry is strictly later than now."""
        return self.expires_at(created_at) > now
