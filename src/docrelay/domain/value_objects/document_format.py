"""Document format tokens accepted for dispatch."""

from enum import StrEnum


class DocumentFormat(StrEnum):
    """Format versions a recognized document may declare."""

    V4_0 = "4.0"
    V3_1 = "3.1"

    @classmethod
    def defaults(cls) -> frozenset[str]:
        return frozenset(member.value for member in cls)
