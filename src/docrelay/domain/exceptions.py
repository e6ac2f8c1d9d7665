"""Domain exceptions."""


class DocRelayError(Exception):
    """Base exception for docrelay."""

    pass


class ValidationError(DocRelayError):
    """Validation failed for input data."""

    pass
