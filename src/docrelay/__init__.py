"""docrelay - batch document dispatch and memoizing lookup."""

__version__ = "0.1.0"
