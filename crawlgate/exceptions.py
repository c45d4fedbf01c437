"""Custom exceptions for crawlgate."""


class InvalidFilterResultError(ValueError):
    """Raised when a FilterResult is built without a usable reason."""

    def __init__(self, reason: object):
        self.reason = reason
        super().__init__(f"Parameter reason must be a string, got {reason!r}")


class FilterConfigError(Exception):
    """Raised when a parse filter configuration cannot be turned into filters."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Filter config '{source}' {reason}")
