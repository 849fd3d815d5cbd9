"""Errors raised by the search engine."""


class SearchEngineError(Exception):
    """Base class for search engine failures."""


class MissingArgumentError(SearchEngineError, ValueError):
    """A required argument was not supplied."""


class LookupFailedError(SearchEngineError):
    """A directory collaborator raised while serving a search operation."""

    def __init__(self, operation: str, original: Exception):
        self.operation = operation
        self.original = original
        super().__init__(f"Failed to {operation}: {original}")
