"""Errors raised by the search engine."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a search window argument is out of range."""

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


class SearchCancelledError(RuntimeError):
    """Raised when a caller-supplied cancel check stops a running query."""

    def __init__(self, scored: int):
        super().__init__(f"Search cancelled after scoring {scored} candidates")
        self.scored = scored


__all__ = ["InvalidArgumentError", "SearchCancelledError"]
