"""Errors raised while building a statement."""

from __future__ import annotations


class StatementError(LookupError):
    """Base class for data-integrity errors that abort statement construction."""


class UnknownPlayIdError(StatementError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        self.play_id = play_id
        super().__init__(f"Unknown play id: {play_id!r}")


class UnknownGenreError(StatementError):
    """Raised when a play's genre has no registered pricing strategy."""

    def __init__(self, genre: object) -> None:
        self.genre = genre
        super().__init__(f"{genre!r}: unknown genre")
