"""Domain records for invoices, plays and computed statements."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class Genre(StrEnum):
    """Play categories with a registered pricing rule."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"


@dataclass(frozen=True, slots=True)
class Play:
    """Reference data for a play.

    ``genre`` stays a plain string when it matches no :class:`Genre` member so the
    pricing factory can report it.
    """

    name: str
    genre: Genre | str


@dataclass(frozen=True, slots=True)
class Performance:
    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise ValueError(f"audience must be an integer: {self.audience!r}")
        if self.audience < 0:
            raise ValueError(f"audience cannot be negative: {self.audience}")


@dataclass(frozen=True, slots=True)
class Invoice:
    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable, store an immutable sequence
        object.__setattr__(self, "performances", tuple(self.performances))


Catalog: TypeAlias = Mapping[str, Play]


@dataclass(frozen=True, slots=True)
class EnrichedPerformance:
    """A performance joined with its play and the computed financial fields."""

    performance: Performance
    play: Play
    amount: int
    volume_credits: int

    @property
    def audience(self) -> int:
        return self.performance.audience

    @property
    def play_name(self) -> str:
        return self.play.name


@dataclass(frozen=True, slots=True)
class StatementData:
    """Immutable snapshot consumed by the renderers."""

    customer: str
    performances: tuple[EnrichedPerformance, ...]
    total_amount: int
    total_volume_credits: int
