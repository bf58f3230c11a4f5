"""Genre-specific pricing and volume-credit rules.

Each genre has one calculator. Calculators hold no state, so a single shared
instance per genre is registered at import time and handed out by
:func:`calculator_for`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .errors import UnknownGenreError
from .model import Genre

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .model import Performance

TRAGEDY_BASE_AMOUNT: Final = 40000
TRAGEDY_AUDIENCE_THRESHOLD: Final = 30
COMEDY_BASE_AMOUNT: Final = 30000
COMEDY_AUDIENCE_THRESHOLD: Final = 20
VOLUME_CREDIT_THRESHOLD: Final = 30


class PerformanceCalculator(ABC):
    """Computes the amount (in cents) and volume credits for one performance."""

    @abstractmethod
    def amount_for(self, performance: Performance) -> int: ...

    def volume_credits_for(self, performance: Performance) -> int:
        return max(performance.audience - VOLUME_CREDIT_THRESHOLD, 0)


class TragedyCalculator(PerformanceCalculator):
    def amount_for(self, performance: Performance) -> int:
        amount = TRAGEDY_BASE_AMOUNT
        if performance.audience > TRAGEDY_AUDIENCE_THRESHOLD:
            amount += 1000 * (performance.audience - TRAGEDY_AUDIENCE_THRESHOLD)
        return amount


class ComedyCalculator(PerformanceCalculator):
    def amount_for(self, performance: Performance) -> int:
        amount = COMEDY_BASE_AMOUNT
        if performance.audience > COMEDY_AUDIENCE_THRESHOLD:
            amount += 10000 + 500 * (performance.audience - COMEDY_AUDIENCE_THRESHOLD)
        amount += 300 * performance.audience
        return amount

    def volume_credits_for(self, performance: Performance) -> int:
        # one extra credit for every five attendees
        return super().volume_credits_for(performance) + performance.audience // 5


_CALCULATORS: Final[Mapping[str, PerformanceCalculator]] = MappingProxyType(
    {
        Genre.TRAGEDY: TragedyCalculator(),
        Genre.COMEDY: ComedyCalculator(),
    }
)


def calculator_for(genre: Genre | str) -> PerformanceCalculator:
    """Return the shared calculator registered for ``genre``."""

    try:
        calculator = _CALCULATORS.get(genre)
    except TypeError:
        # unhashable genre values cannot be registered
        calculator = None
    if calculator is None:
        raise UnknownGenreError(genre)
    return calculator


def registered_genres() -> tuple[str, ...]:
    """Return the genres that have a pricing rule, in registration order."""

    return tuple(_CALCULATORS)
