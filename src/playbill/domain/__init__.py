"""Statement domain: records, pricing rules and the calculation phase."""

from __future__ import annotations

from .catalog import lookup_play
from .errors import StatementError, UnknownGenreError, UnknownPlayIdError
from .model import Catalog, EnrichedPerformance, Genre, Invoice, Performance, Play, StatementData
from .pricing import (
    ComedyCalculator,
    PerformanceCalculator,
    TragedyCalculator,
    calculator_for,
    registered_genres,
)
from .statement_data import aggregate, enrich_performance, enrich_performances, make_statement_data

__all__ = [
    "Catalog",
    "ComedyCalculator",
    "EnrichedPerformance",
    "Genre",
    "Invoice",
    "Performance",
    "PerformanceCalculator",
    "Play",
    "StatementData",
    "StatementError",
    "TragedyCalculator",
    "UnknownGenreError",
    "UnknownPlayIdError",
    "aggregate",
    "calculator_for",
    "enrich_performance",
    "enrich_performances",
    "lookup_play",
    "make_statement_data",
    "registered_genres",
]
