"""Calculation phase: enrich performances, aggregate totals, assemble a snapshot."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .catalog import lookup_play
from .model import EnrichedPerformance, StatementData
from .pricing import calculator_for

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import Catalog, Invoice, Performance


log = getLogger(__name__)


def enrich_performance(performance: Performance, catalog: Catalog) -> EnrichedPerformance:
    play = lookup_play(catalog, performance.play_id)
    calculator = calculator_for(play.genre)
    return EnrichedPerformance(
        performance=performance,
        play=play,
        amount=calculator.amount_for(performance),
        volume_credits=calculator.volume_credits_for(performance),
    )


def enrich_performances(invoice: Invoice, catalog: Catalog) -> tuple[EnrichedPerformance, ...]:
    """Join every performance with its play and computed fields, in input order.

    The first unknown play id or genre aborts the whole invoice.
    """

    return tuple(enrich_performance(performance, catalog) for performance in invoice.performances)


def aggregate(performances: Iterable[EnrichedPerformance]) -> tuple[int, int]:
    """Return ``(total_amount, total_volume_credits)`` for the given performances."""

    total_amount = 0
    total_volume_credits = 0
    for performance in performances:
        total_amount += performance.amount
        total_volume_credits += performance.volume_credits
    return total_amount, total_volume_credits


def make_statement_data(invoice: Invoice, catalog: Catalog) -> StatementData:
    """Build the immutable statement snapshot for ``invoice``."""

    performances = enrich_performances(invoice, catalog)
    total_amount, total_volume_credits = aggregate(performances)
    log.debug(
        "Statement data for %s: performances=%s, total_amount=%s, credits=%s",
        invoice.customer,
        len(performances),
        total_amount,
        total_volume_credits,
    )
    return StatementData(
        customer=invoice.customer,
        performances=performances,
        total_amount=total_amount,
        total_volume_credits=total_volume_credits,
    )
