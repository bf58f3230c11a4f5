"""Translate validated payloads into domain records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from playbill.domain.model import Genre, Invoice, Performance, Play
from playbill.domain.pricing import registered_genres

from .schema import InvoicePayload, PlaysPayload

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import InvoicePayloadInput, PlaysPayloadInput


log = getLogger(__name__)


def _ensure_plays_payload(payload: PlaysPayloadInput) -> PlaysPayload:
    if isinstance(payload, PlaysPayload):
        return payload
    return PlaysPayload.model_validate(payload)


def _ensure_invoice_payload(payload: InvoicePayloadInput) -> InvoicePayload:
    if isinstance(payload, InvoicePayload):
        return payload
    return InvoicePayload.model_validate(payload)


def _to_genre(value: str) -> Genre | str:
    try:
        return Genre(value)
    except ValueError:
        # left as-is; pricing reports unknown genres
        log.warning(
            "Play genre %r has no pricing rule (known: %s)", value, ", ".join(registered_genres())
        )
        return value


def parse_catalog(payload: PlaysPayloadInput) -> dict[str, Play]:
    """Return a play catalog keyed by play id."""

    plays = _ensure_plays_payload(payload)
    return {
        play_id: Play(name=play.name, genre=_to_genre(play.type))
        for play_id, play in plays.root.items()
    }


def parse_invoice(payload: InvoicePayloadInput) -> Invoice:
    invoice = _ensure_invoice_payload(payload)
    return Invoice(
        customer=invoice.customer,
        performances=tuple(
            Performance(play_id=perf.play_id, audience=perf.audience)
            for perf in invoice.performances
        ),
    )


def parse_invoices(payloads: Iterable[InvoicePayloadInput]) -> list[Invoice]:
    return [parse_invoice(payload) for payload in payloads]
