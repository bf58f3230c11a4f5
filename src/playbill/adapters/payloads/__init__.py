"""Public interface for the JSON payload adapter."""

from __future__ import annotations

from .schema import (
    InvoicePayload,
    InvoicePayloadInput,
    PerformancePayload,
    PlayPayload,
    PlaysPayload,
    PlaysPayloadInput,
)
from .translator import parse_catalog, parse_invoice, parse_invoices

__all__ = [
    "InvoicePayload",
    "InvoicePayloadInput",
    "PerformancePayload",
    "PlayPayload",
    "PlaysPayload",
    "PlaysPayloadInput",
    "parse_catalog",
    "parse_invoice",
    "parse_invoices",
]
