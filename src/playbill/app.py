"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from playbill.adapters.payloads import parse_catalog, parse_invoices
from playbill.config import RenderConfig, StatementFormat, get_render_config
from playbill.statement import html_statement, statement

if TYPE_CHECKING:
    from collections.abc import Iterable

    from playbill.adapters.payloads import InvoicePayloadInput, PlaysPayloadInput
    from playbill.domain.model import Catalog, Invoice


log = getLogger(__name__)


def render_statement(invoice: Invoice, catalog: Catalog, fmt: StatementFormat) -> str:
    if fmt is StatementFormat.HTML:
        return html_statement(invoice, catalog)
    return statement(invoice, catalog)


def render_statements(
    invoices: Iterable[InvoicePayloadInput],
    plays: PlaysPayloadInput,
    *,
    config: RenderConfig | None = None,
) -> list[str]:
    """Validate raw payloads and render one statement per invoice."""

    effective_config = config or get_render_config()
    catalog = parse_catalog(plays)
    parsed = parse_invoices(invoices)
    log.info(
        "Rendering statements: invoices=%s, plays=%s, format=%s",
        len(parsed),
        len(catalog),
        effective_config.format,
    )

    rendered: list[str] = []
    for invoice in parsed:
        try:
            rendered.append(render_statement(invoice, catalog, effective_config.format))
        except Exception:
            log.exception("Failed to render statement for %s", invoice.customer)
            raise

    log.info("Finished rendering %s statements", len(rendered))
    return rendered
