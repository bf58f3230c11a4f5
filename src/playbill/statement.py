"""Public entry points: invoice + catalog in, rendered statement out."""

from __future__ import annotations

from typing import TYPE_CHECKING

from playbill.domain.statement_data import make_statement_data
from playbill.rendering import render_html, render_plain_text

if TYPE_CHECKING:
    from playbill.domain.model import Catalog, Invoice


def statement(invoice: Invoice, catalog: Catalog) -> str:
    """Return the plain-text statement for ``invoice``."""

    return render_plain_text(make_statement_data(invoice, catalog))


def html_statement(invoice: Invoice, catalog: Catalog) -> str:
    """Return the HTML statement for ``invoice``."""

    return render_html(make_statement_data(invoice, catalog))
