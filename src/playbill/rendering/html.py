"""HTML statement rendering."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from .currency import format_currency

if TYPE_CHECKING:
    from playbill.domain.model import StatementData

TABLE_HEADER = "<tr><th>play</th><th>seats</th><th>cost</th></tr>"


def render_html(data: StatementData) -> str:
    """Render ``data`` as an ``<h1>``/``<table>``/``<p>`` fragment.

    Customer and play names are escaped; numbers are already safe.
    """

    lines = [f"<h1>Statement for {escape(data.customer)}</h1>", "<table>", TABLE_HEADER]
    lines.extend(
        f"  <tr><td>{escape(perf.play_name)}</td><td>{perf.audience}</td>"
        f"<td>{format_currency(perf.amount)}</td></tr>"
        for perf in data.performances
    )
    lines.append("</table>")
    lines.append(f"<p>Amount owed is <em>{format_currency(data.total_amount)}</em></p>")
    lines.append(f"<p>You earned <em>{data.total_volume_credits}</em> credits</p>")
    return "".join(f"{line}\n" for line in lines)
