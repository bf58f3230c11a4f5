from __future__ import annotations

from typing import TYPE_CHECKING

from .currency import format_currency

if TYPE_CHECKING:
    from playbill.domain.model import StatementData


def render_plain_text(data: StatementData) -> str:
    lines = [f"Statement for {data.customer}"]
    lines.extend(
        f"  {perf.play_name}: {format_currency(perf.amount)} ({perf.audience} seats)"
        for perf in data.performances
    )
    lines.append(f"Amount owed is {format_currency(data.total_amount)}")
    lines.append(f"You earned {data.total_volume_credits} credits")
    return "".join(f"{line}\n" for line in lines)
