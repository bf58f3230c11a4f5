from __future__ import annotations

import pytest

from playbill.domain.model import Catalog, Genre, Invoice, Performance, Play


@pytest.fixture
def plays_payload() -> dict[str, dict[str, str]]:
    return {
        "hamlet": {"name": "Hamlet", "type": "tragedy"},
        "as-like": {"name": "As You Like It", "type": "comedy"},
        "othello": {"name": "Othello", "type": "tragedy"},
    }


@pytest.fixture
def invoice_payload() -> dict[str, object]:
    return {
        "customer": "BigCo",
        "performances": [
            {"playID": "hamlet", "audience": 55},
            {"playID": "as-like", "audience": 35},
            {"playID": "othello", "audience": 40},
        ],
    }


@pytest.fixture
def catalog() -> Catalog:
    return {
        "hamlet": Play(name="Hamlet", genre=Genre.TRAGEDY),
        "as-like": Play(name="As You Like It", genre=Genre.COMEDY),
        "othello": Play(name="Othello", genre=Genre.TRAGEDY),
    }


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


@pytest.fixture
def expected_text() -> str:
    return (
        "Statement for BigCo\n"
        "  Hamlet: $650.00 (55 seats)\n"
        "  As You Like It: $580.00 (35 seats)\n"
        "  Othello: $500.00 (40 seats)\n"
        "Amount owed is $1,730.00\n"
        "You earned 47 credits\n"
    )
