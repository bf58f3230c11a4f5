from __future__ import annotations

import pytest

import playbill
from playbill import html_statement, statement
from playbill.domain import (
    Catalog,
    Invoice,
    Performance,
    Play,
    UnknownGenreError,
    UnknownPlayIdError,
)


def test_statement_big_co(invoice: Invoice, catalog: Catalog, expected_text: str) -> None:
    assert statement(invoice, catalog) == expected_text


def test_html_statement_has_same_figures(invoice: Invoice, catalog: Catalog) -> None:
    html = html_statement(invoice, catalog)

    assert html.count("<tr><td>") == len(invoice.performances)
    for figure in ("$650.00", "$580.00", "$500.00", "<em>$1,730.00</em>", "<em>47</em>"):
        assert figure in html


def test_statements_are_idempotent(invoice: Invoice, catalog: Catalog) -> None:
    assert statement(invoice, catalog) == statement(invoice, catalog)
    assert html_statement(invoice, catalog) == html_statement(invoice, catalog)


def test_inputs_are_not_mutated(invoice: Invoice, catalog: Catalog) -> None:
    before = (invoice, dict(catalog))

    statement(invoice, catalog)

    assert (invoice, dict(catalog)) == before


@pytest.mark.parametrize("render", [statement, html_statement])
def test_unknown_play_id_produces_no_output(render: object, catalog: Catalog) -> None:
    invoice = Invoice(customer="BigCo", performances=(Performance(play_id="lear", audience=5),))

    with pytest.raises(UnknownPlayIdError):
        render(invoice, catalog)  # type: ignore[operator]


@pytest.mark.parametrize("render", [statement, html_statement])
def test_unknown_genre_produces_no_output(render: object) -> None:
    catalog = {"xyz": Play(name="XYZ", genre="opera")}
    invoice = Invoice(customer="UT KK", performances=(Performance(play_id="xyz", audience=10),))

    with pytest.raises(UnknownGenreError, match="'opera': unknown genre"):
        render(invoice, catalog)  # type: ignore[operator]


def test_version_is_exposed() -> None:
    assert isinstance(playbill.__version__, str)
