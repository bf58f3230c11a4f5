from __future__ import annotations

import dataclasses

import pytest

from playbill.domain import Genre, Invoice, Performance, Play


def test_performance_rejects_negative_audience() -> None:
    with pytest.raises(ValueError, match="audience cannot be negative"):
        Performance(play_id="hamlet", audience=-1)


@pytest.mark.parametrize("audience", [30.5, "55", True])
def test_performance_rejects_non_integer_audience(audience: object) -> None:
    with pytest.raises(ValueError, match="audience must be an integer"):
        Performance(play_id="hamlet", audience=audience)  # type: ignore[arg-type]


def test_performance_accepts_empty_house() -> None:
    assert Performance(play_id="hamlet", audience=0).audience == 0


def test_invoice_stores_performances_as_tuple() -> None:
    performances = [Performance(play_id="hamlet", audience=10)]

    invoice = Invoice(customer="BigCo", performances=performances)  # type: ignore[arg-type]
    performances.append(Performance(play_id="othello", audience=20))

    assert invoice.performances == (Performance(play_id="hamlet", audience=10),)


def test_records_are_frozen() -> None:
    play = Play(name="Hamlet", genre=Genre.TRAGEDY)

    with pytest.raises(dataclasses.FrozenInstanceError):
        play.name = "Macbeth"  # type: ignore[misc]


def test_genre_compares_with_plain_strings() -> None:
    assert Genre.TRAGEDY == "tragedy"
    assert Genre("comedy") is Genre.COMEDY
