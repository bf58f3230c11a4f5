"""Pydantic models describing JSON-shaped play and invoice payloads."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, RootModel, field_validator


def _require_text(value: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped


class PayloadModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class PlayPayload(PayloadModel):
    name: str
    type: str

    _normalize_name = field_validator("name")(_require_text)

    @field_validator("type")
    @classmethod
    def _normalize_type(cls, value: str) -> str:
        return _require_text(value).lower()


class PerformancePayload(PayloadModel):
    play_id: str = Field(alias="playID")
    audience: NonNegativeInt

    _normalize_play_id = field_validator("play_id")(_require_text)


class InvoicePayload(PayloadModel):
    customer: str
    performances: list[PerformancePayload] = Field(default_factory=list)

    _normalize_customer = field_validator("customer")(_require_text)


class PlaysPayload(RootModel[dict[str, PlayPayload]]):
    """Mapping of play id to play, as found in ``plays.json``."""


PlaysPayloadInput = PlaysPayload | Mapping[str, object]
InvoicePayloadInput = InvoicePayload | Mapping[str, object]
