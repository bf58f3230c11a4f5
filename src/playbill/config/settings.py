"""Rendering configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .errors import ConfigurationError

STATEMENT_FORMAT_ENV: Final[str] = "PLAYBILL_STATEMENT_FORMAT"


class StatementFormat(StrEnum):
    TEXT = "text"
    HTML = "html"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    format: StatementFormat = StatementFormat.TEXT


def parse_statement_format(value: str) -> StatementFormat:
    try:
        return StatementFormat(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in StatementFormat)
        raise ConfigurationError(
            f"Invalid statement format {value!r} (expected one of: {choices})"
        ) from exc


def get_render_config() -> RenderConfig:
    env_format = os.getenv(STATEMENT_FORMAT_ENV)
    if env_format is None or not env_format.strip():
        return RenderConfig()
    return RenderConfig(format=parse_statement_format(env_format))
