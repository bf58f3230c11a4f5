"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging, resolve_log_level
from .settings import RenderConfig, StatementFormat, get_render_config, parse_statement_format

__all__ = [
    "ConfigurationError",
    "RenderConfig",
    "StatementFormat",
    "configure_logging",
    "get_render_config",
    "parse_statement_format",
    "resolve_log_level",
]
