"""Renderers turning statement data into text."""

from __future__ import annotations

from .currency import format_currency
from .html import render_html
from .plain_text import render_plain_text

__all__ = ["format_currency", "render_html", "render_plain_text"]
