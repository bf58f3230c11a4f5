"""Play catalog lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import UnknownPlayIdError

if TYPE_CHECKING:
    from .model import Catalog, Play


def lookup_play(catalog: Catalog, play_id: str) -> Play:
    """Return the catalog entry for ``play_id`` or raise :class:`UnknownPlayIdError`."""

    try:
        return catalog[play_id]
    except KeyError:
        raise UnknownPlayIdError(play_id) from None
