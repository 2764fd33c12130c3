"""Enrich service: run metadata handlers over a whole playlist.

A handler only returns the entries it supports. This service puts each
converted entry back at the position of the entry it came from, so entries no
handler claims (local files) keep their place in the playlist.
"""

from __future__ import annotations
import time
import logging
from typing import Any, List, Sequence

from ..handlers.base import ApiMetadataHandler
from ..models import PlaylistEntry

logger = logging.getLogger(__name__)


class EnrichResult:
    """Results from an enrich operation."""

    def __init__(self):
        self.entries: List[PlaylistEntry] = []
        self.total = 0
        self.claimed = 0
        self.enriched = 0
        self.duration_seconds = 0.0

    @property
    def missing(self) -> int:
        return self.claimed - self.enriched


def enrich_entries(
    entries: Sequence[PlaylistEntry],
    handlers: Sequence[ApiMetadataHandler[Any, Any, Any, PlaylistEntry]],
) -> EnrichResult:
    """Enrich playlist entries with every handler in turn.

    Args:
        entries: Playlist entries in playlist order
        handlers: Handlers to apply; each claims entries of its ``entry_type``

    Returns:
        EnrichResult with the enriched playlist and counts

    Raises:
        Whatever a handler's metadata fetch raises; no partial result is returned
    """
    result = EnrichResult()
    start = time.time()
    current: List[Any] = list(entries)
    result.total = len(current)

    for handler in handlers:
        positions = [i for i, entry in enumerate(current) if isinstance(entry, handler.entry_type)]
        if not positions:
            logger.debug(f"No {handler.entity_name} entries in playlist")
            continue
        claimed = [current[i] for i in positions]
        converted = handler.match_entries(current)
        if len(converted) != len(positions):
            raise RuntimeError(
                f"{type(handler).__name__} returned {len(converted)} entries for {len(positions)} inputs"
            )
        result.claimed += len(positions)
        result.enriched += sum(1 for entry in claimed if getattr(entry, 'metadata', None) is not None)
        for i, entry in zip(positions, converted):
            current[i] = entry

    result.entries = current
    result.duration_seconds = time.time() - start
    return result


__all__ = ["EnrichResult", "enrich_entries"]
