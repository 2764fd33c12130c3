from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Sequence
import logging

from ..models import PlaylistEntry

logger = logging.getLogger(__name__)

HEADER = "#EXTM3U"


def _extinf_line(entry: PlaylistEntry) -> str:
    # Duration in seconds (rounded) or -1 if unknown
    if entry.duration_ms is None:
        dur_sec = -1
    else:
        dur_sec = int(round(entry.duration_ms / 1000.0))
    artist = entry.artist or ''
    name = entry.title or ''
    if artist and name:
        info = f"{artist} - {name}"
    else:
        info = name or artist or entry.location
    return f"#EXTINF:{dur_sec},{info}".strip()


def render_m3u(entries: Iterable[PlaylistEntry]) -> str:
    """Render entries as an extended M3U playlist (one EXTINF + location per entry)."""
    lines: List[str] = [HEADER]
    for entry in entries:
        lines.append(_extinf_line(entry))
        lines.append(entry.location)
    return '\n'.join(lines) + '\n'


def export_m3u(entries: Sequence[PlaylistEntry], path: Path) -> Path:
    """Write entries to ``path`` as extended M3U, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_m3u(entries), encoding='utf-8')
    logger.debug(f"[exported] entries={len(entries)} file={path}")
    return path


__all__ = ["HEADER", "render_m3u", "export_m3u"]
