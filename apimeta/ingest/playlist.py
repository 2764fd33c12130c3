"""Read text/M3U playlists into playlist entries.

One entry per non-comment line. Lines that reference a Spotify track, album
or artist become the matching Spotify entry type; anything else is treated as
a local file. An ``#EXTINF`` line preceding an entry supplies its display
fields (duration, artist, title).
"""

from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Iterable, List, Tuple

from ..models import (
    PlaylistEntry,
    SpotifyAlbumEntry,
    SpotifyArtistEntry,
    SpotifyTrackEntry,
)
from ..providers.spotify.ids import KINDS, is_valid_spotify_id, parse_spotify_id

logger = logging.getLogger(__name__)

_extinf_pattern = re.compile(r"^#EXTINF:(?P<dur>-?\d+)\s*,(?P<info>.*)$")

_ENTRY_TYPES = {
    "track": SpotifyTrackEntry,
    "album": SpotifyAlbumEntry,
    "artist": SpotifyArtistEntry,
}


def _parse_extinf(line: str) -> Tuple[str | None, str | None, int | None]:
    m = _extinf_pattern.match(line)
    if not m:
        return None, None, None
    dur = int(m.group("dur"))
    duration_ms = dur * 1000 if dur >= 0 else None
    info = m.group("info").strip()
    if " - " in info:
        artist, title = info.split(" - ", 1)
        return title.strip() or None, artist.strip() or None, duration_ms
    return info or None, None, duration_ms


def classify_location(location: str) -> str | None:
    """Return the Spotify kind a location refers to, or None for local files.

    Bare ids are ambiguous and are treated as tracks.
    """
    stripped = location.strip()
    lowered = stripped.lower()
    if not (lowered.startswith("spotify:") or "open.spotify.com/" in lowered):
        return "track" if is_valid_spotify_id(stripped) else None
    for kind in KINDS:
        if parse_spotify_id(stripped, kind):
            return kind
    return None


def parse_playlist_lines(lines: Iterable[str]) -> List[PlaylistEntry]:
    """Parse playlist lines into entries, preserving order."""
    entries: List[PlaylistEntry] = []
    title = artist = None
    duration_ms = None
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            if line.startswith("#EXTINF:"):
                title, artist, duration_ms = _parse_extinf(line)
            continue
        entry_cls = _ENTRY_TYPES.get(classify_location(line) or "", PlaylistEntry)
        entries.append(entry_cls(location=line, title=title, artist=artist, duration_ms=duration_ms))
        title = artist = None
        duration_ms = None
    return entries


def read_playlist(path: Path) -> List[PlaylistEntry]:
    """Read a playlist file (UTF-8, BOM tolerated)."""
    text = path.read_text(encoding="utf-8-sig")
    entries = parse_playlist_lines(text.splitlines())
    logger.debug(f"Read {len(entries)} entries from {path}")
    return entries


__all__ = ["classify_location", "parse_playlist_lines", "read_playlist"]
