"""Spotify identifier helpers.

Playlists reference Spotify objects in several spellings:

    spotify:track:4uLU6hMCjMI75M1A2tKUQC
    https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC?si=abc
    https://open.spotify.com/intl-de/track/4uLU6hMCjMI75M1A2tKUQC
    4uLU6hMCjMI75M1A2tKUQC

All of them normalise to the bare base62 id used by the Web API.
"""
from __future__ import annotations
import re

WEB_BASE = "https://open.spotify.com"
KINDS = ("track", "album", "artist")

_id_pattern = re.compile(r"^[0-9A-Za-z]{22}$")
_uri_pattern = re.compile(r"^spotify:(?P<kind>[a-z]+):(?P<id>[^:]+)$")
_url_pattern = re.compile(
    r"^https?://open\.spotify\.com/(?:intl-[a-z]{2}(?:-[a-z]{2})?/)?(?P<kind>[a-z]+)/(?P<id>[^/?#]+)",
    re.IGNORECASE,
)


def is_valid_spotify_id(value: str) -> bool:
    """Check for a 22 character base62 Spotify id."""
    return bool(_id_pattern.match(value))


def parse_spotify_id(value: str | None, kind: str) -> str | None:
    """Extract the bare id of a ``kind`` reference.

    Args:
        value: URI, open.spotify.com URL or bare id
        kind: Expected object kind ('track', 'album' or 'artist')

    Returns:
        Bare id, or None if value is empty, refers to another kind or a
        local file, or cannot be parsed. Bare ids are returned as-is
        (validation is left to the caller).
    """
    if not value:
        return None
    value = value.strip()
    m = _uri_pattern.match(value) or _url_pattern.match(value)
    if m:
        if m.group("kind").lower() != kind:
            return None
        return m.group("id")
    if "/" in value or ":" in value:
        return None
    return value or None


def spotify_url(kind: str, spotify_id: str) -> str:
    """Generate the web URL of a Spotify object."""
    return f"{WEB_BASE}/{kind}/{spotify_id}"


def extract_year(release_date: str | None) -> int | None:
    """Extract year from Spotify release date string.

    Spotify returns dates in various formats: YYYY-MM-DD, YYYY-MM, or YYYY.
    """
    if not release_date:
        return None
    if len(release_date) >= 4 and release_date[:4].isdigit():
        return int(release_date[:4])
    return None


__all__ = ["KINDS", "is_valid_spotify_id", "parse_spotify_id", "spotify_url", "extract_year"]
