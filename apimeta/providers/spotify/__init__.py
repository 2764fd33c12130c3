"""Spotify provider package.

This package contains all Spotify-specific logic:
- ids.py: reference parsing and validation
- client.py: API client for the bulk lookup endpoints
- parsing.py: payload to metadata conversion
- handlers.py: metadata handlers for tracks, albums and artists
"""

from .client import SpotifyAPIClient
from .handlers import (
    SpotifyHandler,
    SpotifyTrackHandler,
    SpotifyAlbumHandler,
    SpotifyArtistHandler,
    register_spotify_handlers,
)
from .ids import is_valid_spotify_id, parse_spotify_id, spotify_url, extract_year

__all__ = [
    "SpotifyAPIClient",
    "SpotifyHandler",
    "SpotifyTrackHandler",
    "SpotifyAlbumHandler",
    "SpotifyArtistHandler",
    "register_spotify_handlers",
    "is_valid_spotify_id",
    "parse_spotify_id",
    "spotify_url",
    "extract_year",
]
