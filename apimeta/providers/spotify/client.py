"""Spotify API client.

Handles the HTTP requests to the Spotify Web API "get several" endpoints
used to resolve track, album and artist ids to metadata.

No retry or rate-limit handling: a failed request (including HTTP 429)
raises and aborts the batch it belongs to.
"""

from __future__ import annotations
import requests
from typing import Dict, Any, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)
API_BASE = "https://api.spotify.com/v1"

# Maximum ids per request, imposed by the Web API
MAX_TRACK_IDS = 50
MAX_ALBUM_IDS = 20
MAX_ARTIST_IDS = 50


class SpotifyAPIClient:
    """Spotify Web API client for bulk metadata lookups."""

    def __init__(self, token: str, api_base: str = API_BASE, timeout: float = 30, market: str | None = None):
        """Initialize client with access token.

        Args:
            token: Valid Spotify OAuth access token
            api_base: Web API base URL
            timeout: Per-request timeout in seconds
            market: Optional ISO 3166-1 country code for track relinking
        """
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.market = market

    def _headers(self) -> Dict[str, str]:
        """Build authorization headers for API requests."""
        return {"Authorization": f"Bearer {self.token}"}

    def _get(self, path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
        """Execute GET request.

        Args:
            path: API endpoint path (e.g., '/tracks')
            params: Optional query parameters

        Returns:
            JSON response as dict

        Raises:
            requests.HTTPError: On non-2xx responses
        """
        r = requests.get(self.api_base + path, headers=self._headers(), params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def _several(self, path: str, key: str, ids: Sequence[str], limit: int,
                 extra: Dict[str, Any] | None = None) -> List[Optional[Dict[str, Any]]]:
        if not ids:
            return []
        if len(ids) > limit:
            raise ValueError(f"{path} accepts at most {limit} ids per request, got {len(ids)}")
        params: Dict[str, Any] = {"ids": ",".join(ids)}
        if extra:
            params.update(extra)
        data = self._get(path, params=params)
        items = data.get(key) or []
        logger.debug(f"Fetched {sum(1 for i in items if i)}/{len(ids)} {key} from {path}")
        return items

    def tracks(self, ids: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        """Fetch up to 50 tracks. Unknown ids come back as None."""
        extra = {"market": self.market} if self.market else None
        return self._several("/tracks", "tracks", ids, MAX_TRACK_IDS, extra)

    def albums(self, ids: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        """Fetch up to 20 albums. Unknown ids come back as None."""
        extra = {"market": self.market} if self.market else None
        return self._several("/albums", "albums", ids, MAX_ALBUM_IDS, extra)

    def artists(self, ids: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        """Fetch up to 50 artists. Unknown ids come back as None."""
        return self._several("/artists", "artists", ids, MAX_ARTIST_IDS)


__all__ = ["SpotifyAPIClient", "API_BASE", "MAX_TRACK_IDS", "MAX_ALBUM_IDS", "MAX_ARTIST_IDS"]
