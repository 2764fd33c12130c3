"""Spotify metadata handlers.

One handler per object kind. Each selects its entry type from a playlist,
normalises references to bare ids, and resolves them through the Web API in
batches no larger than the endpoint allows.
"""

from __future__ import annotations
import logging
from abc import abstractmethod
from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, TYPE_CHECKING

from ...handlers.base import ApiMetadataHandler, Broadcaster
from ...handlers.registry import register_handler
from ...models import (
    PlaylistEntry,
    SpotifyAlbumEntry,
    SpotifyArtistEntry,
    SpotifyEntry,
    SpotifyTrackEntry,
    TrackMetadata,
    AlbumMetadata,
    ArtistMetadata,
)
from .client import MAX_ALBUM_IDS, MAX_ARTIST_IDS, MAX_TRACK_IDS, SpotifyAPIClient
from .ids import is_valid_spotify_id, parse_spotify_id
from .parsing import album_from_api, artist_from_api, track_from_api

if TYPE_CHECKING:
    from ...config_types import SpotifyConfig

logger = logging.getLogger(__name__)


class SpotifyHandler(ApiMetadataHandler[SpotifyEntry[Any], str, Any, PlaylistEntry]):
    """Common behaviour of the Spotify handlers.

    Subclasses set ``entry_type``, ``entity_name`` (also the object kind),
    ``max_batch_size`` and implement :meth:`_fetch` / :meth:`_parse`.
    """

    max_batch_size: ClassVar[int]

    def __init__(self, bcaster: Broadcaster, client: SpotifyAPIClient, batch_size: int | None = None):
        super().__init__(bcaster)
        self.client = client
        if batch_size is None:
            batch_size = self.max_batch_size
        if batch_size < 1:
            raise ValueError(f"batch_size must be a positive integer, got {batch_size}")
        self.batch_size = min(batch_size, self.max_batch_size)

    def custom_modifier(self, identifier: Optional[str]) -> Optional[str]:
        return parse_spotify_id(identifier, self.entity_name)

    def custom_filter(self, identifier: str) -> bool:
        return is_valid_spotify_id(identifier)

    def convert(self, entry: SpotifyEntry[Any]) -> PlaylistEntry:
        return entry.to_playlist_entry()

    def get_metadatas(self, identifiers: List[str]) -> Dict[str, Any]:
        metadatas: Dict[str, Any] = {}
        for batch in self.split_into_chunks(identifiers, self.batch_size):
            items = self._fetch(batch)
            # Results are positional; unknown ids come back as None
            for spotify_id, item in zip(batch, items):
                if item:
                    metadatas[spotify_id] = self._parse(item)
            logger.debug(f"Resolved {len(metadatas)} {self.entity_name}s so far")
        return metadatas

    @abstractmethod
    def _fetch(self, ids: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        """Fetch one batch; the result is positional with None for unknown ids."""

    @abstractmethod
    def _parse(self, payload: Dict[str, Any]) -> Any:
        """Parse one API payload into a metadata object."""


class SpotifyTrackHandler(SpotifyHandler):
    entry_type = SpotifyTrackEntry
    entity_name = "track"
    max_batch_size = MAX_TRACK_IDS

    def _fetch(self, ids):
        return self.client.tracks(ids)

    def _parse(self, payload) -> TrackMetadata:
        return track_from_api(payload)


class SpotifyAlbumHandler(SpotifyHandler):
    entry_type = SpotifyAlbumEntry
    entity_name = "album"
    max_batch_size = MAX_ALBUM_IDS

    def _fetch(self, ids):
        return self.client.albums(ids)

    def _parse(self, payload) -> AlbumMetadata:
        return album_from_api(payload)


class SpotifyArtistHandler(SpotifyHandler):
    entry_type = SpotifyArtistEntry
    entity_name = "artist"
    max_batch_size = MAX_ARTIST_IDS

    def _fetch(self, ids):
        return self.client.artists(ids)

    def _parse(self, payload) -> ArtistMetadata:
        return artist_from_api(payload)


def _creator(handler_cls: type, client: SpotifyAPIClient, batch_size: int | None) -> Callable[[Broadcaster], SpotifyHandler]:
    def create(bcaster: Broadcaster) -> SpotifyHandler:
        return handler_cls(bcaster, client, batch_size=batch_size)
    return create


def register_spotify_handlers(client: SpotifyAPIClient, config: 'SpotifyConfig | None' = None) -> List[str]:
    """Register creators for the Spotify handlers bound to ``client``.

    Args:
        client: API client shared by all created handlers
        config: Optional Spotify config supplying per-kind batch sizes

    Returns:
        Registered handler names
    """
    sizes = {
        "tracks": config.track_batch_size if config else None,
        "albums": config.album_batch_size if config else None,
        "artists": config.artist_batch_size if config else None,
    }
    classes = {
        "tracks": SpotifyTrackHandler,
        "albums": SpotifyAlbumHandler,
        "artists": SpotifyArtistHandler,
    }
    names = []
    for suffix, handler_cls in classes.items():
        name = f"spotify.{suffix}"
        register_handler(name, _creator(handler_cls, client, sizes[suffix]))
        names.append(name)
    return names


__all__ = [
    "SpotifyHandler", "SpotifyTrackHandler", "SpotifyAlbumHandler", "SpotifyArtistHandler",
    "register_spotify_handlers",
]
