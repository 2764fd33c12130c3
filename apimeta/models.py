"""Playlist entry domain models.

A playlist is a heterogeneous list of :class:`PlaylistEntry` items. Plain
entries point at local files; the Spotify variants carry a track, album or
artist reference that handlers resolve to metadata.
"""
from __future__ import annotations
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Optional, Tuple, TypeVar

from .handlers.base import MetadataRecordable

# ---------------- Metadata (parsed API payloads) -----------------


@dataclass(frozen=True)
class TrackMetadata:
    id: str
    name: str
    artists: Tuple[str, ...] = ()
    album: str | None = None
    album_id: str | None = None
    duration_ms: int | None = None
    isrc: str | None = None
    year: int | None = None
    popularity: int | None = None
    url: str | None = None


@dataclass(frozen=True)
class AlbumMetadata:
    id: str
    name: str
    artists: Tuple[str, ...] = ()
    album_type: str | None = None
    total_tracks: int | None = None
    year: int | None = None
    label: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class ArtistMetadata:
    id: str
    name: str
    genres: Tuple[str, ...] = ()
    popularity: int | None = None
    followers: int | None = None
    url: str | None = None


# ---------------- Entries -----------------


@dataclass
class PlaylistEntry:
    """One line of a playlist: a location plus whatever display info is known."""
    location: str
    title: str | None = None
    artist: str | None = None
    duration_ms: int | None = None

    def __str__(self) -> str:
        if self.title:
            return f"{self.artist} - {self.title}" if self.artist else self.title
        return self.location


TMeta = TypeVar("TMeta", TrackMetadata, AlbumMetadata, ArtistMetadata)


@dataclass
class SpotifyEntry(PlaylistEntry, MetadataRecordable[str, TMeta], Generic[TMeta]):
    """Playlist entry referencing a Spotify object by URI, URL or bare id.

    The identifier is the raw reference as read; handlers normalise it.
    """
    metadata: Optional[TMeta] = field(default=None, repr=False)

    def get_identifier(self) -> str | None:
        ref = self.location.strip()
        return ref or None

    def set_metadata(self, metadata: TMeta) -> None:
        self.metadata = metadata

    def to_playlist_entry(self) -> PlaylistEntry:
        """Convert to a plain entry, using metadata for display fields when attached.

        Fields the metadata leaves empty keep the values read from the playlist.
        """
        if self.metadata is None:
            return PlaylistEntry(self.location, self.title, self.artist, self.duration_ms)
        title, artist, duration_ms = self._describe(self.metadata)
        return PlaylistEntry(
            location=self.metadata.url or self.location,
            title=title or self.title,
            artist=artist or self.artist,
            duration_ms=duration_ms if duration_ms is not None else self.duration_ms,
        )

    @abstractmethod
    def _describe(self, metadata: TMeta) -> Tuple[str, str | None, int | None]:
        """Return (title, artist, duration_ms) for the attached metadata."""


@dataclass
class SpotifyTrackEntry(SpotifyEntry[TrackMetadata]):
    def _describe(self, metadata: TrackMetadata):
        return metadata.name, ", ".join(metadata.artists) or None, metadata.duration_ms


@dataclass
class SpotifyAlbumEntry(SpotifyEntry[AlbumMetadata]):
    def _describe(self, metadata: AlbumMetadata):
        return metadata.name, ", ".join(metadata.artists) or None, None


@dataclass
class SpotifyArtistEntry(SpotifyEntry[ArtistMetadata]):
    def _describe(self, metadata: ArtistMetadata):
        return metadata.name, metadata.name, None


__all__ = [
    "TrackMetadata", "AlbumMetadata", "ArtistMetadata",
    "PlaylistEntry", "SpotifyEntry", "SpotifyTrackEntry", "SpotifyAlbumEntry", "SpotifyArtistEntry",
]
