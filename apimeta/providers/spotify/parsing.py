"""Conversion of raw Spotify API payloads into metadata objects."""

from __future__ import annotations
from typing import Any, Dict, Tuple

from ...models import AlbumMetadata, ArtistMetadata, TrackMetadata
from .ids import extract_year


def _artist_names(payload: Dict[str, Any]) -> Tuple[str, ...]:
    return tuple(a["name"] for a in payload.get("artists") or [] if a.get("name"))


def _web_url(payload: Dict[str, Any]) -> str | None:
    urls = payload.get("external_urls") or {}
    return urls.get("spotify")


def track_from_api(payload: Dict[str, Any]) -> TrackMetadata:
    album = payload.get("album") or {}
    return TrackMetadata(
        id=payload["id"],
        name=payload.get("name") or "",
        artists=_artist_names(payload),
        album=album.get("name"),
        album_id=album.get("id"),
        duration_ms=payload.get("duration_ms"),
        isrc=(payload.get("external_ids") or {}).get("isrc"),
        year=extract_year(album.get("release_date")),
        popularity=payload.get("popularity"),
        url=_web_url(payload),
    )


def album_from_api(payload: Dict[str, Any]) -> AlbumMetadata:
    tracks = payload.get("tracks")
    total = payload.get("total_tracks")
    if total is None and isinstance(tracks, dict):
        total = tracks.get("total")
    return AlbumMetadata(
        id=payload["id"],
        name=payload.get("name") or "",
        artists=_artist_names(payload),
        album_type=payload.get("album_type"),
        total_tracks=total,
        year=extract_year(payload.get("release_date")),
        label=payload.get("label"),
        url=_web_url(payload),
    )


def artist_from_api(payload: Dict[str, Any]) -> ArtistMetadata:
    followers = payload.get("followers")
    return ArtistMetadata(
        id=payload["id"],
        name=payload.get("name") or "",
        genres=tuple(payload.get("genres") or ()),
        popularity=payload.get("popularity"),
        followers=followers.get("total") if isinstance(followers, dict) else None,
        url=_web_url(payload),
    )


__all__ = ["track_from_api", "album_from_api", "artist_from_api"]
