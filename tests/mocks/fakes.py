"""Test doubles for handlers, broadcasters and the Spotify client (no network)."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from apimeta.handlers.base import ApiMetadataHandler, MetadataRecordable


class RecordingBroadcaster:
    """Broadcaster that keeps everything it is sent."""

    def __init__(self):
        self.messages: List[str] = []
        self.errors: List[BaseException] = []

    def info(self, message: str) -> None:
        self.messages.append(message)

    def error(self, err: BaseException) -> None:
        self.errors.append(err)


@dataclass
class CodedEntry(MetadataRecordable[str, str]):
    """Minimal recordable entry identified by a string code."""
    name: str
    code: Optional[str]
    metadata: Optional[str] = None
    lookups: int = field(default=0, repr=False)

    def get_identifier(self) -> Optional[str]:
        self.lookups += 1
        return self.code

    def set_metadata(self, metadata: str) -> None:
        self.metadata = metadata

    def __str__(self) -> str:
        return self.name


@dataclass
class PlainItem:
    """Unrelated item type that handlers must ignore."""
    name: str


class DictHandler(ApiMetadataHandler[CodedEntry, str, str, tuple]):
    """Handler resolving codes from a fixed dict; converts entries to (name, metadata)."""

    entry_type = CodedEntry

    def __init__(self, bcaster, source: Dict[str, str] | None = None,
                 fail_with: BaseException | None = None,
                 filter_fn: Callable[[str], bool] | None = None,
                 modifier_fn: Callable[[Optional[str]], Optional[str]] | None = None,
                 key_fn: Callable[[str], Any] | None = None,
                 entity_name: str | None = None):
        super().__init__(bcaster)
        self.source = source or {}
        self.fail_with = fail_with
        self.filter_fn = filter_fn
        self.modifier_fn = modifier_fn
        self.key_fn = key_fn
        if entity_name:
            self.entity_name = entity_name
        self.requests: List[List[str]] = []

    def get_metadatas(self, identifiers):
        self.requests.append(list(identifiers))
        if self.fail_with is not None:
            raise self.fail_with
        return {i: self.source[i] for i in identifiers if i in self.source}

    def convert(self, entry: CodedEntry) -> tuple:
        return (entry.name, entry.metadata)

    def custom_filter(self, identifier):
        return self.filter_fn(identifier) if self.filter_fn else True

    def custom_modifier(self, identifier):
        return self.modifier_fn(identifier) if self.modifier_fn else identifier

    def identifier_key(self, identifier):
        return self.key_fn(identifier) if self.key_fn else identifier


def track_payload(spotify_id: str, name: str = "Song", artists: Sequence[str] = ("Artist",),
                  duration_ms: int = 180000) -> Dict[str, Any]:
    return {
        "id": spotify_id,
        "name": name,
        "artists": [{"name": a} for a in artists],
        "album": {"id": "alb" + spotify_id[3:], "name": "Album", "release_date": "2019-05-17"},
        "duration_ms": duration_ms,
        "external_ids": {"isrc": "USRC11900001"},
        "popularity": 42,
        "external_urls": {"spotify": f"https://open.spotify.com/track/{spotify_id}"},
    }


class FakeSpotifyClient:
    """Stand-in for SpotifyAPIClient serving payloads from dicts."""

    def __init__(self, tracks: Dict[str, Dict[str, Any]] | None = None,
                 albums: Dict[str, Dict[str, Any]] | None = None,
                 artists: Dict[str, Dict[str, Any]] | None = None):
        self.data = {"tracks": tracks or {}, "albums": albums or {}, "artists": artists or {}}
        self.calls: List[tuple] = []

    def _lookup(self, kind: str, ids: Sequence[str]):
        self.calls.append((kind, list(ids)))
        return [self.data[kind].get(i) for i in ids]

    def tracks(self, ids):
        return self._lookup("tracks", ids)

    def albums(self, ids):
        return self._lookup("albums", ids)

    def artists(self, ids):
        return self._lookup("artists", ids)
