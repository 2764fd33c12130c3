"""Unit tests for the Spotify metadata handlers."""

import pytest
import requests

from apimeta.handlers.registry import available_handlers, create_handler
from apimeta.config_types import SpotifyConfig
from apimeta.models import (
    AlbumMetadata,
    ArtistMetadata,
    PlaylistEntry,
    SpotifyAlbumEntry,
    SpotifyArtistEntry,
    SpotifyEntry,
    SpotifyTrackEntry,
    TrackMetadata,
)
from apimeta.providers.spotify import (
    SpotifyAlbumHandler,
    SpotifyArtistHandler,
    SpotifyHandler,
    SpotifyTrackHandler,
    register_spotify_handlers,
)
from apimeta.providers.spotify.parsing import album_from_api, artist_from_api, track_from_api
from tests.mocks.fakes import FakeSpotifyClient, track_payload

T1 = "4uLU6hMCjMI75M1A2tKUQC"
T2 = "7ouMYWpwJ422jRcDASZB7P"
T3 = "3n3Ppam7vgaVa1iaRUc9Lp"
ALBUM = "1DFixLWuPkv3KT3TnV35m3"
ARTIST = "0OdUWJ0sBjDrqHygGUXeCF"


class TestParsing:

    def test_track_from_api(self):
        meta = track_from_api(track_payload(T1, name="Never", artists=("Rick", "Guest")))
        assert meta == TrackMetadata(
            id=T1, name="Never", artists=("Rick", "Guest"), album="Album", album_id="alb" + T1[3:],
            duration_ms=180000, isrc="USRC11900001", year=2019, popularity=42,
            url=f"https://open.spotify.com/track/{T1}",
        )

    def test_album_from_api_falls_back_to_track_total(self):
        meta = album_from_api({"id": ALBUM, "name": "LP", "tracks": {"total": 12}, "release_date": "2001"})
        assert meta.total_tracks == 12
        assert meta.year == 2001
        assert meta.url is None

    def test_artist_from_api(self):
        meta = artist_from_api({"id": ARTIST, "name": "Band", "genres": ["rock"], "followers": {"total": 7}})
        assert meta == ArtistMetadata(id=ARTIST, name="Band", genres=("rock",), followers=7)


class TestTrackHandler:

    def test_resolves_mixed_reference_spellings(self, bcaster):
        client = FakeSpotifyClient(tracks={T1: track_payload(T1, name="One")})
        entries = [
            SpotifyTrackEntry(f"spotify:track:{T1}"),
            PlaylistEntry("/music/local.mp3"),
            SpotifyTrackEntry(f"https://open.spotify.com/track/{T1}?si=x"),
        ]

        result = SpotifyTrackHandler(bcaster, client).match_entries(entries)

        assert client.calls == [("tracks", [T1])]
        assert [e.title for e in result] == ["One", "One"]
        assert all(e.location == f"https://open.spotify.com/track/{T1}" for e in result)
        assert bcaster.messages[0] == "Filtered 1 unique track IDs from 2 total track IDs"

    def test_unknown_track_reported_and_kept(self, bcaster):
        client = FakeSpotifyClient(tracks={T1: track_payload(T1)})
        missing = SpotifyTrackEntry(f"spotify:track:{T2}", title="Old title")
        result = SpotifyTrackHandler(bcaster, client).match_entries([SpotifyTrackEntry(T1), missing])

        assert result[1] == PlaylistEntry(f"spotify:track:{T2}", "Old title")
        assert missing.metadata is None
        assert [e.identifier for e in bcaster.errors] == [T2]
        assert bcaster.messages[1] == "Retrieved 1/2 track metadata entries from API."

    def test_invalid_ids_are_filtered_silently(self, bcaster):
        client = FakeSpotifyClient()
        entries = [SpotifyTrackEntry("spotify:track:short"), SpotifyTrackEntry(f"spotify:album:{ALBUM}")]

        result = SpotifyTrackHandler(bcaster, client).match_entries(entries)

        assert len(result) == 2
        assert bcaster.errors == []
        assert client.calls in ([], [("tracks", [])])

    def test_batches_respect_batch_size(self, bcaster):
        ids = [f"{i:022d}" for i in range(5)]
        client = FakeSpotifyClient(tracks={i: track_payload(i) for i in ids})
        handler = SpotifyTrackHandler(bcaster, client, batch_size=2)

        handler.match_entries([SpotifyTrackEntry(i) for i in ids])

        assert [len(batch) for _, batch in client.calls] == [2, 2, 1]
        assert [i for _, batch in client.calls for i in batch] == ids

    def test_batch_size_capped_at_api_limit(self, bcaster):
        assert SpotifyTrackHandler(bcaster, FakeSpotifyClient(), batch_size=500).batch_size == 50
        assert SpotifyAlbumHandler(bcaster, FakeSpotifyClient()).batch_size == 20

    @pytest.mark.parametrize("batch_size", [0, -1])
    def test_non_positive_batch_size_rejected(self, bcaster, batch_size):
        with pytest.raises(ValueError, match="batch_size"):
            SpotifyTrackHandler(bcaster, FakeSpotifyClient(), batch_size=batch_size)

    def test_spotify_bases_are_abstract(self, bcaster):
        with pytest.raises(TypeError):
            SpotifyHandler(bcaster, FakeSpotifyClient())
        with pytest.raises(TypeError):
            SpotifyEntry(f"spotify:track:{T1}")

    def test_client_failure_propagates(self, bcaster):
        class FailingClient(FakeSpotifyClient):
            def tracks(self, ids):
                raise requests.HTTPError("503 Server Error")

        with pytest.raises(requests.HTTPError):
            SpotifyTrackHandler(bcaster, FailingClient()).match_entries([SpotifyTrackEntry(T1)])


def test_album_and_artist_handlers(bcaster):
    client = FakeSpotifyClient(
        albums={ALBUM: {"id": ALBUM, "name": "LP", "artists": [{"name": "Band"}], "total_tracks": 9}},
        artists={ARTIST: {"id": ARTIST, "name": "Band"}},
    )
    album_entry = SpotifyAlbumEntry(f"spotify:album:{ALBUM}")
    artist_entry = SpotifyArtistEntry(f"https://open.spotify.com/artist/{ARTIST}")

    (album,) = SpotifyAlbumHandler(bcaster, client).match_entries([album_entry, artist_entry])
    (artist,) = SpotifyArtistHandler(bcaster, client).match_entries([album_entry, artist_entry])

    assert isinstance(album_entry.metadata, AlbumMetadata)
    assert (album.title, album.artist, album.duration_ms) == ("LP", "Band", None)
    assert (artist.title, artist.artist) == ("Band", "Band")
    # No web URL in the payloads, so the original reference is kept
    assert artist.location == f"https://open.spotify.com/artist/{ARTIST}"


def test_register_spotify_handlers(bcaster):
    client = FakeSpotifyClient()
    names = register_spotify_handlers(client, SpotifyConfig(track_batch_size=10))

    assert names == ["spotify.tracks", "spotify.albums", "spotify.artists"]
    assert available_handlers() == ["spotify.albums", "spotify.artists", "spotify.tracks"]
    handler = create_handler("spotify.tracks", bcaster)
    assert isinstance(handler, SpotifyTrackHandler)
    assert handler.client is client
    assert handler.batch_size == 10
    assert handler.bcaster is bcaster
