"""Unit tests for Spotify reference parsing."""

import pytest

from apimeta.providers.spotify.ids import (
    extract_year,
    is_valid_spotify_id,
    parse_spotify_id,
    spotify_url,
)

TRACK_ID = "4uLU6hMCjMI75M1A2tKUQC"


class TestParseSpotifyId:

    @pytest.mark.parametrize("value", [
        f"spotify:track:{TRACK_ID}",
        f"https://open.spotify.com/track/{TRACK_ID}",
        f"https://open.spotify.com/track/{TRACK_ID}?si=0123abcd",
        f"https://open.spotify.com/intl-de/track/{TRACK_ID}",
        f"  {TRACK_ID}  ",
    ])
    def test_track_spellings(self, value):
        assert parse_spotify_id(value, "track") == TRACK_ID

    def test_other_kind_is_rejected(self):
        assert parse_spotify_id(f"spotify:album:{TRACK_ID}", "track") is None
        assert parse_spotify_id(f"https://open.spotify.com/artist/{TRACK_ID}", "track") is None

    def test_album_reference(self):
        assert parse_spotify_id(f"spotify:album:{TRACK_ID}", "album") == TRACK_ID

    def test_local_files_are_rejected(self):
        assert parse_spotify_id("spotify:local:Artist:Album:Title:215", "track") is None
        assert parse_spotify_id("/music/Artist/Song.flac", "track") is None
        assert parse_spotify_id("C:\\Music\\song.mp3", "track") is None

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty(self, value):
        assert parse_spotify_id(value, "track") is None


def test_is_valid_spotify_id():
    assert is_valid_spotify_id(TRACK_ID)
    assert not is_valid_spotify_id(TRACK_ID[:-1])
    assert not is_valid_spotify_id(TRACK_ID + "x")
    assert not is_valid_spotify_id("4uLU6hMCjMI75M1A2tKU-C")


def test_spotify_url():
    assert spotify_url("album", "abc") == "https://open.spotify.com/album/abc"


class TestExtractYear:

    def test_formats(self):
        assert extract_year('2024-12-31') == 2024
        assert extract_year('1995-08') == 1995
        assert extract_year('1990') == 1990

    def test_invalid(self):
        assert extract_year(None) is None
        assert extract_year('') is None
        assert extract_year('202') is None
        assert extract_year('20XX-01-01') is None
