"""Tests for the demo library and album/track lookups."""

import pytest

from jukebox.application.catalog import (
    DEMO_ALBUMS,
    build_demo_albums,
    build_demo_jukebox,
    find_album,
    find_track,
)
from jukebox.config.settings import PlayerSettings
from jukebox.domain.shared.exceptions import InvalidArgumentError, NotFoundError


class TestDemoLibrary:
    """Tests for building the demo jukebox."""

    def test_demo_albums(self):
        albums = build_demo_albums()
        assert [album.title for album in albums] == ["Abbey Road", "Dark Side of the Moon"]
        assert all(album.track_count == 3 for album in albums)
        assert len(albums) == len(DEMO_ALBUMS)

    def test_demo_jukebox_defaults(self):
        jukebox = build_demo_jukebox(PlayerSettings())
        player = jukebox.player

        assert jukebox.is_powered_on is False
        assert player.playlist.name == "Rock Classics"
        assert player.playlist.size == 6
        assert player.playlist.current_track.title == "Come Together"
        assert player.is_stopped
        assert len(player.albums) == 2

    def test_power_on_at_start(self):
        jukebox = build_demo_jukebox(PlayerSettings(power_on_at_start=True))
        assert jukebox.is_powered_on is True

    def test_without_demo_library(self):
        jukebox = build_demo_jukebox(PlayerSettings(load_demo_library=False))
        assert jukebox.player.playlist.is_empty
        assert jukebox.player.albums == ()

    def test_seed_gives_reproducible_shuffle(self):
        """Two jukeboxes built with the same seed shuffle identically."""
        first = build_demo_jukebox(PlayerSettings(shuffle_seed=11))
        second = build_demo_jukebox(PlayerSettings(shuffle_seed=11))

        first.player.playlist.shuffle()
        second.player.playlist.shuffle()

        assert first.player.playlist.tracks == second.player.playlist.tracks


class TestLookups:
    """Tests for find_album and find_track."""

    @pytest.fixture
    def player(self):
        return build_demo_jukebox(PlayerSettings()).player

    def test_find_album_ignores_case(self, player):
        assert find_album(player, "abbey road").title == "Abbey Road"

    def test_find_album_missing(self, player):
        with pytest.raises(NotFoundError, match="Album 'Revolver' not found") as exc_info:
            find_album(player, "Revolver")
        assert exc_info.value.entity_type == "Album"

    def test_find_album_blank(self, player):
        with pytest.raises(InvalidArgumentError):
            find_album(player, "  ")

    def test_find_track(self, player):
        track = find_track(player, "Dark Side of the Moon", 2)
        assert track.title == "Breathe"

    def test_find_track_missing_position(self, player):
        with pytest.raises(NotFoundError, match="Abbey Road #9"):
            find_track(player, "Abbey Road", 9)

    def test_find_track_non_positive_position(self, player):
        with pytest.raises(InvalidArgumentError, match="must be positive"):
            find_track(player, "Abbey Road", 0)
