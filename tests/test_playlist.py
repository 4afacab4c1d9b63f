"""
Unit Tests for the Playlist Engine

Tests for:
- Adding and removing tracks and the cursor adjustments that follow
- Circular next/previous navigation
- Shuffle and unshuffle keeping the current track selected
- Duration totals and formatting
"""

import random
from datetime import date

import pytest
from pydantic import ValidationError

from jukebox.domain.music.entities import Album
from jukebox.domain.music.playlist import Playlist
from jukebox.domain.shared.exceptions import InvalidArgumentError, NotFoundError


@pytest.fixture
def album_x():
    """Album 'X' with tracks A (position 1) and B (position 2)."""
    album = Album(title="X", artist="Band", release_date=date(2001, 1, 1), genre="Rock")
    album.add_track("A", "Band", "X", 60, 1)
    album.add_track("B", "Band", "X", 90, 2)
    return album


def _titles(playlist: Playlist) -> list[str]:
    return [track.title for track in playlist.tracks]


# =============================================================================
# Construction
# =============================================================================


class TestPlaylistCreation:
    """Tests for building playlists."""

    def test_empty_playlist(self, empty_playlist):
        """An empty playlist has cursor -1 and no current track."""
        assert empty_playlist.is_empty is True
        assert empty_playlist.size == 0
        assert empty_playlist.current_index == -1
        assert empty_playlist.current_track is None
        assert empty_playlist.has_next is False
        assert empty_playlist.has_previous is False

    def test_prepopulated_playlist_starts_at_first_track(self, playlist):
        assert playlist.current_index == 0
        assert playlist.current_track.title == "Come Together"
        assert playlist.has_next is True

    def test_prepopulated_duplicates_dropped(self, album_x):
        """Duplicate tracks passed at construction are kept once."""
        a, b = album_x.tracks
        playlist = Playlist(name="Dupes", tracks=[a, b, a])
        assert _titles(playlist) == ["A", "B"]

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            Playlist(name="   ")

    def test_name_is_stripped(self):
        assert Playlist(name="  Road Trip ").name == "Road Trip"

    def test_out_of_range_cursor_rejected(self, album_x):
        with pytest.raises(ValidationError, match="out of range"):
            Playlist(name="Bad", tracks=list(album_x.tracks), current_index=5)


# =============================================================================
# Add / Remove
# =============================================================================


class TestPlaylistAddRemove:
    """Tests for add_track and remove_track."""

    def test_first_add_moves_cursor_to_zero(self, empty_playlist, album_x):
        a, _ = album_x.tracks
        assert empty_playlist.add_track(a) is True
        assert empty_playlist.current_index == 0
        assert empty_playlist.current_track == a

    def test_add_keeps_cursor_when_not_empty(self, playlist, dark_side):
        playlist.next_track()
        playlist.remove_track(dark_side.get_track(3))
        playlist.add_track(dark_side.get_track(3))
        assert playlist.current_index == 1

    def test_add_duplicate_is_noop(self, playlist, abbey_road):
        """Adding a track already present changes nothing."""
        before = list(playlist.tracks)
        assert playlist.add_track(abbey_road.get_track(1)) is False
        assert playlist.tracks == before

    def test_add_none_rejected(self, playlist):
        with pytest.raises(InvalidArgumentError, match="Track cannot be None"):
            playlist.add_track(None)

    def test_remove_none_rejected(self, playlist):
        with pytest.raises(InvalidArgumentError):
            playlist.remove_track(None)

    def test_remove_missing_returns_false(self, empty_playlist, abbey_road):
        assert empty_playlist.remove_track(abbey_road.get_track(1)) is False

    def test_remove_last_track_resets_cursor(self, album_x):
        a, _ = album_x.tracks
        playlist = Playlist(name="One", tracks=[a])
        assert playlist.remove_track(a) is True
        assert playlist.current_index == -1
        assert playlist.current_track is None

    def test_remove_before_cursor_keeps_current_track(self, playlist, abbey_road):
        """Removing an earlier track steps the cursor back onto the same track."""
        playlist.next_track()
        playlist.next_track()
        current = playlist.current_track
        assert playlist.current_index == 2

        playlist.remove_track(abbey_road.get_track(1))

        assert playlist.current_index == 1
        assert playlist.current_track == current

    def test_remove_after_cursor_keeps_cursor(self, playlist, dark_side):
        playlist.next_track()
        playlist.remove_track(dark_side.get_track(3))
        assert playlist.current_index == 1

    def test_remove_current_at_end_clamps_cursor(self, playlist, dark_side):
        """Removing the last track while it is current moves to the new last track."""
        playlist.previous_track()
        assert playlist.current_track == dark_side.get_track(3)

        playlist.remove_track(dark_side.get_track(3))

        assert playlist.current_index == playlist.size - 1
        assert playlist.current_track == dark_side.get_track(2)

    def test_remove_current_at_start_keeps_index_zero(self, playlist, abbey_road):
        playlist.remove_track(abbey_road.get_track(1))
        assert playlist.current_index == 0
        assert playlist.current_track == abbey_road.get_track(2)

    def test_membership(self, playlist, abbey_road):
        assert abbey_road.get_track(1) in playlist
        playlist.remove_track(abbey_road.get_track(1))
        assert abbey_road.get_track(1) not in playlist


# =============================================================================
# Navigation
# =============================================================================


class TestPlaylistNavigation:
    """Tests for circular navigation."""

    def test_next_wraps_around(self, album_x):
        """[A, B]: next from cursor 0 returns B, then A again."""
        playlist = Playlist(name="X", tracks=list(album_x.tracks))
        assert playlist.next_track().title == "B"
        assert playlist.next_track().title == "A"
        assert playlist.current_index == 0

    def test_previous_wraps_around(self, album_x):
        playlist = Playlist(name="X", tracks=list(album_x.tracks))
        assert playlist.previous_track().title == "B"
        assert playlist.current_index == 1

    @pytest.mark.parametrize("start", [0, 2, 5])
    def test_n_steps_return_to_start(self, playlist, start):
        """Calling next or previous n times from any cursor returns to the same track."""
        playlist.current_index = start
        original = playlist.current_track

        for _ in range(playlist.size):
            playlist.next_track()
        assert playlist.current_track == original

        for _ in range(playlist.size):
            playlist.previous_track()
        assert playlist.current_track == original

    def test_single_track_is_idempotent(self, album_x):
        a, _ = album_x.tracks
        playlist = Playlist(name="Solo", tracks=[a])
        for _ in range(3):
            assert playlist.next_track() == a
            assert playlist.current_index == 0
            assert playlist.previous_track() == a
            assert playlist.current_index == 0

    def test_empty_navigation_returns_none(self, empty_playlist):
        assert empty_playlist.next_track() is None
        assert empty_playlist.previous_track() is None
        assert empty_playlist.current_track is None
        assert empty_playlist.current_index == -1

    def test_set_current_track(self, playlist, dark_side):
        playlist.set_current_track(dark_side.get_track(2))
        assert playlist.current_index == 4

    def test_set_current_track_missing_raises_not_found(self, empty_playlist, abbey_road):
        with pytest.raises(NotFoundError, match="not in playlist"):
            empty_playlist.set_current_track(abbey_road.get_track(1))

    def test_set_current_track_none_rejected(self, playlist):
        with pytest.raises(InvalidArgumentError):
            playlist.set_current_track(None)


# =============================================================================
# Shuffle / Unshuffle
# =============================================================================


class TestPlaylistShuffle:
    """Tests for shuffle and unshuffle."""

    @pytest.mark.parametrize("seed", range(10))
    def test_shuffle_preserves_current_track(self, playlist, dark_side, seed):
        playlist.rng = random.Random(seed)
        playlist.set_current_track(dark_side.get_track(2))
        current = playlist.current_track

        playlist.shuffle()

        assert playlist.is_shuffled is True
        assert playlist.current_track == current
        assert playlist.current_index == playlist.tracks.index(current)

    def test_shuffle_is_a_permutation(self, playlist):
        before = set(playlist.tracks)
        playlist.shuffle()
        assert set(playlist.tracks) == before
        assert playlist.size == len(before)

    def test_shuffle_with_seed_is_reproducible(self, abbey_road, dark_side):
        """Equal seeds give equal orderings."""
        tracks = [*abbey_road.tracks, *dark_side.tracks]
        first = Playlist(name="A", tracks=tracks, rng=random.Random(7))
        second = Playlist(name="B", tracks=tracks, rng=random.Random(7))

        first.shuffle()
        second.shuffle()

        assert first.tracks == second.tracks

    def test_shuffle_matches_injected_rng(self, abbey_road, dark_side):
        """The permutation comes from the injected random source."""
        tracks = [*abbey_road.tracks, *dark_side.tracks]
        playlist = Playlist(name="A", tracks=tracks, rng=random.Random(3))
        expected = list(tracks)
        random.Random(3).shuffle(expected)

        playlist.shuffle()

        assert playlist.tracks == expected

    def test_shuffle_single_track_is_noop(self, album_x):
        a, _ = album_x.tracks
        playlist = Playlist(name="Solo", tracks=[a])
        playlist.shuffle()
        assert playlist.is_shuffled is False

    def test_shuffle_empty_is_noop(self, empty_playlist):
        empty_playlist.shuffle()
        assert empty_playlist.is_shuffled is False
        assert empty_playlist.current_index == -1

    def test_unshuffle_sorts_by_album_title_then_position(self, abbey_road, dark_side):
        tracks = [
            dark_side.get_track(3),
            abbey_road.get_track(2),
            dark_side.get_track(1),
            abbey_road.get_track(3),
            abbey_road.get_track(1),
        ]
        playlist = Playlist(name="Mixed", tracks=tracks, shuffled=True)

        playlist.unshuffle()

        assert playlist.is_shuffled is False
        assert [(t.album_title, t.position) for t in playlist.tracks] == [
            ("Abbey Road", 1),
            ("Abbey Road", 2),
            ("Abbey Road", 3),
            ("Dark Side of the Moon", 1),
            ("Dark Side of the Moon", 3),
        ]

    def test_unshuffle_preserves_current_track(self, playlist, dark_side):
        playlist.set_current_track(dark_side.get_track(1))
        playlist.shuffle()
        current = playlist.current_track

        playlist.unshuffle()

        assert playlist.current_track == current
        assert playlist.current_index == 3

    def test_unshuffle_is_deterministic(self, abbey_road, dark_side):
        """Same tracks in different orders unshuffle to the same order."""
        tracks = [*abbey_road.tracks, *dark_side.tracks]
        first = Playlist(name="A", tracks=tracks, rng=random.Random(1))
        second = Playlist(name="B", tracks=list(reversed(tracks)), rng=random.Random(2))
        first.shuffle()
        second.shuffle()

        first.unshuffle()
        second.unshuffle()

        assert first.tracks == second.tracks
        assert first.tracks == tracks

    def test_unshuffle_same_titled_albums_is_deterministic(self):
        """Albums sharing a title still unshuffle to one order, whatever the starting order."""
        queen = Album(title="Greatest Hits", artist="Queen", release_date=date(1981, 10, 26), genre="Rock")
        abba = Album(title="Greatest Hits", artist="ABBA", release_date=date(1992, 9, 21), genre="Pop")
        bohemian = queen.add_track("Bohemian Rhapsody", "Queen", "Greatest Hits", 355, 1)
        dancing = abba.add_track("Dancing Queen", "ABBA", "Greatest Hits", 231, 1)

        first = Playlist(name="A", tracks=[bohemian, dancing], shuffled=True)
        second = Playlist(name="B", tracks=[dancing, bohemian], shuffled=True)
        first.unshuffle()
        second.unshuffle()

        assert first.tracks == second.tracks
        assert first.tracks == [dancing, bohemian]


# =============================================================================
# Durations and Display
# =============================================================================


class TestPlaylistDurations:
    """Tests for totals and string output."""

    def test_total_duration(self, playlist):
        """649 + 452 seconds is 18:21."""
        assert playlist.total_duration_seconds == 1101
        assert playlist.formatted_total_duration == "18:21"
        assert playlist.total_duration.total_seconds() == 1101

    def test_empty_total_duration(self, empty_playlist):
        assert empty_playlist.formatted_total_duration == "0:00"

    def test_str(self, playlist):
        assert str(playlist) == "Playlist: Rock Classics [6 tracks, 18:21]"
        playlist.shuffle()
        assert str(playlist).endswith(" (shuffled)")
