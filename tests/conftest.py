import random
from datetime import date

import pytest

# ============================================================================
# Album Fixtures
# ============================================================================


@pytest.fixture
def abbey_road():
    """Create 'Abbey Road' with three tracks."""
    from jukebox.domain.music.entities import Album

    album = Album(
        title="Abbey Road", artist="The Beatles", release_date=date(1969, 9, 26), genre="Rock"
    )
    album.add_track("Come Together", "The Beatles", "Abbey Road", 259, 1)
    album.add_track("Something", "The Beatles", "Abbey Road", 183, 2)
    album.add_track("Maxwell's Silver Hammer", "The Beatles", "Abbey Road", 207, 3)
    return album


@pytest.fixture
def dark_side():
    """Create 'Dark Side of the Moon' with three tracks."""
    from jukebox.domain.music.entities import Album

    album = Album(
        title="Dark Side of the Moon",
        artist="Pink Floyd",
        release_date=date(1973, 3, 1),
        genre="Progressive Rock",
    )
    album.add_track("Speak to Me", "Pink Floyd", "Dark Side of the Moon", 73, 1)
    album.add_track("Breathe", "Pink Floyd", "Dark Side of the Moon", 163, 2)
    album.add_track("On the Run", "Pink Floyd", "Dark Side of the Moon", 216, 3)
    return album


# ============================================================================
# Playlist / Player Fixtures
# ============================================================================


@pytest.fixture
def playlist(abbey_road, dark_side):
    """Create a seeded playlist holding every track of both albums in album order."""
    from jukebox.domain.music.playlist import Playlist

    return Playlist(
        name="Rock Classics",
        tracks=[*abbey_road.tracks, *dark_side.tracks],
        rng=random.Random(42),
    )


@pytest.fixture
def empty_playlist():
    from jukebox.domain.music.playlist import Playlist

    return Playlist(name="Empty", rng=random.Random(42))


@pytest.fixture
def player(playlist, abbey_road, dark_side):
    """Create a stopped player with both albums in its collection."""
    from jukebox.domain.music.player import Player

    return Player(playlist=playlist, albums=[abbey_road, dark_side])


@pytest.fixture
def jukebox(player):
    """Create a powered-off jukebox around the player."""
    from jukebox.application.jukebox import Jukebox

    return Jukebox(player)


@pytest.fixture
def powered_jukebox(jukebox):
    jukebox.power_on()
    return jukebox


def _assert_state_invariant(player) -> None:
    if player.state.is_active:
        assert player.current_track is not None
        assert player.current_track == player.playlist.current_track
    else:
        assert player.current_track is None


@pytest.fixture
def state_invariant():
    """Assert that a current track is set exactly while PLAYING/PAUSED and matches the cursor."""
    return _assert_state_invariant

