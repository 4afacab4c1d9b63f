"""Demo album library and lookups used by the console front-end."""

from __future__ import annotations

import random
from datetime import date
from typing import TYPE_CHECKING

from ..domain.music.entities import Album, Track
from ..domain.music.player import Player
from ..domain.music.playlist import Playlist
from ..domain.shared.exceptions import NotFoundError
from ..domain.shared.validators import validate_non_empty_string, validate_positive_int
from .jukebox import Jukebox

if TYPE_CHECKING:
    from ..config.settings import PlayerSettings

# (title, artist, release date, genre, [(track title, seconds), ...])
DEMO_ALBUMS: tuple[tuple[str, str, date, str, tuple[tuple[str, int], ...]], ...] = (
    (
        "Abbey Road",
        "The Beatles",
        date(1969, 9, 26),
        "Rock",
        (("Come Together", 259), ("Something", 183), ("Maxwell's Silver Hammer", 207)),
    ),
    (
        "Dark Side of the Moon",
        "Pink Floyd",
        date(1973, 3, 1),
        "Progressive Rock",
        (("Speak to Me", 73), ("Breathe", 163), ("On the Run", 216)),
    ),
)


def build_demo_albums() -> list[Album]:
    albums = []
    for title, artist, released, genre, tracks in DEMO_ALBUMS:
        album = Album(title=title, artist=artist, release_date=released, genre=genre)
        for position, (track_title, seconds) in enumerate(tracks, start=1):
            album.add_track(track_title, artist, title, seconds, position)
        albums.append(album)
    return albums


def build_demo_jukebox(settings: PlayerSettings) -> Jukebox:
    """Build a jukebox from settings, stocked with the demo library when enabled.

    The playlist holds every demo track in album order and shuffles with
    ``settings.shuffle_seed`` when one is configured.
    """
    albums = build_demo_albums() if settings.load_demo_library else []
    playlist = Playlist(
        name=settings.playlist_name,
        tracks=[track for album in albums for track in album.tracks],
        rng=random.Random(settings.shuffle_seed),
    )
    jukebox = Jukebox(Player(playlist=playlist, albums=albums))
    if settings.power_on_at_start:
        jukebox.power_on()
    return jukebox


def find_album(player: Player, title: str) -> Album:
    """Find an album in the player's collection by title, ignoring case.

    Raises:
        NotFoundError: If no album has that title.
    """
    wanted = validate_non_empty_string(title, "Album title").casefold()
    for album in player.albums:
        if album.title.casefold() == wanted:
            return album
    raise NotFoundError("Album", title)


def find_track(player: Player, album_title: str, position: int) -> Track:
    """Find the track at a position on a collection album.

    Raises:
        NotFoundError: If the album or the position does not exist.
    """
    album = find_album(player, album_title)
    track = album.get_track(validate_positive_int(position, "Track position"))
    if track is None:
        raise NotFoundError("Track", f"{album.title} #{position}")
    return track
