"""
Music Bounded Context

Domain logic for albums, playlist navigation and shuffling, and playback state.
"""

from jukebox.domain.music.entities import Album, Track
from jukebox.domain.music.player import Player
from jukebox.domain.music.playlist import Playlist
from jukebox.domain.music.value_objects import AlbumKey, PlayerState

__all__ = [
    # Entities
    "Track",
    "Album",
    "Playlist",
    "Player",
    # Value Objects
    "AlbumKey",
    "PlayerState",
]
