"""Immutable value objects for the music bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from jukebox.domain.shared.validators import validate_non_empty_string


@dataclass(frozen=True, order=True)
class AlbumKey:
    """Identity of an album: title, artist and release date.

    Tracks refer to their album through this key so that they never hold a
    mutation path back into the Album that created them.
    """

    title: str
    artist: str
    release_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "title", validate_non_empty_string(self.title, "Album title"))
        object.__setattr__(self, "artist", validate_non_empty_string(self.artist, "Artist"))
        if not isinstance(self.release_date, date):
            raise TypeError("Release date must be a date")

    def __str__(self) -> str:
        return f"{self.title} - {self.artist} ({self.release_date.year})"


def _validate_album_key(value: Any) -> AlbumKey:
    if isinstance(value, AlbumKey):
        return value
    if isinstance(value, dict):
        return AlbumKey(**value)
    raise ValueError(f"Expected AlbumKey, got {type(value).__name__}")


# Serializes as a plain dict, stores as AlbumKey in the model.
AlbumKeyField = Annotated[
    AlbumKey,
    PlainValidator(_validate_album_key),
    PlainSerializer(
        lambda v: {"title": v.title, "artist": v.artist, "release_date": v.release_date.isoformat()},
        return_type=dict,
    ),
]


class PlayerState(Enum):
    """Playback state with enforced transitions.

    State transitions:
    - STOPPED -> PLAYING (play a track)
    - PLAYING -> PAUSED (pause)
    - PAUSED -> PLAYING (resume, or play another track)
    - PLAYING -> PLAYING (play another track)
    - Any -> STOPPED (stop)
    """

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"

    def can_transition_to(self, target: PlayerState) -> bool:
        """Check if transition to target state is valid."""
        valid_transitions = {
            PlayerState.STOPPED: {PlayerState.PLAYING, PlayerState.STOPPED},
            PlayerState.PLAYING: {
                PlayerState.PLAYING,
                PlayerState.PAUSED,
                PlayerState.STOPPED,
            },
            PlayerState.PAUSED: {PlayerState.PLAYING, PlayerState.STOPPED},
        }
        return target in valid_transitions.get(self, set())

    @property
    def is_active(self) -> bool:
        """True when a track is loaded into the transport (playing or paused)."""
        return self in {PlayerState.PLAYING, PlayerState.PAUSED}

    def __str__(self) -> str:
        return self.name


def format_duration(total_seconds: int) -> str:
    """Format seconds as M:SS with unbounded minutes (e.g. 75:03)."""
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"
