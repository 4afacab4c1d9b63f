"""Playlist aggregate: an ordered, cursor-tracked sequence of track references."""

from __future__ import annotations

import logging
import random
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator

from jukebox.domain.music.entities import Track
from jukebox.domain.music.value_objects import AlbumKey, format_duration
from jukebox.domain.shared.exceptions import NotFoundError
from jukebox.domain.shared.messages import ErrorMessages, LogTemplates
from jukebox.domain.shared.types import PlaylistIndexInt, PlaylistNameStr
from jukebox.domain.shared.validators import require_present

logger = logging.getLogger(__name__)


def _album_order(track: Track) -> tuple[str, int, AlbumKey, str, str, str]:
    return (
        track.album_title,
        track.position,
        track.album_key,
        track.title,
        track.artist,
        track.album,
    )


class Playlist(BaseModel):
    """Ordered list of tracks with a wraparound cursor.

    Tracks are shared with the albums that own them; a track appears at most
    once. ``current_index`` is -1 exactly when the playlist is empty. The
    ``rng`` used by ``shuffle`` can be injected for reproducible orderings.

    Not thread-safe: a playlist is owned by a single player.
    """

    model_config = ConfigDict(strict=True, arbitrary_types_allowed=True)

    name: PlaylistNameStr
    tracks: list[Track] = Field(default_factory=list)
    current_index: PlaylistIndexInt = -1
    shuffled: bool = False
    rng: random.Random = Field(default_factory=random.Random, exclude=True, repr=False)

    @model_validator(mode="after")
    def _normalize(self) -> Playlist:
        unique: list[Track] = []
        for track in self.tracks:
            if track not in unique:
                unique.append(track)
        self.tracks = unique

        if not self.tracks:
            self.current_index = -1
        elif self.current_index == -1:
            self.current_index = 0
        elif self.current_index >= len(self.tracks):
            raise ValueError(
                ErrorMessages.PLAYLIST_INDEX_OUT_OF_RANGE.format(
                    index=self.current_index, size=len(self.tracks)
                )
            )
        return self

    @property
    def size(self) -> int:
        return len(self.tracks)

    @property
    def is_empty(self) -> bool:
        return not self.tracks

    @property
    def is_shuffled(self) -> bool:
        return self.shuffled

    @property
    def has_next(self) -> bool:
        return bool(self.tracks)

    @property
    def has_previous(self) -> bool:
        return bool(self.tracks)

    @property
    def current_track(self) -> Track | None:
        """Track under the cursor, or None when empty."""
        if not 0 <= self.current_index < len(self.tracks):
            return None
        return self.tracks[self.current_index]

    @property
    def total_duration_seconds(self) -> int:
        return sum(track.duration_seconds for track in self.tracks)

    @property
    def total_duration(self) -> timedelta:
        return timedelta(seconds=self.total_duration_seconds)

    @property
    def formatted_total_duration(self) -> str:
        return format_duration(self.total_duration_seconds)

    def __contains__(self, track: object) -> bool:
        return track in self.tracks

    def add_track(self, track: Track) -> bool:
        """Append a track; return False if it was already present."""
        require_present(track, "Track")
        if track in self.tracks:
            return False

        self.tracks.append(track)
        if self.current_index == -1:
            self.current_index = 0
        logger.debug(LogTemplates.PLAYLIST_TRACK_ADDED, track.title, self.name)
        return True

    def remove_track(self, track: Track) -> bool:
        """Remove a track; return False if it was not present.

        The cursor keeps pointing at the same neighbourhood: it steps back
        when an earlier track is removed and is clamped into range otherwise.
        """
        require_present(track, "Track")
        try:
            index = self.tracks.index(track)
        except ValueError:
            return False

        del self.tracks[index]

        if not self.tracks:
            self.current_index = -1
        elif index < self.current_index or self.current_index >= len(self.tracks):
            self.current_index = max(0, min(self.current_index - 1, len(self.tracks) - 1))

        logger.debug(LogTemplates.PLAYLIST_TRACK_REMOVED, track.title, self.name)
        return True

    def next_track(self) -> Track | None:
        """Advance the cursor with wraparound and return the track under it."""
        if not self.tracks:
            return None

        self.current_index = (self.current_index + 1) % len(self.tracks)
        return self.tracks[self.current_index]

    def previous_track(self) -> Track | None:
        """Move the cursor back with wraparound and return the track under it."""
        if not self.tracks:
            return None

        self.current_index = (self.current_index - 1 + len(self.tracks)) % len(self.tracks)
        return self.tracks[self.current_index]

    def set_current_track(self, track: Track) -> None:
        require_present(track, "Track")
        try:
            self.current_index = self.tracks.index(track)
        except ValueError:
            raise NotFoundError(
                "Track", track.title, ErrorMessages.TRACK_NOT_IN_PLAYLIST.format(title=track.title)
            ) from None

    def shuffle(self) -> None:
        """Randomly reorder the tracks, keeping the cursor on the same track."""
        if len(self.tracks) <= 1:
            return

        current = self.current_track
        self.rng.shuffle(self.tracks)
        self.shuffled = True
        self._restore_cursor(current)
        logger.debug(LogTemplates.PLAYLIST_SHUFFLED, self.name, len(self.tracks))

    def unshuffle(self) -> None:
        """Sort by owning album title then position, keeping the cursor on the same track.

        Ties between same-titled albums fall back to the full album key and
        track metadata, so the result never depends on the prior order.
        """
        current = self.current_track
        self.shuffled = False
        self.tracks.sort(key=_album_order)
        self._restore_cursor(current)
        logger.debug(LogTemplates.PLAYLIST_UNSHUFFLED, self.name)

    def _restore_cursor(self, track: Track | None) -> None:
        if track is not None:
            self.current_index = self.tracks.index(track)

    def __str__(self) -> str:
        suffix = " (shuffled)" if self.shuffled else ""
        return f"Playlist: {self.name} [{self.size} tracks, {self.formatted_total_duration}]{suffix}"

