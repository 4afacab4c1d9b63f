"""Core domain entities for the music bounded context: tracks and the albums that own them."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic import ValidationError as PydanticValidationError

from jukebox.domain.music.value_objects import AlbumKey, AlbumKeyField, format_duration
from jukebox.domain.shared.exceptions import InvalidArgumentError
from jukebox.domain.shared.messages import ErrorMessages, LogTemplates
from jukebox.domain.shared.types import DurationSeconds, MetadataStr, TrackPositionInt

logger = logging.getLogger(__name__)


class Track(BaseModel):
    """Immutable value object representing a playable track.

    Identity is (title, artist, album, position, album_key); the duration is
    descriptive only.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    title: MetadataStr
    artist: MetadataStr
    album: MetadataStr
    duration_seconds: DurationSeconds
    position: TrackPositionInt

    # Back-reference to the owning album, by key only
    album_key: AlbumKeyField

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.duration_seconds)

    @property
    def album_title(self) -> str:
        """Title of the owning album, used for album-order sorting."""
        return self.album_key.title

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration_seconds)

    def _identity(self) -> tuple[str, str, str, int, AlbumKey]:
        return (self.title, self.artist, self.album, self.position, self.album_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return (
            f"{self.position}. {self.title} - {self.artist} ({self.album}) "
            f"[{self.formatted_duration}]"
        )


class Album(BaseModel):
    """An album and the tracks it owns, kept sorted by unique position.

    Metadata is frozen after construction; the track list only changes through
    ``add_track`` and ``remove_track``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    title: MetadataStr
    artist: MetadataStr
    release_date: date
    genre: MetadataStr

    _tracks: list[Track] = PrivateAttr(default_factory=list)

    @property
    def key(self) -> AlbumKey:
        return AlbumKey(self.title, self.artist, self.release_date)

    @property
    def tracks(self) -> tuple[Track, ...]:
        return tuple(self._tracks)

    @property
    def track_count(self) -> int:
        return len(self._tracks)

    @property
    def total_duration_seconds(self) -> int:
        return sum(track.duration_seconds for track in self._tracks)

    @property
    def total_duration(self) -> timedelta:
        return timedelta(seconds=self.total_duration_seconds)

    @property
    def formatted_total_duration(self) -> str:
        return format_duration(self.total_duration_seconds)

    def add_track(
        self,
        title: str,
        artist: str,
        album: str,
        duration_seconds: int,
        position: int,
    ) -> Track:
        """Create a track on this album and return it.

        Raises:
            InvalidArgumentError: If the position is taken or a field is invalid.
        """
        if any(track.position == position for track in self._tracks):
            raise InvalidArgumentError(
                ErrorMessages.DUPLICATE_TRACK_POSITION.format(position=position, album=self.title),
                field="position",
            )

        try:
            track = Track(
                title=title,
                artist=artist,
                album=album,
                duration_seconds=duration_seconds,
                position=position,
                album_key=self.key,
            )
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise InvalidArgumentError(
                ErrorMessages.INVALID_TRACK.format(album=self.title, detail=f"{field}: {error['msg']}"),
                field=field or None,
            ) from exc

        self._tracks.append(track)
        self._tracks.sort(key=lambda t: t.position)
        logger.debug(LogTemplates.ALBUM_TRACK_ADDED, position, self.title)
        return track

    def remove_track(self, position: int) -> bool:
        """Remove the track at a position; return False if there was none."""
        remaining = [track for track in self._tracks if track.position != position]
        if len(remaining) == len(self._tracks):
            return False

        self._tracks[:] = remaining
        logger.debug(LogTemplates.ALBUM_TRACK_REMOVED, position, self.title)
        return True

    def get_track(self, position: int) -> Track | None:
        return next((track for track in self._tracks if track.position == position), None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Album):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return (
            f"{self.title} - {self.artist} ({self.release_date.year}) "
            f"[{self.track_count} tracks, {self.formatted_total_duration}]"
        )
