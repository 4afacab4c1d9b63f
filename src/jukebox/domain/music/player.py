"""Player aggregate: the playback state machine over a playlist and an album collection."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

from jukebox.domain.music.entities import Album, Track
from jukebox.domain.music.playlist import Playlist
from jukebox.domain.music.value_objects import PlayerState
from jukebox.domain.shared.exceptions import IllegalOperationError, InvalidArgumentError
from jukebox.domain.shared.messages import ErrorMessages, LogTemplates
from jukebox.domain.shared.validators import require_present

logger = logging.getLogger(__name__)


class Player(BaseModel):
    """Aggregate root coordinating playback state, a playlist and an album collection.

    ``current_track`` is set exactly while the state is PLAYING or PAUSED and
    then equals ``playlist.current_track``. Both are only changed together by
    ``_transition``. ``albums`` is an insertion-ordered tuple that only
    ``add_album`` and ``remove_album`` replace.

    Not thread-safe: a player is owned by a single caller.
    """

    model_config = ConfigDict(strict=True)

    playlist: Playlist
    albums: tuple[Album, ...] = Field(default=(), strict=False)
    state: PlayerState = PlayerState.STOPPED
    current_track: Track | None = None
    loaded_album: Album | None = None

    @model_validator(mode="after")
    def _check_invariants(self) -> Player:
        unique: list[Album] = []
        for album in self.albums:
            if album not in unique:
                unique.append(album)
        self.albums = tuple(unique)

        if self.state.is_active and self.current_track is None:
            raise ValueError(ErrorMessages.PLAYING_WITHOUT_TRACK.format(state=self.state))
        if not self.state.is_active and self.current_track is not None:
            raise ValueError(ErrorMessages.TRACK_WITHOUT_PLAYBACK)
        return self

    @property
    def is_playing(self) -> bool:
        return self.state == PlayerState.PLAYING

    @property
    def is_paused(self) -> bool:
        return self.state == PlayerState.PAUSED

    @property
    def is_stopped(self) -> bool:
        return self.state == PlayerState.STOPPED

    def _transition(self, target: PlayerState, track: Track | None) -> None:
        """Move to a new state, setting the current track in the same step."""
        if not self.state.can_transition_to(target):
            raise IllegalOperationError(
                operation=f"transition to {target}",
                current_state=str(self.state),
                message=ErrorMessages.ILLEGAL_TRANSITION.format(current=self.state, target=target),
            )
        if target.is_active and track is None:
            raise IllegalOperationError(
                operation=f"transition to {target}",
                current_state=str(self.state),
                message=ErrorMessages.PLAYING_WITHOUT_TRACK.format(state=target),
            )

        self.state = target
        self.current_track = track if target.is_active else None

    # ── Playback ─────────────────────────────────────────────────────

    def play_track(self, track: Track) -> None:
        """Start playing a track from the playlist."""
        require_present(track, "Track")
        if track not in self.playlist:
            raise InvalidArgumentError(
                ErrorMessages.TRACK_NOT_IN_CURRENT_PLAYLIST.format(title=track.title), field="track"
            )

        self.playlist.set_current_track(track)
        self._transition(PlayerState.PLAYING, track)
        self.loaded_album = self._album_for(track)
        logger.info(LogTemplates.PLAYBACK_STARTED, track)

    def play_next(self) -> Track | None:
        """Advance the playlist cursor and play the track under it."""
        if self.playlist.is_empty:
            logger.warning(LogTemplates.PLAYBACK_EMPTY_PLAYLIST, "next")
            return None

        track = self.playlist.next_track()
        if track is not None:
            self.play_track(track)
        return track

    def play_previous(self) -> Track | None:
        """Move the playlist cursor back and play the track under it."""
        if self.playlist.is_empty:
            logger.warning(LogTemplates.PLAYBACK_EMPTY_PLAYLIST, "previous")
            return None

        track = self.playlist.previous_track()
        if track is not None:
            self.play_track(track)
        return track

    def pause(self) -> bool:
        """Pause playback; return False (and change nothing) unless PLAYING."""
        if self.state != PlayerState.PLAYING:
            logger.warning(LogTemplates.PLAYBACK_PAUSE_IGNORED, self.state)
            return False

        self._transition(PlayerState.PAUSED, self.current_track)
        logger.info(LogTemplates.PLAYBACK_PAUSED, self.current_track.title)
        return True

    def resume(self) -> bool:
        """Resume playback; return False (and change nothing) unless PAUSED."""
        if self.state != PlayerState.PAUSED or self.current_track is None:
            logger.warning(LogTemplates.PLAYBACK_RESUME_IGNORED, self.state)
            return False

        self._transition(PlayerState.PLAYING, self.current_track)
        logger.info(LogTemplates.PLAYBACK_RESUMED, self.current_track.title)
        return True

    def stop(self) -> None:
        self._transition(PlayerState.STOPPED, None)
        logger.info(LogTemplates.PLAYBACK_STOPPED)

    def remove_from_playlist(self, track: Track) -> bool:
        """Remove a track from the playlist, stopping first if it is playing."""
        require_present(track, "Track")
        if track == self.current_track:
            logger.info(LogTemplates.PLAYBACK_STOPPED_FOR_REMOVAL, track.title)
            self.stop()
        return self.playlist.remove_track(track)

    # ── Album collection ─────────────────────────────────────────────

    def add_album(self, album: Album) -> bool:
        """Add an album to the collection; return False if it was already there."""
        require_present(album, "Album")
        if album in self.albums:
            logger.info(LogTemplates.ALBUM_ALREADY_IN_COLLECTION, album.title)
            return False

        self.albums = (*self.albums, album)
        logger.info(LogTemplates.ALBUM_ADDED, album.title)
        return True

    def remove_album(self, album: Album) -> bool:
        """Remove an album and every playlist track it owns.

        Returns False if the album was not in the collection; the playlist is
        only pruned for albums that were.
        """
        require_present(album, "Album")
        if album == self.loaded_album:
            self.stop()
            self.loaded_album = None

        if album not in self.albums:
            return False

        self.albums = tuple(a for a in self.albums if a != album)
        owned = [track for track in self.playlist.tracks if track.album_key == album.key]
        for track in owned:
            self.remove_from_playlist(track)

        logger.info(LogTemplates.ALBUM_REMOVED, album.title, len(owned))
        return True

    def load_album(self, album: Album) -> None:
        require_present(album, "Album")
        if album not in self.albums:
            raise InvalidArgumentError(
                ErrorMessages.ALBUM_NOT_IN_COLLECTION.format(title=album.title), field="album"
            )

        self.loaded_album = album
        logger.info(LogTemplates.ALBUM_LOADED, album.title)

    def eject_album(self) -> Album | None:
        """Eject the loaded album, stopping playback first; return what was ejected."""
        album = self.loaded_album
        if album is None:
            logger.info(LogTemplates.ALBUM_NOTHING_TO_EJECT)
            return None

        if self.state.is_active:
            self.stop()
        self.loaded_album = None
        logger.info(LogTemplates.ALBUM_EJECTED, album.title)
        return album

    def _album_for(self, track: Track) -> Album | None:
        """Album in the collection that owns a track, if any."""
        return next((album for album in self.albums if album.key == track.album_key), None)
