"""Jukebox facade: power-gated buttons in front of a Player."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.shared.exceptions import IllegalOperationError
from ..domain.shared.messages import ErrorMessages, LogTemplates
from ..domain.shared.validators import require_present
from .interfaces.selector import Selector
from .rendering import render_collection, render_playlist, render_status

if TYPE_CHECKING:
    from ..domain.music.entities import Album, Track
    from ..domain.music.player import Player

logger = logging.getLogger(__name__)


class Jukebox(Selector):
    """Translates button presses into Player and Playlist calls.

    Every button except the power switch raises ``IllegalOperationError``
    while the jukebox is off. Not thread-safe.
    """

    def __init__(self, player: Player) -> None:
        self._player = require_present(player, "Player")
        self._powered_on = False

    @property
    def player(self) -> Player:
        return self._player

    @property
    def is_powered_on(self) -> bool:
        return self._powered_on

    def _ensure_powered(self, operation: str) -> None:
        if not self._powered_on:
            raise IllegalOperationError(
                operation=operation, current_state="powered off", message=ErrorMessages.POWERED_OFF
            )

    # ── Power ────────────────────────────────────────────────────────

    def power_on(self) -> bool:
        """Switch on; return False if already on."""
        if self._powered_on:
            logger.info(LogTemplates.JUKEBOX_ALREADY_ON)
            return False

        self._powered_on = True
        logger.info(LogTemplates.JUKEBOX_POWERED_ON)
        return True

    def power_off(self) -> bool:
        """Switch off, stopping any playback; return False if already off."""
        if not self._powered_on:
            logger.info(LogTemplates.JUKEBOX_ALREADY_OFF)
            return False

        if self._player.state.is_active:
            self._player.stop()
        self._powered_on = False
        logger.info(LogTemplates.JUKEBOX_POWERED_OFF)
        return True

    # ── Selector buttons ─────────────────────────────────────────────

    def next_track(self) -> Track | None:
        self._ensure_powered("next track")
        logger.debug(LogTemplates.BUTTON_PRESSED, "Next")
        return self._player.play_next()

    def previous_track(self) -> Track | None:
        self._ensure_powered("previous track")
        logger.debug(LogTemplates.BUTTON_PRESSED, "Previous")
        return self._player.play_previous()

    def add_to_playlist(self, track: Track) -> bool:
        self._ensure_powered("add to playlist")
        require_present(track, "Track")

        added = self._player.playlist.add_track(track)
        if added:
            logger.info(LogTemplates.JUKEBOX_TRACK_ADDED, track.title)
        else:
            logger.warning(LogTemplates.JUKEBOX_TRACK_ALREADY_QUEUED, track.title)
        return added

    def remove_from_playlist(self, track: Track) -> bool:
        self._ensure_powered("remove from playlist")
        require_present(track, "Track")

        removed = self._player.remove_from_playlist(track)
        if removed:
            logger.info(LogTemplates.JUKEBOX_TRACK_REMOVED, track.title)
        else:
            logger.warning(LogTemplates.JUKEBOX_TRACK_NOT_FOUND, track.title)
        return removed

    def toggle_shuffle(self) -> bool | None:
        self._ensure_powered("shuffle")
        logger.debug(LogTemplates.BUTTON_PRESSED, "Shuffle")

        playlist = self._player.playlist
        if playlist.is_shuffled:
            playlist.unshuffle()
            logger.info(LogTemplates.JUKEBOX_SHUFFLE_OFF, playlist.name)
            return False

        if playlist.size < 2:
            logger.warning(LogTemplates.JUKEBOX_SHUFFLE_TOO_SHORT, playlist.size)
            return None

        playlist.shuffle()
        logger.info(LogTemplates.JUKEBOX_SHUFFLE_ON, playlist.name)
        return True

    # ── Transport buttons ────────────────────────────────────────────

    def play_pause(self) -> None:
        """Pause when playing, resume when paused, otherwise start the current track."""
        self._ensure_powered("play/pause")
        logger.debug(LogTemplates.BUTTON_PRESSED, "Play/Pause")

        if self._player.is_playing:
            self._player.pause()
        elif self._player.is_paused:
            self._player.resume()
        elif self._player.playlist.is_empty:
            logger.warning(LogTemplates.JUKEBOX_PLAY_EMPTY)
        else:
            current = self._player.playlist.current_track
            if current is not None:
                self._player.play_track(current)
            else:
                self._player.play_next()

    def play_track(self, track: Track) -> None:
        self._ensure_powered("play track")
        self._player.play_track(track)

    def stop(self) -> None:
        self._ensure_powered("stop")
        logger.debug(LogTemplates.BUTTON_PRESSED, "Stop")
        self._player.stop()

    # ── Album slot ───────────────────────────────────────────────────

    def add_album(self, album: Album) -> bool:
        self._ensure_powered("add album")
        return self._player.add_album(album)

    def remove_album(self, album: Album) -> bool:
        self._ensure_powered("remove album")
        return self._player.remove_album(album)

    def load_album(self, album: Album) -> None:
        self._ensure_powered("load album")
        self._player.load_album(album)

    def eject_album(self) -> Album | None:
        self._ensure_powered("eject album")
        return self._player.eject_album()

    # ── Display ──────────────────────────────────────────────────────

    def status(self) -> str:
        self._ensure_powered("show status")
        return render_status(self._player)

    def playlist_listing(self) -> str:
        self._ensure_powered("show playlist")
        return render_playlist(self._player.playlist)

    def collection_listing(self) -> str:
        self._ensure_powered("show collection")
        return render_collection(self._player)
