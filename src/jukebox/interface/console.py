"""Text console for the jukebox: maps typed commands onto facade buttons."""

from __future__ import annotations

import logging
import shlex
import sys
from collections.abc import Callable, Iterable
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING, TextIO

from ..application.catalog import find_album, find_track
from ..application.jukebox import Jukebox
from ..domain.shared.exceptions import (
    DomainError,
    IllegalOperationError,
    InvalidArgumentError,
    NotFoundError,
)
from ..domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ..domain.music.entities import Track

logger = logging.getLogger(__name__)

PROMPT = "jukebox> "


class ExitCode(IntEnum):
    """Process status for each way a command can fail. 2 is left to argparse."""

    OK = 0
    BAD_COMMAND = 1
    INVALID_ARGUMENT = 3
    NOT_FOUND = 4
    ILLEGAL_OPERATION = 5


class ConsoleCommand(StrEnum):
    """Console command names."""

    POWER_ON = "power-on"
    POWER_OFF = "power-off"
    PLAY_PAUSE = "play-pause"
    STOP = "stop"
    NEXT = "next"
    PREV = "prev"
    SHUFFLE = "shuffle"
    ADD = "add"
    REMOVE = "remove"
    PLAY = "play"
    LOAD = "load"
    EJECT = "eject"
    STATUS = "status"
    PLAYLIST = "playlist"
    COLLECTION = "collection"
    HELP = "help"


USAGE: dict[ConsoleCommand, str] = {
    ConsoleCommand.POWER_ON: "power-on",
    ConsoleCommand.POWER_OFF: "power-off",
    ConsoleCommand.PLAY_PAUSE: "play-pause",
    ConsoleCommand.STOP: "stop",
    ConsoleCommand.NEXT: "next",
    ConsoleCommand.PREV: "prev",
    ConsoleCommand.SHUFFLE: "shuffle",
    ConsoleCommand.ADD: "add ALBUM POSITION",
    ConsoleCommand.REMOVE: "remove ALBUM POSITION",
    ConsoleCommand.PLAY: "play ALBUM POSITION",
    ConsoleCommand.LOAD: "load ALBUM",
    ConsoleCommand.EJECT: "eject",
    ConsoleCommand.STATUS: "status",
    ConsoleCommand.PLAYLIST: "playlist",
    ConsoleCommand.COLLECTION: "collection",
    ConsoleCommand.HELP: "help",
}

EXIT_WORDS = frozenset({"quit", "exit"})


class CommandUsageError(Exception):
    """Raised when a command gets the wrong arguments."""


def exit_code_for(error: DomainError) -> ExitCode:
    if isinstance(error, NotFoundError):
        return ExitCode.NOT_FOUND
    if isinstance(error, InvalidArgumentError):
        return ExitCode.INVALID_ARGUMENT
    if isinstance(error, IllegalOperationError):
        return ExitCode.ILLEGAL_OPERATION
    return ExitCode.BAD_COMMAND


class JukeboxConsole:
    """Parses command lines and runs them against a Jukebox, writing feedback to ``out``."""

    def __init__(self, jukebox: Jukebox, out: TextIO | None = None) -> None:
        self._jukebox = jukebox
        self._out = out or sys.stdout
        self._handlers: dict[ConsoleCommand, Callable[[list[str]], str]] = {
            ConsoleCommand.POWER_ON: self._power_on,
            ConsoleCommand.POWER_OFF: self._power_off,
            ConsoleCommand.PLAY_PAUSE: self._play_pause,
            ConsoleCommand.STOP: self._stop,
            ConsoleCommand.NEXT: self._next,
            ConsoleCommand.PREV: self._prev,
            ConsoleCommand.SHUFFLE: self._shuffle,
            ConsoleCommand.ADD: self._add,
            ConsoleCommand.REMOVE: self._remove,
            ConsoleCommand.PLAY: self._play,
            ConsoleCommand.LOAD: self._load,
            ConsoleCommand.EJECT: self._eject,
            ConsoleCommand.STATUS: self._status,
            ConsoleCommand.PLAYLIST: self._playlist,
            ConsoleCommand.COLLECTION: self._collection,
            ConsoleCommand.HELP: self._help,
        }

    @property
    def jukebox(self) -> Jukebox:
        return self._jukebox

    def _write(self, text: str) -> None:
        print(text, file=self._out)

    def execute(self, line: str) -> ExitCode:
        """Run one command line and return its exit code. Blank lines are a no-op."""
        try:
            words = shlex.split(line)
        except ValueError as e:
            self._write(str(e))
            return ExitCode.BAD_COMMAND
        if not words:
            return ExitCode.OK

        name, args = words[0].lower(), words[1:]
        try:
            command = ConsoleCommand(name)
        except ValueError:
            self._write(ErrorMessages.UNKNOWN_COMMAND.format(command=name))
            return ExitCode.BAD_COMMAND

        logger.debug(LogTemplates.CONSOLE_COMMAND, line)
        try:
            self._write(self._handlers[command](args))
        except CommandUsageError as e:
            self._write(str(e))
            return ExitCode.BAD_COMMAND
        except DomainError as e:
            logger.debug(LogTemplates.CONSOLE_COMMAND_FAILED, command, e.message)
            self._write(f"Error: {e.message}")
            return exit_code_for(e)
        return ExitCode.OK

    def run_script(self, lines: Iterable[str]) -> int:
        """Run commands in order, stopping at the first failure."""
        for line in lines:
            code = self.execute(line)
            if code != ExitCode.OK:
                return code
        return ExitCode.OK

    def run_interactive(self, stdin: TextIO | None = None) -> int:
        """Read commands until EOF or quit; failures are reported and skipped."""
        stdin = stdin or sys.stdin
        while True:
            self._out.write(PROMPT)
            self._out.flush()
            line = stdin.readline()
            if not line or line.strip().lower() in EXIT_WORDS:
                return ExitCode.OK
            self.execute(line)

    # ── Argument helpers ─────────────────────────────────────────────

    @staticmethod
    def _expect(command: ConsoleCommand, args: list[str], count: int) -> None:
        if len(args) != count:
            raise CommandUsageError(ErrorMessages.COMMAND_USAGE.format(usage=USAGE[command]))

    def _track_arg(self, command: ConsoleCommand, args: list[str]) -> Track:
        self._expect(command, args, 2)
        album_title, raw_position = args
        try:
            position = int(raw_position)
        except ValueError:
            raise CommandUsageError(ErrorMessages.INVALID_POSITION.format(value=raw_position)) from None
        return find_track(self._jukebox.player, album_title, position)

    def _now_playing(self) -> str:
        player = self._jukebox.player
        if player.current_track is None:
            return f"{player.state}"
        return f"{player.state}: {player.current_track}"

    # ── Handlers ─────────────────────────────────────────────────────

    def _power_on(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.POWER_ON, args, 0)
        if not self._jukebox.power_on():
            return "Jukebox is already on"
        return "Jukebox powered ON\n" + self._jukebox.status()

    def _power_off(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.POWER_OFF, args, 0)
        if not self._jukebox.power_off():
            return "Jukebox is already off"
        return "Jukebox powered OFF"

    def _play_pause(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.PLAY_PAUSE, args, 0)
        self._jukebox.play_pause()
        return self._now_playing()

    def _stop(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.STOP, args, 0)
        self._jukebox.stop()
        return self._now_playing()

    def _next(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.NEXT, args, 0)
        self._jukebox.next_track()
        return self._now_playing()

    def _prev(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.PREV, args, 0)
        self._jukebox.previous_track()
        return self._now_playing()

    def _shuffle(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.SHUFFLE, args, 0)
        shuffled = self._jukebox.toggle_shuffle()
        if shuffled is None:
            return "Cannot shuffle: playlist needs at least two tracks"
        return "Playlist shuffled" if shuffled else "Playlist restored to album order"

    def _add(self, args: list[str]) -> str:
        track = self._track_arg(ConsoleCommand.ADD, args)
        if self._jukebox.add_to_playlist(track):
            return f"Added to playlist: {track}"
        return f"Already in playlist: {track}"

    def _remove(self, args: list[str]) -> str:
        track = self._track_arg(ConsoleCommand.REMOVE, args)
        if self._jukebox.remove_from_playlist(track):
            return f"Removed from playlist: {track}"
        return f"Not in playlist: {track}"

    def _play(self, args: list[str]) -> str:
        track = self._track_arg(ConsoleCommand.PLAY, args)
        self._jukebox.play_track(track)
        return self._now_playing()

    def _load(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.LOAD, args, 1)
        album = find_album(self._jukebox.player, args[0])
        self._jukebox.load_album(album)
        return f"Album loaded: {album}"

    def _eject(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.EJECT, args, 0)
        album = self._jukebox.eject_album()
        return f"Album ejected: {album.title}" if album is not None else "No album to eject"

    def _status(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.STATUS, args, 0)
        return self._jukebox.status()

    def _playlist(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.PLAYLIST, args, 0)
        return self._jukebox.playlist_listing()

    def _collection(self, args: list[str]) -> str:
        self._expect(ConsoleCommand.COLLECTION, args, 0)
        return self._jukebox.collection_listing()

    def _help(self, args: list[str]) -> str:
        lines = ["Commands:"]
        lines.extend(f"  {usage}" for usage in USAGE.values())
        lines.append("  quit")
        return "\n".join(lines)
