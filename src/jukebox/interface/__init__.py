"""Interface layer - text console front-end for the jukebox."""

from jukebox.interface.console import ConsoleCommand, ExitCode, JukeboxConsole

__all__ = [
    "ConsoleCommand",
    "ExitCode",
    "JukeboxConsole",
]
