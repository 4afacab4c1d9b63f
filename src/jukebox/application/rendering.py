"""Plain-text rendering of player status, the playlist and the album collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.music.player import Player
    from ..domain.music.playlist import Playlist

RULE_WIDTH = 40
CURRENT_MARKER = "► "
BLANK_MARKER = "  "


def _marker(is_current: bool) -> str:
    return CURRENT_MARKER if is_current else BLANK_MARKER


def render_status(player: Player) -> str:
    loaded = player.loaded_album.title if player.loaded_album is not None else "None"
    playing = player.current_track.title if player.current_track is not None else "None"
    lines = [
        "=== Jukebox Status ===",
        f"State: {player.state}",
        f"Loaded album: {loaded}",
        f"Currently playing: {playing}",
        f"Playlist: {player.playlist.name} ({player.playlist.size} tracks)",
        f"Albums in collection: {len(player.albums)}",
        "=" * 22,
    ]
    return "\n".join(lines)


def render_playlist(playlist: Playlist) -> str:
    """List playlist tracks in order, marking the one under the cursor."""
    lines = [str(playlist), "-" * RULE_WIDTH]
    if playlist.is_empty:
        lines.append("No tracks in playlist")
    else:
        current = playlist.current_track
        for number, track in enumerate(playlist.tracks, start=1):
            lines.append(f"{_marker(track == current)}{number:2d}. {track}")
    lines.append("-" * RULE_WIDTH)
    return "\n".join(lines)


def render_collection(player: Player) -> str:
    """List the album collection, marking the loaded album."""
    lines = ["ALBUM COLLECTION", "-" * RULE_WIDTH]
    if not player.albums:
        lines.append("No albums in collection")
    else:
        for number, album in enumerate(player.albums, start=1):
            lines.append(f"{_marker(album == player.loaded_album)}{number:2d}. {album}")
    lines.append("-" * RULE_WIDTH)
    return "\n".join(lines)
