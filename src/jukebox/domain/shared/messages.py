"""Centralized message constants for error messages, logging and console feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Argument Errors (templates)
    FIELD_REQUIRED = "{field_name} cannot be None"
    FIELD_CANNOT_BE_EMPTY = "{field_name} cannot be empty"
    FIELD_MUST_BE_POSITIVE = "{field_name} must be positive"

    # Album Errors
    DUPLICATE_TRACK_POSITION = "Track position {position} already exists on '{album}'"
    INVALID_TRACK = "Invalid track for '{album}': {detail}"
    ALBUM_NOT_IN_COLLECTION = "Album '{title}' not in collection. Add it first."

    # Playlist Errors
    TRACK_NOT_IN_PLAYLIST = "Track '{title}' not in playlist"
    TRACK_NOT_IN_CURRENT_PLAYLIST = "Track '{title}' not in current playlist"
    PLAYLIST_INDEX_OUT_OF_RANGE = "Playlist index {index} out of range for {size} tracks"

    # Player Errors
    ILLEGAL_TRANSITION = "Cannot transition from {current} to {target}"
    PLAYING_WITHOUT_TRACK = "State {state} requires a current track"
    TRACK_WITHOUT_PLAYBACK = "A current track requires PLAYING or PAUSED state"

    # Jukebox Errors
    POWERED_OFF = "Jukebox is powered off. Please power on first."

    # Console Errors
    UNKNOWN_COMMAND = "Unknown command: {command}. Type 'help' for a list of commands."
    COMMAND_USAGE = "Usage: {usage}"
    INVALID_POSITION = "Track position must be a whole number, got '{value}'"

    # Settings Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates.

    Pass values as arguments to logger calls rather than pre-formatting them.
    """

    # Album
    ALBUM_TRACK_ADDED = "Added track %s to album '%s'"
    ALBUM_TRACK_REMOVED = "Removed track %s from album '%s'"

    # Playlist
    PLAYLIST_TRACK_ADDED = "Added '%s' to playlist '%s'"
    PLAYLIST_TRACK_REMOVED = "Removed '%s' from playlist '%s'"
    PLAYLIST_SHUFFLED = "Shuffled playlist '%s' (%d tracks)"
    PLAYLIST_UNSHUFFLED = "Restored album order of playlist '%s'"

    # Player
    PLAYBACK_STARTED = "Now playing: %s"
    PLAYBACK_PAUSED = "Playback paused: %s"
    PLAYBACK_RESUMED = "Resuming playback: %s"
    PLAYBACK_STOPPED = "Playback stopped"
    PLAYBACK_PAUSE_IGNORED = "No track is currently playing to pause (state %s)"
    PLAYBACK_RESUME_IGNORED = "No paused track to resume (state %s)"
    PLAYBACK_EMPTY_PLAYLIST = "Playlist is empty. Cannot play %s track."
    PLAYBACK_STOPPED_FOR_REMOVAL = "Stopping playback: '%s' was removed from the playlist"
    ALBUM_ADDED = "Album added to collection: %s"
    ALBUM_ALREADY_IN_COLLECTION = "Album already in collection: %s"
    ALBUM_REMOVED = "Album removed from collection: %s (%d playlist tracks dropped)"
    ALBUM_LOADED = "Album loaded: %s"
    ALBUM_EJECTED = "Album ejected: %s"
    ALBUM_NOTHING_TO_EJECT = "No album to eject"

    # Jukebox
    JUKEBOX_POWERED_ON = "Jukebox powered ON"
    JUKEBOX_POWERED_OFF = "Jukebox powered OFF"
    JUKEBOX_ALREADY_ON = "Jukebox is already powered on"
    JUKEBOX_ALREADY_OFF = "Jukebox is already powered off"
    BUTTON_PRESSED = "%s button pressed"
    JUKEBOX_TRACK_ADDED = "Track added to playlist: %s"
    JUKEBOX_TRACK_ALREADY_QUEUED = "Track already in playlist: %s"
    JUKEBOX_TRACK_REMOVED = "Track removed from playlist: %s"
    JUKEBOX_TRACK_NOT_FOUND = "Track not found in playlist: %s"
    JUKEBOX_SHUFFLE_ON = "Shuffle on for playlist '%s'"
    JUKEBOX_SHUFFLE_OFF = "Shuffle off for playlist '%s'"
    JUKEBOX_SHUFFLE_TOO_SHORT = "Cannot shuffle: playlist has %d track(s), need at least 2"
    JUKEBOX_PLAY_EMPTY = "Cannot play: playlist is empty"

    # Console
    CONSOLE_COMMAND = "Console command: %s"
    CONSOLE_COMMAND_FAILED = "Command '%s' failed: %s"

    # Application Lifecycle
    APP_STARTING = "Starting jukebox console (environment: %s)"
    APP_STOPPED = "Jukebox console stopped"
    APP_LOGGING_FALLBACK = "Could not load %s, falling back to basic config"
