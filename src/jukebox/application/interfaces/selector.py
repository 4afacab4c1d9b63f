"""Port interface for front-ends that select what the jukebox plays next."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.music.entities import Track


class Selector(ABC):
    """Track-selection buttons every jukebox front-end offers."""

    @abstractmethod
    def next_track(self) -> "Track | None":
        """Skip to and play the next playlist track."""
        ...

    @abstractmethod
    def previous_track(self) -> "Track | None":
        """Go back to and play the previous playlist track."""
        ...

    @abstractmethod
    def add_to_playlist(self, track: "Track") -> bool:
        """Queue a track; return False if it was already queued."""
        ...

    @abstractmethod
    def remove_from_playlist(self, track: "Track") -> bool:
        """Dequeue a track; return False if it was not queued."""
        ...

    @abstractmethod
    def toggle_shuffle(self) -> bool | None:
        """Switch between shuffled and album order; None when there is nothing to shuffle."""
        ...
