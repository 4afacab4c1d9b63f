"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Cross-cutting exceptions, messages and constrained types
- music/: Tracks, albums, the playlist engine and the player state machine
"""

from jukebox.domain.shared.exceptions import DomainError

__all__ = [
    "DomainError",
]
