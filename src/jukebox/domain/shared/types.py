"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types used by the jukebox models are defined here once, so models
can simply annotate their fields::

    from jukebox.domain.shared.types import MetadataStr, TrackPositionInt

    class MyModel(BaseModel):
        title: MetadataStr
        position: TrackPositionInt
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

# ── Numeric constraints ─────────────────────────────────────────────

DurationSeconds = Annotated[int, Field(ge=0, le=86_400)]
"""Track duration in whole seconds: 0 … 86 400 (24 hours)."""

TrackPositionInt = Annotated[int, Field(gt=0)]
"""One-based track position on an album."""

PlaylistIndexInt = Annotated[int, Field(ge=-1)]
"""Playlist cursor: -1 for an empty playlist, otherwise a zero-based index."""


# ── String constraints ──────────────────────────────────────────────

MetadataStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]
"""Title/artist/genre text: surrounding whitespace stripped, 1-500 characters."""

PlaylistNameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
"""Playlist name: surrounding whitespace stripped, 1-100 characters."""
