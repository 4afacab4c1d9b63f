"""
Application Layer

Orchestrates the domain for front-ends.

Structure:
- jukebox: the power-gated button facade
- catalog: demo library and album/track lookups
- rendering: plain-text status and listings
- interfaces/: port interfaces front-ends implement
"""
