"""
Application Interfaces (Ports)

Abstract interfaces that jukebox front-ends implement.
"""

from jukebox.application.interfaces.selector import Selector

__all__ = [
    "Selector",
]
