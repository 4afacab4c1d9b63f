"""
Shared Domain Kernel

Contains exceptions, message constants and constrained types shared across the domain.
"""

from jukebox.domain.shared.exceptions import (
    DomainError,
    IllegalOperationError,
    InvalidArgumentError,
    NotFoundError,
)

__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "NotFoundError",
    "IllegalOperationError",
]
