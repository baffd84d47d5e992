"""Exceptions raised by sitedeps."""

from .hashing import HashDelegationError, HashingError, SiteDepsError

__all__ = [
    "HashDelegationError",
    "HashingError",
    "SiteDepsError",
]
