"""Reusable type definitions for the git wire protocol."""

from .base import StrictBaseModel
from .exceptions import GitWireError
from .hash import HASH_SIZE, ZERO_HASH, ObjectHash, sort_hashes

__all__ = [
    "HASH_SIZE",
    "ZERO_HASH",
    "GitWireError",
    "ObjectHash",
    "StrictBaseModel",
    "sort_hashes",
]
