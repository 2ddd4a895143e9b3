"""Persistence components for companion voice profiles.

This package contains key-value backends, the active profile store, and the
repository façade consumed by the registry.
"""

from .backends import FileKeyValueBackend, InMemoryKeyValueBackend, KeyValueBackend
from .repository import ProfileRepository
from .storage import ProfileStore, active_key

__all__ = [
    "FileKeyValueBackend",
    "InMemoryKeyValueBackend",
    "KeyValueBackend",
    "ProfileRepository",
    "ProfileStore",
    "active_key",
]
