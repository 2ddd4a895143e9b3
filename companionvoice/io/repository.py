"""Repository façade over active profile storage.

Upper layers depend on `ProfileRepository` so the storage mechanism can be
swapped without touching registry or inference code.
"""

from __future__ import annotations

from ..models.datatypes import VoiceProfile
from .storage import ProfileStore


class ProfileRepository:
    """Pass-through access to active voice profiles."""

    def __init__(self, store: ProfileStore) -> None:
        self._store = store

    def save_active(self, profile: VoiceProfile) -> bool:
        return self._store.save_active(profile)

    def load_active(self, companion_id: str) -> VoiceProfile | None:
        return self._store.load_active(companion_id)
