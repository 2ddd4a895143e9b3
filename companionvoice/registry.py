"""Active voice profile registry.

Responsibilities:
- Hold the single in-memory active profile for the selected companion.
- Restore it on startup or companion switch, and write edits through to storage.
- Serialize all transitions so memory and storage never point at different companions.

The registry is constructed explicitly and passed to the components that need
it. Consumers must read the active profile from here rather than from storage.
"""

from __future__ import annotations

import threading

from .errors import ActiveProfileMissingError
from .io.repository import ProfileRepository
from .models.datatypes import VoiceProfile
from .telemetry.logger import EventLogger, default_logger


class ActiveProfileRegistry:
    """Single-writer cell holding the currently active voice profile."""

    def __init__(
        self, repository: ProfileRepository, logger: EventLogger | None = None
    ) -> None:
        """Initialize an empty registry backed by `repository`."""

        self._repository = repository
        self._logger = logger or default_logger()
        self._lock = threading.RLock()
        self._active: VoiceProfile | None = None
        self._companion_id: str | None = None

    @property
    def active_companion_id(self) -> str | None:
        """Return the identifier of the currently selected companion."""

        with self._lock:
            return self._companion_id

    def bootstrap(self, companion_id: str) -> VoiceProfile | None:
        """Restore the stored active profile for `companion_id` on startup."""

        return self._reload(companion_id, event="bootstrap")

    def switch_companion(self, companion_id: str) -> VoiceProfile | None:
        """Select another companion, discarding the cached profile.

        The registry becomes empty when the new companion has no stored profile.
        """

        return self._reload(companion_id, event="switch")

    def set_active(self, profile: VoiceProfile) -> bool:
        """Make `profile` active and write it through to storage.

        Memory is updated even when persistence fails; the return value reports
        whether the write succeeded.
        """

        with self._lock:
            self._active = profile
            self._companion_id = profile.companion_id
            saved = self._repository.save_active(profile)
            self._logger.info(
                "registry", "set", companion_id=profile.companion_id, persisted=saved
            )
            return saved

    def get_active(self) -> VoiceProfile | None:
        """Return the active profile without touching storage."""

        with self._lock:
            return self._active

    def _reload(self, companion_id: str, event: str) -> VoiceProfile | None:
        with self._lock:
            self._active = self._repository.load_active(companion_id)
            self._companion_id = companion_id
            self._logger.info(
                "registry",
                event,
                companion_id=companion_id,
                restored=self._active is not None,
            )
            return self._active


def require_active(registry: ActiveProfileRegistry) -> VoiceProfile:
    """Return the active profile or raise when none is set."""

    profile = registry.get_active()
    if profile is None:
        companion_id = registry.active_companion_id
        raise ActiveProfileMissingError(
            detail=(
                "No active voice profile was found"
                + (f" for companion `{companion_id}`." if companion_id else ".")
            ),
            hint="Run `companionvoice infer` or `companionvoice set` for this companion first.",
        )
    return profile
