"""Active voice profile persistence.

Responsibilities:
- Persist one active profile per companion under a stable key.
- Degrade read/decode failures to "absent" and write failures to a status value.
- Report write failures through logging and an optional callback.
"""

from __future__ import annotations

import json
from typing import Callable

from ..models.datatypes import VoiceProfile
from ..telemetry.logger import EventLogger, default_logger
from .backends import KeyValueBackend

_ACTIVE_KEY_PREFIX = "ActiveVoiceProfile_"

FailureCallback = Callable[[str, Exception], None]


def active_key(companion_id: str) -> str:
    """Return the storage key for a companion's active profile."""

    return f"{_ACTIVE_KEY_PREFIX}{companion_id}"


class ProfileStore:
    """Key-value-backed store for active voice profiles."""

    def __init__(
        self,
        backend: KeyValueBackend,
        logger: EventLogger | None = None,
        on_failure: FailureCallback | None = None,
    ) -> None:
        """Initialize the store with a backend and optional failure observers."""

        self.backend = backend
        self._logger = logger or default_logger()
        self._on_failure = on_failure

    def save_active(self, profile: VoiceProfile) -> bool:
        """Persist `profile` under its companion key and return whether it was written.

        Failures never raise to the caller; they are logged and forwarded to the
        `on_failure` callback instead.
        """

        key = active_key(profile.companion_id)
        try:
            payload = json.dumps(profile.to_record(), ensure_ascii=False, sort_keys=True)
            self.backend.write(key, payload)
        except Exception as exc:
            self._logger.error(
                "store", "save_failed", key=key, error_type=type(exc).__name__
            )
            if self._on_failure is not None:
                self._on_failure(key, exc)
            return False
        self._logger.debug("store", "saved", key=key)
        return True

    def load_active(self, companion_id: str) -> VoiceProfile | None:
        """Load the active profile for `companion_id`, or `None` when absent or corrupt."""

        key = active_key(companion_id)
        try:
            raw = self.backend.read(key)
        except Exception as exc:
            self._logger.warning(
                "store", "read_failed", key=key, error_type=type(exc).__name__
            )
            return None
        if raw is None:
            return None

        try:
            payload = json.loads(raw)
            if not isinstance(payload, dict):
                raise ValueError("Voice record must be a JSON object.")
            return VoiceProfile.from_record(payload)
        except ValueError as exc:
            self._logger.warning(
                "store", "decode_failed", key=key, error_type=type(exc).__name__
            )
            return None
