"""Voice generator collaborator interface.

Responsibilities:
- Define the protocol for rendering a profile's audio asset.
- Provide a pass-through generator for setups without a synthesis backend.
"""

from __future__ import annotations

from typing import Protocol

from ..assets import ensure_asset_folder
from ..models.datatypes import VoiceProfile
from ..telemetry.logger import EventLogger, default_logger


class VoiceGenerator(Protocol):
    """Protocol for components that render audio for a profile."""

    def generate(self, profile: VoiceProfile) -> VoiceProfile:
        """Render assets for `profile` and return the finalized profile."""


class PassthroughVoiceGenerator:
    """Generator that only prepares the asset folder and renders nothing."""

    def __init__(self, logger: EventLogger | None = None) -> None:
        self._logger = logger or default_logger()

    def generate(self, profile: VoiceProfile) -> VoiceProfile:
        """Ensure the asset folder exists and return `profile` unchanged."""

        ensure_asset_folder(profile.asset_folder_path, self._logger)
        self._logger.debug("generator", "passthrough", companion_id=profile.companion_id)
        return profile
