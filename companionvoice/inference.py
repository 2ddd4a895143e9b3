"""Rule-based voice profile inference from facial features.

Responsibilities:
- Derive style, tone, and speed from a four-value feature vector.
- Assign the asset folder through an injectable directory-ensure service.

Each axis is decided independently with strict `>` thresholds; the first
matching branch wins. Values outside `[0.0, 1.0]` are not rejected here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from .assets import ensure_asset_folder
from .models.datatypes import FacialFeatures, VoiceProfile, VoiceSpeed, VoiceStyle, VoiceTone
from .telemetry.logger import EventLogger, default_logger

EnsureFolder = Callable[[Path], Path]

_ENERGETIC_ENERGY_THRESHOLD = 0.7
_SHARP_JAW_THRESHOLD = 0.7
_SOFTNESS_THRESHOLD = 0.7
_BRIGHT_EYE_THRESHOLD = 0.6
_FAST_ENERGY_THRESHOLD = 0.8


def infer_style(features: FacialFeatures) -> VoiceStyle:
    if (
        features.energy > _ENERGETIC_ENERGY_THRESHOLD
        or features.jaw_sharpness > _SHARP_JAW_THRESHOLD
    ):
        return VoiceStyle.ENERGETIC
    if features.softness > _SOFTNESS_THRESHOLD:
        return VoiceStyle.GENTLE
    return VoiceStyle.CALM


def infer_tone(features: FacialFeatures) -> VoiceTone:
    if features.eye_size > _BRIGHT_EYE_THRESHOLD:
        return VoiceTone.BRIGHT
    if features.jaw_sharpness > _SHARP_JAW_THRESHOLD:
        return VoiceTone.DEEP
    return VoiceTone.NEUTRAL


def infer_speed(features: FacialFeatures) -> VoiceSpeed:
    if features.energy > _FAST_ENERGY_THRESHOLD:
        return VoiceSpeed.FAST
    if features.softness > _SOFTNESS_THRESHOLD:
        return VoiceSpeed.SLOW
    return VoiceSpeed.NORMAL


class VoiceInferenceEngine:
    """Derive a default voice profile from facial feature measurements."""

    def __init__(
        self,
        ensure_folder: EnsureFolder | None = None,
        logger: EventLogger | None = None,
    ) -> None:
        """Initialize the engine with an optional directory-ensure collaborator."""

        self._logger = logger or default_logger()
        self._ensure_folder = ensure_folder or (
            lambda path: ensure_asset_folder(path, self._logger)
        )

    def infer_profile(
        self,
        companion_id: str,
        features: FacialFeatures,
        asset_folder_base: Path,
    ) -> VoiceProfile:
        """Infer a complete profile for `companion_id` from `features`."""

        asset_folder = self._ensure_asset_folder(asset_folder_base)
        profile = VoiceProfile(
            companion_id=companion_id,
            style=infer_style(features),
            tone=infer_tone(features),
            speed=infer_speed(features),
            asset_folder_path=asset_folder,
        )
        self._logger.info(
            "inference",
            "inferred",
            companion_id=companion_id,
            style=profile.style.value,
            tone=profile.tone.value,
            speed=profile.speed.value,
        )
        return profile

    def _ensure_asset_folder(self, path: Path) -> Path:
        """Run the ensure collaborator, falling back to `path` if it fails."""

        try:
            return self._ensure_folder(path)
        except Exception as exc:
            self._logger.warning(
                "inference", "ensure_failed", path=path, error_type=type(exc).__name__
            )
            return path


def infer_profile(
    companion_id: str,
    features: FacialFeatures,
    asset_folder_base: Path,
    ensure_folder: EnsureFolder | None = None,
) -> VoiceProfile:
    """Infer a profile with a one-off engine."""

    return VoiceInferenceEngine(ensure_folder=ensure_folder).infer_profile(
        companion_id, features, asset_folder_base
    )
