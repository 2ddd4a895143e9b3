"""Shared typed data models for companion voice profiles.

This package contains enums and dataclasses used across modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import (
    RESERVED_TONE_NAMES,
    FacialFeatures,
    VoiceProfile,
    VoiceSpeed,
    VoiceStyle,
    VoiceTone,
)

__all__ = [
    "RESERVED_TONE_NAMES",
    "FacialFeatures",
    "VoiceProfile",
    "VoiceSpeed",
    "VoiceStyle",
    "VoiceTone",
]
