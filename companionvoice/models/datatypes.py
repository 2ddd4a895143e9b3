"""Core datatypes shared across companion voice modules.

Responsibilities:
- Represent immutable voice configuration records for one companion.
- Provide name-based serialization so stored records survive enum additions.

Key types:
- `VoiceStyle`, `VoiceTone`, `VoiceSpeed`, `FacialFeatures`, and `VoiceProfile`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping


class VoiceStyle(str, Enum):
    """Speaking style matching the companion's personality impression."""

    CALM = "calm"
    ENERGETIC = "energetic"
    GENTLE = "gentle"
    LIVELY = "lively"
    SEXY = "sexy"
    MENTOR = "mentor"
    FRIENDLY = "friendly"
    COACH = "coach"


class VoiceTone(str, Enum):
    """Tonal quality of the voice, mapped to a pitch multiplier for playback."""

    BRIGHT = "bright"
    DEEP = "deep"
    HUSKY = "husky"
    SOFT = "soft"
    NEUTRAL = "neutral"


# Vocal-register tones that are declared for future use but never produced or
# accepted; records naming them decode as absent.
RESERVED_TONE_NAMES = frozenset(
    {
        "high",
        "low",
        "authoritative",
        "friendly",
        "formal",
        "empathetic",
        "enthusiastic",
        "soprano",
        "mezzoSoprano",
        "alto",
        "tenor",
        "baritone",
        "bass",
    }
)


class VoiceSpeed(str, Enum):
    """Speaking rate bucket."""

    SLOW = "slow"
    NORMAL = "normal"
    FAST = "fast"


_RECORD_FIELDS = ("companion_id", "style", "tone", "speed", "asset_folder_path")


@dataclass(frozen=True, slots=True)
class FacialFeatures:
    """Normalized facial measurements used as the sole inference input.

    Attributes:
        jaw_sharpness: Sharpness of the jaw line, nominally `0.0`-`1.0`.
        eye_size: Relative eye size, nominally `0.0`-`1.0`.
        softness: Overall softness impression, nominally `0.0`-`1.0`.
        energy: Vitality impression, nominally `0.0`-`1.0`.
    """

    jaw_sharpness: float
    eye_size: float
    softness: float
    energy: float


@dataclass(frozen=True, slots=True)
class VoiceProfile:
    """Voice configuration attached to one companion.

    Attributes:
        companion_id: Opaque identifier of the owning companion.
        style: Speaking style.
        tone: Tonal quality.
        speed: Speaking rate bucket.
        asset_folder_path: Folder holding rendered audio next to the companion's media.
    """

    companion_id: str
    style: VoiceStyle
    tone: VoiceTone
    speed: VoiceSpeed
    asset_folder_path: Path

    def to_record(self) -> dict[str, str]:
        """Return a JSON-ready mapping with enums encoded by symbolic name."""

        return {
            "companion_id": self.companion_id,
            "style": self.style.value,
            "tone": self.tone.value,
            "speed": self.speed.value,
            "asset_folder_path": str(self.asset_folder_path),
        }

    @classmethod
    def from_record(cls, payload: Mapping[str, Any]) -> VoiceProfile:
        """Build a profile from a stored record.

        Raises:
            ValueError: If a field is missing, not a string, or names an unknown symbol.
        """

        missing = [key for key in _RECORD_FIELDS if key not in payload]
        if missing:
            raise ValueError(f"Voice record is missing field(s): {', '.join(missing)}.")
        for key in _RECORD_FIELDS:
            if not isinstance(payload[key], str):
                raise ValueError(f"Voice record field `{key}` must be a string.")

        return cls(
            companion_id=payload["companion_id"],
            style=VoiceStyle(payload["style"]),
            tone=VoiceTone(payload["tone"]),
            speed=VoiceSpeed(payload["speed"]),
            asset_folder_path=Path(payload["asset_folder_path"]),
        )
