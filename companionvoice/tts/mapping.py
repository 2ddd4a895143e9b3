"""Speech-parameter mapping for playback engines.

Responsibilities:
- Translate speed buckets into speech rate values.
- Translate tones into pitch multipliers.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models.datatypes import VoiceProfile, VoiceSpeed, VoiceTone

_SPEED_RATES = {
    VoiceSpeed.SLOW: 0.40,
    VoiceSpeed.NORMAL: 0.50,
    VoiceSpeed.FAST: 0.65,
}

_TONE_PITCHES = {
    VoiceTone.BRIGHT: 1.20,
    VoiceTone.DEEP: 0.85,
    VoiceTone.HUSKY: 0.95,
    VoiceTone.SOFT: 1.05,
    VoiceTone.NEUTRAL: 1.00,
}


@dataclass(frozen=True, slots=True)
class SpeechParameters:
    """Playback parameters derived from a voice profile.

    Attributes:
        rate: Speech rate where `0.5` is the engine's default pace.
        pitch: Pitch multiplier where `1.0` leaves the voice unchanged.
    """

    rate: float
    pitch: float


def speed_to_rate(speed: VoiceSpeed) -> float:
    return _SPEED_RATES[speed]


def tone_to_pitch(tone: VoiceTone) -> float:
    return _TONE_PITCHES[tone]


def speech_parameters(profile: VoiceProfile) -> SpeechParameters:
    """Return rate and pitch for previewing or rendering `profile`."""

    return SpeechParameters(rate=speed_to_rate(profile.speed), pitch=tone_to_pitch(profile.tone))
