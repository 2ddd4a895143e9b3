"""Speech-facing collaborators.

This package contains playback parameter mapping and the voice generator
interface used when committing edited profiles.
"""

from .generator import PassthroughVoiceGenerator, VoiceGenerator
from .mapping import SpeechParameters, speech_parameters, speed_to_rate, tone_to_pitch

__all__ = [
    "PassthroughVoiceGenerator",
    "SpeechParameters",
    "VoiceGenerator",
    "speech_parameters",
    "speed_to_rate",
    "tone_to_pitch",
]
