"""Top-level package for companion voice profiles.

This package infers a default voice profile from facial features and keeps
one active profile per companion consistent between memory and storage. The
main entry points are `VoiceInferenceEngine` and `ActiveProfileRegistry`.
"""

from .inference import VoiceInferenceEngine, infer_profile
from .registry import ActiveProfileRegistry

__all__ = ["ActiveProfileRegistry", "VoiceInferenceEngine", "infer_profile", "__version__"]

__version__ = "0.1.0"
