"""Domain exceptions for voice profile inference, generation, and storage."""

from __future__ import annotations

INFERENCE = "inference"
GENERATION = "generation"
STORAGE = "storage"
ACTIVE_PROFILE_MISSING = "active_profile_missing"

_CATEGORY_MESSAGES = {
    INFERENCE: "Failed to infer the initial voice profile.",
    GENERATION: "Failed to generate the voice audio asset.",
    STORAGE: "Failed to save the voice settings.",
    ACTIVE_PROFILE_MISSING: "No active voice profile was found.",
}


class VoiceError(RuntimeError):
    """Raised when a voice operation fails in a user-reportable way."""

    def __init__(
        self,
        *,
        category: str,
        detail: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize a category-scoped voice error."""

        message = detail if detail is not None else category_message(category)
        super().__init__(message)
        self.category = category
        self.detail = message
        self.hint = hint


class InferenceError(VoiceError):
    """Raised when a default profile cannot be derived."""

    def __init__(self, detail: str | None = None, hint: str | None = None) -> None:
        super().__init__(category=INFERENCE, detail=detail, hint=hint)


class GenerationError(VoiceError):
    """Raised when the voice generator collaborator fails."""

    def __init__(self, detail: str | None = None, hint: str | None = None) -> None:
        super().__init__(category=GENERATION, detail=detail, hint=hint)


class StorageError(VoiceError):
    """Raised when a caller explicitly requires durable storage to succeed."""

    def __init__(self, detail: str | None = None, hint: str | None = None) -> None:
        super().__init__(category=STORAGE, detail=detail, hint=hint)


class ActiveProfileMissingError(VoiceError):
    """Raised when a caller needs an active profile and none is set."""

    def __init__(self, detail: str | None = None, hint: str | None = None) -> None:
        super().__init__(category=ACTIVE_PROFILE_MISSING, detail=detail, hint=hint)


def category_message(category: str) -> str:
    """Return the stable user-facing message for an error category."""

    return _CATEGORY_MESSAGES.get(category, "Voice operation failed.")
