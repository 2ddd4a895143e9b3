"""Profile editing helpers and two-phase commit of generated profiles.

Responsibilities:
- Provide the base profile an editor starts from, with a fixed default fallback.
- Build edited candidates without mutating existing profiles.
- Run the generator outside the registry lock and commit only its finished result.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from pathlib import Path

from .errors import GenerationError, VoiceError
from .models.datatypes import VoiceProfile, VoiceSpeed, VoiceStyle, VoiceTone
from .registry import ActiveProfileRegistry
from .telemetry.logger import EventLogger, default_logger
from .tts.generator import VoiceGenerator

DEFAULT_STYLE = VoiceStyle.GENTLE
DEFAULT_TONE = VoiceTone.NEUTRAL
DEFAULT_SPEED = VoiceSpeed.NORMAL


def default_profile(companion_id: str, asset_folder: Path) -> VoiceProfile:
    """Return the fallback profile used when a companion has no active voice."""

    return VoiceProfile(
        companion_id=companion_id,
        style=DEFAULT_STYLE,
        tone=DEFAULT_TONE,
        speed=DEFAULT_SPEED,
        asset_folder_path=asset_folder,
    )


def base_profile_for_editing(
    registry: ActiveProfileRegistry,
    companion_id: str,
    asset_folder: Path,
    initial: VoiceProfile | None = None,
) -> VoiceProfile:
    """Return the profile an editor should pre-populate its fields from.

    Precedence is `initial`, then the registry's active profile when it belongs
    to `companion_id`, then the default profile.
    """

    if initial is not None:
        return initial
    active = registry.get_active()
    if active is not None and active.companion_id == companion_id:
        return active
    return default_profile(companion_id, asset_folder)


def build_candidate(
    base: VoiceProfile,
    *,
    style: VoiceStyle | None = None,
    tone: VoiceTone | None = None,
    speed: VoiceSpeed | None = None,
    asset_folder: Path | None = None,
) -> VoiceProfile:
    """Return a new profile with the given fields overridden."""

    return replace(
        base,
        style=style if style is not None else base.style,
        tone=tone if tone is not None else base.tone,
        speed=speed if speed is not None else base.speed,
        asset_folder_path=asset_folder if asset_folder is not None else base.asset_folder_path,
    )


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Outcome of committing a generated profile.

    Attributes:
        profile: Finalized profile now active in the registry.
        persisted: Whether the write-through to storage succeeded.
    """

    profile: VoiceProfile
    persisted: bool


class ProfileCommitter:
    """Generate assets for candidate profiles, then commit them as active."""

    def __init__(
        self,
        registry: ActiveProfileRegistry,
        generator: VoiceGenerator,
        max_workers: int = 1,
        logger: EventLogger | None = None,
    ) -> None:
        self._registry = registry
        self._generator = generator
        self._logger = logger or default_logger()
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

    def submit(self, candidate: VoiceProfile) -> Future[CommitResult]:
        """Start generation and return a future resolving to the commit outcome.

        The future raises `GenerationError` when the generator fails; the
        registry is left untouched in that case.
        """

        return self._executor.submit(self._generate_and_commit, candidate)

    def commit(self, candidate: VoiceProfile) -> CommitResult:
        """Generate and commit `candidate`, blocking until both phases finish."""

        return self.submit(candidate).result()

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> ProfileCommitter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def _generate_and_commit(self, candidate: VoiceProfile) -> CommitResult:
        try:
            finalized = self._generator.generate(candidate)
        except VoiceError:
            self._logger.error(
                "committer", "generation_failed", companion_id=candidate.companion_id
            )
            raise
        except Exception as exc:
            self._logger.error(
                "committer",
                "generation_failed",
                companion_id=candidate.companion_id,
                error_type=type(exc).__name__,
            )
            raise GenerationError(
                detail=f"Voice generation failed for companion `{candidate.companion_id}`: {exc}",
            ) from exc

        if not isinstance(finalized, VoiceProfile):
            raise GenerationError(
                detail=(
                    "Voice generator returned "
                    f"`{type(finalized).__name__}` instead of a voice profile."
                ),
            )
        if finalized.companion_id != candidate.companion_id:
            raise GenerationError(
                detail=(
                    "Voice generator returned a profile for companion "
                    f"`{finalized.companion_id}` instead of `{candidate.companion_id}`."
                ),
            )

        persisted = self._registry.set_active(finalized)
        self._logger.info("committer", "committed", companion_id=finalized.companion_id)
        return CommitResult(profile=finalized, persisted=persisted)
