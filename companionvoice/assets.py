"""Companion asset-folder helpers.

Responsibilities:
- Guarantee a companion's asset folder exists without failing the caller.
- Derive the default asset folder and rendered audio filename for a profile.
"""

from __future__ import annotations

from pathlib import Path

from .models.datatypes import VoiceProfile
from .telemetry.logger import EventLogger, default_logger

_COMPANIONS_DIRNAME = "Companions"
_AUDIO_EXTENSION = "m4a"


def ensure_asset_folder(path: Path, logger: EventLogger | None = None) -> Path:
    """Create `path` if missing and return it unchanged.

    Creation is best effort: an `OSError` is logged and the requested path is
    still returned.
    """

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        (logger or default_logger()).warning(
            "assets", "ensure_failed", path=path, error_type=type(exc).__name__
        )
    return path


def companion_asset_folder(assets_root: Path, companion_id: str) -> Path:
    """Return `<assets_root>/Companions/<companion_id>` without creating it.

    Raises:
        ValueError: If `companion_id` is not a single path component.
    """

    if (
        not companion_id
        or "/" in companion_id
        or "\\" in companion_id
        or companion_id in {".", ".."}
    ):
        raise ValueError(f"Companion id `{companion_id}` is not a valid folder name.")
    return assets_root / _COMPANIONS_DIRNAME / companion_id


def default_asset_folder(
    assets_root: Path, companion_id: str, logger: EventLogger | None = None
) -> Path:
    """Return the ensured default asset folder for a companion."""

    return ensure_asset_folder(companion_asset_folder(assets_root, companion_id), logger)


def audio_filename(profile: VoiceProfile) -> str:
    """Return the rendered audio filename `<style>_<tone>_<speed>.m4a`."""

    return (
        f"{profile.style.value}_{profile.tone.value}_{profile.speed.value}"
        f".{_AUDIO_EXTENSION}"
    )


def audio_asset_path(profile: VoiceProfile) -> Path:
    """Return where the rendered audio for `profile` is stored."""

    return profile.asset_folder_path / audio_filename(profile)
