"""Command-line interface for companion voice profiles.

Responsibilities:
- Expose commands to infer, inspect, edit, and map a companion's active voice.
- Wire configuration, storage, and the active profile registry per invocation.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Annotated, Iterator

import typer

from .assets import audio_filename, companion_asset_folder, default_asset_folder
from .cli_rendering import (
    echo_persistence_warning,
    echo_profile,
    echo_speech_parameters,
    exit_with_command_error,
)
from .config import ConfigLoader, VoiceConfig
from .editing import ProfileCommitter, base_profile_for_editing, build_candidate
from .errors import VoiceError
from .inference import VoiceInferenceEngine
from .io.backends import FileKeyValueBackend
from .io.repository import ProfileRepository
from .io.storage import ProfileStore
from .models.datatypes import FacialFeatures, VoiceSpeed, VoiceStyle, VoiceTone
from .registry import ActiveProfileRegistry, require_active
from .telemetry.logger import EventLogger
from .tts.generator import PassthroughVoiceGenerator
from .tts.mapping import speech_parameters

app = typer.Typer(
    name="companionvoice",
    no_args_is_help=True,
    help="Companion voice profile CLI.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
StoreDirOption = Annotated[
    Path | None,
    typer.Option("--store-dir", help="Directory for stored active profiles."),
]
AssetsRootOption = Annotated[
    Path | None,
    typer.Option("--assets-root", help="Root directory for companion asset folders."),
]
FeatureOption = Annotated[float, typer.Option(min=0.0, max=1.0)]


@dataclass(slots=True)
class _Services:
    """Per-invocation collaborators built from the resolved config."""

    config: VoiceConfig
    logger: EventLogger
    registry: ActiveProfileRegistry


def _resolve_config(
    config_file: Path | None, store_dir: Path | None, assets_root: Path | None
) -> VoiceConfig:
    """Load YAML or environment config and apply explicit CLI overrides."""

    if config_file is None:
        try:
            loaded = ConfigLoader.from_env()
        except ValueError as exc:
            raise VoiceError(
                category="config",
                detail=f"Invalid environment configuration: {exc}",
                hint="Fix `COMPANIONVOICE_*` environment variables and rerun.",
            ) from exc
    else:
        try:
            loaded = ConfigLoader.from_yaml(config_file)
        except FileNotFoundError as exc:
            raise VoiceError(
                category="config",
                detail=f"Config file not found: `{config_file}`.",
                hint="Provide an existing path via `--config <path.yaml>`.",
            ) from exc
        except ValueError as exc:
            raise VoiceError(
                category="config",
                detail=f"Invalid config file `{config_file}`: {exc}",
                hint="Fix config keys/values and rerun.",
            ) from exc

    return VoiceConfig(
        store_dir=store_dir if store_dir is not None else loaded.store_dir,
        assets_root=assets_root if assets_root is not None else loaded.assets_root,
        log_level=loaded.log_level,
    )


def _invalid_companion_id(companion_id: str, exc: ValueError) -> VoiceError:
    return VoiceError(
        category="companion_id",
        detail=f"Invalid companion id `{companion_id}`: {exc}",
        hint="Use a companion id without path separators, `.` or `..`.",
    )


@contextmanager
def _open_services(
    config_file: Path | None, store_dir: Path | None, assets_root: Path | None
) -> Iterator[_Services]:
    config = _resolve_config(config_file, store_dir, assets_root)
    logger = EventLogger(sink=sys.stderr, level=config.log_level)
    try:
        store = ProfileStore(FileKeyValueBackend(config.store_dir), logger=logger)
        registry = ActiveProfileRegistry(ProfileRepository(store), logger=logger)
        yield _Services(config=config, logger=logger, registry=registry)
    finally:
        logger.close()


@app.command("infer")
def infer_command(
    companion_id: Annotated[str, typer.Argument(help="Companion identifier.")],
    jaw: FeatureOption = 0.5,
    eye: FeatureOption = 0.5,
    softness: FeatureOption = 0.5,
    energy: FeatureOption = 0.5,
    asset_folder: Annotated[
        Path | None,
        typer.Option("--asset-folder", help="Asset folder override for this companion."),
    ] = None,
    config_file: ConfigOption = None,
    store_dir: StoreDirOption = None,
    assets_root: AssetsRootOption = None,
) -> None:
    """Infer a default voice from facial features and make it active."""

    try:
        with _open_services(config_file, store_dir, assets_root) as services:
            features = FacialFeatures(
                jaw_sharpness=jaw, eye_size=eye, softness=softness, energy=energy
            )
            try:
                default_folder = companion_asset_folder(
                    services.config.assets_root, companion_id
                )
            except ValueError as exc:
                raise _invalid_companion_id(companion_id, exc) from exc
            folder = asset_folder if asset_folder is not None else default_folder
            engine = VoiceInferenceEngine(logger=services.logger)
            profile = engine.infer_profile(companion_id, features, folder)
            persisted = services.registry.set_active(profile)
            echo_profile(profile)
            echo_persistence_warning(persisted)
    except VoiceError as exc:
        exit_with_command_error("infer", exc)


@app.command("show")
def show_command(
    companion_id: Annotated[str, typer.Argument(help="Companion identifier.")],
    config_file: ConfigOption = None,
    store_dir: StoreDirOption = None,
    assets_root: AssetsRootOption = None,
) -> None:
    """Restore and print the stored active voice for a companion."""

    try:
        with _open_services(config_file, store_dir, assets_root) as services:
            profile = services.registry.bootstrap(companion_id)
            if profile is None:
                typer.echo(f"No active voice profile for companion `{companion_id}`.")
                return
            echo_profile(profile)
    except VoiceError as exc:
        exit_with_command_error("show", exc)


@app.command("set")
def set_command(
    companion_id: Annotated[str, typer.Argument(help="Companion identifier.")],
    style: Annotated[
        VoiceStyle | None, typer.Option("--style", help="Speaking style.")
    ] = None,
    tone: Annotated[VoiceTone | None, typer.Option("--tone", help="Tonal quality.")] = None,
    speed: Annotated[
        VoiceSpeed | None, typer.Option("--speed", help="Speaking rate.")
    ] = None,
    config_file: ConfigOption = None,
    store_dir: StoreDirOption = None,
    assets_root: AssetsRootOption = None,
) -> None:
    """Edit a companion's voice, generate its asset, and commit it as active."""

    try:
        with _open_services(config_file, store_dir, assets_root) as services:
            try:
                folder = default_asset_folder(
                    services.config.assets_root, companion_id, services.logger
                )
            except ValueError as exc:
                raise _invalid_companion_id(companion_id, exc) from exc
            services.registry.bootstrap(companion_id)
            base = base_profile_for_editing(services.registry, companion_id, folder)
            candidate = build_candidate(base, style=style, tone=tone, speed=speed)
            generator = PassthroughVoiceGenerator(logger=services.logger)
            with ProfileCommitter(
                services.registry, generator, logger=services.logger
            ) as committer:
                result = committer.commit(candidate)
            echo_profile(result.profile)
            echo_persistence_warning(result.persisted)
    except VoiceError as exc:
        exit_with_command_error("set", exc)


@app.command("params")
def params_command(
    companion_id: Annotated[str, typer.Argument(help="Companion identifier.")],
    config_file: ConfigOption = None,
    store_dir: StoreDirOption = None,
    assets_root: AssetsRootOption = None,
) -> None:
    """Print playback rate, pitch, and audio filename for the active voice."""

    try:
        with _open_services(config_file, store_dir, assets_root) as services:
            services.registry.bootstrap(companion_id)
            profile = require_active(services.registry)
            echo_speech_parameters(speech_parameters(profile), audio_filename(profile))
    except VoiceError as exc:
        exit_with_command_error("params", exc)


def main() -> None:
    """Run the companion voice CLI."""

    app()
