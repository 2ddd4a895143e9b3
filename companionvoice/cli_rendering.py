"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for voice profiles,
speech parameters, and command diagnostics.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import VoiceError
from .models.datatypes import VoiceProfile
from .tts.mapping import SpeechParameters


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, VoiceError):
        typer.secho(
            f"{command_name} failed ({exc.category}): {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_profile(profile: VoiceProfile) -> None:
    """Print one voice profile as stable `Label: value` rows."""

    typer.echo(f"Companion: {profile.companion_id}")
    typer.echo(f"Style: {profile.style.value}")
    typer.echo(f"Tone: {profile.tone.value}")
    typer.echo(f"Speed: {profile.speed.value}")
    typer.echo(f"Asset folder: {profile.asset_folder_path}")


def echo_persistence_warning(persisted: bool) -> None:
    """Warn when the active profile changed in memory but was not stored."""

    if not persisted:
        typer.secho(
            "Warning: voice profile is active but could not be saved.",
            fg=typer.colors.YELLOW,
            err=True,
        )


def echo_speech_parameters(parameters: SpeechParameters, filename: str) -> None:
    """Print playback parameters and the rendered asset filename."""

    typer.echo(f"Rate: {parameters.rate:.2f}")
    typer.echo(f"Pitch: {parameters.pitch:.2f}")
    typer.echo(f"Audio file: {filename}")
