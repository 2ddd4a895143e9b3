"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from companionvoice.cli_rendering import echo_profile, exit_with_command_error
from companionvoice.errors import (
    ActiveProfileMissingError,
    GenerationError,
    InferenceError,
    StorageError,
    category_message,
)
from companionvoice.models.datatypes import VoiceSpeed, VoiceStyle, VoiceTone


def test_exit_with_command_error_renders_voice_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    error = ActiveProfileMissingError(hint="Run `companionvoice infer` first.")

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("params", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "params failed (active_profile_missing): No active voice profile was found." in (
        captured.err
    )
    assert "Hint: Run `companionvoice infer` first." in captured.err


def test_exit_with_command_error_renders_generic_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(typer.Exit):
        exit_with_command_error("show", RuntimeError("unexpected"))

    assert "show failed: unexpected" in capsys.readouterr().err


def test_echo_profile_prints_stable_rows(capsys: pytest.CaptureFixture[str], make_profile) -> None:
    echo_profile(make_profile(style=VoiceStyle.GENTLE, tone=VoiceTone.SOFT, speed=VoiceSpeed.SLOW))

    lines = capsys.readouterr().out.splitlines()
    assert lines[:4] == ["Companion: companion-a", "Style: gentle", "Tone: soft", "Speed: slow"]
    assert lines[4].startswith("Asset folder: ")


def test_category_messages_cover_every_error_kind() -> None:
    assert category_message("inference") == "Failed to infer the initial voice profile."
    assert category_message("generation") == "Failed to generate the voice audio asset."
    assert category_message("storage") == "Failed to save the voice settings."
    assert category_message("unknown") == "Voice operation failed."


def test_error_subclasses_carry_their_category() -> None:
    assert InferenceError().category == "inference"
    assert GenerationError("boom").detail == "boom"
    assert StorageError(hint="check disk").hint == "check disk"
    assert str(StorageError()) == "Failed to save the voice settings."
