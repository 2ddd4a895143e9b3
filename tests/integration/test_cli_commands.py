"""End-to-end CLI tests over a temporary profile store."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from companionvoice.cli import app


@pytest.fixture
def dirs(tmp_path: Path) -> list[str]:
    """Return CLI options pointing storage and assets into `tmp_path`."""

    return [
        "--store-dir",
        str(tmp_path / "profiles"),
        "--assets-root",
        str(tmp_path / "assets"),
    ]


def test_infer_commits_profile_and_show_restores_it(tmp_path: Path, dirs: list[str]) -> None:
    runner = CliRunner()

    inferred = runner.invoke(
        app,
        [
            "infer",
            "companion-a",
            "--jaw",
            "0.8",
            "--eye",
            "0.5",
            "--softness",
            "0.3",
            "--energy",
            "0.9",
            *dirs,
        ],
    )

    assert inferred.exit_code == 0, inferred.output
    assert "Style: energetic" in inferred.output
    assert "Tone: deep" in inferred.output
    assert "Speed: fast" in inferred.output
    assert (tmp_path / "assets" / "Companions" / "companion-a").is_dir()
    assert (tmp_path / "profiles" / "ActiveVoiceProfile_companion-a.json").is_file()

    shown = runner.invoke(app, ["show", "companion-a", *dirs])

    assert shown.exit_code == 0, shown.output
    assert "Companion: companion-a" in shown.output
    assert "Style: energetic" in shown.output


def test_show_reports_missing_profile_without_failing(dirs: list[str]) -> None:
    result = CliRunner().invoke(app, ["show", "nobody", *dirs])

    assert result.exit_code == 0
    assert "No active voice profile for companion `nobody`." in result.output


def test_infer_rejects_out_of_range_features(dirs: list[str]) -> None:
    result = CliRunner().invoke(app, ["infer", "companion-a", "--energy", "1.5", *dirs])

    assert result.exit_code != 0


def test_set_edits_existing_profile_and_keeps_other_fields(dirs: list[str]) -> None:
    runner = CliRunner()
    runner.invoke(app, ["infer", "companion-a", "--softness", "0.9", *dirs])

    result = runner.invoke(app, ["set", "companion-a", "--tone", "husky", *dirs])

    assert result.exit_code == 0, result.output
    assert "Style: gentle" in result.output
    assert "Tone: husky" in result.output
    assert "Speed: slow" in result.output
    shown = runner.invoke(app, ["show", "companion-a", *dirs])
    assert "Tone: husky" in shown.output


def test_set_without_profile_starts_from_default(dirs: list[str]) -> None:
    result = CliRunner().invoke(app, ["set", "companion-new", "--speed", "fast", *dirs])

    assert result.exit_code == 0, result.output
    assert "Style: gentle" in result.output
    assert "Tone: neutral" in result.output
    assert "Speed: fast" in result.output


def test_params_prints_rate_pitch_and_filename(dirs: list[str]) -> None:
    runner = CliRunner()
    runner.invoke(
        app, ["set", "companion-a", "--style", "coach", "--tone", "bright", "--speed", "slow", *dirs]
    )

    result = runner.invoke(app, ["params", "companion-a", *dirs])

    assert result.exit_code == 0, result.output
    assert "Rate: 0.40" in result.output
    assert "Pitch: 1.20" in result.output
    assert "Audio file: coach_bright_slow.m4a" in result.output


def test_params_fails_when_no_active_profile(dirs: list[str]) -> None:
    result = CliRunner().invoke(app, ["params", "nobody", *dirs])

    assert result.exit_code == 1
    assert "params failed (active_profile_missing)" in result.output
    assert "Hint:" in result.output


def test_missing_config_file_is_reported(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        app, ["show", "companion-a", "--config", str(tmp_path / "missing.yml")]
    )

    assert result.exit_code == 1
    assert "show failed (config): Config file not found" in result.output


def test_config_file_supplies_store_and_assets(tmp_path: Path) -> None:
    config_path = tmp_path / "companionvoice.yml"
    config_path.write_text(
        f"store_dir: {tmp_path / 'cfg-profiles'}\nassets_root: {tmp_path / 'cfg-assets'}\n",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["infer", "companion-c", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "cfg-profiles" / "ActiveVoiceProfile_companion-c.json").is_file()
    assert (tmp_path / "cfg-assets" / "Companions" / "companion-c").is_dir()


@pytest.mark.parametrize("command", ["infer", "set"])
def test_path_like_companion_id_is_rejected(
    tmp_path: Path, dirs: list[str], command: str
) -> None:
    result = CliRunner().invoke(app, [command, "../../outside", *dirs])

    assert result.exit_code == 1
    assert f"{command} failed (companion_id)" in result.output
    assert "Hint:" in result.output
    assert not (tmp_path / "outside").exists()
    assert not (tmp_path / "profiles").exists()
