"""Configuration model and loaders for companion voice tooling.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `VoiceConfig`: normalized settings for storage, assets, and logging.
- `ConfigLoader`: static construction helpers for `VoiceConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string

_DEFAULT_STORE_DIR = Path(".companionvoice") / "profiles"
_DEFAULT_ASSETS_ROOT = Path(".companionvoice") / "assets"
_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


@dataclass(slots=True)
class VoiceConfig:
    """Runtime configuration for voice profile commands.

    Attributes:
        store_dir: Directory holding persisted active-profile records.
        assets_root: Root under which per-companion asset folders are created.
        log_level: Minimum level for emitted event logs.
    """

    store_dir: Path = _DEFAULT_STORE_DIR
    assets_root: Path = _DEFAULT_ASSETS_ROOT
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.log_level.upper() not in _SUPPORTED_LOG_LEVELS:
            levels = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(f"`log_level` must be one of: {levels}.")
        self.log_level = self.log_level.upper()


class ConfigLoader:
    """Factory methods for creating `VoiceConfig` objects."""

    _SUPPORTED_YAML_KEYS = frozenset({"store_dir", "assets_root", "log_level"})

    @staticmethod
    def from_yaml(path: Path) -> VoiceConfig:
        """Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the payload is not a mapping or has invalid keys/values.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, f"YAML config `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> VoiceConfig:
        """Load configuration from `COMPANIONVOICE_*` environment variables."""

        env_map = env if env is not None else os.environ
        store_dir = normalize_optional_string(env_map.get("COMPANIONVOICE_STORE_DIR"))
        assets_root = normalize_optional_string(env_map.get("COMPANIONVOICE_ASSETS_ROOT"))
        log_level = normalize_optional_string(env_map.get("COMPANIONVOICE_LOG_LEVEL"))

        config = VoiceConfig(
            store_dir=Path(store_dir) if store_dir else _DEFAULT_STORE_DIR,
            assets_root=Path(assets_root) if assets_root else _DEFAULT_ASSETS_ROOT,
            log_level=log_level or _DEFAULT_LOG_LEVEL,
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> VoiceConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        store_dir = normalize_optional_string(payload.get("store_dir"))
        assets_root = normalize_optional_string(payload.get("assets_root"))
        log_level = normalize_optional_string(payload.get("log_level"))

        config = VoiceConfig(
            store_dir=Path(store_dir) if store_dir else _DEFAULT_STORE_DIR,
            assets_root=Path(assets_root) if assets_root else _DEFAULT_ASSETS_ROOT,
            log_level=log_level or _DEFAULT_LOG_LEVEL,
        )
        config.validate()
        return config
