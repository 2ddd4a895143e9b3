"""Key-value backends used by the profile store.

Responsibilities:
- Define the minimal string key-value contract durable storage must offer.
- Provide a filesystem backend and an in-memory backend for tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class KeyValueBackend(Protocol):
    """Protocol for string-keyed, string-valued durable storage."""

    def read(self, key: str) -> str | None:
        """Return the stored value, or `None` when the key is absent."""

    def write(self, key: str, value: str) -> None:
        """Store `value` under `key`, overwriting any previous value."""


class FileKeyValueBackend:
    """Filesystem backend storing one `<key>.json` file per key."""

    def __init__(self, root: Path) -> None:
        """Initialize the backend with a root directory created on first write."""

        self.root = root

    def path_for(self, key: str) -> Path:
        """Return the file path backing `key`."""

        if not key or "/" in key or "\\" in key or key in {".", ".."}:
            raise ValueError(f"Storage key `{key}` is not a valid file name.")
        return self.root / f"{key}.json"

    def read(self, key: str) -> str | None:
        """Read the value for `key`, returning `None` when no file exists."""

        path = self.path_for(key)
        if not path.is_file():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        """Write `value` through a temporary file and swap it into place."""

        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        staging = path.with_suffix(".json.tmp")
        staging.write_text(value, encoding="utf-8")
        staging.replace(path)


class InMemoryKeyValueBackend:
    """Process-local backend with the same contract as the filesystem one."""

    def __init__(self) -> None:
        self.entries: dict[str, str] = {}

    def read(self, key: str) -> str | None:
        return self.entries.get(key)

    def write(self, key: str, value: str) -> None:
        self.entries[key] = value
