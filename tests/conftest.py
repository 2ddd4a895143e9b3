"""Shared pytest fixtures for the companion voice test suite."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterator

import pytest

from companionvoice.io.backends import InMemoryKeyValueBackend
from companionvoice.io.repository import ProfileRepository
from companionvoice.io.storage import ProfileStore
from companionvoice.models.datatypes import VoiceProfile, VoiceSpeed, VoiceStyle, VoiceTone
from companionvoice.registry import ActiveProfileRegistry
from companionvoice.telemetry.logger import EventLogger


class FailingBackend:
    """Backend whose writes always fail, simulating unavailable storage."""

    def __init__(self) -> None:
        self.entries: dict[str, str] = {}

    def read(self, key: str) -> str | None:
        return self.entries.get(key)

    def write(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")


class BrokenBackend:
    """Backend whose reads and writes fail with a non-I/O error."""

    def read(self, key: str) -> str | None:
        raise RuntimeError("backend driver crashed")

    def write(self, key: str, value: str) -> None:
        raise RuntimeError("backend driver crashed")


@pytest.fixture
def log_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def event_logger(log_buffer: io.StringIO) -> Iterator[EventLogger]:
    """Provide a DEBUG-level logger writing into `log_buffer`."""

    logger = EventLogger(sink=log_buffer, level="DEBUG")
    yield logger
    logger.close()


@pytest.fixture
def backend() -> InMemoryKeyValueBackend:
    return InMemoryKeyValueBackend()


@pytest.fixture
def store(backend: InMemoryKeyValueBackend, event_logger: EventLogger) -> ProfileStore:
    return ProfileStore(backend, logger=event_logger)


@pytest.fixture
def registry(store: ProfileStore, event_logger: EventLogger) -> ActiveProfileRegistry:
    return ActiveProfileRegistry(ProfileRepository(store), logger=event_logger)


@pytest.fixture
def make_profile(tmp_path: Path):
    """Build profiles with readable defaults for one companion."""

    def _make(
        companion_id: str = "companion-a",
        style: VoiceStyle = VoiceStyle.CALM,
        tone: VoiceTone = VoiceTone.NEUTRAL,
        speed: VoiceSpeed = VoiceSpeed.NORMAL,
    ) -> VoiceProfile:
        return VoiceProfile(
            companion_id=companion_id,
            style=style,
            tone=tone,
            speed=speed,
            asset_folder_path=tmp_path / "Companions" / companion_id,
        )

    return _make


@pytest.fixture
def failing_backend() -> FailingBackend:
    return FailingBackend()


@pytest.fixture
def broken_backend() -> BrokenBackend:
    return BrokenBackend()
