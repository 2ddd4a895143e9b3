"""Unit tests for structured event logging."""

from __future__ import annotations

import io
import subprocess
import sys
import textwrap

from companionvoice.telemetry.logger import EventLogger


def test_event_lines_are_deterministic_and_sanitized() -> None:
    buffer = io.StringIO()
    logger = EventLogger(sink=buffer, level="INFO")
    try:
        logger.info("registry", "set", persisted=True, companion_id="a b", empty="")
    finally:
        logger.close()

    assert buffer.getvalue().strip() == (
        "[voice] level=INFO component=registry event=set "
        "companion_id=a_b empty=none persisted=True"
    )


def test_loggers_respect_level_and_do_not_share_sinks() -> None:
    first_buffer = io.StringIO()
    second_buffer = io.StringIO()
    first = EventLogger(sink=first_buffer, level="WARNING")
    second = EventLogger(sink=second_buffer, level="DEBUG")
    try:
        first.debug("store", "saved")
        first.warning("store", "decode_failed")
        second.debug("store", "saved")
    finally:
        first.close()
        second.close()

    assert first_buffer.getvalue().splitlines() == [
        "[voice] level=WARNING component=store event=decode_failed"
    ]
    assert second_buffer.getvalue().splitlines() == [
        "[voice] level=DEBUG component=store event=saved"
    ]


def test_loguru_default_stderr_handler_is_removed() -> None:
    script = textwrap.dedent(
        """
        import io

        from companionvoice.telemetry.logger import EventLogger

        buffer = io.StringIO()
        logger = EventLogger(sink=buffer, level="WARNING")
        logger.debug("store", "saved")
        logger.info("registry", "set", companion_id="a")
        logger.warning("store", "decode_failed")
        logger.close()
        print(buffer.getvalue(), end="")
        """
    )

    result = subprocess.run(
        [sys.executable, "-c", script], capture_output=True, text=True, check=True
    )

    assert result.stderr == ""
    assert result.stdout.splitlines() == [
        "[voice] level=WARNING component=store event=decode_failed"
    ]
