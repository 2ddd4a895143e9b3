"""Telemetry and observability helpers.

This package emits structured events for voice profile lifecycle auditing.
"""

from .logger import EventLogger, default_logger

__all__ = ["EventLogger", "default_logger"]
