"""
Shared utilities: log sanitization and tracing helpers.
"""

from src.common import logging, telemetry  # noqa: F401
