"""Singleton logging configuration.

setup_logging() configures the root logger once per process. Later
calls are no-ops, so library callers and the CLI can both call it.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

_configured = False


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger. Idempotent."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def set_level(level: str) -> None:
    """Adjust the package logger level after setup (e.g. ``--verbose``)."""
    logging.getLogger("mndlint").setLevel(getattr(logging, level.upper()))
