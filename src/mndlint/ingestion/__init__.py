"""Source discovery: find the Go files to analyse."""

from pathlib import Path

from mndlint.config import BINARY_DETECTION_BUFFER

__all__ = [
    "discover_sources",
    "is_binary",
]


def is_binary(path: Path) -> bool:
    """Whether a NUL byte occurs near the start of ``path``.

    Unreadable files count as binary so the walk never hands them on.
    """
    try:
        with path.open("rb") as stream:
            head = stream.read(BINARY_DETECTION_BUFFER)
    except OSError:
        return True
    return b"\x00" in head


def discover_sources(
    paths: list[Path], settings: object | None = None
) -> list[Path]:
    """Expand files and directories into the Go sources to analyse."""
    from mndlint.ingestion.discovery import discover_sources as _impl

    return _impl(paths, settings)
