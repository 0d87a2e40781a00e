"""Walk paths and collect Go source files."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pathspec

from mndlint.config import EXTENSION_MAP, Settings
from mndlint.ingestion import is_binary
from mndlint.policy import IgnorePolicy

logger = logging.getLogger(__name__)


def discover_sources(
    paths: list[Path],
    settings: Settings | object | None = None,
) -> list[Path]:
    """Return every Go file under ``paths``, sorted and de-duplicated.

    * Files given explicitly are kept if they pass the same file
      filters as walked ones.
    * Directories are walked, skipping hidden directories, directories
      listed in ``settings.skip_directories`` and anything matched by
      the directory's ``.gitignore``.
    * Binary files and files matching ``settings.ignored_files`` are
      skipped.
    """
    cfg = settings if isinstance(settings, Settings) else Settings()
    walker = SourceWalker(
        IgnorePolicy.from_settings(cfg), frozenset(cfg.skip_directories)
    )

    found: set[Path] = set()
    for path in paths:
        if path.is_dir():
            found.update(walker.walk(path))
        elif path.is_file():
            if walker.wants_file(path):
                found.add(path)
        else:
            logger.warning("Path does not exist: %s", path)
    return sorted(found)


class SourceWalker:
    """Yields the Go sources under a directory tree.

    Each directory is entered at most once, by its resolved path, and
    symlinks resolving outside the walked root are never followed.
    """

    def __init__(
        self, policy: IgnorePolicy, skip_directories: frozenset[str]
    ) -> None:
        self._policy = policy
        self._skip_directories = skip_directories

    def wants_file(self, path: Path) -> bool:
        if EXTENSION_MAP.get(path.suffix.lower()) != "go":
            return False
        if self._policy.is_ignored_file(path.as_posix()):
            logger.debug("Ignored by pattern: %s", path)
            return False
        if is_binary(path):
            logger.debug("Skipping binary file: %s", path)
            return False
        return True

    def wants_directory(self, path: Path) -> bool:
        return not (
            path.name.startswith(".") or path.name in self._skip_directories
        )

    def walk(self, root: Path) -> Iterator[Path]:
        ignored = _gitignore(root)
        resolved_root = root.resolve()
        visited: set[Path] = set()
        pending = [root]

        while pending:
            directory = pending.pop()
            resolved = directory.resolve()
            if resolved in visited:
                continue
            visited.add(resolved)

            for entry in directory.iterdir():
                if entry.is_symlink() and not entry.resolve().is_relative_to(
                    resolved_root
                ):
                    logger.debug("Symlink leaves %s: %s", root, entry)
                    continue
                rel = entry.relative_to(root).as_posix()
                if entry.is_dir():
                    if self.wants_directory(entry) and not ignored.match_file(
                        rel + "/"
                    ):
                        pending.append(entry)
                elif (
                    entry.is_file()
                    and not ignored.match_file(rel)
                    and self.wants_file(entry)
                ):
                    yield entry


def _gitignore(root: Path) -> pathspec.GitIgnoreSpec:
    """Patterns from ``root/.gitignore``; none if it is absent or unreadable."""
    try:
        lines = (root / ".gitignore").read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        lines = []
    return pathspec.GitIgnoreSpec.from_lines(lines)
