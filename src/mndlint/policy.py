"""Ignore policy: which literal values, call targets and files to skip."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from mndlint.config import (
    DEFAULT_IGNORED_FILES,
    DEFAULT_IGNORED_FUNCTIONS,
    DEFAULT_IGNORED_NUMBERS,
    Settings,
)


def _compile(patterns: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p) for p in patterns)


@dataclass(frozen=True)
class IgnorePolicy:
    """Immutable allow-list, compiled once before a run and read by every check.

    Number patterns must match the whole literal text (``"1"`` does not
    ignore ``"10"``). Function and file patterns match anywhere in the
    qualified name or path, so ``time\\.Date`` also covers
    ``time.DateTime``-style prefixes unless anchored.
    """

    ignored_numbers: tuple[re.Pattern[str], ...] = field(
        default_factory=lambda: _compile(DEFAULT_IGNORED_NUMBERS)
    )
    ignored_functions: tuple[re.Pattern[str], ...] = field(
        default_factory=lambda: _compile(DEFAULT_IGNORED_FUNCTIONS)
    )
    ignored_files: tuple[re.Pattern[str], ...] = field(
        default_factory=lambda: _compile(DEFAULT_IGNORED_FILES)
    )

    @classmethod
    def from_patterns(
        cls,
        numbers: Iterable[str] = (),
        functions: Iterable[str] = (),
        files: Iterable[str] = (),
    ) -> IgnorePolicy:
        return cls(_compile(numbers), _compile(functions), _compile(files))

    @classmethod
    def from_settings(cls, settings: Settings) -> IgnorePolicy:
        return cls.from_patterns(
            settings.ignored_numbers,
            settings.ignored_functions,
            settings.ignored_files,
        )

    def is_ignored_number(self, text: str) -> bool:
        return any(p.fullmatch(text) for p in self.ignored_numbers)

    def is_ignored_function(self, qualified_name: str) -> bool:
        return any(p.search(qualified_name) for p in self.ignored_functions)

    def is_ignored_file(self, path: str) -> bool:
        return any(p.search(path) for p in self.ignored_files)
