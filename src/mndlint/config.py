"""Environment-based configuration and application constants."""

from __future__ import annotations

import logging
import re
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

logger = logging.getLogger(__name__)

# Check names, in dispatch order. "argument" records constant
# declarations, so it runs ahead of the others on every node.
CHECK_NAMES: tuple[str, ...] = (
    "argument",
    "case",
    "condition",
    "operation",
    "return",
    "assign",
)

DEFAULT_IGNORED_NUMBERS: list[str] = ["0", "0.0", "1", "1.0"]

DEFAULT_IGNORED_FUNCTIONS: list[str] = [
    r"time\.Date",
    r"strconv\.FormatInt",
    r"strconv\.FormatUint",
    r"strconv\.FormatFloat",
    r"strconv\.ParseInt",
    r"strconv\.ParseUint",
    r"strconv\.ParseFloat",
]

DEFAULT_IGNORED_FILES: list[str] = [r"_test\.go$"]

# File extension → language name mapping
EXTENSION_MAP: dict[str, str] = {
    ".go": "go",
}

# Grammar module name → import path for tree-sitter grammars
GRAMMAR_MODULES: dict[str, str] = {
    "go": "tree_sitter_go",
}

# Bytes read when sniffing for binary content
BINARY_DETECTION_BUFFER = 8192

REPORT_MESSAGE = "Magic number: {value}, in <{check}> detected"


def _split_csv(v: Any) -> Any:
    if isinstance(v, str):
        return [s.strip() for s in v.split(",") if s.strip()]
    return v


def _warn_duplicates(field: str, values: list[str]) -> None:
    seen: set[str] = set()
    dupes: list[str] = []
    for value in values:
        if value in seen:
            dupes.append(value)
        seen.add(value)
    if dupes:
        logger.warning(
            "Duplicate entries in %s: %s",
            field.upper(),
            ", ".join(dupes),
        )


class Settings(BaseSettings):
    """Reads from .env file and MNDLINT_* environment variables."""

    # Enabled checks (default: all)
    checks: Annotated[list[str], NoDecode] = list(CHECK_NAMES)

    # Ignore rules (regular expressions)
    ignored_numbers: Annotated[list[str], NoDecode] = list(
        DEFAULT_IGNORED_NUMBERS
    )
    ignored_functions: Annotated[list[str], NoDecode] = list(
        DEFAULT_IGNORED_FUNCTIONS
    )
    ignored_files: Annotated[list[str], NoDecode] = list(
        DEFAULT_IGNORED_FILES
    )

    # Discovery
    skip_directories: Annotated[list[str], NoDecode] = [
        "vendor",
        "testdata",
        "node_modules",
        ".git",
        ".svn",
        ".hg",
    ]

    # Analysis
    analysis_max_concurrency: int = 4

    # Logging
    log_level: str = "WARNING"

    @field_validator(
        "checks",
        "ignored_numbers",
        "ignored_functions",
        "ignored_files",
        "skip_directories",
        mode="before",
    )
    @classmethod
    def _parse_list(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        return _split_csv(v)

    @field_validator("checks")
    @classmethod
    def _validate_checks(cls, v: list[str]) -> list[str]:
        unknown = [c for c in v if c not in CHECK_NAMES]
        if unknown:
            raise ValueError(
                f"unknown check(s): {', '.join(unknown)}; "
                f"valid: {', '.join(CHECK_NAMES)}"
            )
        _warn_duplicates("checks", v)
        return v

    @field_validator("ignored_numbers", "ignored_functions", "ignored_files")
    @classmethod
    def _validate_patterns(cls, v: list[str]) -> list[str]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(
                    f"invalid regular expression {pattern!r}: {exc}"
                ) from exc
        return v

    @field_validator("analysis_max_concurrency")
    @classmethod
    def _validate_concurrency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("analysis_max_concurrency must be >= 1")
        return v

    @property
    def enabled_checks(self) -> list[str]:
        """Enabled check names in dispatch order, without duplicates."""
        return [name for name in CHECK_NAMES if name in self.checks]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MNDLINT_",
        "extra": "ignore",
    }
