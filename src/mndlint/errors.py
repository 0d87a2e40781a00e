"""Exception hierarchy.

Classification itself never raises; these cover the plumbing around it
(grammar loading, check selection).
"""

from __future__ import annotations


class MndlintError(Exception):
    """Base class for all mndlint errors."""


class GrammarUnavailableError(MndlintError):
    """The tree-sitter grammar for a language could not be loaded."""

    def __init__(self, language: str, module_name: str | None) -> None:
        self.language = language
        self.module_name = module_name
        detail = (
            f"install '{module_name.replace('_', '-')}'"
            if module_name
            else "no grammar is registered"
        )
        super().__init__(
            f"tree-sitter grammar for {language!r} unavailable: {detail}"
        )


class UnknownCheckError(MndlintError):
    """A check name that is not registered was requested."""

    def __init__(self, name: str, valid: tuple[str, ...]) -> None:
        self.name = name
        self.valid = valid
        super().__init__(
            f"unknown check {name!r}; valid: {', '.join(valid)}"
        )
