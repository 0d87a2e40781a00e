"""Shared test fixtures: Go snippets and the fixture repository."""

from pathlib import Path

import pytest

from mndlint.analysis import analyze_source
from mndlint.schemas import Finding
from mndlint.policy import IgnorePolicy

FIXTURE_REPO = Path(__file__).resolve().parent / "fixtures" / "go_repo"

# Body lines of a snippet wrapped by go_func() start on this line.
BODY_FIRST_LINE = 4


def go_func(body: str) -> str:
    """Wrap statement lines in a package and function declaration."""
    return "package p\n\nfunc f() {\n" + body.strip("\n") + "\n}\n"


def triples(findings: list[Finding]) -> list[tuple[int, str, str]]:
    """(line, value, check) for each finding, in report order."""
    return [(f.position.line, f.value, f.check) for f in findings]


@pytest.fixture
def policy() -> IgnorePolicy:
    return IgnorePolicy()


@pytest.fixture
def analyze(policy: IgnorePolicy):
    """Analyse a function body with the default policy and all checks."""

    def _analyze(body: str, **kwargs: object) -> list[Finding]:
        return analyze_source(go_func(body), "snippet.go", policy, **kwargs)

    return _analyze


@pytest.fixture
def fixture_repo() -> Path:
    return FIXTURE_REPO
