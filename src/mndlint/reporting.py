"""Diagnostic sinks and finding renderers."""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Protocol

from mndlint.schemas import AnalysisResult, Finding
from mndlint.syntax.nodes import Position


class Reporter(Protocol):
    """Receives every finding a check produces."""

    def report(self, position: Position, value: str, check: str) -> None: ...


class CollectingReporter:
    """Keeps findings in memory. Safe to share between worker threads."""

    def __init__(self) -> None:
        self._findings: list[Finding] = []
        self._lock = threading.Lock()

    def report(self, position: Position, value: str, check: str) -> None:
        finding = Finding(position=position, value=value, check=check)
        with self._lock:
            self._findings.append(finding)

    @property
    def findings(self) -> list[Finding]:
        with self._lock:
            return sorted(self._findings, key=Finding.sort_key)


class LoggingReporter:
    """Emits each finding as a log record on the ``mndlint.findings`` logger."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._logger = logging.getLogger("mndlint.findings")
        self._level = level

    def report(self, position: Position, value: str, check: str) -> None:
        finding = Finding(position=position, value=value, check=check)
        self._logger.log(self._level, "%s: %s", position, finding.message)


class FanOutReporter:
    """Forwards each finding to several reporters in order."""

    def __init__(self, *reporters: Reporter) -> None:
        self._reporters = reporters

    def report(self, position: Position, value: str, check: str) -> None:
        for reporter in self._reporters:
            reporter.report(position, value, check)


def render_text(findings: list[Finding]) -> str:
    """One ``file:line:col: message`` line per finding."""
    return "\n".join(f"{f.position}: {f.message}" for f in findings)


def render_json(result: AnalysisResult) -> str:
    """Export a run as a JSON envelope."""
    payload: dict[str, Any] = {
        "files_analyzed": result.files_analyzed,
        "finding_count": len(result.findings),
        "findings": [_finding_to_dict(f) for f in result.findings],
        "errors": result.errors,
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _finding_to_dict(finding: Finding) -> dict[str, Any]:
    return {
        "file": finding.position.file,
        "line": finding.position.line,
        "column": finding.position.column,
        "value": finding.value,
        "check": finding.check,
        "message": finding.message,
    }
