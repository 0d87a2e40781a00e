"""Pydantic models for analysis output."""

from pydantic import BaseModel, ConfigDict, Field

from mndlint.config import REPORT_MESSAGE
from mndlint.syntax.nodes import Position


class Finding(BaseModel):
    """A magic number reported by one check."""

    model_config = ConfigDict(frozen=True)

    position: Position
    value: str
    check: str  # argument, assign, case, condition, operation, return

    @property
    def message(self) -> str:
        return REPORT_MESSAGE.format(value=self.value, check=self.check)

    def sort_key(self) -> tuple[str, int, int, str]:
        return (
            self.position.file,
            self.position.line,
            self.position.column,
            self.check,
        )


class FileReport(BaseModel):
    """Findings for a single source file."""

    file_path: str
    findings: list[Finding] = Field(default_factory=lambda: list[Finding]())
    error: str | None = None


class AnalysisResult(BaseModel):
    """Combined output of one analysis run."""

    files: list[FileReport] = Field(
        default_factory=lambda: list[FileReport]()
    )

    @property
    def findings(self) -> list[Finding]:
        collected = [f for report in self.files for f in report.findings]
        return sorted(collected, key=Finding.sort_key)

    @property
    def errors(self) -> dict[str, str]:
        return {r.file_path: r.error for r in self.files if r.error}

    @property
    def files_analyzed(self) -> int:
        return sum(1 for r in self.files if r.error is None)
