"""Magic number analysis and its driver."""

from mndlint.analysis.analyzer import (
    analyze_file,
    analyze_source,
    run_analysis,
    run_checks,
)
from mndlint.analysis.classifier import is_magic_number
from mndlint.analysis.tracker import ConstantTracker
from mndlint.schemas import AnalysisResult, FileReport, Finding

__all__ = [
    "AnalysisResult",
    "ConstantTracker",
    "FileReport",
    "Finding",
    "analyze_file",
    "analyze_source",
    "is_magic_number",
    "run_analysis",
    "run_checks",
]
