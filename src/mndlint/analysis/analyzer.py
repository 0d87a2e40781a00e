"""Drive the checks over parsed Go sources."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from mndlint.analysis.checks import Check, build_checks
from mndlint.analysis.tracker import ConstantTracker
from mndlint.config import CHECK_NAMES, Settings
from mndlint.policy import IgnorePolicy
from mndlint.reporting import CollectingReporter, FanOutReporter, Reporter
from mndlint.schemas import AnalysisResult, FileReport, Finding
from mndlint.syntax.go_parser import get_language, parse_go
from mndlint.syntax.nodes import Node, walk

logger = logging.getLogger(__name__)


def run_checks(root: Node, checks: list[Check]) -> None:
    """Offer every node under ``root``, in preorder, to each accepting check.

    Checks are consulted in list order, so the declaration-recording
    check must come first for a ``const`` line to be known before the
    calls nested in it are examined.
    """
    for node in walk(root):
        for check in checks:
            if check.accepts(node):
                check.check(node)


def analyze_source(
    source: bytes | str,
    path: str = "<source>",
    policy: IgnorePolicy | None = None,
    *,
    tracker: ConstantTracker | None = None,
    checks: Iterable[str] = CHECK_NAMES,
) -> list[Finding]:
    """Analyse a single Go source text and return its findings."""
    reporter = CollectingReporter()
    built = build_checks(
        checks,
        policy if policy is not None else IgnorePolicy(),
        reporter,
        tracker if tracker is not None else ConstantTracker(),
    )
    run_checks(parse_go(source, path), built)
    return reporter.findings


def analyze_file(
    path: Path,
    policy: IgnorePolicy,
    tracker: ConstantTracker,
    checks: Iterable[str],
    reporter: Reporter | None = None,
) -> FileReport:
    """Read, parse and check one file. ``reporter`` also receives each finding."""
    collector = CollectingReporter()
    sink: Reporter = (
        FanOutReporter(collector, reporter) if reporter else collector
    )
    built = build_checks(checks, policy, sink, tracker)
    source = path.read_bytes()
    run_checks(parse_go(source, str(path)), built)
    findings = collector.findings
    logger.debug("%s: %d finding(s)", path, len(findings))
    return FileReport(file_path=str(path), findings=findings)


async def run_analysis(
    paths: list[Path],
    settings: Settings | None = None,
    *,
    reporter: Reporter | None = None,
) -> AnalysisResult:
    """Analyse ``paths`` concurrently with one shared constant tracker.

    Files are processed in worker threads, at most
    ``settings.analysis_max_concurrency`` at a time. A file that cannot
    be read or analysed is logged and recorded in the result; the rest
    still complete. A missing Go grammar is fatal and raised before any
    work starts.
    """
    if settings is None:
        settings = Settings()
    policy = IgnorePolicy.from_settings(settings)
    tracker = ConstantTracker()
    checks = settings.enabled_checks
    get_language("go")

    semaphore = asyncio.Semaphore(settings.analysis_max_concurrency)

    async def _one(path: Path) -> FileReport:
        async with semaphore:
            try:
                return await asyncio.to_thread(
                    analyze_file, path, policy, tracker, checks, reporter
                )
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Analysis failed for %s", path, exc_info=True
                )
                return FileReport(
                    file_path=str(path),
                    error=str(exc) or type(exc).__name__,
                )

    reports = await asyncio.gather(*(_one(p) for p in paths))
    result = AnalysisResult(files=list(reports))
    logger.info(
        "Analysed %d file(s): %d finding(s), %d error(s)",
        result.files_analyzed,
        len(result.findings),
        len(result.errors),
    )
    return result
