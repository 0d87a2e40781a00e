"""Check registry."""

from __future__ import annotations

from collections.abc import Iterable

from mndlint.analysis.checks.argument import ArgumentCheck
from mndlint.analysis.checks.assign import AssignCheck
from mndlint.analysis.checks.base import Check
from mndlint.analysis.checks.case import CaseCheck
from mndlint.analysis.checks.condition import ConditionCheck
from mndlint.analysis.checks.operation import OperationCheck
from mndlint.analysis.checks.return_ import ReturnCheck
from mndlint.analysis.tracker import ConstantTracker
from mndlint.config import CHECK_NAMES
from mndlint.errors import UnknownCheckError
from mndlint.policy import IgnorePolicy
from mndlint.reporting import Reporter

CHECKS: dict[str, type[Check]] = {
    cls.name: cls
    for cls in (
        ArgumentCheck,
        CaseCheck,
        ConditionCheck,
        OperationCheck,
        ReturnCheck,
        AssignCheck,
    )
}


def build_checks(
    names: Iterable[str],
    policy: IgnorePolicy,
    reporter: Reporter,
    tracker: ConstantTracker,
) -> list[Check]:
    """Instantiate the named checks in dispatch order.

    Order follows :data:`CHECK_NAMES` regardless of the order of
    ``names``, so ``argument`` always sees a node before the others.
    """
    wanted = set(names)
    for name in wanted:
        if name not in CHECKS:
            raise UnknownCheckError(name, CHECK_NAMES)
    return [
        cls(policy, reporter, tracker)
        for name, cls in CHECKS.items()
        if name in wanted
    ]


__all__ = [
    "CHECKS",
    "ArgumentCheck",
    "AssignCheck",
    "CaseCheck",
    "Check",
    "ConditionCheck",
    "OperationCheck",
    "ReturnCheck",
    "build_checks",
]
