"""Magic numbers used as switch case values."""

from __future__ import annotations

from mndlint.analysis.checks.base import Check
from mndlint.syntax.nodes import CaseClause, Node


class CaseCheck(Check):
    name = "case"
    node_filter = (CaseClause,)

    def check(self, node: Node) -> None:
        if not isinstance(node, CaseClause):
            return
        for value in node.values:
            self.check_value(value)
