"""Magic numbers compared in ``if`` conditions."""

from __future__ import annotations

from mndlint.analysis.checks.base import Check
from mndlint.syntax.nodes import BinaryExpr, IfStmt, Node


class ConditionCheck(Check):
    name = "condition"
    node_filter = (IfStmt,)

    def check(self, node: Node) -> None:
        # Only a bare binary condition; ``if (n > 5)`` is left to "operation".
        if isinstance(node, IfStmt) and isinstance(node.condition, BinaryExpr):
            self.check_binary(node.condition)
