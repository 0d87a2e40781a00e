"""Magic numbers on the right-hand side of assignments and composite-literal fields."""

from __future__ import annotations

from mndlint.analysis.checks.base import Check
from mndlint.syntax.nodes import AssignStmt, KeyValueExpr, Node


class AssignCheck(Check):
    name = "assign"
    node_filter = (KeyValueExpr, AssignStmt)

    def check(self, node: Node) -> None:
        match node:
            case KeyValueExpr():
                self.check_value(node.value)
            case AssignStmt():
                for expr in node.rhs:
                    self.check_value(expr)
            case _:
                pass
