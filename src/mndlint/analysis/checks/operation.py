"""Magic numbers inside nested or parenthesised arithmetic."""

from __future__ import annotations

from mndlint.analysis.checks.base import Check
from mndlint.syntax.nodes import AssignStmt, BinaryExpr, Node, ParenExpr


class OperationCheck(Check):
    """Covers what "assign" does not reach.

    For ``x = a*2 + b`` the literal sits in a binary expression that is
    itself an operand, so it is reported here. A parenthesised binary
    expression anywhere is inspected as well.
    """

    name = "operation"
    node_filter = (AssignStmt, ParenExpr)

    def check(self, node: Node) -> None:
        match node:
            case AssignStmt():
                for expr in node.rhs:
                    if not isinstance(expr, BinaryExpr):
                        continue
                    if isinstance(expr.left, BinaryExpr):
                        self.check_binary(expr.left)
                    if isinstance(expr.right, BinaryExpr):
                        self.check_binary(expr.right)
            case ParenExpr(inner=BinaryExpr() as inner):
                self.check_binary(inner)
            case _:
                pass
