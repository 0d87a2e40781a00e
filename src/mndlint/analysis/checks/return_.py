"""Magic numbers in return statements."""

from __future__ import annotations

from mndlint.analysis.checks.base import Check
from mndlint.syntax.nodes import Node, ReturnStmt


class ReturnCheck(Check):
    name = "return"
    node_filter = (ReturnStmt,)

    def check(self, node: Node) -> None:
        if not isinstance(node, ReturnStmt):
            return
        for result in node.results:
            self.check_value(result)
