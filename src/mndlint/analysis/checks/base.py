"""Base class and shared helpers for the context checks."""

from __future__ import annotations

from typing import ClassVar

from mndlint.analysis.classifier import is_magic_number
from mndlint.analysis.tracker import ConstantTracker
from mndlint.policy import IgnorePolicy
from mndlint.reporting import Reporter
from mndlint.syntax.nodes import BasicLit, BinaryExpr, Node


class Check:
    """One syntactic context in which magic numbers are searched for.

    Subclasses set ``name`` and ``node_filter`` and implement
    :meth:`check`. Only direct literals and the direct operands of a
    single binary expression are inspected; deeper shapes are left to
    other checks or not reported at all.
    """

    name: ClassVar[str]
    node_filter: ClassVar[tuple[type, ...]]

    def __init__(
        self,
        policy: IgnorePolicy,
        reporter: Reporter,
        tracker: ConstantTracker,
    ) -> None:
        self.policy = policy
        self.reporter = reporter
        self.tracker = tracker

    def accepts(self, node: Node) -> bool:
        return isinstance(node, self.node_filter)

    def check(self, node: Node) -> None:
        raise NotImplementedError

    # -- helpers -----------------------------------------------------------

    def is_magic(self, literal: BasicLit) -> bool:
        return is_magic_number(literal, self.policy)

    def report(self, literal: BasicLit) -> None:
        self.reporter.report(literal.position, literal.value, self.name)

    def check_literal(self, node: Node) -> None:
        """Report ``node`` if it is a magic literal."""
        if isinstance(node, BasicLit) and self.is_magic(node):
            self.report(node)

    def check_binary(self, expr: BinaryExpr) -> None:
        """Report each direct operand of ``expr`` that is a magic literal."""
        self.check_literal(expr.left)
        self.check_literal(expr.right)

    def check_value(self, node: Node) -> None:
        """Literal → report if magic; binary expression → its operands."""
        match node:
            case BasicLit():
                self.check_literal(node)
            case BinaryExpr():
                self.check_binary(node)
            case _:
                pass
