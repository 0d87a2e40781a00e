"""Magic numbers passed as call arguments."""

from __future__ import annotations

from mndlint.analysis.checks.base import Check
from mndlint.syntax.nodes import (
    BasicLit,
    BinaryExpr,
    CallExpr,
    ChanType,
    ConstDecl,
    Ident,
    Node,
    SelectorExpr,
)


class ArgumentCheck(Check):
    """Also records ``const`` declaration lines in the shared tracker.

    A call on a ``const`` line is skipped entirely, which keeps
    ``const Timeout = time.Duration(5)`` quiet. A magic literal is
    reported as the first argument, or later only when it directly
    follows a channel type (``make(chan int, 5)``).
    """

    name = "argument"
    node_filter = (ConstDecl, CallExpr)

    def check(self, node: Node) -> None:
        match node:
            case CallExpr():
                self._check_call(node)
            case ConstDecl():
                self.tracker.record_declaration(node.position)
            case _:
                pass

    def _check_call(self, call: CallExpr) -> None:
        if self.tracker.is_declaration_line(call.position):
            return

        qualified = qualified_name(call.function)
        if qualified is not None and self.policy.is_ignored_function(
            qualified
        ):
            return

        for i, arg in enumerate(call.args):
            match arg:
                case BasicLit():
                    if not self.is_magic(arg):
                        continue
                    if i == 0:
                        self.report(arg)
                    elif isinstance(call.args[i - 1], ChanType):
                        if self.is_magic(arg):
                            self.report(arg)
                case BinaryExpr():
                    self.check_binary(arg)
                case _:
                    pass


def qualified_name(function: Node) -> str | None:
    """``pkg.Func`` for a ``<identifier>.<name>`` callee, else None."""
    if isinstance(function, SelectorExpr) and isinstance(
        function.operand, Ident
    ):
        return f"{function.operand.name}.{function.field}"
    return None
