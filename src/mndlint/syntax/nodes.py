"""Closed set of syntax node variants inspected by the checks.

The Go front end lowers every tree-sitter node into one of these
variants. Anything the checks do not look at becomes an ``Opaque``
node that only carries its children, so a walk still reaches the
literals and calls nested inside it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """A source location. Line and column are 1-based; column counts bytes."""

    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class LiteralKind(StrEnum):
    INT = "int"
    FLOAT = "float"
    IMAG = "imag"
    CHAR = "char"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class BasicLit:
    position: Position
    kind: LiteralKind
    value: str


@dataclass(frozen=True, slots=True)
class Ident:
    position: Position
    name: str


@dataclass(frozen=True, slots=True)
class SelectorExpr:
    """``operand.field``, e.g. ``time.Duration`` or ``obj.Method``."""

    position: Position
    operand: Node
    field: str


@dataclass(frozen=True, slots=True)
class CallExpr:
    position: Position
    function: Node
    args: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class BinaryExpr:
    position: Position
    left: Node
    operator: str
    right: Node


@dataclass(frozen=True, slots=True)
class ParenExpr:
    position: Position
    inner: Node


@dataclass(frozen=True, slots=True)
class ChanType:
    """A channel type used as a value, e.g. the first argument of ``make``."""

    position: Position
    text: str


@dataclass(frozen=True, slots=True)
class ConstDecl:
    """A ``const`` declaration; position is that of the keyword."""

    position: Position
    values: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class KeyValueExpr:
    position: Position
    key: Node
    value: Node


@dataclass(frozen=True, slots=True)
class AssignStmt:
    """``=``, ``:=`` and op-assignments such as ``+=``."""

    position: Position
    lhs: tuple[Node, ...]
    operator: str
    rhs: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class CaseClause:
    """A ``case`` of an expression switch. ``values`` is empty for ``default``."""

    position: Position
    values: tuple[Node, ...]
    body: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class IfStmt:
    position: Position
    condition: Node
    body: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class ReturnStmt:
    position: Position
    results: tuple[Node, ...]


@dataclass(frozen=True, slots=True)
class Opaque:
    """Any other construct. ``type`` is the tree-sitter node type."""

    position: Position
    type: str
    children: tuple[Node, ...] = ()


Node = (
    BasicLit
    | Ident
    | SelectorExpr
    | CallExpr
    | BinaryExpr
    | ParenExpr
    | ChanType
    | ConstDecl
    | KeyValueExpr
    | AssignStmt
    | CaseClause
    | IfStmt
    | ReturnStmt
    | Opaque
)


def iter_children(node: Node) -> tuple[Node, ...]:
    """Direct children of ``node`` in source order."""
    match node:
        case BasicLit() | Ident() | ChanType():
            return ()
        case SelectorExpr(operand=operand):
            return (operand,)
        case CallExpr(function=function, args=args):
            return (function, *args)
        case BinaryExpr(left=left, right=right):
            return (left, right)
        case ParenExpr(inner=inner):
            return (inner,)
        case ConstDecl(values=values):
            return values
        case KeyValueExpr(key=key, value=value):
            return (key, value)
        case AssignStmt(lhs=lhs, rhs=rhs):
            return (*lhs, *rhs)
        case CaseClause(values=values, body=body):
            return (*values, *body)
        case IfStmt(condition=condition, body=body):
            return (condition, *body)
        case ReturnStmt(results=results):
            return results
        case Opaque(children=children):
            return children


def walk(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all its descendants in preorder."""
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(iter_children(node)))
