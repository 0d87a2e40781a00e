"""Parse Go source with tree-sitter and lower it into the node model."""

from __future__ import annotations

import importlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial

import tree_sitter

from mndlint.config import GRAMMAR_MODULES
from mndlint.errors import GrammarUnavailableError
from mndlint.syntax.nodes import (
    AssignStmt,
    BasicLit,
    BinaryExpr,
    CallExpr,
    CaseClause,
    ChanType,
    ConstDecl,
    Ident,
    IfStmt,
    KeyValueExpr,
    LiteralKind,
    Node,
    Opaque,
    ParenExpr,
    Position,
    ReturnStmt,
    SelectorExpr,
)

logger = logging.getLogger(__name__)

_LITERAL_KINDS: dict[str, LiteralKind] = {
    "int_literal": LiteralKind.INT,
    "float_literal": LiteralKind.FLOAT,
    "imaginary_literal": LiteralKind.IMAG,
    "rune_literal": LiteralKind.CHAR,
    "interpreted_string_literal": LiteralKind.STRING,
    "raw_string_literal": LiteralKind.STRING,
}

# Node types that never contribute to analysis
_SKIPPED_TYPES = frozenset({"comment"})


def parse_go(source: bytes | str, file: str) -> Node:
    """Parse Go ``source`` and return the lowered ``source_file`` node.

    Syntax errors do not raise: tree-sitter recovers and the ERROR
    nodes it produces are lowered to ``Opaque`` like any other
    unrecognised construct.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")
    tree = get_parser("go").parse(source)
    if tree.root_node.has_error:
        logger.debug("Syntax errors in %s; analysing recovered tree", file)
    return _Lowering(file).lower(tree.root_node)


# Children still to lower, and how to assemble the node once they are.
_Plan = tuple[
    list[tree_sitter.Node | None], Callable[[list[Node]], Node]
]


@dataclass(slots=True)
class _Frame:
    children: list[tree_sitter.Node | None]
    build: Callable[[list[Node]], Node]
    position: Position
    lowered: list[Node] = field(default_factory=list)


class _Lowering:
    """Converts tree-sitter nodes of one file into node-model variants.

    Lowering is a postorder walk over an explicit stack: each node is
    planned into the children it needs plus a builder, and built once
    all of those children have been lowered. Expression depth is
    therefore bounded by memory, not by the interpreter's recursion
    limit.
    """

    def __init__(self, file: str) -> None:
        self._file = file
        self._planners: dict[str, Callable[[tree_sitter.Node], _Plan]] = {
            "identifier": self._ident,
            "selector_expression": self._selector,
            "call_expression": self._call,
            "binary_expression": self._binary,
            "parenthesized_expression": self._paren,
            "channel_type": self._chan_type,
            "const_declaration": self._const_decl,
            "keyed_element": self._keyed_element,
            "assignment_statement": self._assignment,
            "short_var_declaration": self._assignment,
            "expression_case": self._case,
            "default_case": self._case,
            "if_statement": self._if,
            "return_statement": self._return,
        }

    def lower(self, root: tree_sitter.Node) -> Node:
        stack = [self._frame(root)]
        while True:
            frame = stack[-1]
            if len(frame.lowered) < len(frame.children):
                child = frame.children[len(frame.lowered)]
                if child is None:
                    # A field tree-sitter could not recover
                    frame.lowered.append(Opaque(frame.position, "missing"))
                else:
                    stack.append(self._frame(child))
                continue

            stack.pop()
            built = frame.build(frame.lowered)
            if not stack:
                return built
            stack[-1].lowered.append(built)

    def _frame(self, node: tree_sitter.Node) -> _Frame:
        kind = _LITERAL_KINDS.get(node.type)
        if kind is not None:
            planner = partial(self._literal, kind=kind)
        else:
            planner = self._planners.get(node.type, self._opaque)
        children, build = planner(node)
        return _Frame(children, build, self._pos(node))

    def _pos(self, node: tree_sitter.Node) -> Position:
        row, column = node.start_point
        return Position(self._file, row + 1, column + 1)

    # -- planners ----------------------------------------------------------

    def _literal(self, node: tree_sitter.Node, kind: LiteralKind) -> _Plan:
        lit = BasicLit(self._pos(node), kind, _text(node))
        return [], lambda _: lit

    def _opaque(self, node: tree_sitter.Node) -> _Plan:
        pos, node_type = self._pos(node), node.type
        return _named(node), lambda r: Opaque(pos, node_type, tuple(r))

    def _ident(self, node: tree_sitter.Node) -> _Plan:
        ident = Ident(self._pos(node), _text(node))
        return [], lambda _: ident

    def _selector(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        name = _text(node.child_by_field_name("field"))
        return (
            [node.child_by_field_name("operand")],
            lambda r: SelectorExpr(pos, r[0], name),
        )

    def _call(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        return (
            [
                node.child_by_field_name("function"),
                *_named(node.child_by_field_name("arguments")),
            ],
            lambda r: CallExpr(pos, r[0], tuple(r[1:])),
        )

    def _binary(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        operator = _text(node.child_by_field_name("operator"))
        return (
            [node.child_by_field_name("left"), node.child_by_field_name("right")],
            lambda r: BinaryExpr(pos, r[0], operator, r[1]),
        )

    def _paren(self, node: tree_sitter.Node) -> _Plan:
        inner = _named(node)
        if len(inner) != 1:
            return self._opaque(node)
        pos = self._pos(node)
        return inner, lambda r: ParenExpr(pos, r[0])

    def _chan_type(self, node: tree_sitter.Node) -> _Plan:
        chan = ChanType(self._pos(node), _text(node))
        return [], lambda _: chan

    def _const_decl(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        values = [
            expr
            for spec in node.named_children
            if spec.type == "const_spec"
            for expr in _expressions(spec.child_by_field_name("value"))
        ]
        return values, lambda r: ConstDecl(pos, tuple(r))

    def _keyed_element(self, node: tree_sitter.Node) -> _Plan:
        parts = [_unwrap_literal_element(child) for child in _named(node)]
        if len(parts) != 2:
            return self._opaque(node)
        pos = self._pos(node)
        return parts, lambda r: KeyValueExpr(pos, r[0], r[1])

    def _assignment(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        operator = node.child_by_field_name("operator")
        if operator is not None:
            op_text = _text(operator)
        elif node.type == "short_var_declaration":
            op_text = ":="
        else:
            op_text = "="
        lhs = _expressions(node.child_by_field_name("left"))
        rhs = _expressions(node.child_by_field_name("right"))
        split = len(lhs)
        return (
            lhs + rhs,
            lambda r: AssignStmt(
                pos, tuple(r[:split]), op_text, tuple(r[split:])
            ),
        )

    def _case(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        value = node.child_by_field_name("value")
        values = _expressions(value)
        body = [
            child
            for child in _named(node)
            if value is None or child.id != value.id
        ]
        split = len(values)
        return (
            values + body,
            lambda r: CaseClause(pos, tuple(r[:split]), tuple(r[split:])),
        )

    def _if(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        condition = node.child_by_field_name("condition")
        body = [
            child
            for child in _named(node)
            if condition is None or child.id != condition.id
        ]
        return (
            [condition, *body],
            lambda r: IfStmt(pos, r[0], tuple(r[1:])),
        )

    def _return(self, node: tree_sitter.Node) -> _Plan:
        pos = self._pos(node)
        results = [expr for child in _named(node) for expr in _expressions(child)]
        return results, lambda r: ReturnStmt(pos, tuple(r))


def _text(node: tree_sitter.Node | None) -> str:
    if node is None or not node.text:
        return ""
    return node.text.decode("utf-8", errors="replace")


def _named(node: tree_sitter.Node | None) -> list[tree_sitter.Node | None]:
    if node is None:
        return []
    return [c for c in node.named_children if c.type not in _SKIPPED_TYPES]


def _expressions(node: tree_sitter.Node | None) -> list[tree_sitter.Node | None]:
    """Members of an ``expression_list``, or the lone expression itself."""
    if node is None:
        return []
    if node.type == "expression_list":
        return _named(node)
    return [node]


def _unwrap_literal_element(node: tree_sitter.Node) -> tree_sitter.Node:
    """Newer grammars wrap keyed-element sides in ``literal_element``."""
    if node.type == "literal_element" and node.named_child_count == 1:
        return node.named_children[0]
    return node


# ---------------------------------------------------------------------------
# Parser cache
# ---------------------------------------------------------------------------

_language_cache: dict[str, tree_sitter.Language] = {}
_language_lock = threading.Lock()
# tree-sitter parsers are not safe to share between threads
_local = threading.local()


def get_language(language: str) -> tree_sitter.Language:
    """Load (once) the tree-sitter grammar for ``language``."""
    with _language_lock:
        if language in _language_cache:
            return _language_cache[language]

        module_name = GRAMMAR_MODULES.get(language)
        if module_name is None:
            raise GrammarUnavailableError(language, None)

        try:
            mod = importlib.import_module(module_name)
            capsule: object = mod.language()
            lang = tree_sitter.Language(capsule)
        except (ImportError, AttributeError) as exc:
            raise GrammarUnavailableError(language, module_name) from exc
        _language_cache[language] = lang
        return lang


def get_parser(language: str) -> tree_sitter.Parser:
    """Get or create this thread's parser for ``language``."""
    parsers: dict[str, tree_sitter.Parser] | None = getattr(
        _local, "parsers", None
    )
    if parsers is None:
        parsers = {}
        _local.parsers = parsers
    parser = parsers.get(language)
    if parser is None:
        parser = tree_sitter.Parser(get_language(language))
        parsers[language] = parser
    return parser
