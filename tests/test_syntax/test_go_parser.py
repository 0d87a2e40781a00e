"""Tests for the tree-sitter Go front end."""

from __future__ import annotations

import threading

import pytest

from mndlint.errors import GrammarUnavailableError
from mndlint.syntax.go_parser import get_language, get_parser, parse_go
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
    Opaque,
    ParenExpr,
    ReturnStmt,
    SelectorExpr,
    walk,
)
from tests.conftest import BODY_FIRST_LINE, go_func


def _nodes(source: str, cls: type) -> list:
    return [n for n in walk(parse_go(source, "t.go")) if isinstance(n, cls)]


def test_root_is_source_file() -> None:
    root = parse_go("package p\n", "t.go")
    assert isinstance(root, Opaque)
    assert root.type == "source_file"


def test_literal_kinds_and_text() -> None:
    body = "\t_ = f(42, 3.5, 2i, 'a', \"s\", `raw`, 0x1F)"
    lits = _nodes(go_func(body), BasicLit)
    assert [(lit.kind, lit.value) for lit in lits] == [
        (LiteralKind.INT, "42"),
        (LiteralKind.FLOAT, "3.5"),
        (LiteralKind.IMAG, "2i"),
        (LiteralKind.CHAR, "'a'"),
        (LiteralKind.STRING, '"s"'),
        (LiteralKind.STRING, "`raw`"),
        (LiteralKind.INT, "0x1F"),
    ]


def test_positions_are_one_based() -> None:
    lit = _nodes(go_func("\tf(42)"), BasicLit)[0]
    assert lit.position.file == "t.go"
    assert lit.position.line == BODY_FIRST_LINE
    assert lit.position.column == 4


def test_call_with_selector_function() -> None:
    call = _nodes(go_func("\tfoo.Bar(5, x)"), CallExpr)[0]
    assert isinstance(call.function, SelectorExpr)
    assert isinstance(call.function.operand, Ident)
    assert call.function.operand.name == "foo"
    assert call.function.field == "Bar"
    assert len(call.args) == 2
    assert isinstance(call.args[1], Ident)


def test_make_channel_argument() -> None:
    call = _nodes(go_func("\tch := make(chan int, 5)"), CallExpr)[0]
    assert isinstance(call.args[0], ChanType)
    assert call.args[0].text == "chan int"
    assert isinstance(call.args[1], BasicLit)


def test_binary_and_paren() -> None:
    assign = _nodes(go_func("\tx = (a + 3) * b"), AssignStmt)[0]
    top = assign.rhs[0]
    assert isinstance(top, BinaryExpr)
    assert top.operator == "*"
    assert isinstance(top.left, ParenExpr)
    assert isinstance(top.left.inner, BinaryExpr)


def test_const_declaration_position_and_values() -> None:
    source = "package p\n\nconst (\n\tA = 5\n\tB = time.Duration(3)\n)\n"
    decl = _nodes(source, ConstDecl)[0]
    assert decl.position.line == 3
    assert decl.position.column == 1
    assert len(decl.values) == 2
    assert isinstance(decl.values[1], CallExpr)


def test_assignment_operators() -> None:
    body = "\ta := 1\n\tb = 2\n\tc += 3"
    ops = [s.operator for s in _nodes(go_func(body), AssignStmt)]
    assert ops == [":=", "=", "+="]


def test_keyed_element() -> None:
    kv = _nodes(go_func("\tc := Config{Port: 8080}"), KeyValueExpr)[0]
    assert isinstance(kv.value, BasicLit)
    assert kv.value.value == "8080"


def test_switch_cases() -> None:
    body = "\tswitch n {\n\tcase 1, 2:\n\t\tf(3)\n\tdefault:\n\t}"
    cases = _nodes(go_func(body), CaseClause)
    assert [len(c.values) for c in cases] == [2, 0]
    # The call in the case body is still reachable by the walk
    assert any(isinstance(n, CallExpr) for n in walk(cases[0]))


def test_if_condition_and_body() -> None:
    stmt = _nodes(go_func("\tif x := g(); x > 5 {\n\t\treturn\n\t}"), IfStmt)[0]
    assert isinstance(stmt.condition, BinaryExpr)
    assert any(isinstance(n, AssignStmt) for n in stmt.body)


def test_return_results() -> None:
    ret = _nodes(go_func("\treturn a, 7"), ReturnStmt)[0]
    assert len(ret.results) == 2
    assert isinstance(ret.results[1], BasicLit)


def test_comments_are_dropped() -> None:
    call = _nodes(go_func("\tf(/* size */ 5)"), CallExpr)[0]
    assert len(call.args) == 1
    assert isinstance(call.args[0], BasicLit)


def test_syntax_errors_do_not_raise() -> None:
    root = parse_go("package p\n\nfunc f( {\n\tg(5\n", "bad.go")
    assert list(walk(root))


def test_accepts_text_and_bytes() -> None:
    source = go_func("\tf(5)")
    as_text = _nodes(source, BasicLit)
    as_bytes = [
        n for n in walk(parse_go(source.encode(), "t.go"))
        if isinstance(n, BasicLit)
    ]
    assert as_text == as_bytes


def test_unknown_language_raises() -> None:
    with pytest.raises(GrammarUnavailableError, match="cobol"):
        get_language("cobol")


def test_parser_is_per_thread() -> None:
    main_parser = get_parser("go")
    assert get_parser("go") is main_parser

    other: list[object] = []
    t = threading.Thread(target=lambda: other.append(get_parser("go")))
    t.start()
    t.join()
    assert other[0] is not main_parser


def test_deeply_nested_expression() -> None:
    terms = 3000
    source = "package p\n\nvar x = " + " + ".join(["a"] * terms) + "\n"
    binaries = _nodes(source, BinaryExpr)
    assert len(binaries) == terms - 1
    # Left-associative: the outermost expression holds the last operand
    assert binaries[0].right.position.column > binaries[-1].right.position.column
