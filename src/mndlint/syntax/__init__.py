"""Go syntax: tree-sitter front end and the node model it produces."""

from mndlint.syntax.go_parser import parse_go
from mndlint.syntax.nodes import LiteralKind, Node, Position, walk

__all__ = ["LiteralKind", "Node", "Position", "parse_go", "walk"]
