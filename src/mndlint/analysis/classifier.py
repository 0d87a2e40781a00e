"""Numeric literal classifier."""

from __future__ import annotations

from mndlint.policy import IgnorePolicy
from mndlint.syntax.nodes import BasicLit, LiteralKind

_NUMERIC_KINDS = frozenset({LiteralKind.INT, LiteralKind.FLOAT})


def is_magic_number(literal: BasicLit, policy: IgnorePolicy) -> bool:
    """Return True if ``literal`` is an integer or float the policy does not ignore."""
    return literal.kind in _NUMERIC_KINDS and not policy.is_ignored_number(
        literal.value
    )
