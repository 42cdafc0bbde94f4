"""
Hide-condition expressions for form-js ``conditional.hide``.

Conditions are built as a small typed AST and serialized at the schema
boundary to the renderer's expression syntax:

    = formState == "<STATE>" ? <bool-expr> : <bool-expr>

where ``<bool-expr>`` is ``true``/``false`` or a parenthesized nested
condition. ``formState`` is bound by the renderer to the current workflow
state; nothing here evaluates the expressions.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EXPRESSION_PREFIX = "= "
STATE_VARIABLE = "formState"

_PREFIX_RE = re.compile(r"^=\s*")


class BoolLiteral(BaseModel):
    """A literal ``true`` or ``false``."""

    kind: Literal["bool"] = "bool"
    value: bool

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "true" if self.value else "false"


class RawCondition(BaseModel):
    """
    An already-serialized condition carried through verbatim.

    Used to preserve a component's previous hide condition when a new one
    is layered on top of it.
    """

    kind: Literal["raw"] = "raw"
    text: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.text


class StateTernary(BaseModel):
    """
    ``formState == "<state>" ? when_current : otherwise``

    Literal branches are written bare; anything else is parenthesized.
    """

    kind: Literal["ternary"] = "ternary"
    state: str = Field(description="Workflow state compared against formState")
    when_current: HideExpr
    otherwise: HideExpr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (
            f'{STATE_VARIABLE} == "{self.state}" ? '
            f"{_branch(self.when_current)} : {_branch(self.otherwise)}"
        )


HideExpr = BoolLiteral | RawCondition | StateTernary

StateTernary.model_rebuild()

TRUE = BoolLiteral(value=True)
FALSE = BoolLiteral(value=False)


def _branch(expr: HideExpr) -> str:
    if isinstance(expr, BoolLiteral):
        return str(expr)
    return f"({expr})"


def to_expression(expr: HideExpr) -> str:
    """Serialize to the renderer's ``= ...`` expression string."""
    return f"{EXPRESSION_PREFIX}{expr}"


def strip_expression_prefix(text: str) -> str:
    """Remove a leading ``=`` and the whitespace after it."""
    return _PREFIX_RE.sub("", text, count=1)


def visible_only_in(state: str) -> StateTernary:
    """Shown while formState is ``state``, hidden otherwise."""
    return StateTernary(state=state, when_current=FALSE, otherwise=TRUE)


def hidden_in(state: str, previous: str | None = None) -> StateTernary:
    """
    Hidden while formState is ``state``; otherwise defer to ``previous``.

    Args:
        state: Workflow state in which the component is hidden
        previous: Existing ``conditional.hide`` string, with or without its
            ``=`` prefix. Missing or empty means always hidden elsewhere.
    """
    previous_text = strip_expression_prefix(previous) if previous else ""
    return StateTernary(
        state=state,
        when_current=TRUE,
        otherwise=RawCondition(text=previous_text or "true"),
    )
