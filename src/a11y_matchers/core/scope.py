"""Scope expression construction (core domain)."""

from __future__ import annotations

from typing import Optional

from a11y_matchers.core.config import Selector, split_list
from a11y_matchers.core.script import DOCUMENT, ArrayExpr, Expr, Literal, ObjectExpr


def _is_set(selector: Optional[Selector]) -> bool:
    # Only the top level treats an empty string as "not set".
    return selector is not None and selector != ""


def _is_list_form(selector: Selector) -> bool:
    return not isinstance(selector, str) or "," in selector


def selector_list(selector: Selector) -> ArrayExpr:
    """Return the ``[[...],[...]]`` form of an inclusion or exclusion.

    A string is split on ``,`` or ``, ``. Each plain string token becomes a
    one-element array; a token that is already a sequence is kept as a
    combinator chain.
    """

    tokens = split_list(selector) if isinstance(selector, str) else list(selector)
    items = []
    for token in tokens:
        if isinstance(token, str):
            items.append(Literal([token]))
        else:
            items.append(Literal(list(token)))
    return ArrayExpr(tuple(items))


def build_scope_expression(
    inclusion: Optional[Selector] = None,
    exclusion: Optional[Selector] = None,
) -> Expr:
    """Return the scope argument for the audit entry point.

    - Nothing set: the whole ``document``.
    - Inclusion only: a single selector literal, or ``{include:[...]}``
      when the inclusion is a list or contains a comma.
    - Exclusion only: ``{include:document,exclude:[...]}``.
    - Both: ``{include:[...],exclude:[...]}``.
    """

    has_inclusion = _is_set(inclusion)
    has_exclusion = _is_set(exclusion)

    if not has_exclusion:
        if not has_inclusion:
            return DOCUMENT
        if _is_list_form(inclusion):
            return ObjectExpr((("include", selector_list(inclusion)),))
        return Literal(inclusion)

    if not has_inclusion:
        return ObjectExpr((("include", DOCUMENT), ("exclude", selector_list(exclusion))))

    return ObjectExpr(
        (
            ("include", selector_list(inclusion)),
            ("exclude", selector_list(exclusion)),
        )
    )
