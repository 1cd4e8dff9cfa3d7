"""Literal-expression tree for the script sent to the page.

Scripts are assembled from these nodes and serialized once, so every value
that came from the caller goes through ``json.dumps`` instead of being pasted
into script text by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from typing import Any, Tuple, Union


def to_json(value: Any) -> str:
    """Compact JSON, matching the shape axe-core examples use."""

    return json.dumps(value, separators=(",", ":"))


@dataclass(frozen=True)
class Raw:
    """Script text emitted verbatim (identifiers, ``null``, trusted options)."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Literal:
    """A JSON-serializable value."""

    value: Any

    def render(self) -> str:
        return to_json(self.value)


@dataclass(frozen=True)
class ArrayExpr:
    items: Tuple["Expr", ...]

    def render(self) -> str:
        return "[" + ",".join(item.render() for item in self.items) + "]"


@dataclass(frozen=True)
class ObjectExpr:
    """Object literal with bare identifier keys, e.g. ``{include:document}``."""

    entries: Tuple[Tuple[str, "Expr"], ...]

    def render(self) -> str:
        return "{" + ",".join(f"{key}:{value.render()}" for key, value in self.entries) + "}"


@dataclass(frozen=True)
class AssignCallback:
    """``function(<param>){<target> = <param>;}``"""

    param: str
    target: str

    def render(self) -> str:
        return f"function({self.param}){{{self.target} = {self.param};}}"


@dataclass(frozen=True)
class Call:
    callee: str
    args: Tuple["Expr", ...]

    def render(self) -> str:
        return f"{self.callee}(" + ", ".join(arg.render() for arg in self.args) + ")"

    def statement(self) -> str:
        return self.render() + ";"


Expr = Union[Raw, Literal, ArrayExpr, ObjectExpr, AssignCallback, Call]

DOCUMENT = Raw("document")
NULL = Raw("null")
