"""Core configuration dataclasses.

Configuration values are immutable: every update returns a new value, so a
chain of matcher calls never mutates a configuration another chain holds.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import re
from typing import Optional, Sequence, Tuple, Union

# A selector is a bare string, or a sequence of tokens where each token is a
# string or a sequence of strings forming a CSS combinator chain.
SelectorToken = Union[str, Sequence[str]]
Selector = Union[str, Sequence[SelectorToken]]

_LIST_SEPARATOR = re.compile(r", ?")


def split_list(text: str) -> list[str]:
    """Split a comma separated string on ``,`` or ``, ``.

    Trailing empty tokens are dropped so ``"a,b,"`` yields ``["a", "b"]``.
    """

    tokens = _LIST_SEPARATOR.split(text)
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def _as_values(value: Union[str, Sequence[str]]) -> Tuple[str, ...]:
    if isinstance(value, str):
        return tuple(split_list(value))
    return tuple(value)


@dataclass(frozen=True)
class TagFilter:
    """Only run rules carrying one of these tags."""

    values: Tuple[str, ...]

    @classmethod
    def of(cls, tags: Union[str, Sequence[str]]) -> "TagFilter":
        return cls(values=_as_values(tags))


@dataclass(frozen=True)
class RuleFilter:
    """Only run the rules with these ids."""

    values: Tuple[str, ...]

    @classmethod
    def of(cls, rules: Union[str, Sequence[str]]) -> "RuleFilter":
        return cls(values=_as_values(rules))


@dataclass(frozen=True)
class RawOptions:
    """Script-level options object passed to the audit library verbatim."""

    text: str


AuditFilter = Union[TagFilter, RuleFilter, RawOptions]


@dataclass(frozen=True)
class AuditConfiguration:
    """Scope and filter settings for one audit run."""

    inclusion: Optional[Selector] = None
    exclusion: Optional[Selector] = None
    filter: Optional[AuditFilter] = None

    def with_inclusion(self, inclusion: Optional[Selector]) -> "AuditConfiguration":
        return replace(self, inclusion=inclusion)

    def with_exclusion(self, exclusion: Optional[Selector]) -> "AuditConfiguration":
        return replace(self, exclusion=exclusion)

    def with_filter(self, audit_filter: Optional[AuditFilter]) -> "AuditConfiguration":
        # One field holds the active variant, so a new filter always replaces
        # the previous one instead of merging with it.
        return replace(self, filter=audit_filter)


@dataclass(frozen=True)
class WaitPolicy:
    """Bound and cadence for polling the audit result out of the page."""

    timeout: float
    interval: float

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"Wait timeout must be positive, got {self.timeout}")
        if self.interval <= 0:
            raise ValueError(f"Poll interval must be positive, got {self.interval}")
