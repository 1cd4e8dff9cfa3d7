"""Core domain models.

These dataclasses mirror the subset of the axe-core result payload the
matcher reads, so adapters and reporters never handle raw dictionaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple


class MalformedAuditResultError(ValueError):
    """Raised when the audit payload does not have the expected shape."""


def _require(record: Any, key: str, where: str) -> Any:
    if not isinstance(record, Mapping):
        raise MalformedAuditResultError(
            f"Malformed audit result: {where} is {type(record).__name__}, expected an object"
        )
    if key not in record or record[key] is None:
        raise MalformedAuditResultError(f"Malformed audit result: {where} has no '{key}'")
    return record[key]


def _require_list(record: Any, key: str, where: str) -> list:
    value = _require(record, key, where)
    if not isinstance(value, (list, tuple)):
        raise MalformedAuditResultError(
            f"Malformed audit result: {where}.{key} is {type(value).__name__}, expected a list"
        )
    return list(value)


@dataclass(frozen=True)
class Node:
    """One offending DOM element reported for a violation."""

    target: Tuple[str, ...]
    html: str
    failure_summary: str

    @classmethod
    def from_payload(cls, payload: Any, where: str) -> "Node":
        return cls(
            target=tuple(str(t) for t in _require_list(payload, "target", where)),
            html=str(_require(payload, "html", where)),
            failure_summary=str(_require(payload, "failureSummary", where)),
        )


@dataclass(frozen=True)
class Violation:
    """A single rule failure with the nodes it was found on."""

    help: str
    help_url: str
    nodes: Tuple[Node, ...]
    id: Optional[str] = None
    impact: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any, where: str) -> "Violation":
        nodes = _require_list(payload, "nodes", where)
        return cls(
            help=str(_require(payload, "help", where)),
            help_url=str(_require(payload, "helpUrl", where)),
            nodes=tuple(
                Node.from_payload(node, f"{where}.nodes[{index}]")
                for index, node in enumerate(nodes)
            ),
            id=payload.get("id"),
            impact=payload.get("impact"),
        )


@dataclass(frozen=True)
class AuditResult:
    """Parsed audit payload; ``raw`` keeps the original for callers."""

    violations: Tuple[Violation, ...]
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_payload(cls, payload: Any) -> "AuditResult":
        """Validate and convert the axe-core callback payload."""

        violations = _require_list(payload, "violations", "result")
        return cls(
            violations=tuple(
                Violation.from_payload(violation, f"violations[{index}]")
                for index, violation in enumerate(violations)
            ),
            raw=payload,
        )

    @property
    def violation_count(self) -> int:
        return len(self.violations)


@dataclass(frozen=True)
class MatchOutcome:
    """Result of one matcher run."""

    passed: bool
    result: AuditResult
