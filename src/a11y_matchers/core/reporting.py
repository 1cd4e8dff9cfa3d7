"""Violation report formatting.

Keeping formatting here keeps the failure message identical no matter which
page adapter produced the result.
"""

from __future__ import annotations

from a11y_matchers.core.models import AuditResult

NEGATED_FAILURE_MESSAGE = "Expected to find accessibility violations. None were detected."

_NODE_INDENT = "    "


def count_violations(result: AuditResult) -> int:
    return result.violation_count


def format_violations(result: AuditResult) -> str:
    """Return the multi-line failure message for a result with violations.

    Each violation is numbered from 1 and followed by its nodes: one line per
    target selector, the offending HTML, then the failure summary with every
    embedded line re-indented under the node.
    """

    count = count_violations(result)
    noun = "violation" if count == 1 else "violations"
    lines = [f"Found {count} accessibility {noun}:"]
    for index, violation in enumerate(result.violations, start=1):
        lines.append(f"  {index}) {violation.help}: {violation.help_url}")
        for node in violation.nodes:
            for target in node.target:
                lines.append(f"{_NODE_INDENT}{target}")
            lines.append(f"{_NODE_INDENT}{node.html}")
            summary = node.failure_summary.replace("\n", "\n" + _NODE_INDENT)
            lines.append(f"{_NODE_INDENT}{summary}")
    return "\n".join(lines) + "\n"
