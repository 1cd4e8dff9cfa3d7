"""Accessibility matchers that run axe-core inside a browser page."""

from a11y_matchers.core.config import AuditConfiguration, RawOptions, RuleFilter, TagFilter, WaitPolicy
from a11y_matchers.core.models import AuditResult, MalformedAuditResultError, Node, Violation
from a11y_matchers.matchers import BeAccessible, be_accessible

__all__ = [
    "AuditConfiguration",
    "AuditResult",
    "BeAccessible",
    "MalformedAuditResultError",
    "Node",
    "RawOptions",
    "RuleFilter",
    "TagFilter",
    "Violation",
    "WaitPolicy",
    "be_accessible",
]
