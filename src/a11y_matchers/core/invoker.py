"""Audit invocation against a page surface.

The order is fixed:
1) Inject the audit library (it must exist before the script references it)
2) Execute the audit script; the library's callback writes the result global
3) Poll the page until the result global is populated
4) Validate the payload into an AuditResult

Nothing here retries. Injection, execution, and timeout errors raised by the
page propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Optional

from a11y_matchers.core.config import (
    AuditConfiguration,
    AuditFilter,
    RawOptions,
    RuleFilter,
    TagFilter,
    WaitPolicy,
)
from a11y_matchers.core.models import AuditResult
from a11y_matchers.core.ports import LibraryLoaderPort, PagePort
from a11y_matchers.core.scope import build_scope_expression
from a11y_matchers.core.script import NULL, AssignCallback, Call, Expr, Literal, ObjectExpr, Raw

LOGGER = logging.getLogger(__name__)

LIBRARY_IDENTIFIER = "axe"
# Namespaced under the library so it cannot collide with page globals.
RESULTS_IDENTIFIER = LIBRARY_IDENTIFIER + ".rspecResult"
ENTRY_POINT = LIBRARY_IDENTIFIER + ".a11yCheck"


def build_options_expression(audit_filter: Optional[AuditFilter]) -> Expr:
    """Return the options argument for the audit entry point."""

    if audit_filter is None:
        return NULL
    if isinstance(audit_filter, RawOptions):
        return Raw(audit_filter.text)
    if isinstance(audit_filter, TagFilter):
        run_type = "tag"
    elif isinstance(audit_filter, RuleFilter):
        run_type = "rule"
    else:
        raise TypeError(f"Unsupported audit filter: {audit_filter!r}")
    return ObjectExpr(
        (
            (
                "runOnly",
                ObjectExpr(
                    (
                        ("type", Literal(run_type)),
                        ("values", Literal(list(audit_filter.values))),
                    )
                ),
            ),
        )
    )


def build_audit_script(configuration: AuditConfiguration) -> str:
    """Compose the statement that starts the audit inside the page."""

    call = Call(
        ENTRY_POINT,
        (
            build_scope_expression(configuration.inclusion, configuration.exclusion),
            build_options_expression(configuration.filter),
            AssignCallback(param="results", target=RESULTS_IDENTIFIER),
        ),
    )
    return call.statement()


class AuditInvoker:
    """Runs one audit on a page and returns the parsed result."""

    def __init__(self, loader: LibraryLoaderPort, wait: WaitPolicy) -> None:
        self._loader = loader
        self._wait = wait

    def run(self, configuration: AuditConfiguration, page: PagePort) -> AuditResult:
        self._loader.inject_into(page)

        script = build_audit_script(configuration)
        LOGGER.debug("Executing audit script: %s", script)
        page.execute(script)

        LOGGER.debug(
            "Polling %s (timeout=%ss, interval=%ss)",
            RESULTS_IDENTIFIER,
            self._wait.timeout,
            self._wait.interval,
        )
        payload = page.wait_until(
            lambda: page.evaluate(RESULTS_IDENTIFIER),
            self._wait.timeout,
            self._wait.interval,
        )
        return AuditResult.from_payload(payload)
