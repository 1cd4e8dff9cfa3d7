from __future__ import annotations

import pytest

from a11y_matchers.core.config import AuditConfiguration, RawOptions, RuleFilter, TagFilter, WaitPolicy
from a11y_matchers.core.invoker import (
    RESULTS_IDENTIFIER,
    AuditInvoker,
    build_audit_script,
    build_options_expression,
)
from a11y_matchers.core.models import MalformedAuditResultError

from fakes import FakeLoader, FakePage, node, violation

CALLBACK = "function(results){axe.rspecResult = results;}"


def test_default_script() -> None:
    script = build_audit_script(AuditConfiguration())
    assert script == f"axe.a11yCheck(document, null, {CALLBACK});"


def test_script_with_scope_and_tags() -> None:
    configuration = AuditConfiguration(
        inclusion=["#a", "#b"],
        exclusion="#c",
        filter=TagFilter.of(["wcag2a", "wcag2aa"]),
    )
    assert build_audit_script(configuration) == (
        'axe.a11yCheck({include:[["#a"],["#b"]],exclude:[["#c"]]}, '
        '{runOnly:{type:"tag",values:["wcag2a","wcag2aa"]}}, '
        f"{CALLBACK});"
    )


def test_rule_filter_options() -> None:
    expr = build_options_expression(RuleFilter.of("label, image-alt"))
    assert expr.render() == '{runOnly:{type:"rule",values:["label","image-alt"]}}'


def test_raw_options_are_verbatim() -> None:
    raw = "{rules:{'color-contrast':{enabled:false}}}"
    assert build_options_expression(RawOptions(raw)).render() == raw


def test_no_filter_is_null() -> None:
    assert build_options_expression(None).render() == "null"


def test_run_injects_executes_then_polls_in_order() -> None:
    page = FakePage(payload={"violations": []}, ready_after=3)
    loader = FakeLoader(source="window.axe = {};")
    invoker = AuditInvoker(loader, WaitPolicy(timeout=2.0, interval=0.05))

    result = invoker.run(AuditConfiguration(inclusion="#main"), page)

    assert result.violation_count == 0
    kinds = [kind for kind, _ in page.calls]
    assert kinds[:3] == ["inject", "execute", "wait_until"]
    assert page.calls[0] == ("inject", "window.axe = {};")
    assert page.calls[1][1].startswith('axe.a11yCheck("#main", null,')
    assert page.calls[2] == ("wait_until", (2.0, 0.05))
    assert page.calls[-1] == ("evaluate", RESULTS_IDENTIFIER)
    assert kinds.count("evaluate") == 3


def test_run_parses_violations() -> None:
    payload = {"violations": [violation("Images must have alt text", "https://x/image-alt", [node(["img"])])]}
    invoker = AuditInvoker(FakeLoader(), WaitPolicy(timeout=1.0, interval=0.01))

    result = invoker.run(AuditConfiguration(), FakePage(payload=payload))

    assert result.violation_count == 1
    assert result.violations[0].nodes[0].target == ("img",)


def test_timeout_propagates() -> None:
    page = FakePage(payload=None)
    invoker = AuditInvoker(FakeLoader(), WaitPolicy(timeout=1.0, interval=0.01))

    with pytest.raises(TimeoutError):
        invoker.run(AuditConfiguration(), page)


def test_injection_failure_propagates_without_executing() -> None:
    class BrokenLoader:
        def inject_into(self, page) -> None:
            raise RuntimeError("CSP blocked script")

    page = FakePage(payload={"violations": []})
    invoker = AuditInvoker(BrokenLoader(), WaitPolicy(timeout=1.0, interval=0.01))

    with pytest.raises(RuntimeError, match="CSP blocked script"):
        invoker.run(AuditConfiguration(), page)
    assert page.calls == []


def test_malformed_payload_fails_fast() -> None:
    invoker = AuditInvoker(FakeLoader(), WaitPolicy(timeout=1.0, interval=0.01))

    with pytest.raises(MalformedAuditResultError, match="violations"):
        invoker.run(AuditConfiguration(), FakePage(payload={"passes": []}))


class FailingExecutePage(FakePage):
    def execute(self, script: str) -> None:
        self.calls.append(("execute", script))
        raise RuntimeError("SyntaxError: Unexpected token")


def test_execution_failure_propagates_without_polling() -> None:
    page = FailingExecutePage(payload={"violations": []})
    invoker = AuditInvoker(FakeLoader(), WaitPolicy(timeout=1.0, interval=0.01))

    with pytest.raises(RuntimeError, match="Unexpected token"):
        invoker.run(AuditConfiguration(), page)
    assert [kind for kind, _ in page.calls] == ["inject", "execute"]
