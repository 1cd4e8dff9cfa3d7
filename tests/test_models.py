from __future__ import annotations

import pytest

from a11y_matchers.core.models import AuditResult, MalformedAuditResultError

from fakes import node, violation


def test_from_payload_keeps_optional_fields_and_raw() -> None:
    payload = {
        "violations": [violation("h", "u", [node(["#x"])], id="image-alt", impact="critical")],
        "passes": [],
    }
    result = AuditResult.from_payload(payload)

    assert result.violations[0].id == "image-alt"
    assert result.violations[0].impact == "critical"
    assert result.raw is payload


def test_optional_fields_default_to_none() -> None:
    result = AuditResult.from_payload({"violations": [violation("h", "u", [])]})
    assert result.violations[0].id is None
    assert result.violations[0].nodes == ()


@pytest.mark.parametrize(
    "payload, fragment",
    [
        ("not a dict", "expected an object"),
        ({}, "no 'violations'"),
        ({"violations": "nope"}, "expected a list"),
        ({"violations": [{"helpUrl": "u", "nodes": []}]}, "violations[0] has no 'help'"),
        (
            {"violations": [violation("h", "u", [{"target": ["#x"], "html": "<p>"}])]},
            "violations[0].nodes[0] has no 'failureSummary'",
        ),
    ],
)
def test_malformed_payloads(payload, fragment: str) -> None:
    with pytest.raises(MalformedAuditResultError) as excinfo:
        AuditResult.from_payload(payload)
    assert fragment in str(excinfo.value)


def test_malformed_error_is_value_error() -> None:
    assert issubclass(MalformedAuditResultError, ValueError)
