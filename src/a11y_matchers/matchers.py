"""The ``be_accessible`` matcher.

Configuration calls return a new matcher, so a partially configured matcher
can be shared and extended without one chain leaking into another. Each
matcher runs ``matches`` at most once.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from a11y_matchers.adapters.axe_core import AxeCoreLoader
from a11y_matchers.adapters.pages import wrap_page
from a11y_matchers.core.config import (
    AuditConfiguration,
    RawOptions,
    RuleFilter,
    Selector,
    TagFilter,
    WaitPolicy,
)
from a11y_matchers.core.invoker import AuditInvoker
from a11y_matchers.core.models import MatchOutcome
from a11y_matchers.core.ports import LibraryLoaderPort
from a11y_matchers.core.reporting import NEGATED_FAILURE_MESSAGE, format_violations
from a11y_matchers.settings import load_axe_core_path, load_wait_bounds

LOGGER = logging.getLogger(__name__)


class BeAccessible:
    """Matcher asserting that a page has no accessibility violations."""

    def __init__(
        self,
        configuration: Optional[AuditConfiguration] = None,
        loader: Optional[LibraryLoaderPort] = None,
        wait: Optional[WaitPolicy] = None,
    ) -> None:
        self._configuration = configuration or AuditConfiguration()
        self._loader = loader
        self._wait = wait
        self._outcome: Optional[MatchOutcome] = None

    @property
    def configuration(self) -> AuditConfiguration:
        return self._configuration

    @property
    def outcome(self) -> Optional[MatchOutcome]:
        return self._outcome

    def _with(self, configuration: AuditConfiguration) -> "BeAccessible":
        return BeAccessible(configuration, loader=self._loader, wait=self._wait)

    def within(self, inclusion: Selector) -> "BeAccessible":
        return self._with(self._configuration.with_inclusion(inclusion))

    def excluding(self, exclusion: Selector) -> "BeAccessible":
        return self._with(self._configuration.with_exclusion(exclusion))

    def for_tag(self, tag: Union[str, Sequence[str]]) -> "BeAccessible":
        return self._with(self._configuration.with_filter(TagFilter.of(tag)))

    for_tags = for_tag

    def for_rule(self, rule: Union[str, Sequence[str]]) -> "BeAccessible":
        return self._with(self._configuration.with_filter(RuleFilter.of(rule)))

    for_rules = for_rule

    def with_options(self, options: str) -> "BeAccessible":
        return self._with(self._configuration.with_filter(RawOptions(options)))

    def _resolve_collaborators(self) -> tuple[LibraryLoaderPort, WaitPolicy]:
        # Only settings the caller did not supply are read from the environment.
        loader, wait = self._loader, self._wait
        if loader is None:
            loader = AxeCoreLoader(load_axe_core_path())
        if wait is None:
            timeout, interval = load_wait_bounds()
            wait = WaitPolicy(timeout=timeout, interval=interval)
        return loader, wait

    def matches(self, page) -> bool:
        """Audit ``page`` and return True when no violations were found."""

        if self._outcome is not None:
            raise RuntimeError("BeAccessible matcher already used; create a new one per assertion")

        loader, wait = self._resolve_collaborators()
        result = AuditInvoker(loader, wait).run(self._configuration, wrap_page(page))
        self._outcome = MatchOutcome(passed=result.violation_count == 0, result=result)
        LOGGER.info("Accessibility audit found %d violation(s)", result.violation_count)
        return self._outcome.passed

    def failure_message(self) -> str:
        if self._outcome is None:
            raise RuntimeError("failure_message is only available after matches() ran")
        return format_violations(self._outcome.result)

    def failure_message_when_negated(self) -> str:
        return NEGATED_FAILURE_MESSAGE

    def __repr__(self) -> str:
        return f"BeAccessible({self._configuration!r})"


def be_accessible(
    loader: Optional[LibraryLoaderPort] = None,
    wait: Optional[WaitPolicy] = None,
) -> BeAccessible:
    """Return a fresh matcher; unset collaborators come from settings."""

    return BeAccessible(loader=loader, wait=wait)

