"""Ports (interfaces) used by the core audit flow.

Ports define the minimal contracts for page and library adapters so that the
core can drive any browser automation backend.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol


class PagePort(Protocol):
    """Script operations required on the page under audit."""

    def inject(self, source: str) -> None:
        ...

    def execute(self, script: str) -> None:
        ...

    def evaluate(self, expression: str) -> Any:
        ...

    def wait_until(self, predicate: Callable[[], Any], timeout: float, interval: float) -> Any:
        """Poll ``predicate`` until it returns a truthy value and return it.

        Raises the driver's own timeout error once ``timeout`` seconds pass.
        """
        ...


class LibraryLoaderPort(Protocol):
    """Places the audit library into a page's execution context."""

    def inject_into(self, page: PagePort) -> None:
        ...
