"""Playwright (sync API) page adapter."""

from __future__ import annotations

import time
from typing import Any, Callable

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class PlaywrightPage:
    """PagePort implementation backed by a Playwright sync ``Page``."""

    def __init__(self, page) -> None:
        self._page = page

    def inject(self, source: str) -> None:
        self._page.add_script_tag(content=source)

    def execute(self, script: str) -> None:
        # Wrapped in a function so Playwright runs it as a statement block.
        self._page.evaluate(f"() => {{ {script} }}")

    def evaluate(self, expression: str) -> Any:
        return self._page.evaluate(f"() => {expression}")

    def wait_until(self, predicate: Callable[[], Any], timeout: float, interval: float) -> Any:
        deadline = time.monotonic() + timeout
        while True:
            value = predicate()
            if value:
                return value
            if time.monotonic() >= deadline:
                raise PlaywrightTimeoutError(f"Timeout {timeout}s exceeded waiting for audit result")
            # Sleeping through the page keeps Playwright's event loop serviced.
            self._page.wait_for_timeout(interval * 1000)
