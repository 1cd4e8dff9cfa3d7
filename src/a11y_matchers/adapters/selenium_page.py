"""Selenium WebDriver page adapter."""

from __future__ import annotations

from typing import Any, Callable

from selenium.webdriver.support.ui import WebDriverWait


class SeleniumPage:
    """PagePort implementation backed by a Selenium WebDriver.

    ``execute_script`` runs its argument as a function body, so evaluation
    needs an explicit ``return``.
    """

    def __init__(self, driver) -> None:
        self._driver = driver

    def inject(self, source: str) -> None:
        self._driver.execute_script(source)

    def execute(self, script: str) -> None:
        self._driver.execute_script(script)

    def evaluate(self, expression: str) -> Any:
        return self._driver.execute_script(f"return {expression};")

    def wait_until(self, predicate: Callable[[], Any], timeout: float, interval: float) -> Any:
        # WebDriverWait raises selenium's TimeoutException when the bound passes.
        return WebDriverWait(self._driver, timeout, poll_frequency=interval).until(
            lambda _driver: predicate()
        )
