"""Page adapter selection.

Drivers are imported lazily so a project only needs the automation library
it actually uses.
"""

from __future__ import annotations

from a11y_matchers.core.ports import PagePort

_PORT_METHODS = ("inject", "execute", "evaluate", "wait_until")


def wrap_page(page) -> PagePort:
    """Return a PagePort for a driver object, or the object itself if it is one.

    - Objects exposing the full port are used as-is.
    - Objects with ``execute_script`` are treated as Selenium WebDrivers.
    - Objects with ``add_script_tag`` are treated as Playwright pages.
    """

    if all(callable(getattr(page, name, None)) for name in _PORT_METHODS):
        return page

    if callable(getattr(page, "execute_script", None)):
        from a11y_matchers.adapters.selenium_page import SeleniumPage

        return SeleniumPage(page)

    if callable(getattr(page, "add_script_tag", None)):
        from a11y_matchers.adapters.playwright_page import PlaywrightPage

        return PlaywrightPage(page)

    raise TypeError(f"Unsupported page object: {type(page).__name__}")
