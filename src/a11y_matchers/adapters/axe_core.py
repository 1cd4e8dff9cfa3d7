"""axe-core library loader.

Reads the axe-core source from disk once per loader and injects it into any
page that satisfies PagePort.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from a11y_matchers.core.ports import PagePort
from a11y_matchers.settings import AXE_CORE_PATH_ENV

LOGGER = logging.getLogger(__name__)


class AxeCoreLoader:
    """Loader adapter that injects axe-core from a local file."""

    def __init__(self, path: str) -> None:
        self._path = path
        self._source: Optional[str] = None

    def source(self) -> str:
        """Return the library source, reading the file on first use."""

        if self._source is None:
            # Fail fast with a hint instead of an opaque ReferenceError in the page.
            if not os.path.exists(self._path):
                raise FileNotFoundError(
                    f"axe-core source not found: {self._path} "
                    f"(install axe-core or set {AXE_CORE_PATH_ENV})"
                )
            with open(self._path, "r", encoding="utf-8") as handle:
                self._source = handle.read()
            LOGGER.debug("Loaded axe-core source from %s (%d chars)", self._path, len(self._source))
        return self._source

    def inject_into(self, page: PagePort) -> None:
        page.inject(self.source())
