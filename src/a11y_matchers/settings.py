"""Environment-driven defaults for a11y-matchers.

Values are read via python-dotenv so a project can keep its axe-core path
and wait bounds in a local ``.env`` file next to its test suite.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

# Where axe-core lands after `npm install axe-core`.
DEFAULT_AXE_CORE_PATH = os.path.join("node_modules", "axe-core", "axe.min.js")
DEFAULT_WAIT_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.1

AXE_CORE_PATH_ENV = "AXE_CORE_PATH"
WAIT_TIMEOUT_ENV = "A11Y_WAIT_TIMEOUT"
POLL_INTERVAL_ENV = "A11Y_POLL_INTERVAL"


@dataclass(frozen=True)
class A11ySettings:
    axe_core_path: str
    wait_timeout: float
    poll_interval: float


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from e


def load_axe_core_path() -> str:
    """Return the axe-core source path from the environment."""

    load_dotenv()
    return os.getenv(AXE_CORE_PATH_ENV) or DEFAULT_AXE_CORE_PATH


def load_wait_bounds() -> tuple[float, float]:
    """Return (timeout, interval) in seconds for result polling."""

    load_dotenv()
    return (
        _float_env(WAIT_TIMEOUT_ENV, DEFAULT_WAIT_TIMEOUT),
        _float_env(POLL_INTERVAL_ENV, DEFAULT_POLL_INTERVAL),
    )


def load_settings() -> A11ySettings:
    """Build settings from the environment, falling back to defaults."""

    timeout, interval = load_wait_bounds()
    return A11ySettings(
        axe_core_path=load_axe_core_path(),
        wait_timeout=timeout,
        poll_interval=interval,
    )
