"""Colored API call logger: ANSI-colored console logging for remote API calls.

Provides an ApiCallLogger with color-coded output per HTTP method,
making it easy to visually trace dashboard traffic in the terminal.

Color scheme:
    🟢 Green   GET
    🔵 Blue    POST
    🟡 Yellow  PUT / PATCH
    🟣 Magenta DELETE
    🔴 Red     Errors
    ⚪ Gray    Timing / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


_METHOD_STYLES: dict[str, tuple[str, str]] = {
    "GET": (_Colors.GREEN, "⬇"),
    "POST": (_Colors.BLUE, "⬆"),
    "PUT": (_Colors.YELLOW, "✎"),
    "PATCH": (_Colors.YELLOW, "✎"),
    "DELETE": (_Colors.MAGENTA, "✖"),
}


def method_style(method: str) -> tuple[str, str]:
    """Color and icon for an HTTP method; unknown methods render white."""
    return _METHOD_STYLES.get(method.upper(), (_Colors.WHITE, "•"))


# ── ApiCallLogger ────────────────────────────────────────────────────

class ApiCallLogger:
    """Color-coded logger for calls to the Honda Aid API.

    Usage:
        log = ApiCallLogger(__name__)
        with log.timed_call("GET", "/api/orders"):
            response = await client.get(url)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def call_start(self, method: str, path: str, **kwargs: Any) -> None:
        color, icon = method_style(method)
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{method.upper()}]{_Colors.RESET} "
            f"{color}{path}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.debug(formatted)

    def call_complete(self, method: str, path: str, status_code: int, elapsed: float) -> None:
        color, icon = method_style(method)
        formatted = (
            f"{color}{icon} [{method.upper()}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {path} → {status_code}{_Colors.RESET} "
            f"{_Colors.GRAY}({elapsed:.2f}s){_Colors.RESET}"
        )
        self._logger.info(formatted)

    def call_error(self, method: str, path: str, error: Exception, elapsed: float) -> None:
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{method.upper()}]{_Colors.RESET} "
            f"{_Colors.RED}{path} failed after {elapsed:.2f}s{_Colors.RESET} "
            f"{_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        )
        self._logger.warning(formatted)

    @contextmanager
    def timed_call(self, method: str, path: str, **kwargs: Any):
        """Context manager that logs a call's start and its outcome with elapsed time.

        The body receives a dict; set ``"status_code"`` on it to have the
        completion line show the response status.
        """
        self.call_start(method, path, **kwargs)
        outcome: dict[str, Any] = {"status_code": 0}
        start = time.perf_counter()
        try:
            yield outcome
        except Exception as e:
            self.call_error(method, path, e, time.perf_counter() - start)
            raise
        else:
            self.call_complete(method, path, outcome["status_code"], time.perf_counter() - start)
