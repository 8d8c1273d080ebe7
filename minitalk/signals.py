"""Sending and catching the user signals that carry the protocol."""

from __future__ import annotations

import os
import signal
from typing import Any, Callable, Union

Handler = Union[Callable[[int, Any], Any], int, signal.Handlers, None]


class SignalError(RuntimeError):
    """Raised when a signal cannot be sent or a handler cannot be installed."""


def send_signal(pid: int, signum: int) -> None:
    """Send ``signum`` to the process ``pid``.

    Raises SignalError if the kernel refuses the delivery.
    """
    try:
        os.kill(pid, signum)
    except OSError as exc:
        raise SignalError(f"kill failed: {exc}") from exc


def install_handler(signum: int, handler: Handler) -> Handler:
    """Install ``handler`` for ``signum`` and return the handler it replaces.

    The handler is called as ``handler(signum, frame)``. Raises SignalError
    if the signal cannot be caught or the handler is not acceptable.
    """
    try:
        return signal.signal(signum, handler)
    except (OSError, ValueError, TypeError) as exc:
        raise SignalError(f"sigaction failed: {exc}") from exc