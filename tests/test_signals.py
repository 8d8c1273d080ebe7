import os
import signal
import time
from unittest import mock

import pytest

from minitalk.signals import SignalError, install_handler, send_signal


def _wait_for(predicate, timeout=1.0):
    deadline = time.monotonic() + timeout
    while not predicate() and time.monotonic() < deadline:
        time.sleep(0.01)
    return predicate()


def test_send_signal_passes_pid_and_signal_to_kill():
    with mock.patch("os.kill") as kill:
        send_signal(123, signal.SIGUSR2)
    kill.assert_called_once_with(123, signal.SIGUSR2)


def test_send_signal_failure_raises_signal_error():
    with mock.patch("os.kill", side_effect=ProcessLookupError("no such process")):
        with pytest.raises(SignalError):
            send_signal(999999, signal.SIGUSR1)


def test_send_signal_permission_error_raises_signal_error():
    with mock.patch("os.kill", side_effect=PermissionError("denied")):
        with pytest.raises(SignalError, match="kill failed"):
            send_signal(1, signal.SIGUSR1)


def test_handler_receives_signal_sent_to_self():
    received = []
    previous = install_handler(signal.SIGUSR1, lambda signum, frame: received.append(signum))
    try:
        send_signal(os.getpid(), signal.SIGUSR1)
        _wait_for(lambda: received)
    finally:
        signal.signal(signal.SIGUSR1, previous)
    assert received == [signal.SIGUSR1]


def test_install_handler_returns_previous_handler():
    def first(signum, frame):
        pass

    def second(signum, frame):
        pass

    original = install_handler(signal.SIGUSR2, first)
    try:
        replaced = install_handler(signal.SIGUSR2, second)
    finally:
        signal.signal(signal.SIGUSR2, original)
    assert replaced is first


def test_install_handler_for_uncatchable_signal_raises():
    with pytest.raises(SignalError, match="sigaction failed"):
        install_handler(signal.SIGKILL, lambda signum, frame: None)


def test_install_handler_with_invalid_handler_raises():
    with pytest.raises(SignalError):
        install_handler(signal.SIGUSR1, "not a handler")