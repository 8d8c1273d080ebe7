"""Client side: sends a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Callable, List, Optional, Union

from minitalk.protocol import ServerState, encode_byte, encode_message
from minitalk.signals import SignalError, install_handler, send_signal
from minitalk.strings import atoi

Sender = Callable[[int, int], None]

_POLL_SECONDS = 42e-6


def _sleep() -> None:
    time.sleep(_POLL_SECONDS)


class _Received(Exception):
    """The server reported the end of the message."""


class Client:
    """Sends bits to ``pid``: SIGUSR1 for 1, SIGUSR2 for 0.

    After each bit it calls ``wait`` until ``acknowledge`` has been called.
    """

    def __init__(self, pid: int, send: Optional[Sender] = None,
                 wait: Optional[Callable[[], None]] = None) -> None:
        self.pid = pid
        self.send = send if send is not None else send_signal
        self.wait = wait if wait is not None else _sleep
        self.state = ServerState.BUSY

    def acknowledge(self) -> None:
        """Record that the server has taken the last bit."""
        self.state = ServerState.READY

    def _send_bit(self, bit: int) -> None:
        self.send(self.pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        while self.state == ServerState.BUSY:
            self.wait()
        self.state = ServerState.BUSY

    def send_byte(self, value: int) -> None:
        """Send the eight bits of ``value``, most significant first."""
        for bit in encode_byte(value):
            self._send_bit(bit)

    def send_message(self, message: Union[str, bytes]) -> None:
        """Send ``message`` followed by its terminating zero byte."""
        for bit in encode_message(message):
            self._send_bit(bit)


def _on_end(signum: int, frame: object) -> None:
    raise _Received()


def main(argv: Optional[List[str]] = None) -> int:
    """Send the message given as second argument to the server pid given first."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        sys.stderr.write("Wrong argument\n")
        return -1
    client = Client(atoi(args[0]))
    try:
        install_handler(signal.SIGUSR1, lambda signum, frame: client.acknowledge())
        install_handler(signal.SIGUSR2, _on_end)
        client.send_message(os.fsencode(args[1]))
    except _Received:
        sys.stdout.write("Received!\n")
        return 0
    except SignalError as exc:
        sys.stderr.write(f"{exc}\n")
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())