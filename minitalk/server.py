"""Server side: receives messages one bit per signal and prints them."""

from __future__ import annotations

import os
import signal
import sys
from typing import BinaryIO, Callable, List, Optional

from minitalk.printf import printf
from minitalk.protocol import BitDecoder
from minitalk.signals import SignalError, send_signal

Sender = Callable[[int, int], None]


class Server:
    """Decodes bits coming from a client and acknowledges each one.

    Every completed byte is written to ``output``; a zero byte ends the
    message, writes a newline and tells the client it is done with SIGUSR2.
    Any other bit is acknowledged with SIGUSR1.
    """

    def __init__(self, output: Optional[BinaryIO] = None,
                 send: Optional[Sender] = None) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.send = send if send is not None else send_signal
        self.client_pid: Optional[int] = None
        self._decoder = BitDecoder()

    def _write(self, data: bytes) -> None:
        self.output.write(data)
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()

    def handle_bit(self, bit: int, sender_pid: Optional[int] = None) -> Optional[int]:
        """Take one bit from ``sender_pid`` and acknowledge it.

        Returns the byte completed by this bit, or None. A missing or zero
        ``sender_pid`` keeps the last known client.
        """
        if sender_pid:
            self.client_pid = sender_pid
        value = self._decoder.feed(bit)
        if self.client_pid is None:
            raise SignalError("no client to acknowledge")
        if value == 0:
            self._write(b"\n")
            self.send(self.client_pid, signal.SIGUSR2)
            return value
        if value is not None:
            self._write(bytes([value]))
        self.send(self.client_pid, signal.SIGUSR1)
        return value

    def serve_forever(self) -> None:
        """Wait for SIGUSR1 (bit 1) and SIGUSR2 (bit 0) and handle them forever."""
        user_signals = {signal.SIGUSR1, signal.SIGUSR2}
        signal.pthread_sigmask(signal.SIG_BLOCK, user_signals)
        try:
            while True:
                info = signal.sigwaitinfo(user_signals)
                bit = 1 if info.si_signo == signal.SIGUSR1 else 0
                self.handle_bit(bit, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, user_signals)


def main(argv: Optional[List[str]] = None) -> int:
    """Print the process id, then print every message received."""
    printf("%d\n", os.getpid())
    sys.stdout.flush()
    try:
        Server().serve_forever()
    except SignalError as exc:
        sys.stderr.write(f"{exc}\n")
        return 0
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())