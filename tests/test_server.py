import io
import signal

import pytest

from minitalk.protocol import encode_byte, encode_message
from minitalk.server import Server
from minitalk.signals import SignalError


def make_server():
    sent = []
    out = io.BytesIO()
    server = Server(out, lambda pid, signum: sent.append((pid, signum)))
    return server, out, sent


def test_single_byte_is_written_and_every_bit_acknowledged():
    server, out, sent = make_server()
    results = [server.handle_bit(bit, 4242) for bit in encode_byte(ord("A"))]
    assert results[-1] == ord("A")
    assert results[:-1] == [None] * 7
    assert out.getvalue() == b"A"
    assert sent == [(4242, signal.SIGUSR1)] * 8


def test_zero_byte_ends_message_with_newline_and_sigusr2():
    server, out, sent = make_server()
    for bit in encode_message("hi"):
        server.handle_bit(bit, 99)
    assert out.getvalue() == b"hi\n"
    assert sent[-1] == (99, signal.SIGUSR2)
    assert sent[:-1] == [(99, signal.SIGUSR1)] * (len(sent) - 1)


def test_zero_sender_keeps_previous_client():
    server, _, sent = make_server()
    server.handle_bit(1, 77)
    server.handle_bit(0, 0)
    server.handle_bit(1, None)
    assert [pid for pid, _ in sent] == [77, 77, 77]
    assert server.client_pid == 77


def test_no_client_known_raises():
    server, _, _ = make_server()
    with pytest.raises(SignalError):
        server.handle_bit(1, 0)


def test_invalid_bit_rejected():
    server, _, _ = make_server()
    with pytest.raises(ValueError):
        server.handle_bit(2, 10)


def test_utf8_bytes_pass_through():
    server, out, _ = make_server()
    for bit in encode_message("é"):
        server.handle_bit(bit, 5)
    assert out.getvalue().decode("utf-8") == "é\n"