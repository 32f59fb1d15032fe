import io
import signal

import pytest

from minitalk.protocol import encode_message
from minitalk.server import Server, banner
from minitalk.signals import SignalError, bit_to_signal

SENDER = 77


def _signals_for(message):
    return [bit_to_signal(bit) for bit in encode_message(message)]


def _make_server():
    out = io.BytesIO()
    replies = []
    server = Server(output=out, reply=lambda pid, bit: replies.append((pid, bit)))
    return server, out, replies


def _deliver(server, message):
    return [server.handle_signal(signum, SENDER) for signum in _signals_for(message)]


def test_message_is_written_to_output():
    server, out, _ = _make_server()
    _deliver(server, b"hello")
    assert out.getvalue() == b"hello"


def test_message_returned_only_on_last_bit():
    server, _, _ = _make_server()
    results = _deliver(server, b"hi")
    assert results[-1] == b"hi"
    assert all(result is None for result in results[:-1])


def test_every_bit_is_acknowledged_and_completion_announced():
    server, _, replies = _make_server()
    signals = _signals_for(b"ok")
    for signum in signals:
        server.handle_signal(signum, SENDER)
    assert len(replies) == len(signals) + 1
    assert replies[-2:] == [(SENDER, 1), (SENDER, 0)]
    assert all(reply == (SENDER, 0) for reply in replies[:-2])


def test_consecutive_messages_are_separate():
    server, out, _ = _make_server()
    first = _deliver(server, b"ab")
    second = _deliver(server, b"cd")
    assert first[-1] == b"ab"
    assert second[-1] == b"cd"
    assert out.getvalue() == b"abcd"


def test_empty_message():
    server, out, replies = _make_server()
    results = _deliver(server, b"")
    assert results[-1] == b""
    assert out.getvalue() == b""
    assert (SENDER, 1) in replies


def test_utf8_message_round_trip():
    server, out, _ = _make_server()
    _deliver(server, "héllo")
    assert out.getvalue().decode("utf-8") == "héllo"


def test_unknown_signal_rejected():
    server, _, replies = _make_server()
    with pytest.raises(ValueError):
        server.handle_signal(signal.SIGTERM, SENDER)
    assert replies == []


def test_reply_failure_propagates():
    def failing_reply(pid, bit):
        raise SignalError(3, "could not signal")

    server = Server(output=io.BytesIO(), reply=failing_reply)
    with pytest.raises(SignalError):
        server.handle_signal(signal.SIGUSR1, SENDER)


def test_banner_names_pid():
    assert banner(4242) == "\x1b[92mserver [PID = 4242]\n\x1b[0m"