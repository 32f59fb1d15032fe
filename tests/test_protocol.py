import pytest

from minitalk.protocol import Decoder, encode_byte, encode_message


def _decode_all(bits):
    decoder = Decoder()
    return [msg for msg in (decoder.feed(bit) for bit in bits) if msg is not None]


def test_encode_byte_is_most_significant_first():
    assert encode_byte(ord("A")) == (0, 1, 0, 0, 0, 0, 0, 1)


def test_encode_byte_zero_is_all_zero_bits():
    assert encode_byte(0) == (0,) * 8


def test_encode_byte_negative_is_twos_complement():
    assert encode_byte(-1) == encode_byte(255)
    assert encode_byte(-128) == encode_byte(128)


@pytest.mark.parametrize("value", [256, -129])
def test_encode_byte_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


def test_encode_message_appends_terminator():
    bits = list(encode_message("hi"))
    assert len(bits) == 3 * 8
    assert tuple(bits[-8:]) == encode_byte(0)


def test_encode_empty_message_is_only_terminator():
    assert tuple(encode_message(b"")) == encode_byte(0)


def test_encode_message_stops_at_embedded_nul():
    assert list(encode_message("ab\0cd")) == list(encode_message("ab"))


def test_encode_message_rejects_other_types():
    with pytest.raises(TypeError):
        encode_message(42)


@pytest.mark.parametrize("text", ["", "hello", "héllo wörld", "line\nbreak"])
def test_round_trip_text(text):
    assert _decode_all(encode_message(text)) == [text.encode("utf-8")]


def test_round_trip_several_messages():
    bits = list(encode_message(b"first")) + list(encode_message(b"second"))
    assert _decode_all(bits) == [b"first", b"second"]


def test_feed_returns_none_until_terminator():
    decoder = Decoder()
    results = [decoder.feed(bit) for bit in encode_byte(ord("x"))]
    assert results == [None] * 8
    assert decoder.pending == b"x"
    assert decoder.bits_pending == 0


def test_bits_pending_counts_partial_byte():
    decoder = Decoder()
    for bit in encode_byte(ord("x"))[:5]:
        decoder.feed(bit)
    assert decoder.bits_pending == 5


def test_reset_discards_partial_state():
    decoder = Decoder()
    for bit in list(encode_message(b"abc"))[:13]:
        decoder.feed(bit)
    decoder.reset()
    assert decoder.pending == b""
    assert decoder.bits_pending == 0
    assert _decode_all(encode_message(b"ok")) == [b"ok"]
    results = [decoder.feed(bit) for bit in encode_message(b"ok")]
    assert results[-1] == b"ok"


@pytest.mark.parametrize("bit", [2, -1, "1"])
def test_feed_rejects_non_bits(bit):
    with pytest.raises(ValueError):
        Decoder().feed(bit)