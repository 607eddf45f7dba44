import signal

import pytest

from minitalk.protocol import Bit, CharDecoder, encode_char, to_binary


def test_bit_signals_match_the_two_user_signals():
    assert Bit.from_signal(signal.SIGUSR1) is Bit.ZERO
    assert Bit.from_signal(signal.SIGUSR2) is Bit.ONE
    assert Bit.ZERO.signal == signal.SIGUSR1
    assert Bit.ONE.signal == signal.SIGUSR2


def test_bit_from_signal_round_trip():
    for bit in Bit:
        assert Bit.from_signal(bit.signal) is bit


def test_bit_from_unrelated_signal_raises():
    with pytest.raises(ValueError):
        Bit.from_signal(signal.SIGINT)


def test_encode_char_is_least_significant_first():
    assert encode_char("A") == [1, 0, 0, 0, 0, 0, 1, 0]


def test_encode_char_always_gives_eight_bits():
    for value in range(256):
        assert len(encode_char(value)) == 8


def test_encode_accepts_str_bytes_and_int_alike():
    assert encode_char("z") == encode_char(b"z") == encode_char(ord("z"))


def test_negative_int_encodes_as_its_twos_complement_byte():
    assert encode_char(-1) == encode_char(255)
    assert encode_char(-128) == encode_char(128)


@pytest.mark.parametrize("bad", ["ab", "", "\u0100", 256, -129, b"xy"])
def test_encode_rejects_values_wider_than_a_byte(bad):
    with pytest.raises(ValueError):
        encode_char(bad)


def test_decoder_round_trip_for_every_byte():
    for value in range(256):
        decoder = CharDecoder()
        for bit in encode_char(value):
            decoder.feed(bit)
        assert decoder.value() == value


def test_decoder_starts_empty():
    assert CharDecoder().value() == 0


def test_decoder_keeps_only_the_latest_eight_bits():
    decoder = CharDecoder()
    for bit in encode_char("x") + encode_char("y"):
        decoder.feed(bit)
    assert decoder.value() == ord("y")


def test_feed_returns_the_current_value():
    decoder = CharDecoder()
    returned = [decoder.feed(bit) for bit in encode_char("q")]
    assert returned[-1] == decoder.value() == ord("q")


def test_to_binary_pins_a_worked_example():
    assert to_binary(ord("A")) == "01000001"


def test_to_binary_round_trip():
    for value in range(256):
        text = to_binary(value)
        assert len(text) == 8
        assert int(text, 2) == value


def test_to_binary_uses_the_low_byte_only():
    assert to_binary(-1) == to_binary(255)
    assert to_binary(0x1FF) == to_binary(0xFF)