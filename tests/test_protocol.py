import signal

import pytest

from sigtalk.protocol import BitAssembler, bit_for_signal, encode_bits, signal_for_bit


def test_encode_single_byte_high_bit_first():
    assert list(encode_bits("A")) == [0, 1, 0, 0, 0, 0, 0, 1]


def test_encode_empty_message():
    assert list(encode_bits("")) == []


def test_encode_length_is_eight_per_byte():
    message = "héllo"
    assert len(list(encode_bits(message))) == 8 * len(message.encode("utf-8"))


def test_str_and_bytes_encode_alike():
    assert list(encode_bits("hi there")) == list(encode_bits(b"hi there"))


def test_signal_mapping():
    assert signal_for_bit(1) == signal.SIGUSR1
    assert signal_for_bit(0) == signal.SIGUSR2


@pytest.mark.parametrize("bit", [0, 1])
def test_signal_round_trip(bit):
    assert bit_for_signal(signal_for_bit(bit)) == bit


def test_unknown_signal_rejected():
    with pytest.raises(ValueError):
        bit_for_signal(signal.SIGINT)


def test_bad_bit_rejected():
    with pytest.raises(ValueError):
        signal_for_bit(2)


@pytest.mark.parametrize("data", [b"Hello, world!", bytes(range(256)), "ünïcode ✓".encode()])
def test_assembler_round_trip(data):
    assembler = BitAssembler()
    out = bytes(
        byte for byte in (assembler.feed(bit) for bit in encode_bits(data)) if byte is not None
    )
    assert out == data
    assert assembler.pending == 0


def test_assembler_partial_byte_returns_none():
    assembler = BitAssembler()
    results = [assembler.feed(bit) for bit in [1, 0, 1]]
    assert results == [None, None, None]
    assert assembler.pending == 3


def test_assembler_rejects_bad_bit():
    with pytest.raises(ValueError):
        BitAssembler().feed(5)