import signal

import pytest

from sigtalk.protocol import (
    ByteAssembler,
    bit_to_signal,
    frame_message,
    iter_bits,
    signal_to_bit,
)


def test_iter_bits_of_letter_a_msb_first():
    assert list(iter_bits(ord("A"))) == [0, 1, 0, 0, 0, 0, 0, 1]


def test_iter_bits_always_eight():
    for value in (0, 1, 127, 128, 255):
        assert len(list(iter_bits(value))) == 8


@pytest.mark.parametrize("value", [-1, 256])
def test_iter_bits_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        list(iter_bits(value))


def test_frame_message_appends_terminator():
    assert frame_message("hi") == b"hi\x00"


def test_frame_message_encodes_utf8():
    assert frame_message("你") == "你".encode("utf-8") + b"\x00"


def test_frame_message_accepts_bytes():
    assert frame_message(b"ok") == b"ok\x00"


def test_frame_empty_message_sends_nothing():
    assert frame_message("") == b""


def test_bit_signal_mapping():
    assert bit_to_signal(1) == signal.SIGUSR1
    assert bit_to_signal(0) == signal.SIGUSR2


@pytest.mark.parametrize("bit", [0, 1])
def test_bit_signal_round_trip(bit):
    assert signal_to_bit(bit_to_signal(bit)) == bit


def test_bit_to_signal_rejects_non_bit():
    with pytest.raises(ValueError):
        bit_to_signal(2)


def test_signal_to_bit_rejects_other_signal():
    with pytest.raises(ValueError):
        signal_to_bit(signal.SIGTERM)


def test_assembler_round_trip():
    assembler = ByteAssembler()
    data = frame_message("héllo wörld")
    out = []
    for byte in data:
        for bit in iter_bits(byte):
            result = assembler.push(bit)
            if result is not None:
                out.append(result)
    assert bytes(out) == data
    assert assembler.pending == 0


def test_assembler_returns_none_until_complete():
    assembler = ByteAssembler()
    results = [assembler.push(bit) for bit in iter_bits(ord("A"))]
    assert results[:7] == [None] * 7
    assert results[7] == ord("A")


def test_assembler_reset_discards_partial():
    assembler = ByteAssembler()
    assembler.push(1)
    assembler.push(1)
    assembler.reset()
    assert assembler.pending == 0
    results = [assembler.push(bit) for bit in iter_bits(ord("z"))]
    assert results[-1] == ord("z")


def test_assembler_rejects_non_bit():
    with pytest.raises(ValueError):
        ByteAssembler().push(3)