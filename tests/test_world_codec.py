#!filepath: tests/test_world_codec.py
import random

import pytest

from nglog.codec import decode_world
from nglog.errors import MalformedInput


def test_decode_empty():
    assert decode_world(b"") == b""


def test_decode_pairwise_xor():
    data = bytes([0x01, 0x03, 0xFF, 0x0F, 0x2A, 0x2A])
    assert decode_world(data) == bytes([0x02, 0xF0, 0x00])


def test_decode_halves_length():
    rnd = random.Random(7)
    data = bytes(rnd.randrange(256) for _ in range(200))
    out = decode_world(data)

    assert len(out) == 100
    for i, b in enumerate(out):
        assert b == data[2 * i] ^ data[2 * i + 1]


def test_decode_accepts_bytearray_and_memoryview():
    data = bytearray([0x10, 0x01, 0x20, 0x02])
    assert decode_world(data) == b"\x11\x22"
    assert decode_world(memoryview(bytes(data))) == b"\x11\x22"


@pytest.mark.parametrize("n", [1, 3, 5, 101])
def test_decode_rejects_odd_length(n):
    with pytest.raises(MalformedInput) as ei:
        decode_world(b"\x00" * n)

    assert ei.value.reason == "non-even length"
    assert ei.value.line_no is None


def test_xor_identity_restores_plaintext(encode_world):
    """a ^ K ^ K == a"""
    plain = "2.0\tA\tB\nä\t€".encode("utf-8")
    for key in (0x00, 0x2A, 0xFF):
        assert decode_world(encode_world(plain, key)) == plain
