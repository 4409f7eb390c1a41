"""
Unit tests for the tiny BER codec behind DSA key files.
"""

import unittest

import pytest

from sshkeys.ber import BER, BERException


class BERTest(unittest.TestCase):
    def test_encode_small_sequence(self):
        b = BER()
        b.encode([0, 1, 255])
        assert b.asbytes() == b"\x30\x0a\x02\x01\x00\x02\x01\x01\x02\x02\x00\xff"

    def test_long_lengths_use_minimal_length_bytes(self):
        # 200 content bytes need a single length byte: 0x81 0xc8
        value = 1 << (8 * 199)
        b = BER()
        b.encode([value])
        data = b.asbytes()
        assert data[:3] == b"\x30\x81\xcb"
        assert data[3:6] == b"\x02\x81\xc8"

    def test_decode_roundtrips_nested_sequences(self):
        b = BER()
        b.encode([0, [7, -3], 1 << 100])
        assert BER(b.asbytes()).decode() == [0, [7, -3], 1 << 100]

    def test_decode_unknown_type_raises(self):
        # an OCTET STRING inside the sequence
        with pytest.raises(BERException, match="Unknown ber encoding type 4"):
            BER(b"\x30\x03\x04\x01\x00").decode()

    def test_decode_truncated_returns_none(self):
        assert BER(b"\x30\x10\x02\x01").decode() is None

    def test_encode_refuses_other_types(self):
        with pytest.raises(BERException):
            BER().encode("nope")
        with pytest.raises(BERException):
            BER().encode(True)
