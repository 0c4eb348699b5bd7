#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ledgerhd.base58` module."

import pytest

from ledgerhd.base58 import (
    _b58decode_to_int,
    _b58encode_from_int,
    b58decode,
    b58encode,
)
from ledgerhd.exceptions import LedgerHDValueError


def test_empty() -> None:
    assert b58encode(b"") == b""
    assert b58decode(b58encode(b"")) == b""

    assert b58decode(b58encode(b""), 0) == b""


def test_hello_world() -> None:
    assert b58encode(b"hello world") == b"StV1DL6CwTryKyV"
    assert b58decode(b"StV1DL6CwTryKyV") == b"hello world"
    assert b58decode("StV1DL6CwTryKyV") == b"hello world"

    assert b58decode(b58encode(b"hello world"), 11) == b"hello world"


def test_leading_zeros() -> None:
    assert b58encode(b"\x00\x00hello world") == b"11StV1DL6CwTryKyV"
    assert b58decode(b"11StV1DL6CwTryKyV") == b"\x00\x00hello world"

    assert b58decode(b58encode(b"\x00\x00hello world"), 13) == b"\x00\x00hello world"


def test_exceptions() -> None:

    encoded = b58encode(b"hello world")
    b58decode(encoded, 11)

    wrong_length = len(encoded) - 1
    with pytest.raises(LedgerHDValueError, match="invalid decoded size: "):
        b58decode(encoded, wrong_length)

    with pytest.raises(LedgerHDValueError, match="invalid characters"):
        b58decode("StV1DL6CwTryKy0")

    err_msg = "Base58 string contains invalid characters"
    with pytest.raises(LedgerHDValueError, match=err_msg):
        b58decode("hèllo world")

    with pytest.raises(LedgerHDValueError, match="invalid size: "):
        b58encode(b"hello world", 12)


def test_integers() -> None:
    digits = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    for i in range(len(digits)):
        char = digits[i : i + 1]
        assert _b58decode_to_int(char) == i
        assert _b58encode_from_int(i) == char
    number = (
        "0111d38e5fc9071ffcd20b4a763cc9ae4f252bb4e4"
        "8fd66a835e252ada93ff480d6dd43dc62a641155a5"
    )
    n = int(number, 16)
    assert _b58decode_to_int(digits) == n
    assert _b58encode_from_int(n) == digits[1:]
