#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ledgerhd.ss58` module."

import pytest

from ledgerhd import base58
from ledgerhd.exceptions import LedgerHDValueError
from ledgerhd.ss58 import (
    prefix_from_ss58_format,
    ss58_decode,
    ss58_encode,
    ss58_format_from_address,
)

# well-known development account //Alice
ALICE = "d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"


def test_well_known_addresses() -> None:

    test_vectors = [
        (42, "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"),
        (0, "15oF4uVJwmo4TdGW7VfQxNLavjCXviqxT9S1MgbjMNHr6Sp5"),
        (2, "HNZata7iMYWmk5RvZRTiAsSDhV8366zq2YGb3tLH5Upf74F"),
    ]
    for ss58_format, address in test_vectors:
        assert ss58_encode(ALICE, ss58_format) == address
        assert ss58_encode(bytes.fromhex(ALICE), ss58_format) == address
        assert ss58_decode(address) == bytes.fromhex(ALICE)
        assert ss58_decode(address, ss58_format) == bytes.fromhex(ALICE)
        assert ss58_decode(" " + address + " ") == bytes.fromhex(ALICE)
        assert ss58_format_from_address(address) == ss58_format

    # default is the generic substrate format
    assert ss58_encode(ALICE) == test_vectors[0][1]


def test_prefix() -> None:

    assert prefix_from_ss58_format(0) == b"\x00"
    assert prefix_from_ss58_format(63) == b"\x3f"

    for ss58_format in (64, 255, 1284, 16383):
        prefix = prefix_from_ss58_format(ss58_format)
        assert len(prefix) == 2
        assert 0x40 <= prefix[0] < 0x80
        address = ss58_encode(ALICE, ss58_format)
        assert ss58_format_from_address(address) == ss58_format
        assert ss58_decode(address, ss58_format) == bytes.fromhex(ALICE)

    for ss58_format in (-1, 46, 47, 16384):
        with pytest.raises(LedgerHDValueError, match="invalid ss58 format: "):
            prefix_from_ss58_format(ss58_format)


def test_exceptions() -> None:

    address = ss58_encode(ALICE, 2)

    with pytest.raises(LedgerHDValueError, match="invalid ss58 format: "):
        ss58_decode(address, 0)

    data = base58.b58decode(address)
    wrong_checksum = data[:-2] + bytes([data[-2] ^ 1, data[-1]])
    with pytest.raises(LedgerHDValueError, match="invalid checksum: "):
        ss58_decode(base58.b58encode(wrong_checksum))

    with pytest.raises(LedgerHDValueError, match="invalid ss58 decoded size: "):
        ss58_decode(base58.b58encode(data[:-1]))

    # one-byte prefix with the size of a two-byte prefix address
    with pytest.raises(LedgerHDValueError, match="invalid ss58 decoded size: "):
        ss58_decode(base58.b58encode(data + b"\x00"))

    with pytest.raises(LedgerHDValueError, match="invalid ss58 prefix: "):
        ss58_decode(base58.b58encode(b"\x80" + data[1:]))

    with pytest.raises(LedgerHDValueError, match="invalid characters"):
        ss58_decode("1é")
    with pytest.raises(LedgerHDValueError, match="invalid characters"):
        ss58_decode(address[:-1] + "0")

    with pytest.raises(LedgerHDValueError, match="invalid size: "):
        ss58_encode(ALICE[:-2], 0)
