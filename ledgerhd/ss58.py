#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SS58 address encoding and decoding functions.

SS58 is the address format of Substrate based chains:

    base58(prefix | public_key | checksum)

where prefix is the network ss58 format (one byte for 0..63, two bytes
for 64..16383) and the checksum is made of the first two bytes of

    BLAKE2b-512(b"SS58PRE" | prefix | public_key)

https://docs.substrate.io/reference/address-formats/
"""

from typing import Optional, Tuple

from ledgerhd import base58
from ledgerhd.alias import Octets, String
from ledgerhd.exceptions import LedgerHDValueError
from ledgerhd.hashes import blake2b_512
from ledgerhd.utils import bytes_from_octets

_SS58_PREFIX = b"SS58PRE"
_CHECKSUM_LENGTH = 2
# 46 and 47 are reserved: they are not valid network formats
_RESERVED_FORMATS = (46, 47)


def _checksum(data: bytes) -> bytes:
    return blake2b_512(_SS58_PREFIX + data)[:_CHECKSUM_LENGTH]


def prefix_from_ss58_format(ss58_format: int) -> bytes:

    if not 0 <= ss58_format < 16384 or ss58_format in _RESERVED_FORMATS:
        raise LedgerHDValueError(f"invalid ss58 format: {ss58_format}")

    if ss58_format < 64:
        return bytes([ss58_format])

    first = ((ss58_format & 0b0000_0000_1111_1100) >> 2) | 0b0100_0000
    second = (ss58_format >> 8) | ((ss58_format & 0b0000_0000_0000_0011) << 6)
    return bytes([first, second])


def _ss58_format_from_prefix(data: bytes) -> Tuple[int, int]:
    "Return ss58 format and prefix length."

    if data[0] < 64:
        return data[0], 1
    if data[0] < 128:
        lower = ((data[0] & 0b0011_1111) << 2) | (data[1] >> 6)
        upper = data[1] & 0b0011_1111
        return lower | (upper << 8), 2
    raise LedgerHDValueError(f"invalid ss58 prefix: 0x{data[:1].hex()}")


def ss58_encode(public_key: Octets, ss58_format: int = 42) -> str:
    """Return the SS58 address of a 32 bytes public key."""

    public_key = bytes_from_octets(public_key, 32)
    data = prefix_from_ss58_format(ss58_format) + public_key
    return base58.b58encode(data + _checksum(data)).decode("ascii")


def ss58_decode(address: String, ss58_format: Optional[int] = None) -> bytes:
    """Return the 32 bytes public key of a SS58 address.

    If ss58_format is provided, the address is also
    required to belong to that network.
    """

    if isinstance(address, str):
        address = address.strip()

    data = base58.b58decode(address)
    if len(data) not in (35, 36):
        raise LedgerHDValueError(f"invalid ss58 decoded size: {len(data)} bytes")

    format_, prefix_length = _ss58_format_from_prefix(data)
    if format_ in _RESERVED_FORMATS:
        raise LedgerHDValueError(f"invalid ss58 format: {format_}")
    if len(data) != prefix_length + 32 + _CHECKSUM_LENGTH:
        err_msg = f"invalid ss58 decoded size: {len(data)} bytes"
        err_msg += f" with {prefix_length}-byte prefix"
        raise LedgerHDValueError(err_msg)

    data, checksum = data[:-_CHECKSUM_LENGTH], data[-_CHECKSUM_LENGTH:]
    if checksum != _checksum(data):
        err_msg = f"invalid checksum: 0x{checksum.hex()}"
        err_msg += f" instead of 0x{_checksum(data).hex()}"
        raise LedgerHDValueError(err_msg)

    if ss58_format is not None and format_ != ss58_format:
        err_msg = f"invalid ss58 format: {format_} instead of {ss58_format}"
        raise LedgerHDValueError(err_msg)

    return data[prefix_length:]


def ss58_format_from_address(address: String) -> int:
    "Return the ss58 format of a valid SS58 address."

    if isinstance(address, str):
        address = address.strip()
    ss58_decode(address)
    return _ss58_format_from_prefix(base58.b58decode(address))[0]
