#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

All integers handled by the derivation functions are unsigned
and serialized in little-endian byte order.
"""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from ledgerhd.alias import Octets
from ledgerhd.exceptions import LedgerHDRuntimeError, LedgerHDValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    An optional '0x' prefix of the hex-string is discarded.
    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = octets.strip()
        if octets[:2].lower() == "0x":
            octets = octets[2:]
        octets = bytes.fromhex(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise LedgerHDValueError(err_msg)


def int_from_le_bytes(octets: Octets) -> int:
    "Return the unsigned int of a little-endian byte sequence."
    return int.from_bytes(bytes_from_octets(octets), byteorder="little", signed=False)


def le_bytes_from_int(i: int, size: int = 32) -> bytes:
    """Return the size-byte little-endian serialization of i modulo 2^(8*size).

    Carry bits beyond the requested size are dropped.
    """

    mask = (1 << (8 * size)) - 1
    return (i & mask).to_bytes(size, byteorder="little", signed=False)


def padded_le_bytes_from_int(i: int, size: int = 32) -> bytes:
    """Return the size-byte little-endian serialization of i.

    The minimal-length little-endian serialization is truncated to size
    bytes (i.e. carry beyond size bytes is dropped); if the most
    significant byte was zero, and hence missing from the minimal-length
    serialization, exactly one zero byte is appended.

    Any other length mismatch breaks the fixed-width invariant
    and raises LedgerHDRuntimeError.
    """

    if i < 0:
        raise LedgerHDValueError(f"negative integer: {i}")
    nbytes = (i.bit_length() + 7) // 8
    result = i.to_bytes(nbytes, byteorder="little", signed=False)[:size]
    if len(result) != size:
        result += b"\x00"
    if len(result) != size:
        err_msg = f"fixed-width serialization failure: {len(result)} bytes"
        err_msg += f" instead of {size}"
        raise LedgerHDRuntimeError(err_msg)
    return result
