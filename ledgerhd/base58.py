#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58 encoding and decoding functions.

Base58 omits the similar-looking letters
0 (zero), O (capital o), I (capital i), and l (lower case L)
to avoid ambiguity when printed; moreover, it removes '+' and '/'
so that a double-click does select the whole string.

No checksum is added here: SS58 addresses carry their own
BLAKE2b checksum (see ledgerhd.ss58).

The interface mimics the native python3 base64 interface, i.e.
it supports encoding bytes-like objects to ASCII bytes,
and decoding ASCII bytes-like objects or ASCII strings to bytes.
"""

from typing import Optional

from ledgerhd.alias import Octets, String
from ledgerhd.exceptions import LedgerHDValueError
from ledgerhd.utils import bytes_from_octets

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
__BASE = len(_ALPHABET)


def _b58encode_from_int(i: int) -> bytes:

    result = b""
    while i or len(result) == 0:
        i, idx = divmod(i, __BASE)
        result = _ALPHABET[idx : idx + 1] + result

    return result


def b58encode(v: Octets, in_size: Optional[int] = None) -> bytes:
    """Encode a bytes-like object using Base58."""

    v = bytes_from_octets(v, in_size)

    # preserve leading-0s
    # leading-0s become base58 leading-1s
    n_pad = len(v)
    v = v.lstrip(b"\0")
    vlen = len(v)
    n_pad -= vlen
    result = _ALPHABET[:1] * n_pad

    if vlen:
        i = int.from_bytes(v, byteorder="big", signed=False)
        result += _b58encode_from_int(i)

    return result


def _b58decode_to_int(v: bytes) -> int:

    i = 0
    for char in v:
        i *= __BASE
        i += _ALPHABET.index(char)
    return i


def b58decode(v: String, out_size: Optional[int] = None) -> bytes:
    """Decode a Base58 encoded bytes-like object or ASCII string.

    Optionally, it also ensures required output size.
    """

    if isinstance(v, str):
        # do not trim spaces
        try:
            v = v.encode("ascii")
        except UnicodeEncodeError as e:
            msg = "Base58 string contains invalid characters"
            raise LedgerHDValueError(msg) from e

    if any(x not in _ALPHABET for x in v):
        msg = "Base58 string contains invalid characters"
        raise LedgerHDValueError(msg)

    # preserve leading-0s
    # base58 leading-1s become leading-0s
    n_pad = len(v)
    v = v.lstrip(_ALPHABET[:1])
    vlen = len(v)
    n_pad -= vlen
    result = b"\0" * n_pad

    if vlen:
        i = _b58decode_to_int(v)
        nbytes = (i.bit_length() + 7) // 8
        result = result + i.to_bytes(nbytes, byteorder="big", signed=False)

    if out_size is None or len(result) == out_size:
        return result

    err_msg = f"invalid decoded size: {len(result)} bytes instead of {out_size}"
    raise LedgerHDValueError(err_msg)
