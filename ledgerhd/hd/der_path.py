#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hard-only derivation path.

A derivation path can be represented as:

- "m/44'/354'/0'/0'/0'" or "44h/354h/0h/0h/0h" string
- sequence of integer indexes (even a single int)
- bytes (multiples of 4-bytes little-endian index)

Only hardened derivation is available for ed25519 extended private
keys: in string representations every index is hardened, with or
without the hardening symbol; integer and bytes representations
are expected to already include the 0x80000000 hardening offset.
"""

from typing import List

from ledgerhd.alias import DerPath
from ledgerhd.exceptions import LedgerHDTypeError, LedgerHDValueError

HARDENED = 0x80000000

# default hardening symbol among the possible ones: "h", "H", "'"
_HARDENING = "'"


def int_from_index_str(s: str) -> int:
    "Return the hardened index of a path component, e.g. '44' or '44h'."

    s = s.strip().lower()
    if s and s[-1] in ("'", "h"):
        s = s[:-1].strip()

    try:
        index = int(s)
    except ValueError as e:
        raise LedgerHDValueError(f"invalid path component: '{s}'") from e
    if not 0 <= index < HARDENED:
        raise LedgerHDValueError(f"invalid index: {index}")
    return index + HARDENED


def str_from_index_int(i: int, hardening: str = _HARDENING) -> str:

    if hardening not in ("'", "h", "H"):
        raise LedgerHDValueError(f"invalid hardening symbol: {hardening}")
    if not HARDENED <= i <= 0xFFFFFFFF:
        raise LedgerHDValueError(f"invalid hardened index: {i}")
    return str(i - HARDENED) + hardening


def _indexes_from_der_path_str(der_path: str, skip_m: bool = True) -> List[int]:

    steps = [x.strip().lower() for x in der_path.split("/")]
    if skip_m and steps[0] == "m":
        steps = steps[1:]

    return [int_from_index_str(s) for s in steps if s != ""]


def _assert_valid_index(i: int) -> int:
    # bool is an int subclass, but not an index
    if not isinstance(i, int) or isinstance(i, bool):
        raise LedgerHDTypeError(f"invalid index type: {type(i).__name__}")
    if not 0 <= i <= 0xFFFFFFFF:
        raise LedgerHDValueError(f"invalid index: {i}")
    return i


def _assert_valid_depth(indexes: List[int]) -> List[int]:
    if len(indexes) > 255:
        err_msg = f"depth greater than 255: {len(indexes)}"
        raise LedgerHDValueError(err_msg)
    return indexes


def indexes_from_der_path(der_path: DerPath) -> List[int]:

    if isinstance(der_path, str):
        indexes = _indexes_from_der_path_str(der_path)
    elif isinstance(der_path, int):
        indexes = [_assert_valid_index(der_path)]
    elif isinstance(der_path, bytes):
        if len(der_path) % 4 != 0:
            err_msg = f"index are not a multiple of 4-bytes: {len(der_path)}"
            raise LedgerHDValueError(err_msg)
        indexes = [
            int.from_bytes(der_path[n : n + 4], byteorder="little", signed=False)
            for n in range(0, len(der_path), 4)
        ]
    else:
        # Iterable[int]
        indexes = [_assert_valid_index(i) for i in der_path]

    return _assert_valid_depth(indexes)


def str_from_der_path(der_path: DerPath, hardening: str = _HARDENING) -> str:
    indexes = indexes_from_der_path(der_path)
    result = "/".join(str_from_index_int(i, hardening) for i in indexes)
    return "m" + ("/" + result if result else "")


def bytes_from_der_path(der_path: DerPath) -> bytes:
    indexes = indexes_from_der_path(der_path)
    result = [i.to_bytes(4, byteorder="little", signed=False) for i in indexes]
    return b"".join(result)


def ledger_der_path(slip44: int, account: int = 0, address_index: int = 0) -> str:
    """Return the Ledger derivation path for the given coin type.

    The path is m/44'/slip44'/account'/0'/address_index',
    with all levels hardened.
    """
    for label, value in (
        ("slip44", slip44),
        ("account", account),
        ("address index", address_index),
    ):
        if not 0 <= value < HARDENED:
            raise LedgerHDValueError(f"invalid {label}: {value}")
    return f"m/44'/{slip44}'/{account}'/0'/{address_index}'"
