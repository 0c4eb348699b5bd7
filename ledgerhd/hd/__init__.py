#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ledgerhd.hd."""

from ledgerhd.hd.der_path import (
    HARDENED,
    bytes_from_der_path,
    indexes_from_der_path,
    int_from_index_str,
    ledger_der_path,
    str_from_der_path,
    str_from_index_int,
)
from ledgerhd.hd.xprv import (
    ExtendedPrivateKey,
    XPrv,
    derive,
    derive_hard,
    mxprv_from_seed_phrase,
    rootxprv_from_seed,
    seed_from_seed_phrase,
    xprv_from_xkey,
)

__all__ = [
    "HARDENED",
    "bytes_from_der_path",
    "indexes_from_der_path",
    "int_from_index_str",
    "ledger_der_path",
    "str_from_der_path",
    "str_from_index_int",
    "ExtendedPrivateKey",
    "XPrv",
    "derive",
    "derive_hard",
    "mxprv_from_seed_phrase",
    "rootxprv_from_seed",
    "seed_from_seed_phrase",
    "xprv_from_xkey",
]
