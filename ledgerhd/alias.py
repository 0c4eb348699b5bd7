#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Sequence, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "0xdeadbeef"
#
# use ledgerhd.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for extended private keys (96 bytes),
# ed25519 seeds and public keys (32 bytes), chain codes (32 bytes), etc.
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for 'ascii' strings like SS58 addresses:
# "15oF4uVJwmo4TdGW7VfQxNLavjCXviqxT9S1MgbjMNHr6Sp5"
#
# leading/trailing blanks should always be stripped
#     if isinstance(address, str):
#         address = address.strip()
String = Union[bytes, str]

# A derivation path can be represented as:
#
# - "m/44'/354'/0'/0'/0'" or "44h/354h/0h/0h/0h" string
# - sequence of integer indexes (even a single int)
# - bytes (multiples of 4-bytes little-endian index)
DerPath = Union[str, Sequence[int], int, bytes]
