#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib
import hmac

from ledgerhd.alias import Octets
from ledgerhd.utils import bytes_from_octets


def hmac_sha256(key: bytes, octets: Octets) -> bytes:
    """Return the HMAC-SHA256(key, *) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hmac.new(key, octets, "sha256").digest()


def hmac_sha512(key: bytes, octets: Octets) -> bytes:
    """Return the HMAC-SHA512(key, *) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hmac.new(key, octets, "sha512").digest()


def pbkdf2_sha512(password: bytes, salt: bytes, iterations: int = 2048) -> bytes:
    """Return the 64 bytes PBKDF2-HMAC-SHA512 derived key."""
    return hashlib.pbkdf2_hmac("sha512", password, salt, iterations, 64)


def blake2b_512(octets: Octets) -> bytes:
    """Return the BLAKE2b-512(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.blake2b(octets, digest_size=64).digest()
