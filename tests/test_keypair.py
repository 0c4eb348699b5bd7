#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ledgerhd.keypair` module."

import pytest
from nacl.signing import SigningKey

from ledgerhd.exceptions import LedgerHDValueError
from ledgerhd.hd.xprv import derive, mxprv_from_seed_phrase
from ledgerhd.keypair import (
    KeyPair,
    keypair_from_seed,
    keypair_from_xprv,
    pub_key_from_seed,
)

# RFC 8032 section 7.1 test vectors
RFC8032_VECTORS = [
    (
        "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60",
        "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a",
    ),
    (
        "4ccd089b28ff96da9db6c346ec114e0f5b8a319f35aba624da8cf6ed4fb8a6fb",
        "3d4017c3e843895a92b70aa74d1b7ebc9c982ccf2ec4968cc0cd55f12af4660c",
    ),
]


def test_rfc8032() -> None:

    for seed, pub_key in RFC8032_VECTORS:
        assert pub_key_from_seed(seed).hex() == pub_key
        keypair = keypair_from_seed(seed)
        assert keypair.private_key.hex() == seed
        assert keypair.public_key.hex() == pub_key
        assert keypair == KeyPair(seed, pub_key)
        assert keypair == KeyPair.from_seed(bytes.fromhex(seed))


def test_keypair_from_xprv() -> None:

    mnemonic = "abandon " * 11 + "about"
    xprv = derive(mxprv_from_seed_phrase(mnemonic), "m/44'/434'/0'/0'/0'")
    keypair = keypair_from_xprv(xprv)
    assert keypair.private_key == xprv.kl
    assert keypair.public_key == SigningKey(xprv.kl).verify_key.encode()
    assert keypair == keypair_from_xprv(xprv.serialize())
    assert keypair == keypair_from_xprv(xprv.hex())

    with pytest.raises(LedgerHDValueError, match="invalid extended private key length: "):
        keypair_from_xprv(xprv.serialize()[:-1])


def test_exceptions() -> None:

    seed, pub_key = RFC8032_VECTORS[0]
    other_pub_key = RFC8032_VECTORS[1][1]

    with pytest.raises(LedgerHDValueError, match="public key does not match"):
        KeyPair(seed, other_pub_key)
    KeyPair(seed, other_pub_key, check_validity=False)

    with pytest.raises(LedgerHDValueError, match="invalid private_key length: "):
        KeyPair(seed[:-2], pub_key)
    with pytest.raises(LedgerHDValueError, match="invalid public_key length: "):
        KeyPair(seed, pub_key + "00")

    with pytest.raises(LedgerHDValueError, match="invalid size: "):
        keypair_from_seed(seed + "00")
    with pytest.raises(LedgerHDValueError, match="invalid size: "):
        pub_key_from_seed(seed[:-2])
