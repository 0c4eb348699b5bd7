#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ed25519 keypair of a derived extended private key.

The kL field of the extended private key is used as a standard
RFC 8032 ed25519 seed: it is hashed and clamped again by the
key generation, it is not used as a raw scalar.
"""

from dataclasses import dataclass
from typing import Type, TypeVar

from nacl.signing import SigningKey

from ledgerhd.alias import Octets
from ledgerhd.exceptions import LedgerHDValueError
from ledgerhd.hd.xprv import XPrv, xprv_from_xkey
from ledgerhd.utils import bytes_from_octets

_KeyPair = TypeVar("_KeyPair", bound="KeyPair")


@dataclass(frozen=True)
class KeyPair:
    # 32 bytes ed25519 seed
    private_key: bytes
    public_key: bytes

    def __init__(
        self, private_key: Octets, public_key: Octets, check_validity: bool = True
    ) -> None:

        object.__setattr__(self, "private_key", bytes_from_octets(private_key))
        object.__setattr__(self, "public_key", bytes_from_octets(public_key))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        for key in ("private_key", "public_key"):
            value = getattr(self, key)
            if len(value) != 32:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes instead of 32"
                raise LedgerHDValueError(err_msg)

        if pub_key_from_seed(self.private_key) != self.public_key:
            err_msg = "public key does not match private key: "
            err_msg += f"0x{self.public_key.hex()}"
            raise LedgerHDValueError(err_msg)

    @classmethod
    def from_seed(cls: Type[_KeyPair], seed: Octets) -> _KeyPair:
        "Return the ed25519 keypair of a 32 bytes seed."

        seed = bytes_from_octets(seed, 32)
        return cls(seed, pub_key_from_seed(seed), check_validity=False)


def pub_key_from_seed(seed: Octets) -> bytes:
    "Return the 32 bytes ed25519 public key of a 32 bytes seed."

    seed = bytes_from_octets(seed, 32)
    return SigningKey(seed).verify_key.encode()


def keypair_from_seed(seed: Octets) -> KeyPair:
    return KeyPair.from_seed(seed)


def keypair_from_xprv(xprv: XPrv) -> KeyPair:
    "Return the ed25519 keypair of an extended private key."

    return KeyPair.from_seed(xprv_from_xkey(xprv).ed25519_seed)
