#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ledger-style BIP32-Ed25519 hard-only derivation.

The root extended private key is obtained from a seed phrase
as done by Ledger devices for ed25519 based chains
(e.g. Polkadot and Kusama), then children are derived with the
hardened derivation of the BIP32-Ed25519 scheme by
Dmitry Khovratovich and Jason Law.

An extended private key is 96 bytes:

- [  :32] kL, left key material (the ed25519 seed of the leaf key)
- [32:64] kR, right key material
- [64:96] chain code

No reduction modulo the ed25519 group order is performed on the child
kL and kR: the sums are just truncated to 256 bits.
"""

from dataclasses import dataclass
from typing import Type, TypeVar, Union

from ledgerhd.alias import DerPath, Octets
from ledgerhd.exceptions import (
    LedgerHDRuntimeError,
    LedgerHDTypeError,
    LedgerHDValueError,
)
from ledgerhd.hashes import hmac_sha256, hmac_sha512, pbkdf2_sha512
from ledgerhd.hd.der_path import indexes_from_der_path
from ledgerhd.utils import (
    bytes_from_octets,
    int_from_le_bytes,
    le_bytes_from_int,
    padded_le_bytes_from_int,
)

_ED25519_SEED = b"ed25519 seed"

# each round has a 1/2 probability of success
_MAX_ROUNDS = 1024

_REQUIRED_LENGTH = 96

_XPrv = TypeVar("_XPrv", bound="ExtendedPrivateKey")


@dataclass(frozen=True)
class ExtendedPrivateKey:
    kl: bytes
    kr: bytes
    chain_code: bytes

    def __init__(
        self,
        kl: Octets,
        kr: Octets,
        chain_code: Octets,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "kl", bytes_from_octets(kl))
        object.__setattr__(self, "kr", bytes_from_octets(kr))
        object.__setattr__(self, "chain_code", bytes_from_octets(chain_code))

        if check_validity:
            self.assert_valid()

    @property
    def ed25519_seed(self) -> bytes:
        "Return the 32 bytes seed of the corresponding ed25519 keypair."
        return self.kl

    def assert_valid(self) -> None:

        for key in ("kl", "kr", "chain_code"):
            value = bytes(getattr(self, key))
            if len(value) != 32:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += " instead of 32"
                raise LedgerHDValueError(err_msg)

    def serialize(self, check_validity: bool = True) -> bytes:

        if check_validity:
            self.assert_valid()

        return self.kl + self.kr + self.chain_code

    def hex(self) -> str:
        return self.serialize().hex()

    @classmethod
    def parse(
        cls: Type[_XPrv], xprv_bin: Octets, check_validity: bool = True
    ) -> _XPrv:
        "Return an ExtendedPrivateKey by parsing 96 bytes."

        xprv_bin = bytes_from_octets(xprv_bin)
        if check_validity and len(xprv_bin) != _REQUIRED_LENGTH:
            err_msg = f"invalid extended private key length: {len(xprv_bin)}"
            err_msg += f" instead of {_REQUIRED_LENGTH}"
            raise LedgerHDValueError(err_msg)

        return cls(
            kl=xprv_bin[:32],
            kr=xprv_bin[32:64],
            chain_code=xprv_bin[64:96],
            check_validity=check_validity,
        )


XPrv = Union[ExtendedPrivateKey, Octets]


def xprv_from_xkey(xprv: XPrv) -> ExtendedPrivateKey:
    "Return an ExtendedPrivateKey, parsing bytes or hex-string input."

    if isinstance(xprv, ExtendedPrivateKey):
        return xprv
    return ExtendedPrivateKey.parse(xprv)


def seed_from_seed_phrase(seed_phrase: str, passphrase: str = "") -> bytes:
    """Return the 64 bytes seed of the provided seed phrase.

    The seed phrase is not validated against any wordlist,
    nor normalized: it is used as is.
    """

    password = seed_phrase.encode("utf-8")
    salt = ("mnemonic" + passphrase).encode("utf-8")
    return pbkdf2_sha512(password, salt, 2048)


def rootxprv_from_seed(
    seed: Octets, max_rounds: int = _MAX_ROUNDS
) -> ExtendedPrivateKey:
    """Return the root extended private key from seed.

    kL and kR are obtained by iterated HMAC-SHA512 of the seed
    until the third highest bit of the last byte of kL is clear;
    kL is then clamped as an ed25519 scalar.
    """

    seed = bytes_from_octets(seed)
    chain_code = hmac_sha256(_ED25519_SEED, b"\x01" + seed)

    hmac_ = seed
    for _ in range(max_rounds):
        hmac_ = hmac_sha512(_ED25519_SEED, hmac_)
        if hmac_[31] & 0b00100000 == 0:
            break
    else:
        err_msg = f"no valid root key after {max_rounds} rounds"
        raise LedgerHDRuntimeError(err_msg)

    k = bytearray(hmac_)
    # the lowest 3 bits of the first byte are cleared
    k[0] &= 0b11111000
    # the highest bit of the last byte of kL is cleared
    k[31] &= 0b01111111
    # the second highest bit of the last byte of kL is set
    k[31] |= 0b01000000

    return ExtendedPrivateKey(
        kl=bytes(k[:32]),
        kr=bytes(k[32:]),
        chain_code=chain_code,
    )


def mxprv_from_seed_phrase(
    seed_phrase: str, passphrase: str = ""
) -> ExtendedPrivateKey:
    "Return the root master extended private key of the seed phrase."

    seed = seed_from_seed_phrase(seed_phrase, passphrase)
    return rootxprv_from_seed(seed)


def derive_hard(xprv: XPrv, index: int) -> ExtendedPrivateKey:
    """Hardened Child Key Derivation (CKD).

    The index must already include the 0x80000000 hardening offset:
    it is used as is.
    """

    xprv = xprv_from_xkey(xprv)
    if not isinstance(index, int):
        raise LedgerHDTypeError(f"invalid index type: {type(index).__name__}")
    if not 0 <= index <= 0xFFFFFFFF:
        raise LedgerHDValueError(f"invalid index: {index}")

    data = bytearray(69)
    data[1:65] = xprv.kl + xprv.kr
    data[65:69] = index.to_bytes(4, byteorder="little", signed=False)

    data[0] = 0x00
    z = hmac_sha512(xprv.chain_code, bytes(data))
    data[0] = 0x01
    chain_code = hmac_sha512(xprv.chain_code, bytes(data))[32:]

    kl = int_from_le_bytes(xprv.kl) + int_from_le_bytes(z[:28]) * 8
    kr = int_from_le_bytes(xprv.kr) + int_from_le_bytes(z[32:])

    return ExtendedPrivateKey(
        kl=le_bytes_from_int(kl, 32),
        kr=padded_le_bytes_from_int(kr, 32),
        chain_code=chain_code,
    )


def derive(xprv: XPrv, der_path: DerPath) -> ExtendedPrivateKey:
    """Derive an extended private key across a path of hardened indexes.

    Valid DerPath examples:

    - string like "m/44'/354'/0'/0'/0'" (every level is hardened)
    - iterable integer indexes, including the hardening offset
    - one single integer index, including the hardening offset
    - bytes in multiples of the 4-bytes little-endian index

    DerPath strings are case/blank/extra-slash insensitive
    (e.g. "M /44h / 354' /0H // 0/ 0 / ").
    """

    xprv = xprv_from_xkey(xprv)
    for index in indexes_from_der_path(der_path):
        xprv = derive_hard(xprv, index)
    return xprv
