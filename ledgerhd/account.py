#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ledger account derivation from seed phrase.

The account keypair is derived along the Ledger path
m/44'/slip44'/account'/0'/address_index'
and its public key is encoded as SS58 address for the selected
network, and for Polkadot and Kusama too.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ledgerhd.alias import DerPath
from ledgerhd.hd.der_path import ledger_der_path, str_from_der_path
from ledgerhd.hd.xprv import derive, mxprv_from_seed_phrase
from ledgerhd.keypair import KeyPair, keypair_from_xprv
from ledgerhd.network import NETWORKS, network_from_name
from ledgerhd.ss58 import ss58_encode


@dataclass(frozen=True)
class LedgerAccount:
    network: str
    der_path: str
    keypair: KeyPair
    # network name: SS58 address
    addresses: Mapping[str, str]

    def __post_init__(self) -> None:
        # read-only copy
        object.__setattr__(self, "addresses", MappingProxyType(dict(self.addresses)))

    @property
    def address(self) -> str:
        "Return the SS58 address on the account network."
        return self.addresses[self.network]


def addresses_from_pub_key(
    public_key: bytes, network: str = "polkadot"
) -> Dict[str, str]:
    "Return the SS58 addresses of the network, Polkadot, and Kusama."

    networks = [
        network_from_name(network),
        NETWORKS["polkadot"],
        NETWORKS["kusama"],
    ]
    return {net.name: ss58_encode(public_key, net.ss58_format) for net in networks}


def derive_account(
    seed_phrase: str,
    network: str = "polkadot",
    account: int = 0,
    address_index: int = 0,
    der_path: Optional[DerPath] = None,
    passphrase: str = "",
) -> LedgerAccount:
    """Return the Ledger account of the seed phrase.

    If provided, der_path overrides the Ledger path
    of the network account and address index.
    Ledger accounts are hardened all the way down:
    integer and bytes paths must already include the
    0x80000000 hardening offset at every level.
    """

    net = network_from_name(network)
    if der_path is None:
        der_path = ledger_der_path(net.slip44, account, address_index)
    # fails on non-hardened indexes, before any derivation
    der_path_str = str_from_der_path(der_path)

    mxprv = mxprv_from_seed_phrase(seed_phrase, passphrase)
    keypair = keypair_from_xprv(derive(mxprv, der_path_str))

    return LedgerAccount(
        network=net.name,
        der_path=der_path_str,
        keypair=keypair,
        addresses=addresses_from_pub_key(keypair.public_key, network),
    )
