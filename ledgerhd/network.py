#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Network constants and associated functions."""


import json
from dataclasses import dataclass
from os import path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from ledgerhd.exceptions import LedgerHDValueError
from ledgerhd.hd.der_path import HARDENED
from ledgerhd.ss58 import prefix_from_ss58_format

_Network = TypeVar("_Network", bound="Network")


@dataclass(frozen=True)
class Network:
    name: str

    # registered coin type, second level of the Ledger derivation path
    slip44: int

    # ss58 address prefix: Polkadot addresses start with '1'
    ss58_format: int

    def __init__(
        self,
        name: str,
        slip44: int,
        ss58_format: int,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "slip44", slip44)
        object.__setattr__(self, "ss58_format", ss58_format)

        if check_validity:
            self.assert_valid()

    def to_dict(self, check_validity: bool = True) -> Dict[str, Union[str, int]]:

        if check_validity:
            self.assert_valid()

        return {
            "name": self.name,
            "slip44": self.slip44,
            "ss58_format": self.ss58_format,
        }

    @classmethod
    def from_dict(
        cls: Type[_Network], dict_: Mapping[str, Any], check_validity: bool = True
    ) -> _Network:

        return cls(
            dict_["name"],
            dict_["slip44"],
            dict_["ss58_format"],
            check_validity,
        )

    def assert_valid(self) -> None:

        if not self.name.strip():
            raise LedgerHDValueError("empty network name")

        if not 0 <= self.slip44 < HARDENED:
            raise LedgerHDValueError(f"invalid slip44: {self.slip44}")

        prefix_from_ss58_format(self.ss58_format)


NETWORKS: Dict[str, Network] = {}
datadir = path.join(path.dirname(__file__), "_data")
for net in ("polkadot", "kusama", "substrate"):
    filename = path.join(datadir, net + ".json")
    with open(filename, "r", encoding="ascii") as f:
        NETWORKS[net] = Network.from_dict(json.load(f))


def network_from_key_value(key: str, value: Union[str, int]) -> Optional[str]:
    """Return network string from (key, value) pair.

    Warning: Polkadot and Substrate share the same slip44 coin type,
    the first one is returned.
    """
    for network in NETWORKS:
        if getattr(NETWORKS[network], key) == value:
            return network
    return None


def network_from_name(network: str) -> Network:
    "Return the Network of a (case/blank insensitive) network string."

    key = network.strip().lower()
    if key not in NETWORKS:
        err_msg = f"unknown network: {network}"
        err_msg += f" not in ({', '.join(NETWORKS)})"
        raise LedgerHDValueError(err_msg)
    return NETWORKS[key]
