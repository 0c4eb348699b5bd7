#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line interface: python -m ledgerhd "seed phrase words ...".

Print the ed25519 keypair and SS58 addresses of a Ledger account.
"""

import argparse
import sys
from typing import List, Optional

from ledgerhd import __version__, name
from ledgerhd.account import derive_account
from ledgerhd.exceptions import LedgerHDValueError
from ledgerhd.network import NETWORKS


def _parser() -> argparse.ArgumentParser:

    parser = argparse.ArgumentParser(
        prog=f"python -m {name}",
        description="Ledger ed25519 hard-only key derivation",
    )
    parser.add_argument("seed_phrase", help="seed phrase (quoted)")
    parser.add_argument(
        "--network",
        default="polkadot",
        choices=list(NETWORKS),
        help="network (default: polkadot)",
    )
    parser.add_argument("--account", type=int, default=0, help="account index")
    parser.add_argument("--index", type=int, default=0, help="address index")
    parser.add_argument(
        "--path", help="derivation path, overrides --network/--account/--index"
    )
    parser.add_argument("--passphrase", default="", help="optional passphrase")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def main(argv: Optional[List[str]] = None) -> int:

    args = _parser().parse_args(argv)

    try:
        account = derive_account(
            args.seed_phrase,
            network=args.network,
            account=args.account,
            address_index=args.index,
            der_path=args.path,
            passphrase=args.passphrase,
        )
    except LedgerHDValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"{'path':>13} {account.der_path}")
    print(f"{'private':>13} 0x{account.keypair.private_key.hex()}")
    print(f"{'public':>13} 0x{account.keypair.public_key.hex()}")
    print()
    for network, address in account.addresses.items():
        print(f"{'addr ' + network:>13} {address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
