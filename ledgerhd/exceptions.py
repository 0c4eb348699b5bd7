#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ledgerhd from those raised by other codebase.

LedgerHDRuntimeError signals an internal fault of the derivation
machinery (e.g. a broken fixed-width invariant): it is never the
consequence of user input.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ledgerhd versions are derived.
"""


class LedgerHDValueError(ValueError):
    pass


class LedgerHDTypeError(TypeError):
    pass


class LedgerHDRuntimeError(RuntimeError):
    pass
