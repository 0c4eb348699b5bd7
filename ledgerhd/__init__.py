#!/usr/bin/env python3

# Copyright (C) 2022 The ledgerhd developers
#
# This file is part of ledgerhd. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ledgerhd including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ledgerhd package."

name = "ledgerhd"
__version__ = "2022.6.1"
__author__ = "The ledgerhd developers"
__author_email__ = "devs@ledgerhd.org"
__copyright__ = "Copyright (C) 2022 The ledgerhd developers"
__license__ = "MIT License"
