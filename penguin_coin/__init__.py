#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the penguin_coin package."

name = "penguin_coin"
__version__ = "2022.9.1"
__author__ = "The penguin_coin developers"
__author_email__ = "devs@penguin-coin.org"
__copyright__ = "Copyright (C) 2022 The penguin_coin developers"
__license__ = "MIT License"
