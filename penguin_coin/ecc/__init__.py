#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the penguin_coin.ecc package."
