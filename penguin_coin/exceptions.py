#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception base classes.

These are only meant to discriminate between Exceptions raised
by penguin_coin and those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError and TypeError
from which the penguin_coin versions are derived.

The finite field and curve point error families are defined
next to their types, in penguin_coin.ecc.field and penguin_coin.ecc.point.
"""


class PenguinValueError(ValueError):
    pass


class PenguinTypeError(TypeError):
    pass
