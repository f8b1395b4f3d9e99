#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from penguin_coin.exceptions import PenguinTypeError

HEX_THRESHOLD = 0xFFFFFFFF


def require_int(value: object, name: str) -> int:
    "Return value if it is an int, raise PenguinTypeError otherwise."
    if not isinstance(value, int):
        err_msg = f"{name} must be int, not {type(value).__name__}: {value!r}"
        raise PenguinTypeError(err_msg)
    return value


def hex_string(i: int) -> str:
    """Return the hex-string of a non-negative int.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_repr(i: int) -> str:
    "Return a decimal string for small integers, a quoted hex-string otherwise."
    if abs(i) <= HEX_THRESHOLD:
        return f"{i}"
    sign = "-" if i < 0 else ""
    return f"{sign}'{hex_string(abs(i))}'"
