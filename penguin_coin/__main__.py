#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line demonstration: build a FieldElement and print it.

    python -m penguin_coin 17 31
"""

import argparse
import logging
import sys
from typing import List, Optional

from penguin_coin import __version__
from penguin_coin.ecc.field import FieldElement, FiniteSetError

logger = logging.getLogger("penguin_coin")


def integer(arg: str) -> int:
    "Parse a decimal or 0x-prefixed hex command line integer."
    return int(arg, 0)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="penguin_coin",
        description="Build a prime field element and print its representation.",
    )
    parser.add_argument("num", type=integer, help="residue")
    parser.add_argument("prime", type=integer, help="field prime")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        element = FieldElement(args.num, args.prime)
    except FiniteSetError as e:
        logger.debug("invalid field element", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(repr(element))
    return 0


if __name__ == "__main__":
    sys.exit(main())
