#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Points of an elliptic curve over the integers.

The curve is the set of points (x, y)
that are solutions to the Weierstrass equation y^2 = x^3 + a*x + b,
together with a point at infinity,
here represented with both coordinates set to None.

Coordinates are plain integers, not finite field elements:
the slopes of the group law use integer division (truncated toward zero),
so these are didactical curves over the rationals, with no
cryptographic meaning. Curve context is local to each Point:
two points can only be added if their (a, b) coefficients match.
"""

from __future__ import annotations

import logging
from dataclasses import InitVar, dataclass

from penguin_coin.alias import Coordinate
from penguin_coin.exceptions import PenguinTypeError, PenguinValueError
from penguin_coin.utils import int_repr, require_int

logger = logging.getLogger(__name__)


class PointError(PenguinValueError):
    "Base class for elliptic curve point errors."


class InvalidPoint(PointError):
    # (y, x) argument order is part of the interface
    def __init__(self, y: int, x: int) -> None:
        self.y = y
        self.x = x
        super().__init__(f"point not on curve: y={int_repr(y)}, x={int_repr(x)}")


class SingleInfinity(PointError):
    def __init__(self) -> None:
        super().__init__("x and y must be both None or both int")


class DifferentCurves(PointError):
    def __init__(self, p1: Point, p2: Point) -> None:
        self.p1 = p1
        self.p2 = p2
        super().__init__(f"points on different curves: {p1} and {p2}")


class UnknownAddition(PointError):
    def __init__(self, p1: Point, p2: Point) -> None:
        self.p1 = p1
        self.p2 = p2
        super().__init__(f"unknown addition: {p1} and {p2}")


def _int_div(n: int, d: int) -> int:
    "Integer division truncated toward zero (// floors instead)."
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d > 0) else -q


@dataclass(frozen=True)
class Point:
    """Elliptic curve point, or the point at infinity.

    The point at infinity of the (a, b) curve is Point(None, None, a, b);
    it is the neutral element of the group law.
    """

    x: Coordinate
    y: Coordinate
    a: int
    b: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            for name in ("x", "y"):
                value = getattr(self, name)
                if value is not None:
                    require_int(value, name)
            require_int(self.a, "a")
            require_int(self.b, "b")
            self.assert_valid()

    @classmethod
    def identity(cls, a: int, b: int) -> Point:
        "Return the point at infinity of the (a, b) curve."
        return cls(None, None, a, b)

    def _require_paired_infinity(self) -> None:
        if (self.x is None) != (self.y is None):
            logger.debug("single infinity coordinate: %r", self)
            raise SingleInfinity()

    def assert_valid(self) -> None:
        self._require_paired_infinity()
        if self.x is None:
            return
        if not self.is_on_curve():
            logger.debug("point not on curve: %r", self)
            raise InvalidPoint(self.y, self.x)

    def is_identity(self) -> bool:
        return self.x is None

    def is_on_curve(self) -> bool:
        """Return True if the point satisfies y^2 = x^3 + a*x + b.

        The point at infinity is on every curve.
        """
        if self.x is None or self.y is None:
            return self.x is None and self.y is None
        return self.y * self.y == (self.x * self.x + self.a) * self.x + self.b

    def __str__(self) -> str:
        x = "Infinity" if self.x is None else f"{self.x}"
        y = "Infinity" if self.y is None else f"{self.y}"
        return f"Point(x:{x}, y:{y}, a:{self.a}, b:{self.b})"

    def _new(self, x: Coordinate, y: Coordinate) -> Point:
        # the group law guarantees the result to be on the curve
        return Point(x, y, self.a, self.b, False)

    def neg(self) -> Point:
        "Return the opposite point, i.e. the reflection (x, -y)."
        if self.y is None:
            return self
        return self._new(self.x, -self.y)

    def add(self, other: Point) -> Point:
        """Return the sum of two points of the same curve.

        The cases of the group law are checked in order,
        the first matching one providing the result.
        """
        if not isinstance(other, Point):
            raise PenguinTypeError(f"not a Point: {other!r}")

        if self.a != other.a or self.b != other.b:
            raise DifferentCurves(self, other)

        # points built with check_validity=False may be malformed
        self._require_paired_infinity()
        other._require_paired_infinity()

        if self.x is None:
            return other
        if other.x is None:
            return self
        if self.y is None or other.y is None:  # narrowing for mypy
            raise SingleInfinity()

        # vertical line: opposite points
        if self.x == other.x and self.y != other.y:
            return self._new(None, None)

        # secant line
        if self.x != other.x:
            s = _int_div(other.y - self.y, other.x - self.x)
            x = s * s - self.x - other.x
            y = s * (self.x - x) - self.y
            return self._new(x, y)

        # vertical tangent line
        if self == other and self.y == 0:
            return self._new(None, None)

        # tangent line: point doubling
        if self == other:
            s = _int_div(3 * self.x * self.x + self.a, 2 * self.y)
            x = s * s - 2 * self.x
            y = s * (self.x - x) - self.y
            return self._new(x, y)

        logger.debug("no group law case for %r and %r", self, other)
        raise UnknownAddition(self, other)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __neg__(self) -> Point:
        return self.neg()
