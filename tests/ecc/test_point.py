#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `penguin_coin.ecc.point` module."

import logging

import pytest

from penguin_coin.ecc.point import (
    DifferentCurves,
    InvalidPoint,
    Point,
    PointError,
    SingleInfinity,
    UnknownAddition,
)
from penguin_coin.exceptions import PenguinTypeError, PenguinValueError

# y^2 = x^3 + 5x + 7
A, B = 5, 7
INF = Point(None, None, A, B)
curve_points = [
    Point(x, y, A, B) for x, y in ((2, 5), (-1, -1), (3, 7), (18, 77))
]
curve_points += [-p for p in curve_points]


def test_point_new() -> None:
    assert INF.x is None
    assert INF.y is None
    assert INF.is_identity()
    assert INF.is_on_curve()
    assert Point.identity(A, B) == INF
    # the point at infinity is valid on any curve
    Point(None, None, 0, 0)

    p = Point(2, 5, A, B)
    assert (p.x, p.y, p.a, p.b) == (2, 5, A, B)
    assert not p.is_identity()

    with pytest.raises(SingleInfinity, match="both None or both int"):
        Point(None, 5, A, B)
    with pytest.raises(SingleInfinity, match="both None or both int"):
        Point(2, None, A, B)

    with pytest.raises(InvalidPoint, match="point not on curve: y=-2, x=-1") as e:
        Point(-1, -2, A, B)
    assert (e.value.y, e.value.x) == (-2, -1)

    for err in (InvalidPoint, SingleInfinity, DifferentCurves, UnknownAddition):
        assert issubclass(err, PointError)
        assert issubclass(err, PenguinValueError)


def test_point_int_only() -> None:
    # strings are not parsed: "2" is neither decimal nor hex here
    with pytest.raises(PenguinTypeError, match="x must be int, not str: '2'"):
        Point("2", "5", A, B)  # type: ignore
    with pytest.raises(PenguinTypeError, match="y must be int, not bytes"):
        Point(2, b"\x05", A, B)  # type: ignore
    with pytest.raises(PenguinTypeError, match="a must be int, not str"):
        Point(None, None, "5", B)  # type: ignore
    with pytest.raises(PenguinTypeError, match="b must be int, not float"):
        Point.identity(A, 7.0)  # type: ignore


def test_curve_equation_sign() -> None:
    """The membership check is y^2 = x^3 + a*x + b.

    A y^2 = x^3 - a*x + b check would reject the points below,
    all of them on y^2 = x^3 + 5x + 7,
    while accepting (-2, 3), which is not.
    """
    for x, y in ((2, 5), (-1, -1), (18, 77)):
        assert y * y != x**3 - A * x + B
        assert Point(x, y, A, B).is_on_curve()

    assert 3 * 3 == (-2) ** 3 - A * (-2) + B
    with pytest.raises(InvalidPoint):
        Point(-2, 3, A, B)


def test_point_no_validity_check() -> None:
    p = Point(-1, -2, A, B, False)
    assert not p.is_on_curve()
    with pytest.raises(InvalidPoint):
        p.assert_valid()
    with pytest.raises(SingleInfinity):
        Point(None, 1, A, B, False).assert_valid()

    # malformed points are rejected by the group law too
    p = Point(2, 5, A, B)
    for q in (Point(None, 5, A, B, False), Point(2, None, A, B, False)):
        with pytest.raises(SingleInfinity):
            p + q
        with pytest.raises(SingleInfinity):
            q + p
        with pytest.raises(SingleInfinity):
            q + INF
    # the curve check comes first
    with pytest.raises(DifferentCurves):
        p + Point(None, 5, 0, 1, False)


def test_point_equality() -> None:
    a = Point(3, -7, A, B)
    b = Point(18, 77, A, B)
    assert a != b
    assert a == a
    assert Point(3, -7, A, B) == a
    assert Point(None, None, 0, 7) != INF
    assert len({a, b, Point(3, -7, A, B)}) == 2


def test_point_str() -> None:
    assert str(INF) == "Point(x:Infinity, y:Infinity, a:5, b:7)"
    assert str(Point(2, -5, A, B)) == "Point(x:2, y:-5, a:5, b:7)"
    assert repr(Point(2, 5, A, B)) == "Point(x=2, y=5, a=5, b=7)"


def test_point_add() -> None:
    b = Point(2, 5, A, B)
    c = Point(2, -5, A, B)
    assert INF + b == b
    assert b + INF == b
    assert b + c == INF
    assert INF + INF == INF

    a = Point(3, 7, A, B)
    b = Point(-1, -1, A, B)
    assert a + b == Point(2, -5, A, B)
    assert a.add(b) == Point(2, -5, A, B)

    assert b + b == Point(-1, -1, A, B) + Point(-1, -1, A, B)
    assert b + b == Point(18, 77, A, B)


def test_point_add_identity_and_opposite() -> None:
    for p in curve_points:
        assert INF + p == p
        assert p + INF == p
        assert p + -p == INF
        assert -p + p == INF
        assert Point(p.x, -p.y, A, B) == -p
        assert -(-p) == p
    assert -INF == INF
    assert INF.neg() == INF


def test_point_add_commutative() -> None:
    # the secant slope is an integer division:
    # the sum is symmetric whenever the slope is exact
    for p in curve_points:
        for q in curve_points:
            if p.x != q.x and (q.y - p.y) % (q.x - p.x) != 0:
                continue
            assert p + q == q + p


def test_point_add_vertical_tangent() -> None:
    # y^2 = x^3 - 1 has (1, 0)
    p = Point(1, 0, 0, -1)
    assert p + p == Point(None, None, 0, -1)


def test_point_add_truncated_slope() -> None:
    # s = (3*2^2 + 5) / (2*5) = 17 / 10, truncated to 1
    p = Point(2, 5, A, B)
    assert p + p == Point(-3, 0, A, B, False)
    # s = (-77 - 5) / (18 - 2) = -82 / 16, truncated toward zero to -5
    p = Point(2, 5, A, B)
    q = Point(18, -77, A, B)
    assert p + q == Point(5, 10, A, B, False)


def test_point_add_different_curves() -> None:
    p = Point(2, 5, A, B)
    q = Point(0, 1, 0, 1)
    with pytest.raises(DifferentCurves, match="points on different curves: ") as e:
        p + q
    assert e.value.p1 == p
    assert e.value.p2 == q

    # curve check comes before the identity cases
    with pytest.raises(DifferentCurves):
        Point(None, None, A, 8) + p
    with pytest.raises(DifferentCurves):
        p.add(Point(None, None, 4, B))


def test_unknown_addition() -> None:
    p = Point(2, 5, A, B)
    q = Point(2, -5, A, B)
    err = UnknownAddition(p, q)
    assert (err.p1, err.p2) == (p, q)
    assert str(err) == (
        "unknown addition: Point(x:2, y:5, a:5, b:7) and Point(x:2, y:-5, a:5, b:7)"
    )


def test_point_type_errors() -> None:
    p = Point(2, 5, A, B)
    with pytest.raises(TypeError):
        p + 1  # type: ignore
    with pytest.raises(PenguinTypeError, match="not a Point: "):
        p.add((2, 5))  # type: ignore


def test_point_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="penguin_coin.ecc.point"):
        with pytest.raises(InvalidPoint):
            Point(-1, -2, A, B)
    assert "point not on curve" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="penguin_coin.ecc.point"):
        with pytest.raises(SingleInfinity):
            Point(None, 5, A, B)
    assert "single infinity coordinate" in caplog.text
    assert "point not on curve" not in caplog.text
