#!/usr/bin/env python3

# Copyright (C) 2022 The penguin_coin developers
#
# This file is part of penguin_coin. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of penguin_coin including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Prime field F_p elements.

A FieldElement is a residue num in [0, prime-1].
The prime is never checked for primality: the field axioms
(and the Fermat-based pow and div) only hold if it actually is one.

Arithmetic is available both as named methods
(add, sub, mul, div, pow, neg)
and as the corresponding Python operators.
Every binary operation first checks that the operands share the prime.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass

from penguin_coin.exceptions import PenguinTypeError, PenguinValueError
from penguin_coin.utils import int_repr, require_int


class FiniteSetError(PenguinValueError):
    "Base class for finite field element errors."


class NumberTooLarge(FiniteSetError):
    def __init__(self, num: int, prime: int) -> None:
        self.num = num
        self.prime = prime
        err_msg = f"number {int_repr(num)} not less than prime {int_repr(prime)}"
        super().__init__(err_msg)


class NumberLessThanZero(FiniteSetError):
    def __init__(self, num: int) -> None:
        self.num = num
        super().__init__(f"negative number: {int_repr(num)}")


class MisMatchedPrimes(FiniteSetError):
    def __init__(self, prime1: int, prime2: int) -> None:
        self.prime1 = prime1
        self.prime2 = prime2
        err_msg = f"mismatched primes: {int_repr(prime1)}, {int_repr(prime2)}"
        super().__init__(err_msg)


class DivisionByZero(FiniteSetError, ZeroDivisionError):
    def __init__(self, prime: int) -> None:
        self.prime = prime
        super().__init__(f"division by zero (mod {int_repr(prime)})")


@dataclass(frozen=True)
class FieldElement:
    """Element of the prime field F_prime.

    >>> FieldElement(17, 31) + FieldElement(21, 31)
    FieldElement(num=7, prime=31)
    >>> FieldElement(17, 31) ** -3
    FieldElement(num=29, prime=31)
    """

    num: int
    prime: int
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            require_int(self.num, "num")
            require_int(self.prime, "prime")
            self.assert_valid()

    def assert_valid(self) -> None:
        # the first failing check is the one reported
        if self.num >= self.prime:
            raise NumberTooLarge(self.num, self.prime)
        if self.num < 0:
            raise NumberLessThanZero(self.num)

    def __str__(self) -> str:
        return f"FieldElement_{self.prime}({self.num})"

    def _require_same_field(self, other: FieldElement) -> None:
        if not isinstance(other, FieldElement):
            raise PenguinTypeError(f"not a FieldElement: {other!r}")
        if self.prime != other.prime:
            raise MisMatchedPrimes(self.prime, other.prime)

    def _new(self, num: int) -> FieldElement:
        # num is already in [0, prime-1]
        return FieldElement(num, self.prime, False)

    def add(self, other: FieldElement) -> FieldElement:
        self._require_same_field(other)
        return self._new((self.num + other.num) % self.prime)

    def sub(self, other: FieldElement) -> FieldElement:
        self._require_same_field(other)
        return self._new((self.num - other.num) % self.prime)

    def mul(self, other: FieldElement) -> FieldElement:
        self._require_same_field(other)
        return self._new(self.num * other.num % self.prime)

    def pow(self, exponent: int) -> FieldElement:
        """Return self raised to an integer exponent.

        As a^(p-1) = 1 (mod p) by Fermat's little theorem,
        the exponent is reduced mod p-1 to a non-negative representative:
        negative exponents are powers of the multiplicative inverse.
        """
        require_int(exponent, "exponent")
        # % returns a non-negative representative for a positive modulus
        n = exponent % (self.prime - 1) if self.prime > 1 else 0
        return self._new(pow(self.num, n, self.prime))

    def div(self, other: FieldElement) -> FieldElement:
        """Return self / other, i.e. self * other^(p-2).

        Division by zero raises DivisionByZero
        instead of silently returning zero.
        """
        self._require_same_field(other)
        if other.num == 0:
            raise DivisionByZero(self.prime)
        return self._new(self.num * other.pow(self.prime - 2).num % self.prime)

    def neg(self) -> FieldElement:
        return self._new(-self.num % self.prime)

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.div(other)

    def __pow__(self, exponent: int) -> FieldElement:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> FieldElement:
        return self.neg()
