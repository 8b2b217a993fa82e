"""A mutable fraction with addition, comparison and increment operations."""

from __future__ import annotations

import math


class Fraction:
    """A fraction of two integers; arithmetic results are kept in lowest terms."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, numerator: int, denominator: int) -> None:
        if denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")
        self.numerator = numerator
        self.denominator = denominator

    def simplify(self) -> None:
        """Divide numerator and denominator by their greatest common divisor."""
        divisor = math.gcd(self.numerator, self.denominator)
        if divisor > 1:
            self.numerator //= divisor
            self.denominator //= divisor

    def _simplified(self) -> Fraction:
        copy = Fraction(self.numerator, self.denominator)
        copy.simplify()
        return copy

    def __add__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        result = Fraction(
            self.numerator * other.denominator + self.denominator * other.numerator,
            self.denominator * other.denominator,
        )
        result.simplify()
        return result

    def __iadd__(self, other: object) -> Fraction:
        if not isinstance(other, Fraction):
            return NotImplemented
        self.numerator = (
            self.numerator * other.denominator + self.denominator * other.numerator
        )
        self.denominator *= other.denominator
        self.simplify()
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        a, b = self._simplified(), other._simplified()
        return (a.numerator, a.denominator) == (b.numerator, b.denominator)

    def increment(self) -> Fraction:
        """Add one in place and return this fraction."""
        self.numerator += self.denominator
        self.simplify()
        return self

    def post_increment(self) -> Fraction:
        """Add one in place and return the former value, simplified."""
        previous = self._simplified()
        self.increment()
        return previous

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"