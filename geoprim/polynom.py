"""Low degree polynomials used as the algebraic form of a line."""

from __future__ import annotations

import math
import numbers
from typing import List, Tuple

import numpy as np

from .errors import InvalidConstruction

MAX_DEGREE = 3


class Polynom:
    """Polynomial of degree at most three.

    Coefficients are given highest power first, so ``Polynom(2, 1)`` is
    ``2*x + 1`` and ``Polynom(1, 0, 0)`` is ``x**2``.  The accessors index by
    ascending power.
    """

    __slots__ = ("coefficients", "degree")

    def __init__(self, *coefficients: float) -> None:
        if not coefficients:
            raise InvalidConstruction("a polynom needs at least one coefficient")
        if len(coefficients) > MAX_DEGREE + 1:
            raise InvalidConstruction(
                f"polynom degree is limited to {MAX_DEGREE}, got {len(coefficients) - 1}"
            )
        values: List[float] = []
        for coefficient in coefficients:
            if isinstance(coefficient, bool) or not isinstance(coefficient, numbers.Real):
                raise InvalidConstruction(f"polynom coefficient must be a number, got {coefficient!r}")
            value = float(coefficient)
            if not math.isfinite(value):
                raise InvalidConstruction(f"polynom coefficient must be finite, got {coefficient!r}")
            values.append(value)
        self.coefficients: Tuple[float, ...] = tuple(values)
        self.degree = len(values) - 1

    def coefficient(self, power: int) -> float:
        if power < 0:
            raise ValueError("power must be non-negative")
        if power > self.degree:
            return 0.0
        return self.coefficients[-1 - power]

    def get_absolute_coefficient(self) -> float:
        return self.coefficient(0)

    def get_linear_coefficient(self) -> float:
        return self.coefficient(1)

    def get_quadratic_coefficient(self) -> float:
        return self.coefficient(2)

    def get_cubic_coefficient(self) -> float:
        return self.coefficient(3)

    def value_at(self, x: float) -> float:
        return float(np.polyval(self.coefficients, x))

    def roots(self) -> List[float]:
        """Return the real roots in ascending order."""

        trimmed = list(self.coefficients)
        while trimmed and trimmed[0] == 0.0:
            trimmed.pop(0)
        if len(trimmed) <= 1:
            return []
        found = np.roots(trimmed)
        real = [float(root.real) for root in found if abs(root.imag) <= 1e-12]
        return sorted(real)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynom):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __repr__(self) -> str:
        return f"Polynom{self.coefficients!r}"

    def __str__(self) -> str:
        terms = []
        for power in range(self.degree, -1, -1):
            value = self.coefficient(power)
            if value == 0.0 and self.degree > 0:
                continue
            if power == 0:
                terms.append(f"{value:g}")
            elif power == 1:
                terms.append(f"{value:g}*x")
            else:
                terms.append(f"{value:g}*x^{power}")
        return " + ".join(terms) if terms else "0"


__all__ = ["Polynom", "MAX_DEGREE"]
