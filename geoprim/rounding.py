"""Decimal rounding policy for coordinates and angles.

Every primitive stores rounded coordinates and every derived quantity is
rounded before it is compared, so intersection tests reduce to equality of
rounded values instead of carrying a tolerance through each call.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from enum import Enum
from typing import Union

from .errors import UnsupportedRoundingKind

COORDINATE_PRECISION = 6
ANGLE_PRECISION = 15

# wide enough for any finite double at angle precision
_DECIMAL_CONTEXT = Context(prec=400)


class RoundingKind(str, Enum):
    COORDINATE = "coordinate"
    ANGLE = "angle"


@dataclass(frozen=True)
class RoundingConfig:
    """Number of decimal places kept for each rounding kind."""

    coordinate_precision: int = COORDINATE_PRECISION
    angle_precision: int = ANGLE_PRECISION

    def precision(self, kind: Union[RoundingKind, str]) -> int:
        resolved = _resolve_kind(kind)
        if resolved is RoundingKind.COORDINATE:
            return self.coordinate_precision
        return self.angle_precision

    @property
    def coordinate_tolerance(self) -> float:
        # one unit in the last kept decimal place
        return 10.0 ** -self.coordinate_precision


DEFAULT_ROUNDING = RoundingConfig()


def _resolve_kind(kind: Union[RoundingKind, str]) -> RoundingKind:
    if isinstance(kind, RoundingKind):
        return kind
    if isinstance(kind, str):
        try:
            return RoundingKind(kind)
        except ValueError as exc:
            raise UnsupportedRoundingKind(kind) from exc
    raise UnsupportedRoundingKind(kind)


def round_value(
    x: float,
    kind: Union[RoundingKind, str] = RoundingKind.COORDINATE,
    *,
    config: RoundingConfig = DEFAULT_ROUNDING,
) -> float:
    """Round ``x`` half away from zero to the precision of ``kind``.

    Rounding works on the exact binary value of ``x``, so it is idempotent at
    every magnitude.
    """

    quantum = Decimal(1).scaleb(-config.precision(kind))
    value = float(x)
    if not math.isfinite(value):
        return value
    result = float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT))
    if result == 0.0:
        return 0.0
    return result


def round_coordinate(x: float) -> float:
    return round_value(x, RoundingKind.COORDINATE)


def round_angle(x: float) -> float:
    return round_value(x, RoundingKind.ANGLE)


def is_negligible(value: float, *, config: RoundingConfig = DEFAULT_ROUNDING) -> bool:
    """Return ``True`` when ``value`` is within one rounding unit of zero."""

    return abs(value) <= config.coordinate_tolerance * (1.0 + 1e-9)


def coordinates_close(a: float, b: float, *, config: RoundingConfig = DEFAULT_ROUNDING) -> bool:
    return is_negligible(a - b, config=config)


__all__ = [
    "COORDINATE_PRECISION",
    "ANGLE_PRECISION",
    "RoundingKind",
    "RoundingConfig",
    "DEFAULT_ROUNDING",
    "round_value",
    "round_coordinate",
    "round_angle",
    "is_negligible",
    "coordinates_close",
]
