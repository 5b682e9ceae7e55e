"""Exception taxonomy shared by the primitives and the intersection engine."""

from __future__ import annotations

from typing import Optional


class GeometryError(Exception):
    """Base class for every error raised by :mod:`geoprim`."""


class InvalidConstruction(GeometryError, ValueError):
    """Raised when a primitive would be built from degenerate input."""


class UnsupportedRoundingKind(GeometryError, ValueError):
    """Raised when rounding is requested for an unknown kind tag."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"unsupported rounding kind {kind!r}")
        self.kind = kind


class UndefinedIntersection(GeometryError, TypeError):
    """Raised when no intersection algorithm exists for a pair of kinds."""

    def __init__(self, kind_a: str, kind_b: str, detail: Optional[str] = None) -> None:
        message = f"intersection of {kind_a} and {kind_b} is not defined"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.kind_a = kind_a
        self.kind_b = kind_b


class NonCollinearJoin(GeometryError, ValueError):
    """Raised when joining segments that do not share a support line."""


class DisjointJoin(GeometryError, ValueError):
    """Raised when joining collinear segments that do not touch."""


__all__ = [
    "GeometryError",
    "InvalidConstruction",
    "UnsupportedRoundingKind",
    "UndefinedIntersection",
    "NonCollinearJoin",
    "DisjointJoin",
]
