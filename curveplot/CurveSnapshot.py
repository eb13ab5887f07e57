"""Immutable snapshots of sampled curves and curve collections.

A ``CurveSnapshot`` captures what a curve looked like after its last
sampling: the function it came from (if any) and its points. A
``CollectionSnapshot`` aggregates curve snapshots together with the domain the
collection held at snapshot time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .math_function import MathFunction

Point = Tuple[float, float]


@dataclass(frozen=True)
class CurveSnapshot:
    """Immutable record of one curve's state.

    Parameters
    ----------
    label : str
        Function label, or ``""`` for curves without a function.
    function : MathFunction or None
        Source function, ``None`` for curves restored from a file.
    points : tuple[tuple[float, float], ...]
        Sampled points in order.
    """

    label: str
    function: Optional[MathFunction]
    points: tuple[Point, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"CurveSnapshot(label={self.label!r}, points={len(self.points)})"


@dataclass(frozen=True)
class CollectionSnapshot:
    """Immutable record of a curve collection.

    Parameters
    ----------
    x_range : tuple[float, float]
        Collection X range at snapshot time.
    y_range : tuple[float, float]
        Collection Y range at snapshot time.
    curves : tuple[CurveSnapshot, ...]
        Curve snapshots in insertion order.
    """

    x_range: Tuple[float, float]
    y_range: Tuple[float, float]
    curves: tuple[CurveSnapshot, ...]

    def __repr__(self) -> str:
        return (
            f"CollectionSnapshot(x_range={self.x_range!r}, "
            f"y_range={self.y_range!r}, curves={len(self.curves)})"
        )
