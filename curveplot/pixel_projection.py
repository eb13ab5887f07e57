"""Affine projection between math space and pixel space.

Purpose
-------
This module is the data contract between sampled points and anything that
draws them. A math point ``(x, y)`` lands on pixel

``pixel_x = x * scale + origin_x``
``pixel_y = -y * scale + origin_y``

with ``scale = 20`` and origin ``(400, 300)`` by default: the math origin sits
in the middle of an 800x600 surface, and Y is flipped because pixel rows grow
downward.

It also computes the grid the renderer draws: lines every ``spacing`` pixels
with integer labels in math units.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np

__all__ = [
    "PIXEL_SCALE",
    "ORIGIN_PIXEL_X",
    "ORIGIN_PIXEL_Y",
    "PixelProjection",
    "DEFAULT_PROJECTION",
    "to_pixel",
    "GridTick",
    "Grid",
    "grid_ticks",
]

PIXEL_SCALE = 20.0
ORIGIN_PIXEL_X = 400.0
ORIGIN_PIXEL_Y = 300.0


@dataclass(frozen=True)
class PixelProjection:
    """Fixed math -> pixel affine map.

    Parameters
    ----------
    scale : float
        Pixels per math unit on both axes.
    origin_x, origin_y : float
        Pixel position of the math origin.
    """

    scale: float = PIXEL_SCALE
    origin_x: float = ORIGIN_PIXEL_X
    origin_y: float = ORIGIN_PIXEL_Y

    def __post_init__(self) -> None:
        for name in ("scale", "origin_x", "origin_y"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if self.scale == 0.0:
            raise ValueError("scale must be non-zero")

    def to_pixel(self, x: Any, y: Any) -> Tuple[Any, Any]:
        """Map math coordinates to pixel coordinates.

        Scalars give a pair of floats, arrays give a pair of arrays.
        Non-finite inputs map to non-finite outputs.
        """
        xs = np.asarray(x, dtype=float)
        ys = np.asarray(y, dtype=float)
        with np.errstate(all="ignore"):
            px = xs * self.scale + self.origin_x
            py = -ys * self.scale + self.origin_y
        if px.ndim == 0 and py.ndim == 0:
            return float(px), float(py)
        return px, py

    def to_math(self, pixel_x: Any, pixel_y: Any) -> Tuple[Any, Any]:
        """Inverse of :meth:`to_pixel`."""
        pxs = np.asarray(pixel_x, dtype=float)
        pys = np.asarray(pixel_y, dtype=float)
        x = (pxs - self.origin_x) / self.scale
        y = (self.origin_y - pys) / self.scale
        if x.ndim == 0 and y.ndim == 0:
            return float(x), float(y)
        return x, y


DEFAULT_PROJECTION = PixelProjection()


def to_pixel(x: Any, y: Any, projection: PixelProjection = DEFAULT_PROJECTION) -> Tuple[Any, Any]:
    """Map ``(x, y)`` with ``projection`` (defaults to scale 20, origin (400, 300))."""
    return projection.to_pixel(x, y)


@dataclass(frozen=True)
class GridTick:
    """One grid line.

    ``label`` is ``None`` for the line that coincides with the opposite axis.
    """

    position: float
    value: int
    label: Optional[str]


@dataclass(frozen=True)
class Grid:
    vertical: tuple[GridTick, ...]
    horizontal: tuple[GridTick, ...]
    x_axis_y: float
    y_axis_x: float


def grid_ticks(
    width: int = 800,
    height: int = 600,
    spacing: int = 40,
    projection: PixelProjection = DEFAULT_PROJECTION,
) -> Grid:
    """Compute grid lines and labels for a ``width`` x ``height`` surface.

    Vertical lines sit at ``0, spacing, ..., width`` and horizontal lines at
    ``0, spacing, ..., height``. Labels are the math coordinate of the line
    truncated toward zero. The line on the Y axis (resp. X axis) is left
    unlabeled so it does not collide with the axis.

    Examples
    --------
    >>> grid = grid_ticks()
    >>> grid.vertical[0].label, grid.horizontal[0].label
    ('-20', '15')
    """
    if spacing <= 0:
        raise ValueError(f"spacing must be positive, got {spacing}")

    vertical = []
    for px in range(0, int(width) + 1, int(spacing)):
        value = int((px - projection.origin_x) / projection.scale)
        label = None if px == projection.origin_x else str(value)
        vertical.append(GridTick(position=float(px), value=value, label=label))

    horizontal = []
    for py in range(0, int(height) + 1, int(spacing)):
        value = int((projection.origin_y - py) / projection.scale)
        label = None if py == projection.origin_y else str(value)
        horizontal.append(GridTick(position=float(py), value=value, label=label))

    return Grid(
        vertical=tuple(vertical),
        horizontal=tuple(horizontal),
        x_axis_y=projection.origin_y,
        y_axis_x=projection.origin_x,
    )
