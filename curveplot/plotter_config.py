"""Explicit configuration for the session and the renderer.

All settings are plain keyword values on a frozen dataclass; nothing is read
from globals or the environment. The defaults reproduce the classic setup: an
800x600 surface, a 40-pixel grid, X and Y in ``[-10, 10]`` and 100 sampling
steps per curve.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .InputConvert import InputConvert
from .domain import Range, RangeLike
from .pixel_projection import PixelProjection

__all__ = ["PlotterConfig", "DEFAULT_SAMPLING_POINTS"]

DEFAULT_SAMPLING_POINTS = 100


@dataclass(frozen=True)
class PlotterConfig:
    """Settings shared by :class:`~curveplot.plotter_session.PlotterSession`
    and :func:`~curveplot.figure_render.build_figure`.

    Parameters
    ----------
    width, height : int
        Drawing surface size in pixels.
    grid_spacing : int
        Distance between grid lines in pixels.
    x_range, y_range : Range or tuple[float, float]
        Initial domain.
    sampling_points : int
        Sampling steps per curve (each curve gets one more point than this).
    projection : PixelProjection
        Math -> pixel map.
    title : str
        Figure title.
    debug : bool
        Enable DEBUG logging on the ``curveplot`` logger when a session starts.
    """

    width: int = 800
    height: int = 600
    grid_spacing: int = 40
    x_range: Range = field(default_factory=lambda: Range(-10.0, 10.0))
    y_range: Range = field(default_factory=lambda: Range(-10.0, 10.0))
    sampling_points: int = DEFAULT_SAMPLING_POINTS
    projection: PixelProjection = field(default_factory=PixelProjection)
    title: str = "Graph Plotter"
    debug: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", int(InputConvert(self.width, int, truncate=False)))
        object.__setattr__(self, "height", int(InputConvert(self.height, int, truncate=False)))
        object.__setattr__(
            self, "grid_spacing", int(InputConvert(self.grid_spacing, int, truncate=False))
        )
        object.__setattr__(
            self, "sampling_points", int(InputConvert(self.sampling_points, int, truncate=False))
        )
        object.__setattr__(self, "x_range", Range.coerce(self.x_range))
        object.__setattr__(self, "y_range", Range.coerce(self.y_range))
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"width and height must be positive, got {self.width}x{self.height}")
        if self.grid_spacing <= 0:
            raise ValueError(f"grid_spacing must be positive, got {self.grid_spacing}")
        if self.sampling_points < 1:
            raise ValueError(f"sampling_points must be >= 1, got {self.sampling_points}")

    def with_ranges(self, x_range: RangeLike, y_range: RangeLike) -> "PlotterConfig":
        """Return a copy with a different initial domain."""
        return replace(self, x_range=Range.coerce(x_range), y_range=Range.coerce(y_range))
