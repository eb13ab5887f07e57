"""Top-level public API for the ``curveplot`` package.

This module re-exports the curve model and its collaborators so users can
import from a single namespace, for example:

>>> from curveplot import CurveCollection, Polynomial, SampledCurve  # doctest: +SKIP

It exposes both the headless session used by interactive front ends and the
lower-level building blocks (functions, domains, curves, the file codec and
the pixel projection) for direct use.
"""

from .CurveSnapshot import CollectionSnapshot, CurveSnapshot
from .InputConvert import InputConvert, parse_coefficients, parse_numbers, parse_range
from .curve_collection import CurveCollection
from .curve_file import CurveFileParseError
from .domain import Domain, Range, validate_range
from .figure_render import build_figure, curve_pixel_coordinates
from .math_function import (
    TRIG_KINDS,
    Exponential,
    Logarithmic,
    MathFunction,
    Polynomial,
    Trigonometric,
    evaluate,
)
from .pixel_projection import (
    DEFAULT_PROJECTION,
    ORIGIN_PIXEL_X,
    ORIGIN_PIXEL_Y,
    PIXEL_SCALE,
    Grid,
    GridTick,
    PixelProjection,
    grid_ticks,
    to_pixel,
)
from .plotter_config import DEFAULT_SAMPLING_POINTS, PlotterConfig
from .plotter_session import PlotterSession
from .sampled_curve import SampledCurve, sample_points

__all__ = [
    # Functions
    "TRIG_KINDS",
    "Polynomial",
    "Trigonometric",
    "Exponential",
    "Logarithmic",
    "MathFunction",
    "evaluate",
    # Domain
    "Range",
    "Domain",
    "validate_range",
    # Curves
    "SampledCurve",
    "sample_points",
    "CurveCollection",
    "CurveSnapshot",
    "CollectionSnapshot",
    "CurveFileParseError",
    # Projection
    "PIXEL_SCALE",
    "ORIGIN_PIXEL_X",
    "ORIGIN_PIXEL_Y",
    "PixelProjection",
    "DEFAULT_PROJECTION",
    "to_pixel",
    "Grid",
    "GridTick",
    "grid_ticks",
    # Rendering and input
    "build_figure",
    "curve_pixel_coordinates",
    "InputConvert",
    "parse_numbers",
    "parse_coefficients",
    "parse_range",
    # Session
    "DEFAULT_SAMPLING_POINTS",
    "PlotterConfig",
    "PlotterSession",
]
