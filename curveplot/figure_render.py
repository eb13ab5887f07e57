"""Plotly rendering of a curve collection in pixel space.

Purpose
-------
Thin adapter between :class:`~curveplot.curve_collection.CurveCollection` and
Plotly. Every point goes through the
:class:`~curveplot.pixel_projection.PixelProjection`, so the figure uses the
same pixel coordinates as the classic 800x600 window: light grid lines every
40 pixels, black axes through the projected origin, integer tick labels next
to the axes and one black polyline per curve.

Important gotchas
-----------------
- Non-finite points become gaps (``None``) in the trace, so no segment that
  touches a NaN/Inf point is drawn.
- The pixel Y axis is reversed in the layout (rows grow downward).
- This module only reads curves; it never samples.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import plotly.graph_objects as go

from .curve_collection import CurveCollection
from .pixel_projection import Grid, PixelProjection, grid_ticks
from .plotter_config import PlotterConfig
from .sampled_curve import SampledCurve

__all__ = ["curve_pixel_coordinates", "build_figure"]


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

GRID_COLOR = "rgb(200,200,200)"
AXIS_COLOR = "black"
CURVE_COLOR = "black"
TICK_LABEL_OFFSET_PX = 10.0
TICK_FONT_SIZE = 15
AXIS_FONT_SIZE = 20


def curve_pixel_coordinates(
    curve: SampledCurve, projection: PixelProjection
) -> Tuple[List[Optional[float]], List[Optional[float]]]:
    """Project a curve's points to pixel lists with ``None`` at non-finite points.

    Parameters
    ----------
    curve : SampledCurve
        Curve to project.
    projection : PixelProjection
        Math -> pixel map.

    Returns
    -------
    tuple[list, list]
        Pixel x and y lists of equal length, ready for a Plotly scatter trace.
    """
    points = np.asarray(curve.get_points(), dtype=float).reshape(-1, 2)
    px, py = projection.to_pixel(points[:, 0], points[:, 1])
    keep = np.isfinite(px) & np.isfinite(py)
    xs = [float(v) if ok else None for v, ok in zip(px, keep)]
    ys = [float(v) if ok else None for v, ok in zip(py, keep)]
    return xs, ys


def _grid_shapes(grid: Grid, width: int, height: int) -> list[Dict[str, Any]]:
    shapes: list[Dict[str, Any]] = []
    for tick in grid.vertical:
        shapes.append(
            dict(type="line", x0=tick.position, x1=tick.position, y0=0, y1=height,
                 line=dict(color=GRID_COLOR, width=1), layer="below")
        )
    for tick in grid.horizontal:
        shapes.append(
            dict(type="line", x0=0, x1=width, y0=tick.position, y1=tick.position,
                 line=dict(color=GRID_COLOR, width=1), layer="below")
        )
    shapes.append(
        dict(type="line", x0=0, x1=width, y0=grid.x_axis_y, y1=grid.x_axis_y,
             line=dict(color=AXIS_COLOR, width=1.5), layer="below")
    )
    shapes.append(
        dict(type="line", x0=grid.y_axis_x, x1=grid.y_axis_x, y0=0, y1=height,
             line=dict(color=AXIS_COLOR, width=1.5), layer="below")
    )
    return shapes


def _grid_annotations(grid: Grid, width: int) -> list[Dict[str, Any]]:
    annotations: list[Dict[str, Any]] = []
    for tick in grid.vertical:
        if tick.label is None:
            continue
        annotations.append(
            dict(x=tick.position, y=grid.x_axis_y + TICK_LABEL_OFFSET_PX, text=tick.label,
                 showarrow=False, xanchor="left", yanchor="top",
                 font=dict(size=TICK_FONT_SIZE, color=AXIS_COLOR))
        )
    for tick in grid.horizontal:
        if tick.label is None:
            continue
        annotations.append(
            dict(x=grid.y_axis_x + TICK_LABEL_OFFSET_PX, y=tick.position, text=tick.label,
                 showarrow=False, xanchor="left", yanchor="top",
                 font=dict(size=TICK_FONT_SIZE, color=AXIS_COLOR))
        )
    annotations.append(
        dict(x=width - 2 * TICK_LABEL_OFFSET_PX, y=grid.x_axis_y + TICK_LABEL_OFFSET_PX,
             text="X", showarrow=False, xanchor="left", yanchor="top",
             font=dict(size=AXIS_FONT_SIZE, color=AXIS_COLOR))
    )
    annotations.append(
        dict(x=grid.y_axis_x + 2 * TICK_LABEL_OFFSET_PX, y=TICK_LABEL_OFFSET_PX,
             text="Y", showarrow=False, xanchor="left", yanchor="top",
             font=dict(size=AXIS_FONT_SIZE, color=AXIS_COLOR))
    )
    return annotations


def _default_figure_layout(config: PlotterConfig) -> Dict[str, Any]:
    hidden_axis = dict(showgrid=False, zeroline=False, showticklabels=False, ticks="")
    return dict(
        title=dict(text=config.title),
        width=config.width,
        height=config.height,
        autosize=False,
        template="plotly_white",
        showlegend=False,
        margin=dict(l=0, r=0, t=40, b=0),
        paper_bgcolor="#ffffff",
        plot_bgcolor="#ffffff",
        xaxis=dict(range=[0, config.width], **hidden_axis),
        yaxis=dict(range=[config.height, 0], scaleanchor="x", scaleratio=1, **hidden_axis),
    )


def build_figure(
    collection: CurveCollection, config: Optional[PlotterConfig] = None
) -> go.Figure:
    """Build a Plotly figure showing ``collection`` on the pixel grid.

    Parameters
    ----------
    collection : CurveCollection
        Curves to draw, in insertion order.
    config : PlotterConfig, optional
        Surface size, grid spacing, projection and title.

    Returns
    -------
    plotly.graph_objects.Figure
        One line trace per curve, followed by grid shapes and labels in the
        layout.
    """
    config = config if config is not None else PlotterConfig()
    projection = config.projection
    grid = grid_ticks(config.width, config.height, config.grid_spacing, projection)

    fig = go.Figure()
    fig.update_layout(**_default_figure_layout(config))
    fig.update_layout(
        shapes=_grid_shapes(grid, config.width, config.height),
        annotations=_grid_annotations(grid, config.width),
    )

    for index, curve in enumerate(collection.get_curves()):
        xs, ys = curve_pixel_coordinates(curve, projection)
        fig.add_scatter(
            x=xs,
            y=ys,
            mode="lines",
            name=curve.label or f"curve {index}",
            line=dict(color=CURVE_COLOR, width=1.5),
            connectgaps=False,
        )

    logger.debug("built figure with %d curve trace(s)", len(collection))
    return fig
