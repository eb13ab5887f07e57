"""Ordered set of sampled curves that share one domain.

Purpose
-------
``CurveCollection`` is what the renderer draws and what gets saved. It keeps
curves in insertion order (draw order = save order) and holds the shared
:class:`~curveplot.domain.Domain`.

Important gotchas
-----------------
- No de-duplication: the same curve or function may appear several times.
- ``set_domain`` does not re-sample. Curves keep the points of whatever domain
  they were last sampled against until the caller samples and re-adds them.
- ``load`` parses the whole file before touching the collection. On success
  it replaces all curves; on a parse error the collection is unchanged.

Examples
--------
>>> from curveplot.math_function import Trigonometric
>>> from curveplot.sampled_curve import SampledCurve
>>> coll = CurveCollection()
>>> coll.add_curve(SampledCurve(Trigonometric()).sample(coll.domain, 100))
>>> len(coll)
1
"""

from __future__ import annotations

import logging
import os
from typing import Iterator, Optional, Union

from .CurveSnapshot import CollectionSnapshot
from .curve_file import dumps, loads, read_curve_file, write_curve_file
from .domain import Domain
from .sampled_curve import SampledCurve

__all__ = ["CurveCollection"]


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

PathLike = Union[str, "os.PathLike[str]"]


class CurveCollection:
    """Ordered, replaceable set of :class:`SampledCurve` objects.

    Parameters
    ----------
    domain : Domain, optional
        Shared domain. A default ``Domain()`` (X and Y in ``[-10, 10]``) is
        created when omitted.
    """

    def __init__(self, domain: Optional[Domain] = None) -> None:
        self._domain = domain if domain is not None else Domain()
        self._curves: list[SampledCurve] = []

    @property
    def domain(self) -> Domain:
        """Return the shared domain (by reference)."""
        return self._domain

    def set_domain(self, domain: Domain) -> None:
        """Replace the shared domain without re-sampling any curve."""
        if not isinstance(domain, Domain):
            raise TypeError(f"set_domain() expects a Domain, got {type(domain).__name__}")
        self._domain = domain
        logger.debug(
            "domain set to x=%s y=%s (%d curve(s) not re-sampled)",
            domain.x_range.as_tuple(),
            domain.y_range.as_tuple(),
            len(self._curves),
        )

    def add_curve(self, curve: SampledCurve) -> None:
        """Append ``curve``."""
        if not isinstance(curve, SampledCurve):
            raise TypeError(f"add_curve() expects a SampledCurve, got {type(curve).__name__}")
        self._curves.append(curve)

    def clear(self) -> None:
        """Remove every curve."""
        self._curves.clear()

    @property
    def curves(self) -> tuple[SampledCurve, ...]:
        """Return the curves in insertion order."""
        return tuple(self._curves)

    def get_curves(self) -> tuple[SampledCurve, ...]:
        return self.curves

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[SampledCurve]:
        return iter(tuple(self._curves))

    def _replace_with_points(self, curves_points: list[list[tuple[float, float]]]) -> None:
        self._curves = [SampledCurve.from_points(points) for points in curves_points]

    def dumps(self) -> str:
        """Serialize the curves' points to the text format."""
        return dumps(curve.points for curve in self._curves)

    def loads(self, text: str) -> None:
        """Replace the curves with those parsed from ``text``."""
        self._replace_with_points(loads(text))

    def save(self, path: PathLike) -> None:
        """Write every curve's points to ``path``, one line per curve."""
        count = write_curve_file(path, (curve.points for curve in self._curves))
        logger.info("saved %d curve(s) to %s", count, path)

    def load(self, path: PathLike) -> None:
        """Replace the curves with those stored in ``path``.

        A missing or empty file leaves the collection empty. Loaded curves have
        no function and cannot be re-sampled.

        Raises
        ------
        CurveFileParseError
            If the file contains a malformed token (collection unchanged).
        """
        curves_points = read_curve_file(path)
        self._replace_with_points(curves_points)
        logger.info("loaded %d curve(s) from %s", len(curves_points), path)

    def snapshot(self) -> CollectionSnapshot:
        """Return an immutable snapshot of the domain and every curve."""
        return CollectionSnapshot(
            x_range=self._domain.x_range.as_tuple(),
            y_range=self._domain.y_range.as_tuple(),
            curves=tuple(curve.snapshot() for curve in self._curves),
        )

    def __repr__(self) -> str:
        return f"CurveCollection(curves={len(self._curves)}, domain={self._domain!r})"
