"""Range and domain primitives for the sampling/view window.

Purpose
-------
``Domain`` is the state container for "the current view": one X range used
for sampling and one Y range used for view scaling. A single ``Domain`` is
shared by reference between a :class:`~curveplot.curve_collection.CurveCollection`
and whoever drives it.

Notes
-----
Ranges are expected to satisfy ``min < max``. This module documents the
precondition but does not enforce it; :func:`validate_range` is available to
collaborators that collect ranges from users.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

NumberLike = Union[int, float]
RangeLike = Union["Range", Tuple[NumberLike, NumberLike]]


@dataclass(frozen=True)
class Range:
    """Closed scalar interval ``[min, max]``.

    Parameters
    ----------
    min : float
        Lower bound.
    max : float
        Upper bound.
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", float(self.min))
        object.__setattr__(self, "max", float(self.max))

    @classmethod
    def coerce(cls, value: RangeLike) -> "Range":
        """Return ``value`` as a :class:`Range` (accepts ``(min, max)`` pairs)."""
        if isinstance(value, Range):
            return value
        raw_min, raw_max = value
        return cls(raw_min, raw_max)

    @property
    def span(self) -> float:
        return self.max - self.min

    def as_tuple(self) -> tuple[float, float]:
        return (self.min, self.max)

    def __iter__(self) -> Iterator[float]:
        yield self.min
        yield self.max


def validate_range(value: RangeLike, *, name: str = "range") -> Range:
    """Coerce ``value`` to a :class:`Range` and require ``min < max``.

    Raises
    ------
    ValueError
        If the bounds are not strictly increasing (NaN bounds included).
    """
    rng = Range.coerce(value)
    if not rng.min < rng.max:
        raise ValueError(f"{name} must satisfy min < max, got ({rng.min!r}, {rng.max!r})")
    return rng


@dataclass
class Domain:
    """Mutable X/Y view window.

    Parameters
    ----------
    x_range : Range or tuple[float, float]
        Sampling interval for curves.
    y_range : Range or tuple[float, float]
        Vertical view interval.
    """

    x_range: Range = field(default_factory=lambda: Range(-10.0, 10.0))
    y_range: Range = field(default_factory=lambda: Range(-10.0, 10.0))

    def __post_init__(self) -> None:
        self.x_range = Range.coerce(self.x_range)
        self.y_range = Range.coerce(self.y_range)

    def set_ranges(self, x_range: RangeLike, y_range: RangeLike) -> None:
        """Replace both ranges in one step."""
        new_x = Range.coerce(x_range)
        new_y = Range.coerce(y_range)
        self.x_range, self.y_range = new_x, new_y

    def copy(self) -> "Domain":
        return Domain(self.x_range, self.y_range)
