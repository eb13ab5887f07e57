# === SECTION: InputConvert [id: InputConvert]===
"""Numeric conversion of user-entered function parameters.

The input collaborator collects amplitudes, coefficients, bases and ranges as
text. Everything goes through :func:`InputConvert`, which accepts plain
numerals as well as SymPy expressions (``"pi/2"``, ``"sqrt(2)"``, ``"E"``).
"""

from __future__ import annotations

import math
from typing import Any, Sequence, Type, TypeVar, Union

import sympy as sp

from .domain import Range, validate_range

T = TypeVar("T", int, float, complex)

__all__ = ["InputConvert", "parse_numbers", "parse_coefficients", "parse_range"]


def _project(value: complex, dest_type: Type[T], truncate: bool, original: Any) -> T:
    """Project a complex value onto ``dest_type`` honoring ``truncate``."""
    if dest_type is complex:
        return complex(value)  # type: ignore[return-value]

    if value.imag != 0 and not truncate:
        raise ValueError(
            f"Could not convert non-real {original!r} to {dest_type.__name__}: imaginary part is non-zero."
        )
    real = value.real
    if dest_type is float:
        return float(real)  # type: ignore[return-value]

    if not math.isfinite(real):
        raise ValueError(f"Could not convert {original!r} to int: value is not finite.")
    if not real.is_integer() and not truncate:
        raise ValueError(f"Could not convert {original!r} to int: value is not an exact integer.")
    return int(real)  # type: ignore[return-value]


def InputConvert(obj: Any, dest_type: Type[T] = float, truncate: bool = True) -> T:
    """
    Convert ``obj`` to ``dest_type`` (``float``, ``int`` or ``complex``).

    Strings are tried as a native numeral first, then as a complex literal,
    then parsed and evaluated with SymPy.

    Truncation rules (``truncate``):

    - complex -> real: drop the imaginary part, or raise if ``False`` and it
      is non-zero;
    - float -> int: truncate toward zero, or raise if ``False`` and the value
      is not integral.

    Raises
    ------
    NotImplementedError
        If ``dest_type`` is unsupported.
    ValueError
        If conversion fails or violates truncation rules.
    """
    if dest_type not in (float, int, complex):
        raise NotImplementedError(
            f"Unsupported destination type: {dest_type!r}. Only float, int, and complex are supported."
        )

    if isinstance(obj, bool):
        raise ValueError(f"Could not convert boolean {obj!r} to {dest_type.__name__}.")

    if isinstance(obj, (int, float, complex)):
        try:
            value = complex(obj)
        except OverflowError as e:
            raise ValueError(f"Could not convert {obj!r} to {dest_type.__name__}.") from e
        return _project(value, dest_type, truncate, obj)

    if isinstance(obj, str):
        text = obj.strip()
        if text == "":
            raise ValueError(f"Cannot convert empty string to {dest_type.__name__}.")

        for parse in (float, complex):
            try:
                parsed = complex(parse(text))
            except ValueError:
                continue
            return _project(parsed, dest_type, truncate, obj)

        try:
            value = complex(sp.sympify(text).evalf())
        except Exception as e:
            raise ValueError(
                f"Could not convert {obj!r} to {dest_type.__name__} (neither directly nor via SymPy)."
            ) from e
        return _project(value, dest_type, truncate, obj)

    try:
        return _project(complex(obj), dest_type, truncate, obj)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Could not convert {obj!r} to {dest_type.__name__}.") from e


def parse_numbers(values: Union[str, Sequence[Any]]) -> list[float]:
    """Convert a whitespace/comma separated string or a sequence to floats.

    Examples
    --------
    >>> parse_numbers("1, 0 -1")
    [1.0, 0.0, -1.0]
    """
    if isinstance(values, str):
        items = values.replace(",", " ").split()
    else:
        items = list(values)
    return [float(InputConvert(item, float, truncate=False)) for item in items]


def parse_coefficients(values: Union[str, Sequence[Any]], *, count: int | None = None) -> list[float]:
    """Parse polynomial coefficients, optionally requiring exactly ``count``.

    Raises
    ------
    ValueError
        If a value cannot be converted or the count does not match.
    """
    coefficients = parse_numbers(values)
    if count is not None and len(coefficients) != count:
        raise ValueError(f"Expected {count} coefficients, got {len(coefficients)}.")
    return coefficients


def parse_range(values: Union[str, Sequence[Any]], *, name: str = "range") -> Range:
    """Parse a ``"min max"`` pair into a validated :class:`Range`.

    Raises
    ------
    ValueError
        If there are not exactly two values or ``min >= max``.
    """
    bounds = parse_numbers(values)
    if len(bounds) != 2:
        raise ValueError(f"{name} needs exactly two values (min max), got {len(bounds)}.")
    return validate_range((bounds[0], bounds[1]), name=name)

# === END OF SECTION: InputConvert [id: InputConvert]===
