"""Closed family of plottable real functions.

Purpose
-------
Defines the four function kinds a curve can be sampled from and a single
``evaluate`` entry point that dispatches over them with structural pattern
matching.

Concepts and structure
----------------------
Each variant is a frozen dataclass holding its parameters by value:

- :class:`Polynomial` -- ``sum(c[i] * x**i)``,
- :class:`Trigonometric` -- ``amplitude * sin|cos(frequency*x + phase)``,
- :class:`Exponential` -- ``coefficient * base**x``,
- :class:`Logarithmic` -- ``coefficient * log_base(x) + offset``.

``MathFunction`` is the union of the four classes. There is no open base class;
code that needs a new kind adds a variant here and a ``case`` in
:func:`evaluate`.

Important gotchas
-----------------
- Evaluation follows IEEE semantics through NumPy. ``0**-1`` gives ``inf``,
  a negative base to a fractional power gives ``nan``, and neither raises.
  Floating-point warnings are silenced inside :func:`evaluate`.
- An unrecognized trigonometric ``kind`` evaluates to ``0.0`` everywhere.
- ``symbolic`` is a display expression only. Nothing in the package
  manipulates it.

Examples
--------
>>> from curveplot.math_function import Polynomial, evaluate
>>> evaluate(Polynomial((1, 0, -1)), 3.0)
-8.0
>>> import numpy as np
>>> Polynomial((0, 1)).evaluate(np.array([1.0, 2.0]))
array([1., 2.])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Union

import numpy as np
import sympy as sp

__all__ = [
    "TRIG_KINDS",
    "Polynomial",
    "Trigonometric",
    "Exponential",
    "Logarithmic",
    "MathFunction",
    "evaluate",
]


TRIG_KINDS: tuple[str, ...] = ("sin", "cos")

_X = sp.Symbol("x")


def _coerce_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a real number, got {value!r}") from e


@dataclass(frozen=True)
class Polynomial:
    """Polynomial ``c0 + c1*x + ... + cn*x**n``.

    Parameters
    ----------
    coefficients : sequence of float
        Coefficients in ascending power order. An empty sequence is the zero
        polynomial.
    """

    coefficients: tuple[float, ...] = ()

    label: ClassVar[str] = "Polynomial Function"

    def __post_init__(self) -> None:
        coeffs = tuple(
            _coerce_float(c, f"coefficients[{i}]")
            for i, c in enumerate(self.coefficients)
        )
        object.__setattr__(self, "coefficients", coeffs)

    @property
    def degree(self) -> int:
        """Return ``len(coefficients) - 1`` (``-1`` for the empty polynomial)."""
        return len(self.coefficients) - 1

    @property
    def symbolic(self) -> sp.Expr:
        return sp.Add(*(sp.Float(c) * _X**i for i, c in enumerate(self.coefficients)))

    def evaluate(self, x: Any) -> Any:
        return evaluate(self, x)

    __call__ = evaluate


@dataclass(frozen=True)
class Trigonometric:
    """Scaled sine or cosine wave.

    Parameters
    ----------
    kind : str
        ``"sin"`` or ``"cos"``. Any other value is accepted and evaluates to
        zero.
    amplitude, frequency, phase : float
        Wave parameters in ``amplitude * trig(frequency * x + phase)``.
    """

    kind: str = "sin"
    amplitude: float = 1.0
    frequency: float = 1.0
    phase: float = 0.0

    label: ClassVar[str] = "Trigonometric Function"

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", str(self.kind))
        for name in ("amplitude", "frequency", "phase"):
            object.__setattr__(self, name, _coerce_float(getattr(self, name), name))

    @property
    def is_known_kind(self) -> bool:
        return self.kind in TRIG_KINDS

    @property
    def symbolic(self) -> sp.Expr:
        arg = sp.Float(self.frequency) * _X + sp.Float(self.phase)
        if self.kind == "sin":
            return sp.Float(self.amplitude) * sp.sin(arg)
        if self.kind == "cos":
            return sp.Float(self.amplitude) * sp.cos(arg)
        return sp.Integer(0)

    def evaluate(self, x: Any) -> Any:
        return evaluate(self, x)

    __call__ = evaluate


@dataclass(frozen=True)
class Exponential:
    """Exponential ``coefficient * base**x``.

    The base is not validated. Zero and negative bases produce ``inf``/``nan``
    where the power is undefined.
    """

    coefficient: float = 1.0
    base: float = float(np.e)

    label: ClassVar[str] = "Exponential Function"

    def __post_init__(self) -> None:
        object.__setattr__(self, "coefficient", _coerce_float(self.coefficient, "coefficient"))
        object.__setattr__(self, "base", _coerce_float(self.base, "base"))

    @property
    def symbolic(self) -> sp.Expr:
        return sp.Float(self.coefficient) * sp.Pow(sp.Float(self.base), _X, evaluate=False)

    def evaluate(self, x: Any) -> Any:
        return evaluate(self, x)

    __call__ = evaluate


@dataclass(frozen=True)
class Logarithmic:
    """Logarithm ``coefficient * log(x) / log(base) + offset``.

    Raises
    ------
    ValueError
        If ``base`` is not positive or equals ``1``.

    Notes
    -----
    Points with ``x <= 0`` are not rejected: ``x == 0`` evaluates to an
    infinity and ``x < 0`` to ``nan``.
    """

    coefficient: float = 1.0
    base: float = 10.0
    offset: float = 0.0

    label: ClassVar[str] = "Logarithmic Function"

    def __post_init__(self) -> None:
        for name in ("coefficient", "base", "offset"):
            object.__setattr__(self, name, _coerce_float(getattr(self, name), name))
        if not self.base > 0.0 or self.base == 1.0:
            raise ValueError(f"logarithm base must be positive and != 1, got {self.base!r}")

    @property
    def symbolic(self) -> sp.Expr:
        return sp.Float(self.coefficient) * sp.log(_X, sp.Float(self.base)) + sp.Float(self.offset)

    def evaluate(self, x: Any) -> Any:
        return evaluate(self, x)

    __call__ = evaluate


MathFunction = Union[Polynomial, Trigonometric, Exponential, Logarithmic]


def _polyval(coefficients: Sequence[float], x: np.ndarray) -> np.ndarray:
    # Term-by-term power sum, same order as sum(c * x**i).
    result = np.zeros_like(x)
    for i, c in enumerate(coefficients):
        result = result + c * np.power(x, i)
    return result


def evaluate(function: MathFunction, x: Any) -> Any:
    """Evaluate ``function`` at ``x``.

    Parameters
    ----------
    function : MathFunction
        Any of the four variants.
    x : float or array-like
        Scalar or array of abscissae.

    Returns
    -------
    float or numpy.ndarray
        A Python ``float`` for scalar input, otherwise a float array with the
        shape of ``x``. Undefined points are ``nan`` or ``inf``.

    Raises
    ------
    TypeError
        If ``function`` is not one of the known variants.
    """
    xs = np.asarray(x, dtype=float)
    with np.errstate(all="ignore"):
        match function:
            case Polynomial(coefficients=coefficients):
                ys = _polyval(coefficients, xs)
            case Trigonometric(kind="sin", amplitude=a, frequency=f, phase=p):
                ys = a * np.sin(f * xs + p)
            case Trigonometric(kind="cos", amplitude=a, frequency=f, phase=p):
                ys = a * np.cos(f * xs + p)
            case Trigonometric():
                ys = np.zeros_like(xs)
            case Exponential(coefficient=k, base=b):
                ys = k * np.power(b, xs)
            case Logarithmic(coefficient=a, base=b, offset=c):
                ys = a * np.log(xs) / np.log(b) + c
            case _:
                raise TypeError(
                    f"evaluate() expects a Polynomial, Trigonometric, Exponential or "
                    f"Logarithmic function, got {type(function).__name__}"
                )
    if xs.ndim == 0:
        return float(ys)
    return np.asarray(ys, dtype=float)
