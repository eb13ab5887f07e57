"""Plain-text persistence format for sampled curves.

Format
------
One line per curve. A line is a space-separated list of point tokens; each
token is ``x,y`` with both numbers written by Python's default float
formatting (``repr``), so non-finite values appear as ``nan``, ``inf`` and
``-inf`` and survive a round trip. Readers split lines on any whitespace and
tolerate trailing spaces. An empty line is a curve with no points.

Malformed tokens (anything that does not split on the comma into exactly two
floats) fail the whole read with :class:`CurveFileParseError`, and so do bytes
that are not valid UTF-8. A missing file reads as "no curves" rather than an
error.

Parsing is permissive: each coordinate goes through :class:`float`, so text
the writer never produces (``1_000``, ``infinity``, ``+1e3``) is accepted too.
A leading UTF-8 byte order mark is skipped.

Only points are stored; function parameters are not part of the format.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

__all__ = [
    "CurveFileParseError",
    "format_point",
    "format_curve_line",
    "parse_point",
    "parse_curve_line",
    "dumps",
    "loads",
    "read_curve_file",
    "write_curve_file",
]


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

Point = Tuple[float, float]
PathLike = Union[str, "os.PathLike[str]"]


class CurveFileParseError(ValueError):
    """Raised when a persisted curve line contains a malformed point token.

    Attributes
    ----------
    line_number : int or None
        1-based line number in the input, when known.
    token : str
        Offending token text.
    path : str or None
        Source file, when reading from disk.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str,
        line_number: Optional[int] = None,
        path: Optional[str] = None,
    ) -> None:
        location = ""
        if path is not None:
            location += f"{path}:"
        if line_number is not None:
            location += f"{line_number}: "
        elif location:
            location += " "
        super().__init__(f"{location}{message}")
        self.token = token
        self.line_number = line_number
        self.path = path


def format_point(x: float, y: float) -> str:
    """Return the ``x,y`` token for one point."""
    return f"{float(x)!r},{float(y)!r}"


def format_curve_line(points: Iterable[Sequence[float]]) -> str:
    """Return one curve as a line of point tokens (without the newline)."""
    return " ".join(format_point(x, y) for x, y in points)


def parse_point(token: str) -> Point:
    """Parse one ``x,y`` token.

    Raises
    ------
    CurveFileParseError
        If the token has no comma, more than one comma, or a non-numeric part.
    """
    parts = token.split(",")
    if len(parts) != 2:
        raise CurveFileParseError(
            f"malformed point token {token!r}: expected 'x,y'", token=token
        )
    try:
        return (float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise CurveFileParseError(
            f"malformed point token {token!r}: coordinates must be numbers", token=token
        ) from e


def parse_curve_line(line: str) -> list[Point]:
    """Parse one line into its ordered points."""
    return [parse_point(token) for token in line.split()]


def dumps(curves: Iterable[Iterable[Sequence[float]]]) -> str:
    """Serialize point sequences, one line per curve, each ending in ``\\n``."""
    return "".join(format_curve_line(points) + "\n" for points in curves)


def loads(text: str, *, path: Optional[str] = None) -> list[list[Point]]:
    """Parse serialized text into one point list per line.

    Raises
    ------
    CurveFileParseError
        On the first malformed token; the error carries its line number.
    """
    curves: list[list[Point]] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        try:
            curves.append(parse_curve_line(line))
        except CurveFileParseError as e:
            raise CurveFileParseError(
                str(e), token=e.token, line_number=line_number, path=path
            ) from e
    return curves


def write_curve_file(path: PathLike, curves: Iterable[Iterable[Sequence[float]]]) -> int:
    """Write curves to ``path`` and return the number of lines written."""
    lines = [format_curve_line(points) for points in curves]
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for line in lines:
            handle.write(line)
            handle.write("\n")
    logger.debug("wrote %d curve(s) to %s", len(lines), path)
    return len(lines)


def read_curve_file(path: PathLike) -> list[list[Point]]:
    """Read curves from ``path``.

    A missing file yields ``[]`` (logged at INFO). Other I/O errors propagate.

    Raises
    ------
    CurveFileParseError
        If any token in the file is malformed or the file is not UTF-8.
    """
    source = Path(path)
    try:
        with open(source, "r", encoding="utf-8-sig") as handle:
            text = handle.read()
    except FileNotFoundError:
        logger.info("curve file %s does not exist; nothing to load", source)
        return []
    except UnicodeDecodeError as e:
        bad = e.object[e.start:e.end]
        raise CurveFileParseError(
            f"file is not valid UTF-8 text ({e.reason})",
            token=bad.decode("latin-1"),
            path=str(source),
        ) from e
    curves = loads(text, path=str(source))
    logger.debug("read %d curve(s) from %s", len(curves), source)
    return curves
