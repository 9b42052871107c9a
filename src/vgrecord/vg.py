"""Argument types consumed by the drawing primitives."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from reportlab.pdfbase import pdfmetrics

# Lengths are plain floats measured in points.
Length = float

POINT = 1.0
INCH = 72.0
CENTIMETER = INCH / 2.54
MILLIMETER = CENTIMETER / 10

_UNITS = {
    "": POINT,
    "pt": POINT,
    "in": INCH,
    "cm": CENTIMETER,
    "mm": MILLIMETER,
}
_LENGTH_PATTERN = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-z]*)\s*$")


def parse_length(value: str) -> Length:
    """Parse a length such as ``"2cm"`` or ``"12"`` into points."""
    match = _LENGTH_PATTERN.match(value)
    if match is None:
        msg = f"invalid length '{value}'."
        raise ValueError(msg)
    number, unit = match.groups()
    if unit not in _UNITS:
        valid = ", ".join(sorted(unit for unit in _UNITS if unit))
        msg = f"unknown length unit '{unit}'. Valid units: {valid}."
        raise ValueError(msg)
    return float(number) * _UNITS[unit]


@dataclass(frozen=True)
class Font:
    """A named font at a fixed size in points."""

    name: str
    size: Length

    def width(self, text: str) -> Length:
        """Return the advance width of `text` set in this font."""
        try:
            return pdfmetrics.stringWidth(text, self.name, self.size)
        except KeyError as exc:
            msg = f"unknown font '{self.name}'."
            raise ValueError(msg) from exc


class PathCompKind(Enum):
    MOVE = "move"
    LINE = "line"
    ARC = "arc"
    CLOSE = "close"


@dataclass(frozen=True)
class PathComp:
    """One component of a path.

    Moves and lines use `x` and `y`. Arcs are centred on (`x`, `y`) and sweep
    `angle` radians from `start` at `radius`. Close uses no fields.
    """

    kind: PathCompKind
    x: Length = 0.0
    y: Length = 0.0
    radius: Length = 0.0
    start: float = 0.0
    angle: float = 0.0


class Path:
    """An ordered, growable sequence of path components."""

    def __init__(self, components: Iterable[PathComp] = ()) -> None:
        self._components = list(components)

    def move(self, x: Length, y: Length) -> Path:
        self._components.append(PathComp(PathCompKind.MOVE, x=x, y=y))
        return self

    def line(self, x: Length, y: Length) -> Path:
        self._components.append(PathComp(PathCompKind.LINE, x=x, y=y))
        return self

    def arc(self, x: Length, y: Length, radius: Length, start: float, angle: float) -> Path:
        self._components.append(
            PathComp(PathCompKind.ARC, x=x, y=y, radius=radius, start=start, angle=angle)
        )
        return self

    def close(self) -> Path:
        self._components.append(PathComp(PathCompKind.CLOSE))
        return self

    def __iter__(self) -> Iterator[PathComp]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __getitem__(self, index: int) -> PathComp:
        return self._components[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._components == other._components

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Path({self._components!r})"
