"""Plotting helpers written against the `Canvas` contract."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .config import Style
from .drawing import Canvas
from .vg import INCH, Font, Length, Path

_ALIGNMENTS = ("left", "center", "right")


def rect_path(x: Length, y: Length, width: Length, height: Length) -> Path:
    """Return a closed rectangle path with its lower-left corner at (x, y)."""
    if width <= 0 or height <= 0:
        msg = "rectangle width and height must be positive."
        raise ValueError(msg)
    return (
        Path()
        .move(x, y)
        .line(x + width, y)
        .line(x + width, y + height)
        .line(x, y + height)
        .close()
    )


def draw_box(
    canvas: Canvas,
    x: Length,
    y: Length,
    width: Length,
    height: Length,
    *,
    color: Any = Style.LINE,
    line_width: Length = Style.LINE_WIDTH,
    dashes: Sequence[Length] = (),
) -> None:
    """Stroke a rectangle outline inside its own graphics state."""
    path = rect_path(x, y, width, height)
    if line_width <= 0:
        msg = "line_width must be positive."
        raise ValueError(msg)

    canvas.push()
    canvas.set_color(color)
    canvas.set_line_width(line_width)
    if dashes:
        canvas.set_line_dash(dashes, 0)
    canvas.stroke(path)
    canvas.pop()


def fill_box(
    canvas: Canvas,
    x: Length,
    y: Length,
    width: Length,
    height: Length,
    *,
    color: Any = Style.FILL,
) -> None:
    """Fill a rectangle inside its own graphics state."""
    path = rect_path(x, y, width, height)
    canvas.push()
    canvas.set_color(color)
    canvas.fill(path)
    canvas.pop()


def draw_line(
    canvas: Canvas,
    points: Sequence[tuple[Length, Length]],
    *,
    color: Any = Style.LINE,
    line_width: Length = Style.LINE_WIDTH,
) -> None:
    """Stroke an open polyline through `points`."""
    if len(points) < 2:
        msg = "a line needs at least two points."
        raise ValueError(msg)

    path = Path().move(*points[0])
    for point in points[1:]:
        path.line(*point)

    canvas.set_color(color)
    canvas.set_line_width(line_width)
    canvas.stroke(path)


def draw_label(
    canvas: Canvas,
    text: str,
    x: Length,
    y: Length,
    *,
    font: Font | None = None,
    align: str = "left",
    angle: float = 0.0,
    color: Any = Style.TEXT,
) -> None:
    """Draw `text` anchored at (x, y), optionally rotated about the anchor."""
    if align not in _ALIGNMENTS:
        msg = f"align must be one of: {', '.join(_ALIGNMENTS)}."
        raise ValueError(msg)
    font = font or Font(Style.FONT_NAME, Style.FONT_SIZE)

    offset = 0.0
    if align != "left":
        width = font.width(text)
        offset = -width / 2 if align == "center" else -width

    canvas.push()
    canvas.set_color(color)
    canvas.translate(x, y)
    if angle:
        canvas.rotate(angle)
    canvas.fill_string(font, offset, 0, text)
    canvas.pop()


def points_per_pixel(canvas: Canvas) -> float:
    """Return the size of one device pixel in points."""
    dpi = canvas.dpi()
    if dpi <= 0:
        msg = f"canvas resolution must be positive, got {dpi}."
        raise ValueError(msg)
    return INCH / dpi
