"""Built-in demo scenes drawn through the `Canvas` contract."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from .components import draw_box, draw_label, draw_line, fill_box, points_per_pixel
from .config import Style
from .drawing import Canvas
from .vg import CENTIMETER, Font


@dataclass(frozen=True)
class SceneSpec:
    """Metadata and draw callback for a demo scene."""

    scene_id: str
    title: str
    draw: Callable[[Canvas], None]


def _draw_box_scene(canvas: Canvas) -> None:
    fill_box(canvas, 0, 0, 4 * CENTIMETER, 2 * CENTIMETER)
    draw_box(canvas, 0, 0, 4 * CENTIMETER, 2 * CENTIMETER, dashes=(4, 2))


def _draw_label_scene(canvas: Canvas) -> None:
    font = Font(Style.FONT_NAME, Style.FONT_SIZE)
    draw_label(canvas, "Title", 72, 72, font=font, align="center")
    draw_label(canvas, "Y axis", 10, 36, font=font, angle=math.pi / 2, color=Style.ACCENT)


def _draw_axes_scene(canvas: Canvas) -> None:
    tick = 4 * points_per_pixel(canvas)
    draw_line(canvas, [(0, 0), (144, 0)])
    draw_line(canvas, [(0, 0), (0, 144)])
    for position in range(0, 145, 36):
        draw_line(canvas, [(position, 0), (position, -tick)], line_width=0.5)


SCENES: dict[str, SceneSpec] = {
    spec.scene_id: spec
    for spec in (
        SceneSpec("axes", "Two axes with tick marks", _draw_axes_scene),
        SceneSpec("box", "Filled box with a dashed outline", _draw_box_scene),
        SceneSpec("label", "Aligned and rotated labels", _draw_label_scene),
    )
}


def get_scene(scene: str) -> SceneSpec:
    if scene not in SCENES:
        msg = f"unknown scene '{scene}'. Valid scenes: {', '.join(sorted(SCENES))}."
        raise ValueError(msg)
    return SCENES[scene]
