"""Drawing capability contract shared by canvases and plotting helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from reportlab.lib.colors import Color

from .vg import Font, Length, Path


class Canvas(Protocol):
    """Backend-agnostic vector graphics primitives used by plotting code."""

    def set_line_width(self, width: Length) -> None: ...
    def set_line_dash(self, dashes: Sequence[Length], offset: Length) -> None: ...
    def set_color(self, color: Color) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def translate(self, x: Length, y: Length) -> None: ...
    def scale(self, x: float, y: float) -> None: ...
    def push(self) -> None: ...
    def pop(self) -> None: ...
    def stroke(self, path: Path) -> None: ...
    def fill(self, path: Path) -> None: ...
    def fill_string(self, font: Font, x: Length, y: Length, text: str) -> None: ...
    def dpi(self) -> float: ...
