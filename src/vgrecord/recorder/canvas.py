"""Recording implementation of the `Canvas` contract."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from reportlab.lib.colors import Color

from vgrecord.config import DEFAULT_DPI
from vgrecord.drawing import Canvas
from vgrecord.vg import Font, Length, Path

from .actions import (
    DPI,
    Action,
    Fill,
    FillString,
    Pop,
    Push,
    Rotate,
    Scale,
    SetColor,
    SetLineDash,
    SetWidth,
    Stroke,
    Translate,
)
from .caller import CALLER_DEPTH, CallerResolver, caller_site


class RecordingCanvas:
    """Canvas that records every primitive call instead of drawing.

    The log always starts with the base actions given at construction;
    primitives only ever append to it and `reset` truncates it back to the
    base. When `keep_caller` is set, actions appended from then on carry the
    file and line of the code that called the primitive.

    Not safe for concurrent use.
    """

    def __init__(
        self,
        dpi: float = DEFAULT_DPI,
        base: Iterable[Action] = (),
        *,
        keep_caller: bool = False,
        resolver: CallerResolver = caller_site,
    ) -> None:
        self.resolution = dpi
        self.keep_caller = keep_caller
        self._resolver = resolver
        self._base: tuple[Action, ...] = tuple(base)
        self._actions: list[Action] = list(self._base)

    @property
    def base(self) -> tuple[Action, ...]:
        """Starting state of the canvas."""
        return self._base

    @property
    def actions(self) -> tuple[Action, ...]:
        """Complete state of the canvas, base actions first."""
        return tuple(self._actions)

    def recorded(self) -> tuple[Action, ...]:
        """Return the actions appended after the base."""
        return tuple(self._actions[len(self._base) :])

    def vg_calls(self) -> list[str]:
        return [action.vg_call() for action in self._actions]

    def reset(self) -> None:
        """Reset the canvas to the base state."""
        self._actions = list(self._base)

    def __len__(self) -> int:
        return len(self._actions)

    def _append(self, action: Action) -> None:
        # Must be called directly from a primitive method; see CALLER_DEPTH.
        if self.keep_caller:
            site = self._resolver(CALLER_DEPTH)
            if site is not None:
                action = replace(action, call_site=site)
        self._actions.append(action)

    def set_line_width(self, width: Length) -> None:
        self._append(SetWidth(width=width))

    def set_line_dash(self, dashes: Sequence[Length], offset: Length) -> None:
        self._append(SetLineDash(dashes=tuple(dashes), offset=offset))

    def set_color(self, color: Color) -> None:
        self._append(SetColor(color=color))

    def rotate(self, angle: float) -> None:
        self._append(Rotate(angle=angle))

    def translate(self, x: Length, y: Length) -> None:
        self._append(Translate(x=x, y=y))

    def scale(self, x: float, y: float) -> None:
        self._append(Scale(x=x, y=y))

    def push(self) -> None:
        self._append(Push())

    def pop(self) -> None:
        self._append(Pop())

    def stroke(self, path: Path) -> None:
        self._append(Stroke(path=tuple(path)))

    def fill(self, path: Path) -> None:
        self._append(Fill(path=tuple(path)))

    def fill_string(self, font: Font, x: Length, y: Length, text: str) -> None:
        self._append(FillString(font_name=font.name, font_size=font.size, x=x, y=y, text=text))

    def dpi(self) -> float:
        """Record the resolution query and return the resolution."""
        self._append(DPI())
        return self.resolution


def replay(actions: Iterable[Action], target: Canvas) -> None:
    """Issue each action's primitive call on `target`, in order."""
    for action in actions:
        action.replay(target)
