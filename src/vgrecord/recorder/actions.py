"""Recorded vector graphics actions.

Each primitive of the `Canvas` contract has a matching action type. Actions
are immutable values: they compare equal when their arguments and call
sites are equal, and `vg_call` always renders the same text for the same
action.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import ClassVar, Protocol

from reportlab.lib.colors import Color

from vgrecord.drawing import Canvas
from vgrecord.vg import Font, Length, Path, PathComp

from .caller import CallSite
from .formatting import (
    format_call,
    format_color,
    format_lengths,
    format_number,
    format_path,
    format_string,
)


class Action(Protocol):
    """One recorded primitive call."""

    name: ClassVar[str]
    call_site: CallSite | None

    def vg_call(self) -> str:
        """Return the rendered primitive call that produced the action."""

    def replay(self, target: Canvas) -> None:
        """Issue the same primitive call on `target`."""


@dataclass(frozen=True)
class SetWidth:
    name: ClassVar[str] = "SetWidth"

    width: Length
    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name, [format_number(self.width)])

    def replay(self, target: Canvas) -> None:
        target.set_line_width(self.width)


@dataclass(frozen=True)
class SetLineDash:
    name: ClassVar[str] = "SetLineDash"

    dashes: tuple[Length, ...]
    offset: Length
    call_site: CallSite | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "dashes", tuple(self.dashes))

    def vg_call(self) -> str:
        return format_call(
            self.call_site,
            self.name,
            [format_lengths(self.dashes), format_number(self.offset)],
        )

    def replay(self, target: Canvas) -> None:
        target.set_line_dash(list(self.dashes), self.offset)


@dataclass(frozen=True)
class SetColor:
    name: ClassVar[str] = "SetColor"

    color: Color
    call_site: CallSite | None = None

    def __post_init__(self) -> None:
        # reportlab colors are mutable; keep a private copy.
        if isinstance(self.color, Color):
            color = self.color.clone()
        else:
            color = copy.deepcopy(self.color)
        object.__setattr__(self, "color", color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetColor):
            return NotImplemented
        return self.call_site == other.call_site and format_color(self.color) == format_color(
            other.color
        )

    def __hash__(self) -> int:
        return hash((self.call_site, format_color(self.color)))

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name, [format_color(self.color)])

    def replay(self, target: Canvas) -> None:
        target.set_color(self.color)


@dataclass(frozen=True)
class Rotate:
    name: ClassVar[str] = "Rotate"

    angle: float
    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name, [format_number(self.angle)])

    def replay(self, target: Canvas) -> None:
        target.rotate(self.angle)


@dataclass(frozen=True)
class Translate:
    name: ClassVar[str] = "Translate"

    x: Length
    y: Length
    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name, [format_number(self.x), format_number(self.y)])

    def replay(self, target: Canvas) -> None:
        target.translate(self.x, self.y)


@dataclass(frozen=True)
class Scale:
    name: ClassVar[str] = "Scale"

    x: float
    y: float
    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name, [format_number(self.x), format_number(self.y)])

    def replay(self, target: Canvas) -> None:
        target.scale(self.x, self.y)


@dataclass(frozen=True)
class Push:
    name: ClassVar[str] = "Push"

    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name)

    def replay(self, target: Canvas) -> None:
        target.push()


@dataclass(frozen=True)
class Pop:
    name: ClassVar[str] = "Pop"

    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name)

    def replay(self, target: Canvas) -> None:
        target.pop()


@dataclass(frozen=True)
class Stroke:
    name: ClassVar[str] = "Stroke"

    path: tuple[PathComp, ...]
    call_site: CallSite | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name, [format_path(self.path)])

    def replay(self, target: Canvas) -> None:
        target.stroke(Path(self.path))


@dataclass(frozen=True)
class Fill:
    name: ClassVar[str] = "Fill"

    path: tuple[PathComp, ...]
    call_site: CallSite | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name, [format_path(self.path)])

    def replay(self, target: Canvas) -> None:
        target.fill(Path(self.path))


@dataclass(frozen=True)
class FillString:
    name: ClassVar[str] = "FillString"

    font_name: str
    font_size: Length
    x: Length
    y: Length
    text: str
    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(
            self.call_site,
            self.name,
            [
                format_string(self.font_name),
                format_number(self.font_size),
                format_number(self.x),
                format_number(self.y),
                format_string(self.text),
            ],
        )

    def replay(self, target: Canvas) -> None:
        target.fill_string(Font(self.font_name, self.font_size), self.x, self.y, self.text)


@dataclass(frozen=True)
class DPI:
    name: ClassVar[str] = "DPI"

    call_site: CallSite | None = None

    def vg_call(self) -> str:
        return format_call(self.call_site, self.name)

    def replay(self, target: Canvas) -> None:
        target.dpi()
