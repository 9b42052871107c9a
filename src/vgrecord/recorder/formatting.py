"""Canonical text rendering of recorded primitive calls."""

from __future__ import annotations

import dataclasses
import json
import math
from collections.abc import Iterable, Sequence
from typing import Any

from reportlab.lib.colors import CMYKColor, Color

from vgrecord.vg import PathComp

from .caller import CallSite

_CMYK_FIELDS = ("cyan", "magenta", "yellow", "black", "alpha")
_RGB_FIELDS = ("red", "green", "blue", "alpha")
_PATH_COMP_NUMERIC_FIELDS = ("x", "y", "radius", "start", "angle")


def format_number(value: float) -> str:
    """Render a number in its shortest round-trip form: 12, 0.72, 1e+16.

    Non-finite values render as +Inf, -Inf and NaN.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_string(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def format_lengths(values: Iterable[float]) -> str:
    return "[" + ", ".join(format_number(value) for value in values) + "]"


def _format_fields(type_name: str, fields: Sequence[tuple[str, str]]) -> str:
    body = ", ".join(f"{key}={value}" for key, value in fields)
    return f"{type_name}({body})"


def format_color(color: Any) -> str:
    """Dump every channel of a color.

    CMYK colors are checked first since reportlab derives them from Color.
    """
    if isinstance(color, CMYKColor):
        names = _CMYK_FIELDS
    elif isinstance(color, Color):
        names = _RGB_FIELDS
    else:
        return format_value(color)
    return _format_fields(
        type(color).__name__,
        [(name, format_number(getattr(color, name))) for name in names],
    )


def format_path_comp(comp: PathComp) -> str:
    fields = [("kind", format_string(comp.kind.value))]
    fields.extend((name, format_number(getattr(comp, name))) for name in _PATH_COMP_NUMERIC_FIELDS)
    return _format_fields("PathComp", fields)


def format_path(components: Iterable[PathComp]) -> str:
    return "Path[" + ", ".join(format_path_comp(comp) for comp in components) + "]"


def format_value(value: Any) -> str:
    """Render an arbitrary argument value."""
    if isinstance(value, bool):
        return repr(value)
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return format_string(value)
    if isinstance(value, Color):
        return format_color(value)
    if isinstance(value, PathComp):
        return format_path_comp(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _format_fields(
            type(value).__name__,
            [
                (field.name, format_value(getattr(value, field.name)))
                for field in dataclasses.fields(value)
            ],
        )
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if hasattr(value, "__dict__") and not isinstance(value, type):
        # Attributes in name order so equal objects render equal text.
        attributes = vars(value)
        return _format_fields(
            type(value).__name__,
            [(name, format_value(attributes[name])) for name in sorted(attributes)],
        )
    return repr(value)


def format_call(call_site: CallSite | None, name: str, args: Sequence[str] = ()) -> str:
    """Assemble `<file>:<line> Name(arg, arg)`; the prefix is empty without a call site."""
    prefix = "" if call_site is None else str(call_site)
    return f"{prefix}{name}({', '.join(args)})"
