"""Recording canvas package."""

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
from .caller import CALLER_DEPTH, CallerResolver, CallSite, caller_site
from .canvas import RecordingCanvas, replay

__all__ = [
    "CALLER_DEPTH",
    "DPI",
    "Action",
    "CallSite",
    "CallerResolver",
    "Fill",
    "FillString",
    "Pop",
    "Push",
    "RecordingCanvas",
    "Rotate",
    "Scale",
    "SetColor",
    "SetLineDash",
    "SetWidth",
    "Stroke",
    "Translate",
    "caller_site",
    "replay",
]
