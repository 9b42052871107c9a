"""Call-site resolution for recorded actions."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass

from vgrecord.config import LOGGER_NAME

LOGGER = logging.getLogger(LOGGER_NAME)

# Frames between caller_site and the code that called a canvas primitive:
# caller_site itself, RecordingCanvas._append and the primitive method.
# Adding or removing a layer between a primitive and the resolver must
# change this in lockstep.
CALLER_DEPTH = 3


@dataclass(frozen=True)
class CallSite:
    """Source location of the code that issued a primitive."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line} "


CallerResolver = Callable[[int], "CallSite | None"]


def caller_site(depth: int = CALLER_DEPTH) -> CallSite | None:
    """Return the location `depth` frames above this function, if known."""
    getframe = getattr(sys, "_getframe", None)
    if getframe is None:
        LOGGER.debug("call-site capture unavailable: no frame introspection")
        return None
    try:
        frame = getframe(depth)
    except ValueError:
        LOGGER.debug("call-site capture unavailable: stack shallower than %d", depth)
        return None
    return CallSite(file=frame.f_code.co_filename, line=frame.f_lineno)
