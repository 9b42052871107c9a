"""Command line entry point: record a demo scene and print its actions."""

from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_DPI, LOG_DATE_FORMAT, LOG_FORMAT, LOGGER_NAME
from .recorder import RecordingCanvas
from .scenes import SCENES, get_scene

_LOG_LEVELS = ("debug", "info", "warning", "error")


def init_logging(level: str = "warning") -> None:
    """Configure the root handler once; later calls only change the level."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(numeric_level)
    logging.getLogger(LOGGER_NAME).setLevel(numeric_level)


def record_scene(scene: str, *, dpi: float = DEFAULT_DPI, keep_caller: bool = False) -> RecordingCanvas:
    """Draw one built-in scene into a fresh recording canvas."""
    if dpi <= 0:
        msg = f"dpi must be positive, got {dpi}."
        raise ValueError(msg)
    spec = get_scene(scene)
    canvas = RecordingCanvas(dpi, keep_caller=keep_caller)
    spec.draw(canvas)
    logging.getLogger(LOGGER_NAME).debug("recorded %d actions for scene '%s'", len(canvas), scene)
    return canvas


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Record a demo scene and print its canvas calls.")
    parser.add_argument("scene", help="Scene to record. Use 'scenes' to list them.")
    parser.add_argument("--dpi", type=float, default=DEFAULT_DPI, help="Canvas resolution in DPI.")
    parser.add_argument(
        "--keep-caller",
        action="store_true",
        help="Prefix each call with the file and line that issued it.",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="warning",
        help="Logging level.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    argv_list = list(sys.argv[1:] if argv is None else argv)
    if argv_list == ["scenes"]:
        for spec in SCENES.values():
            print(f"{spec.scene_id}\t{spec.title}")
        return 0

    parser = _build_arg_parser()
    args = parser.parse_args(argv_list)
    init_logging(args.log_level)

    try:
        canvas = record_scene(args.scene, dpi=args.dpi, keep_caller=args.keep_caller)
    except ValueError as exc:
        parser.exit(status=2, message=f"error: {exc}\n")

    for line in canvas.vg_calls():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
