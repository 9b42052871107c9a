"""Configuration constants for the recording canvas."""

from reportlab.lib import colors

# Resolution reported by canvases that are not told otherwise.
DEFAULT_DPI = 72.0

LOGGER_NAME = "vgrecord"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class Style:
    """Default colors and fonts used by the drawing helpers."""

    LINE = colors.black
    FILL = colors.Color(0.8, 0.8, 0.8)
    ACCENT = colors.HexColor("#E67E22")
    TEXT = colors.black

    LINE_WIDTH = 1.0
    FONT_NAME = "Helvetica"
    FONT_SIZE = 12.0
