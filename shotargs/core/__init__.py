"""Configuration record shared by the option handlers and the capture code."""

__all__ = [
    "Configuration",
    "LineMode",
    "LineStyle",
    "SelectionMode",
    "LINE_WIDTH_RANGE",
    "MAX_DISPLAY_NAME",
    "MAX_LEN_WINDOW_CLASS_NAME",
    "MAX_OUTPUT_FILENAME",
]

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_LEN_WINDOW_CLASS_NAME = 80
MAX_OUTPUT_FILENAME = 256
MAX_DISPLAY_NAME = 256
LINE_WIDTH_RANGE = (1, 8)


class LineStyle(Enum):
    """Stroke used for the selection rectangle."""

    SOLID = "solid"
    DASHED = "dash"


class LineMode(Enum):
    """How the selection rectangle is drawn."""

    CLASSIC = "classic"
    EDGE = "edge"


class SelectionMode(Enum):
    """What happens to the interactively selected area."""

    CAPTURE = "capture"
    HIDE = "hide"
    HOLE = "hole"


@dataclass
class Configuration:
    """User-configurable settings for a capture run.

    Created with defaults, then filled in option by option in argument order.
    Passing the same instance to another parse call keeps earlier values.
    """

    quality: int = 75
    delay: int = 0
    line_style: LineStyle = LineStyle.SOLID
    line_width: int = 1
    line_opacity: int = 100
    line_mode: LineMode = LineMode.CLASSIC
    line_color: Optional[str] = None
    select: Optional[SelectionMode] = None
    thumb: int = 0
    thumb_width: int = 0
    thumb_height: int = 0
    thumb_file: Optional[str] = None
    autoselect: bool = False
    autoselect_x: int = 0
    autoselect_y: int = 0
    autoselect_w: int = 0
    autoselect_h: int = 0
    window_class_name: Optional[str] = None
    output_file: Optional[str] = None
    output_format: Optional[str] = None
    display: Optional[str] = None
    note: Optional[str] = None
    script: Optional[str] = None
    exec: Optional[str] = None
    window: int = 0
    border: bool = False
    multidisp: bool = False
    silent: bool = False
    pointer: bool = False
    freeze: bool = False
    overwrite: bool = False
    stack: bool = False
    focused: bool = False
    countdown: bool = False

    @property
    def autoselect_region(self) -> Optional[tuple[int, int, int, int]]:
        """Return the preselected rectangle as (x, y, w, h), if any."""

        if not self.autoselect:
            return None
        return (self.autoselect_x, self.autoselect_y, self.autoselect_w, self.autoselect_h)
