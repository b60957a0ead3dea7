"""Grammars for compound option values such as ``--line style=dash,width=2``."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Mapping, Optional

from . import LINE_WIDTH_RANGE, Configuration, LineMode, LineStyle, SelectionMode
from .errors import ErrorKind, OptionError
from ..utils.validators import is_string, parse_required_decimal

logger = logging.getLogger(__name__)

SuboptionHandler = Callable[[Configuration, str], None]


def iter_suboptions(text: str) -> Iterator[tuple[str, Optional[str]]]:
    """Split ``name=value,name=value`` into pairs.

    The value is None when a token has no ``=``. A trailing comma ends the
    list; any other empty token comes back as an empty name.
    """

    position = 0
    while position < len(text):
        comma = text.find(",", position)
        if comma == -1:
            token, position = text[position:], len(text)
        else:
            token, position = text[position:comma], comma + 1
        name, sep, value = token.partition("=")
        yield name, (value if sep else None)


def parse_suboptions(
    config: Configuration,
    text: str,
    handlers: Mapping[str, SuboptionHandler],
    option: str,
) -> None:
    """Apply each suboption in ``text`` to ``config``, left to right."""

    for name, value in iter_suboptions(text):
        handler = handlers.get(name)
        if handler is None:
            token = name if value is None else f"{name}={value}"
            raise OptionError(
                f"No match found for token: '{token}'",
                ErrorKind.UNKNOWN_TOKEN,
                option=option,
                argument=token,
            )
        if not is_string(value):
            raise OptionError(
                f"Missing value for suboption '{name}'",
                ErrorKind.MISSING_VALUE,
                option=option,
                argument=name,
            )
        handler(config, value)


def _unknown_value(name: str, value: str) -> OptionError:
    return OptionError(
        f"Unknown value for suboption '{name}': {value}",
        ErrorKind.UNKNOWN_VALUE,
        option="line",
        argument=value,
    )


def _line_style(config: Configuration, value: str) -> None:
    if value.startswith("dash"):
        config.line_style = LineStyle.DASHED
    elif value.startswith("solid"):
        config.line_style = LineStyle.SOLID
    else:
        raise _unknown_value("style", value)


def _line_width(config: Configuration, value: str) -> None:
    width = parse_required_decimal(value, option="line")
    low, high = LINE_WIDTH_RANGE
    if width < low or width > high:
        raise OptionError(
            f"Value of the range ({low}..{high}) for suboption 'width': {width}",
            ErrorKind.VALUE_OUT_OF_RANGE,
            option="line",
            argument=value,
        )
    config.line_width = width


def _line_color(config: Configuration, value: str) -> None:
    config.line_color = value


def _line_opacity(config: Configuration, value: str) -> None:
    # Not range-checked.
    config.line_opacity = parse_required_decimal(value, option="line")


def _line_mode(config: Configuration, value: str) -> None:
    for mode in LineMode:
        if value.startswith(mode.value):
            config.line_mode = mode
            return
    raise _unknown_value("mode", value)


LINE_SUBOPTIONS: dict[str, SuboptionHandler] = {
    "style": _line_style,
    "width": _line_width,
    "color": _line_color,
    "opacity": _line_opacity,
    "mode": _line_mode,
}


def parse_line(config: Configuration, text: str) -> None:
    """Handle ``--line`` suboptions: style, width, color, opacity, mode."""

    parse_suboptions(config, text, LINE_SUBOPTIONS, option="line")
    logger.debug(
        "Line style=%s width=%d opacity=%d mode=%s color=%s",
        config.line_style.value,
        config.line_width,
        config.line_opacity,
        config.line_mode.value,
        config.line_color,
    )


def parse_selection(config: Configuration, value: Optional[str]) -> None:
    """Handle ``--select[=MODE]``; no value means capture."""

    if value is None:
        config.select = SelectionMode.CAPTURE
        return

    mode_text = value.rpartition("=")[2]
    for mode in SelectionMode:
        if mode_text.startswith(mode.value):
            config.select = mode
            return
    raise OptionError(
        f"Unknown value for suboption '{mode_text}'",
        ErrorKind.UNKNOWN_VALUE,
        option="select",
        argument=mode_text,
    )
