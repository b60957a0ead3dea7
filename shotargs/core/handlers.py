"""Per-option handlers that turn raw option text into configuration fields."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from . import MAX_DISPLAY_NAME, MAX_LEN_WINDOW_CLASS_NAME, MAX_OUTPUT_FILENAME, Configuration
from .errors import ErrorKind, OptionError
from ..utils import file_tools
from ..utils.validators import (
    non_negative,
    parse_required_decimal,
    parse_required_number,
    require_range,
)

logger = logging.getLogger(__name__)

NoteHook = Callable[[str], None]


def parse_delay(config: Configuration, text: str) -> None:
    config.delay = non_negative(parse_required_decimal(text, option="delay"))


def parse_quality(config: Configuration, text: str) -> None:
    # Not range-checked.
    config.quality = parse_required_decimal(text, option="quality")


def parse_window(config: Configuration, text: str) -> None:
    """Window ids are usually given in hex, so any base prefix is accepted."""

    config.window = parse_required_number(text, option="window")


def parse_exec(config: Configuration, text: str) -> None:
    config.exec = text


def parse_script(config: Configuration, text: str) -> None:
    config.script = text


def parse_display(config: Configuration, text: str) -> None:
    config.display = text[:MAX_DISPLAY_NAME]


def parse_thumbnail(config: Configuration, text: str) -> None:
    """Handle ``--thumb``: a percentage, or explicit ``WxH`` geometry."""

    if "x" in text:
        tokens = [token for token in text.split("x") if token]
        if not tokens:
            raise OptionError(
                f"the option is not a number: {text}",
                ErrorKind.NOT_A_NUMBER,
                option="thumb",
                argument=text,
            )
        config.thumb_width = parse_required_decimal(tokens[0], option="thumb")
        if len(tokens) < 2:
            return
        config.thumb_height = parse_required_decimal(tokens[1], option="thumb")

        if config.thumb_width < 0:
            config.thumb_width = 1
        if config.thumb_height < 0:
            config.thumb_height = 1
        config.thumb = 0 if not config.thumb_width and not config.thumb_height else 1
    else:
        config.thumb = require_range(parse_required_decimal(text, option="thumb"), 1, 100)


def parse_autoselect(config: Configuration, text: str) -> None:
    """Handle ``--autoselect X,Y,W,H``."""

    if "," not in text:
        raise OptionError(
            "invalid format, expected X,Y,W,H",
            ErrorKind.INVALID_FORMAT,
            option="autoselect",
            argument=text,
        )
    tokens = [token for token in text.split(",") if token]
    dimensions = [parse_required_decimal(token, option="autoselect") for token in tokens]
    if len(dimensions) != 4:
        raise OptionError(
            f"requires 4 arguments, got {len(dimensions)}",
            ErrorKind.WRONG_TOKEN_COUNT,
            option="autoselect",
            argument=text,
        )
    config.autoselect = True
    config.autoselect_x, config.autoselect_y, config.autoselect_w, config.autoselect_h = dimensions


def parse_window_class_name(config: Configuration, text: str) -> None:
    if text:
        config.window_class_name = text[:MAX_LEN_WINDOW_CLASS_NAME]


def compare_window_class_name(config: Configuration, target: str) -> bool:
    """Check a window's class name against the one given with ``--class``."""

    if config.window_class_name is None:
        raise ValueError("No window class name configured")
    limit = MAX_LEN_WINDOW_CLASS_NAME - 1
    return target[:limit] == config.window_class_name[:limit]


def parse_note(config: Configuration, text: str, note_hook: Optional[NoteHook] = None) -> None:
    """Store the annotation text and hand it to the note renderer."""

    if not text:
        raise OptionError("Required arguments for --note.", ErrorKind.EMPTY_NOTE, argument=text)
    config.note = text
    if note_hook is not None:
        note_hook(text)


def parse_output_files(config: Configuration, names: Iterable[str]) -> None:
    """Take the first leftover argument as the output file; warn about the rest."""

    for name in names:
        if config.output_file is not None:
            logger.warning("unrecognised option %s", name)
            continue

        if len(name) > MAX_OUTPUT_FILENAME:
            raise OptionError(
                f"output filename too long, must be less than {MAX_OUTPUT_FILENAME} characters",
                ErrorKind.FILENAME_TOO_LONG,
                argument=name,
            )
        config.output_file = name
        config.output_format = file_tools.output_format(name)
        if config.thumb:
            config.thumb_file = file_tools.name_thumbnail(name)
        logger.debug("Output file %s (format %s)", name, config.output_format)
