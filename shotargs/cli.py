"""Command-line entry point for screenshot capture options."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from . import __version__
from .core import Configuration
from .core import handlers, suboptions
from .core.errors import ErrorKind, OptionError, ParserExit

logger = logging.getLogger(__name__)

PROG = "shotargs"
EXIT_FAILURE = 1
USAGE = (
    "%(prog)s [-bcfhkmopsuvz] [-a X,Y,W,H] [-C NAME] [-D DISPLAY]\n"
    "              [-d SEC] [-e CMD] [-l STYLE] [-n OPTS] [-q NUM] [-S CMD]\n"
    "              [-t NUM | GEOM] [FILE]"
)

NO_VALUE, REQUIRED, OPTIONAL = "none", "required", "optional"

# (short, long names, Configuration field, help)
FLAGS = [
    ("-b", ("--border",), "border", "Grab the window border as well"),
    ("-c", ("--count",), "countdown", "Show a countdown while delaying"),
    ("-f", ("--freeze",), "freeze", "Freeze the screen while selecting"),
    ("-k", ("--stack",), "stack", "Capture each display and stack them"),
    ("-m", ("--multidisp",), "multidisp", "Grab every display separately"),
    ("-o", ("--overwrite",), "overwrite", "Overwrite an existing output file"),
    ("-p", ("--pointer",), "pointer", "Include the mouse pointer"),
    ("-u", ("--focused", "--focussed"), "focused", "Grab the focused window"),
    ("-z", ("--silent",), "silent", "Do not beep"),
]

# (short, long, handler, metavar, help)
VALUE_OPTIONS = [
    ("-a", "--autoselect", handlers.parse_autoselect, "X,Y,W,H", "Capture this rectangle without selecting"),
    ("-C", "--class", handlers.parse_window_class_name, "NAME", "Only consider windows of this class"),
    ("-D", "--display", handlers.parse_display, "DISPLAY", "X display to use"),
    ("-d", "--delay", handlers.parse_delay, "SEC", "Wait SEC seconds before capturing"),
    ("-e", "--exec", handlers.parse_exec, "CMD", "Run CMD on the saved image"),
    ("-l", "--line", suboptions.parse_line, "STYLE", "Selection line: style,width,color,opacity,mode"),
    ("-n", "--note", handlers.parse_note, "OPTS", "Draw a text note on the image"),
    ("-q", "--quality", handlers.parse_quality, "NUM", "Image quality (1-100, default 75)"),
    ("-S", "--script", handlers.parse_script, "CMD", "Script to run after capturing"),
    ("-t", "--thumb", handlers.parse_thumbnail, "NUM|WxH", "Also write a thumbnail"),
    ("-w", "--window", handlers.parse_window, "ID", "Window id to capture"),
]


def _option_table() -> dict[str, tuple[str, str]]:
    """Map every option string to its canonical long name and value kind."""

    table = {
        "-h": ("--help", NO_VALUE),
        "--help": ("--help", NO_VALUE),
        "-v": ("--version", NO_VALUE),
        "--version": ("--version", NO_VALUE),
        "-s": ("--select", OPTIONAL),
        "--select": ("--select", OPTIONAL),
    }
    for short, longs, _field, _help in FLAGS:
        for name in (short, *longs):
            table[name] = (longs[0], NO_VALUE)
    for short, long, *_ in VALUE_OPTIONS:
        table[short] = table[long] = (long, REQUIRED)
    return table


OPTION_TABLE = _option_table()


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message: str):
        raise OptionError(message, ErrorKind.USAGE)

    def exit(self, status: int = 0, message: Optional[str] = None):
        if message:
            self._print_message(message, sys.stderr)
        raise ParserExit(status, message)


class _FlagAction(argparse.Action):
    def __init__(self, option_strings, dest, field, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)
        self.field = field

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace.config, self.field, True)


class _HandlerAction(argparse.Action):
    """Pass the option text to a handler that updates the configuration."""

    def __init__(self, option_strings, dest, handler, **kwargs):
        super().__init__(option_strings, dest, **kwargs)
        self.handler = handler

    def __call__(self, parser, namespace, values, option_string=None):
        self.handler(namespace.config, values)


class _NoteAction(_HandlerAction):
    def __call__(self, parser, namespace, values, option_string=None):
        self.handler(namespace.config, values, namespace.note_hook)


class _OutputFileAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):
        handlers.parse_output_files(namespace.config, values)


def build_parser() -> OptionParser:
    parser = OptionParser(
        prog=PROG,
        usage=USAGE,
        description="Capture the screen, a window or a selected area.",
        add_help=False,
        argument_default=argparse.SUPPRESS,
    )
    parser.add_argument("-h", "--help", action="help", help="Show this help and exit")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {__version__}",
        help="Show the version and exit",
    )
    for short, longs, field, help_text in FLAGS:
        parser.add_argument(short, *longs, action=_FlagAction, field=field, help=help_text)
    for short, long, handler, metavar, help_text in VALUE_OPTIONS:
        action = _NoteAction if handler is handlers.parse_note else _HandlerAction
        parser.add_argument(short, long, action=action, handler=handler, metavar=metavar, help=help_text)
    parser.add_argument(
        "-s",
        "--select",
        action=_HandlerAction,
        handler=suboptions.parse_selection,
        nargs="?",
        const=None,
        metavar="MODE",
        help="Select a window or rectangle; MODE is capture, hide or hole",
    )
    parser.add_argument("files", nargs="*", action=_OutputFileAction, metavar="FILE", help="Output file")
    return parser


def _resolve_long(name: str) -> Optional[tuple[str, str]]:
    """Look up a long option, accepting any prefix that picks one option."""

    if name in OPTION_TABLE:
        return OPTION_TABLE[name]
    matches = {entry for option, entry in OPTION_TABLE.items() if option.startswith("--") and option.startswith(name)}
    return matches.pop() if len(matches) == 1 else None


def _attach(long: str, kind: str, value: Optional[str], argv: Sequence[str], index: int) -> tuple[str, int]:
    """Build ``--long=value`` for an option, taking the next argument if needed."""

    if kind == OPTIONAL:
        return f"{long}={'capture' if value is None else value}", index
    if kind == REQUIRED and value is None and index < len(argv):
        return f"{long}={argv[index]}", index + 1
    if value is None:
        return long, index
    return f"{long}={value}", index


def normalize_arguments(argv: Sequence[str]) -> list[str]:
    """Rewrite options into ``--long[=value]`` form before argparse sees them.

    Required values are always taken from the following argument, even when
    it starts with ``-``. ``--select`` only takes an attached value
    (``-shide``, ``--select=hide``), so a bare ``-s`` never swallows the
    output filename. Clustered short flags (``-bzd5``) are split apart.
    """

    normalized: list[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        index += 1
        if token == "--":
            normalized.extend(argv[index - 1 :])
            break

        if token.startswith("--"):
            name, sep, value = token.partition("=")
            entry = _resolve_long(name)
            if entry is None:
                normalized.append(token)
                continue
            rewritten, index = _attach(*entry, value if sep else None, argv, index)
            normalized.append(rewritten)
        elif token.startswith("-") and len(token) > 1:
            for position in range(1, len(token)):
                entry = OPTION_TABLE.get(f"-{token[position]}")
                if entry is None or entry[1] == NO_VALUE:
                    normalized.append(f"-{token[position]}")
                    continue
                rest = token[position + 1 :]
                rewritten, index = _attach(*entry, rest or None, argv, index)
                normalized.append(rewritten)
                break
        else:
            normalized.append(token)
    return normalized


def parse_options(
    argv: Optional[Sequence[str]] = None,
    config: Optional[Configuration] = None,
    note_hook: Optional[handlers.NoteHook] = None,
) -> Configuration:
    """Parse ``argv`` into ``config`` (a fresh Configuration by default).

    Options are applied in argument order; leftover arguments are handled
    after all options. Raises OptionError for invalid input and ParserExit
    after ``--help`` or ``--version``.
    """

    if argv is None:
        argv = sys.argv[1:]
    if config is None:
        config = Configuration()
    namespace = argparse.Namespace(config=config, note_hook=note_hook)
    build_parser().parse_intermixed_args(normalize_arguments(argv), namespace)
    return config


def configure_logging() -> None:
    level_name = os.environ.get("SHOTARGS_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    try:
        config = parse_options(argv)
    except ParserExit as exc:
        return exc.status
    except OptionError as exc:
        logger.error("%s", exc)
        return EXIT_FAILURE

    logger.debug("Parsed options: %s", config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
