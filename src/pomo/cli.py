"""Command-line parsing for the pomo flag surface."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from pomo.app_config_parser import parse_minutes
from pomo.colors import RGB, InvalidColorFormatError, validate_palette_name

COMMAND_START = "start"
COMMAND_BREAK = "break"
COMMAND_END = "end"

USAGE_EXAMPLES = """\
examples:
  pomo                      start a pomodoro with the saved defaults
  pomo break -b 10          take a 10 minute break
  pomo start -track         mirror the countdown for `pomo -status`
  pomo end                  stop the running session
  pomo -c1 '#FFFFFF' -c2 '#00CCFF' -savec default
"""


class PomoArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(
            1,
            f"{self.prog}: error: {message}\n"
            f"Try '{self.prog} --help' for more information.\n",
        )


def _minutes(value: str) -> int:
    try:
        return parse_minutes(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def _color(value: str) -> RGB:
    try:
        return RGB.from_hex(value)
    except InvalidColorFormatError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def _palette_name(value: str) -> str:
    try:
        return validate_palette_name(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def build_parser() -> PomoArgumentParser:
    parser = PomoArgumentParser(
        prog="pomo",
        description="Terminal pomodoro timer with true-color progress display.",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=(COMMAND_START, COMMAND_BREAK, COMMAND_END),
        help="start a pomodoro, start a break, or end the running session",
    )

    timing = parser.add_argument_group("durations")
    timing.add_argument("-p", dest="pomodoro_override", type=_minutes, metavar="N",
                        help="focus minutes for this run only")
    timing.add_argument("-b", dest="break_override", type=_minutes, metavar="N",
                        help="break minutes for this run only")
    timing.add_argument("-setp", dest="set_pomodoro", type=_minutes, metavar="N",
                        help="save default focus minutes")
    timing.add_argument("-setb", dest="set_break", type=_minutes, metavar="N",
                        help="save default break minutes")

    colors = parser.add_argument_group("colors")
    colors.add_argument("-c1", dest="color1", type=_color, metavar="#RRGGBB",
                        help="save text color")
    colors.add_argument("-c2", dest="color2", type=_color, metavar="#RRGGBB",
                        help="save accent color for digits and the bar")
    colors.add_argument("-savec", dest="save_palette", type=_palette_name, metavar="NAME",
                        help="save the active colors as a named palette")
    colors.add_argument("-loadc", dest="load_palette", type=_palette_name, metavar="NAME",
                        help="make a saved palette the active colors")
    colors.add_argument("-deletec", dest="delete_palette", type=_palette_name,
                        metavar="NAME", help="delete a saved palette")
    colors.add_argument("-listc", dest="list_palettes", action="store_true",
                        help="list saved palettes")

    status = parser.add_argument_group("status")
    status.add_argument("-track", action="store_true",
                        help="publish live frames for `pomo -status`")
    status.add_argument("-status", action="store_true",
                        help="print the running timer's latest frame")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def has_management_flags(args: argparse.Namespace) -> bool:
    """True when the invocation asks for settings or palette work."""
    return any(
        (
            args.color1 is not None,
            args.color2 is not None,
            args.set_pomodoro is not None,
            args.set_break is not None,
            args.save_palette is not None,
            args.load_palette is not None,
            args.delete_palette is not None,
            args.list_palettes,
            args.status,
        )
    )


def resolve_command(args: argparse.Namespace) -> Optional[str]:
    """Explicit command, else `start` unless only management flags were given."""
    if args.command:
        return args.command
    if has_management_flags(args):
        return None
    return COMMAND_START
