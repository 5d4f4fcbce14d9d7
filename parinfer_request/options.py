from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import NoReturn, TypeVar

from parinfer_request.errors import ArgumentError, InvalidValueError
from parinfer_request.formats import InputFormat, Mode, OutputFormat

PROG = "parinfer-request"

_T = TypeVar("_T")

_MODES: Mapping[str, Mode] = {
    "i": Mode.INDENT,
    "indent": Mode.INDENT,
    "p": Mode.PAREN,
    "paren": Mode.PAREN,
    "s": Mode.SMART,
    "smart": Mode.SMART,
}
_INPUT_FORMATS: Mapping[str, InputFormat] = {f.value: f for f in InputFormat}
_OUTPUT_FORMATS: Mapping[str, OutputFormat] = {f.value: f for f in OutputFormat}


@dataclass(frozen=True)
class Configuration:
    help: bool = False
    input_format: InputFormat = InputFormat.TEXT
    output_format: OutputFormat = OutputFormat.TEXT
    mode: Mode = Mode.SMART
    comment_char: str = ";"


class _FlagParser(argparse.ArgumentParser):
    # argparse exits the process on bad input; callers want an exception.
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


class _StoreOnce(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):  # noqa: ANN001
        if getattr(namespace, self.dest, None) is not None:
            raise ArgumentError(f"option {'/'.join(self.option_strings)} given more than once")
        setattr(namespace, self.dest, values)


class _FlagOnce(_StoreOnce):
    def __init__(self, option_strings, dest, **kwargs) -> None:  # noqa: ANN001
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):  # noqa: ANN001
        super().__call__(parser, namespace, True, option_string)


def _flag_parser() -> argparse.ArgumentParser:
    parser = _FlagParser(
        prog=PROG,
        usage="%(prog)s [options]",
        epilog="Positional arguments are not accepted: input comes from stdin or the editor environment.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action=_FlagOnce, help="show this help message")
    parser.add_argument(
        "--input-format", action=_StoreOnce, metavar="FMT", help="'json', 'kakoune', 'text' (default: 'text')"
    )
    parser.add_argument(
        "-m",
        "--mode",
        action=_StoreOnce,
        metavar="MODE",
        help="parinfer mode (indent, paren, or smart) (default: smart)",
    )
    parser.add_argument(
        "--output-format", action=_StoreOnce, metavar="FMT", help="'json', 'kakoune', 'text' (default: 'text')"
    )
    parser.add_argument("--comment-char", action=_StoreOnce, metavar="CC", help="(default: ';')")
    return parser


def usage() -> str:
    return _flag_parser().format_help()


def _lookup(field: str, raw: str | None, table: Mapping[str, _T], default: _T) -> _T:
    if raw is None:
        return default
    try:
        return table[raw]
    except KeyError:
        raise InvalidValueError(field, raw, "expected one of: " + ", ".join(table)) from None


def _comment_char(raw: str | None) -> str:
    if raw is None:
        return ";"
    if len(raw) != 1:
        raise InvalidValueError("--comment-char", raw, "comment character must be a single character")
    return raw


def parse_args(argv: Sequence[str]) -> Configuration:
    """Parse process arguments (without the program name) into a Configuration.

    Raises ArgumentError for flags argparse cannot make sense of and
    InvalidValueError for well-formed flags carrying a value outside their
    vocabulary. With ``--help`` present the other values are left unchecked.
    """

    args = _flag_parser().parse_args(list(argv))
    if args.help:
        return Configuration(help=True)

    return Configuration(
        input_format=_lookup("--input-format", args.input_format, _INPUT_FORMATS, InputFormat.TEXT),
        output_format=_lookup("--output-format", args.output_format, _OUTPUT_FORMATS, OutputFormat.TEXT),
        mode=_lookup("--mode", args.mode, _MODES, Mode.SMART),
        comment_char=_comment_char(args.comment_char),
    )
