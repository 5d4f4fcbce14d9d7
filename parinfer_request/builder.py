"""Build the canonical parinfer request from process input.

One handler per input format:

* text:    the whole of stdin is the buffer, every option at its default.
* kakoune: the selection and cursor state come from ``kak_*`` environment
           variables exported by the editor plugin; stdin is not touched.
* json:    stdin is a complete request document, decoded as-is.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping
from dataclasses import asdict
from typing import TextIO

from pydantic import ValidationError

from parinfer_request.env import env_one_based, env_str, is_utf8_clean
from parinfer_request.errors import InputReadError, MissingEnvError, RequestDecodeError
from parinfer_request.formats import InputFormat
from parinfer_request.languages import language_defaults
from parinfer_request.models import Request, RequestOptions
from parinfer_request.options import Configuration

logger = logging.getLogger(__name__)

KAK_SELECTION = "kak_selection"
KAK_FILETYPE = "kak_opt_filetype"
KAK_CURSOR_X = "kak_opt_parinfer_cursor_char_column"
KAK_CURSOR_LINE = "kak_opt_parinfer_cursor_line"
KAK_PREV_TEXT = "kak_opt_parinfer_previous_text"
KAK_PREV_CURSOR_X = "kak_opt_parinfer_previous_cursor_char_column"
KAK_PREV_CURSOR_LINE = "kak_opt_parinfer_previous_cursor_line"

_Builder = Callable[[Configuration, TextIO | None, Mapping[str, str] | None], Request]


def read_stdin(stream: TextIO | None = None) -> str:
    src = sys.stdin if stream is None else stream
    if src is None:
        raise InputReadError("standard input is not available")
    try:
        text = src.read()
    except (OSError, ValueError) as e:  # ValueError: decode failure or closed stream
        raise InputReadError(f"failed to read standard input: {e}") from e
    if not is_utf8_clean(text):
        raise InputReadError("standard input is not valid UTF-8")
    return text


def _text_request(config: Configuration, stdin: TextIO | None, environ: Mapping[str, str] | None) -> Request:
    text = read_stdin(stdin)
    return Request(
        mode=config.mode.value,
        text=text,
        options=RequestOptions(comment_char=config.comment_char),
    )


def _kakoune_request(config: Configuration, stdin: TextIO | None, environ: Mapping[str, str] | None) -> Request:
    text = env_str(KAK_SELECTION, environ)
    if text is None:
        raise MissingEnvError(KAK_SELECTION)

    defaults = language_defaults(env_str(KAK_FILETYPE, environ))
    return Request(
        mode=config.mode.value,
        text=text,
        options=RequestOptions(
            cursor_x=env_one_based(KAK_CURSOR_X, environ),
            cursor_line=env_one_based(KAK_CURSOR_LINE, environ),
            prev_text=env_str(KAK_PREV_TEXT, environ),
            prev_cursor_x=env_one_based(KAK_PREV_CURSOR_X, environ),
            prev_cursor_line=env_one_based(KAK_PREV_CURSOR_LINE, environ),
            comment_char=config.comment_char,
            **asdict(defaults),
        ),
    )


def _json_request(config: Configuration, stdin: TextIO | None, environ: Mapping[str, str] | None) -> Request:
    raw = read_stdin(stdin)
    try:
        return Request.model_validate_json(raw)
    except ValidationError as e:
        raise RequestDecodeError(
            f"invalid request document: {e.error_count()} error(s)\n{e}",
            e.errors(include_url=False),
        ) from e


_BUILDERS: dict[InputFormat, _Builder] = {
    InputFormat.TEXT: _text_request,
    InputFormat.KAKOUNE: _kakoune_request,
    InputFormat.JSON: _json_request,
}


def build_request(
    config: Configuration,
    *,
    stdin: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> Request:
    """Build the request for ``config.input_format``.

    ``stdin`` and ``environ`` default to the process stream and environment.
    Raises a RequestError subclass on any failure.
    """

    logger.debug("building request: input_format=%s mode=%s", config.input_format, config.mode)
    return _BUILDERS[config.input_format](config, stdin, environ)
