"""Command-line entry point.

Run:
  parinfer-request --input-format kakoune -m smart
  echo '(foo' | python -m parinfer_request.cli --mode paren
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import TextIO

from parinfer_request.builder import build_request
from parinfer_request.errors import InputReadError, RequestDecodeError, RequestError
from parinfer_request.logging_setup import configure_logging
from parinfer_request.models import Request
from parinfer_request.options import PROG, Configuration, parse_args, usage

logger = logging.getLogger(__name__)

Engine = Callable[[Request, Configuration], str]

EXIT_OK = 0
EXIT_IO = 1
EXIT_USAGE = 2


def _exit_code(exc: RequestError) -> int:
    if isinstance(exc, (InputReadError, RequestDecodeError)):
        return EXIT_IO
    return EXIT_USAGE


def main(
    argv: Sequence[str] | None = None,
    *,
    engine: Engine | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    out = sys.stdout if stdout is None else stdout
    try:
        configure_logging(environ)
        config = parse_args(sys.argv[1:] if argv is None else argv)
    except RequestError as e:
        print(f"{PROG}: error: {e}", file=sys.stderr)
        print(usage(), file=sys.stderr)
        return EXIT_USAGE

    if config.help:
        out.write(usage())
        return EXIT_OK

    try:
        request = build_request(config, stdin=stdin, environ=environ)
    except RequestError as e:
        logger.debug("request construction failed", exc_info=True)
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return _exit_code(e)

    if engine is None:
        out.write(request.to_json() + "\n")
    else:
        out.write(engine(request, config))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
