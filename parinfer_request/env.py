from __future__ import annotations

import os
import re
from collections.abc import Mapping

from parinfer_request.errors import InvalidValueError

_ONE_BASED_RE = re.compile(r"\+?[0-9]+")


def is_utf8_clean(s: str) -> bool:
    # Undecodable bytes arrive as lone surrogates (surrogateescape).
    try:
        s.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def env_str(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if environ is None else environ
    raw = env.get(name)
    if raw is not None and not is_utf8_clean(raw):
        raise InvalidValueError(name, raw, "not valid UTF-8")
    return raw


def to_zero_based(field: str, raw: str) -> int:
    """Convert an editor-supplied one-based position to a zero-based one.

    Only plain decimal digits (optionally prefixed with ``+``) are accepted;
    no surrounding whitespace, no sign other than ``+``, nothing below 1.
    """

    if not _ONE_BASED_RE.fullmatch(raw):
        raise InvalidValueError(field, raw, "expected a positive integer")
    value = int(raw)
    if value < 1:
        raise InvalidValueError(field, raw, "positions are one-based")
    return value - 1


def env_one_based(name: str, environ: Mapping[str, str] | None = None) -> int | None:
    raw = env_str(name, environ)
    if raw is None:
        return None
    return to_zero_based(name, raw)
