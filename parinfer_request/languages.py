from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageDefaults:
    # |foo bar| symbols (Common Lisp, Scheme)
    lisp_vline_symbols: bool = False
    # #| ... |# comments
    lisp_block_comment: bool = False
    # #; datum comments
    scheme_sexp_comment: bool = False
    # `...` long strings
    janet_long_strings: bool = False


_CLOJURE = LanguageDefaults()
_SCHEME = LanguageDefaults(lisp_vline_symbols=True, lisp_block_comment=True, scheme_sexp_comment=True)

LANGUAGE_DEFAULTS: Mapping[str, LanguageDefaults] = MappingProxyType(
    {
        "clojure": _CLOJURE,
        "janet": LanguageDefaults(janet_long_strings=True),
        "lisp": LanguageDefaults(lisp_vline_symbols=True, lisp_block_comment=True),
        "racket": _SCHEME,
        "scheme": _SCHEME,
    }
)


def language_defaults(name: str | None) -> LanguageDefaults:
    """Syntax switches for a filetype name.

    Missing and unknown names fall back to the clojure row, which works well
    enough for most lisps.
    """

    if name is None:
        return _CLOJURE
    found = LANGUAGE_DEFAULTS.get(name)
    if found is None:
        logger.debug("unknown filetype %r, using clojure defaults", name)
        return _CLOJURE
    return found
