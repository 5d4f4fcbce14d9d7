from __future__ import annotations

from enum import StrEnum


class InputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"
    KAKOUNE = "kakoune"


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"
    KAKOUNE = "kakoune"


class Mode(StrEnum):
    INDENT = "indent"
    PAREN = "paren"
    SMART = "smart"
