from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

# Zero-based line / column. Editors that count from one are converted before
# they get here.
Position = Annotated[int, Strict(), Field(ge=0)]
CommentChar = Annotated[str, Strict(), Field(min_length=1, max_length=1)]


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Change(_WireModel):
    x: Position
    line_no: Position
    old_text: StrictStr
    new_text: StrictStr


class RequestOptions(_WireModel):
    changes: list[Change] = Field(default_factory=list)
    cursor_x: Position | None = None
    cursor_line: Position | None = None
    prev_text: StrictStr | None = None
    prev_cursor_x: Position | None = None
    prev_cursor_line: Position | None = None
    force_balance: StrictBool = False
    return_parens: StrictBool = False
    comment_char: CommentChar = ";"
    partial_result: StrictBool = False
    selection_start_line: Position | None = None
    lisp_vline_symbols: StrictBool = False
    lisp_block_comment: StrictBool = False
    scheme_sexp_comment: StrictBool = False
    janet_long_strings: StrictBool = False


class Request(_WireModel):
    mode: StrictStr
    text: StrictStr
    options: RequestOptions = Field(default_factory=RequestOptions)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
