from __future__ import annotations

import pytest

from parinfer_request.env import env_one_based, env_str, to_zero_based
from parinfer_request.errors import InvalidValueError


def test_env_str_reads_injected_mapping() -> None:
    assert env_str("A", {"A": "x"}) == "x"
    assert env_str("A", {"A": ""}) == ""
    assert env_str("B", {"A": "x"}) is None


def test_env_str_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PARINFER_TEST_VAR", "hello")
    assert env_str("PARINFER_TEST_VAR") == "hello"
    monkeypatch.delenv("PARINFER_TEST_VAR")
    assert env_str("PARINFER_TEST_VAR") is None


@pytest.mark.parametrize(("raw", "expected"), [("1", 0), ("3", 2), ("+7", 6), ("0120", 119)])
def test_to_zero_based(raw: str, expected: int) -> None:
    assert to_zero_based("col", raw) == expected


@pytest.mark.parametrize("raw", ["", "0", "-1", "abc", "1.5", " 3", "3 ", "1_0", "٣"])
def test_to_zero_based_rejects_malformed(raw: str) -> None:
    with pytest.raises(InvalidValueError) as excinfo:
        to_zero_based("col", raw)
    assert excinfo.value.field == "col"
    assert excinfo.value.value == raw


def test_env_one_based_unset_is_none() -> None:
    assert env_one_based("X", {}) is None


def test_env_one_based_names_the_variable_on_error() -> None:
    with pytest.raises(InvalidValueError) as excinfo:
        env_one_based("kak_opt_parinfer_cursor_line", {"kak_opt_parinfer_cursor_line": "x"})
    assert excinfo.value.field == "kak_opt_parinfer_cursor_line"
    assert "kak_opt_parinfer_cursor_line" in str(excinfo.value)


def test_env_str_rejects_undecodable_bytes() -> None:
    raw = b"(\xff".decode("utf-8", "surrogateescape")
    with pytest.raises(InvalidValueError, match="not valid UTF-8") as excinfo:
        env_str("kak_selection", {"kak_selection": raw})
    assert excinfo.value.field == "kak_selection"


def test_env_str_accepts_non_ascii_utf8() -> None:
    assert env_str("A", {"A": "(λ x)"}) == "(λ x)"
