from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the repo root (containing `parinfer_request/`) is importable when pytest
# picks `tests/` as the rootdir (e.g., single-file runs).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def kakoune_env() -> dict[str, str]:
    """A minimal environment as exported by the Kakoune plugin."""

    return {"kak_selection": "(bar"}


