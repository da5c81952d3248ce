from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from admin_panel.core import config


@pytest.fixture(autouse=True)
def _reset_options(monkeypatch) -> None:
    monkeypatch.setattr(config, "_options", {})
