from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest


def pytest_configure() -> None:
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    if src.exists():
        sys.path.insert(0, str(src))


@pytest.fixture()
def person() -> dict[str, Any]:
    return {
        "name": {"first": "John", "last": "Doe"},
        "phones": [
            {"type": "home", "number": "5556667777"},
            {"type": "work", "number": "5554443333"},
        ],
    }
