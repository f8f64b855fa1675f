from __future__ import annotations

from collections.abc import Iterator

import pytest

import config


_SETTINGS_VARS = ("ENV", "DISCOUNT_ROUNDING_PLACES", "DISCOUNT_CLAMP_RATES")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Run each test without ambient env vars or a stray `.env` file."""
    for name in _SETTINGS_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    config.reset_settings()
    yield
    config.reset_settings()
