"""Integration-test fixtures for deterministic CLI environments."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_indexnorm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove `INDEXNORM_*` variables so host settings cannot leak into commands."""

    for key in ("INDEXNORM_VARIANT_TABLE", "INDEXNORM_LOG_LEVEL", "INDEXNORM_SIGNED_HASH"):
        monkeypatch.delenv(key, raising=False)
