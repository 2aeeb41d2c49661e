"""Shared pytest fixtures for the full indexnorm test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop command log sinks after each test and silence library logging again."""

    yield
    logger.remove()
    logger.disable("indexnorm")


@pytest.fixture
def custom_variant_table(tmp_path: Path) -> Path:
    """Write a small custom variant table and return its path."""

    table_path = tmp_path / "custom_var.txt"
    table_path.write_text("甲乙丙\n山岳\n", encoding="utf-8")
    return table_path
