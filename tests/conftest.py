"""Shared fixtures: table-driven randomness sources and logging isolation."""

from __future__ import annotations

import logging

import pytest

from geocoin.systems.rng import DeterministicRNG


class TableSource:
    """Fake ``str -> float`` source returning fixed values per key and counting calls."""

    def __init__(self, table: dict[str, float] | None = None, default: float = 0.99) -> None:
        self.table = dict(table or {})
        self.default = default
        self.calls: list[str] = []

    def __call__(self, key: str) -> float:
        self.calls.append(key)
        return self.table.get(key, self.default)


@pytest.fixture
def table_source():
    return TableSource


@pytest.fixture
def rng_from_table():
    def _build(table: dict[str, float], default: float = 0.99) -> DeterministicRNG:
        return DeterministicRNG(TableSource(table, default))
    return _build


@pytest.fixture
def restore_logging():
    """Undo ``setup_logging`` so handlers bound to captured streams do not leak."""
    root = logging.getLogger()
    access = logging.getLogger("uvicorn.access")
    saved = (list(root.handlers), root.level, access.level)
    yield
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    access.setLevel(saved[2])
