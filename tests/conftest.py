"""Shared test fixtures."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator

import pytest


@pytest.fixture
def sqlite_conn() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite connection."""
    conn = sqlite3.connect(":memory:")
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture
def mapper_logger() -> logging.Logger:
    """Logger injected into mappers under test."""
    return logging.getLogger("row_setter.tests")
