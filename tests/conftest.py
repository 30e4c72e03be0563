from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

from sourcecanon.adapters.protocol import raw_source_payload
from sourcecanon.adapters.sqlalchemy import create_all_tables
from sourcecanon.adapters.sqlalchemy.unit_of_work import shutdown, startup
from tests.helpers.sources import bundled_app

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def started_adapter(sqlite_engine: Engine) -> Iterator[Engine]:
    startup(engine=sqlite_engine, force=True)
    try:
        yield sqlite_engine
    finally:
        shutdown()


@pytest.fixture
def announcements_file(tmp_path: Path) -> Path:
    path = tmp_path / "announcements.jsonl"
    lines = [json.dumps(raw_source_payload(record)) for record in bundled_app()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
