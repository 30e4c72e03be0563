"""SQLAlchemy table metadata for recorded source announcements.

Domain records are frozen dataclasses, so this adapter works on SQLAlchemy Core
tables and rebuilds ``RawSource`` values in the repository instead of mapping
the classes onto tables.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import (
    Column,
    Dialect,
    Enum,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    TypeDecorator,
)

from sourcecanon.domain.model import SourceKind

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class SourceIdListType(TypeDecorator[tuple[str, ...]]):
    """Ordered id list stored as a JSON array."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: tuple[str, ...] | None, dialect: Dialect) -> str:
        _ = dialect
        return json.dumps(list(value or ()))

    def process_result_value(self, value: str | None, dialect: Dialect) -> tuple[str, ...]:
        _ = dialect
        if value is None:
            return ()
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            raise ValueError(f"Stored source id list is not a JSON array: {value!r}")
        items = cast(list[Any], loaded)
        if not all(isinstance(item, str) for item in items):
            raise ValueError(f"Stored source id list holds non-string ids: {value!r}")
        return tuple(cast(list[str], items))


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

source_announcement_table = Table(
    "source_announcement",
    metadata,
    Column("recording_id", String(64), nullable=False),
    Column("source_id", String(255), nullable=False),
    Column("sequence", Integer, nullable=False),
    Column(
        "kind",
        Enum(
            SourceKind,
            name="source_kind",
            native_enum=False,
            values_callable=lambda kinds: [kind.value for kind in kinds],
        ),
        nullable=False,
    ),
    Column("url", Text, nullable=True),
    Column("content_hash", String(255), nullable=True),
    Column("downstream_ids", SourceIdListType(), nullable=False),
    PrimaryKeyConstraint("recording_id", "source_id"),
)


def create_all_tables(engine: Engine) -> None:
    log.debug("Creating announcement tables on %s", engine.url)
    metadata.create_all(engine)
