"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select

from sourcecanon.adapters.sqlalchemy.mappings import source_announcement_table
from sourcecanon.domain.model import DuplicateSourceError, RawSource

if TYPE_CHECKING:
    from sqlalchemy.engine import Row
    from sqlalchemy.orm import Session


class SqlAlchemySourceAnnouncementRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, recording_id: str, record: RawSource) -> bool:
        existing = self._get(recording_id, record.id)
        if existing is not None:
            if existing != record:
                raise DuplicateSourceError(record.id)
            return False

        table = source_announcement_table
        next_sequence = self.session.execute(
            select(func.coalesce(func.max(table.c.sequence), -1) + 1).where(
                table.c.recording_id == recording_id
            )
        ).scalar_one()
        self.session.execute(
            insert(table).values(
                recording_id=recording_id,
                source_id=record.id,
                sequence=next_sequence,
                kind=record.kind,
                url=record.url,
                content_hash=record.content_hash,
                downstream_ids=record.downstream_ids,
            )
        )
        return True

    def list_for_recording(self, recording_id: str) -> tuple[RawSource, ...]:
        table = source_announcement_table
        stmt = (
            select(table)
            .where(table.c.recording_id == recording_id)
            .order_by(table.c.sequence)
        )
        return tuple(_raw_source(row) for row in self.session.execute(stmt))

    def recording_ids(self) -> tuple[str, ...]:
        table = source_announcement_table
        stmt = select(table.c.recording_id).distinct().order_by(table.c.recording_id)
        return tuple(self.session.execute(stmt).scalars())

    def _get(self, recording_id: str, source_id: str) -> RawSource | None:
        table = source_announcement_table
        stmt = (
            select(table)
            .where(table.c.recording_id == recording_id)
            .where(table.c.source_id == source_id)
        )
        row = self.session.execute(stmt).one_or_none()
        return _raw_source(row) if row is not None else None


def _raw_source(row: Row[tuple[object, ...]]) -> RawSource:
    mapping = row._mapping  # noqa: SLF001
    return RawSource(
        id=mapping["source_id"],
        kind=mapping["kind"],
        url=mapping["url"],
        content_hash=mapping["content_hash"],
        downstream_ids=mapping["downstream_ids"],
    )
