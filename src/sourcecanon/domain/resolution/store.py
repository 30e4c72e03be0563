"""Append-only store of raw source announcements."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from sourcecanon.domain.model import DuplicateSourceError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sourcecanon.domain.model import RawSource

log = getLogger(__name__)


@dataclass(slots=True)
class SourceRecordStore(Mapping[str, "RawSource"]):
    """Insertion-ordered mapping from source id to the record as received.

    Records are never replaced. Announcing the same record twice is harmless;
    announcing a different record under a used id is rejected.
    """

    _records: dict[str, RawSource] = field(default_factory=dict[str, "RawSource"], repr=False)

    def __getitem__(self, source_id: str) -> RawSource:
        return self._records[source_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> tuple[RawSource, ...]:
        return tuple(self._records.values())

    def add(self, record: RawSource) -> None:
        existing = self._records.get(record.id)
        if existing is None:
            self._records[record.id] = record
            return
        if existing != record:
            raise DuplicateSourceError(record.id)
        log.debug("Ignoring repeated announcement of source %s", record.id)

    def extend(self, records: Iterable[RawSource]) -> None:
        for record in records:
            self.add(record)
