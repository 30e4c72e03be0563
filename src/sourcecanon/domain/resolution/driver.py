"""Orchestrator for source identity resolution.

A run is batch-only: later announcements can change the canonical identity of
earlier ones (a source-mapped original arriving after its bundle must still
relink the bundle), so callers buffer the full announcement set and resolve it
as a whole. Every run builds fresh graphs; nothing carries over between runs.

Stages:
0) interpret raw records per kind and check every referenced id is known
1) build generated/pretty-printed/canonical edges, grouped by kind
2) resolve canonical ids and assemble one ``SourceDetails`` per record
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from sourcecanon.domain.model import UnknownSourceError, source_record_from_raw

from .edges import build_source_graphs
from .index import SourceDetailsIndex
from .resolve import describe_source
from .store import SourceRecordStore

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sourcecanon.domain.model import RawSource, SourceRecord

log = getLogger(__name__)


@dataclass(slots=True)
class ResolutionDriver:
    """Resolve every record of a store snapshot."""

    store: SourceRecordStore

    def resolve(self) -> SourceDetailsIndex:
        records = tuple(source_record_from_raw(raw) for raw in self.store.records)
        _check_references(records)

        graphs = build_source_graphs(records)
        max_steps = len(records) + 1
        details = {
            record.id: describe_source(record, graphs, max_steps=max_steps) for record in records
        }

        index = SourceDetailsIndex(details)
        log.info(
            "Resolved %d sources into %d canonical sources",
            len(index),
            len(index.canonical_ids()),
        )
        return index


def resolve_sources(records: Iterable[RawSource]) -> SourceDetailsIndex:
    """Resolve a complete batch of announcements."""

    store = SourceRecordStore()
    store.extend(records)
    return ResolutionDriver(store).resolve()


def _check_references(records: tuple[SourceRecord, ...]) -> None:
    known = {record.id for record in records}
    for record in records:
        for related_id in record.related_ids:
            if related_id not in known:
                raise UnknownSourceError(related_id, referenced_by=record.id)
