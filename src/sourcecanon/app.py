"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from sourcecanon.adapters.protocol import read_announcements
from sourcecanon.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyRecordingUnitOfWork,
    is_started,
    startup,
)
from sourcecanon.domain.resolution import ResolutionDriver, SourceRecordStore, resolve_sources

if TYPE_CHECKING:
    from pathlib import Path

    from sourcecanon.domain.model import RawSource
    from sourcecanon.domain.ports.unit_of_work import RecordingUnitOfWork
    from sourcecanon.domain.resolution import SourceDetailsIndex

UnitOfWorkFactory = Callable[[], "RecordingUnitOfWork"]


log = getLogger(__name__)


def resolve_announcement_file(path: Path) -> SourceDetailsIndex:
    """Resolve every announcement in a JSON Lines file."""

    records = read_announcements(path)
    log.info("Resolving %d announcements from %s", len(records), path)
    return resolve_sources(records)


def import_announcements(
    path: Path,
    *,
    recording_id: str,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> int:
    """Append the announcements in ``path`` to a stored recording.

    The combined recording is resolved before committing, so a batch that would
    leave the recording unresolvable is rejected as a whole. Returns the number of
    newly stored announcements.
    """

    records = read_announcements(path)
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    stored = 0
    with effective_uow() as uow:
        repository = uow.repositories.announcements
        for record in records:
            if repository.add(recording_id, record):
                stored += 1
        ResolutionDriver(_store_for(repository.list_for_recording(recording_id))).resolve()
        uow.commit()

    log.info(
        "Imported announcements into recording %s: stored=%s, read=%s",
        recording_id,
        stored,
        len(records),
    )
    return stored


def resolve_recording(
    recording_id: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> SourceDetailsIndex:
    """Resolve all announcements stored for ``recording_id``."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        records = uow.repositories.announcements.list_for_recording(recording_id)
    if not records:
        raise LookupError(f"No announcements stored for recording {recording_id!r}")
    return ResolutionDriver(_store_for(records)).resolve()


def _store_for(records: tuple[RawSource, ...]) -> SourceRecordStore:
    store = SourceRecordStore()
    store.extend(records)
    return store


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyRecordingUnitOfWork
