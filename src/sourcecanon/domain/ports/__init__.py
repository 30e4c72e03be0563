"""Ports consumed by application entry points."""

from __future__ import annotations

from .persistence import SourceAnnouncementRepository
from .unit_of_work import (
    RecordingRepositories,
    RecordingUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "RecordingRepositories",
    "RecordingUnitOfWork",
    "RepositoryCollection",
    "SourceAnnouncementRepository",
    "UnitOfWork",
]
