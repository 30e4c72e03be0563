"""SQLAlchemy adapter package for recorded announcements."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, source_announcement_table
from .repositories import SqlAlchemySourceAnnouncementRepository
from .unit_of_work import (
    SqlAlchemyRecordingUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyRecordingUnitOfWork",
    "SqlAlchemySourceAnnouncementRepository",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "metadata",
    "shutdown",
    "source_announcement_table",
    "startup",
]
