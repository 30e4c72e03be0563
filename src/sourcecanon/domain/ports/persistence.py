"""Persistence ports for recorded source announcements."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sourcecanon.domain.model import RawSource


class SourceAnnouncementRepository(Protocol):
    """Announcements grouped by the recording that produced them."""

    def add(self, recording_id: str, record: RawSource) -> bool:
        """Store ``record``; return False when it was already stored."""
        ...

    def list_for_recording(self, recording_id: str) -> tuple[RawSource, ...]:
        """Announcements of one recording in the order they were stored."""
        ...

    def recording_ids(self) -> tuple[str, ...]: ...
