"""Recording-protocol adapter: wire schema and translation."""

from __future__ import annotations

from .schema import NewSourcePayload, SourceDetailsPayload
from .translator import (
    AnnouncementFormatError,
    dump_source_details,
    iter_announcements,
    raw_source_payload,
    read_announcements,
    source_details_payload,
    translate_new_source,
)

__all__ = [
    "AnnouncementFormatError",
    "NewSourcePayload",
    "SourceDetailsPayload",
    "dump_source_details",
    "iter_announcements",
    "raw_source_payload",
    "read_announcements",
    "source_details_payload",
    "translate_new_source",
]
