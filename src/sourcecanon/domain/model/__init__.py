"""Public domain model surface."""

from __future__ import annotations

from sourcecanon.domain.model.enums import KIND_PROCESSING_ORDER, SourceKind
from sourcecanon.domain.model.errors import (
    CyclicRelationshipError,
    DuplicateSourceError,
    MalformedRecordError,
    SourceResolutionError,
    UnknownSourceError,
)
from sourcecanon.domain.model.sources import (
    PrettyPrintedSource,
    ProducingSource,
    RawSource,
    SourceDetails,
    SourceRecord,
    source_record_from_raw,
)

__all__ = [
    "KIND_PROCESSING_ORDER",
    "CyclicRelationshipError",
    "DuplicateSourceError",
    "MalformedRecordError",
    "PrettyPrintedSource",
    "ProducingSource",
    "RawSource",
    "SourceDetails",
    "SourceKind",
    "SourceRecord",
    "SourceResolutionError",
    "UnknownSourceError",
    "source_record_from_raw",
]
