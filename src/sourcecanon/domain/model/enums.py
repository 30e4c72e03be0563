"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class SourceKind(StrEnum):
    """Transformation stage that produced an announced source.

    Values match the wire names used by the recording protocol.
    """

    SCRIPT_SOURCE = "scriptSource"
    HTML = "html"
    INLINE_SCRIPT = "inlineScript"
    SOURCE_MAPPED = "sourceMapped"
    OTHER = "other"
    PRETTY_PRINTED = "prettyPrinted"


# Later kinds look up edges created by earlier ones.
KIND_PROCESSING_ORDER: Final[tuple[SourceKind, ...]] = (
    SourceKind.SCRIPT_SOURCE,
    SourceKind.HTML,
    SourceKind.INLINE_SCRIPT,
    SourceKind.SOURCE_MAPPED,
    SourceKind.OTHER,
    SourceKind.PRETTY_PRINTED,
)
