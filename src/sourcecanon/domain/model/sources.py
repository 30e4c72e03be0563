"""Source records as announced, as interpreted per kind, and as resolved.

``RawSource`` keeps the announcement exactly as received. Its ``downstream_ids``
field is ambiguous: for most kinds it lists records this one produced, but a
pretty-printed record lists the single record it is a reformatted copy *of*. The
typed variants below carry that meaning in their field names instead, so nothing
past ``source_record_from_raw`` has to remember the inversion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .enums import SourceKind
from .errors import MalformedRecordError


@dataclass(frozen=True, slots=True, kw_only=True)
class RawSource:
    """Source announcement as delivered by the recording protocol."""

    id: str
    kind: SourceKind
    url: str | None = None
    content_hash: str | None = None
    downstream_ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ProducingSource:
    """Any non pretty-printed source; ``produced_ids`` are records derived from it."""

    id: str
    kind: SourceKind
    url: str | None = None
    content_hash: str | None = None
    produced_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is SourceKind.PRETTY_PRINTED:
            raise MalformedRecordError(self.id, "pretty-printed sources have a base, not outputs")

    @property
    def related_ids(self) -> tuple[str, ...]:
        return self.produced_ids


@dataclass(frozen=True, slots=True, kw_only=True)
class PrettyPrintedSource:
    """Reformatted copy of ``base_id``, created on demand by the recorder."""

    id: str
    base_id: str
    url: str | None = None
    kind: Literal[SourceKind.PRETTY_PRINTED] = SourceKind.PRETTY_PRINTED

    @property
    def content_hash(self) -> None:
        return None

    @property
    def related_ids(self) -> tuple[str, ...]:
        return (self.base_id,)


type SourceRecord = ProducingSource | PrettyPrintedSource


def source_record_from_raw(raw: RawSource) -> SourceRecord:
    """Interpret ``raw.downstream_ids`` according to ``raw.kind``."""

    if raw.kind is SourceKind.PRETTY_PRINTED:
        if len(raw.downstream_ids) != 1:
            raise MalformedRecordError(
                raw.id,
                "pretty-printed source must reference exactly one base source, "
                f"got {len(raw.downstream_ids)}",
            )
        return PrettyPrintedSource(id=raw.id, base_id=raw.downstream_ids[0], url=raw.url)
    return ProducingSource(
        id=raw.id,
        kind=raw.kind,
        url=raw.url,
        content_hash=raw.content_hash,
        produced_ids=raw.downstream_ids,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceDetails:
    """Fully resolved description of one announced source."""

    id: str
    kind: SourceKind
    canonical_id: str
    url: str | None = None
    content_hash: str | None = None
    generated: tuple[str, ...] = ()
    generated_from: tuple[str, ...] = ()
    pretty_printed: str | None = None
    pretty_printed_from: str | None = None

    @property
    def is_canonical(self) -> bool:
        return self.canonical_id == self.id
