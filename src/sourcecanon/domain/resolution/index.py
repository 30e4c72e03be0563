"""Read-only lookup surface over resolved source descriptions."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sourcecanon.domain.model import SourceDetails


class _Keyed(Protocol):
    @property
    def url(self) -> str | None: ...

    @property
    def content_hash(self) -> str | None: ...


def key_for_source(source: _Keyed) -> str:
    """Identity of the announced content: records sharing it hold identical text."""

    return f"{source.url}:{source.content_hash}"


class SourceDetailsIndex(Mapping[str, "SourceDetails"]):
    """Resolved descriptions by source id, in announcement order."""

    __slots__ = ("_details", "_ids_by_key")

    def __init__(self, details: Mapping[str, SourceDetails]) -> None:
        self._details: dict[str, SourceDetails] = dict(details)
        self._ids_by_key: dict[str, list[str]] = {}
        for source_id, item in self._details.items():
            self._ids_by_key.setdefault(key_for_source(item), []).append(source_id)

    def __getitem__(self, source_id: str) -> SourceDetails:
        return self._details[source_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._details)

    def __len__(self) -> int:
        return len(self._details)

    def __repr__(self) -> str:
        return f"SourceDetailsIndex({len(self._details)} sources)"

    def canonical_ids(self) -> tuple[str, ...]:
        return tuple(source_id for source_id, item in self._details.items() if item.is_canonical)

    def canonical_details(self, source_id: str) -> SourceDetails:
        return self._details[self._details[source_id].canonical_id]

    def alternate_ids(self, source_id: str) -> tuple[str, ...]:
        """Other representations of the same logical file a user could switch to."""

        item = self._details[source_id]
        candidates = (
            item.canonical_id,
            item.pretty_printed,
            item.pretty_printed_from,
            *item.generated_from,
            *item.generated,
        )
        alternates: list[str] = []
        for candidate in candidates:
            if candidate is None or candidate == source_id or candidate in alternates:
                continue
            alternates.append(candidate)
        return tuple(alternates)

    def corresponding_source_ids(self, source_id: str) -> tuple[str, ...]:
        """Other records announcing identical content (same url and content hash).

        Pretty-printed records have no content hash and never correspond to anything.
        """

        item = self._details[source_id]
        if item.content_hash is None:
            return ()
        return tuple(
            other for other in self._ids_by_key[key_for_source(item)] if other != source_id
        )
