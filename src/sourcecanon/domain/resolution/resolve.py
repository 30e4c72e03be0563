"""Canonical identity resolution (resolution pass 2)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sourcecanon.domain.model import CyclicRelationshipError, SourceDetails

if TYPE_CHECKING:
    from sourcecanon.domain.model import SourceRecord

    from .edges import SourceGraphs
    from .graph import RelationshipGraph


def find_canonical_id(canonical: RelationshipGraph, source_id: str, *, max_steps: int) -> str:
    """Follow the first canonical edge from ``source_id`` until it settles.

    A node settles when it has no outgoing edge or its edge points back at itself.
    Raises ``CyclicRelationshipError`` when ``max_steps`` hops are not enough.
    """

    current = source_id
    for _ in range(max_steps):
        targets = canonical.outgoing(current)
        if not targets or targets[0] == current:
            return current
        current = targets[0]
    raise CyclicRelationshipError(source_id, steps=max_steps)


def describe_source(
    record: SourceRecord,
    graphs: SourceGraphs,
    *,
    max_steps: int,
) -> SourceDetails:
    pretty_printed = graphs.pretty_printed.outgoing(record.id)
    pretty_printed_from = graphs.pretty_printed.incoming(record.id)
    return SourceDetails(
        id=record.id,
        kind=record.kind,
        url=record.url,
        content_hash=record.content_hash,
        canonical_id=find_canonical_id(graphs.canonical, record.id, max_steps=max_steps),
        generated=graphs.generated.outgoing(record.id),
        generated_from=graphs.generated.incoming(record.id),
        pretty_printed=pretty_printed[0] if pretty_printed else None,
        pretty_printed_from=pretty_printed_from[0] if pretty_printed_from else None,
    )
