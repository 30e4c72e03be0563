"""Per-kind relationship rules (resolution pass 1).

Each rule receives the graphs built so far plus one typed record and adds that
record's edges. Rules run grouped by kind in ``KIND_PROCESSING_ORDER`` because
some of them read edges that earlier kinds created:
- inline scripts find their owning document through ``generated`` edges that
  HTML records declared
- pretty-printed copies point at a base whose canonical edge may already have
  been redirected by a source-mapped original
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from sourcecanon.domain.model import (
    KIND_PROCESSING_ORDER,
    PrettyPrintedSource,
    ProducingSource,
    SourceKind,
)

from .graph import RelationshipGraph

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sourcecanon.domain.model import SourceRecord

log = getLogger(__name__)


@dataclass(slots=True)
class SourceGraphs:
    """The three independent relationship graphs of one resolution run."""

    generated: RelationshipGraph = field(default_factory=lambda: RelationshipGraph("generated"))
    pretty_printed: RelationshipGraph = field(
        default_factory=lambda: RelationshipGraph("prettyPrinted")
    )
    canonical: RelationshipGraph = field(default_factory=lambda: RelationshipGraph("canonical"))


type EdgeRule = Callable[[SourceGraphs, SourceRecord], None]


def link_produced_sources(graphs: SourceGraphs, record: SourceRecord) -> None:
    """``record`` produced each of its ``produced_ids``."""

    graphs.generated.add_node(record.id)
    if isinstance(record, ProducingSource):
        for produced_id in record.produced_ids:
            graphs.generated.connect_node(record.id, produced_id)


def link_inline_script(graphs: SourceGraphs, record: SourceRecord) -> None:
    link_produced_sources(graphs, record)
    owners = graphs.generated.incoming(record.id)
    if not owners:
        log.debug("Inline script %s has no owning document", record.id)
        return
    graphs.canonical.connect_node(record.id, owners[0])


def link_source_mapped(graphs: SourceGraphs, record: SourceRecord) -> None:
    # The bundled output defers to the original it was mapped from.
    link_produced_sources(graphs, record)
    if isinstance(record, ProducingSource):
        for generated_id in record.produced_ids:
            graphs.canonical.connect_node(generated_id, record.id)


def link_pretty_printed(graphs: SourceGraphs, record: SourceRecord) -> None:
    if not isinstance(record, PrettyPrintedSource):
        raise TypeError(f"Expected a pretty-printed source, got {record.kind} for {record.id}")
    graphs.pretty_printed.connect_node(record.base_id, record.id)
    graphs.canonical.connect_node(record.id, record.base_id)


EDGE_RULES: dict[SourceKind, EdgeRule] = {
    SourceKind.SCRIPT_SOURCE: link_produced_sources,
    SourceKind.HTML: link_produced_sources,
    SourceKind.INLINE_SCRIPT: link_inline_script,
    SourceKind.SOURCE_MAPPED: link_source_mapped,
    SourceKind.OTHER: link_produced_sources,
    SourceKind.PRETTY_PRINTED: link_pretty_printed,
}


def group_by_kind(records: Iterable[SourceRecord]) -> dict[SourceKind, list[SourceRecord]]:
    grouped: dict[SourceKind, list[SourceRecord]] = {kind: [] for kind in KIND_PROCESSING_ORDER}
    for record in records:
        grouped[record.kind].append(record)
    return grouped


def build_source_graphs(records: Iterable[SourceRecord]) -> SourceGraphs:
    """Build fresh relationship graphs for ``records``."""

    graphs = SourceGraphs()
    grouped = group_by_kind(records)
    for kind in KIND_PROCESSING_ORDER:
        rule = EDGE_RULES[kind]
        for record in grouped[kind]:
            rule(graphs, record)
        if grouped[kind]:
            log.debug("Linked %d %s sources", len(grouped[kind]), kind)
    return graphs
