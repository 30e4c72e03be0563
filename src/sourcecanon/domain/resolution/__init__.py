"""Source identity resolution core.

Layered flow:
1) collect raw announcements in an append-only ``SourceRecordStore``
2) interpret them per kind and build the relationship graphs
3) walk canonical edges and expose the result as a ``SourceDetailsIndex``
"""

from __future__ import annotations

from .driver import ResolutionDriver, resolve_sources
from .edges import SourceGraphs, build_source_graphs
from .graph import RelationshipGraph
from .index import SourceDetailsIndex, key_for_source
from .resolve import find_canonical_id
from .store import SourceRecordStore

__all__ = [
    "RelationshipGraph",
    "ResolutionDriver",
    "SourceDetailsIndex",
    "SourceGraphs",
    "SourceRecordStore",
    "build_source_graphs",
    "find_canonical_id",
    "key_for_source",
    "resolve_sources",
]
