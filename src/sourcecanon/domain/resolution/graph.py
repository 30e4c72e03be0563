"""Directed relationship graph keyed by source id.

The graph is intentionally small and mutable:
- nodes are plain string ids, edges are directed and unweighted
- neighbour lists keep insertion order, so "first edge" is deterministic
- nothing is ever removed except through ``reroute``

Cycle detection is left to callers walking the graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class RelationshipGraph:
    """Adjacency lists in both directions for one kind of relationship."""

    name: str = "relationships"
    _outgoing: dict[str, list[str]] = field(default_factory=dict[str, list[str]], repr=False)
    _incoming: dict[str, list[str]] = field(default_factory=dict[str, list[str]], repr=False)

    @property
    def nodes(self) -> tuple[str, ...]:
        return tuple(self._outgoing)

    def __contains__(self, node: object) -> bool:
        return node in self._outgoing

    def __len__(self) -> int:
        return len(self._outgoing)

    def add_node(self, node: str) -> None:
        self._outgoing.setdefault(node, [])
        self._incoming.setdefault(node, [])

    def connect_node(self, source: str, target: str) -> None:
        self.add_node(source)
        self.add_node(target)
        targets = self._outgoing[source]
        if target in targets:
            return
        targets.append(target)
        self._incoming[target].append(source)

    def outgoing(self, node: str) -> tuple[str, ...]:
        return tuple(self._outgoing.get(node, ()))

    def incoming(self, node: str) -> tuple[str, ...]:
        return tuple(self._incoming.get(node, ()))

    def reroute(self, node: str, new_target: str) -> None:
        """Point every edge into ``node`` at ``new_target`` and drop ``node``.

        Outgoing edges of ``node`` are dropped along with it. Rerouting an unknown
        node only registers ``new_target``.
        """

        if node == new_target:
            raise ValueError(f"Cannot reroute {node!r} onto itself")

        self.add_node(new_target)
        for source in self._incoming.pop(node, []):
            targets = self._outgoing[source]
            targets.remove(node)
            if new_target not in targets:
                targets.append(new_target)
                self._incoming[new_target].append(source)

        for target in self._outgoing.pop(node, []):
            self._incoming[target].remove(node)
