from __future__ import annotations

import pytest

from sourcecanon.domain.resolution import RelationshipGraph


def test_graph_can_have_a_node_added() -> None:
    graph = RelationshipGraph()
    graph.add_node("a")

    assert "a" in graph
    assert graph.outgoing("a") == ()
    assert graph.incoming("a") == ()


def test_graph_can_have_a_connection_added() -> None:
    graph = RelationshipGraph()

    graph.connect_node("a", "b")

    assert graph.outgoing("a") == ("b",)
    assert graph.incoming("b") == ("a",)
    assert graph.incoming("a") == ()
    assert graph.outgoing("b") == ()
    assert graph.nodes == ("a", "b")


def test_graph_connections_are_idempotent_and_ordered() -> None:
    graph = RelationshipGraph()

    graph.connect_node("a", "c")
    graph.connect_node("a", "b")
    graph.connect_node("a", "c")
    graph.add_node("a")

    assert graph.outgoing("a") == ("c", "b")
    assert graph.incoming("c") == ("a",)
    assert len(graph) == 3


def test_graph_unknown_nodes_have_no_neighbours() -> None:
    graph = RelationshipGraph()

    assert graph.outgoing("missing") == ()
    assert graph.incoming("missing") == ()
    assert "missing" not in graph


def test_graph_can_have_a_connection_rerouted() -> None:
    graph = RelationshipGraph()

    graph.connect_node("a", "c")
    graph.connect_node("b", "c")
    graph.reroute("c", "d")

    assert graph.outgoing("a") == ("d",)
    assert graph.outgoing("b") == ("d",)

    assert graph.outgoing("c") == ()
    assert graph.incoming("c") == ()
    assert "c" not in graph

    assert graph.outgoing("d") == ()
    assert graph.incoming("d") == ("a", "b")


def test_graph_reroute_drops_outgoing_edges_of_removed_node() -> None:
    graph = RelationshipGraph()

    graph.connect_node("a", "b")
    graph.connect_node("b", "c")
    graph.reroute("b", "d")

    assert graph.outgoing("a") == ("d",)
    assert graph.incoming("c") == ()
    assert graph.nodes == ("a", "c", "d")


def test_graph_reroute_merges_into_existing_edge_once() -> None:
    graph = RelationshipGraph()

    graph.connect_node("a", "b")
    graph.connect_node("a", "c")
    graph.reroute("b", "c")

    assert graph.outgoing("a") == ("c",)
    assert graph.incoming("c") == ("a",)


def test_graph_reroute_onto_itself_is_rejected() -> None:
    graph = RelationshipGraph()
    graph.connect_node("a", "b")

    with pytest.raises(ValueError, match="onto itself"):
        graph.reroute("b", "b")
