"""
Outbreak Propagator Tests
=========================

Temporal-constraint BFS: incubation latency, first-discovery-wins,
per-call traversal state.
"""

import pytest
import networkx as nx

from src.core.exceptions import PersonNotFoundError
from src.core.graph import ContactGraph
from src.core.propagation import OutbreakPropagator


def build_graph(*triples) -> ContactGraph:
    graph = ContactGraph()
    for a, b, t in triples:
        graph.record_contact(a, b, t)
    return graph


class TestOutbreakPropagator:

    def test_chain_respects_latency(self):
        graph = build_graph(("A", "B", 10), ("B", "C", 80), ("C", "D", 200))
        result = OutbreakPropagator(graph).propagate("A", 5)

        assert result.alerted == ["B", "C", "D"]
        assert result.infection_times == {"B": 10, "C": 80, "D": 200}
        assert result.infected_by == {"B": "A", "C": "B", "D": "C"}
        assert result.generations == {"B": 1, "C": 2, "D": 3}

    def test_contact_before_contagious_threshold_is_ignored(self):
        graph = build_graph(("A", "B", 10), ("B", "C", 50))
        assert OutbreakPropagator(graph).contact_trace("A", 5) == {"B"}

    def test_threshold_is_inclusive(self):
        graph = build_graph(("A", "B", 10), ("B", "C", 70))
        assert OutbreakPropagator(graph).contact_trace("A", 5) == {"B", "C"}

    def test_source_contacts_before_contagion_are_ignored(self):
        graph = build_graph(("A", "B", 3), ("A", "C", 8))
        assert OutbreakPropagator(graph).contact_trace("A", 5) == {"C"}

    def test_seed_uses_earliest_qualifying_contact(self):
        graph = build_graph(("A", "B", 3), ("A", "B", 10), ("A", "B", 50))
        result = OutbreakPropagator(graph).propagate("A", 5)
        assert result.infection_times["B"] == 10

    def test_source_never_alerted(self):
        graph = build_graph(("A", "B", 10), ("B", "A", 100), ("B", "C", 100), ("C", "A", 500))
        alerted = OutbreakPropagator(graph).contact_trace("A", 0)

        assert "A" not in alerted
        assert alerted == {"B", "C"}

    def test_first_discovery_wins(self):
        # X is expanded before Y, so Z keeps t=100 even though Y met Z at 85
        graph = build_graph(
            ("S", "X", 10),
            ("S", "Y", 20),
            ("X", "Z", 100),
            ("Y", "Z", 85),
            ("Z", "W", 150),
        )
        result = OutbreakPropagator(graph).propagate("S", 0)

        assert result.infection_times["Z"] == 100
        assert result.infected_by["Z"] == "X"
        # With t=85 W would be reachable (85 + 60 <= 150); with t=100 it is not
        assert result.get_alert_set() == {"X", "Y", "Z"}

    def test_shared_neighbor_enqueued_once(self):
        graph = build_graph(("S", "B", 10), ("S", "C", 10), ("B", "D", 100), ("C", "D", 100))
        result = OutbreakPropagator(graph).propagate("S", 0)

        assert result.alerted.count("D") == 1
        assert len(result.alerted) == len(set(result.alerted))

    def test_custom_latency(self):
        graph = build_graph(("A", "B", 10), ("B", "C", 50))
        assert OutbreakPropagator(graph, incubation_latency=0).contact_trace("A", 5) == {"B", "C"}

    def test_unknown_source_raises(self):
        graph = build_graph(("A", "B", 10))
        with pytest.raises(PersonNotFoundError):
            OutbreakPropagator(graph).propagate("Z", 0)

    def test_no_state_leaks_between_calls(self):
        graph = build_graph(("A", "B", 10), ("B", "C", 80))
        propagator = OutbreakPropagator(graph)

        first = propagator.contact_trace("A", 5)
        second = propagator.contact_trace("C", 0)
        third = propagator.contact_trace("A", 5)

        assert first == third == {"B", "C"}
        assert second == {"B"}

    def test_result_is_subset_of_static_component(self):
        graph = build_graph(
            ("A", "B", 10), ("B", "C", 30), ("C", "D", 300),
            ("A", "E", 400), ("E", "F", 100), ("X", "Y", 10),
        )
        alerted = OutbreakPropagator(graph).contact_trace("A", 0)
        component = nx.node_connected_component(graph.to_networkx(), "A")

        assert alerted <= component - {"A"}
        assert alerted == {"B", "E"}

    def test_transmission_tree(self):
        graph = build_graph(("A", "B", 10), ("B", "C", 80), ("B", "D", 90))
        tree = OutbreakPropagator(graph).propagate("A", 5).to_networkx()

        assert isinstance(tree, nx.DiGraph)
        assert set(tree.edges()) == {("A", "B"), ("B", "C"), ("B", "D")}
        assert tree["B"]["D"]["tiempo"] == 90
        assert tree.nodes["A"]["generacion"] == 0
        assert nx.is_arborescence(tree)
