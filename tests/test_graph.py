"""
Contact Graph Tests
===================

Ingestion and lookup on the arena-backed contact graph.
"""

import pytest
import networkx as nx

from src.core.exceptions import PersonNotFoundError
from src.core.graph import ContactGraph, GraphAnalyzer
from src.core.models import ContactRecord


class TestContactRecord:

    def test_times_stay_sorted_and_unique(self):
        record = ContactRecord()
        for t in (50, 10, 30, 10, 50):
            record.add_time(t)

        assert record.times == [10, 30, 50]
        assert record.latest == 50
        assert len(record) == 3

    def test_duplicate_time_is_reported(self):
        record = ContactRecord()
        assert record.add_time(5) is True
        assert record.add_time(5) is False

    def test_times_returns_a_copy(self):
        record = ContactRecord()
        record.add_time(1)
        record.times.append(99)
        assert record.times == [1]


class TestContactGraph:

    def test_add_person_is_idempotent(self):
        graph = ContactGraph()
        graph.add_person("A")
        graph.add_person("A")

        assert graph.people() == ["A"]
        assert graph.number_of_people() == 1

    def test_record_contact_creates_people_lazily(self):
        graph = ContactGraph()
        graph.record_contact("A", "B", 10)

        assert graph.has_person("A")
        assert graph.has_person("B")
        assert graph.number_of_contacts() == 1

    def test_one_record_per_unordered_pair(self):
        graph = ContactGraph()
        graph.record_contact("A", "B", 10)
        graph.record_contact("B", "A", 5)

        assert graph.number_of_contacts() == 1
        assert graph.contact_times("A", "B") == [5, 10]

    def test_record_is_shared_by_both_endpoints(self):
        graph = ContactGraph()
        graph.record_contact("A", "B", 10)
        graph.record_contact("B", "A", 20)

        assert graph.contact_times("A", "B") == graph.contact_times("B", "A") == [10, 20]
        assert graph.latest_contact("B", "A") == 20

    def test_duplicate_triple_is_noop(self):
        graph = ContactGraph()
        assert graph.record_contact("A", "B", 10) is True
        assert graph.record_contact("A", "B", 10) is False
        assert graph.record_contact("B", "A", 10) is False

        assert graph.contact_times("A", "B") == [10]

    def test_contact_times_empty_for_unmet_or_unknown(self):
        graph = ContactGraph()
        graph.record_contact("A", "B", 10)
        graph.record_contact("C", "D", 10)

        assert graph.contact_times("A", "C") == []
        assert graph.contact_times("A", "nadie") == []
        assert graph.latest_contact("A", "C") is None

    def test_neighbors(self):
        graph = ContactGraph()
        graph.record_contact("A", "B", 10)
        graph.record_contact("A", "C", 20)
        graph.record_contact("A", "B", 30)

        assert graph.neighbors("A") == {"B", "C"}
        assert graph.neighbors("B") == {"A"}
        assert graph.neighbor_ids("A") == ["B", "C"]

    def test_self_contact_is_stored_as_given(self):
        # Rejecting self-contacts is left to the ingestion layer
        graph = ContactGraph()
        assert graph.record_contact("A", "A", 10) is True

        assert graph.contact_times("A", "A") == [10]
        assert graph.neighbors("A") == {"A"}
        assert graph.number_of_people() == 1

    def test_neighbors_unknown_person_raises(self):
        graph = ContactGraph()
        with pytest.raises(PersonNotFoundError) as exc:
            graph.neighbors("fantasma")
        assert exc.value.person == "fantasma"

    def test_to_networkx(self):
        graph = ContactGraph()
        graph.record_contact("A", "B", 10)
        graph.record_contact("A", "B", 40)
        graph.record_contact("B", "C", 20)
        graph.add_person("D")

        G = graph.to_networkx()

        assert isinstance(G, nx.Graph)
        assert set(G.nodes()) == {"A", "B", "C", "D"}
        assert G.number_of_edges() == 2
        assert G["B"]["A"]["tiempos"] == [10, 40]
        assert G["A"]["B"]["contactos"] == 2


class TestGraphAnalyzer:

    def test_empty_graph_statistics(self):
        stats = GraphAnalyzer.get_statistics(nx.Graph())
        assert stats['nodos'] == 0
        assert stats['componentes'] == 0

    def test_statistics(self):
        graph = ContactGraph()
        graph.record_contact("A", "B", 10)
        graph.record_contact("A", "B", 40)
        graph.record_contact("C", "D", 20)

        stats = GraphAnalyzer.get_statistics(graph.to_networkx())

        assert stats['nodos'] == 4
        assert stats['aristas'] == 2
        assert stats['componentes'] == 2
        assert stats['componente_mayor'] == 2
        assert stats['contactos_totales'] == 3
