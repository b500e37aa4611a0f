"""
Contact Tracer Tests
====================

Library surface: add_trace, get_contact_times, get_contacts,
get_contacts_after and contact_trace.
"""

import pytest

from src.core.exceptions import PersonNotFoundError
from src.core.models import Trace
from src.core.tracer import ContactTracer


def tracer_from(*triples) -> ContactTracer:
    return ContactTracer([Trace(a, b, t) for a, b, t in triples])


@pytest.fixture
def tracer():
    return tracer_from(
        ("A", "B", 10),
        ("A", "C", 40),
        ("B", "C", 20),
        ("C", "A", 5),
        ("D", "E", 7),
    )


class TestContactQueries:

    def test_contacts_exclude_self_and_have_no_duplicates(self, tracer):
        for person in tracer.graph.people():
            contacts = tracer.get_contacts(person)
            assert person not in contacts
            assert len(contacts) == len(set(contacts))

        assert tracer.get_contacts("A") == {"B", "C"}

    def test_contact_times_are_symmetric_and_sorted(self, tracer):
        assert tracer.get_contact_times("A", "C") == [5, 40]
        assert tracer.get_contact_times("C", "A") == [5, 40]

    def test_readding_identical_trace_is_noop(self, tracer):
        before = tracer.get_contact_times("A", "B")
        for _ in range(5):
            assert tracer.add_trace(Trace("A", "B", 10)) is False
            tracer.add_trace(Trace("B", "A", 10))

        assert tracer.get_contact_times("A", "B") == before

    def test_add_traces_counts_new_records(self):
        tracer = ContactTracer()
        nuevas = tracer.add_traces([
            Trace("A", "B", 1),
            Trace("A", "B", 1),
            Trace("B", "A", 2),
        ])
        assert nuevas == 2

    def test_contacts_after_empty_when_nothing_late_enough(self, tracer):
        assert tracer.get_contacts_after("A", 1000) == set()

    def test_contacts_after_inclusive(self, tracer):
        assert tracer.get_contacts_after("A", 40) == {"C"}
        assert tracer.get_contacts_after("A", 10) == {"B", "C"}

    def test_contact_times_empty_for_known_pair_that_never_met(self, tracer):
        assert tracer.get_contact_times("A", "D") == []

    def test_unknown_person_raises(self, tracer):
        with pytest.raises(PersonNotFoundError):
            tracer.get_contacts("Z")
        with pytest.raises(PersonNotFoundError):
            tracer.get_contacts_after("Z", 0)
        with pytest.raises(PersonNotFoundError):
            tracer.contact_trace("Z", 0)


class TestContactTrace:

    def test_scenario_chain_reaches_everyone(self):
        tracer = tracer_from(("A", "B", 10), ("B", "C", 80), ("C", "D", 200))
        assert tracer.contact_trace("A", 5) == {"B", "C", "D"}

    def test_scenario_contact_before_incubation_ends(self):
        tracer = tracer_from(("A", "B", 10), ("B", "C", 50))
        assert tracer.contact_trace("A", 5) == {"B"}

    def test_trace_excludes_source(self, tracer):
        for person in tracer.graph.people():
            assert person not in tracer.contact_trace(person, 0)

    def test_trace_outbreak_exposes_infection_times(self):
        tracer = tracer_from(("A", "B", 10), ("B", "C", 80))
        result = tracer.trace_outbreak("A", 5)

        assert result.infection_times == {"B": 10, "C": 80}
        assert result.get_transmission_count() == 2

    def test_tracer_latency_override(self):
        tracer = ContactTracer(
            [Trace("A", "B", 10), Trace("B", "C", 50)],
            incubation_latency=30
        )
        assert tracer.contact_trace("A", 5) == {"B", "C"}
