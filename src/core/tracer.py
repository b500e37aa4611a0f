"""Fachada de rastreo de contactos (Patrón Fachada)."""
from typing import Iterable, List, Optional, Set

from src.core.graph import ContactGraph
from src.core.models import Trace
from src.core.propagation import OutbreakPropagator, OutbreakResult
from src.core.temporal import neighbors_at_or_after
from src.utils.logger import get_logger

logger = get_logger(__name__)


class ContactTracer:
    """Ingiere trazas y responde consultas de contacto y de brote."""

    def __init__(self, traces: Optional[Iterable[Trace]] = None,
                 incubation_latency: Optional[int] = None):
        self._graph = ContactGraph()
        self.incubation_latency = incubation_latency

        if traces is not None:
            self.add_traces(traces)

    @property
    def graph(self) -> ContactGraph:
        return self._graph

    def add_trace(self, trace: Trace) -> bool:
        """Agrega una traza; repetir el mismo triple no tiene efecto."""
        return self._graph.record_contact(trace.person_a, trace.person_b, trace.time)

    def add_traces(self, traces: Iterable[Trace]) -> int:
        """Agrega varias trazas y retorna cuántas eran nuevas."""
        nuevas = sum(1 for trace in traces if self.add_trace(trace))
        logger.info(f"Trazas ingeridas: {nuevas} nuevas, grafo: {self._graph}")
        return nuevas

    def get_contact_times(self, person_a: str, person_b: str) -> List[int]:
        return self._graph.contact_times(person_a, person_b)

    def get_contacts(self, person: str) -> Set[str]:
        return self._graph.neighbors(person)

    def get_contacts_after(self, person: str, timestamp: int) -> Set[str]:
        """Contactos directos en o después de `timestamp` (inclusive)."""
        return neighbors_at_or_after(self._graph, person, timestamp)

    def trace_outbreak(self, person: str, time_of_contagion: int) -> OutbreakResult:
        propagator = OutbreakPropagator(self._graph, self.incubation_latency)
        return propagator.propagate(person, time_of_contagion)

    def contact_trace(self, person: str, time_of_contagion: int) -> Set[str]:
        """Personas que pudieron contagiarse a partir de `person` (sin incluirla)."""
        return self.trace_outbreak(person, time_of_contagion).get_alert_set()
