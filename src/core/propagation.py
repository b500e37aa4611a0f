"""Propagación temporal de un brote (BFS con latencia de incubación)."""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Dict, List, Optional, Set, Tuple

import networkx as nx

from src.core.config import TRACING_CONFIG
from src.core.exceptions import PersonNotFoundError
from src.core.graph import ContactGraph
from src.core.temporal import earliest_contact_at_or_after, neighbors_at_or_after
from src.utils.logger import get_logger

logger = get_logger(__name__)


class TraceState(Enum):
    UNSEEN = 0
    ENQUEUED = 1
    PROCESSED = 2


@dataclass
class OutbreakResult:
    """Resultado de un rastreo: alertados, tiempos de exposición y árbol."""
    source: str
    contagion_time: int
    alerted: List[str] = field(default_factory=list)             # Orden de descubrimiento
    infection_times: Dict[str, int] = field(default_factory=dict)
    infected_by: Dict[str, str] = field(default_factory=dict)
    generations: Dict[str, int] = field(default_factory=dict)

    def get_alert_set(self) -> Set[str]:
        return set(self.alerted)

    def get_transmission_count(self) -> int:
        """Número total de transmisiones registradas."""
        return len(self.infected_by)

    def to_networkx(self) -> nx.DiGraph:
        """Convierte el árbol de transmisión a NetworkX DiGraph."""
        G = nx.DiGraph()
        G.add_node(self.source, tiempo=self.contagion_time, generacion=0)

        for person in self.alerted:
            G.add_node(
                person,
                tiempo=self.infection_times[person],
                generacion=self.generations[person]
            )
            G.add_edge(
                self.infected_by[person],
                person,
                tiempo=self.infection_times[person]
            )

        return G


@dataclass
class _TraceContext:
    """Estado transitorio de una sola invocación (nunca compartido)."""
    result: OutbreakResult
    states: Dict[str, TraceState] = field(default_factory=dict)
    frontier: Deque[Tuple[str, int]] = field(default_factory=deque)

    def state_of(self, person: str) -> TraceState:
        return self.states.get(person, TraceState.UNSEEN)

    def enqueue(self, person: str, time: int, infector: str):
        # La transición a ENQUEUED ocurre al descubrir, no al desencolar
        self.states[person] = TraceState.ENQUEUED
        self.frontier.append((person, time))

        result = self.result
        result.alerted.append(person)
        result.infection_times[person] = time
        result.infected_by[person] = infector
        result.generations[person] = result.generations.get(infector, 0) + 1


class OutbreakPropagator:
    """
    Recorre el grafo hacia adelante en el tiempo desde una fuente.

    Cada persona recibe su tiempo de infección una sola vez, en su primer
    descubrimiento; una ruta posterior con un contacto más temprano no la
    reasigna.
    """

    def __init__(self, graph: ContactGraph, incubation_latency: Optional[int] = None):
        self.graph = graph
        self.incubation_latency = (
            incubation_latency if incubation_latency is not None
            else TRACING_CONFIG.incubation_latency
        )

    def propagate(self, source: str, contagion_time: int) -> OutbreakResult:
        """
        Calcula la alcanzabilidad temporal desde `source`.

        Args:
            source: Persona origen (no forma parte del conjunto de alerta)
            contagion_time: Instante en que `source` se vuelve contagiosa

        Returns:
            OutbreakResult con alertados, tiempos de infección e infectores

        Raises:
            PersonNotFoundError: si `source` no existe en el grafo
        """
        if not self.graph.has_person(source):
            raise PersonNotFoundError(source)

        ctx = _TraceContext(result=OutbreakResult(source, contagion_time))
        ctx.states[source] = TraceState.PROCESSED

        # Semilla: contactos de la fuente desde que es contagiosa
        self._expand(ctx, source, contagion_time)

        while ctx.frontier:
            person, infection_time = ctx.frontier.popleft()
            self._expand(ctx, person, infection_time + self.incubation_latency)
            ctx.states[person] = TraceState.PROCESSED

        logger.info(
            f"Rastreo desde {source}@{contagion_time}: "
            f"{len(ctx.result.alerted)} personas alertadas"
        )
        return ctx.result

    def contact_trace(self, source: str, contagion_time: int) -> Set[str]:
        """Conjunto de personas alertadas (excluye la fuente)."""
        return self.propagate(source, contagion_time).get_alert_set()

    def _expand(self, ctx: _TraceContext, person: str, threshold: int):
        """Encola cada vecino no visto con contacto en o después de `threshold`."""
        alcanzables = neighbors_at_or_after(self.graph, person, threshold)

        for vecino in self.graph.neighbor_ids(person):
            if vecino not in alcanzables or ctx.state_of(vecino) is not TraceState.UNSEEN:
                continue

            tiempo = earliest_contact_at_or_after(self.graph, person, vecino, threshold)
            ctx.enqueue(vecino, tiempo, infector=person)
            logger.debug(f"{vecino} expuesto por {person} en t={tiempo}")
