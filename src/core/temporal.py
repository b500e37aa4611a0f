"""Consultas temporales de solo lectura sobre el grafo de contactos."""
from bisect import bisect_left
from typing import Optional, Set

from src.core.graph import ContactGraph

# Sentinela: no existe contacto en o después del instante pedido
NO_CONTACT: Optional[int] = None


def neighbors_at_or_after(graph: ContactGraph, person: str, timestamp: int) -> Set[str]:
    """
    Vecinos cuyo último contacto con `person` ocurrió en o después de `timestamp`.

    Comparar solo el último tiempo equivale a preguntar si hubo algún
    contacto >= timestamp, porque cada registro se mantiene ordenado.
    """
    return {
        vecino for vecino in graph.neighbor_ids(person)
        if graph.latest_contact(person, vecino) >= timestamp
    }


def earliest_contact_at_or_after(graph: ContactGraph,
                                 person_a: str,
                                 person_b: str,
                                 timestamp: int) -> Optional[int]:
    """Primer contacto del par con tiempo >= timestamp, o NO_CONTACT."""
    tiempos = graph.contact_times(person_a, person_b)
    idx = bisect_left(tiempos, timestamp)
    return tiempos[idx] if idx < len(tiempos) else NO_CONTACT
