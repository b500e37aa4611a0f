"""Módulo del grafo de contactos: personas indexadas y registros por par."""
import networkx as nx
from typing import Dict, List, Optional, Set

from src.core.exceptions import PersonNotFoundError
from src.core.models import ContactRecord


class ContactGraph:
    """
    Grafo multi-contacto de personas (SRP: solo inserción y consulta).

    - Personas en una tabla indexada (nombre → índice)
    - Adyacencia índice → {índice vecino: handle de registro}
    - Un único ContactRecord por par, referenciado desde ambos extremos
    """

    def __init__(self):
        self._names: List[str] = []                      # Índice → nombre
        self._index: Dict[str, int] = {}                 # Nombre → índice
        self._adjacency: List[Dict[int, int]] = []       # Índice → {vecino: handle}
        self._records: List[ContactRecord] = []          # Handle → registro

    def add_person(self, name: str):
        """Agrega una persona (sin efecto si ya existe)."""
        if name in self._index:
            return

        self._index[name] = len(self._names)
        self._names.append(name)
        self._adjacency.append({})

    def has_person(self, name: str) -> bool:
        return name in self._index

    def record_contact(self, person_a: str, person_b: str, time: int) -> bool:
        """
        Registra un contacto entre dos personas.

        Args:
            person_a: Identificador de la primera persona
            person_b: Identificador de la segunda persona
            time: Instante del contacto

        Returns:
            True si el contacto es nuevo, False si el triple ya existía
        """
        self.add_person(person_a)
        self.add_person(person_b)

        handle = self._find_handle(person_a, person_b)
        if handle is None:
            handle = len(self._records)
            self._records.append(ContactRecord())

            i, j = self._index[person_a], self._index[person_b]
            self._adjacency[i][j] = handle
            self._adjacency[j][i] = handle

        return self._records[handle].add_time(time)

    def contact_times(self, person_a: str, person_b: str) -> List[int]:
        """Tiempos de contacto en orden ascendente (vacío si nunca se vieron)."""
        record = self._find_record(person_a, person_b)
        return record.times if record is not None else []

    def latest_contact(self, person_a: str, person_b: str) -> Optional[int]:
        """Último contacto registrado del par, None si no existe registro."""
        record = self._find_record(person_a, person_b)
        return record.latest if record is not None else None

    def neighbor_ids(self, person: str) -> List[str]:
        """Vecinos en orden de primer contacto (recorridos deterministas)."""
        idx = self._require(person)
        return [self._names[j] for j in self._adjacency[idx]]

    def neighbors(self, person: str) -> Set[str]:
        """Conjunto de personas con al menos un contacto registrado."""
        return set(self.neighbor_ids(person))

    def people(self) -> List[str]:
        return list(self._names)

    def number_of_people(self) -> int:
        return len(self._names)

    def number_of_contacts(self) -> int:
        """Número de pares con registro (cada arista una vez)."""
        return len(self._records)

    def to_networkx(self) -> nx.Graph:
        """Convierte a NetworkX Graph para análisis y visualización."""
        G = nx.Graph()
        G.add_nodes_from(self._names)

        for i, vecinos in enumerate(self._adjacency):
            for j, handle in vecinos.items():
                if i < j:
                    record = self._records[handle]
                    G.add_edge(
                        self._names[i],
                        self._names[j],
                        tiempos=record.times,
                        contactos=len(record)
                    )

        return G

    def _require(self, person: str) -> int:
        idx = self._index.get(person)
        if idx is None:
            raise PersonNotFoundError(person)
        return idx

    def _find_handle(self, person_a: str, person_b: str) -> Optional[int]:
        i = self._index.get(person_a)
        j = self._index.get(person_b)
        if i is None or j is None:
            return None
        return self._adjacency[i].get(j)

    def _find_record(self, person_a: str, person_b: str) -> Optional[ContactRecord]:
        handle = self._find_handle(person_a, person_b)
        return self._records[handle] if handle is not None else None

    def __repr__(self) -> str:
        return (
            f"ContactGraph(people={self.number_of_people()}, "
            f"contacts={self.number_of_contacts()})"
        )


class GraphAnalyzer:
    """Analiza estadísticas de grafos (SRP)."""

    @staticmethod
    def get_statistics(G: nx.Graph) -> Dict:
        """Calcula estadísticas comprehensivas del grafo."""
        if G.number_of_nodes() == 0:
            return {
                'nodos': 0,
                'aristas': 0,
                'densidad': 0,
                'componentes': 0,
                'componente_mayor': 0,
                'contactos_totales': 0
            }

        componentes = list(nx.connected_components(G))

        return {
            'nodos': G.number_of_nodes(),
            'aristas': G.number_of_edges(),
            'densidad': nx.density(G),
            'componentes': len(componentes),
            'componente_mayor': len(max(componentes, key=len)) if componentes else 0,
            'contactos_totales': sum(c for _, _, c in G.edges(data='contactos', default=0))
        }
