"""Modelos de datos del grafo de contactos."""
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Trace:
    """Registro de entrada (persona_a, persona_b, tiempo), se consume al ingerir."""
    person_a: str
    person_b: str
    time: int


@dataclass
class ContactRecord:
    """
    Todos los encuentros registrados entre un único par de personas.

    Los tiempos se mantienen ordenados y sin repetidos en cada inserción,
    de modo que el último elemento es siempre el contacto más reciente.
    """
    _times: List[int] = field(default_factory=list)

    def add_time(self, time: int) -> bool:
        """Inserta un tiempo. Retorna False si ya estaba registrado."""
        idx = bisect_left(self._times, time)
        if idx < len(self._times) and self._times[idx] == time:
            return False

        self._times.insert(idx, time)
        return True

    @property
    def times(self) -> List[int]:
        return list(self._times)

    @property
    def latest(self) -> Optional[int]:
        return self._times[-1] if self._times else None

    def __len__(self) -> int:
        return len(self._times)
