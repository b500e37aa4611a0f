"""Inmutabilidad y seguridad de tipos."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

@dataclass(frozen=True)
class Paths:

    DATA_DIR: Path = Path('data')
    OUTPUT_DIR: Path = Path('output')

    @property
    def trazas(self) -> Path:
        return self.DATA_DIR / 'traces.csv'

    @property
    def brote(self) -> Path:
        return self.OUTPUT_DIR / 'brote'


@dataclass(frozen=True)
class TracingConfig:

    incubation_latency: int = 60  # Unidades de tiempo hasta poder contagiar
    columnas_traza: Tuple[str, str, str] = ('persona_a', 'persona_b', 'tiempo')


@dataclass(frozen=True)
class VisualizationConfig:
    dpi: int = 300
    node_size: int = 50
    figsize: Tuple[int, int] = (16, 12)
    color_person: str = '#00BFFF'
    color_source: str = '#8B0000'
    color_alerted: str = '#FF4444'
    color_edge: str = '#CCCCCC'
    edge_alpha: float = 0.3
    edge_width: float = 0.5


# Singleton instances
PATHS = Paths()
TRACING_CONFIG = TracingConfig()
VIZ_CONFIG = VisualizationConfig()

INCUBATION_LATENCY = TRACING_CONFIG.incubation_latency
