"""
Módulo de análisis de brotes - Arquitectura modular siguiendo SOLID.

Exporta:
- Analyzers especializados (Alcance, Centralidad)
- Coordinador (AnalysisCoordinator)
- Funciones helper
"""

# Analyzers base
from .base import GraphAnalyzer

# Analyzers especializados
from .reachability_analyzer import ReachabilityAnalyzer
from .centrality_analyzer import CentralityAnalyzer

# Coordinadores
from .analyzers import (
    AnalysisCoordinator,
    create_alerted_subgraph
)

__all__ = [
    # Base
    'GraphAnalyzer',

    # Analyzers especializados
    'ReachabilityAnalyzer',
    'CentralityAnalyzer',

    # Coordinadores
    'AnalysisCoordinator',

    # Helpers
    'create_alerted_subgraph'
]
