"""Analizador de alcance: alcanzabilidad temporal vs. estática."""
import networkx as nx
from typing import Dict, Any
from .base import GraphAnalyzer
from ..core.propagation import OutbreakResult


class ReachabilityAnalyzer(GraphAnalyzer):
    """Compara los alertados con la componente conexa de la fuente."""

    def analyze(self, graph: nx.Graph, outbreak: OutbreakResult = None, **kwargs) -> Dict[str, Any]:
        """Analiza cuánto de la componente estática alcanza el brote."""
        if outbreak is None or outbreak.source not in graph:
            return {'fuente': None, 'alcanzables': [], 'alertados': [],
                    'excluidos': [], 'cobertura_temporal': 0.0}

        # Alcanzables sin restricciones de tiempo (excluye la fuente)
        alcanzables = nx.node_connected_component(graph, outbreak.source) - {outbreak.source}
        alertados = outbreak.get_alert_set()

        return {
            'fuente': outbreak.source,
            'alcanzables': sorted(alcanzables),
            'alertados': sorted(alertados),
            'excluidos': sorted(alcanzables - alertados),
            'cobertura_temporal': len(alertados) / len(alcanzables) if alcanzables else 0.0
        }

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        """Extrae métricas esenciales para backend/API."""
        return {
            'num_alcanzables': len(results['alcanzables']),
            'num_alertados': len(results['alertados']),
            'num_excluidos': len(results['excluidos']),
            'cobertura_temporal': round(results['cobertura_temporal'], 4)
        }

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis de alcance."""
        print(f"\n{'='*60}")
        print("ALCANCE TEMPORAL DEL BROTE")
        print(f"{'='*60}")
        print(f"Fuente: {results['fuente']}")
        print(f"Alcanzables (sin tiempo): {len(results['alcanzables'])}")
        print(f"Alertados: {len(results['alertados'])}")
        print(f"Cobertura temporal: {results['cobertura_temporal']:.1%}")

        if results['excluidos']:
            print(f"Descartados por tiempo: {results['excluidos'][:10]}")
