"""Módulo coordinador de análisis - Patrón Fachada."""
import networkx as nx
from typing import Dict, Any, Iterable

from .reachability_analyzer import ReachabilityAnalyzer
from .centrality_analyzer import CentralityAnalyzer
from ..core.propagation import OutbreakResult


class AnalysisCoordinator:
    """Coordina los análisis de un brote rastreado (SRP, DIP)."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.analyzers = {'alcance': ReachabilityAnalyzer(), 'centralidad': CentralityAnalyzer()}

    def run_all_analyses(self, contact_graph: nx.Graph,
                         outbreak: OutbreakResult) -> Dict[str, Dict]:
        """Ejecuta todos los análisis del brote y devuelve resultados."""
        results = {
            'alcance': self.analyzers['alcance'].analyze(contact_graph, outbreak=outbreak),
            'centralidad': self.analyzers['centralidad'].analyze(outbreak.to_networkx())
        }

        if self.verbose:
            for name, analyzer in self.analyzers.items():
                analyzer.print_results(results[name])

        return results

    def get_all_metrics(self, results: Dict[str, Dict]) -> Dict[str, Any]:
        """
        Extrae métricas esenciales de todos los análisis (para backend).

        Args:
            results: Resultados de run_all_analyses()

        Returns:
            Diccionario con métricas esenciales de todos los analyzers
        """
        metrics = {}

        for name, analyzer in self.analyzers.items():
            if name in results:
                metrics[name] = analyzer.get_metrics(results[name])

        return metrics


def create_alerted_subgraph(G: nx.Graph, source: str, alertados: Iterable[str]) -> nx.Graph:
    """Crea subgrafo con la fuente y las personas alertadas."""
    nodos = [n for n in set(alertados) | {source} if n in G]
    return G.subgraph(nodos).copy()
