"""Analizador de centralidad para identificar propagadores clave."""
import networkx as nx
import numpy as np
from typing import Dict, Any
from .base import GraphAnalyzer


class CentralityAnalyzer(GraphAnalyzer):
    """Analiza el árbol de transmisión para identificar propagadores clave."""

    def analyze(self, graph: nx.DiGraph, **kwargs) -> Dict[str, Any]:
        """Analiza grado saliente y generaciones del árbol de transmisión."""
        if graph.number_of_edges() == 0:
            return {'top_spreaders': [], 'max_spread': 0, 'generaciones': {}, 'retraso_medio': 0.0}

        out_degrees = dict(graph.out_degree())
        top_spreaders = sorted(out_degrees.items(), key=lambda x: x[1], reverse=True)[:10]

        generaciones: Dict[int, int] = {}
        for _, gen in graph.nodes(data='generacion', default=0):
            if gen > 0:
                generaciones[gen] = generaciones.get(gen, 0) + 1

        # Retraso entre la exposición del infector y la del infectado
        retrasos = np.array([
            graph.nodes[v]['tiempo'] - graph.nodes[u]['tiempo']
            for u, v in graph.edges()
        ], dtype=float)

        return {
            'top_spreaders': top_spreaders,
            'max_spread': top_spreaders[0][1] if top_spreaders else 0,
            'generaciones': dict(sorted(generaciones.items())),
            'retraso_medio': float(np.mean(retrasos))
        }

    def get_metrics(self, results: Dict[str, Any]) -> Dict[str, Any]:
        """Extrae métricas esenciales para backend/API."""
        return {
            'max_spread': results['max_spread'],
            'num_generaciones': len(results['generaciones']),
            'retraso_medio': round(results['retraso_medio'], 2),
            'top_5_spreaders': [
                {'node_id': node_id, 'contagios': count}
                for node_id, count in results['top_spreaders'][:5]
            ]
        }

    def print_results(self, results: Dict[str, Any]):
        """Imprime resultados del análisis de centralidad."""
        print(f"\n{'='*60}")
        print("TOP 10 PROPAGADORES")
        print(f"{'='*60}")

        for i, (pid, count) in enumerate(results['top_spreaders'], 1):
            if count > 0:
                print(f"{i:2d}. ID {pid}: {count} exposiciones directas")

        for gen, count in results['generaciones'].items():
            print(f"Generación {gen}: {count} personas")
