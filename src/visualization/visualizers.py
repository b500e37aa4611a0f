"""Módulo de visualización usando patrones Template Method y Strategy."""
import matplotlib.pyplot as plt
import networkx as nx
from pathlib import Path
from abc import ABC, abstractmethod
from typing import Dict, Optional, Set
from ..core.config import VIZ_CONFIG


class GraphVisualizer(ABC):
    """Pipeline común: posiciones, aristas, nodos, título y archivo PNG."""

    def __init__(self, config=VIZ_CONFIG):
        self.config = config

    def visualize(self, G: nx.Graph, output_path: Path, title: str) -> Optional[Path]:
        """Dibuja `G` en `output_path`. Un grafo vacío no genera archivo."""
        if G.number_of_nodes() == 0:
            return None

        pos = self._calculate_layout(G)
        fig, ax = plt.subplots(figsize=self.config.figsize)
        try:
            self._draw_edges(G, pos)
            self._draw_nodes(G, pos)
            ax.set_title(title, fontsize=16, fontweight='bold')
            ax.axis('off')
            fig.tight_layout()

            output_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(output_path, dpi=self.config.dpi, bbox_inches='tight')
        finally:
            plt.close(fig)

        return output_path

    def _calculate_layout(self, G: nx.Graph) -> Dict:
        # Layout aleatorio con semilla fija: figuras reproducibles
        return nx.random_layout(G, seed=42)

    @abstractmethod
    def _draw_edges(self, G: nx.Graph, pos: Dict):
        pass

    @abstractmethod
    def _draw_nodes(self, G: nx.Graph, pos: Dict):
        pass


class ContactGraphVisualizer(GraphVisualizer):
    """Visualiza grafo de contactos con grosor según número de encuentros."""

    def _draw_edges(self, G: nx.Graph, pos: Dict):
        contactos = [G[u][v].get('contactos', 1) for u, v in G.edges()]
        max_c = max(contactos) if contactos else 1
        widths = [0.5 + 2.5 * (c / max_c) for c in contactos]

        nx.draw_networkx_edges(
            G, pos,
            width=widths,
            alpha=self.config.edge_alpha,
            edge_color=self.config.color_edge
        )

    def _draw_nodes(self, G: nx.Graph, pos: Dict):
        nx.draw_networkx_nodes(
            G, pos,
            node_size=self.config.node_size,
            node_color=self.config.color_person,
            alpha=0.7
        )


class OutbreakGraphVisualizer(GraphVisualizer):
    """Visualiza grafo de contactos con la fuente y los alertados."""

    def __init__(self, fuente: str, alertados: Set[str], config=VIZ_CONFIG):
        super().__init__(config)
        self.fuente = fuente
        self.alertados = alertados

    def _draw_edges(self, G: nx.Graph, pos: Dict):
        nx.draw_networkx_edges(
            G, pos,
            alpha=0.2,
            width=self.config.edge_width,
            edge_color=self.config.color_edge
        )

    def _draw_nodes(self, G: nx.Graph, pos: Dict):
        # Clasificar nodos
        sanos = [n for n in G.nodes() if n != self.fuente and n not in self.alertados]
        alertados = [n for n in G.nodes() if n in self.alertados]

        if sanos:
            nx.draw_networkx_nodes(
                G, pos, nodelist=sanos,
                node_size=self.config.node_size,
                node_color=self.config.color_person,
                alpha=0.6, label='Sin alerta'
            )

        if alertados:
            nx.draw_networkx_nodes(
                G, pos, nodelist=alertados,
                node_size=self.config.node_size * 1.5,
                node_color=self.config.color_alerted,
                alpha=0.8, label='Alertados'
            )

        if self.fuente in G:
            nx.draw_networkx_nodes(
                G, pos, nodelist=[self.fuente],
                node_size=self.config.node_size * 2,
                node_color=self.config.color_source,
                edgecolors='#000000', linewidths=2,
                alpha=1.0, label='Fuente'
            )

        plt.legend(loc='upper right', fontsize=10)


class PropagationTreeVisualizer(GraphVisualizer):
    """Árbol de transmisión por generaciones, con el tiempo de exposición en cada arista."""

    def _calculate_layout(self, G: nx.DiGraph) -> Dict:
        # Una columna por generación (la fuente es la generación 0)
        return nx.multipartite_layout(G, subset_key='generacion')

    def _draw_edges(self, G: nx.DiGraph, pos: Dict):
        nx.draw_networkx_edges(
            G, pos,
            alpha=0.5, width=1.0,
            edge_color='#888888',
            arrows=True,
            arrowsize=12,
            arrowstyle='->'
        )
        nx.draw_networkx_edge_labels(
            G, pos,
            edge_labels={(u, v): f"t={t}" for u, v, t in G.edges(data='tiempo')},
            font_size=7
        )

    def _draw_nodes(self, G: nx.DiGraph, pos: Dict):
        generaciones = [gen for _, gen in G.nodes(data='generacion', default=0)]

        nx.draw_networkx_nodes(
            G, pos,
            node_size=self.config.node_size * 3,
            node_color=generaciones,
            cmap=plt.cm.OrRd,
            vmin=0, vmax=max(generaciones) or 1,
            edgecolors='#000000',
            linewidths=1
        )
        nx.draw_networkx_labels(G, pos, font_size=8)


class VisualizationFacade:
    """Fachada para todas las operaciones de visualización (Patrón Fachada)."""

    def __init__(self, config=VIZ_CONFIG):
        self.config = config

    def visualize_contact_graph(self, G: nx.Graph, output_dir: Path):
        """Visualiza grafo completo de contactos."""
        visualizer = ContactGraphVisualizer(self.config)
        title = f"Red de contactos\n{G.number_of_nodes()} personas, {G.number_of_edges()} pares"
        return visualizer.visualize(G, output_dir / 'contactos.png', title)

    def visualize_outbreak(self, G: nx.Graph, fuente: str, alertados: Set[str], output_dir: Path):
        """Visualiza la fuente y los alertados sobre la red de contactos."""
        visualizer = OutbreakGraphVisualizer(fuente, alertados, self.config)
        title = f"Brote desde {fuente}\n{len(alertados)} personas alertadas"
        return visualizer.visualize(G, output_dir / 'brote.png', title)

    def visualize_alerted_subgraph(self, G_alertados: nx.Graph, output_dir: Path):
        """Visualiza subgrafo de la fuente y los alertados."""
        visualizer = ContactGraphVisualizer(self.config)
        stats = f"{G_alertados.number_of_nodes()} personas, {G_alertados.number_of_edges()} conexiones"
        title = f"Subgrafo de alertados\n{stats}"
        return visualizer.visualize(G_alertados, output_dir / 'alertados.png', title)

    def visualize_propagation_tree(self, tree: nx.DiGraph, output_path: Path):
        """Visualiza árbol de transmisión."""
        visualizer = PropagationTreeVisualizer(self.config)
        title = f"Árbol de transmisión\n{tree.number_of_nodes()} personas, {tree.number_of_edges()} exposiciones"
        return visualizer.visualize(tree, output_path, title)
