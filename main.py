"""Rastreador principal - carga trazas y rastrea un brote desde una persona."""
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent))

from src.core.config import PATHS, TRACING_CONFIG, VIZ_CONFIG
from src.core.exceptions import PersonNotFoundError
from src.core.graph import GraphAnalyzer
from src.core.tracer import ContactTracer
from src.data.loader import DataLoader
from src.data.processor import DataProcessor
from src.visualization.visualizers import VisualizationFacade
from src.analysis import AnalysisCoordinator, create_alerted_subgraph
from src.utils.helpers import DirectoryManager


class ContactTracingApp:
    """Aplicación principal de rastreo de contactos (Patrón Fachada)."""

    def __init__(self, trazas_path: Path = None):
        self.paths = PATHS
        self.tracing_config = TRACING_CONFIG
        self.viz_config = VIZ_CONFIG

        self.loader = DataLoader(trazas_path or self.paths.trazas)
        self.processor = DataProcessor()
        self.visualizer = VisualizationFacade(self.viz_config)
        self.analyzer = AnalysisCoordinator(verbose=True)
        self.tracer = ContactTracer()

    def run(self, fuente: str, tiempo_contagio: int):
        """Ejecuta el rastreo."""
        DirectoryManager.clean_and_create(self.paths.OUTPUT_DIR)

        df = self.loader.load_all()
        self.tracer.add_traces(self.processor.to_traces(df))

        G = self.tracer.graph.to_networkx()
        stats = GraphAnalyzer.get_statistics(G)

        print(f"\n{'Personas':>9} {'Pares':>6} {'Contactos':>10} {'Densidad':>10} {'Componentes':>12}")
        print("=" * 60)
        print(f"{stats['nodos']:>9} {stats['aristas']:>6} {stats['contactos_totales']:>10} "
              f"{stats['densidad']:>10.4f} {stats['componentes']:>12}")

        resultado = self.tracer.trace_outbreak(fuente, tiempo_contagio)

        print(f"\nFuente: {fuente} (contagiosa en t={tiempo_contagio}, "
              f"latencia={self.tracing_config.incubation_latency})")
        print(f"\n{'Persona':<15} {'Expuesta':>9} {'Por':<15} {'Generación':>10}")
        print("=" * 60)
        for persona in resultado.alerted:
            print(f"{persona:<15} {resultado.infection_times[persona]:>9} "
                  f"{resultado.infected_by[persona]:<15} {resultado.generations[persona]:>10}")

        self.analyzer.run_all_analyses(G, resultado)

        output_dir = self.paths.brote
        alertados = resultado.get_alert_set()
        self.visualizer.visualize_contact_graph(G, output_dir)
        self.visualizer.visualize_outbreak(G, fuente, alertados, output_dir)
        self.visualizer.visualize_alerted_subgraph(
            create_alerted_subgraph(G, fuente, alertados), output_dir
        )
        self.visualizer.visualize_propagation_tree(
            resultado.to_networkx(), output_dir / 'arbol_transmision.png'
        )

        print("=" * 60)
        print(f"Resultados: {output_dir}\n")


def main():
    """Punto de entrada."""
    if len(sys.argv) < 3:
        print("Uso: python main.py <fuente> <tiempo_contagio> [trazas.csv]")
        sys.exit(2)

    fuente = sys.argv[1]
    tiempo_contagio = int(sys.argv[2])
    trazas_path = Path(sys.argv[3]) if len(sys.argv) > 3 else None

    app = ContactTracingApp(trazas_path)
    try:
        app.run(fuente, tiempo_contagio)
    except PersonNotFoundError as e:
        print(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()
