"""Módulo de procesamiento y transformación de trazas."""
import pandas as pd
from typing import List
from ..core.config import TRACING_CONFIG
from ..core.models import Trace


class DataProcessor:
    """Convierte trazas tabulares en registros Trace (SRP - Responsabilidad Única)."""

    def __init__(self, tracing_config=TRACING_CONFIG):
        self.tracing_config = tracing_config

    def normalize(self, df: pd.DataFrame) -> pd.DataFrame:
        persona_a, persona_b, tiempo = self.tracing_config.columnas_traza

        df = df[[persona_a, persona_b, tiempo]].copy()
        df[persona_a] = df[persona_a].astype(str).str.strip()
        df[persona_b] = df[persona_b].astype(str).str.strip()
        df[tiempo] = df[tiempo].astype(int)

        # Ordenar cronológicamente para una ingesta reproducible
        return df.sort_values(tiempo, kind='stable').reset_index(drop=True)

    def to_traces(self, df: pd.DataFrame) -> List[Trace]:
        df = self.normalize(df)
        return [
            Trace(person_a=a, person_b=b, time=int(t))
            for a, b, t in df.itertuples(index=False, name=None)
        ]
