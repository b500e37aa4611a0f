"""Módulo de carga y validación de trazas con principios SOLID."""
import pandas as pd
from pathlib import Path
from abc import ABC, abstractmethod
from ..core.config import TRACING_CONFIG


class DataValidator(ABC):
    @abstractmethod
    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        pass


class TracesValidator(DataValidator):

    REQUIRED_COLS = list(TRACING_CONFIG.columnas_traza) # Columnas obligatorias

    def validate(self, df: pd.DataFrame) -> pd.DataFrame:
        missing = set(self.REQUIRED_COLS) - set(df.columns)
        if missing:
            raise ValueError(f"Columnas faltantes en trazas: {missing}")

        # Archivo solo con encabezado: cero trazas
        if df.empty:
            return df

        persona_a, persona_b, tiempo = self.REQUIRED_COLS

        if df[self.REQUIRED_COLS].isnull().any().any():
            raise ValueError("Trazas incompletas encontradas")

        # Mismos ids que producirá DataProcessor.normalize
        ids_a = df[persona_a].astype(str).str.strip()
        ids_b = df[persona_b].astype(str).str.strip()

        if ((ids_a == '') | (ids_b == '')).any():
            raise ValueError("Identificadores de persona vacíos encontrados")

        if not pd.api.types.is_integer_dtype(df[tiempo]):
            raise ValueError("Los tiempos de contacto deben ser enteros")

        if (df[tiempo] < 0).any():
            raise ValueError("Tiempos de contacto negativos encontrados")

        if (ids_a == ids_b).any():
            raise ValueError("Contactos de una persona consigo misma encontrados")

        return df


class DataLoader:

    def __init__(self,
                 trazas_path: Path,
                 validator: DataValidator = None):
        self.trazas_path = trazas_path

        # Validador por defecto si no se proporciona
        self.validator = validator or TracesValidator()

    def load_all(self) -> pd.DataFrame:
        return self._load_and_validate(self.trazas_path, self.validator)

    def _load_and_validate(self, path: Path, validator: DataValidator) -> pd.DataFrame:
        try:
            persona_a, persona_b, _ = TRACING_CONFIG.columnas_traza
            df = pd.read_csv(path, dtype={persona_a: str, persona_b: str})
        except FileNotFoundError:
            raise FileNotFoundError(f"Archivo no encontrado: {path}")
        except Exception as e:
            raise ValueError(f"Error cargando {path}: {str(e)}")

        return validator.validate(df)
