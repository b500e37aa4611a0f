"""Sistema de logging para el rastreo de contactos."""
import logging
import os
import sys

LOG_LEVEL_ENV = 'RASTREO_LOG_LEVEL'


def _default_level() -> int:
    """Nivel tomado de RASTREO_LOG_LEVEL (INFO si no existe o es inválido)."""
    nombre = os.environ.get(LOG_LEVEL_ENV, 'INFO').upper()
    level = logging.getLevelName(nombre)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Configura y retorna un logger de consola.

    Args:
        name: Nombre del logger (usualmente __name__ del módulo)
        level: Nivel de logging; por defecto el de RASTREO_LOG_LEVEL

    Returns:
        Logger configurado
    """
    logger = logging.getLogger(name)

    # Evitar duplicación de handlers
    if logger.handlers:
        return logger

    level = level if level is not None else _default_level()
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Obtiene un logger configurado."""
    return setup_logger(name)
