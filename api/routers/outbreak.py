"""
Router de Brote - Rastreo temporal

Endpoints para rastrear un brote desde una persona contagiosa.
"""
from fastapi import APIRouter, HTTPException
from typing import List, Dict, Any
from pydantic import BaseModel, Field
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.core.exceptions import PersonNotFoundError
from src.analysis.analyzers import AnalysisCoordinator
from src.utils.logger import get_logger
from api.routers.traces import get_tracer

logger = get_logger(__name__)

router = APIRouter()


# ============================================================================
# Modelos Pydantic
# ============================================================================

class OutbreakRequest(BaseModel):
    """Request para rastrear un brote."""
    source: str = Field(min_length=1, description="Persona contagiosa")
    contagion_time: int = Field(description="Instante en que se vuelve contagiosa")


class Exposure(BaseModel):
    """Exposición de una persona alertada."""
    person: str
    tiempo: int
    expuesto_por: str
    generacion: int


class OutbreakResponse(BaseModel):
    """Respuesta con el conjunto de alerta y sus métricas."""
    source: str
    contagion_time: int
    total_alertados: int
    alertados: List[str]
    exposiciones: List[Exposure]
    metricas: Dict[str, Any]


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/outbreak/trace", response_model=OutbreakResponse)
async def trace_outbreak(request: OutbreakRequest):
    """
    Rastrea un brote desde `source`.

    Returns:
        OutbreakResponse con personas alertadas (sin la fuente) y exposiciones
    """
    tracer = get_tracer()

    try:
        result = tracer.trace_outbreak(request.source, request.contagion_time)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    coordinator = AnalysisCoordinator()
    analisis = coordinator.run_all_analyses(tracer.graph.to_networkx(), result)

    exposiciones = [
        Exposure(
            person=p,
            tiempo=result.infection_times[p],
            expuesto_por=result.infected_by[p],
            generacion=result.generations[p]
        )
        for p in result.alerted
    ]

    logger.info(f"Brote rastreado desde {request.source}: {len(result.alerted)} alertados")

    return OutbreakResponse(
        source=request.source,
        contagion_time=request.contagion_time,
        total_alertados=len(result.alerted),
        alertados=sorted(result.alerted),
        exposiciones=exposiciones,
        metricas=coordinator.get_all_metrics(analisis)
    )
