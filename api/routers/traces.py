"""
Router de Trazas - Ingesta y consultas de contacto

Endpoints para registrar trazas y consultar contactos directos.
"""
from fastapi import APIRouter, HTTPException, Query
from typing import List, Dict, Any
from pydantic import BaseModel, Field
import sys
from pathlib import Path

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from src.core.exceptions import PersonNotFoundError
from src.core.graph import GraphAnalyzer
from src.core.models import Trace
from src.core.tracer import ContactTracer
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


# ============================================================================
# Modelos Pydantic
# ============================================================================

class TraceIn(BaseModel):
    """Una traza (persona_a, persona_b, tiempo)."""
    person_a: str = Field(min_length=1, description="Primera persona")
    person_b: str = Field(min_length=1, description="Segunda persona")
    time: int = Field(ge=0, description="Instante del contacto")


class TracesRequest(BaseModel):
    """Request para ingerir trazas."""
    traces: List[TraceIn]


class TracesResponse(BaseModel):
    """Respuesta tras ingerir trazas."""
    recibidas: int
    nuevas: int
    personas: int
    pares: int


class PeopleResponse(BaseModel):
    """Personas conocidas y estadísticas del grafo."""
    total: int
    people: List[str]
    estadisticas: Dict[str, Any]


class ContactsResponse(BaseModel):
    """Contactos directos de una persona."""
    person: str
    total: int
    contacts: List[str]


class ContactTimesResponse(BaseModel):
    """Tiempos de contacto de un par, en orden ascendente."""
    person_a: str
    person_b: str
    times: List[int]


# ============================================================================
# Almacenamiento en memoria del grafo de contactos
# ============================================================================

_tracer = None


def get_tracer() -> ContactTracer:
    """Obtiene o crea la instancia compartida del ContactTracer."""
    global _tracer
    if _tracer is None:
        _tracer = ContactTracer()
        logger.info("ContactTracer inicializado")
    return _tracer


def reset_tracer():
    """Descarta el grafo en memoria."""
    global _tracer
    _tracer = None


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/traces", response_model=TracesResponse)
async def add_traces(request: TracesRequest):
    """
    Ingiere trazas de contacto.

    Repetir un triple ya registrado no tiene efecto.
    """
    for t in request.traces:
        if t.person_a == t.person_b:
            raise HTTPException(status_code=422, detail=f"Contacto de {t.person_a} consigo mismo")

    tracer = get_tracer()
    nuevas = tracer.add_traces(
        Trace(person_a=t.person_a, person_b=t.person_b, time=t.time)
        for t in request.traces
    )

    return TracesResponse(
        recibidas=len(request.traces),
        nuevas=nuevas,
        personas=tracer.graph.number_of_people(),
        pares=tracer.graph.number_of_contacts()
    )


@router.delete("/traces")
async def clear_traces():
    """Reinicia el grafo de contactos en memoria."""
    reset_tracer()
    logger.info("Grafo de contactos reiniciado")
    return {"message": "Grafo de contactos reiniciado"}


@router.get("/people", response_model=PeopleResponse)
async def get_people():
    """Obtiene todas las personas conocidas con estadísticas del grafo."""
    tracer = get_tracer()
    people = tracer.graph.people()

    return PeopleResponse(
        total=len(people),
        people=people,
        estadisticas=GraphAnalyzer.get_statistics(tracer.graph.to_networkx())
    )


@router.get("/contacts/{person}", response_model=ContactsResponse)
async def get_contacts(person: str):
    """Obtiene los contactos directos de una persona en todo el historial."""
    try:
        contacts = get_tracer().get_contacts(person)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ContactsResponse(person=person, total=len(contacts), contacts=sorted(contacts))


@router.get("/contacts/{person}/after", response_model=ContactsResponse)
async def get_contacts_after(person: str, timestamp: int = Query(..., description="Instante inclusivo")):
    """Obtiene los contactos directos en o después de `timestamp`."""
    try:
        contacts = get_tracer().get_contacts_after(person, timestamp)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ContactsResponse(person=person, total=len(contacts), contacts=sorted(contacts))


@router.get("/contacts/{person_a}/{person_b}/times", response_model=ContactTimesResponse)
async def get_contact_times(person_a: str, person_b: str):
    """Tiempos de contacto del par (vacío si nunca se encontraron)."""
    return ContactTimesResponse(
        person_a=person_a,
        person_b=person_b,
        times=get_tracer().get_contact_times(person_a, person_b)
    )
