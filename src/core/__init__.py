from .config import PATHS, TRACING_CONFIG, VIZ_CONFIG, INCUBATION_LATENCY
from .exceptions import PersonNotFoundError
from .models import Trace, ContactRecord
from .graph import ContactGraph, GraphAnalyzer
from .temporal import NO_CONTACT, neighbors_at_or_after, earliest_contact_at_or_after
from .propagation import OutbreakPropagator, OutbreakResult, TraceState
from .tracer import ContactTracer

__all__ = [
    'PATHS',
    'TRACING_CONFIG',
    'VIZ_CONFIG',
    'INCUBATION_LATENCY',
    'PersonNotFoundError',
    'Trace',
    'ContactRecord',
    'ContactGraph',
    'GraphAnalyzer',
    'NO_CONTACT',
    'neighbors_at_or_after',
    'earliest_contact_at_or_after',
    'OutbreakPropagator',
    'OutbreakResult',
    'TraceState',
    'ContactTracer',
]
