"""Core domain models, interfaces and services for molecular graph enumeration."""

from .config import DEFAULT_CAPACITIES, EnumeratorConfig
from .exceptions import InvalidBondError, MalformedInputError, MolsigError
from .domain.models import Atom, Bond, BondType, MolecularGraph, Orbit, SignatureDAG
from .domain.interfaces import BondObserver, ResultSink
from .domain.implementations import CallbackResultSink, ListResultSink, LoggingResultSink
from .services import (
    CanonicalChecker,
    OrbitPartitioner,
    SignatureService,
    StructureEnumerator,
    deadline_guard,
    max_bonds_guard,
)

__all__ = [
    "DEFAULT_CAPACITIES",
    "EnumeratorConfig",
    "InvalidBondError",
    "MalformedInputError",
    "MolsigError",
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "Orbit",
    "SignatureDAG",
    "BondObserver",
    "ResultSink",
    "CallbackResultSink",
    "ListResultSink",
    "LoggingResultSink",
    "CanonicalChecker",
    "OrbitPartitioner",
    "SignatureService",
    "StructureEnumerator",
    "deadline_guard",
    "max_bonds_guard",
]
