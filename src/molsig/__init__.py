"""Enumeration and canonical signatures of small molecular graphs."""

from .core.config import DEFAULT_CAPACITIES, EnumeratorConfig
from .core.exceptions import InvalidBondError, MalformedInputError, MolsigError
from .core.domain.models import Atom, Bond, BondType, MolecularGraph, Orbit
from .core.domain.implementations import ListResultSink
from .core.services import (
    CanonicalChecker,
    OrbitPartitioner,
    SignatureService,
    StructureEnumerator,
)
from .infrastructure.formula_parser import parse_capacities, parse_formula

__version__ = "0.1.0"

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
    "ListResultSink",
    "CanonicalChecker",
    "OrbitPartitioner",
    "SignatureService",
    "StructureEnumerator",
    "parse_capacities",
    "parse_formula",
]
