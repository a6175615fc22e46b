"""Core services: signatures, orbits, canonicity and enumeration."""

from .signature_service import SignatureService
from .orbit_partitioner import OrbitPartitioner
from .canonical_checker import CanonicalChecker
from .enumeration_service import (
    StructureEnumerator,
    deadline_guard,
    max_bonds_guard,
)

__all__ = [
    "SignatureService",
    "OrbitPartitioner",
    "CanonicalChecker",
    "StructureEnumerator",
    "deadline_guard",
    "max_bonds_guard",
]
