"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondType
from .molecular_graph import MolecularGraph
from .orbit import Orbit
from .signature_dag import DAGVertex, SignatureDAG

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "Orbit",
    "DAGVertex",
    "SignatureDAG",
]
