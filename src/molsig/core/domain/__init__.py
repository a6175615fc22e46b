"""Core domain models and interfaces."""

from .models import Atom, Bond, BondType, MolecularGraph, Orbit, SignatureDAG
from .interfaces import BondObserver, ResultSink

__all__ = [
    "Atom",
    "Bond",
    "BondType",
    "MolecularGraph",
    "Orbit",
    "SignatureDAG",
    "BondObserver",
    "ResultSink",
]
