#!/usr/bin/env python3
# src/molsig/core/domain/models/atom.py

"""
Domain model representing an atom in a molecular graph.
"""

from dataclasses import dataclass


@dataclass
class Atom:
    """Represents an atom with a fixed bonding capacity.

    The capacity is the maximum total bond order; it is fractional only for
    aromatic atoms read from an external molecule.
    """

    atom_id: int
    element: str
    capacity: float
