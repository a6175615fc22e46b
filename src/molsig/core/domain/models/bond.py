#!/usr/bin/env python3
# src/molsig/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class BondType(Enum):
    """Enumeration of possible bond types.

    The value is the order code used in certificates and signatures.
    """

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    AROMATIC = 4

    @property
    def valence(self) -> float:
        """Contribution of this bond to each atom's bonding capacity."""
        return _VALENCE[self]

    @property
    def symbol(self) -> str:
        """Prefix printed before a child atom in a signature string."""
        return _SYMBOLS[self]


_VALENCE = {
    BondType.SINGLE: 1.0,
    BondType.DOUBLE: 2.0,
    BondType.TRIPLE: 3.0,
    BondType.AROMATIC: 1.5,
}

_SYMBOLS = {
    BondType.SINGLE: "",
    BondType.DOUBLE: "=",
    BondType.TRIPLE: "t",
    BondType.AROMATIC: "p",
}


@dataclass
class Bond:
    """Represents a chemical bond between two atoms."""

    atom1_id: int
    atom2_id: int
    bond_type: BondType = BondType.SINGLE

    @property
    def bond_order(self) -> float:
        return self.bond_type.valence

    def key(self) -> Tuple[int, int]:
        """Unordered atom pair as a sorted tuple."""
        if self.atom1_id < self.atom2_id:
            return (self.atom1_id, self.atom2_id)
        return (self.atom2_id, self.atom1_id)
