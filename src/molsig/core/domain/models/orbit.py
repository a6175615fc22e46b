#!/usr/bin/env python3
# src/molsig/core/domain/models/orbit.py

"""
Domain model for a class of structurally equivalent atoms.
"""

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class Orbit:
    """Atoms sharing one signature string, in ascending index order."""

    label: str
    height: int
    atom_indices: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.atom_indices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.atom_indices)

    def __contains__(self, atom_index: object) -> bool:
        return atom_index in self.atom_indices

    def add(self, atom_index: int) -> None:
        self.atom_indices.append(atom_index)
        self.atom_indices.sort()

    def first_atom(self) -> int:
        """Lowest atom index of the orbit."""
        if not self.atom_indices:
            raise IndexError(f"Orbit {self.label!r} is empty")
        return self.atom_indices[0]

    def is_empty(self) -> bool:
        return not self.atom_indices
