#!/usr/bin/env python3
# src/molsig/core/domain/models/molecular_graph.py

"""
Domain model representing a molecular structure as a graph.
"""

from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple, Union

import networkx as nx
import numpy as np

from ...exceptions import InvalidBondError, MalformedInputError
from .atom import Atom
from .bond import Bond, BondType

Composition = Union[Mapping[str, int], Iterable[Tuple[str, int]]]

_UPGRADES = {BondType.SINGLE: BondType.DOUBLE, BondType.DOUBLE: BondType.TRIPLE}


class MolecularGraph:
    """Graph of atoms with bonding capacities and the bonds between them.

    Atom indices are dense (0..n-1) and never reordered; a clone shares no
    mutable state with its source.
    """

    def __init__(self, atoms: Optional[List[Atom]] = None, bonds: Optional[List[Bond]] = None):
        """
        Initialize a MolecularGraph.

        Args:
            atoms: Atom objects, in index order
            bonds: Bond objects between those atoms
        """
        self.atoms: List[Atom] = []
        self.bonds: List[Bond] = []
        self._adjacency: List[Dict[int, Bond]] = []
        self._valence: List[float] = []

        for atom in atoms or []:
            self.add_atom(atom.element, atom.capacity)
        for bond in bonds or []:
            self.add_bond(bond.atom1_id, bond.atom2_id, bond.bond_type)

    @classmethod
    def from_composition(
        cls, composition: Composition, capacities: Mapping[str, int]
    ) -> "MolecularGraph":
        """
        Build the initial, bond-less graph for an elemental composition.

        Atoms are ordered by element symbol so that atoms of one element
        occupy a contiguous index range.

        Args:
            composition: (symbol, count) pairs or a symbol -> count mapping
            capacities: symbol -> bonding capacity

        Returns:
            MolecularGraph with every atom and no bonds

        Raises:
            MalformedInputError: If counts, symbols or capacities are invalid
        """
        items = composition.items() if hasattr(composition, "items") else composition
        counts: Counter = Counter()
        for entry in items:
            try:
                symbol, count = entry
            except (TypeError, ValueError):
                raise MalformedInputError(f"Composition entry {entry!r} is not a (symbol, count) pair")
            if not isinstance(symbol, str) or not symbol:
                raise MalformedInputError(f"Invalid element symbol {symbol!r}")
            if isinstance(count, bool) or not isinstance(count, int):
                raise MalformedInputError(f"Count for {symbol} must be an integer, got {count!r}")
            if count < 0:
                raise MalformedInputError(f"Negative count {count} for {symbol}")
            counts[symbol] += count

        graph = cls()
        for symbol in sorted(counts):
            if counts[symbol] == 0:
                continue
            if symbol not in capacities:
                raise MalformedInputError(f"No bonding capacity given for {symbol}")
            capacity = capacities[symbol]
            if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
                raise MalformedInputError(f"Invalid capacity {capacity!r} for {symbol}")
            for _ in range(counts[symbol]):
                graph.add_atom(symbol, capacity)
        return graph

    def __len__(self) -> int:
        return len(self.atoms)

    def __repr__(self) -> str:
        atoms = "".join(f"{atom.element}{atom.atom_id}" for atom in self.atoms)
        bonds = " ".join(
            f"{i}-{j}({bond.bond_type.value})"
            for (i, j), bond in sorted((bond.key(), bond) for bond in self.bonds)
        )
        return f"{atoms} {{ {bonds} }}"

    @property
    def bond_count(self) -> int:
        return len(self.bonds)

    def add_atom(self, element: str, capacity: float) -> int:
        """Append an atom and return its index."""
        index = len(self.atoms)
        self.atoms.append(Atom(atom_id=index, element=element, capacity=capacity))
        self._adjacency.append({})
        self._valence.append(0.0)
        return index

    def add_bond(self, x: int, y: int, bond_type: BondType = BondType.SINGLE) -> Bond:
        """
        Add a bond between atoms x and y.

        Raises:
            InvalidBondError: If x == y, the bond exists, an index is unknown,
                or either atom's capacity would be exceeded
        """
        n = len(self.atoms)
        if not (0 <= x < n and 0 <= y < n):
            raise InvalidBondError(f"Atom index out of range for bond {x}-{y}")
        if x == y:
            raise InvalidBondError(f"Cannot bond atom {x} to itself")
        if y in self._adjacency[x]:
            raise InvalidBondError(f"Atoms {x} and {y} are already bonded")
        order = bond_type.valence
        for index in (x, y):
            if self._valence[index] + order > self.atoms[index].capacity:
                raise InvalidBondError(
                    f"Bond {x}-{y} would exceed the capacity of atom {index} "
                    f"({self.atoms[index].element}, {self.atoms[index].capacity})"
                )

        bond = Bond(atom1_id=x, atom2_id=y, bond_type=bond_type)
        self.bonds.append(bond)
        self._adjacency[x][y] = bond
        self._adjacency[y][x] = bond
        self._valence[x] += order
        self._valence[y] += order
        return bond

    def upgrade_bond(self, x: int, y: int) -> Bond:
        """
        Raise the order of the existing bond between x and y by one.

        Raises:
            InvalidBondError: If there is no such bond, it is already triple
                or aromatic, or either atom's capacity would be exceeded
        """
        bond = self.get_bond(x, y) if 0 <= x < len(self.atoms) else None
        if bond is None:
            raise InvalidBondError(f"Atoms {x} and {y} are not bonded")
        upgraded = _UPGRADES.get(bond.bond_type)
        if upgraded is None:
            raise InvalidBondError(f"Cannot raise the order of {bond.bond_type.name} bond {x}-{y}")
        extra = upgraded.valence - bond.bond_type.valence
        for index in (x, y):
            if self._valence[index] + extra > self.atoms[index].capacity:
                raise InvalidBondError(
                    f"Upgrading bond {x}-{y} would exceed the capacity of atom {index} "
                    f"({self.atoms[index].element}, {self.atoms[index].capacity})"
                )

        bond.bond_type = upgraded
        self._valence[x] += extra
        self._valence[y] += extra
        return bond

    def get_bond(self, x: int, y: int) -> Optional[Bond]:
        return self._adjacency[x].get(y)

    def has_bond(self, x: int, y: int) -> bool:
        return y in self._adjacency[x]

    def neighbors(self, atom_index: int) -> List[int]:
        """Indices of atoms bonded to atom_index, in ascending order."""
        return sorted(self._adjacency[atom_index])

    def degree(self, atom_index: int) -> int:
        """Number of bonds incident to the atom."""
        return len(self._adjacency[atom_index])

    def bond_order_sum(self, atom_index: int) -> float:
        return self._valence[atom_index]

    def free_valence(self, atom_index: int) -> float:
        return self.atoms[atom_index].capacity - self._valence[atom_index]

    def is_saturated(self, atom_index: int) -> bool:
        """True iff the incident bond orders sum to the atom's capacity."""
        return self._valence[atom_index] == self.atoms[atom_index].capacity

    def is_fully_saturated(self) -> bool:
        return all(self.is_saturated(i) for i in range(len(self.atoms)))

    def unsaturated_atoms(self) -> List[int]:
        return [i for i in range(len(self.atoms)) if not self.is_saturated(i)]

    def clone(self) -> "MolecularGraph":
        """Fully independent copy of this graph."""
        copy = MolecularGraph()
        copy.atoms = [Atom(atom.atom_id, atom.element, atom.capacity) for atom in self.atoms]
        copy._adjacency = [{} for _ in self.atoms]
        copy._valence = list(self._valence)
        for bond in self.bonds:
            twin = Bond(bond.atom1_id, bond.atom2_id, bond.bond_type)
            copy.bonds.append(twin)
            copy._adjacency[twin.atom1_id][twin.atom2_id] = twin
            copy._adjacency[twin.atom2_id][twin.atom1_id] = twin
        return copy

    def permuted(self, permutation: Sequence[int]) -> "MolecularGraph":
        """
        Relabel the graph so that atom i moves to index permutation[i].

        Args:
            permutation: A permutation of 0..n-1

        Returns:
            New MolecularGraph isomorphic to this one
        """
        n = len(self.atoms)
        if sorted(permutation) != list(range(n)):
            raise ValueError(f"{list(permutation)} is not a permutation of {n} atoms")
        placed: List[Optional[Atom]] = [None] * n
        for old, new in enumerate(permutation):
            atom = self.atoms[old]
            placed[new] = Atom(new, atom.element, atom.capacity)
        bonds = [
            Bond(permutation[bond.atom1_id], permutation[bond.atom2_id], bond.bond_type)
            for bond in self.bonds
        ]
        return MolecularGraph(placed, bonds)

    def to_networkx(self) -> nx.Graph:
        """Convert to a NetworkX graph with element and order attributes."""
        G = nx.Graph()
        for atom in self.atoms:
            G.add_node(atom.atom_id, element=atom.element, capacity=atom.capacity)
        for bond in self.bonds:
            G.add_edge(bond.atom1_id, bond.atom2_id, order=bond.bond_type.value)
        return G

    def is_connected(self) -> bool:
        """Check whether all atoms form a single connected component."""
        n = len(self.atoms)
        if n == 0:
            return False
        # n atoms connected into a simple chain have (n - 1) bonds
        if len(self.bonds) < n - 1:
            return False
        return nx.is_connected(self.to_networkx())

    def connected_components(self) -> List[Set[int]]:
        """Connected components, ordered by their lowest atom index."""
        components = [set(c) for c in nx.connected_components(self.to_networkx())]
        return sorted(components, key=min)

    def component_of(self, atom_index: int) -> Set[int]:
        return set(nx.node_connected_component(self.to_networkx(), atom_index))

    def has_saturated_component(self, atom_index: int) -> bool:
        """
        Check for a fully saturated component that is not the whole graph.

        Such a component can never be joined to the remaining atoms, so any
        graph containing one cannot complete to a connected structure.
        """
        component = self.component_of(atom_index)
        if len(component) == len(self.atoms):
            return False
        return all(self.is_saturated(i) for i in component)

    def edge_array(self) -> np.ndarray:
        """Bonds as an (m, 3) integer array of (i, j, order code), i < j."""
        if not self.bonds:
            return np.zeros((0, 3), dtype=np.int64)
        return np.array(
            [bond.key() + (bond.bond_type.value,) for bond in self.bonds], dtype=np.int64
        )

    def formula(self) -> str:
        """Molecular formula in Hill order."""
        counts = Counter(atom.element for atom in self.atoms)
        if "C" in counts:
            order = ["C"] + (["H"] if "H" in counts else [])
            order += sorted(s for s in counts if s not in ("C", "H"))
        else:
            order = sorted(counts)
        return "".join(f"{s}{counts[s] if counts[s] > 1 else ''}" for s in order)
