"""Search-time canonicity test on bond-list certificates."""

from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.orbit import Orbit
from ..utils.permutations import distinct_permutations
from .orbit_partitioner import OrbitPartitioner


class CanonicalChecker:
    """
    Reject graphs that a relabelling inside one orbit makes smaller.

    The certificate of a graph is its list of (low index, high index, order
    code) bond triples in ascending order. A graph passes when no
    permutation confined to the atoms of a single orbit yields a
    lexicographically smaller certificate, where a multiple bond counts as
    that many repeated single bonds. The full canonical form would
    need every permutation of the atoms, so a graph that passes may still
    be non-canonical; a graph that fails is never canonical.
    """

    def __init__(self, partitioner: Optional[OrbitPartitioner] = None):
        self.partitioner = partitioner or OrbitPartitioner()

    @staticmethod
    def certificate(graph: MolecularGraph, permutation: Optional[Sequence[int]] = None) -> np.ndarray:
        """
        Bond-list certificate of a graph, optionally relabelled.

        Args:
            graph: Molecular graph
            permutation: New index of each atom; identity when omitted

        Returns:
            (m, 3) integer array of sorted bond triples
        """
        if permutation is None:
            permutation = np.arange(len(graph))
        return CanonicalChecker._relabel(graph.edge_array(), np.asarray(permutation))

    @staticmethod
    def _relabel(edges: np.ndarray, permutation: np.ndarray) -> np.ndarray:
        first = permutation[edges[:, 0]]
        second = permutation[edges[:, 1]]
        low = np.minimum(first, second)
        high = np.maximum(first, second)
        order = edges[:, 2]
        index = np.lexsort((order, high, low))
        return np.column_stack((low, high, order))[index]

    @staticmethod
    def _is_smaller(candidate: np.ndarray, reference: np.ndarray) -> bool:
        rows = np.nonzero(np.any(candidate != reference, axis=1))[0]
        if rows.size == 0:
            return False
        low, high, order = candidate[rows[0]]
        ref_low, ref_high, ref_order = reference[rows[0]]
        # A bond of order k stands for k copies of its pair, so on one pair
        # the higher order is the smaller expanded bond list
        return (low, high, -order) < (ref_low, ref_high, -ref_order)

    def is_canonical(self, graph: MolecularGraph, orbits: Optional[List[Orbit]] = None) -> bool:
        """
        Check the graph against every relabelling confined to one orbit.

        Args:
            graph: Molecular graph
            orbits: Partition of all atoms; computed when omitted

        Returns:
            False as soon as a smaller certificate is found, True otherwise
        """
        if graph.bond_count == 0:
            return True
        if orbits is None:
            orbits = self.partitioner.partition(graph)

        edges = graph.edge_array()
        reference = self._relabel(edges, np.arange(len(graph)))

        for orbit in orbits:
            for atoms in self._colour_classes(graph, orbit):
                for permutation in self._orbit_permutations(graph, atoms):
                    if self._is_smaller(self._relabel(edges, permutation), reference):
                        return False
        return True

    @staticmethod
    def _colour_classes(graph: MolecularGraph, orbit: Orbit) -> List[List[int]]:
        classes: Dict[int, List[int]] = {}
        for atom in orbit:
            classes.setdefault(graph.atoms[atom].capacity, []).append(atom)
        return [atoms for atoms in classes.values() if len(atoms) > 1]

    @staticmethod
    def _orbit_permutations(graph: MolecularGraph, atoms: List[int]) -> Iterator[np.ndarray]:
        """
        Permutations of the given atoms that can change the certificate.

        Atoms with identical neighbourhoods are twins; exchanging twins is an
        automorphism, so only the distinct placements of twin groups over
        the atoms' positions are generated. The identity placement is skipped.
        """
        twins: Dict[frozenset, List[int]] = {}
        for atom in atoms:
            neighbourhood = frozenset(
                (other, graph.get_bond(atom, other).bond_type.value)
                for other in graph.neighbors(atom)
            )
            twins.setdefault(neighbourhood, []).append(atom)
        groups = list(twins.values())
        if len(groups) < 2:
            return

        positions = sorted(atoms)
        group_of = {atom: g for g, members in enumerate(groups) for atom in members}
        identity = tuple(group_of[atom] for atom in positions)

        for placement in distinct_permutations(identity):
            if placement == identity:
                continue
            permutation = np.arange(len(graph))
            pools = [sorted(members) for members in groups]
            for position, group in zip(positions, placement):
                permutation[pools[group].pop(0)] = position
            yield permutation
