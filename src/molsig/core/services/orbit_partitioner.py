"""Partition atoms into orbits of equal signature."""

from typing import Dict, List, Optional

from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.orbit import Orbit
from .signature_service import SignatureService


class OrbitPartitioner:
    """
    Group atoms whose signatures are identical.

    Signatures are taken at a height equal to the number of atoms, which
    covers each atom's whole component. Atoms that are equivalent under an
    automorphism always share an orbit.
    """

    def __init__(self, signature_service: Optional[SignatureService] = None):
        self.signature_service = signature_service or SignatureService()

    def atom_signatures(self, graph: MolecularGraph) -> List[str]:
        return self.signature_service.atom_signatures(graph, height=len(graph))

    def partition(self, graph: MolecularGraph) -> List[Orbit]:
        """
        Orbits covering every atom of the graph.

        Returns:
            Orbits ordered by the first appearance of their signature
        """
        height = len(graph)
        orbits: Dict[str, Orbit] = {}
        for atom_index, signature in enumerate(self.atom_signatures(graph)):
            if signature not in orbits:
                orbits[signature] = Orbit(signature, height)
            orbits[signature].add(atom_index)
        return list(orbits.values())

    def unsaturated_orbits(
        self, graph: MolecularGraph, orbits: Optional[List[Orbit]] = None
    ) -> List[Orbit]:
        """
        Orbits restricted to atoms with free valence.

        Args:
            graph: Molecular graph
            orbits: A partition of graph, computed when omitted

        Returns:
            Non-empty orbits ordered by their lowest unsaturated atom
        """
        if orbits is None:
            orbits = self.partition(graph)

        result = []
        for orbit in orbits:
            restricted = Orbit(
                orbit.label,
                orbit.height,
                [i for i in orbit.atom_indices if not graph.is_saturated(i)],
            )
            if not restricted.is_empty():
                result.append(restricted)
        result.sort(key=Orbit.first_atom)
        return result
