"""Canonical signatures for atoms and whole molecular graphs."""

from collections import defaultdict
from typing import Dict, Hashable, List, Mapping, Optional, Set, TypeVar

from ..domain.models.molecular_graph import MolecularGraph
from ..domain.models.signature_dag import SignatureDAG

K = TypeVar("K")


def _rank(keys: Mapping[K, Hashable]) -> Dict[K, int]:
    """Replace each key by the 1-based position of its value among the distinct values."""
    distinct = sorted(set(keys.values()))
    position = {value: index + 1 for index, value in enumerate(distinct)}
    return {item: position[value] for item, value in keys.items()}


class SignatureService:
    """
    Service computing canonical signature strings.

    An atom signature prints the DAG rooted at the atom after the atom
    invariants have been refined to a fixed point. Remaining ties that can
    change the printed string are broken by individualising each member of
    one tied class in turn; the lexicographically largest string over all
    branches is the signature. The result does not depend on atom indices,
    so two rooted graphs are isomorphic whenever their signatures match.
    """

    def for_atom(self, graph: MolecularGraph, atom_index: int, height: Optional[int] = None) -> str:
        """
        Signature of one atom.

        Args:
            graph: Molecular graph
            atom_index: Root atom
            height: Maximum DAG height, None for the whole component

        Returns:
            Canonical signature string of the rooted graph

        Raises:
            ValueError: If atom_index is out of range or height is negative
        """
        dag = SignatureDAG(graph, atom_index, height)
        return self._canonize(
            dag, _rank(dag.initial_invariants()), {}, dag.order_sensitive_atoms(), 0
        )

    def atom_signatures(self, graph: MolecularGraph, height: Optional[int] = None) -> List[str]:
        """Signature of every atom, in index order."""
        return [self.for_atom(graph, i, height) for i in range(len(graph))]

    def for_graph(self, graph: MolecularGraph) -> str:
        """
        Canonical certificate of a whole graph.

        Each connected component is represented by its largest root
        signature; component strings are joined with "." in descending order.

        Returns:
            Certificate string, empty for a graph without atoms
        """
        parts = []
        for component in graph.connected_components():
            # A root string begins with "[symbol]", so only roots with the
            # largest bracket can produce the largest string
            brackets = {atom: f"[{graph.atoms[atom].element}]" for atom in component}
            top = max(brackets.values())
            parts.append(
                max(self.for_atom(graph, atom) for atom in sorted(component) if brackets[atom] == top)
            )
        return ".".join(sorted(parts, reverse=True))

    def are_isomorphic(self, first: MolecularGraph, second: MolecularGraph) -> bool:
        """Compare two graphs by their canonical certificates."""
        if len(first) != len(second) or first.bond_count != second.bond_count:
            return False
        if first.formula() != second.formula():
            return False
        return self.for_graph(first) == self.for_graph(second)

    def _canonize(
        self,
        dag: SignatureDAG,
        invariants: Mapping[int, int],
        labels: Mapping[int, int],
        sensitive: Set[int],
        depth: int,
    ) -> str:
        refined = self._refine(dag, invariants, labels)
        cell = self._target_cell(dag, refined, sensitive)
        if cell is None or depth >= len(dag.atoms):
            return dag.to_string(refined)

        best = ""
        for atom in cell:
            branch_labels = dict(labels)
            branch_labels[atom] = depth + 1
            candidate = self._canonize(dag, refined, branch_labels, sensitive, depth + 1)
            if candidate > best:
                best = candidate
        return best

    def _refine(
        self, dag: SignatureDAG, invariants: Mapping[int, int], labels: Mapping[int, int]
    ) -> Dict[int, int]:
        """
        Refine atom invariants until the number of classes stops growing.

        Each round sweeps the layers from the root down, ranking every vertex
        by its atom and the multiset of (parent invariant, bond order), then
        from the leaves up with the children instead. Atoms are re-ranked
        after each sweep from the invariants of all their vertices.
        """
        atoms = dag.atoms
        ranks = _rank({a: (invariants[a], labels.get(a, 0)) for a in atoms})
        classes = len(set(ranks.values()))

        while True:
            upward: Dict[int, int] = {}
            for layer in dag.layers:
                keys = {}
                for v in layer:
                    vertex = dag.vertices[v]
                    keys[v] = (
                        ranks[vertex.atom_index],
                        tuple(sorted((upward[p], code) for p, code in vertex.parents)),
                    )
                upward.update(_rank(keys))
            ranks = self._rank_atoms(dag, ranks, upward)

            downward: Dict[int, int] = {}
            for layer in reversed(dag.layers):
                keys = {}
                for v in layer:
                    vertex = dag.vertices[v]
                    keys[v] = (
                        ranks[vertex.atom_index],
                        upward[v],
                        tuple(sorted((downward[c], code) for c, code in vertex.children)),
                    )
                downward.update(_rank(keys))
            ranks = self._rank_atoms(dag, ranks, downward)

            count = len(set(ranks.values()))
            if count == classes:
                return ranks
            classes = count

    @staticmethod
    def _rank_atoms(
        dag: SignatureDAG, ranks: Mapping[int, int], vertex_ranks: Mapping[int, int]
    ) -> Dict[int, int]:
        keys = {}
        for atom, vertices in dag.occurrences.items():
            keys[atom] = (
                ranks[atom],
                tuple((dag.vertices[v].layer, vertex_ranks[v]) for v in vertices),
            )
        return _rank(keys)

    @staticmethod
    def _target_cell(
        dag: SignatureDAG, ranks: Mapping[int, int], sensitive: Set[int]
    ) -> Optional[List[int]]:
        """Largest tied class containing an atom whose order affects the output."""
        cells: Dict[int, List[int]] = defaultdict(list)
        for atom in dag.atoms:
            cells[ranks[atom]].append(atom)

        candidates = [
            (len(members), value)
            for value, members in cells.items()
            if len(members) > 1 and any(atom in sensitive for atom in members)
        ]
        if not candidates:
            return None
        _, value = max(candidates)
        return cells[value]
