#!/usr/bin/env python3
# src/molsig/core/domain/models/signature_dag.py

"""
Layered directed acyclic graph rooted at one atom of a molecular graph.

The DAG is the backbone of an atom signature. Layer k holds one vertex per
atom reached through a bond not traversed in any earlier layer, so a ring
closes onto a shared vertex with several parents instead of being unrolled.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Set, Tuple

from .bond import BondType
from .molecular_graph import MolecularGraph

# (atom index, bond order code to parent, printed branches)
PrintedNode = Tuple[int, int, list]


@dataclass
class DAGVertex:
    """One occurrence of an atom in a signature DAG."""

    atom_index: int
    layer: int
    parents: List[Tuple[int, int]] = field(default_factory=list)
    children: List[Tuple[int, int]] = field(default_factory=list)


class SignatureDAG:
    """Breadth-first layered DAG of the atoms reachable from a root atom."""

    def __init__(self, graph: MolecularGraph, root: int, height: Optional[int] = None):
        """
        Build the DAG.

        Args:
            graph: Molecular graph to expand
            root: Index of the root atom
            height: Deepest layer to build; None expands until every
                reachable bond has been traversed

        Raises:
            ValueError: If root is not an atom of graph or height is negative
        """
        if not 0 <= root < len(graph):
            raise ValueError(f"Root atom {root} is not in a graph of {len(graph)} atoms")
        if height is not None and height < 0:
            raise ValueError(f"Signature height must be non-negative, got {height}")

        self.graph = graph
        self.root = root
        self.height = height
        self.vertices: List[DAGVertex] = []
        self.layers: List[List[int]] = []
        self.occurrences: Dict[int, List[int]] = {}
        self._build()

    def _add_vertex(self, atom_index: int, layer: int) -> int:
        index = len(self.vertices)
        self.vertices.append(DAGVertex(atom_index, layer))
        self.occurrences.setdefault(atom_index, []).append(index)
        return index

    def _build(self) -> None:
        self.layers.append([self._add_vertex(self.root, 0)])
        visited: Set[Tuple[int, int]] = set()

        while self.height is None or len(self.layers) <= self.height:
            next_layer: Dict[int, int] = {}
            layer_edges: Set[Tuple[int, int]] = set()

            for parent in self.layers[-1]:
                atom = self.vertices[parent].atom_index
                for neighbor in self.graph.neighbors(atom):
                    key = (atom, neighbor) if atom < neighbor else (neighbor, atom)
                    if key in visited:
                        continue
                    layer_edges.add(key)
                    if neighbor not in next_layer:
                        next_layer[neighbor] = self._add_vertex(neighbor, len(self.layers))
                    child = next_layer[neighbor]
                    code = self.graph.get_bond(atom, neighbor).bond_type.value
                    self.vertices[parent].children.append((child, code))
                    self.vertices[child].parents.append((parent, code))

            if not next_layer:
                break
            # Bonds inside one layer are expanded in both directions
            visited |= layer_edges
            self.layers.append(list(next_layer.values()))

    @property
    def atoms(self) -> List[int]:
        """Indices of atoms present in the DAG, ascending."""
        return sorted(self.occurrences)

    def initial_invariants(self) -> Dict[int, tuple]:
        """Per-atom starting invariant: element, capacity, degree and DAG shape."""
        invariants = {}
        for atom_index, vertices in self.occurrences.items():
            atom = self.graph.atoms[atom_index]
            parent_count = sum(len(self.vertices[v].parents) for v in vertices)
            invariants[atom_index] = (
                atom.element,
                atom.capacity,
                self.graph.degree(atom_index),
                len(vertices),
                parent_count,
            )
        return invariants

    def order_sensitive_atoms(self) -> Set[int]:
        """
        Atoms whose relative order among siblings can change the printed string.

        These are atoms that may be printed more than once (several vertices,
        or a vertex with several parents) together with all their ancestors.
        Any other atom heads a plain tree whose printed form does not depend
        on how ties among its siblings are broken.
        """
        pending = [
            v
            for v, vertex in enumerate(self.vertices)
            if len(vertex.parents) > 1 or len(self.occurrences[vertex.atom_index]) > 1
        ]
        seen = set(pending)
        while pending:
            vertex = self.vertices[pending.pop()]
            for parent, _ in vertex.parents:
                if parent not in seen:
                    seen.add(parent)
                    pending.append(parent)
        return {self.vertices[v].atom_index for v in seen}

    def _ordered_children(self, vertex: DAGVertex, ranks: Mapping[int, int]) -> List[Tuple[int, int]]:
        return sorted(
            vertex.children,
            key=lambda child: (ranks[self.vertices[child[0]].atom_index], child[1]),
            reverse=True,
        )

    def _printed_tree(
        self, vertex_index: int, code: int, ranks: Mapping[int, int], visited: Set[Tuple[int, int]]
    ) -> PrintedNode:
        vertex = self.vertices[vertex_index]
        atom = vertex.atom_index
        branches = []
        for child, child_code in self._ordered_children(vertex, ranks):
            other = self.vertices[child].atom_index
            key = (atom, other) if atom < other else (other, atom)
            if key in visited:
                continue
            visited.add(key)
            branches.append(self._printed_tree(child, child_code, ranks, visited))
        return (atom, code, branches)

    def to_string(self, ranks: Mapping[int, int]) -> str:
        """
        Print the DAG depth-first under an atom ranking.

        Children are visited in descending rank and every bond is printed
        once. Atoms printed more than once carry a label numbered in the
        order they are first printed, e.g. ``[C,1]``.

        Args:
            ranks: Invariant for every atom in the DAG

        Returns:
            Signature string such as ``[C]([C,1][C]([C,1]))``
        """
        tree = self._printed_tree(0, 0, ranks, set())

        counts: Counter = Counter()
        order: List[int] = []
        stack = [tree]
        while stack:
            atom, _, branches = stack.pop()
            if atom not in counts:
                order.append(atom)
            counts[atom] += 1
            stack.extend(reversed(branches))

        labels: Dict[int, int] = {}
        for atom in order:
            if counts[atom] > 1:
                labels[atom] = len(labels) + 1

        return self._render(tree, labels)

    def _render(self, node: PrintedNode, labels: Mapping[int, int]) -> str:
        atom, code, branches = node
        element = self.graph.atoms[atom].element
        text = BondType(code).symbol if code else ""
        if atom in labels:
            text += f"[{element},{labels[atom]}]"
        else:
            text += f"[{element}]"
        if branches:
            text += "(" + "".join(self._render(branch, labels) for branch in branches) + ")"
        return text
