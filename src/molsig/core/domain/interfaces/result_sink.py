"""Interfaces the structure enumerator reports to."""

from abc import ABC, abstractmethod

from ..models.molecular_graph import MolecularGraph


class ResultSink(ABC):
    """Abstract receiver of finished structures."""

    @abstractmethod
    def handle(self, graph: MolecularGraph) -> None:
        """
        Accept one enumerated structure.

        Args:
            graph: Connected, fully saturated molecular graph
        """
        pass


class BondObserver(ABC):
    """Abstract observer notified whenever the enumerator admits a bond."""

    @abstractmethod
    def bond_added(self, graph: MolecularGraph, x: int, y: int) -> None:
        """
        Called after the bond x-y has been admitted into a search branch.

        Args:
            graph: The branch's graph, including the new bond
            x: Atom being saturated
            y: Partner atom
        """
        pass
