"""Isomorph-free enumeration of connected, saturated molecular graphs."""

import logging
import time
from typing import Callable, Iterator, List, Mapping, Optional

from ..config import DEFAULT_CAPACITIES, EnumeratorConfig
from ..domain.interfaces.result_sink import BondObserver, ResultSink
from ..domain.models.molecular_graph import Composition, MolecularGraph
from ..domain.models.orbit import Orbit
from ..exceptions import InvalidBondError
from ..utils.benchmarking import PerformanceStats, timer
from .canonical_checker import CanonicalChecker
from .orbit_partitioner import OrbitPartitioner
from .signature_service import SignatureService

logger = logging.getLogger(__name__)

Guard = Callable[[MolecularGraph], bool]


def max_bonds_guard(max_bonds: int) -> Guard:
    """Guard pruning every branch with more than max_bonds bonds."""

    def guard(graph: MolecularGraph) -> bool:
        return graph.bond_count <= max_bonds

    return guard


def deadline_guard(seconds: float) -> Guard:
    """Guard pruning every branch once seconds have passed since its creation."""
    deadline = time.monotonic() + seconds

    def guard(graph: MolecularGraph) -> bool:
        return time.monotonic() < deadline

    return guard


class StructureEnumerator:
    """
    Backtracking generator of all structures for an elemental composition.

    Each search node owns a private clone of its graph. The node saturates
    the lowest unsaturated atom x, which is the first atom of the first
    unsaturated orbit, by bonding it to each unsaturated partner y above
    its current highest partner, so bonds are always added in ascending
    order. With multiple bonds enabled the highest partner itself is also a
    candidate, and choosing it raises that bond's order by one. A branch is admitted only if it holds no fully saturated
    component smaller than the whole graph and passes the canonicity check.
    Connected, fully saturated graphs are emitted once per canonical
    signature.
    """

    def __init__(
        self,
        composition: Composition,
        capacities: Optional[Mapping[str, int]] = None,
        config: Optional[EnumeratorConfig] = None,
        observer: Optional[BondObserver] = None,
        guard: Optional[Guard] = None,
    ):
        """
        Initialize the enumerator.

        Args:
            composition: (symbol, count) pairs or a symbol -> count mapping
            capacities: Bonding capacity per symbol, DEFAULT_CAPACITIES if omitted
            config: Pruning and bookkeeping switches
            observer: Notified after every admitted bond
            guard: Called on every search node; returning False prunes it

        Raises:
            MalformedInputError: If the composition or capacities are invalid
        """
        self.capacities = dict(DEFAULT_CAPACITIES if capacities is None else capacities)
        self.initial = MolecularGraph.from_composition(composition, self.capacities)
        self.config = config or EnumeratorConfig()
        self.observer = observer
        self.guard = guard

        self.signature_service = SignatureService()
        self.partitioner = OrbitPartitioner(self.signature_service)
        self.checker = CanonicalChecker(self.partitioner)
        self.stats = PerformanceStats()

    def _count(self, name: str) -> None:
        if self.config.collect_stats:
            self.stats.increment(name)

    def _stats(self) -> Optional[PerformanceStats]:
        return self.stats if self.config.collect_stats else None

    def generate(self) -> Iterator[MolecularGraph]:
        """
        Lazily yield every structure; calling again restarts the search.

        Yields:
            Connected, fully saturated MolecularGraph instances, pairwise
            non-isomorphic when deduplication is enabled
        """
        self.stats.reset()
        formula = self.initial.formula() or "<empty>"
        total = sum(atom.capacity for atom in self.initial.atoms)
        if total % 2:
            logger.warning(f"{formula}: total bonding capacity {total} is odd, no structure exists")
            return

        logger.info(f"Enumerating structures for {formula}")
        seen = set()
        found = 0
        for graph in self._search(self.initial.clone(), None):
            if self.config.deduplicate:
                with timer("signature", self._stats()):
                    signature = self.signature_service.for_graph(graph)
                if signature in seen:
                    self._count("duplicates_dropped")
                    continue
                seen.add(signature)
            found += 1
            self._count("structures")
            yield graph

        logger.info(f"Found {found} structures for {formula}")
        if self.config.collect_stats:
            logger.info(f"Search statistics:\n{self.stats.report()}")

    def generate_to_sink(self, sink: ResultSink) -> int:
        """Feed every structure to sink and return how many were sent."""
        count = 0
        for graph in self.generate():
            sink.handle(graph)
            count += 1
        return count

    def generate_list(self) -> List[MolecularGraph]:
        return list(self.generate())

    def _partition(self, graph: MolecularGraph) -> List[Orbit]:
        with timer("orbit_partition", self._stats()):
            return self.partitioner.partition(graph)

    def _search(self, graph: MolecularGraph, orbits: Optional[List[Orbit]]) -> Iterator[MolecularGraph]:
        self._count("nodes")
        if self.guard is not None and not self.guard(graph):
            self._count("pruned_by_guard")
            return

        # Connected alone is not enough: a connected graph with free valence
        # keeps growing so rings can close
        if graph.is_connected() and graph.is_fully_saturated():
            yield graph
            return

        if orbits is None:
            orbits = self._partition(graph)
        unsaturated = self.partitioner.unsaturated_orbits(graph, orbits)
        if not unsaturated:
            self._count("dead_ends")
            return

        x = unsaturated[0].first_atom()
        partners = [other for other in graph.neighbors(x) if other > x]
        start = max(partners) + 1 if partners else x + 1
        if self.config.multiple_bonds and partners:
            # The highest partner again means one more order on that bond
            start -= 1

        for y in range(start, len(graph)):
            if graph.is_saturated(y):
                continue
            child = graph.clone()
            try:
                if child.has_bond(x, y):
                    child.upgrade_bond(x, y)
                else:
                    child.add_bond(x, y)
            except InvalidBondError as e:
                logger.debug(f"Bond {x}-{y} rejected: {e}")
                self._count("invalid_bonds")
                continue

            if self.config.prune_saturated_components and child.has_saturated_component(x):
                logger.debug(f"Bond {x}-{y} closes a saturated fragment")
                self._count("pruned_saturated_component")
                continue

            child_orbits = None
            if self.config.check_canonicity:
                # Orbits of the parent catch equivalent choices of y, the
                # child's own orbits catch the remaining symmetric labellings
                with timer("canonicity_check", self._stats()):
                    canonical = self.checker.is_canonical(child, orbits)
                if canonical:
                    child_orbits = self._partition(child)
                    with timer("canonicity_check", self._stats()):
                        canonical = self.checker.is_canonical(child, child_orbits)
                if not canonical:
                    self._count("pruned_not_canonical")
                    continue

            logger.debug(f"Bond {x}-{y} admitted at {child.bond_count} bonds")
            if self.observer is not None:
                self.observer.bond_added(child, x, y)
            yield from self._search(child, child_orbits)
