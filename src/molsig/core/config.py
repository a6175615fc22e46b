# src/molsig/core/config.py

"""Default bonding capacities and enumerator settings."""

from dataclasses import dataclass
from typing import Dict

DEFAULT_CAPACITIES: Dict[str, int] = {
    "H": 1,
    "B": 3,
    "C": 4,
    "N": 3,
    "O": 2,
    "F": 1,
    "Si": 4,
    "P": 3,
    "S": 2,
    "Cl": 1,
    "Br": 1,
    "I": 1,
}


@dataclass
class EnumeratorConfig:
    """Switches for the structure enumerator's pruning and bookkeeping.

    Attributes:
        deduplicate: Drop finished structures whose whole-graph signature
            was already emitted
        check_canonicity: Reject partial graphs that an orbit permutation
            maps to a smaller bond list
        prune_saturated_components: Reject partial graphs holding a fully
            saturated component smaller than the whole graph
        collect_stats: Record counters and timings in the enumerator's stats
        multiple_bonds: Also raise the order of an existing bond to double or
            triple; when off every bond stays single
    """

    deduplicate: bool = True
    check_canonicity: bool = True
    prune_saturated_components: bool = True
    collect_stats: bool = True
    multiple_bonds: bool = False
