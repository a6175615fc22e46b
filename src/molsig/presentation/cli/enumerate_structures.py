# src/molsig/presentation/cli/enumerate_structures.py

"""
Command-line interface enumerating every structure of a molecular formula.
Prints one structure per line as a bond list, a canonical signature or SMILES.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from ...core.config import DEFAULT_CAPACITIES, EnumeratorConfig
from ...core.exceptions import MolsigError
from ...core.services.enumeration_service import (
    Guard,
    StructureEnumerator,
    deadline_guard,
    max_bonds_guard,
)
from ...infrastructure.formula_parser import parse_capacities, parse_formula
from . import setup_logging

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Enumerate all connected, saturated structures of a formula"
    )
    parser.add_argument("formula", help="Molecular formula, e.g. C4H10")
    parser.add_argument(
        "--capacity",
        action="append",
        default=[],
        metavar="SYMBOL=N",
        help="Override the bonding capacity of an element (repeatable)",
    )
    parser.add_argument(
        "--max-bonds", type=int, help="Prune branches with more than this many bonds"
    )
    parser.add_argument(
        "--time-limit", type=float, help="Stop expanding the search after this many seconds"
    )
    parser.add_argument(
        "--multiple-bonds",
        action="store_true",
        help="Also build double and triple bonds",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--signatures", action="store_true", help="Print canonical signatures"
    )
    output.add_argument("--smiles", action="store_true", help="Print SMILES (requires RDKit)")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    return parser


def _combine_guards(guards: List[Guard]) -> Guard:
    def guard(graph) -> bool:
        return all(check(graph) for check in guards)

    return guard


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the structure enumeration CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        capacities = dict(DEFAULT_CAPACITIES)
        capacities.update(parse_capacities(args.capacity))
        composition = parse_formula(args.formula)

        guards = []
        if args.max_bonds is not None:
            guards.append(max_bonds_guard(args.max_bonds))
        if args.time_limit is not None:
            guards.append(deadline_guard(args.time_limit))

        enumerator = StructureEnumerator(
            composition,
            capacities=capacities,
            config=EnumeratorConfig(multiple_bonds=args.multiple_bonds),
            guard=_combine_guards(guards) if guards else None,
        )

        if args.smiles:
            from ...infrastructure.adapters.rdkit_adapter import to_smiles

            render = to_smiles
        elif args.signatures:
            render = enumerator.signature_service.for_graph
        else:
            render = repr

        count = 0
        for graph in tqdm(
            enumerator.generate(),
            desc=f"Enumerating {args.formula}",
            unit="structure",
            disable=args.no_progress,
        ):
            print(render(graph))
            count += 1
    except MolsigError as e:
        logger.error(f"Enumeration failed: {e}")
        return 1

    logger.info(f"{count} structures for {args.formula}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
