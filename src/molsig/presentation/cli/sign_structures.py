# src/molsig/presentation/cli/sign_structures.py

"""
Command-line interface printing canonical signatures of SMILES molecules.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from ...core.exceptions import MolsigError
from ...core.services.signature_service import SignatureService
from ...infrastructure.adapters.rdkit_adapter import from_smiles
from . import setup_logging

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(description="Print canonical molecular signatures")
    parser.add_argument("smiles", nargs="+", help="SMILES strings to sign")
    parser.add_argument(
        "--atoms", action="store_true", help="Also print the signature of every atom"
    )
    parser.add_argument(
        "--height", type=int, help="Height of per-atom signatures (default: unbounded)"
    )
    parser.add_argument(
        "--kekulize",
        action="store_true",
        help="Read aromatic rings as alternating single and double bonds",
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the signature CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    service = SignatureService()
    status = 0

    for smiles in tqdm(args.smiles, desc="Signing", unit="molecule", disable=args.no_progress):
        try:
            graph = from_smiles(smiles, kekulize=args.kekulize)
            print(f"{smiles}\t{service.for_graph(graph)}")
            if args.atoms:
                for index, signature in enumerate(service.atom_signatures(graph, args.height)):
                    print(f"  {index}\t{graph.atoms[index].element}\t{signature}")
        except (MolsigError, ValueError) as e:
            logger.error(f"Failed to sign {smiles}: {e}")
            status = 1

    return status


if __name__ == "__main__":
    sys.exit(main())
