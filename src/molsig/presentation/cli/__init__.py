"""Command-line interfaces for structure enumeration and signatures."""

import logging


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for a command-line run."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
