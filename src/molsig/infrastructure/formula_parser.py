"""Parsing of molecular formulas and capacity tables."""

import re
from typing import Dict, Iterable, List, Tuple

from ..core.exceptions import MalformedInputError

_ELEMENT_COUNT = re.compile(r"([A-Z][a-z]?)(\d*)")
_CAPACITY = re.compile(r"^\s*([A-Z][a-z]?)\s*=\s*(\d+)\s*$")


def parse_formula(formula: str) -> List[Tuple[str, int]]:
    """
    Split a molecular formula into (symbol, count) pairs.

    Repeated symbols are summed; pairs keep the order in which each symbol
    first appears.

    Args:
        formula: Formula such as "C4H10" or "CH3CH2OH"

    Returns:
        List of (symbol, count) pairs

    Raises:
        MalformedInputError: If the formula is empty or contains anything
            other than element symbols and counts
    """
    text = formula.strip()
    if not text:
        raise MalformedInputError("Empty molecular formula")

    counts: Dict[str, int] = {}
    position = 0
    for match in _ELEMENT_COUNT.finditer(text):
        if match.start() != position:
            break
        symbol, digits = match.groups()
        counts[symbol] = counts.get(symbol, 0) + (int(digits) if digits else 1)
        position = match.end()

    if position != len(text):
        raise MalformedInputError(f"Cannot parse formula {formula!r} at position {position}")
    return list(counts.items())


def parse_capacities(entries: Iterable[str]) -> Dict[str, int]:
    """
    Parse "SYMBOL=N" capacity overrides.

    Raises:
        MalformedInputError: If an entry is not of the form SYMBOL=N
    """
    capacities = {}
    for entry in entries:
        match = _CAPACITY.match(entry)
        if not match:
            raise MalformedInputError(f"Invalid capacity {entry!r}, expected SYMBOL=N")
        capacities[match.group(1)] = int(match.group(2))
    return capacities
