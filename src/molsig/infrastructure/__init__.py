"""Collaborators that load molecules into, and export them from, the core model."""

from .formula_parser import parse_capacities, parse_formula

__all__ = ["parse_capacities", "parse_formula"]
