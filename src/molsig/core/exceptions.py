# src/molsig/core/exceptions.py

"""Exceptions raised by the graph model, signature engine and enumerator."""


class MolsigError(Exception):
    """Base class for all errors raised by molsig."""


class InvalidBondError(MolsigError, ValueError):
    """A bond could not be added: self-bond, duplicate or capacity exceeded."""


class MalformedInputError(MolsigError, ValueError):
    """Composition, capacity or molecule input is inconsistent."""
