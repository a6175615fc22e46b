"""Adapters to external chemistry toolkits."""

from .rdkit_adapter import from_smiles, to_rdkit_mol, to_smiles

__all__ = ["from_smiles", "to_rdkit_mol", "to_smiles"]
