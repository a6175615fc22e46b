"""Adapter converting between MolecularGraph and RDKit molecules."""

import logging
from typing import Mapping, Optional

from rdkit import Chem

from ...core.config import DEFAULT_CAPACITIES
from ...core.domain.models.bond import BondType
from ...core.domain.models.molecular_graph import MolecularGraph
from ...core.exceptions import InvalidBondError, MalformedInputError

logger = logging.getLogger(__name__)

_FROM_RDKIT = {
    Chem.BondType.SINGLE: BondType.SINGLE,
    Chem.BondType.DOUBLE: BondType.DOUBLE,
    Chem.BondType.TRIPLE: BondType.TRIPLE,
    Chem.BondType.AROMATIC: BondType.AROMATIC,
}

_TO_RDKIT = {value: key for key, value in _FROM_RDKIT.items()}


def from_smiles(
    smiles: str, capacities: Optional[Mapping[str, int]] = None, kekulize: bool = False
) -> MolecularGraph:
    """
    Build a MolecularGraph with explicit hydrogens from a SMILES string.

    Args:
        smiles: SMILES string
        capacities: Bonding capacity per symbol; elements missing from the
            table take RDKit's total valence of the atom; an aromatic atom
            whose bond orders sum past its capacity takes that sum instead
        kekulize: Replace aromatic bonds by alternating single/double bonds

    Returns:
        MolecularGraph of the molecule

    Raises:
        MalformedInputError: If RDKit cannot parse the SMILES or an atom
            exceeds its bonding capacity
    """
    table = DEFAULT_CAPACITIES if capacities is None else capacities
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise MalformedInputError(f"Could not parse SMILES {smiles!r}")
    mol = Chem.AddHs(mol)
    if kekulize:
        Chem.Kekulize(mol, clearAromaticFlags=True)

    bonds = []
    load = [0.0] * mol.GetNumAtoms()
    for bond in mol.GetBonds():
        bond_type = _FROM_RDKIT.get(bond.GetBondType())
        if bond_type is None:
            raise MalformedInputError(f"Unsupported bond type {bond.GetBondType()} in {smiles!r}")
        x, y = bond.GetBeginAtomIdx(), bond.GetEndAtomIdx()
        bonds.append((x, y, bond_type))
        load[x] += bond_type.valence
        load[y] += bond_type.valence

    graph = MolecularGraph()
    for atom in mol.GetAtoms():
        symbol = atom.GetSymbol()
        capacity = table.get(symbol, atom.GetTotalValence())
        index = atom.GetIdx()
        # Aromatic bonds count 1.5 each, which can exceed the tabulated
        # capacity of ring fusion atoms and of heteroatoms such as [nH] or s
        if atom.GetIsAromatic() and load[index] > capacity:
            logger.debug(f"Aromatic atom {index} ({symbol}) takes capacity {load[index]}")
            capacity = int(load[index]) if load[index].is_integer() else load[index]
        graph.add_atom(symbol, capacity)

    for x, y, bond_type in bonds:
        try:
            graph.add_bond(x, y, bond_type)
        except InvalidBondError as e:
            raise MalformedInputError(f"{smiles!r}: {e}") from e

    logger.debug(f"Parsed {smiles!r} into {len(graph)} atoms and {graph.bond_count} bonds")
    return graph


def to_rdkit_mol(graph: MolecularGraph) -> Chem.Mol:
    """
    Convert a MolecularGraph to an RDKit molecule with explicit hydrogens.

    Raises:
        MalformedInputError: If RDKit rejects the resulting molecule
    """
    mol = Chem.RWMol()
    for atom in graph.atoms:
        try:
            rdatom = Chem.Atom(atom.element)
        except RuntimeError as e:
            raise MalformedInputError(f"Unknown element {atom.element!r}") from e
        rdatom.SetNoImplicit(True)
        rdatom.SetNumExplicitHs(0)
        mol.AddAtom(rdatom)

    for bond in graph.bonds:
        mol.AddBond(bond.atom1_id, bond.atom2_id, _TO_RDKIT[bond.bond_type])
        if bond.bond_type is BondType.AROMATIC:
            mol.GetBondBetweenAtoms(bond.atom1_id, bond.atom2_id).SetIsAromatic(True)
            mol.GetAtomWithIdx(bond.atom1_id).SetIsAromatic(True)
            mol.GetAtomWithIdx(bond.atom2_id).SetIsAromatic(True)

    mol = mol.GetMol()
    try:
        Chem.SanitizeMol(mol, Chem.SANITIZE_ALL ^ Chem.SANITIZE_KEKULIZE)
    except Exception as e:
        logger.error(f"Failed to sanitize molecule: {str(e)}")
        raise MalformedInputError(f"Failed to create valid RDKit molecule: {str(e)}")
    return mol


def to_smiles(graph: MolecularGraph) -> str:
    """Canonical RDKit SMILES with hydrogens implicit."""
    return Chem.MolToSmiles(Chem.RemoveHs(to_rdkit_mol(graph)))
