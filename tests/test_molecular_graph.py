import pytest
import networkx as nx

from molsig.core.domain.models.bond import BondType
from molsig.core.domain.models.molecular_graph import MolecularGraph
from molsig.core.exceptions import InvalidBondError, MalformedInputError


def test_from_composition_sorts_atoms_by_symbol():
    graph = MolecularGraph.from_composition({"H": 2, "O": 1, "C": 1}, {"C": 4, "H": 1, "O": 2})

    assert [atom.element for atom in graph.atoms] == ["C", "H", "H", "O"]
    assert [atom.capacity for atom in graph.atoms] == [4, 1, 1, 2]
    assert graph.bond_count == 0


def test_from_composition_accepts_pairs_and_merges_repeats():
    graph = MolecularGraph.from_composition([("C", 1), ("H", 2), ("H", 2)], {"C": 4, "H": 1})

    assert len(graph) == 5
    assert graph.formula() == "CH4"


@pytest.mark.parametrize(
    "composition",
    [
        {"C": -1},
        {"C": 1.5},
        {"": 1},
        {"Xx": 1},
        [("C",)],
    ],
)
def test_from_composition_rejects_malformed_input(composition):
    with pytest.raises(MalformedInputError):
        MolecularGraph.from_composition(composition, {"C": 4, "H": 1})


def test_from_composition_rejects_negative_capacity():
    with pytest.raises(MalformedInputError):
        MolecularGraph.from_composition({"C": 1}, {"C": -4})


def test_add_bond_updates_saturation(methane):
    assert methane.is_fully_saturated()
    assert methane.degree(0) == 4
    assert methane.neighbors(0) == [1, 2, 3, 4]
    assert methane.free_valence(0) == 0
    assert methane.unsaturated_atoms() == []


def test_add_bond_rejects_self_bond(make_graph):
    graph = make_graph(["C", "C"], [])
    with pytest.raises(InvalidBondError):
        graph.add_bond(0, 0)


def test_add_bond_rejects_duplicate(make_graph):
    graph = make_graph(["C", "C"], [(0, 1)])
    with pytest.raises(InvalidBondError):
        graph.add_bond(1, 0)
    assert graph.bond_count == 1


def test_add_bond_rejects_capacity_overflow(make_graph):
    graph = make_graph(["H", "H", "H"], [(0, 1)])
    with pytest.raises(InvalidBondError):
        graph.add_bond(1, 2)
    assert graph.bond_order_sum(2) == 0


def test_add_bond_rejects_unknown_atom(make_graph):
    graph = make_graph(["C"], [])
    with pytest.raises(InvalidBondError):
        graph.add_bond(0, 3)


def test_double_bond_counts_twice(make_graph):
    graph = make_graph(["C", "O"], [])
    graph.atoms[1].capacity = 2
    graph.add_bond(0, 1, BondType.DOUBLE)

    assert graph.is_saturated(1)
    assert graph.free_valence(0) == 2
    assert graph.get_bond(1, 0).bond_order == 2


def test_upgrade_bond_raises_order(make_graph):
    graph = make_graph(["C", "C"], [(0, 1)])

    assert graph.upgrade_bond(0, 1).bond_type is BondType.DOUBLE
    assert graph.upgrade_bond(1, 0).bond_type is BondType.TRIPLE
    assert graph.bond_count == 1
    assert graph.bond_order_sum(0) == 3
    assert graph.free_valence(1) == 1
    assert graph.get_bond(0, 1).bond_type is BondType.TRIPLE

    with pytest.raises(InvalidBondError):
        graph.upgrade_bond(0, 1)


def test_upgrade_bond_rejects_missing_bond_and_overflow(make_graph):
    graph = make_graph(["C", "H", "C"], [(0, 1)])

    with pytest.raises(InvalidBondError):
        graph.upgrade_bond(0, 2)
    with pytest.raises(InvalidBondError):
        graph.upgrade_bond(0, 1)
    assert graph.get_bond(0, 1).bond_type is BondType.SINGLE
    assert graph.bond_order_sum(0) == 1


def test_upgrade_bond_leaves_clone_untouched(make_graph):
    graph = make_graph(["C", "C"], [(0, 1)])
    copy = graph.clone()
    copy.upgrade_bond(0, 1)

    assert graph.get_bond(0, 1).bond_type is BondType.SINGLE
    assert graph.bond_order_sum(0) == 1


def test_clone_is_independent(make_graph):
    graph = make_graph(["C", "C", "C"], [(0, 1)])
    copy = graph.clone()
    copy.add_bond(1, 2)

    assert graph.bond_count == 1
    assert not graph.has_bond(1, 2)
    assert copy.has_bond(1, 2)
    assert copy.bond_order_sum(1) == 2
    assert graph.bond_order_sum(1) == 1


def test_is_connected(make_graph):
    assert not make_graph(["C", "C", "C"], [(0, 1)]).is_connected()
    assert make_graph(["C", "C", "C"], [(0, 1), (1, 2)]).is_connected()
    assert make_graph(["C"], []).is_connected()
    assert not MolecularGraph().is_connected()
    # Enough bonds, still two components
    assert not make_graph(["C"] * 5, [(0, 1), (1, 2), (0, 2), (3, 4)]).is_connected()


def test_connected_components_are_ordered(make_graph):
    graph = make_graph(["C"] * 5, [(3, 4), (0, 2)])
    assert graph.connected_components() == [{0, 2}, {1}, {3, 4}]
    assert graph.component_of(4) == {3, 4}


def test_has_saturated_component(make_graph):
    graph = make_graph(["H", "H", "C"], [(0, 1)])
    assert graph.has_saturated_component(0)
    assert not graph.has_saturated_component(2)

    whole = make_graph(["H", "H"], [(0, 1)])
    assert not whole.has_saturated_component(0)


def test_permuted_relabels_atoms_and_bonds(make_graph):
    graph = make_graph(["C", "H", "C"], [(0, 1), (0, 2)])
    permuted = graph.permuted([2, 0, 1])

    assert [atom.element for atom in permuted.atoms] == ["H", "C", "C"]
    assert permuted.has_bond(2, 0)
    assert permuted.has_bond(2, 1)
    assert not permuted.has_bond(0, 1)


def test_permuted_rejects_non_permutation(make_graph):
    graph = make_graph(["C", "C"], [])
    with pytest.raises(ValueError):
        graph.permuted([0, 0])


def test_edge_array(ethane):
    edges = ethane.edge_array()

    assert edges.shape == (7, 3)
    assert (edges[:, 0] < edges[:, 1]).all()
    assert set(edges[:, 2]) == {BondType.SINGLE.value}
    assert MolecularGraph().edge_array().shape == (0, 3)


def test_to_networkx(ethane):
    G = ethane.to_networkx()

    assert isinstance(G, nx.Graph)
    assert G.number_of_nodes() == 8
    assert G.number_of_edges() == 7
    assert G.nodes[0]["element"] == "C"


def test_formula_and_repr(methane, make_graph):
    assert methane.formula() == "CH4"
    assert make_graph(["O", "H", "C", "H"], []).formula() == "CH2O"
    assert make_graph(["O", "H", "H"], []).formula() == "H2O"
    assert repr(methane) == "C0H1H2H3H4 { 0-1(1) 0-2(1) 0-3(1) 0-4(1) }"
