import pytest

from molsig.core.domain.models.molecular_graph import MolecularGraph


def build_graph(elements, bonds, capacity=4):
    """Graph over the given element symbols joined by single bonds."""
    graph = MolecularGraph()
    for element in elements:
        graph.add_atom(element, 1 if element == "H" else capacity)
    for x, y in bonds:
        graph.add_bond(x, y)
    return graph


@pytest.fixture
def methane():
    return build_graph(["C", "H", "H", "H", "H"], [(0, 1), (0, 2), (0, 3), (0, 4)])


@pytest.fixture
def ethane():
    return build_graph(
        ["C", "C", "H", "H", "H", "H", "H", "H"],
        [(0, 1), (0, 2), (0, 3), (0, 4), (1, 5), (1, 6), (1, 7)],
    )


@pytest.fixture
def chain6():
    return build_graph(["C"] * 6, [(i, i + 1) for i in range(5)])


@pytest.fixture
def ring6():
    return build_graph(["C"] * 6, [(i, (i + 1) % 6) for i in range(6)])


@pytest.fixture
def triangle():
    return build_graph(["C"] * 3, [(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def square():
    return build_graph(["C"] * 4, [(0, 1), (1, 2), (2, 3), (0, 3)])


@pytest.fixture
def make_graph():
    return build_graph
