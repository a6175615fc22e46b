import pytest

from molsig.core.domain.models.orbit import Orbit
from molsig.core.services.orbit_partitioner import OrbitPartitioner


@pytest.fixture
def partitioner():
    return OrbitPartitioner()


def test_chain_orbits(partitioner, chain6):
    orbits = partitioner.partition(chain6)

    assert [orbit.atom_indices for orbit in orbits] == [[0, 5], [1, 4], [2, 3]]
    assert all(orbit.height == 6 for orbit in orbits)


def test_ring_has_single_orbit(partitioner, ring6):
    orbits = partitioner.partition(ring6)

    assert len(orbits) == 1
    assert orbits[0].atom_indices == list(range(6))


def test_methane_orbits(partitioner, methane):
    orbits = partitioner.partition(methane)

    assert [orbit.atom_indices for orbit in orbits] == [[0], [1, 2, 3, 4]]
    assert orbits[0].label == "[C]([H][H][H][H])"


def test_isolated_atoms_share_orbit(partitioner, make_graph):
    graph = make_graph(["C", "H", "H", "H"], [(0, 2)])
    orbits = partitioner.partition(graph)

    assert [orbit.atom_indices for orbit in orbits] == [[0], [1, 3], [2]]


def test_unsaturated_orbits_drop_saturated_atoms(partitioner, make_graph):
    graph = make_graph(["C", "C", "H", "H", "H"], [(0, 2), (1, 3)])
    orbits = partitioner.unsaturated_orbits(graph)

    # Both carbons are equivalent, the bonded hydrogens are saturated
    assert [orbit.atom_indices for orbit in orbits] == [[0, 1], [4]]


def test_unsaturated_orbits_empty_for_saturated_graph(partitioner, methane):
    assert partitioner.unsaturated_orbits(methane) == []


def test_orbit_operations():
    orbit = Orbit("[C]", 3, [4, 1])
    orbit.add(2)

    assert list(orbit) == [1, 2, 4]
    assert orbit.first_atom() == 1
    assert 2 in orbit
    assert 3 not in orbit
    assert len(orbit) == 3
    assert not orbit.is_empty()
    assert Orbit("[H]", 0).is_empty()


def test_empty_orbit_has_no_first_atom():
    with pytest.raises(IndexError):
        Orbit("[H]", 0).first_atom()
