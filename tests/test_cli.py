import pytest

from molsig.presentation.cli import enumerate_structures


def test_enumerate_prints_bond_lists(capsys):
    assert enumerate_structures.main(["CH4", "--no-progress"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["C0H1H2H3H4 { 0-1(1) 0-2(1) 0-3(1) 0-4(1) }"]


def test_enumerate_prints_signatures(capsys):
    assert enumerate_structures.main(["C4H10", "--signatures", "--no-progress"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("[H]([C]") for line in lines)


def test_enumerate_capacity_override(capsys):
    # With divalent carbon, C2H2 is a single chain H-C-C-H
    assert enumerate_structures.main(["C2H2", "--capacity", "C=2", "--no-progress"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_enumerate_max_bonds(capsys):
    assert enumerate_structures.main(["C2H6", "--max-bonds", "3", "--no-progress"]) == 0
    assert capsys.readouterr().out == ""


def test_enumerate_reports_bad_formula(capsys):
    assert enumerate_structures.main(["C4h10", "--no-progress"]) == 1
    assert capsys.readouterr().out == ""


def test_enumerate_reports_bad_capacity():
    assert enumerate_structures.main(["CH4", "--capacity", "C4", "--no-progress"]) == 1


def test_enumerate_rejects_conflicting_output_flags():
    with pytest.raises(SystemExit):
        enumerate_structures.main(["CH4", "--signatures", "--smiles"])


def test_enumerate_smiles(capsys):
    pytest.importorskip("rdkit")
    assert enumerate_structures.main(["C4H10", "--smiles", "--no-progress"]) == 0

    assert sorted(capsys.readouterr().out.splitlines()) == ["CC(C)C", "CCCC"]


def test_sign_structures(capsys):
    pytest.importorskip("rdkit")
    from molsig.presentation.cli import sign_structures

    assert sign_structures.main(["CCO", "OCC", "--no-progress"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert len(lines) == 2
    assert lines[0].split("\t")[1] == lines[1].split("\t")[1]


def test_sign_structures_atoms(capsys):
    pytest.importorskip("rdkit")
    from molsig.presentation.cli import sign_structures

    assert sign_structures.main(["C", "--atoms", "--no-progress"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "C\t[H]([C]([H][H][H]))"
    assert lines[1] == "  0\tC\t[C]([H][H][H][H])"
    assert len(lines) == 6


def test_sign_structures_reports_bad_smiles(capsys):
    pytest.importorskip("rdkit")
    from molsig.presentation.cli import sign_structures

    assert sign_structures.main(["C1CC", "CC", "--no-progress"]) == 1
    assert len(capsys.readouterr().out.splitlines()) == 1


def test_sign_structures_accepts_aromatic_heterocycles(capsys):
    pytest.importorskip("rdkit")
    from molsig.presentation.cli import sign_structures

    assert sign_structures.main(["c1ccc2ccccc2c1", "c1cc[nH]c1", "c1ccsc1", "--no-progress"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3

    assert sign_structures.main(["c1ccsc1", "--kekulize", "--no-progress"]) == 0
    assert "p[" not in capsys.readouterr().out


def test_enumerate_multiple_bonds(capsys):
    assert enumerate_structures.main(["C2H4", "--no-progress"]) == 0
    assert capsys.readouterr().out == ""

    assert enumerate_structures.main(["C2H4", "--multiple-bonds", "--no-progress"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["C0C1H2H3H4H5 { 0-1(2) 0-2(1) 0-3(1) 1-4(1) 1-5(1) }"]
