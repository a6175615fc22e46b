import pytest

from molsig.core.exceptions import MalformedInputError
from molsig.infrastructure.formula_parser import parse_capacities, parse_formula


@pytest.mark.parametrize(
    "formula, expected",
    [
        ("C4H10", [("C", 4), ("H", 10)]),
        ("CH4", [("C", 1), ("H", 4)]),
        ("H2O", [("H", 2), ("O", 1)]),
        ("CH3CH2OH", [("C", 2), ("H", 6), ("O", 1)]),
        ("C2H5Cl", [("C", 2), ("H", 5), ("Cl", 1)]),
        (" C6H6 ", [("C", 6), ("H", 6)]),
    ],
)
def test_parse_formula(formula, expected):
    assert parse_formula(formula) == expected


@pytest.mark.parametrize("formula", ["", "   ", "c4h10", "C4-H10", "4C", "C4H10!"])
def test_parse_formula_rejects_garbage(formula):
    with pytest.raises(MalformedInputError):
        parse_formula(formula)


def test_parse_capacities():
    assert parse_capacities(["C=4", "H = 1", "Cl=1"]) == {"C": 4, "H": 1, "Cl": 1}
    assert parse_capacities([]) == {}


@pytest.mark.parametrize("entry", ["C", "C=", "C=-1", "=4", "C=four"])
def test_parse_capacities_rejects_garbage(entry):
    with pytest.raises(MalformedInputError):
        parse_capacities([entry])
