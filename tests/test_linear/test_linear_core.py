import numpy as np
import pytest

from simplexkit.exceptions import DimensionMismatchError
from simplexkit.linear.core import LinearConstraint, LinearObjectiveFunction, Relationship


def test_relationship_opposite():
    assert Relationship.LEQ.opposite() is Relationship.GEQ
    assert Relationship.GEQ.opposite() is Relationship.LEQ
    assert Relationship.EQ.opposite() is Relationship.EQ
    assert str(Relationship.GEQ) == ">="


def test_objective_value_includes_constant():
    f = LinearObjectiveFunction([2.0, -1.0], constant_term=3.0)
    assert f.value([1.0, 4.0]) == pytest.approx(1.0)
    assert len(f) == 2


def test_objective_value_dimension_check():
    f = LinearObjectiveFunction([2.0, -1.0])
    with pytest.raises(DimensionMismatchError):
        f.value([1.0])


def test_constraint_from_both_sides():
    # x + 2y + 1 <= y + 4  ->  x + y <= 3
    c = LinearConstraint.from_sides([1.0, 2.0], 1.0, Relationship.LEQ, [0.0, 1.0], 4.0)
    np.testing.assert_array_equal(c.coefficients, [1.0, 1.0])
    assert c.relationship is Relationship.LEQ
    assert c.value == 3.0


def test_constraint_from_sides_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        LinearConstraint.from_sides([1.0, 2.0], 0.0, Relationship.EQ, [1.0], 0.0)


def test_normalize_negative_right_hand_side():
    c = LinearConstraint([1.0, -2.0], Relationship.GEQ, -4.0).normalized()
    np.testing.assert_array_equal(c.coefficients, [-1.0, 2.0])
    assert c.relationship is Relationship.LEQ
    assert c.value == 4.0


def test_normalize_keeps_non_negative_right_hand_side():
    c = LinearConstraint([1.0], Relationship.EQ, 0.0)
    assert c.normalized() is c


def test_coefficients_are_read_only_copies():
    coefficients = np.array([1.0, 2.0])
    c = LinearConstraint(coefficients, Relationship.LEQ, 1.0)
    coefficients[0] = 9.0
    assert c.coefficients[0] == 1.0
    with pytest.raises(ValueError):
        c.coefficients[0] = 5.0
