# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for the abstract operator and matrix operators."""

import numpy as np
import pytest
import scipy.sparse

import fantomo
from fantomo.operator import MatrixOperator, Operator
from fantomo.util.exceptions import (
    OpDomainError, OpRangeError, OpTypeError, OperatorNotImplementedError)
from fantomo.util.testutils import all_almost_equal, all_equal, simple_fixture


# --- pytest fixtures --- #


matrix_type = simple_fixture('matrix_type', ['dense', 'csr', 'csc'])


# --- helpers --- #


class SumOperator(Operator):

    """Sum of all entries, without adjoint."""

    def __init__(self, size):
        super(SumOperator, self).__init__((1, size), linear=True)

    def _call(self, x):
        return np.array([np.sum(x)])


class BrokenOperator(Operator):

    """Operator returning a result of the wrong size."""

    def _call(self, x):
        return np.zeros(self.shape[0] + 1)


def make_matrix(matrix_type):
    matrix = np.array([[1.0, 0.0, 2.0],
                       [0.0, 3.0, 0.0]])
    if matrix_type == 'dense':
        return matrix
    elif matrix_type == 'csr':
        return scipy.sparse.csr_matrix(matrix)
    elif matrix_type == 'csc':
        return scipy.sparse.csc_matrix(matrix)
    else:
        raise ValueError('matrix type not valid')


# --- tests --- #


def test_operator_init():
    op = SumOperator(3)
    assert op.shape == (1, 3)
    assert op.is_linear
    assert not Operator((2, 2)).is_linear

    with pytest.raises(ValueError):
        Operator((1, 2, 3))
    with pytest.raises(ValueError):
        Operator((-1, 2))


def test_operator_call():
    op = SumOperator(3)
    assert all_equal(op([1, 2, 3]), [6])

    with pytest.raises(OpDomainError):
        op([1, 2])
    with pytest.raises(OpDomainError):
        op(np.ones((3, 1)))

    # Domain errors are also type errors
    with pytest.raises(OpTypeError):
        op([1, 2, 3, 4])
    with pytest.raises(TypeError):
        op([1, 2, 3, 4])


def test_operator_not_implemented():
    with pytest.raises(NotImplementedError):
        Operator((2, 2))(np.zeros(2))

    with pytest.raises(OperatorNotImplementedError):
        SumOperator(3).adjoint


def test_operator_range_check():
    with pytest.raises(OpRangeError):
        BrokenOperator((2, 2))(np.zeros(2))


def test_operator_repr():
    op = SumOperator(3)
    assert repr(op) == 'SumOperator(shape=(1, 3))'
    assert str(op) == 'SumOperator'


def test_matrix_operator(matrix_type):
    matrix = make_matrix(matrix_type)
    op = MatrixOperator(matrix)

    assert op.shape == (2, 3)
    assert op.is_linear
    assert op.matrix is matrix or matrix_type == 'dense'

    x = np.array([1.0, 2.0, 3.0])
    assert all_almost_equal(op(x), [7.0, 6.0])

    y = np.array([1.0, -1.0])
    assert op.adjoint.shape == (3, 2)
    assert all_almost_equal(op.adjoint(y), [1.0, -3.0, 2.0])
    assert all_almost_equal(op.adjoint.adjoint(x), op(x))

    with pytest.raises(OpDomainError):
        op(y)

    assert repr(op) > ''


def test_matrix_operator_init():
    op = MatrixOperator([1, 2, 3])
    assert op.shape == (1, 3)

    with pytest.raises(ValueError):
        MatrixOperator(np.zeros((2, 2, 2)))


if __name__ == '__main__':
    fantomo.util.testutils.test_file(__file__)
