# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Operators defined by explicit matrices."""

import numpy as np
import scipy.sparse

from fantomo.operator.operator import Operator
from fantomo.util.utility import signature_string

__all__ = ('MatrixOperator',)


class MatrixOperator(Operator):

    """A matrix acting as a linear operator.

    This operator uses a dense or sparse matrix to represent an operator,
    and gets its adjoint by transposing the matrix.
    """

    def __init__(self, matrix):
        """Initialize a new instance.

        Parameters
        ----------
        matrix : `array-like` or `scipy.sparse` matrix
            2-dimensional array representing the linear operator.

        Examples
        --------
        >>> m = np.ones((3, 4))
        >>> op = MatrixOperator(m)
        >>> op.shape
        (3, 4)
        >>> op([1, 2, 3, 4]).tolist()
        [10.0, 10.0, 10.0]
        >>> op.adjoint.shape
        (4, 3)
        """
        if scipy.sparse.issparse(matrix):
            self.__matrix = matrix
        else:
            self.__matrix = np.array(matrix, ndmin=2)

        if self.matrix.ndim != 2:
            raise ValueError('`matrix` has {} axes instead of 2'
                             ''.format(self.matrix.ndim))

        super(MatrixOperator, self).__init__(self.matrix.shape, linear=True)

    @property
    def matrix(self):
        """Matrix representing this operator."""
        return self.__matrix

    @property
    def adjoint(self):
        """Adjoint operator represented by the adjoint matrix.

        Returns
        -------
        adjoint : `MatrixOperator`
        """
        return MatrixOperator(self.matrix.conj().T)

    def _call(self, x):
        """Return ``self(x)``."""
        return self.matrix.dot(x)

    def __repr__(self):
        """Return ``repr(self)``."""
        if scipy.sparse.issparse(self.matrix):
            matrix_str = '<{} sparse matrix, shape={}, nnz={}>'.format(
                self.matrix.format, self.matrix.shape, self.matrix.nnz)
        else:
            matrix_str = '<dense matrix, shape={}>'.format(self.matrix.shape)
        return '{}({})'.format(self.__class__.__name__,
                               signature_string([matrix_str], [], mod='!s'))
