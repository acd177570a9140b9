# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Abstract linear operator acting on flat vectors."""

import numpy as np

from fantomo.util.exceptions import (
    OpDomainError, OpRangeError, OperatorNotImplementedError)

__all__ = ('Operator',)


class Operator(object):

    """Abstract operator mapping vectors of length ``shape[1]`` to
    vectors of length ``shape[0]``.

    Any subclass of `Operator` must implement the private method
    ``_call(self, x)``, which receives a 1d `numpy.ndarray` of the
    correct length and returns the result. Input and output sizes are
    checked by `__call__`.

    A linear operator may additionally implement `adjoint`, which is the
    transpose-apply counterpart used e.g. by `show_tomo`.
    """

    def __init__(self, shape, linear=False):
        """Initialize a new instance.

        Parameters
        ----------
        shape : 2-tuple of int
            ``(range size, domain size)`` of this operator, i.e. the shape
            of the matrix representing it.
        linear : bool, optional
            If ``True``, the operator is considered as linear.
        """
        shape_in = shape
        shape = tuple(int(s) for s in shape)
        if len(shape) != 2 or any(s < 0 for s in shape):
            raise ValueError('`shape` must be a pair of nonnegative '
                             'integers, got {!r}'.format(shape_in))

        self.__shape = shape
        self.__is_linear = bool(linear)

    def _call(self, x):
        """Implementation of the operator evaluation.

        This method is the private backend for the evaluation of an
        operator and must be implemented by subclasses.
        """
        raise NotImplementedError('this operator {!r} does not implement '
                                  '`_call`'.format(self))

    @property
    def shape(self):
        """``(range size, domain size)`` of this operator."""
        return self.__shape

    @property
    def is_linear(self):
        """``True`` if this operator is linear."""
        return self.__is_linear

    @property
    def adjoint(self):
        """Adjoint of this operator (abstract).

        Raises
        ------
        OperatorNotImplementedError
            Since the adjoint cannot be default implemented.
        """
        raise OperatorNotImplementedError('adjoint not implemented '
                                          'for operator {!r}'
                                          ''.format(self))

    def __call__(self, x):
        """Return ``self(x)``.

        Implementation of the call pattern ``op(x)`` with the private
        ``_call()`` method and added size checks.

        Parameters
        ----------
        x : `array-like`
            Vector of length ``self.shape[1]``. It is treated as immutable.

        Returns
        -------
        out : `numpy.ndarray`
            Result of the operator evaluation, a vector of length
            ``self.shape[0]``.
        """
        x_arr = np.asarray(x)
        if x_arr.shape != (self.shape[1],):
            raise OpDomainError(
                'expected input of shape {}, got {!r} with shape {}'
                ''.format((self.shape[1],), x, x_arr.shape))

        out = np.asarray(self._call(x_arr))
        if out.shape != (self.shape[0],):
            raise OpRangeError(
                '{!r} produced output of shape {}, expected {}'
                ''.format(self, out.shape, (self.shape[0],)))
        return out

    def __repr__(self):
        """Return ``repr(self)``.

        The default `repr` implementation. Should be overridden by
        subclasses.
        """
        return '{}(shape={})'.format(self.__class__.__name__, self.shape)

    def __str__(self):
        """Return ``str(self)``."""
        return self.__class__.__name__

    # Give a `Operator` a higher priority than any NumPy array type
    __array_priority__ = 2000000.0
