# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Fan beam tomography test problems."""

from collections import namedtuple

import numpy as np
import scipy.sparse

from fantomo.operator.operator import Operator
from fantomo.phantom.gallery import phantom_gallery
from fantomo.tomo.geometry.fanbeam import FanBeamGeometry
from fantomo.tomo.operators.ray_trafo import fanbeam_matrix
from fantomo.util.utility import is_string

__all__ = ('FanBeamProblem', 'synthetic_data', 'fanbeamtomo')


FanBeamProblem = namedtuple('FanBeamProblem',
                            ['A', 'b', 'x', 'theta', 'p', 'R', 'd'])
FanBeamProblem.__doc__ = """Fan beam test problem.

Attributes
----------
A : `scipy.sparse.csr_matrix`
    System matrix of shape ``(len(theta) * p, n ** 2)``.
b : `numpy.ndarray` or None
    Exact data ``A.dot(x)``.
x : `numpy.ndarray` or None
    Exact image as vector in cell ordering.
theta : `numpy.ndarray`
    Source angles in degrees.
p : int
    Number of rays per source angle.
R : float
    Source distance in units of the domain side length.
d : float
    Span of the fan in degrees.
"""


def synthetic_data(operator, image):
    """Return the exact data ``operator(image)``.

    Parameters
    ----------
    operator : `Operator`, `scipy.sparse` matrix or `array-like`
        System operator of shape ``(m, n ** 2)``.
    image : `array-like`, shape ``(n ** 2,)``
        Image vector in cell ordering.

    Returns
    -------
    data : `numpy.ndarray`, shape ``(m,)``

    Raises
    ------
    ValueError
        If ``image`` does not have the length of a matrix row.
    OpDomainError
        If ``operator`` is an `Operator` and ``image`` has the wrong
        length.

    Examples
    --------
    >>> synthetic_data(np.eye(3), [1, 2, 3]).tolist()
    [1.0, 2.0, 3.0]
    """
    if isinstance(operator, Operator):
        return operator(image)

    if not scipy.sparse.issparse(operator):
        operator = np.asarray(operator, dtype=float)
        if operator.ndim != 2:
            raise ValueError('`operator` must be 2-dimensional, got array '
                             'with shape {}'.format(operator.shape))

    image = np.asarray(image, dtype=float)
    if image.shape != (operator.shape[1],):
        raise ValueError('`image` must have shape {}, got {}'
                         ''.format((operator.shape[1],), image.shape))

    return np.asarray(operator.dot(image), dtype=float).ravel()


def fanbeamtomo(n, theta=None, p=None, R=None, d=None, display=0,
                phantom='shepplogan'):
    """Create a 2d fan beam tomography test problem.

    The domain is a square of ``n x n`` unit cells centered at the
    origin. For each angle in ``theta``, a point source at distance
    ``R * n`` from the origin emits ``p`` rays in a fan of span ``d``
    degrees. Entry ``(i, k)`` of the system matrix is the length of
    ray ``i`` in cell ``k``.

    Parameters
    ----------
    n : positive int
        Number of cells per side of the domain.
    theta : `array-like`, optional
        Source angles in degrees. Default: ``0, 1, ..., 359``.
    p : positive int, optional
        Number of rays per angle. Default: ``round(sqrt(2) * n)``.
    R : float, optional
        Source distance in units of ``n``, at least ``sqrt(2) / 2``.
        Default: 2.
    d : float, optional
        Span of the fan in degrees, in ``[0, 180]``. Default: such that
        the fan covers the domain exactly.
    display : bool or nonnegative float, optional
        If nonzero, show the rays during assembly, pausing
        ``float(display)`` seconds per step.
    phantom : str or `array-like`, optional
        Exact image, either the name of a phantom for `phantom_gallery`
        or a vector of length ``n ** 2``. For ``None``, no data is
        generated.

    Returns
    -------
    problem : `FanBeamProblem`
        Named tuple ``(A, b, x, theta, p, R, d)``. With
        ``phantom=None``, ``b`` and ``x`` are ``None``.

    Raises
    ------
    InvalidParameterError
        If any of the scan parameters is invalid.

    Examples
    --------
    >>> problem = fanbeamtomo(8, theta=np.arange(0, 180, 10), p=11)
    >>> problem.A.shape
    (198, 64)
    >>> problem.b.shape, problem.x.shape
    ((198,), (64,))
    >>> problem.p, problem.R
    (11, 2.0)
    """
    geometry = FanBeamGeometry(n, angles=theta, num_rays=p, src_radius=R,
                               fan_angle=d)
    A = fanbeam_matrix(geometry, display)

    if phantom is None:
        x = b = None
    else:
        if is_string(phantom):
            x = phantom_gallery(phantom, geometry.n)
        else:
            x = np.asarray(phantom, dtype=float)
        b = synthetic_data(A, x)

    return FanBeamProblem(A, b, x, geometry.angles, geometry.num_rays,
                          geometry.src_radius, geometry.fan_angle)


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
