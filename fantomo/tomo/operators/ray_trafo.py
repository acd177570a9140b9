# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Fan beam ray transform as an explicit sparse matrix."""

import warnings

import numpy as np
import scipy.sparse

from fantomo.operator.tensor_ops import MatrixOperator
from fantomo.tomo.backends.ray_cell import ray_cell_intersections
from fantomo.tomo.geometry.fanbeam import FanBeamGeometry
from fantomo.util.exceptions import InvalidParameterError
from fantomo.util.utility import indent, signature_string

__all__ = ('fanbeam_matrix', 'FanBeamRayTransform')


def _display_delay(display):
    """Return the display delay in seconds for a ``display`` argument."""
    try:
        delay = float(display)
    except (TypeError, ValueError):
        raise InvalidParameterError('`display` must be a bool or a '
                                    'nonnegative number, got {!r}'
                                    ''.format(display))
    if not (np.isfinite(delay) and delay >= 0):
        raise InvalidParameterError('`display` must be a bool or a '
                                    'nonnegative number, got {!r}'
                                    ''.format(display))
    return delay


def fanbeam_matrix(geometry, display=0):
    """Assemble the system matrix of a fan beam geometry.

    Row ``i * num_rays + j`` of the matrix holds the lengths of ray ``j``
    of angle ``i`` inside the cells of the domain, column ``k`` belongs
    to the cell with flat index ``k`` (see
    `fantomo.tomo.backends.ray_cell`).

    Parameters
    ----------
    geometry : `FanBeamGeometry`
        Geometry whose rays are traced.
    display : bool or nonnegative float, optional
        If nonzero, the source and rays are drawn while the matrix is
        assembled, waiting ``float(display)`` seconds after each step.
        The result does not depend on this parameter.

    Returns
    -------
    matrix : `scipy.sparse.csr_matrix`
        Sparse matrix of shape ``geometry.shape``.

    Raises
    ------
    InvalidParameterError
        If ``display`` is negative or not a number.

    Examples
    --------
    A single ray along the center line of a 4 x 4 grid crosses 4 cells:

    >>> geom = FanBeamGeometry(4, angles=[0], num_rays=1, fan_angle=0)
    >>> matrix = fanbeam_matrix(geom)
    >>> matrix.shape, matrix.nnz
    ((1, 16), 4)
    >>> float(matrix.sum())
    4.0
    """
    if not isinstance(geometry, FanBeamGeometry):
        raise TypeError('`geometry` must be a `FanBeamGeometry` instance, '
                        'got {!r}'.format(geometry))
    delay = _display_delay(display)

    n = geometry.n
    num_rays = geometry.num_rays
    shape = geometry.shape

    if shape[1] >= 256 ** 2:
        warnings.warn(
            'Assembling the fan beam matrix may be too slow for {0} x {0} '
            'cells.'.format(n),
            RuntimeWarning,
        )

    # A ray crosses at most 2 * n + 2 grid lines, hence at most
    # 2 * n + 1 cells
    capacity = (2 * n + 1) * shape[0]
    if max(shape) <= np.iinfo(np.int32).max:
        index_dtype = np.int32
    else:
        index_dtype = np.int64
    rows = np.empty(capacity, dtype=index_dtype)
    cols = np.empty(capacity, dtype=index_dtype)
    vals = np.empty(capacity, dtype=float)
    offset = 0

    if delay:
        # Requires matplotlib
        from fantomo.util.graphics import FanBeamDisplay
        viewer = FanBeamDisplay(geometry, delay)
    else:
        viewer = None

    for i, j, src, direction in geometry.rays():
        if viewer is not None:
            if j == 0:
                viewer.show_source(src)
            viewer.show_ray(src, direction)

        cells, lengths = ray_cell_intersections(src, direction, n)
        count = cells.size
        stop = offset + count
        rows[offset:stop] = i * num_rays + j
        cols[offset:stop] = cells
        vals[offset:stop] = lengths
        offset = stop

    # Duplicate entries are summed by the conversion
    return scipy.sparse.csr_matrix(
        (vals[:offset], (rows[:offset], cols[:offset])), shape=shape)


class FanBeamRayTransform(MatrixOperator):

    """Fan beam ray transform on a square grid of unit cells.

    The operator maps an image vector of length ``n ** 2`` to the
    vector of line integrals along all rays of the geometry. Its adjoint
    is the back-projection given by the transposed matrix.
    """

    def __init__(self, geometry, display=0):
        """Initialize a new instance.

        Parameters
        ----------
        geometry : `FanBeamGeometry`
            Geometry of the transform.
        display : bool or nonnegative float, optional
            If nonzero, illustrate the rays during assembly, see
            `fanbeam_matrix`.

        Examples
        --------
        >>> geom = FanBeamGeometry(8, angles=[0, 45, 90], num_rays=5)
        >>> ray_trafo = FanBeamRayTransform(geom)
        >>> ray_trafo.shape
        (15, 64)
        >>> ray_trafo.adjoint.shape
        (64, 15)
        """
        super(FanBeamRayTransform, self).__init__(
            fanbeam_matrix(geometry, display))
        self.__geometry = geometry

    @property
    def geometry(self):
        """Geometry of this ray transform."""
        return self.__geometry

    def __repr__(self):
        """Return ``repr(self)``."""
        sig_str = signature_string([self.geometry], [], sep=',\n')
        return '{}(\n{}\n)'.format(self.__class__.__name__, indent(sig_str))


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
