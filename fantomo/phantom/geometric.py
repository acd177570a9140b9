# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Phantoms given by simple geometric objects such as squares or ellipses.

All phantoms are sampled on a square grid of ``n x n`` cells covering the
reference square ``[-1, 1] x [-1, 1]``. The returned arrays are indexed
as ``image[ix, iy]``, i.e., the first axis runs along ``x`` from left to
right and the second axis along ``y`` from bottom to top.
"""

import numpy as np

__all__ = ('cell_midpoints', 'cuboid', 'defrise', 'defrise_ellipses',
           'ellipse_phantom')


def cell_midpoints(n):
    """Return the cell midpoints of ``n`` cells covering ``[-1, 1]``.

    Examples
    --------
    >>> cell_midpoints(4).tolist()
    [-0.75, -0.25, 0.25, 0.75]
    """
    n_in = n
    n = int(n)
    if n != n_in or n < 1:
        raise ValueError('`n` must be a positive integer, got {!r}'
                         ''.format(n_in))
    return (2 * np.arange(n) + 1) / n - 1.0


def _meshgrid(n):
    """Return the ``(x, y)`` midpoint coordinates of all cells."""
    pts = cell_midpoints(n)
    return np.meshgrid(pts, pts, indexing='ij')


def cuboid(n, min_pt=None, max_pt=None):
    """Axis-aligned rectangle with value 1 on a zero background.

    Parameters
    ----------
    n : positive int
        Number of cells per side.
    min_pt : array-like of shape ``(2,)``, optional
        Lower left corner of the rectangle in the reference square. If
        ``None`` is given, ``(-0.5, -0.5)`` is chosen.
    max_pt : array-like of shape ``(2,)``, optional
        Upper right corner of the rectangle. If ``None`` is given,
        ``(0.5, 0.5)`` is chosen.

    Returns
    -------
    phantom : `numpy.ndarray`, shape ``(n, n)``

    Examples
    --------
    If both ``min_pt`` and ``max_pt`` are omitted, the rectangle lies in
    the middle of the domain and extends halfway towards all sides:

    >>> cuboid(4).tolist()
    [[0.0, 0.0, 0.0, 0.0], [0.0, 1.0, 1.0, 0.0], \
[0.0, 1.0, 1.0, 0.0], [0.0, 0.0, 0.0, 0.0]]

    By specifying the corners, the rectangle can be placed arbitrarily:

    >>> cuboid(4, [-1, -1], [0, 0]).tolist()
    [[1.0, 1.0, 0.0, 0.0], [1.0, 1.0, 0.0, 0.0], \
[0.0, 0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 0.0]]
    """
    if min_pt is None:
        min_pt = [-0.5, -0.5]
    if max_pt is None:
        max_pt = [0.5, 0.5]

    min_pt = np.atleast_1d(np.asarray(min_pt, dtype=float))
    max_pt = np.atleast_1d(np.asarray(max_pt, dtype=float))

    if min_pt.shape != (2,):
        raise ValueError('shape of `min_pt` must be {}, got {}'
                         ''.format((2,), min_pt.shape))
    if max_pt.shape != (2,):
        raise ValueError('shape of `max_pt` must be {}, got {}'
                         ''.format((2,), max_pt.shape))

    result = np.ones((int(n), int(n)), dtype=bool)
    for xi, xmin, xmax in zip(_meshgrid(n), min_pt, max_pt):
        result &= np.less_equal(xmin, xi) & np.less_equal(xi, xmax)
    return result.astype(float)


def ellipse_phantom(n, ellipses):
    """Return a phantom given by a sum of ellipses.

    Parameters
    ----------
    n : positive int
        Number of cells per side.
    ellipses : sequence of sequences
        Each entry should contain the values ::

            'value',
            'axis_1', 'axis_2',
            'center_x', 'center_y',
            'rotation'

        The ellipses need to be specified relative to the reference
        square ``[-1, 1] x [-1, 1]``. Rotation angles are given in
        degrees, counter-clockwise.

    Returns
    -------
    phantom : `numpy.ndarray`, shape ``(n, n)``
        Sum of the values of all ellipses containing a cell midpoint.

    See Also
    --------
    fantomo.phantom.transmission.shepp_logan :
        The typical use-case for this function.

    Examples
    --------
    A circle of radius 0.5 contains the 4 innermost cells:

    >>> float(ellipse_phantom(4, [[1.0, 0.5, 0.5, 0.0, 0.0, 0]]).sum())
    4.0
    """
    x, y = _meshgrid(n)
    phantom = np.zeros(x.shape)

    for ellip in ellipses:
        if len(ellip) != 6:
            raise ValueError('ellipse must have 6 entries, got {!r}'
                             ''.format(ellip))

        intensity, axis_1, axis_2, x0, y0, theta = (float(v) for v in ellip)

        if theta != 0:
            # Rotate the points to the coordinate system of the ellipse
            ctheta = np.cos(np.deg2rad(theta))
            stheta = np.sin(np.deg2rad(theta))
            xr = ctheta * (x - x0) + stheta * (y - y0)
            yr = -stheta * (x - x0) + ctheta * (y - y0)
        else:
            xr = x - x0
            yr = y - y0

        inside = (xr / axis_1) ** 2 + (yr / axis_2) ** 2 <= 1
        phantom[inside] += intensity

    return phantom


def defrise_ellipses(nellipses=8, alternating=False):
    """Ellipses for the standard Defrise phantom in 2 dimensions.

    Parameters
    ----------
    nellipses : int, optional
        Number of ellipses. If more ellipses are used, each ellipse becomes
        thinner.
    alternating : bool, optional
        True if the ellipses should have alternating densities (+1, -1),
        otherwise all ellipses have value +1.

    See Also
    --------
    ellipse_phantom :
        Function for creating arbitrary ellipse phantoms
    """
    ellipses = []
    for i in range(nellipses):
        if alternating:
            value = (-1.0 + 2.0 * (i % 2))
        else:
            value = 1.0

        axis_1 = 0.5
        axis_2 = 0.5 / (nellipses + 1)
        center_x = 0.0
        center_y = -1 + 2.0 / (nellipses + 1.0) * (i + 1)
        rotation = 0
        ellipses.append(
            [value, axis_1, axis_2, center_x, center_y, rotation])

    return ellipses


def defrise(n, nellipses=8, alternating=False):
    """Phantom with regularily spaced flat ellipses.

    This phantom is often used to verify cone-beam algorithms.

    Parameters
    ----------
    n : positive int
        Number of cells per side.
    nellipses : int, optional
        Number of ellipses. If more ellipses are used, each ellipse becomes
        thinner.
    alternating : bool, optional
        True if the ellipses should have alternating densities (+1, -1),
        otherwise all ellipses have value +1.

    Returns
    -------
    phantom : `numpy.ndarray`, shape ``(n, n)``

    See Also
    --------
    fantomo.phantom.transmission.shepp_logan
    """
    ellipses = defrise_ellipses(nellipses=nellipses, alternating=alternating)
    return ellipse_phantom(n, ellipses)


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
