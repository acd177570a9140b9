# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Exact intersection of straight rays with a square grid of unit cells.

The domain is the square ``[-n/2, n/2]^2`` split into ``n x n`` unit
cells. A ray is given by a point ``src`` and a direction ``(a, b)``, i.e.,
the points ``src + t * (a, b)``. Its crossings with the grid lines are
sorted along the ray, and the distance between consecutive crossings is
the chord length of the ray in the cell between them.

Cells are identified by a flat index. For the cell with lower left corner
``(-n/2 + col, -n/2 + row)``, the index is ::

    index = col * n + (n - 1 - row)

i.e., cells are numbered column by column, and within a column from the
top of the domain to the bottom.
"""

import numpy as np

from fantomo.util.exceptions import GeometryInconsistencyError

__all__ = ('DUPLICATE_TOL', 'grid_lines', 'cell_index',
           'grid_line_intersections', 'ray_cell_intersections')


# Absolute tolerance for two consecutive crossings to count as the same
# point, which happens when a ray passes through a grid corner
DUPLICATE_TOL = 1e-10


def grid_lines(n):
    """Return the coordinates ``-n/2, ..., n/2`` of the grid lines.

    Examples
    --------
    >>> grid_lines(4).tolist()
    [-2.0, -1.0, 0.0, 1.0, 2.0]
    """
    return np.arange(n + 1) - n / 2


def cell_index(x, y, n):
    """Return the flat index of the cells containing the points ``(x, y)``.

    Points on a grid line are assigned to the cell with the larger
    coordinate, except on the upper and right domain boundaries, where
    they are assigned to the adjacent interior cell.

    Parameters
    ----------
    x, y : float or `array-like`
        Coordinates of the points, inside ``[-n/2, n/2]``.
    n : int
        Number of cells per side of the domain.

    Returns
    -------
    index : int or `numpy.ndarray`
        Flat cell indices in ``[0, n ** 2)``.

    Examples
    --------
    The upper left cell has index 0, the lower left cell index ``n - 1``,
    and the lower right cell index ``n ** 2 - 1``:

    >>> cell_index([-1.5, -1.5, 1.5], [1.5, -1.5, -1.5], 4).tolist()
    [0, 3, 15]
    """
    half = n / 2
    col = np.clip(np.floor(np.asarray(x, dtype=float) + half), 0, n - 1)
    row = np.clip(np.floor(np.asarray(y, dtype=float) + half), 0, n - 1)
    return col.astype(int) * n + (n - 1 - row.astype(int))


def grid_line_intersections(src, direction, n):
    """Return the crossings of a ray with the grid lines inside the domain.

    Parameters
    ----------
    src : `array-like`, shape ``(2,)``
        A point on the ray, typically the source.
    direction : `array-like`, shape ``(2,)``
        Direction ``(a, b)`` of the ray. It need not be normalized but
        must not be zero.
    n : int
        Number of cells per side of the domain.

    Returns
    -------
    x, y : `numpy.ndarray`
        Coordinates of the crossings, ordered along ``direction``. Only
        crossings inside the closed domain are returned, and of two
        consecutive crossings closer than `DUPLICATE_TOL` in both
        coordinates, only the second is kept.

    Raises
    ------
    GeometryInconsistencyError
        If ``direction`` is the zero vector.

    Notes
    -----
    For an axis-parallel ray, the crossings with the grid lines parallel
    to it do not exist. They come out as infinite or NaN coordinates of
    the division by zero and are discarded together with the crossings
    outside the domain.
    """
    x0, y0 = (float(c) for c in src)
    a, b = (float(c) for c in direction)
    if a == 0 and b == 0:
        raise GeometryInconsistencyError(
            'ray direction is the zero vector, cannot trace ray from {}'
            ''.format((x0, y0)))

    x = grid_lines(n)
    y = x

    with np.errstate(divide='ignore', invalid='ignore'):
        # Crossings with x = const, parametrized by time along the ray
        tx = (x - x0) / a
        yx = b * tx + y0

        # Crossings with y = const
        ty = (y - y0) / b
        xy = a * ty + x0

    t = np.concatenate([tx, ty])
    xs = np.concatenate([x, xy])
    ys = np.concatenate([yx, y])

    order = np.argsort(t, kind='stable')
    xs = xs[order]
    ys = ys[order]

    half = n / 2
    with np.errstate(invalid='ignore'):
        inside = (np.isfinite(xs) & np.isfinite(ys) &
                  (xs >= -half) & (xs <= half) &
                  (ys >= -half) & (ys <= half))
    xs = xs[inside]
    ys = ys[inside]

    if xs.size > 1:
        duplicate = ((np.abs(np.diff(xs)) <= DUPLICATE_TOL) &
                     (np.abs(np.diff(ys)) <= DUPLICATE_TOL))
        keep = np.append(~duplicate, True)
        xs = xs[keep]
        ys = ys[keep]

    return xs, ys


def ray_cell_intersections(src, direction, n):
    """Return the cells hit by a ray and the chord lengths inside them.

    Parameters
    ----------
    src : `array-like`, shape ``(2,)``
        A point on the ray, typically the source.
    direction : `array-like`, shape ``(2,)``
        Direction of the ray, must not be zero.
    n : int
        Number of cells per side of the domain.

    Returns
    -------
    cells : `numpy.ndarray`, dtype int
        Flat indices of the cells hit by the ray, in the order of
        traversal. Each cell appears at most once, its pieces are merged.
    lengths : `numpy.ndarray`
        Length of the ray inside each of the ``cells``. Both arrays are
        empty if the ray misses the domain or only touches it.

    See Also
    --------
    grid_line_intersections
    cell_index

    Examples
    --------
    A vertical ray through the center of a 4 x 4 grid runs along the
    grid line ``x = 0`` and is assigned to the cells right of it:

    >>> cells, lengths = ray_cell_intersections([0, 8], [0, -1], 4)
    >>> cells.tolist()
    [8, 9, 10, 11]
    >>> lengths.tolist()
    [1.0, 1.0, 1.0, 1.0]
    """
    xs, ys = grid_line_intersections(src, direction, n)
    if xs.size < 2:
        return np.empty(0, dtype=int), np.empty(0, dtype=float)

    dx = np.diff(xs)
    dy = np.diff(ys)
    lengths = np.sqrt(dx ** 2 + dy ** 2)

    # The midpoint of a chord determines the cell it lies in
    xm = 0.5 * (xs[:-1] + xs[1:])
    ym = 0.5 * (ys[:-1] + ys[1:])
    cells = cell_index(xm, ym, n)

    # A ray running within rounding error of the boundary can be split at
    # a crossing outside the last cell, and clipping maps both pieces to
    # that cell. Merge such runs into a single contribution.
    starts = np.flatnonzero(np.diff(cells)) + 1
    starts = np.concatenate([[0], starts])
    return cells[starts], np.add.reduceat(lengths, starts)


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
