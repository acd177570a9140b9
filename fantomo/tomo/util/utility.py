# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Rotations with angles given in degrees."""

import numpy as np

__all__ = ('sind', 'cosd', 'rotation_matrix_deg')


def sind(angle):
    """Sine of ``angle`` given in degrees.

    The result is exact for integer multiples of 90 degrees, i.e.,
    ``sind(180)`` is exactly ``0`` and not ``1.2e-16`` as with
    ``np.sin(np.radians(180))``.

    Parameters
    ----------
    angle : float or `array-like`
        Angle(s) in degrees.

    Returns
    -------
    sine : float or `numpy.ndarray`

    Examples
    --------
    >>> float(sind(180))
    0.0
    >>> sind([90, 270, 360]).tolist()
    [1.0, -1.0, 0.0]
    """
    angle = np.asarray(angle, dtype=float)
    reduced = np.mod(angle, 360.0)
    result = np.sin(np.radians(reduced))
    result = np.where(np.mod(reduced, 180.0) == 0, 0.0, result)
    result = np.where(reduced == 90.0, 1.0, result)
    result = np.where(reduced == 270.0, -1.0, result)
    return result[()] if result.ndim == 0 else result


def cosd(angle):
    """Cosine of ``angle`` given in degrees.

    The result is exact for integer multiples of 90 degrees.

    Parameters
    ----------
    angle : float or `array-like`
        Angle(s) in degrees.

    Returns
    -------
    cosine : float or `numpy.ndarray`

    Examples
    --------
    >>> float(cosd(90))
    0.0
    >>> cosd([0, 180, 270]).tolist()
    [1.0, -1.0, 0.0]
    """
    angle = np.asarray(angle, dtype=float)
    reduced = np.mod(angle, 360.0)
    result = np.cos(np.radians(reduced))
    result = np.where(np.mod(reduced - 90.0, 180.0) == 0, 0.0, result)
    result = np.where(reduced == 0.0, 1.0, result)
    result = np.where(reduced == 180.0, -1.0, result)
    return result[()] if result.ndim == 0 else result


def rotation_matrix_deg(angle):
    """Counter-clockwise 2d rotation matrix for ``angle`` in degrees.

    For an angle ``phi``, the matrix is given by::

        rot(phi) = [[cosd(phi), -sind(phi)],
                    [sind(phi), cosd(phi)]]

    Parameters
    ----------
    angle : float
        Rotation angle in degrees.

    Returns
    -------
    mat : `numpy.ndarray`, shape ``(2, 2)``

    Examples
    --------
    >>> rotation_matrix_deg(90).tolist()
    [[0.0, -1.0], [1.0, 0.0]]
    """
    cph = float(cosd(angle))
    sph = float(sind(angle))
    return np.array([[cph, -sph],
                     [sph, cph]])


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
