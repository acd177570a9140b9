# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Phantoms typically used in transmission tomography."""

from fantomo.phantom.geometric import ellipse_phantom

__all__ = ('shepp_logan_ellipses', 'shepp_logan')


def _shepp_logan_ellipse_2d():
    """Return ellipse parameters for a 2d Shepp-Logan phantom.

    This assumes that the ellipses are contained in the square
    [-1, -1]x[-1, -1].
    """
    #       value  axisx  axisy     x       y  rotation
    return [[2.00, .6900, .9200, 0.0000, 0.0000, 0],
            [-.98, .6624, .8740, 0.0000, -.0184, 0],
            [-.02, .1100, .3100, 0.2200, 0.0000, -18],
            [-.02, .1600, .4100, -.2200, 0.0000, 18],
            [0.01, .2100, .2500, 0.0000, 0.3500, 0],
            [0.01, .0460, .0460, 0.0000, 0.1000, 0],
            [0.01, .0460, .0460, 0.0000, -.1000, 0],
            [0.01, .0460, .0230, -.0800, -.6050, 0],
            [0.01, .0230, .0230, 0.0000, -.6060, 0],
            [0.01, .0230, .0460, 0.0600, -.6050, 0]]


def _modified_shepp_logan_ellipses(ellipses):
    """Modify ellipses to give the modified Shepp-Logan phantom."""
    intensities = [1.0, -0.8, -0.2, -0.2, 0.1, 0.1, 0.1, 0.1, 0.1, 0.1]

    # Add minimal numbers to ensure that the result is nowhere negative.
    # This is needed due to numerical issues.
    intensities[2] += 5e-17
    intensities[3] += 5e-17

    assert len(ellipses) == len(intensities)

    for ellipse, intensity in zip(ellipses, intensities):
        ellipse[0] = intensity


def shepp_logan_ellipses(modified=False):
    """Ellipses for the standard `Shepp-Logan phantom`_ in 2 dimensions.

    Parameters
    ----------
    modified : bool, optional
        True if the modified Shepp-Logan phantom should be given.
        The modified phantom has greatly amplified contrast to aid
        visualization.

    Returns
    -------
    ellipses : list of lists
        Ellipse parameters as expected by `ellipse_phantom`, with
        rotation angles in degrees.

    See Also
    --------
    fantomo.phantom.geometric.ellipse_phantom :
        Function for creating arbitrary ellipse phantoms
    shepp_logan : Create a phantom with these ellipses

    References
    ----------
    .. _Shepp-Logan phantom: en.wikipedia.org/wiki/Shepp–Logan_phantom
    """
    ellipses = _shepp_logan_ellipse_2d()
    if modified:
        _modified_shepp_logan_ellipses(ellipses)
    return ellipses


def shepp_logan(n, modified=True):
    """Standard `Shepp-Logan phantom`_ on ``n x n`` cells.

    Parameters
    ----------
    n : positive int
        Number of cells per side.
    modified : bool, optional
        True if the modified Shepp-Logan phantom should be given.
        The modified phantom has greatly amplified contrast to aid
        visualization and takes values in ``[0, 1]``.

    Returns
    -------
    phantom : `numpy.ndarray`, shape ``(n, n)``
        Image indexed as ``phantom[ix, iy]``.

    See Also
    --------
    fantomo.phantom.geometric.defrise : Geometry test phantom
    shepp_logan_ellipses : Get the parameters that define this phantom

    References
    ----------
    .. _Shepp-Logan phantom: en.wikipedia.org/wiki/Shepp–Logan_phantom

    Examples
    --------
    >>> phantom = shepp_logan(32)
    >>> phantom.shape
    (32, 32)
    >>> float(phantom[0, 0]), float(phantom.max())
    (0.0, 1.0)
    """
    return ellipse_phantom(n, shepp_logan_ellipses(modified))


if __name__ == '__main__':
    from fantomo.util.testutils import run_doctests
    run_doctests()
