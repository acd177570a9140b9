# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for the phantoms."""

import numpy as np
import pytest

import fantomo
from fantomo.phantom import (
    PHANTOM_NAMES, cell_midpoints, cuboid, defrise, defrise_ellipses,
    ellipse_phantom, image_to_vector, phantom_gallery, shepp_logan,
    shepp_logan_ellipses, vector_to_image)
from fantomo.tomo.backends.ray_cell import cell_index
from fantomo.util.testutils import all_almost_equal, all_equal, simple_fixture


# --- pytest fixtures --- #


name = simple_fixture('name', PHANTOM_NAMES)
n = simple_fixture('n', [1, 2, 7, 32])


# --- tests --- #


def test_phantom_gallery(name, n):
    """Gallery phantoms are vectors with values in [0, 1]."""
    x = phantom_gallery(name, n)
    assert x.shape == (n ** 2,)
    assert x.dtype == float
    assert np.all(x >= 0)
    assert np.all(x <= 1)


def test_phantom_gallery_invalid():
    with pytest.raises(ValueError):
        phantom_gallery('forbild', 8)
    with pytest.raises(TypeError):
        phantom_gallery(1, 8)


def test_phantom_gallery_case_insensitive():
    assert all_equal(phantom_gallery('SheppLogan', 8),
                     phantom_gallery('shepplogan', 8))


def test_vector_ordering():
    """Vector entries follow the cell numbering of the system matrix."""
    n = 5
    image = np.random.rand(n, n)
    vector = image_to_vector(image)

    pts = np.arange(n) - n / 2 + 0.5
    for ix, x in enumerate(pts):
        for iy, y in enumerate(pts):
            assert vector[cell_index(x, y, n)] == image[ix, iy]

    assert all_equal(vector_to_image(vector), image)
    assert all_equal(vector_to_image(vector, n), image)


def test_vector_to_image_invalid():
    with pytest.raises(ValueError):
        vector_to_image(np.zeros(10))
    with pytest.raises(ValueError):
        vector_to_image(np.zeros((4, 4)))
    with pytest.raises(ValueError):
        vector_to_image(np.zeros(16), 3)
    with pytest.raises(ValueError):
        image_to_vector(np.zeros((3, 4)))


def test_cell_midpoints():
    assert all_almost_equal(cell_midpoints(2), [-0.5, 0.5])
    assert all_almost_equal(cell_midpoints(5), [-0.8, -0.4, 0, 0.4, 0.8])

    with pytest.raises(ValueError):
        cell_midpoints(0)


def test_cuboid():
    """The default rectangle covers the inner half of the domain."""
    phantom = cuboid(8)
    assert phantom.shape == (8, 8)
    assert np.sum(phantom) == 16
    assert all_equal(phantom[2:6, 2:6], np.ones((4, 4)))

    phantom = cuboid(8, [0, 0], [1, 1])
    assert np.sum(phantom) == 16
    assert all_equal(phantom[4:, 4:], np.ones((4, 4)))

    with pytest.raises(ValueError):
        cuboid(8, [0, 0, 0])
    with pytest.raises(ValueError):
        cuboid(8, max_pt=[1])


def test_ellipse_phantom():
    """Ellipses are filled, added up and rotated in degrees."""
    # Horizontal ellipse
    phantom = ellipse_phantom(64, [[1.0, 0.8, 0.2, 0.0, 0.0, 0]])
    assert phantom[32, 32] == 1.0
    assert phantom[8, 32] == 1.0
    assert phantom[32, 8] == 0.0

    # Rotated by 90 degrees it is vertical
    phantom = ellipse_phantom(64, [[1.0, 0.8, 0.2, 0.0, 0.0, 90]])
    assert phantom[8, 32] == 0.0
    assert phantom[32, 8] == 1.0

    # Overlapping ellipses add up
    phantom = ellipse_phantom(16, [[1.0, 0.5, 0.5, 0, 0, 0],
                                   [0.5, 0.2, 0.2, 0, 0, 0]])
    assert phantom[8, 8] == 1.5

    with pytest.raises(ValueError):
        ellipse_phantom(16, [[1.0, 0.5, 0.5, 0, 0]])


def test_defrise():
    """Defrise phantom with the requested number of ellipses."""
    ellipses = defrise_ellipses(nellipses=5, alternating=True)
    assert len(ellipses) == 5
    assert [ellip[0] for ellip in ellipses] == [-1, 1, -1, 1, -1]

    phantom = defrise(64)
    assert phantom.shape == (64, 64)
    assert set(np.unique(phantom)) <= {0.0, 1.0}
    # Ellipses are stacked along the vertical axis
    assert np.sum(phantom[32]) > 0
    assert np.sum(phantom[2]) == 0


def test_shepp_logan():
    """The modified Shepp-Logan phantom lies in [0, 1]."""
    phantom = shepp_logan(64)
    assert phantom.shape == (64, 64)
    assert np.min(phantom) >= 0
    assert np.max(phantom) == pytest.approx(1)
    # Outside the head
    assert phantom[0, 0] == 0

    # The original phantom has different intensities
    original = shepp_logan(64, modified=False)
    assert np.max(original) == pytest.approx(2)

    assert len(shepp_logan_ellipses()) == 10
    assert shepp_logan_ellipses(modified=True)[0][0] == 1.0


if __name__ == '__main__':
    fantomo.util.testutils.test_file(__file__)
