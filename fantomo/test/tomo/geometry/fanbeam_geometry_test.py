# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Test fantomo geometry objects for fan beam tomography."""

import numpy as np
import pytest

import fantomo
from fantomo.tomo.geometry.fanbeam import (
    MIN_SRC_RADIUS, FanBeamGeometry, resolve_fan_params)
from fantomo.util.exceptions import InvalidParameterError
from fantomo.util.testutils import all_almost_equal, all_equal, simple_fixture


# --- pytest fixtures --- #


n = simple_fixture('n', [1, 2, 5, 8])
src_radius = simple_fixture('src_radius', [MIN_SRC_RADIUS, 1.0, 2.0, 10.0])

invalid_kwargs_params = [
    dict(n=0),
    dict(n=-3),
    dict(n=2.5),
    dict(n='ten'),
    dict(n=True),
    dict(n=10, angles=[]),
    dict(n=10, angles=[[0, 1], [2, 3]]),
    dict(n=10, angles=[0, np.nan]),
    dict(n=10, num_rays=0),
    dict(n=10, num_rays=3.5),
    dict(n=10, num_rays=True),
    dict(n=10, num_rays=np.True_),
    dict(n=10, src_radius=0.5),
    dict(n=10, src_radius=np.nan),
    dict(n=10, fan_angle=-1),
    dict(n=10, fan_angle=180.5),
]
invalid_kwargs_ids = [
    ' {} '.format(', '.join('{}={!r}'.format(k, v) for k, v in p.items()))
    for p in invalid_kwargs_params]


@pytest.fixture(scope='module', ids=invalid_kwargs_ids,
                params=invalid_kwargs_params)
def invalid_kwargs(request):
    return request.param


# --- tests --- #


def test_fanbeam_props():
    """Test basic properties of fan beam geometries with defaults."""
    geom = FanBeamGeometry(10)

    assert geom.n == 10
    assert geom.num_angles == 360
    assert all_equal(geom.angles, np.arange(360))
    assert geom.num_rays == 14
    assert geom.src_radius == 2.0
    assert geom.src_distance == 20.0
    assert geom.fan_angle == pytest.approx(2 * np.degrees(np.arctan(1 / 3)))
    assert geom.shape == (360 * 14, 100)
    assert geom.ray_angles.shape == (14,)
    assert geom.ray_angles[0] == pytest.approx(-geom.fan_angle / 2)
    assert geom.ray_angles[-1] == pytest.approx(geom.fan_angle / 2)

    # check str and repr work without crashing and return a non-empty string
    assert str(geom) > ''
    assert repr(geom) > ''


def test_default_num_rays():
    """Check that the default number of rays is ``round(sqrt(2) * n)``."""
    for n, num_rays in [(1, 1), (2, 3), (3, 4), (5, 7), (10, 14), (64, 91)]:
        geom = FanBeamGeometry(n, angles=[0])
        assert geom.num_rays == num_rays


def test_invalid_params(invalid_kwargs):
    """Check that invalid scan parameters are rejected up front."""
    with pytest.raises(InvalidParameterError):
        FanBeamGeometry(**invalid_kwargs)

    # Also a `ValueError` for callers not knowing the specific error type
    with pytest.raises(ValueError):
        resolve_fan_params(**invalid_kwargs)


def test_src_radius_bound():
    """The smallest admissible source radius is sqrt(2) / 2."""
    geom = FanBeamGeometry(4, angles=[0], src_radius=MIN_SRC_RADIUS)
    assert geom.src_radius == pytest.approx(np.sqrt(2) / 2)

    with pytest.raises(InvalidParameterError):
        FanBeamGeometry(4, src_radius=MIN_SRC_RADIUS - 1e-6)


def test_fan_angle_bounds():
    """Fan angles 0 and 180 are both admissible."""
    geom = FanBeamGeometry(4, angles=[0], num_rays=3, fan_angle=0)
    assert all_equal(geom.ray_angles, [0, 0, 0])

    geom = FanBeamGeometry(4, angles=[0], num_rays=3, fan_angle=180)
    assert all_almost_equal(geom.ray_angles, [-90, 0, 90])


def test_single_ray():
    """With only one ray, its angle is the upper end of the fan."""
    geom = FanBeamGeometry(4, angles=[0], num_rays=1, fan_angle=30)
    assert all_equal(geom.ray_angles, [15.0])


def test_scalar_angle():
    """A single angle may be given as scalar."""
    geom = FanBeamGeometry(4, angles=30)
    assert geom.num_angles == 1
    assert all_equal(geom.angles, [30.0])


def test_src_position():
    """Check that the source rotates counter-clockwise from the top."""
    geom = FanBeamGeometry(5, angles=[0, 90, 180, 270, 45], src_radius=3)

    assert all_equal(geom.src_position(0), [0, 15])
    assert all_equal(geom.src_position(1), [-15, 0])
    assert all_equal(geom.src_position(2), [0, -15])
    assert all_equal(geom.src_position(3), [15, 0])
    assert all_almost_equal(geom.src_position(4),
                            [-15 / np.sqrt(2), 15 / np.sqrt(2)])

    for i in range(geom.num_angles):
        assert np.linalg.norm(geom.src_position(i)) == pytest.approx(15)


def test_center_direction(n, src_radius):
    """The center direction is a unit vector pointing to the origin."""
    geom = FanBeamGeometry(n, angles=[0, 33.3, 90, 200],
                           src_radius=src_radius)

    for i in range(geom.num_angles):
        direction = geom.center_direction(i)
        assert np.linalg.norm(direction) == pytest.approx(1)
        assert all_almost_equal(
            geom.src_position(i) + geom.src_distance * direction, [0, 0])


def test_ray_directions(n, src_radius):
    """Ray directions are unit vectors spread evenly over the fan."""
    geom = FanBeamGeometry(n, angles=[0, 72.5], num_rays=7,
                           src_radius=src_radius, fan_angle=60)

    for i in range(geom.num_angles):
        directions = geom.ray_directions(i)
        assert directions.shape == (7, 2)
        assert all_almost_equal(np.linalg.norm(directions, axis=1),
                                np.ones(7))

        # Middle ray goes through the center
        assert all_almost_equal(directions[3], geom.center_direction(i))

        # Consecutive rays are 10 degrees apart
        cos_between = np.sum(directions[1:] * directions[:-1], axis=1)
        assert all_almost_equal(cos_between,
                                np.cos(np.radians(10)) * np.ones(6))

        # The fan is ordered counter-clockwise
        cross = (directions[:-1, 0] * directions[1:, 1] -
                 directions[:-1, 1] * directions[1:, 0])
        assert np.all(cross > 0)


def test_default_fan_grazes_corners(n, src_radius):
    """With the default fan angle, the outermost rays hit the corners."""
    geom = FanBeamGeometry(n, angles=[0], num_rays=5, src_radius=src_radius)
    src = geom.src_position(0)
    directions = geom.ray_directions(0)

    for direction, corner in [(directions[0], [-n / 2, n / 2]),
                              (directions[-1], [n / 2, n / 2])]:
        to_corner = np.asarray(corner) - src
        cross = direction[0] * to_corner[1] - direction[1] * to_corner[0]
        assert cross == pytest.approx(0, abs=1e-10 * geom.src_distance)


def test_axis_aligned_rays():
    """Rays at multiples of 90 degrees are exactly axis-aligned."""
    geom = FanBeamGeometry(6, angles=[0, 90, 180, 270, 360], num_rays=1,
                           fan_angle=0)

    expected = [[0, -1], [1, 0], [0, 1], [-1, 0], [0, -1]]
    for i, dir_expected in enumerate(expected):
        assert all_equal(geom.ray_directions(i)[0], dir_expected)


def test_rays_order():
    """Rays are generated angle by angle, then ray by ray."""
    geom = FanBeamGeometry(3, angles=[0, 10, 20], num_rays=2)
    indices = [(i, j) for i, j, _, _ in geom.rays()]
    assert indices == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)]

    for i, j, src, direction in geom.rays():
        assert all_equal(src, geom.src_position(i))
        assert all_equal(direction, geom.ray_directions(i)[j])


def test_immutable():
    """Angle arrays of a geometry cannot be changed in place."""
    geom = FanBeamGeometry(4, angles=[0, 1, 2])
    with pytest.raises(ValueError):
        geom.angles[0] = 5
    with pytest.raises(ValueError):
        geom.ray_angles[0] = 5


def test_equality():
    """Geometries with the same parameters compare and hash equal."""
    geom1 = FanBeamGeometry(4, angles=[0, 45], num_rays=3)
    geom2 = FanBeamGeometry(4, angles=np.array([0.0, 45.0]), num_rays=3)
    geom3 = FanBeamGeometry(4, angles=[0, 45], num_rays=5)

    assert geom1 == geom2
    assert hash(geom1) == hash(geom2)
    assert geom1 != geom3
    assert geom1 != 'geom'


def test_exported():
    """The geometry is available in the ``tomo`` namespace."""
    assert fantomo.tomo.FanBeamGeometry is FanBeamGeometry


if __name__ == '__main__':
    fantomo.util.testutils.test_file(__file__)
