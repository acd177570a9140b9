# Copyright 2024-2026 The fantomo contributors
#
# This file is part of fantomo.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for rotations with angles in degrees."""

import numpy as np
import pytest

import fantomo
from fantomo.tomo.util.utility import cosd, rotation_matrix_deg, sind
from fantomo.util.testutils import all_almost_equal, all_equal, simple_fixture


# --- pytest fixtures --- #


angle = simple_fixture('angle', [-270.0, -33.0, 0.0, 12.5, 45.0, 90.0, 181.0,
                                 359.9, 720.0])


# --- tests --- #


def test_exact_quarter_turns():
    """Sine and cosine are exact at multiples of 90 degrees."""
    angles = np.arange(-720, 721, 90)
    expected_sin = np.tile([0, 1, 0, -1], 4)
    expected_cos = np.tile([1, 0, -1, 0], 4)

    assert all_equal(sind(angles), np.append(expected_sin, 0))
    assert all_equal(cosd(angles), np.append(expected_cos, 1))


def test_matches_radians(angle):
    """Away from quarter turns, the usual functions are used."""
    assert sind(angle) == pytest.approx(np.sin(np.radians(angle)))
    assert cosd(angle) == pytest.approx(np.cos(np.radians(angle)))


def test_scalar_and_array_input():
    """Scalar input gives a scalar, array input an array."""
    assert np.ndim(sind(30)) == 0
    assert np.ndim(cosd(30.0)) == 0
    assert sind([[0, 90], [180, 270]]).shape == (2, 2)


def test_rotation_matrix(angle):
    """Rotation matrices are orthogonal and rotate counter-clockwise."""
    mat = rotation_matrix_deg(angle)
    assert mat.shape == (2, 2)
    assert all_almost_equal(mat.dot(mat.T), np.eye(2))
    assert np.linalg.det(mat) == pytest.approx(1)

    rotated = mat.dot([1, 0])
    assert all_almost_equal(rotated, [cosd(angle), sind(angle)])


def test_rotation_matrix_quarter_turn():
    """A quarter turn maps the x axis exactly to the y axis."""
    mat = rotation_matrix_deg(90)
    assert all_equal(mat.dot([1, 0]), [0, 1])
    assert all_equal(mat.dot([0, 1]), [-1, 0])


if __name__ == '__main__':
    fantomo.util.testutils.test_file(__file__)
